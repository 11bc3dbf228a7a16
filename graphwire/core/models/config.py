from dataclasses import dataclass
from enum import StrEnum


NULL_KEY: int = 0xFFFF
"""
Reserved object key denoting a null reference. Never assigned to an instance.
"""

MAX_OBJECTS: int = NULL_KEY
"""
Largest number of distinct instances one session can intern (keys 0..0xFFFE).
"""


class StringLengthPolicy(StrEnum):
    """
    How the 4-byte string length prefix is produced and validated.

    INT32 uses the full signed 32-bit range on both sides.
    INT16_COMPAT keeps the wire layout but caps strings at 32767 UTF-8
    bytes, matching peers that narrow the length to a signed 16-bit value
    before writing it. Longer strings are rejected instead of being written
    with a truncated prefix.
    """
    INT32 = "int32"
    INT16_COMPAT = "int16_compat"

    @property
    def max_length(self) -> int:
        if self is StringLengthPolicy.INT16_COMPAT:
            return 0x7FFF
        return 0x7FFFFFFF


@dataclass(frozen=True)
class CodecConfig:
    """
    Static configuration shared by both ends of a session.

    Encoder and Decoder only agree on a stream when they are built with the
    same configuration.
    """
    string_policy: StringLengthPolicy = StringLengthPolicy.INT32
    """
    Length prefix policy applied to every string scalar.
    """

    max_objects: int = MAX_OBJECTS
    """
    Maximum number of distinct instances interned by one session.
    Cannot exceed MAX_OBJECTS since the key space is 16 bits wide and
    0xFFFF is reserved for null.
    """

    def __post_init__(self) -> None:
        if not 1 <= self.max_objects <= MAX_OBJECTS:
            raise ValueError(
                f"max_objects must be between 1 and {MAX_OBJECTS}, got {self.max_objects}"
            )
