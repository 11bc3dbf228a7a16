import hashlib
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from graphwire.core.wire.primitive import PrimitiveEncoder, PrimitiveDecoder


FINGERPRINT_SIZE: int = 20


class Fingerprint:
    """
    Immutable 20-byte identifier written verbatim on the wire.

    Equality is byte-for-byte and restricted to the same concrete class,
    so a TypeFingerprint never compares equal to a BinaryID holding the
    same bytes. The hash is taken from the first four bytes, which is
    enough since the content is already a digest.
    """
    SIZE = FINGERPRINT_SIZE

    __slots__ = ("_data",)

    def __init__(self, data: bytes) -> None:
        if len(data) != self.SIZE:
            raise ValueError(
                f"{type(self).__name__} requires exactly {self.SIZE} bytes, got {len(data)}"
            )
        self._data = bytes(data)

    @classmethod
    def read(cls, decoder: "PrimitiveDecoder"):
        return cls(decoder.data(cls.SIZE))

    @classmethod
    def of(cls, payload: bytes):
        """Derive the identifier as the SHA-1 digest of `payload`."""
        return cls(hashlib.sha1(payload).digest())

    @classmethod
    def from_hex(cls, text: str):
        return cls(bytes.fromhex(text))

    @property
    def data(self) -> bytes:
        return self._data

    def encode(self, encoder: "PrimitiveEncoder") -> None:
        encoder.data(self._data)

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._data == other._data  # type: ignore[attr-defined]

    def __hash__(self) -> int:
        return int.from_bytes(self._data[0:4], "little")

    def __bytes__(self) -> bytes:
        return self._data

    def __str__(self) -> str:
        return self._data.hex()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._data.hex()})"


class TypeFingerprint(Fingerprint):
    """
    Content-derived identifier of one concrete Codable shape.

    A fingerprint is normally derived once per type from a canonical
    signature (type name plus ordered field kinds), so that peers built
    independently agree on it:

        >>> FP = TypeFingerprint.for_signature("atom.Point{x:int32,y:int32}")
    """
    __slots__ = ()

    @classmethod
    def for_signature(cls, signature: str) -> "TypeFingerprint":
        return cls.of(signature.encode("utf-8"))
