class WireError(Exception):
    """
    Base class for every failure raised by the codec.

    Once a WireError escapes an Encoder or Decoder, the session is over:
    the stream position and the interning tables can no longer be trusted,
    so the caller must discard both and establish a new session.
    """


class ShortReadError(WireError, EOFError):
    """The byte source was exhausted before a read could be satisfied."""

    def __init__(self, expected: int, received: int) -> None:
        super().__init__(
            f"Short read: expected {expected} bytes, got {received}"
        )
        self.expected = expected
        self.received = received


class CorruptStreamError(WireError):
    """A value read from the stream cannot have been produced by an Encoder."""


class UnknownTypeError(WireError, LookupError):
    """No factory is registered for a fingerprint read from the stream."""

    def __init__(self, fingerprint) -> None:
        super().__init__(f"Unknown type fingerprint {fingerprint}")
        self.fingerprint = fingerprint


class DuplicateTypeError(WireError):
    """A second, different factory was bound to an already registered fingerprint."""


class FactoryError(WireError):
    """A registered factory raised while building an empty instance."""


class SessionCapacityError(WireError):
    """The session interning table is full."""


class StringTooLongError(WireError, ValueError):
    """A string does not fit the length prefix allowed by the string policy."""


class ValueOutOfRangeError(WireError, ValueError):
    """A scalar does not fit the width of its wire representation."""
