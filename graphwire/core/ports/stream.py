from typing import Protocol


class ByteSink(Protocol):
    """
    Blocking, ordered destination for encoded bytes.

    An Encoder writes to a single sink sequentially. Implementations must
    either accept all bytes handed to `write` or raise; partial writes are
    never reported back to the codec.
    """

    def write(self, data: bytes) -> None:
        """Write every byte of `data`, blocking as long as necessary."""


class ByteSource(Protocol):
    """
    Blocking, ordered origin of encoded bytes.

    Implementations behave like a raw stream: `read` may return fewer bytes
    than requested, and returns an empty bytes object only once the source
    is exhausted. The Decoder retries short reads itself and treats an
    empty result as the end of the session.
    """

    def read(self, size: int) -> bytes:
        """Return at most `size` bytes, or b"" when the source is exhausted."""
