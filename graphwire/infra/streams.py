import socket
from typing import BinaryIO

from graphwire.core.ports.stream import ByteSink, ByteSource


class BufferSink(ByteSink):
    """In-memory sink accumulating everything written to it."""

    def __init__(self) -> None:
        self._buffer = bytearray()

    def write(self, data: bytes) -> None:
        self._buffer.extend(data)

    def getvalue(self) -> bytes:
        return bytes(self._buffer)

    def __len__(self) -> int:
        return len(self._buffer)


class BufferSource(ByteSource):
    """In-memory source over a fixed byte string."""

    def __init__(self, data: bytes) -> None:
        self._data = memoryview(bytes(data))
        self._pos = 0

    @property
    def remaining(self) -> int:
        return len(self._data) - self._pos

    def read(self, size: int) -> bytes:
        chunk = self._data[self._pos:self._pos + size]
        self._pos += len(chunk)
        return chunk.tobytes()


class StreamSink(ByteSink):
    """
    Sink over a blocking binary file-like object: an open file, a pipe, or
    the result of `socket.makefile("wb")`. Buffered writers only hand bytes
    to the OS on `flush()`. A non-blocking stream that cannot take more
    bytes raises BlockingIOError.
    """
    def __init__(self, stream: BinaryIO) -> None:
        self._stream = stream

    def write(self, data: bytes) -> None:
        view = memoryview(data)
        while view:
            written = self._stream.write(view)
            # raw streams may accept fewer bytes; None means "would block"
            if written is None:
                raise BlockingIOError(
                    "StreamSink requires a blocking stream, write would block"
                )
            view = view[written:]

    def flush(self) -> None:
        self._stream.flush()


class StreamSource(ByteSource):
    """
    Source over a blocking binary file-like object opened for reading.
    A non-blocking stream with no data available raises BlockingIOError
    rather than being mistaken for an exhausted source.
    """

    def __init__(self, stream: BinaryIO) -> None:
        self._stream = stream

    def read(self, size: int) -> bytes:
        chunk = self._stream.read(size)
        if chunk is None:
            raise BlockingIOError("StreamSource requires a blocking stream, read would block")
        return chunk


class SocketSink(ByteSink):
    """Sink writing directly to a connected stream socket."""

    def __init__(self, sock: socket.socket) -> None:
        self._sock = sock

    def write(self, data: bytes) -> None:
        self._sock.sendall(data)


class SocketSource(ByteSource):
    """
    Source reading directly from a connected stream socket.

    `recv` returns as soon as some bytes are available; the Decoder takes
    care of assembling full values. An orderly shutdown by the peer shows
    up as an exhausted source.
    """
    def __init__(self, sock: socket.socket) -> None:
        self._sock = sock

    def read(self, size: int) -> bytes:
        return self._sock.recv(size)
