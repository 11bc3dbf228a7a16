import io
import socket

import pytest

from graphwire.infra.streams import (
    BufferSink,
    BufferSource,
    SocketSink,
    SocketSource,
    StreamSink,
    StreamSource,
)


@pytest.mark.ut
def test_buffer_sink_accumulates():
    sink = BufferSink()
    sink.write(b"ab")
    sink.write(b"cd")
    assert sink.getvalue() == b"abcd"
    assert len(sink) == 4


@pytest.mark.ut
def test_buffer_source_reads_until_exhausted():
    source = BufferSource(b"abcde")
    assert source.read(2) == b"ab"
    assert source.remaining == 3
    assert source.read(10) == b"cde"
    assert source.read(1) == b""
    assert source.remaining == 0


@pytest.mark.ut
def test_stream_adapters_over_file_objects():
    raw = io.BytesIO()
    sink = StreamSink(raw)
    sink.write(b"hello")
    sink.flush()

    source = StreamSource(io.BytesIO(raw.getvalue()))
    assert source.read(3) == b"hel"
    assert source.read(3) == b"lo"
    assert source.read(3) == b""


@pytest.mark.ut
def test_socket_adapters():
    left, right = socket.socketpair()
    try:
        SocketSink(left).write(b"ping")
        left.shutdown(socket.SHUT_WR)

        source = SocketSource(right)
        received = b""
        while chunk := source.read(16):
            received += chunk
        assert received == b"ping"
    finally:
        left.close()
        right.close()


class WouldBlockStream:
    """Raw non-blocking stream that never has room or data."""

    def write(self, data):
        return None

    def read(self, size):
        return None


@pytest.mark.ut
def test_stream_sink_rejects_non_blocking_stream():
    with pytest.raises(BlockingIOError):
        StreamSink(WouldBlockStream()).write(b"data")


@pytest.mark.ut
def test_stream_source_would_block_is_not_end_of_stream():
    with pytest.raises(BlockingIOError):
        StreamSource(WouldBlockStream()).read(4)


@pytest.mark.ut
def test_stream_sink_retries_partial_writes():
    class HalfWriter(io.RawIOBase):
        def __init__(self):
            self.received = bytearray()

        def writable(self):
            return True

        def write(self, data):
            n = max(1, len(data) // 2)
            self.received.extend(bytes(data[:n]))
            return n

    raw = HalfWriter()
    StreamSink(raw).write(b"abcdefgh")
    assert bytes(raw.received) == b"abcdefgh"
