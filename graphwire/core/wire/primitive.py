import struct

from graphwire.core.errors import (
    CorruptStreamError,
    ShortReadError,
    StringTooLongError,
    ValueOutOfRangeError,
)
from graphwire.core.models.config import CodecConfig
from graphwire.core.ports.stream import ByteSink, ByteSource

# "<" = little-endian, no padding
BOOL = struct.Struct("<B")
INT8 = struct.Struct("<b")
UINT8 = struct.Struct("<B")
INT16 = struct.Struct("<h")
UINT16 = struct.Struct("<H")
INT32 = struct.Struct("<i")
UINT32 = struct.Struct("<I")
INT64 = struct.Struct("<q")
UINT64 = struct.Struct("<Q")
FLOAT32 = struct.Struct("<f")
FLOAT64 = struct.Struct("<d")


class PrimitiveEncoder:
    """
    Writes fixed-width scalars to a ByteSink.

    Every multi-byte value is written least-significant byte first. Floats
    are written as the IEEE-754 bit pattern of the same width. A value that
    does not fit its wire width is rejected before any byte reaches the
    sink, so a failed write never leaves half a scalar behind.

    Strings are a 4-byte signed length followed by the raw UTF-8 bytes,
    with no terminator. The largest accepted length depends on the
    configured StringLengthPolicy.
    """
    def __init__(self, sink: ByteSink, config: CodecConfig | None = None) -> None:
        self._sink = sink
        self._config = config or CodecConfig()

    @property
    def config(self) -> CodecConfig:
        return self._config

    def _pack(self, fmt: struct.Struct, value) -> None:
        try:
            raw = fmt.pack(value)
        except (struct.error, OverflowError) as exc:
            raise ValueOutOfRangeError(
                f"{value!r} does not fit format {fmt.format!r}: {exc}"
            ) from exc
        self._sink.write(raw)

    def data(self, raw: bytes) -> None:
        """Write raw bytes verbatim, without a length prefix."""
        self._sink.write(bytes(raw))

    def bool(self, value: bool) -> None:
        self._sink.write(b"\x01" if value else b"\x00")

    def int8(self, value: int) -> None:
        self._pack(INT8, value)

    def uint8(self, value: int) -> None:
        self._pack(UINT8, value)

    def int16(self, value: int) -> None:
        self._pack(INT16, value)

    def uint16(self, value: int) -> None:
        self._pack(UINT16, value)

    def int32(self, value: int) -> None:
        self._pack(INT32, value)

    def uint32(self, value: int) -> None:
        self._pack(UINT32, value)

    def int64(self, value: int) -> None:
        self._pack(INT64, value)

    def uint64(self, value: int) -> None:
        self._pack(UINT64, value)

    def float32(self, value: float) -> None:
        self._pack(FLOAT32, value)

    def float64(self, value: float) -> None:
        self._pack(FLOAT64, value)

    def string(self, value: str) -> None:
        raw = value.encode("utf-8")
        limit = self._config.string_policy.max_length
        if len(raw) > limit:
            raise StringTooLongError(
                f"String of {len(raw)} UTF-8 bytes exceeds the "
                f"{self._config.string_policy.value} limit of {limit}"
            )
        self._sink.write(INT32.pack(len(raw)) + raw)


class PrimitiveDecoder:
    """
    Reads fixed-width scalars from a ByteSource.

    Mirrors PrimitiveEncoder exactly. Reads are retried until the requested
    byte count is available; if the source runs dry first, ShortReadError
    is raised and the session cannot continue, since there is no way to
    find the next value boundary again.

    Floats come back as Python floats, which are doubles. float64 values,
    NaN payloads included, survive a decode and re-encode bit for bit.
    float32 values do too, except signalling NaNs: widening one to a
    double sets the quiet bit, so 0x7f800001 re-encodes as 0x7fc00001.
    Callers that must relay float32 bit patterns untouched read them with
    `uint32` instead.
    """
    def __init__(self, source: ByteSource, config: CodecConfig | None = None) -> None:
        self._source = source
        self._config = config or CodecConfig()

    @property
    def config(self) -> CodecConfig:
        return self._config

    def data(self, size: int) -> bytes:
        """Read exactly `size` raw bytes."""
        if size == 0:
            return b""

        chunk = self._source.read(size)
        if len(chunk) == size:
            return bytes(chunk)

        buf = bytearray(chunk)
        while len(buf) < size:
            chunk = self._source.read(size - len(buf))
            if not chunk:
                raise ShortReadError(expected=size, received=len(buf))
            buf.extend(chunk)

        return bytes(buf)

    def _unpack(self, fmt: struct.Struct):
        return fmt.unpack(self.data(fmt.size))[0]

    def bool(self) -> bool:
        return self._unpack(BOOL) != 0

    def int8(self) -> int:
        return self._unpack(INT8)

    def uint8(self) -> int:
        return self._unpack(UINT8)

    def int16(self) -> int:
        return self._unpack(INT16)

    def uint16(self) -> int:
        return self._unpack(UINT16)

    def int32(self) -> int:
        return self._unpack(INT32)

    def uint32(self) -> int:
        return self._unpack(UINT32)

    def int64(self) -> int:
        return self._unpack(INT64)

    def uint64(self) -> int:
        return self._unpack(UINT64)

    def float32(self) -> float:
        return self._unpack(FLOAT32)

    def float64(self) -> float:
        return self._unpack(FLOAT64)

    def string(self) -> str:
        length = self._unpack(INT32)
        limit = self._config.string_policy.max_length
        if length < 0 or length > limit:
            raise CorruptStreamError(
                f"Invalid string length {length} under the "
                f"{self._config.string_policy.value} policy"
            )

        raw = self.data(length)
        try:
            return raw.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise CorruptStreamError(f"String is not valid UTF-8: {exc}") from exc
