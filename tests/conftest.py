import pytest

from graphwire.core.models.config import CodecConfig
from graphwire.core.registry import TypeRegistry
from graphwire.core.wire.graph import Encoder, Decoder
from graphwire.infra.streams import BufferSink, BufferSource
from tests.fake.fake_codables import ALL_TYPES


@pytest.fixture
def registry() -> TypeRegistry:
    reg = TypeRegistry()
    for cls in ALL_TYPES:
        reg.register_type(cls)
    return reg


@pytest.fixture
def sink() -> BufferSink:
    return BufferSink()


@pytest.fixture
def encoder(sink) -> Encoder:
    return Encoder(sink)


@pytest.fixture
def decode(registry):
    """Build a Decoder over encoded bytes, sharing the test registry."""
    def _decode(data: bytes, config: CodecConfig | None = None) -> tuple[Decoder, BufferSource]:
        source = BufferSource(data)
        return Decoder(source, registry, config), source

    return _decode
