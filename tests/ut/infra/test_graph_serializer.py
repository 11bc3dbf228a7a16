import pytest

from graphwire.core.errors import CorruptStreamError, StringTooLongError
from graphwire.core.models.config import CodecConfig, StringLengthPolicy
from graphwire.infra.graph_serializer import GraphSerializer
from tests.fake.fake_codables import Point, Segment


@pytest.fixture
def serializer(registry) -> GraphSerializer:
    return GraphSerializer(registry)


@pytest.mark.ut
def test_round_trip(serializer):
    shared = Point(9, 9)
    data = serializer.serialize(Segment(shared, shared, "twice"))

    seg = serializer.deserialize(data)
    assert seg.label == "twice"
    assert seg.start is seg.end
    assert (seg.start.x, seg.start.y) == (9, 9)


@pytest.mark.ut
def test_null_root(serializer):
    assert serializer.serialize(None) == b"\xff\xff"
    assert serializer.deserialize(b"\xff\xff") is None


@pytest.mark.ut
def test_each_call_is_a_fresh_session(serializer):
    p = Point(1, 2)
    assert serializer.serialize(p) == serializer.serialize(p)


@pytest.mark.ut
def test_trailing_bytes_are_rejected(serializer):
    data = serializer.serialize(Point(1, 2))
    with pytest.raises(CorruptStreamError):
        serializer.deserialize(data + b"\x00")


@pytest.mark.ut
def test_config_is_applied(registry):
    serializer = GraphSerializer(
        registry,
        CodecConfig(string_policy=StringLengthPolicy.INT16_COMPAT)
    )
    with pytest.raises(StringTooLongError):
        serializer.serialize(Segment(None, None, "x" * 40000))
