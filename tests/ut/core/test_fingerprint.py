import hashlib

import pytest

from graphwire.core.models.fingerprint import TypeFingerprint
from graphwire.core.models.ident import BinaryID
from graphwire.core.wire.primitive import PrimitiveEncoder, PrimitiveDecoder
from graphwire.infra.streams import BufferSink, BufferSource

RAW = bytes(range(20))


@pytest.mark.ut
def test_requires_exactly_20_bytes():
    with pytest.raises(ValueError):
        TypeFingerprint(bytes(19))
    with pytest.raises(ValueError):
        TypeFingerprint(bytes(21))


@pytest.mark.ut
def test_encode_writes_bytes_verbatim():
    sink = BufferSink()
    TypeFingerprint(RAW).encode(PrimitiveEncoder(sink))
    assert sink.getvalue() == RAW


@pytest.mark.ut
def test_read_consumes_exactly_20_bytes():
    source = BufferSource(RAW + b"tail")
    fp = TypeFingerprint.read(PrimitiveDecoder(source))
    assert fp == TypeFingerprint(RAW)
    assert source.remaining == 4


@pytest.mark.ut
def test_hash_uses_4_byte_prefix():
    fp = TypeFingerprint(RAW)
    assert hash(fp) == int.from_bytes(RAW[:4], "little")

    other = TypeFingerprint(RAW[:4] + bytes(16))
    assert hash(other) == hash(fp)
    assert other != fp


@pytest.mark.ut
def test_signature_fingerprint_is_sha1_of_signature():
    fp = TypeFingerprint.for_signature("geo.Point{x:f64,y:f64}")
    assert fp.data == hashlib.sha1(b"geo.Point{x:f64,y:f64}").digest()
    assert fp == TypeFingerprint.for_signature("geo.Point{x:f64,y:f64}")
    assert fp != TypeFingerprint.for_signature("geo.Point{y:f64,x:f64}")


@pytest.mark.ut
def test_fingerprint_never_equals_other_identifier_kinds():
    assert TypeFingerprint(RAW) != BinaryID(RAW)
    assert TypeFingerprint(RAW) != RAW


@pytest.mark.ut
def test_string_forms():
    fp = TypeFingerprint(RAW)
    assert str(fp) == RAW.hex()
    assert TypeFingerprint.from_hex(str(fp)) == fp
    assert repr(fp) == f"TypeFingerprint({RAW.hex()})"
    assert bytes(fp) == RAW


@pytest.mark.ut
def test_usable_as_dict_key():
    table = {TypeFingerprint(RAW): "a"}
    assert table[TypeFingerprint(bytearray(RAW))] == "a"
