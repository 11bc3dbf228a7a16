import logging
from collections.abc import Iterable

from graphwire.core.errors import (
    CorruptStreamError,
    FactoryError,
    SessionCapacityError,
    UnknownTypeError,
)
from graphwire.core.models.codable import Codable
from graphwire.core.models.config import CodecConfig, NULL_KEY
from graphwire.core.models.fingerprint import TypeFingerprint
from graphwire.core.ports.stream import ByteSink, ByteSource
from graphwire.core.registry import TypeRegistry
from graphwire.core.wire.primitive import PrimitiveEncoder, PrimitiveDecoder


class Encoder(PrimitiveEncoder):
    """
    One outbound session of the object graph codec.

    On top of the scalar writers, the Encoder writes object references
    through a per-session interning table. The first time an instance is
    met it receives the next free key and is written in full:

        key (uint16) || type fingerprint (20 bytes) || fields

    Any later reference to the same instance is the 2-byte key alone.
    A null reference is the reserved key 0xFFFF.

    Identity is object identity (`is`), never equality: two equal but
    distinct instances are both transmitted. The table keeps every interned
    instance alive until the session ends so identities are never recycled.

    An Encoder is a single linear pass over one sink and must not be
    shared between threads or reused for another stream.
    """
    def __init__(self, sink: ByteSink, config: CodecConfig | None = None) -> None:
        super().__init__(sink, config)
        self._keys: dict[int, int] = {}
        self._pinned: list[Codable] = []
        self._logger = logging.getLogger("core.wire.encoder")

    @property
    def session_size(self) -> int:
        """Number of distinct instances interned so far."""
        return len(self._pinned)

    def object(self, obj: Codable | None) -> None:
        if obj is None:
            self.uint16(NULL_KEY)
            return

        key = self._keys.get(id(obj))
        if key is not None:
            self.uint16(key)
            return

        key = len(self._pinned)
        if key >= self._config.max_objects:
            self._logger.warning(
                f"Session capacity of {self._config.max_objects} objects reached"
            )
            raise SessionCapacityError(
                f"Cannot intern more than {self._config.max_objects} objects in one session"
            )

        # resolved first so a non-Codable value leaves the session untouched
        fingerprint = obj.type_fingerprint()

        self._keys[id(obj)] = key
        self._pinned.append(obj)

        self.uint16(key)
        fingerprint.encode(self)
        obj.encode_fields(self)

    def objects(self, items: Iterable[Codable | None]) -> None:
        """Write a uint32 count followed by that many object references."""
        items = list(items)
        self.uint32(len(items))
        for item in items:
            self.object(item)


class Decoder(PrimitiveDecoder):
    """
    One inbound session of the object graph codec.

    Mirrors Encoder: keys are expected in first-encounter order, so a new
    key is always equal to the number of instances decoded so far. A key
    below that count is a back-reference and nothing else is read for it.
    A key above it cannot come from a well-formed stream and aborts the
    session instead of silently resynchronizing.

    A new instance is stored in the table before its fields are decoded,
    which lets self-referencing and mutually-referencing graphs resolve to
    the instance under construction.
    """
    def __init__(
        self,
        source: ByteSource,
        registry: TypeRegistry,
        config: CodecConfig | None = None
    ) -> None:
        super().__init__(source, config)
        self._registry = registry
        self._instances: list[Codable] = []
        self._logger = logging.getLogger("core.wire.decoder")

    @property
    def session_size(self) -> int:
        """Number of distinct instances decoded so far."""
        return len(self._instances)

    def object(self) -> Codable | None:
        key = self.uint16()
        if key == NULL_KEY:
            return None

        if key < len(self._instances):
            return self._instances[key]

        expected = len(self._instances)
        if key != expected or key >= self._config.max_objects:
            self._logger.warning(f"Out of sequence object key {key}, expected {expected}")
            raise CorruptStreamError(
                f"Object key {key} is out of sequence (next key is {expected}, "
                f"session capacity is {self._config.max_objects})"
            )

        fingerprint = TypeFingerprint.read(self)
        try:
            factory = self._registry.lookup(fingerprint)
        except UnknownTypeError:
            self._logger.warning(f"No factory registered for {fingerprint}")
            raise

        try:
            obj = factory()
        except Exception as exc:
            self._logger.warning(f"Factory for {fingerprint} failed: {exc}")
            raise FactoryError(f"Factory {factory!r} for {fingerprint} failed") from exc

        self._instances.append(obj)
        obj.decode_fields(self)
        return obj

    def objects(self) -> list[Codable | None]:
        """Read a uint32 count followed by that many object references."""
        count = self.uint32()
        return [self.object() for _ in range(count)]
