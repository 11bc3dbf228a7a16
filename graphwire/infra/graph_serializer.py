import logging

from graphwire.core.errors import CorruptStreamError
from graphwire.core.models.codable import Codable
from graphwire.core.models.config import CodecConfig
from graphwire.core.ports.serializer import Serializer
from graphwire.core.registry import TypeRegistry
from graphwire.core.wire.graph import Encoder, Decoder
from graphwire.infra.streams import BufferSink, BufferSource


class GraphSerializer(Serializer):
    """
    Serializer turning one object graph into a standalone message.

    - every call opens a fresh session, so messages never refer to each other
    - the payload is exactly one object reference, no header, no framing
    - trailing bytes after the root graph are rejected
    """
    def __init__(self, registry: TypeRegistry, config: CodecConfig | None = None) -> None:
        self._registry = registry
        self._config = config or CodecConfig()
        self._logger = logging.getLogger("infra.graph_serializer")

    def serialize(self, root: Codable | None) -> bytes:
        sink = BufferSink()
        encoder = Encoder(sink, self._config)
        encoder.object(root)
        self._logger.debug(
            f"Serialized {encoder.session_size} objects into {len(sink)} bytes"
        )
        return sink.getvalue()

    def deserialize(self, data: bytes) -> Codable | None:
        source = BufferSource(data)
        decoder = Decoder(source, self._registry, self._config)
        root = decoder.object()

        if source.remaining:
            self._logger.warning(f"{source.remaining} trailing bytes after root object")
            raise CorruptStreamError(
                f"{source.remaining} unexpected bytes after the root object"
            )

        return root
