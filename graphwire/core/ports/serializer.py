from typing import Protocol

from graphwire.core.models.codable import Codable


class Serializer(Protocol):
    """
    Defines the interface for turning one object graph into a standalone
    byte string and back.

    Implementations must be:
    - deterministic
    - self-contained (every call is its own session)
    - strict against malformed input
    """

    def serialize(self, root: Codable | None) -> bytes:
        """Encode the graph reachable from `root` into bytes."""

    def deserialize(self, data: bytes) -> Codable | None:
        """Decode bytes produced by `serialize` back into a graph."""
