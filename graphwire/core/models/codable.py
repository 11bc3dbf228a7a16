from typing import Protocol, Callable, TYPE_CHECKING

if TYPE_CHECKING:
    from graphwire.core.models.fingerprint import TypeFingerprint
    from graphwire.core.wire.graph import Encoder, Decoder


class Codable(Protocol):
    """
    Capability set of every object that can travel through an object
    reference on the wire.

    No base class is required: a concrete type only has to expose the three
    methods below. Distinct concrete types are told apart on the wire by
    their fingerprint alone, which the receiving side resolves through its
    TypeRegistry.

    `encode_fields` and `decode_fields` must visit the same fields in the
    same order. Nothing on the wire delimits a payload, so any divergence
    desynchronizes the rest of the session.
    """

    def type_fingerprint(self) -> "TypeFingerprint":
        """Return the fingerprint identifying this concrete type."""

    def encode_fields(self, encoder: "Encoder") -> None:
        """Write every field of this instance through `encoder`."""

    def decode_fields(self, decoder: "Decoder") -> None:
        """Populate this (empty) instance by reading from `decoder`."""


Factory = Callable[[], Codable]
"""
Zero-argument callable producing a new, empty instance of one Codable type.
"""
