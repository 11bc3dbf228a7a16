from typing import ClassVar

from graphwire.core.models.fingerprint import Fingerprint


class BinaryID(Fingerprint):
    """
    Content identifier of an immutable external payload (a captured frame,
    a resource bundle, ...).

    A BinaryID is not an object reference: it bypasses the session
    interning table entirely and carries no type information on the wire.
    Its meaning is given by the field that holds it. Higher layers use it
    to check whether they already hold a payload before paying for its
    transfer.
    """
    __slots__ = ()

    INVALID: ClassVar["BinaryID"]
    """
    All-zero identifier, never the digest of real content.
    """

    def is_valid(self) -> bool:
        return self != BinaryID.INVALID


BinaryID.INVALID = BinaryID(bytes(BinaryID.SIZE))


class Handle(Fingerprint):
    """
    Opaque 20-byte name of remotely held content.

    Same wire form as BinaryID, but a distinct type: a Handle never
    compares equal to a BinaryID, even when both wrap the same bytes.
    """
    __slots__ = ()
