import logging
import threading

from graphwire.core.errors import DuplicateTypeError, UnknownTypeError
from graphwire.core.models.codable import Factory
from graphwire.core.models.fingerprint import TypeFingerprint


class TypeRegistry:
    """
    Maps type fingerprints to the factories able to build empty instances
    of the corresponding Codable types.

    A registry is an explicit object handed to every Decoder that needs it;
    there is no process-wide default. Independent registries describe
    independent protocol universes, which keeps tests and multiple peers in
    one process isolated from each other.

    The registry is append-only. Registration and lookup are safe to call
    from several threads at once. Binding a fingerprint twice to the same
    factory is harmless; binding it to a different factory is a
    configuration error reported immediately.
    """
    def __init__(self) -> None:
        self._factories: dict[TypeFingerprint, Factory] = {}
        self._lock = threading.Lock()
        self._logger = logging.getLogger("core.registry")

    def register(self, fingerprint: TypeFingerprint, factory: Factory) -> None:
        with self._lock:
            current = self._factories.get(fingerprint)
            if current is not None:
                if current is factory:
                    return
                raise DuplicateTypeError(
                    f"Fingerprint {fingerprint} is already bound to {current!r}, "
                    f"refusing to rebind it to {factory!r}"
                )
            self._factories[fingerprint] = factory

        self._logger.debug(f"Registered {fingerprint} -> {factory!r}")

    def register_type(self, cls: type) -> type:
        """
        Register a Codable class using the class itself as factory.

        The fingerprint is taken from a throwaway instance, so the class
        must be constructible without arguments. Returns the class, which
        makes this usable as a decorator:

            @registry.register_type
            class Point: ...
        """
        self.register(cls().type_fingerprint(), cls)
        return cls

    def lookup(self, fingerprint: TypeFingerprint) -> Factory:
        # dict reads are atomic, lookups do not take the lock
        factory = self._factories.get(fingerprint)
        if factory is None:
            raise UnknownTypeError(fingerprint)
        return factory

    def __contains__(self, fingerprint: object) -> bool:
        return fingerprint in self._factories

    def __len__(self) -> int:
        return len(self._factories)
