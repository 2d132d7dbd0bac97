import threading
from typing import Any, Callable, Dict

from interface_processor.domain import (
    DependencyMetadata,
    ILifetimeManager,
    InterfaceProcessorError,
    Lifetime,
    UnresolvableError,
)


class LifetimeManager(ILifetimeManager):
    """Manages instance lifetimes for singleton and transient registrations.

    Singletons are built at most once per registration name, even when
    several threads request the same entry for the first time.

    Attributes:
        _singleton_cache: Built singletons keyed by registration name.
        _locks: One re-entrant lock per singleton registration name.
        _locks_guard: Serializes creation of entries in ``_locks``.
    """

    def __init__(self) -> None:
        self._singleton_cache: Dict[str, Any] = {}
        self._locks: Dict[str, threading.RLock] = {}
        self._locks_guard = threading.Lock()

    def _lock_for(self, name: str) -> threading.RLock:
        with self._locks_guard:
            if name not in self._locks:
                self._locks[name] = threading.RLock()
            return self._locks[name]

    def get_or_create(self, metadata: DependencyMetadata, factory: Callable[[], Any]) -> Any:
        """Get existing instance or create new one based on lifetime.

        Args:
            metadata: Registration metadata containing lifetime info.
            factory: Function to create new instance if needed.

        Returns:
            Instance according to lifetime rules:
            - Singleton: Returns cached instance or creates and caches new one
            - Transient: Always creates new instance

        Raises:
            InterfaceProcessorError: Re-raised untouched when the factory raises one.
            UnresolvableError: Wrapping any other exception raised by the factory.
        """
        registration = metadata.registration

        if registration.lifetime == Lifetime.SINGLETON:
            name = registration.name
            if name in self._singleton_cache:
                return self._singleton_cache[name]
            with self._lock_for(name):
                # Another thread may have finished while we waited.
                if name not in self._singleton_cache:
                    self._singleton_cache[name] = self._create(metadata, factory)
            return self._singleton_cache[name]

        return self._create(metadata, factory)

    @staticmethod
    def _create(metadata: DependencyMetadata, factory: Callable[[], Any]) -> Any:
        try:
            return factory()
        except InterfaceProcessorError:
            raise
        except Exception as e:
            raise UnresolvableError(
                metadata.registration.name, f"Failed to create instance: {str(e)}"
            ) from e

    def is_cached(self, name: str) -> bool:
        return name in self._singleton_cache

    def evict(self, name: str) -> None:
        self._singleton_cache.pop(name, None)

    def clear_cache(self) -> None:
        """Clear all cached singletons.

        Useful for testing or resetting container state.
        """
        self._singleton_cache.clear()
