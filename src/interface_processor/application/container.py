import threading
from typing import Any, Callable, Dict, List, Optional, Type, TypeVar, Union

from interface_processor.application.lifetime_manager import LifetimeManager
from interface_processor.application.resolution_path import ResolutionPath
from interface_processor.application.resolver import DependencyResolver
from interface_processor.domain import (
    AmbiguousResolutionError,
    DependencyMetadata,
    DuplicateRegistrationError,
    IContainer,
    IResolver,
    Lifetime,
    Registration,
    UnresolvableError,
)

T = TypeVar("T")


def _is_assignable(candidate: Type, requested: Type) -> bool:
    if candidate is requested:
        return True
    try:
        return issubclass(candidate, requested)
    except TypeError:
        # Non runtime-checkable protocols refuse issubclass; fall back to nominal MRO.
        return requested in getattr(candidate, "__mro__", ())


class DIContainer(IContainer):
    """Component registry backing the discovered interface proxies.

    Registrations are keyed by name and looked up by name or by type. A type
    lookup collects every registration whose type is the requested type or a
    subclass of it; when several match, the single primary one wins.
    Unregistered concrete classes are auto-wired.

    Attributes:
        _registry: Dictionary mapping registration names to their metadata.
        _resolver: Component responsible for auto-wiring dependencies.
        _lifetime_manager: Component managing instance lifetimes.
        _resolution_path: Per-thread chain of keys being resolved, used to detect cycles.
        _count_lock: Guards the resolution counters.
    """

    def __init__(self) -> None:
        self._registry: Dict[str, DependencyMetadata] = {}
        self._resolver: IResolver = DependencyResolver()
        self._lifetime_manager = LifetimeManager()
        self._resolution_path = ResolutionPath()
        self._count_lock = threading.Lock()

    def register(
        self,
        dependency_type: Type,
        builder: Callable[[IContainer], Any],
        lifetime: Lifetime = Lifetime.SINGLETON,
        *,
        name: Optional[str] = None,
        primary: bool = False,
    ) -> Registration:
        """Register a single dependency.

        Args:
            dependency_type: The type the builder provides.
            builder: Factory receiving the container and returning an instance.
            lifetime: How long the instance should live.
            name: Registration name, defaults to ``dependency_type.__name__``.
            primary: Whether this registration wins type lookups with several matches.

        Returns:
            The stored registration.

        Raises:
            DuplicateRegistrationError: If the name is already registered.
        """
        name = name or dependency_type.__name__
        if name in self._registry:
            raise DuplicateRegistrationError(name, self._registry[name].registration.dependency_type)

        registration = Registration(
            name=name,
            dependency_type=dependency_type,
            builder=builder,
            lifetime=lifetime,
            primary=primary,
        )
        self._registry[name] = DependencyMetadata(registration=registration)
        return registration

    def register_singletons(self, dependencies: Dict[Type, Callable[[IContainer], Any]]) -> None:
        """Register multiple singleton dependencies at once.

        Args:
            dependencies: Dictionary mapping dependency types to builder functions.
                         Each builder receives the container and returns an instance.

        Raises:
            DuplicateRegistrationError: If a type's name is already registered.

        Example:
            >>> container.register_singletons({
            ...     Journal: lambda c: Journal(),
            ...     AuditingHandler: lambda c: AuditingHandler(c.resolve(Journal)),
            ... })
        """
        for dependency_type, builder in dependencies.items():
            self.register(dependency_type, builder, Lifetime.SINGLETON)

    def register_transients(self, dependencies: Dict[Type, Callable[[IContainer], Any]]) -> None:
        """Register multiple transient dependencies at once.

        Transient dependencies are created fresh on each resolution.

        Args:
            dependencies: Dictionary mapping dependency types to builder functions.

        Raises:
            DuplicateRegistrationError: If a type's name is already registered.
        """
        for dependency_type, builder in dependencies.items():
            self.register(dependency_type, builder, Lifetime.TRANSIENT)

    def _find(self, key: Union[Type, str]) -> Optional[DependencyMetadata]:
        if isinstance(key, str):
            if key not in self._registry:
                raise UnresolvableError(key, "No registration with this name.")
            return self._registry[key]

        matches: List[DependencyMetadata] = [
            metadata
            for metadata in self._registry.values()
            if _is_assignable(metadata.registration.dependency_type, key)
        ]
        if len(matches) <= 1:
            return matches[0] if matches else None

        primaries = [metadata for metadata in matches if metadata.registration.primary]
        if len(primaries) == 1:
            return primaries[0]
        raise AmbiguousResolutionError(key, sorted(metadata.registration.name for metadata in matches))

    def resolve(self, key: Union[Type[T], str]) -> T:
        """Resolve and return an instance for a type or a registration name.

        Uses auto-wiring if no registration matches a type key.

        Args:
            key: The type or registration name to resolve.

        Returns:
            Instance of the requested type with all dependencies injected.

        Raises:
            UnresolvableError: If the dependency cannot be resolved.
            AmbiguousResolutionError: If several registrations match and none is primary.
            CircularDependencyError: If a circular dependency is detected.

        Example:
            >>> greeter = container.resolve(Greeter)
            >>> same = container.resolve("Greeter")
        """
        with self._resolution_path.entering(key):
            metadata = self._find(key)
            if metadata is None:
                return self._resolver.resolve_dependencies(key, self)

            instance = self._lifetime_manager.get_or_create(
                metadata,
                lambda: metadata.registration.builder(self),
            )
            with self._count_lock:
                metadata.resolution_count += 1
            return instance

    def is_registered(self, key: Union[Type, str]) -> bool:
        if isinstance(key, str):
            return key in self._registry
        return any(_is_assignable(metadata.registration.dependency_type, key) for metadata in self._registry.values())

    def unregister(self, name: str) -> None:
        """Drop a registration and any instance cached for it."""
        self._registry.pop(name, None)
        self._lifetime_manager.evict(name)

    def get_registry_copy(self) -> Dict[str, DependencyMetadata]:
        return self._registry.copy()

    def set_registry(self, registry: Dict[str, DependencyMetadata]) -> None:
        self._registry = registry

    def clear(self) -> None:
        """Clear all registrations and cached instances.

        Useful for testing or resetting the container state.
        """
        self._registry.clear()
        self._lifetime_manager.clear_cache()
        self._resolution_path.reset()
