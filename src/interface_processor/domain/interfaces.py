from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Callable, Dict, Iterator, Optional, Tuple, Type, TypeVar, Union

if TYPE_CHECKING:
    from interface_processor.domain.enums import Lifetime
    from interface_processor.domain.models import DependencyMetadata, Registration

T = TypeVar("T")


class MethodInterceptor(ABC):
    """Single entry point receiving every call made on a proxy.

    A handler implements all behavior of the interfaces designated to it.
    """

    @abstractmethod
    def intercept(
        self,
        target: Any,
        method: Callable[..., Any],
        args: Tuple[Any, ...],
        kwargs: Dict[str, Any],
    ) -> Any:
        """Handle one method call made on a proxy.

        Args:
            target: The proxy the call was made on.
            method: The interface function that was called.
            args: Positional arguments exactly as passed.
            kwargs: Keyword arguments exactly as passed.

        Returns:
            The value the proxy call returns.
        """


class IContainer(ABC):
    """Abstract interface for dependency injection container operations."""

    @abstractmethod
    def register(
        self,
        dependency_type: Type,
        builder: Callable[["IContainer"], Any],
        lifetime: "Lifetime",
        *,
        name: Optional[str] = None,
        primary: bool = False,
    ) -> "Registration":
        """Register a single dependency under a name.

        Args:
            dependency_type: The type the builder provides.
            builder: Factory receiving the container and returning an instance.
            lifetime: How long a built instance lives.
            name: Registration name, defaults to the type's simple name.
            primary: Whether this registration wins type lookups with several matches.
        """

    @abstractmethod
    def register_singletons(self, dependencies: Dict[Type, Callable[["IContainer"], Any]]) -> None:
        """Register multiple singleton dependencies at once.

        Args:
            dependencies: A dictionary mapping types to their builder functions.
        """

    @abstractmethod
    def register_transients(self, dependencies: Dict[Type, Callable[["IContainer"], Any]]) -> None:
        """Register multiple transient dependencies at once.

        Args:
            dependencies: A dictionary mapping types to their builder functions.
        """

    @abstractmethod
    def resolve(self, key: Union[Type[T], str]) -> T:
        """Resolve and return an instance for a type or a registration name.

        Args:
            key: The type or registration name to resolve.
        """

    @abstractmethod
    def is_registered(self, key: Union[Type, str]) -> bool:
        """Tell whether a registration matches the given type or name."""

    @abstractmethod
    def clear(self) -> None:
        """Clear all registrations and instances from the container."""

    @abstractmethod
    def get_registry_copy(self) -> Dict[str, "DependencyMetadata"]:
        """Get a copy of the current registry of dependencies."""


class IResolver(ABC):
    """Abstract interface for constructor auto-wiring."""

    @abstractmethod
    def resolve_dependencies(
        self,
        dependency_type: Type,
        container: IContainer,
    ) -> Any:
        """Resolve all constructor dependencies and create instance.

        Args:
            dependency_type: The type to resolve.
            container: The DI container to use for resolving dependencies.

        Returns:
            Instance with all dependencies injected.

        Raises:
            UnresolvableError: If a dependency cannot be resolved.
        """


class ILifetimeManager(ABC):
    """Abstract interface for managing dependency lifetimes."""

    @abstractmethod
    def get_or_create(
        self,
        metadata: "DependencyMetadata",
        factory: Callable[[], Any],
    ) -> Any:
        """Get existing instance or create a new one based on lifetime.

        Args:
            metadata: The dependency metadata containing registration info.
            factory: A callable to create a new instance if needed.
        """

    @abstractmethod
    def clear_cache(self) -> None:
        """Clear any cached instances managed by this lifetime manager."""


class INamespaceEnumerator(ABC):
    """Lists the type declarations living under a namespace."""

    @abstractmethod
    def list_types(self, namespace: str) -> Iterator[Type]:
        """Yield every class declared in the namespace, recursively.

        Args:
            namespace: Dotted package or module name.

        Raises:
            DiscoveryError: If the namespace cannot be imported.
        """


class IProxyBuilder(ABC):
    """Synthesizes objects implementing an interface on top of a handler."""

    @abstractmethod
    def build(self, interface_type: Type[T], handler: MethodInterceptor) -> T:
        """Return an instance of ``interface_type`` forwarding every call to ``handler``.

        Args:
            interface_type: The interface to implement.
            handler: The interceptor receiving the calls.
        """
