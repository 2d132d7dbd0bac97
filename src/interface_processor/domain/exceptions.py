from typing import Any, List, Optional, Type


def describe(key: Any) -> str:
    """Return a readable name for a registry key (type or registration name)."""
    if isinstance(key, str):
        return key
    return getattr(key, "__name__", repr(key))


class InterfaceProcessorError(Exception):
    """Base exception for interface processor errors."""


class NotAnInterfaceError(InterfaceProcessorError):
    """Raised when a type marked for interface processing is not a true interface.

    Attributes:
        cls: The offending type.
    """

    def __init__(self, cls: Type) -> None:
        self.cls = cls
        super().__init__(
            f"{cls.__module__}.{cls.__qualname__} is marked for interface processing "
            "but is not an interface (abstract methods only, or a Protocol)"
        )


class NoHandlerFoundError(InterfaceProcessorError):
    """Raised when no attached marker designates a handler for an interface.

    Attributes:
        cls: The interface without a handler.
    """

    def __init__(self, cls: Type) -> None:
        self.cls = cls
        super().__init__(f"No handler designated for interface: {cls.__module__}.{cls.__qualname__}")


class DiscoveryError(InterfaceProcessorError):
    """Raised when a namespace cannot be imported or walked.

    Attributes:
        namespace: The namespace being scanned.
        reason: Why scanning failed.
    """

    def __init__(self, namespace: str, reason: str) -> None:
        self.namespace = namespace
        self.reason = reason
        super().__init__(f"Cannot scan namespace '{namespace}': {reason}")


class HandlerConstructionError(InterfaceProcessorError):
    """Raised when the handler backing a proxy cannot be obtained from the container.

    Attributes:
        interface_type: The interface being realized.
        handler_type: The handler type that failed.
        reason: Description of the underlying failure.
    """

    def __init__(self, interface_type: Type, handler_type: Type, reason: str) -> None:
        self.interface_type = interface_type
        self.handler_type = handler_type
        self.reason = reason
        super().__init__(
            f"Cannot obtain handler {handler_type.__name__} for interface {interface_type.__name__}: {reason}"
        )


class ProcessorStateError(InterfaceProcessorError):
    """Raised when an interface processor is asked to scan more than once."""


class DuplicateRegistrationError(InterfaceProcessorError):
    """Raised when a registration name is already taken.

    Attributes:
        name: The conflicting registration name.
        existing_type: Type already registered under that name.
    """

    def __init__(self, name: str, existing_type: Type) -> None:
        self.name = name
        self.existing_type = existing_type
        super().__init__(f"Name '{name}' is already registered for {existing_type.__name__}")


class UnresolvableError(InterfaceProcessorError):
    """Raised when a dependency cannot be resolved.

    This occurs when:
    - No registration exists for the requested name.
    - The requested type is abstract and nothing provides it.
    - Constructor parameters lack type hints.
    - The builder raised.

    Attributes:
        key: The type or name that could not be resolved.
        reason: Optional reason for the failure.
    """

    def __init__(self, key: Any, reason: Optional[str] = None) -> None:
        self.key = key
        self.reason = reason
        message = f"Cannot resolve dependency for: {describe(key)}"
        if reason:
            message += f". Reason: {reason}"
        super().__init__(message)


class AmbiguousResolutionError(InterfaceProcessorError):
    """Raised when a type lookup matches several registrations and none is primary.

    Attributes:
        key: The requested type.
        names: Names of the competing registrations.
    """

    def __init__(self, key: Type, names: List[str]) -> None:
        self.key = key
        self.names = names
        super().__init__(
            f"Type {describe(key)} matches several registrations without a single primary: {', '.join(names)}"
        )


class CircularDependencyError(InterfaceProcessorError):
    """Raised when a circular dependency is detected.

    Attributes:
        dependency_chain: Keys involved in the cycle.
    """

    def __init__(self, dependency_chain: List[Any]) -> None:
        self.dependency_chain = dependency_chain
        message = f"Circular dependency detected: {' -> '.join(describe(key) for key in dependency_chain)}"
        super().__init__(message)
