"""
Domain layer - Markers, value objects and contracts.

This layer holds the declarative vocabulary and the rules every other layer
relies on. It has no dependencies on other layers.
"""

from .enums import Lifetime, RealizationState
from .exceptions import (
    AmbiguousResolutionError,
    CircularDependencyError,
    DiscoveryError,
    DuplicateRegistrationError,
    HandlerConstructionError,
    InterfaceProcessorError,
    NoHandlerFoundError,
    NotAnInterfaceError,
    ProcessorStateError,
    UnresolvableError,
)
from .interfaces import IContainer, ILifetimeManager, INamespaceEnumerator, IProxyBuilder, IResolver, MethodInterceptor
from .introspection import interface_methods, is_independent, is_interface
from .markers import EnableInterfaceProcessor, InterfaceProcessorHandler, Marker, MarkerTable, default_marker_table
from .models import DependencyMetadata, Registration, RegistryEntry

# Rebuild Pydantic models to resolve forward references
Registration.model_rebuild()

__all__ = [
    # Enums
    "Lifetime",
    "RealizationState",
    # Exceptions
    "InterfaceProcessorError",
    "NotAnInterfaceError",
    "NoHandlerFoundError",
    "DiscoveryError",
    "HandlerConstructionError",
    "ProcessorStateError",
    "DuplicateRegistrationError",
    "UnresolvableError",
    "AmbiguousResolutionError",
    "CircularDependencyError",
    # Interfaces
    "MethodInterceptor",
    "IContainer",
    "IResolver",
    "ILifetimeManager",
    "INamespaceEnumerator",
    "IProxyBuilder",
    # Markers
    "Marker",
    "MarkerTable",
    "default_marker_table",
    "InterfaceProcessorHandler",
    "EnableInterfaceProcessor",
    # Introspection
    "is_interface",
    "is_independent",
    "interface_methods",
    # Models
    "Registration",
    "DependencyMetadata",
    "RegistryEntry",
]
