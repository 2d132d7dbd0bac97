"""
interface-processor: Handler-backed proxies for marked interfaces, wired into a DI container.

Public API exports for the interface-processor package.
"""

# Application exports
from interface_processor.application.container import DIContainer
from interface_processor.application.processor import InterfaceProcessor

# Domain exports
from interface_processor.domain.enums import Lifetime, RealizationState
from interface_processor.domain.exceptions import (
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
from interface_processor.domain.interfaces import MethodInterceptor
from interface_processor.domain.markers import (
    EnableInterfaceProcessor,
    InterfaceProcessorHandler,
    Marker,
    MarkerTable,
    default_marker_table,
)
from interface_processor.domain.models import RegistryEntry

# Infrastructure exports
from interface_processor.infrastructure.bootstrap import create_interface_processor, enable_interface_processor
from interface_processor.infrastructure.proxy_builder import ProxyBuilder, proxy_handler_of

__version__ = "0.1.0"

__all__ = [
    # Container
    "DIContainer",
    # Processing
    "InterfaceProcessor",
    "create_interface_processor",
    "enable_interface_processor",
    "ProxyBuilder",
    "proxy_handler_of",
    # Markers
    "Marker",
    "MarkerTable",
    "default_marker_table",
    "EnableInterfaceProcessor",
    "InterfaceProcessorHandler",
    "MethodInterceptor",
    "RegistryEntry",
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
]
