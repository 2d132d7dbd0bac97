"""
Application layer - Use cases and orchestration.

This layer holds the component registry and the discovery-and-registration
pipeline. It depends only on the Domain layer.
"""

from .container import DIContainer
from .handler_resolver import HandlerResolver
from .lifetime_manager import LifetimeManager
from .namespace_resolver import NamespaceResolver, package_of
from .processor import InterfaceProcessor
from .proxy_factory import ProxyFactory
from .registrar import InterfaceRegistrar
from .resolution_path import ResolutionPath
from .resolver import DependencyResolver
from .scanner import InterfaceScanner

__all__ = [
    "DIContainer",
    "DependencyResolver",
    "LifetimeManager",
    "ResolutionPath",
    "NamespaceResolver",
    "package_of",
    "InterfaceScanner",
    "HandlerResolver",
    "InterfaceRegistrar",
    "ProxyFactory",
    "InterfaceProcessor",
]
