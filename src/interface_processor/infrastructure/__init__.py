"""
Infrastructure layer - Default collaborators and external integrations.

This layer contains the namespace walker, the proxy builder, and
integrations with external frameworks and tools. It depends on both
Application and Domain layers.
"""

from . import fastapi_integration, testing
from .bootstrap import create_interface_processor, enable_interface_processor
from .module_walker import ModuleWalker
from .proxy_builder import ProxyBuilder, is_proxy, proxy_handler_of

__all__ = [
    "ModuleWalker",
    "ProxyBuilder",
    "proxy_handler_of",
    "is_proxy",
    "create_interface_processor",
    "enable_interface_processor",
    "fastapi_integration",
    "testing",
]
