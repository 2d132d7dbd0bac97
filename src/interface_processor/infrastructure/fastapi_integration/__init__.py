"""
FastAPI integration module.

Provides helpers for handing discovered interface proxies to FastAPI endpoints.
"""

from .integration import attach_container, create_app_dependency, create_fastapi_dependency, inject

__all__ = [
    "create_fastapi_dependency",
    "create_app_dependency",
    "attach_container",
    "inject",
]
