"""
Testing utilities module.

Provides helpers for testing applications whose interfaces are served by
interface proxies.
"""

from .utilities import RecordedCall, RecordingHandler, TestContainer, create_mock_container

__all__ = [
    "TestContainer",
    "create_mock_container",
    "RecordingHandler",
    "RecordedCall",
]
