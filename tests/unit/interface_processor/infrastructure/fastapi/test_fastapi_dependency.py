"""Unit tests for FastAPI integration."""

from abc import ABC, abstractmethod
from unittest.mock import MagicMock

import pytest
from fastapi import FastAPI
from fastapi.params import Depends as DependsParam

from interface_processor.application.container import DIContainer
from interface_processor.application.registrar import InterfaceRegistrar
from interface_processor.domain.exceptions import UnresolvableError
from interface_processor.infrastructure.fastapi_integration.integration import (
    APP_STATE_ATTRIBUTE,
    attach_container,
    create_app_dependency,
    create_fastapi_dependency,
    inject,
)
from interface_processor.infrastructure.proxy_builder import ProxyBuilder, is_proxy
from interface_processor.infrastructure.testing import RecordingHandler


class Greeter(ABC):
    @abstractmethod
    def greeting(self, text: str) -> str: ...


def _container_with_greeter() -> DIContainer:
    container = DIContainer()
    InterfaceRegistrar(container, ProxyBuilder()).register(Greeter, RecordingHandler)
    return container


def _request_for(app: FastAPI) -> MagicMock:
    request = MagicMock()
    request.app = app
    return request


class TestCreateFastAPIDependency:
    """Test cases for create_fastapi_dependency function."""

    def test_creates_dependency_function(self):
        """Test that create_fastapi_dependency returns a callable."""
        dependency_func = create_fastapi_dependency(_container_with_greeter(), Greeter)

        assert callable(dependency_func)

    def test_dependency_function_resolves_proxy(self):
        """Test that the dependency returns the registered proxy."""
        dependency_func = create_fastapi_dependency(_container_with_greeter(), Greeter)

        greeter = dependency_func()

        assert isinstance(greeter, Greeter)
        assert is_proxy(greeter)

    def test_dependency_function_returns_same_proxy(self):
        """Test that the proxy is realized once across requests."""
        dependency_func = create_fastapi_dependency(_container_with_greeter(), Greeter)

        assert dependency_func() is dependency_func()

    def test_dependency_function_propagates_resolution_errors(self):
        """Test that resolution failures surface when the dependency is called."""

        class Unregistered(ABC):
            @abstractmethod
            def run(self): ...

        dependency_func = create_fastapi_dependency(DIContainer(), Unregistered)

        with pytest.raises(UnresolvableError):
            dependency_func()


class TestInject:
    """Test cases for inject function."""

    def test_returns_depends_marker(self):
        """Test that inject wraps the dependency in Depends()."""
        marker = inject(_container_with_greeter(), Greeter)

        assert isinstance(marker, DependsParam)
        assert is_proxy(marker.dependency())


class TestAppDependency:
    """Test cases for attach_container and create_app_dependency."""

    def test_attach_container_sets_app_state(self):
        """Test that the container is stored on the application state."""
        app = FastAPI()
        container = _container_with_greeter()

        attach_container(app, container)

        assert getattr(app.state, APP_STATE_ATTRIBUTE) is container

    def test_app_dependency_resolves_from_attached_container(self):
        """Test that the dependency resolves through the request's application."""
        app = FastAPI()
        container = _container_with_greeter()
        attach_container(app, container)

        greeter = create_app_dependency(Greeter)(_request_for(app))

        assert greeter is container.resolve(Greeter)

    def test_app_dependency_without_container_raises(self):
        """Test the error raised when no container was attached."""
        app_dependency = create_app_dependency(Greeter)

        with pytest.raises(RuntimeError, match="attach_container"):
            app_dependency(_request_for(FastAPI()))
