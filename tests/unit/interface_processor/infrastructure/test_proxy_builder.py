"""Unit tests for ProxyBuilder."""

import inspect
from abc import ABC, abstractmethod
from typing import Protocol

import pytest

from interface_processor.domain import IProxyBuilder, MethodInterceptor
from interface_processor.infrastructure.proxy_builder import ProxyBuilder, is_proxy, proxy_handler_of


class Greeter(ABC):
    @abstractmethod
    def greeting(self, text: str) -> str:
        """Return a greeting for ``text``."""

    @abstractmethod
    def farewell(self) -> str: ...


class PoliteGreeter(Greeter, ABC):
    @abstractmethod
    def bow(self, depth: int = 1) -> None: ...


class Clock(Protocol):
    def now(self) -> float: ...


class Task(ABC):
    @abstractmethod
    def run(self) -> None: ...

    @abstractmethod
    def __call__(self, *args): ...


class RecordingInterceptor(MethodInterceptor):
    def __init__(self, result="handled"):
        self.result = result
        self.calls = []

    def intercept(self, target, method, args, kwargs):
        self.calls.append((target, method, args, kwargs))
        return self.result


class TestProxyBuilding:
    """Test cases for synthesizing proxies."""

    def test_implements_interface(self):
        """Test that ProxyBuilder is a proxy builder."""
        assert isinstance(ProxyBuilder(), IProxyBuilder)

    def test_proxy_is_instance_of_interface(self):
        """Test that the proxy satisfies the interface."""
        proxy = ProxyBuilder().build(Greeter, RecordingInterceptor())

        assert isinstance(proxy, Greeter)
        assert type(proxy).__name__ == "GreeterProxy"
        assert type(proxy).__module__ == Greeter.__module__

    def test_proxy_class_synthesized_once_per_interface(self):
        """Test that proxies of one interface share a class."""
        builder = ProxyBuilder()

        first = builder.build(Greeter, RecordingInterceptor())
        second = builder.build(Greeter, RecordingInterceptor())

        assert type(first) is type(second)
        assert first is not second

    def test_inherited_interface_methods_are_forwarded(self):
        """Test that methods declared on base interfaces are proxied too."""
        handler = RecordingInterceptor()
        proxy = ProxyBuilder().build(PoliteGreeter, handler)

        proxy.greeting("hi")
        proxy.bow(depth=2)

        assert [call[1].__name__ for call in handler.calls] == ["greeting", "bow"]

    def test_protocol_interface(self):
        """Test that Protocol interfaces can be proxied."""
        handler = RecordingInterceptor(result=12.5)
        proxy = ProxyBuilder().build(Clock, handler)

        assert proxy.now() == 12.5
        assert handler.calls[0][1] is Clock.__dict__["now"]

    def test_forwarders_keep_interface_metadata(self):
        """Test that proxy methods keep the name, docstring and signature of the interface."""
        proxy = ProxyBuilder().build(Greeter, RecordingInterceptor())

        assert proxy.greeting.__name__ == "greeting"
        assert proxy.greeting.__doc__ == "Return a greeting for ``text``."
        assert list(inspect.signature(proxy.greeting).parameters) == ["text"]

    def test_repr_mentions_handler(self):
        """Test the proxy repr."""
        handler = RecordingInterceptor()
        proxy = ProxyBuilder().build(Greeter, handler)

        assert repr(proxy) == f"<GreeterProxy handler={handler!r}>"


class TestProxyRuntimeContract:
    """Test cases for forwarding calls to the handler."""

    def test_call_forwarded_with_identity_and_arguments(self):
        """Test that intercept receives the proxy, the interface function and the raw arguments."""
        handler = RecordingInterceptor()
        proxy = ProxyBuilder().build(Greeter, handler)

        proxy.greeting("hi")

        assert handler.calls == [(proxy, Greeter.__dict__["greeting"], ("hi",), {})]

    def test_result_comes_from_handler(self):
        """Test that the proxy returns whatever the handler returns."""
        sentinel = object()
        proxy = ProxyBuilder().build(Greeter, RecordingInterceptor(result=sentinel))

        assert proxy.farewell() is sentinel

    def test_keyword_arguments_passed_unmodified(self):
        """Test that keyword arguments are not bound into positionals."""
        handler = RecordingInterceptor()
        proxy = ProxyBuilder().build(Greeter, handler)

        proxy.greeting(text="hi")

        assert handler.calls[0][2:] == ((), {"text": "hi"})

    def test_no_argument_validation(self):
        """Test that arguments not matching the signature still reach the handler."""
        handler = RecordingInterceptor()
        proxy = ProxyBuilder().build(Greeter, handler)

        proxy.greeting("a", "b", extra=True)

        assert handler.calls[0][2:] == (("a", "b"), {"extra": True})

    def test_intercept_called_exactly_once_per_call(self):
        """Test one handler invocation per proxy call."""
        handler = RecordingInterceptor()
        proxy = ProxyBuilder().build(Greeter, handler)

        proxy.greeting("a")
        proxy.greeting("b")
        proxy.farewell()

        assert len(handler.calls) == 3

    def test_dunder_method_forwarded(self):
        """Test that abstract dunder methods are proxied like any other method."""
        handler = RecordingInterceptor(result="called")
        proxy = ProxyBuilder().build(Task, handler)

        assert proxy(1, 2) == "called"
        assert handler.calls == [(proxy, Task.__dict__["__call__"], (1, 2), {})]

    def test_handler_exceptions_propagate(self):
        """Test that the proxy does not swallow handler errors."""

        class FailingInterceptor(MethodInterceptor):
            def intercept(self, target, method, args, kwargs):
                raise LookupError(method.__name__)

        proxy = ProxyBuilder().build(Greeter, FailingInterceptor())

        with pytest.raises(LookupError, match="farewell"):
            proxy.farewell()


class TestProxyHelpers:
    """Test cases for proxy_handler_of and is_proxy."""

    def test_proxy_handler_of(self):
        """Test that the backing handler can be retrieved."""
        handler = RecordingInterceptor()

        assert proxy_handler_of(ProxyBuilder().build(Greeter, handler)) is handler

    def test_proxy_handler_of_non_proxy_raises(self):
        """Test that ordinary objects are rejected."""
        with pytest.raises(TypeError):
            proxy_handler_of(object())

    def test_is_proxy(self):
        """Test proxy detection."""
        assert is_proxy(ProxyBuilder().build(Greeter, RecordingInterceptor()))
        assert not is_proxy(RecordingInterceptor())
