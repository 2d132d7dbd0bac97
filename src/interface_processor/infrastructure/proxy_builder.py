"""Synthesizes interface implementations forwarding every call to a handler."""

import functools
import threading
import weakref
from typing import Any, Callable, Dict, Type, TypeVar

from interface_processor.domain import IProxyBuilder, MethodInterceptor, interface_methods

T = TypeVar("T")

_HANDLER_ATTRIBUTE = "_interface_proxy_handler"


def _forwarder(method: Callable[..., Any]) -> Callable[..., Any]:
    @functools.wraps(method)
    def forward(self: Any, *args: Any, **kwargs: Any) -> Any:
        return object.__getattribute__(self, _HANDLER_ATTRIBUTE).intercept(self, method, args, kwargs)

    # wraps() copied the abstract flag from the interface function
    forward.__isabstractmethod__ = False
    return forward


def _proxy_init(self: Any, handler: MethodInterceptor) -> None:
    object.__setattr__(self, _HANDLER_ATTRIBUTE, handler)


def _proxy_repr(self: Any) -> str:
    return f"<{type(self).__name__} handler={getattr(self, _HANDLER_ATTRIBUTE)!r}>"


def proxy_handler_of(proxy: Any) -> MethodInterceptor:
    """Return the handler backing a proxy built by :class:`ProxyBuilder`.

    Raises:
        TypeError: If ``proxy`` is not such a proxy.
    """
    try:
        return getattr(proxy, _HANDLER_ATTRIBUTE)
    except AttributeError:
        raise TypeError(f"{proxy!r} is not an interface proxy") from None


def is_proxy(obj: Any) -> bool:
    return hasattr(type(obj), "__interface_proxy_of__")


class ProxyBuilder(IProxyBuilder):
    """Builds proxies by subclassing the interface.

    For each interface a subclass named ``<Interface>Proxy`` is synthesized
    once, with one forwarding method per interface method. The forwarder
    calls ``handler.intercept(proxy, method, args, kwargs)`` where ``method``
    is the interface function, and returns its result. Arguments are passed
    through without binding or validation.

    Example:
        >>> proxy = ProxyBuilder().build(Greeter, EchoHandler())
        >>> isinstance(proxy, Greeter)
        True
        >>> proxy.greeting("hi")  # EchoHandler.intercept(proxy, Greeter.greeting, ("hi",), {})
    """

    def __init__(self) -> None:
        self._proxy_classes: "weakref.WeakKeyDictionary[type, type]" = weakref.WeakKeyDictionary()
        self._lock = threading.Lock()

    def proxy_class_for(self, interface_type: Type[T]) -> Type[T]:
        with self._lock:
            proxy_class = self._proxy_classes.get(interface_type)
            if proxy_class is None:
                proxy_class = self._synthesize(interface_type)
                self._proxy_classes[interface_type] = proxy_class
            return proxy_class

    @staticmethod
    def _synthesize(interface_type: Type) -> Type:
        namespace: Dict[str, Any] = {
            name: _forwarder(method) for name, method in interface_methods(interface_type).items()
        }
        namespace.setdefault("__repr__", _proxy_repr)
        namespace.update(
            __init__=_proxy_init,
            __module__=interface_type.__module__,
            __qualname__=f"{interface_type.__qualname__}Proxy",
            __interface_proxy_of__=interface_type,
        )
        return type(interface_type)(f"{interface_type.__name__}Proxy", (interface_type,), namespace)

    def build(self, interface_type: Type[T], handler: MethodInterceptor) -> T:
        return self.proxy_class_for(interface_type)(handler)
