"""Declarative metadata attached to types.

Markers are pydantic value objects used as class decorators. Applying one
records it in a :class:`MarkerTable` side-table and returns the class
unchanged, so interfaces stay plain Python classes.

Example:
    >>> @InterfaceProcessorHandler(EchoHandler)
    ... class Greeter(ABC):
    ...     @abstractmethod
    ...     def greeting(self, text: str) -> str: ...

A marker type can itself carry a handler designation (a meta-marker):

    >>> @InterfaceProcessorHandler(HttpHandler)
    ... class HttpClient(Marker):
    ...     base_url: str = ""
    >>>
    >>> @HttpClient(base_url="https://example.org")
    ... class StatusApi(ABC): ...
"""

import weakref
from typing import Any, Callable, Iterator, List, Optional, Type, TypeVar

from pydantic import BaseModel, ConfigDict, Field, field_validator

from interface_processor.domain.interfaces import MethodInterceptor

C = TypeVar("C", bound=type)
M = TypeVar("M", bound="Marker")


class MarkerTable:
    """Maps each marked type to the markers attached to it.

    Markers are kept in declared order: the top-most decorator in the source
    comes first. Types are held weakly so modules dropped from ``sys.modules``
    do not linger here.
    """

    def __init__(self) -> None:
        self._markers: "weakref.WeakKeyDictionary[type, List[Marker]]" = weakref.WeakKeyDictionary()

    def attach(self, target: type, marker: "Marker") -> None:
        """Record ``marker`` on ``target``.

        Raises:
            TypeError: If ``target`` is not a class.
        """
        if not isinstance(target, type):
            raise TypeError(f"Markers can only be attached to classes, got {target!r}")
        # Class decorators apply bottom-up; prepending keeps source order.
        self._markers.setdefault(target, []).insert(0, marker)

    def mark(self, marker: "Marker") -> Callable[[C], C]:
        """Return a class decorator attaching ``marker`` in this table."""

        def decorator(target: C) -> C:
            return marker.attach_to(target, self)

        return decorator

    def markers_of(self, target: type) -> List["Marker"]:
        return list(self._markers.get(target, ()))

    def find(self, target: type, marker_type: Type[M]) -> Optional[M]:
        """Return the first marker of ``marker_type`` attached to ``target``, if any."""
        for marker in self._markers.get(target, ()):
            if isinstance(marker, marker_type):
                return marker
        return None

    def has_marker(self, target: type, marker_type: Type["Marker"]) -> bool:
        return self.find(target, marker_type) is not None

    def designations_of(self, target: type) -> Iterator["InterfaceProcessorHandler"]:
        """Yield the handler designations reachable from ``target``, in declared order.

        A designation is reachable when it is attached to ``target`` directly,
        or attached to the type of a marker attached to ``target``. Only one
        level of indirection is followed.
        """
        for marker in self.markers_of(target):
            if isinstance(marker, InterfaceProcessorHandler):
                yield marker
                continue
            designation = self.find(type(marker), InterfaceProcessorHandler)
            if designation is not None:
                yield designation

    def clear(self) -> None:
        self._markers.clear()


default_marker_table = MarkerTable()


class Marker(BaseModel):
    """Base class of every marker type."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    def attach_to(self, target: C, table: Optional[MarkerTable] = None) -> C:
        """Attach this marker to ``target`` and return ``target``.

        Args:
            target: The class to mark.
            table: Side-table to record into, defaults to ``default_marker_table``.
        """
        (table if table is not None else default_marker_table).attach(target, self)
        return target

    def __call__(self, target: C) -> C:
        return self.attach_to(target)


class InterfaceProcessorHandler(Marker):
    """Designates the handler implementing an interface.

    Placed on an interface, or on a marker type that is then placed on
    interfaces.

    Attributes:
        handler_type: The interceptor class receiving every proxied call.
    """

    handler_type: Type[MethodInterceptor] = Field(
        ..., description="The interceptor class handling calls made on the interface."
    )

    def __init__(self, handler_type: Type[MethodInterceptor], **data: Any) -> None:
        super().__init__(handler_type=handler_type, **data)


class EnableInterfaceProcessor(Marker):
    """Enables interface processing on a bootstrap class.

    Attributes:
        namespaces: Dotted package names to scan. When empty, the package of
            the bootstrap class is scanned.
    """

    namespaces: List[str] = Field(
        default_factory=list,
        description="Packages to scan for interfaces carrying a handler designation.",
    )

    @field_validator("namespaces", mode="before")
    @classmethod
    def _accept_single_namespace(cls, value: Any) -> Any:
        if isinstance(value, str):
            return [value]
        return value
