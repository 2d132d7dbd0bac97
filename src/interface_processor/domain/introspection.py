"""Structural checks on candidate interface types."""

import inspect
import sys
from abc import ABC
from typing import Any, Callable, Dict, Generic, Iterator, Protocol, Tuple, Type

from interface_processor.domain.markers import Marker

_IGNORED_BASES = (object, ABC, Protocol, Generic)

# Functions the abc and typing modules install on user classes (Protocol's
# generated __init__ and __subclasshook__, for instance).
_MACHINERY_MODULES = frozenset({"abc", "typing", "typing_extensions"})

_CONSTRUCTORS = frozenset({"__init__", "__new__"})


def _declared_members(cls: Type) -> Iterator[Tuple[str, Any]]:
    """Yield members declared along the MRO, base classes first."""
    for klass in reversed(cls.__mro__):
        if klass in _IGNORED_BASES:
            continue
        yield from vars(klass).items()


def _is_machinery(value: Any) -> bool:
    function = getattr(value, "__func__", value)
    return inspect.isfunction(function) and function.__module__ in _MACHINERY_MODULES


def _is_executable(value: Any) -> bool:
    return inspect.isfunction(value) or isinstance(value, (property, classmethod, staticmethod))


def _members(cls: Type) -> Dict[str, Any]:
    """Map each member name to its most derived declaration, machinery excluded."""
    members: Dict[str, Any] = {}
    for name, value in _declared_members(cls):
        if _is_machinery(value):
            members.pop(name, None)
        else:
            members[name] = value
    return members


def is_protocol(cls: Type) -> bool:
    return bool(getattr(cls, "_is_protocol", False))


def is_interface(cls: Any) -> bool:
    """Tell whether ``cls`` is a true interface.

    Accepted shapes:
    - a ``typing.Protocol`` whose public members are all functions;
    - an ABC declaring at least one abstract method whose functions, private
      and dunder ones included, are all abstract.

    Properties, classmethods and staticmethods are executable members and
    disqualify a type. Marker types never qualify.
    """
    if not inspect.isclass(cls) or issubclass(cls, Marker):
        return False
    members = _members(cls)
    if not all(inspect.isfunction(value) for name, value in members.items() if not name.startswith("_")):
        return False
    executables = [value for value in members.values() if _is_executable(value)]
    if not all(inspect.isfunction(value) for value in executables):
        return False
    if is_protocol(cls):
        return True
    if not executables or not inspect.isabstract(cls):
        return False
    return all(getattr(value, "__isabstractmethod__", False) for value in executables)


def interface_methods(cls: Type) -> Dict[str, Callable[..., Any]]:
    """Map method name to the interface function declaring it.

    Dunder methods such as ``__call__`` are included; constructors are not.
    Subclass declarations override base declarations of the same name.
    """
    return {
        name: value
        for name, value in _members(cls).items()
        if inspect.isfunction(value) and name not in _CONSTRUCTORS
    }


def is_independent(cls: Type) -> bool:
    """Tell whether ``cls`` can be referenced as ``module.Name``.

    Nested, local and renamed dynamic classes are rejected.
    """
    if "." in cls.__qualname__:
        return False
    module = sys.modules.get(cls.__module__)
    return module is not None and getattr(module, cls.__qualname__, None) is cls
