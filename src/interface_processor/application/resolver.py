"""Constructor injection for classes nobody registered, handlers above all."""

import inspect
import threading
import weakref
from typing import Any, Tuple, Type, get_type_hints

from interface_processor.domain import CircularDependencyError, IContainer, IResolver, UnresolvableError
from interface_processor.domain.exceptions import describe

# (parameter name, annotation) the container must supply.
Requirement = Tuple[str, Any]

_UNSUPPLIED_KINDS = (inspect.Parameter.VAR_POSITIONAL, inspect.Parameter.VAR_KEYWORD)


class DependencyResolver(IResolver):
    """Builds concrete classes by asking the container for each constructor argument.

    A handler named by ``InterfaceProcessorHandler`` is usually not
    registered anywhere; it is built here the first time one of its proxies
    is realized, and its own dependencies are built the same way. The
    requirements of a class (annotated parameters without defaults) are
    computed once and reused.
    """

    def __init__(self) -> None:
        self._requirements: "weakref.WeakKeyDictionary[type, Tuple[Requirement, ...]]" = weakref.WeakKeyDictionary()
        self._lock = threading.Lock()

    def requirements_of(self, cls: Type) -> Tuple[Requirement, ...]:
        """Return what the container must supply to construct ``cls``.

        Raises:
            UnresolvableError: If ``cls`` is not a concrete class, or a
                parameter without default has no annotation.
        """
        if not inspect.isclass(cls):
            raise UnresolvableError(cls, "Only classes can be constructed.")
        if inspect.isabstract(cls) or getattr(cls, "_is_protocol", False):
            raise UnresolvableError(cls, "Abstract type has no registration.")

        with self._lock:
            requirements = self._requirements.get(cls)
        if requirements is None:
            requirements = self._inspect_constructor(cls)
            with self._lock:
                self._requirements[cls] = requirements
        return requirements

    @staticmethod
    def _inspect_constructor(cls: Type) -> Tuple[Requirement, ...]:
        try:
            parameters = list(inspect.signature(cls.__init__).parameters.values())[1:]
            hints = get_type_hints(cls.__init__)
        except (NameError, TypeError, ValueError) as e:
            raise UnresolvableError(cls, f"Constructor of {cls.__name__} cannot be inspected: {e}") from e

        requirements = []
        for parameter in parameters:
            if parameter.kind in _UNSUPPLIED_KINDS or parameter.default is not inspect.Parameter.empty:
                continue
            if parameter.name not in hints:
                raise UnresolvableError(cls, f"Parameter '{parameter.name}' has neither a type hint nor a default.")
            requirements.append((parameter.name, hints[parameter.name]))
        return tuple(requirements)

    def resolve_dependencies(self, dependency_type: Type, container: IContainer) -> Any:
        """Construct ``dependency_type`` with arguments resolved from ``container``.

        Raises:
            UnresolvableError: If the type cannot be constructed, an argument
                cannot be resolved, or the constructor raises.
            CircularDependencyError: Propagated untouched from nested resolutions.

        Example:
            >>> class AuditingHandler(MethodInterceptor):
            ...     def __init__(self, journal: Journal):
            ...         self.journal = journal
            >>>
            >>> handler = DependencyResolver().resolve_dependencies(AuditingHandler, container)
        """
        arguments = {}
        for name, annotation in self.requirements_of(dependency_type):
            try:
                arguments[name] = container.resolve(annotation)
            except CircularDependencyError:
                raise
            except Exception as e:
                raise UnresolvableError(
                    dependency_type, f"Parameter '{name}' needs {describe(annotation)}: {e}"
                ) from e

        try:
            return dependency_type(**arguments)
        except Exception as e:
            raise UnresolvableError(dependency_type, f"Constructor raised {type(e).__name__}: {e}") from e
