"""Application layer - Per-thread resolution path and cycle detection."""

import threading
from contextlib import contextmanager
from typing import Any, Iterator, Tuple

from interface_processor.domain import CircularDependencyError


class ResolutionPath:
    """Tracks the chain of keys each thread is resolving right now.

    Realizing a proxy walks interface, then handler, then the handler's
    constructor dependencies. A key entered while already on the path means
    a handler needs, directly or not, the proxy it is being built for.

    Attributes:
        _local: Thread-local holder of the current path.
    """

    def __init__(self) -> None:
        self._local = threading.local()

    def current(self) -> Tuple[Any, ...]:
        return getattr(self._local, "keys", ())

    @contextmanager
    def entering(self, key: Any) -> Iterator[Tuple[Any, ...]]:
        """Extend the current thread's path with ``key`` for the duration of the block.

        Yields:
            The path including ``key``.

        Raises:
            CircularDependencyError: If ``key`` is already on the path. The
                reported chain runs from its first occurrence back to it.

        Example:
            >>> path = ResolutionPath()
            >>> with path.entering(Greeter):
            ...     with path.entering(AuditingHandler):
            ...         with path.entering(Greeter):  # Raises: Greeter -> AuditingHandler -> Greeter
            ...             pass
        """
        outer = self.current()
        if key in outer:
            raise CircularDependencyError(list(outer[outer.index(key) :]) + [key])

        self._local.keys = outer + (key,)
        try:
            yield self._local.keys
        finally:
            self._local.keys = outer

    def reset(self) -> None:
        self._local.keys = ()
