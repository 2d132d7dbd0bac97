import logging
from typing import Type

from interface_processor.domain import (
    MarkerTable,
    MethodInterceptor,
    NoHandlerFoundError,
    NotAnInterfaceError,
    is_interface,
)

logger = logging.getLogger(__name__)


class HandlerResolver:
    """Resolves the handler type designated for a discovered interface."""

    def __init__(self, marker_table: MarkerTable) -> None:
        self._marker_table = marker_table

    def resolve(self, cls: Type) -> Type[MethodInterceptor]:
        """Return the handler designated for ``cls``.

        Attached markers are inspected in declared order; the first one that
        is, or whose type carries, an ``InterfaceProcessorHandler`` decides.

        Args:
            cls: A discovered type.

        Returns:
            The designated handler class.

        Raises:
            NotAnInterfaceError: If ``cls`` is not a true interface.
            NoHandlerFoundError: If no attached marker designates a handler.
        """
        if not is_interface(cls):
            raise NotAnInterfaceError(cls)

        designation = next(self._marker_table.designations_of(cls), None)
        if designation is None:
            raise NoHandlerFoundError(cls)

        logger.debug(f"Resolved handler {designation.handler_type.__name__} for {cls.__name__}")
        return designation.handler_type
