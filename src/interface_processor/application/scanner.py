import logging
from typing import Iterable, Iterator, Set, Type

from interface_processor.domain import EnableInterfaceProcessor, INamespaceEnumerator, Marker, MarkerTable, is_independent

logger = logging.getLogger(__name__)


class InterfaceScanner:
    """Finds the types under a set of namespaces marked for interface processing.

    A type is a candidate when it is a module-level class, is not a marker
    type, and carries at least one marker other than
    ``EnableInterfaceProcessor``. Whether a candidate is a true interface,
    and whether one of its markers actually designates a handler, is checked
    later, when its handler is resolved.

    Attributes:
        _enumerator: Lists the types declared under a namespace.
        _marker_table: Side-table holding the markers of scanned types.
    """

    def __init__(self, enumerator: INamespaceEnumerator, marker_table: MarkerTable) -> None:
        self._enumerator = enumerator
        self._marker_table = marker_table

    def is_candidate(self, cls: Type) -> bool:
        if not is_independent(cls):
            logger.debug(f"Skipping {cls.__module__}.{cls.__qualname__}: not a module-level class")
            return False
        if issubclass(cls, Marker):
            return False
        return any(
            not isinstance(marker, EnableInterfaceProcessor) for marker in self._marker_table.markers_of(cls)
        )

    def scan(self, namespaces: Iterable[str]) -> Iterator[Type]:
        """Lazily yield candidates across all namespaces.

        Namespaces are visited in sorted order. A type reachable from several
        overlapping namespaces is yielded once.

        Args:
            namespaces: Dotted namespace names.

        Yields:
            Candidate interface types.

        Raises:
            DiscoveryError: If a namespace cannot be enumerated.
        """
        seen: Set[Type] = set()
        for namespace in sorted(set(namespaces)):
            logger.debug(f"Scanning namespace: {namespace}")
            for cls in self._enumerator.list_types(namespace):
                if cls in seen or not self.is_candidate(cls):
                    continue
                seen.add(cls)
                logger.debug(f"Found candidate interface: {cls.__module__}.{cls.__qualname__}")
                yield cls
