import logging
import sys
from typing import Set, Type

from interface_processor.domain import EnableInterfaceProcessor, MarkerTable

logger = logging.getLogger(__name__)


def package_of(declaration: Type) -> str:
    """Return the package a class is declared in.

    A class defined in ``app.clients.bootstrap`` belongs to ``app.clients``;
    a class defined in a top-level module belongs to that module.
    """
    module = sys.modules.get(declaration.__module__)
    package = getattr(module, "__package__", None)
    if package:
        return package
    return declaration.__module__.rpartition(".")[0] or declaration.__module__


class NamespaceResolver:
    """Computes the namespaces scanned for a bootstrap class.

    Attributes:
        _marker_table: Side-table holding the bootstrap's enable marker.
    """

    def __init__(self, marker_table: MarkerTable) -> None:
        self._marker_table = marker_table

    def resolve(self, bootstrap: Type) -> Set[str]:
        """Return the effective namespaces for ``bootstrap``.

        Non-blank namespaces declared on its ``EnableInterfaceProcessor``
        are used as given, duplicates collapsed. Without any, the package of
        the bootstrap class is used.

        Args:
            bootstrap: The class carrying the enable marker.

        Returns:
            A non-empty set of dotted namespace names.
        """
        marker = self._marker_table.find(bootstrap, EnableInterfaceProcessor)
        declared = marker.namespaces if marker is not None else []
        namespaces = {namespace for namespace in declared if namespace and namespace.strip()}

        if namespaces:
            logger.info(f"Namespaces declared on {bootstrap.__name__}: {sorted(namespaces)}")
            return namespaces

        default_namespace = package_of(bootstrap)
        logger.info(
            f"No namespaces declared on {bootstrap.__name__}, scanning its package: {default_namespace}"
        )
        return {default_namespace}
