from typing import List, Optional, Type

from interface_processor.application import InterfaceProcessor
from interface_processor.domain import (
    IContainer,
    INamespaceEnumerator,
    IProxyBuilder,
    MarkerTable,
    RegistryEntry,
    default_marker_table,
)
from interface_processor.infrastructure.module_walker import ModuleWalker
from interface_processor.infrastructure.proxy_builder import ProxyBuilder


def create_interface_processor(
    container: IContainer,
    marker_table: Optional[MarkerTable] = None,
    enumerator: Optional[INamespaceEnumerator] = None,
    proxy_builder: Optional[IProxyBuilder] = None,
) -> InterfaceProcessor:
    """Create an interface processor with the default collaborators.

    Args:
        container: Container receiving the proxy registrations.
        marker_table: Side-table to read markers from, defaults to ``default_marker_table``.
        enumerator: Namespace enumerator, defaults to :class:`ModuleWalker`.
        proxy_builder: Proxy builder, defaults to :class:`ProxyBuilder`.
    """
    return InterfaceProcessor(
        container,
        marker_table if marker_table is not None else default_marker_table,
        enumerator if enumerator is not None else ModuleWalker(),
        proxy_builder if proxy_builder is not None else ProxyBuilder(),
    )


def enable_interface_processor(
    bootstrap: Type,
    container: IContainer,
    marker_table: Optional[MarkerTable] = None,
) -> List[RegistryEntry]:
    """Run the discovery-and-registration pass for ``bootstrap``.

    Example:
        >>> @EnableInterfaceProcessor(namespaces=["app.clients"])
        ... class Application:
        ...     pass
        >>>
        >>> container = DIContainer()
        >>> enable_interface_processor(Application, container)
        >>> greeter = container.resolve(Greeter)
    """
    return create_interface_processor(container, marker_table).process(bootstrap)
