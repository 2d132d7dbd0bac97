import logging
from typing import List, Type

from interface_processor.application.handler_resolver import HandlerResolver
from interface_processor.application.namespace_resolver import NamespaceResolver
from interface_processor.application.registrar import InterfaceRegistrar
from interface_processor.application.scanner import InterfaceScanner
from interface_processor.domain import (
    IContainer,
    INamespaceEnumerator,
    IProxyBuilder,
    MarkerTable,
    ProcessorStateError,
    RegistryEntry,
)

logger = logging.getLogger(__name__)


class InterfaceProcessor:
    """Composition-root pass wiring discovered interfaces into a container.

    Runs namespace resolution, scanning, handler resolution and registration
    once. Every handler is resolved and every entry name checked before the
    first registration, so a failed pass leaves the container untouched and
    may be run again.

    Attributes:
        _namespace_resolver: Computes the namespaces to scan.
        _scanner: Finds candidate interfaces.
        _handler_resolver: Resolves each candidate's handler.
        _registrar: Registers proxy entries.
        _processed: Whether a pass completed.
    """

    def __init__(
        self,
        container: IContainer,
        marker_table: MarkerTable,
        enumerator: INamespaceEnumerator,
        proxy_builder: IProxyBuilder,
    ) -> None:
        self._namespace_resolver = NamespaceResolver(marker_table)
        self._scanner = InterfaceScanner(enumerator, marker_table)
        self._handler_resolver = HandlerResolver(marker_table)
        self._registrar = InterfaceRegistrar(container, proxy_builder)
        self._processed = False

    def process(self, bootstrap: Type) -> List[RegistryEntry]:
        """Discover and register every interface reachable from ``bootstrap``.

        Args:
            bootstrap: Class carrying ``EnableInterfaceProcessor``.

        Returns:
            The registered entries, in discovery order.

        Raises:
            ProcessorStateError: If a pass already completed.
            DiscoveryError: If a namespace cannot be scanned.
            NotAnInterfaceError: If a candidate is not a true interface.
            NoHandlerFoundError: If a candidate has no resolvable handler.
            DuplicateRegistrationError: If an entry name is taken, in the container or within the pass.
        """
        if self._processed:
            raise ProcessorStateError("Interface processing already ran; re-scanning is not supported")

        logger.info("Bean registration started")
        namespaces = self._namespace_resolver.resolve(bootstrap)

        entries = [
            RegistryEntry.for_interface(candidate, self._handler_resolver.resolve(candidate))
            for candidate in self._scanner.scan(namespaces)
        ]
        self._registrar.ensure_available(entries)
        for entry in entries:
            self._registrar.register_entry(entry)
        self._processed = True

        logger.info(f"Bean registration completed: {len(entries)} interface(s) registered")
        return entries
