import logging
from typing import Dict, Iterable, Type

from interface_processor.application.proxy_factory import ProxyFactory
from interface_processor.domain import (
    DuplicateRegistrationError,
    IContainer,
    IProxyBuilder,
    MethodInterceptor,
    RegistryEntry,
)

logger = logging.getLogger(__name__)


class InterfaceRegistrar:
    """Registers the lazy proxy of a discovered interface into the container.

    The entry is named after the interface's simple name, marked primary and
    typed as the interface, so both name and type lookups reach the proxy.
    """

    def __init__(self, container: IContainer, proxy_builder: IProxyBuilder) -> None:
        self._container = container
        self._proxy_builder = proxy_builder

    def ensure_available(self, entries: Iterable[RegistryEntry]) -> None:
        """Check that every entry name is free, in the container and among ``entries``.

        Raises:
            DuplicateRegistrationError: On the first name already taken.
        """
        claimed: Dict[str, Type] = {}
        for entry in entries:
            if entry.name in claimed:
                raise DuplicateRegistrationError(entry.name, claimed[entry.name])
            if self._container.is_registered(entry.name):
                existing = self._container.get_registry_copy()[entry.name].registration.dependency_type
                raise DuplicateRegistrationError(entry.name, existing)
            claimed[entry.name] = entry.interface_type

    def register_entry(self, entry: RegistryEntry) -> RegistryEntry:
        logger.info(f"Registering bean for {entry.describe(qualified=True)}")
        self._container.register(
            entry.interface_type,
            ProxyFactory(entry, self._proxy_builder),
            entry.lifetime,
            name=entry.name,
            primary=entry.primary,
        )
        return entry

    def register(self, interface_type: Type, handler_type: Type[MethodInterceptor]) -> RegistryEntry:
        """Register the proxy entry for ``interface_type``.

        Returns:
            The registered entry.

        Raises:
            DuplicateRegistrationError: If the name is already taken in the container.
        """
        return self.register_entry(RegistryEntry.for_interface(interface_type, handler_type))
