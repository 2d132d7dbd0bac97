import logging
from typing import Any

from interface_processor.domain import (
    HandlerConstructionError,
    IContainer,
    IProxyBuilder,
    RealizationState,
    RegistryEntry,
)

logger = logging.getLogger(__name__)


class ProxyFactory:
    """Container builder realizing the proxy of one registry entry.

    The container calls the factory on first resolution of the entry. The
    factory obtains the handler from that container, then asks the proxy
    builder for an object implementing the interface. Construct-once
    semantics come from the container's singleton lifetime.

    Attributes:
        entry: The registry entry being realized.
        state: Where the entry is in its realization lifecycle.
    """

    def __init__(self, entry: RegistryEntry, proxy_builder: IProxyBuilder) -> None:
        self.entry = entry
        self.state = RealizationState.UNREALIZED
        self._proxy_builder = proxy_builder

    def renew(self) -> "ProxyFactory":
        """Return an unrealized factory for the same entry and proxy builder."""
        return ProxyFactory(self.entry, self._proxy_builder)

    def __call__(self, container: IContainer) -> Any:
        """Build the proxy.

        Raises:
            HandlerConstructionError: If the handler cannot be obtained from the container.
        """
        self.state = RealizationState.REALIZING
        try:
            handler = container.resolve(self.entry.handler_type)
        except Exception as e:
            self.state = RealizationState.UNREALIZED
            raise HandlerConstructionError(self.entry.interface_type, self.entry.handler_type, str(e)) from e

        logger.info(f"Creating proxy for interface: {self.entry.describe(qualified=True)}")
        proxy = self._proxy_builder.build(self.entry.interface_type, handler)
        self.state = RealizationState.REALIZED
        return proxy
