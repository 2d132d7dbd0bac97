from enum import Enum


class Lifetime(str, Enum):
    """Defines the lifetime of a registered dependency.

    Attributes:
        SINGLETON: Built once on first resolution and shared afterwards.
        TRANSIENT: Built anew on each resolution.
    """

    TRANSIENT = "transient"
    SINGLETON = "singleton"

    def __str__(self) -> str:
        return self.value


class RealizationState(str, Enum):
    """Lifecycle of a proxy registry entry.

    Attributes:
        UNREALIZED: Entry registered, no proxy built yet.
        REALIZING: Handler being obtained and proxy being synthesized.
        REALIZED: Proxy built and handed to the container cache.
    """

    UNREALIZED = "unrealized"
    REALIZING = "realizing"
    REALIZED = "realized"

    def __str__(self) -> str:
        return self.value
