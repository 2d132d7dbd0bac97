from typing import TYPE_CHECKING, Any, Callable, Type

from pydantic import BaseModel, ConfigDict, Field

from interface_processor.domain.enums import Lifetime
from interface_processor.domain.interfaces import MethodInterceptor

if TYPE_CHECKING:
    from interface_processor.domain.interfaces import IContainer


class Registration(BaseModel):
    """Value object representing a container registration.

    Attributes:
        name: Unique registration name.
        dependency_type: The type the builder provides.
        builder: Factory function that receives container and returns instance.
        lifetime: How long the instance should live.
        primary: Whether this registration wins ambiguous type lookups.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    name: str = Field(..., min_length=1, description="Unique name of the registration.")
    dependency_type: Type = Field(..., description="The dependency type to be registered.")
    builder: Callable[["IContainer"], Any] = Field(
        ..., description="The builder function to create an instance of the class."
    )
    lifetime: Lifetime = Field(..., description="The lifetime of the registered dependency.")
    primary: bool = Field(default=False, description="Preferred candidate when a type matches several entries.")


class DependencyMetadata(BaseModel):
    """Tracks registration details and resolution statistics.

    Attributes:
        registration: The registration configuration.
        resolution_count: Number of times this dependency has been resolved.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    registration: Registration = Field(..., description="The registration details of the dependency.")
    resolution_count: int = Field(
        default=0,
        description="Number of times this dependency has been resolved.",
    )


class RegistryEntry(BaseModel):
    """A discovered interface paired with the handler that implements it.

    Attributes:
        name: Registration name, the interface's simple name.
        interface_type: The discovered interface.
        handler_type: The interceptor class backing the proxy.
        primary: Always true so the proxy wins type lookups.
        lifetime: Always singleton; the proxy is built once.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    name: str = Field(..., min_length=1, description="Registration name of the proxy.")
    interface_type: Type = Field(..., description="The interface the proxy implements.")
    handler_type: Type[MethodInterceptor] = Field(..., description="The handler receiving proxied calls.")
    primary: bool = Field(default=True, description="Whether the proxy is the primary provider of its type.")
    lifetime: Lifetime = Field(default=Lifetime.SINGLETON, description="Lifetime of the proxy.")

    @classmethod
    def for_interface(cls, interface_type: Type, handler_type: Type[MethodInterceptor]) -> "RegistryEntry":
        return cls(name=interface_type.__name__, interface_type=interface_type, handler_type=handler_type)

    def describe(self, qualified: bool = False) -> str:
        interface = self.interface_type
        label = f"{interface.__module__}.{interface.__qualname__}" if qualified else interface.__name__
        return f"{label} -> {self.handler_type.__name__}"
