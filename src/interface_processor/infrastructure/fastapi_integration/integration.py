from typing import Any, Callable, Type, TypeVar

from fastapi import Depends, FastAPI, Request

from interface_processor.domain import IContainer

T = TypeVar("T")

APP_STATE_ATTRIBUTE = "interface_container"


def create_fastapi_dependency(container: IContainer, dependency_type: Type[T]) -> Callable[[], T]:
    """Create a FastAPI Depends() callable that resolves from the container.

    For a discovered interface the callable returns its proxy; the proxy is
    realized on the first request that needs it and reused afterwards.

    Args:
        container: The container the interface was registered into.
        dependency_type: The type to resolve when the dependency is called.

    Returns:
        A callable that FastAPI can use with Depends().

    Example:
        >>> enable_interface_processor(Application, container)
        >>> get_greeter = create_fastapi_dependency(container, Greeter)
        >>>
        >>> @app.get("/greet/{name}")
        >>> def greet(name: str, greeter: Greeter = Depends(get_greeter)):
        ...     return {"message": greeter.greeting(name)}
    """

    def dependency() -> T:
        return container.resolve(dependency_type)

    return dependency


def inject(container: IContainer, dependency_type: Type[T]) -> Any:
    """Shortcut for ``Depends(create_fastapi_dependency(container, dependency_type))``."""
    return Depends(create_fastapi_dependency(container, dependency_type))


def attach_container(app: FastAPI, container: IContainer) -> None:
    """Expose ``container`` to dependencies built by :func:`create_app_dependency`."""
    setattr(app.state, APP_STATE_ATTRIBUTE, container)


def create_app_dependency(dependency_type: Type[T]) -> Callable[[Request], T]:
    """Create a dependency resolving from the container attached to the request's app.

    Requires :func:`attach_container` to have been called on the application.

    Example:
        >>> attach_container(app, container)
        >>>
        >>> @app.get("/status")
        >>> def status(api: StatusApi = Depends(create_app_dependency(StatusApi))):
        ...     return api.current()
    """

    def app_dependency(request: Request) -> T:
        container = getattr(request.app.state, APP_STATE_ATTRIBUTE, None)
        if container is None:
            raise RuntimeError("Application has no interface container. Did you forget to call attach_container?")
        return container.resolve(dependency_type)

    return app_dependency
