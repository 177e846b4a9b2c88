"""Standard singleton access functions."""

from typing import TypeVar, Type, Any, cast

from oopatterns.infrastructure.di.container import get_container
from oopatterns.infrastructure.logging.logger import get_logger
from oopatterns.infrastructure.patterns.singleton_registry import SingletonRegistry

T = TypeVar("T")


def get_singleton(singleton_class: Type[T], *args: Any, **kwargs: Any) -> T:
    """
    Standard way to get singleton instances.

    This function provides a consistent way to access singleton instances
    throughout the application. Types registered with the DI container are
    resolved there; anything else comes from the SingletonRegistry, which
    creates at most one instance per class.

    Args:
        singleton_class: The class to get an instance of
        *args: Arguments to pass to the constructor if creating a new instance
        **kwargs: Keyword arguments to pass to the constructor if creating a new instance

    Returns:
        The singleton instance
    """
    container = get_container()
    if container.has(singleton_class):
        return cast(T, container.get(singleton_class))

    get_logger(__name__).debug(
        "DI container doesn't have %s, falling back to registry",
        singleton_class.__name__,
    )
    registry = SingletonRegistry.get_instance()
    return registry.get(singleton_class, *args, **kwargs)
