"""Dependency Injection package."""
from .container import (
    DIContainer,
    get_container,
    reset_container
)
from .exceptions import (
    DependencyResolutionError,
    UnregisteredDependencyError,
    FactoryError,
    InstantiationError
)

__all__ = [
    'DIContainer',
    'get_container',
    'reset_container',
    'DependencyResolutionError',
    'UnregisteredDependencyError',
    'FactoryError',
    'InstantiationError'
]
