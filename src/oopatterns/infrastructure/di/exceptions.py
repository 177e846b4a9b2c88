"""Dependency injection exceptions."""
from typing import Any, Optional, Type

from oopatterns.domain.base.exceptions import DomainException


def _type_name(cls: Any) -> str:
    return cls.__name__ if hasattr(cls, '__name__') else str(cls)


class DependencyResolutionError(DomainException):
    """Raised when a dependency cannot be resolved."""
    def __init__(
        self,
        dependency_type: Any,
        message: str,
        parent_type: Optional[Type] = None,
        parameter_name: Optional[str] = None,
        cause: Optional[Exception] = None,
    ):
        super().__init__(message)
        self.dependency_type = dependency_type
        self.parent_type = parent_type
        self.parameter_name = parameter_name
        self.cause = cause


class UnregisteredDependencyError(DependencyResolutionError):
    """Raised when a type was never registered and cannot be built directly."""
    def __init__(self, dependency_type: Any, parent_type: Optional[Type] = None,
                 parameter_name: Optional[str] = None):
        message = f"No registration found for {_type_name(dependency_type)}"
        if parent_type is not None:
            message += f" (required by {_type_name(parent_type)}"
            message += f".{parameter_name})" if parameter_name else ")"
        super().__init__(dependency_type, message, parent_type, parameter_name)


class FactoryError(DependencyResolutionError):
    """Raised when a registered factory fails."""
    def __init__(self, dependency_type: Any, message: str, cause: Optional[Exception] = None):
        super().__init__(dependency_type, message, cause=cause)


class InstantiationError(DependencyResolutionError):
    """Raised when a registered class cannot be instantiated."""
    def __init__(self, dependency_type: Any, message: str, cause: Optional[Exception] = None):
        super().__init__(dependency_type, message, cause=cause)
