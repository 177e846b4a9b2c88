"""
Dependency Injection Container implementation.

The container owns the application's long-lived objects. Registered
singletons are created lazily on first resolution; creation is guarded by
a check-lock-check so concurrent first resolutions still build exactly one
instance, and resolutions after that never take the lock.
"""
from typing import Dict, Any, Type, TypeVar, Optional, Callable, cast, Set
import inspect
import threading
import time
from contextlib import contextmanager
from typing import Iterator

from oopatterns.infrastructure.logging.logger import get_logger
from oopatterns.infrastructure.di.exceptions import (
    DependencyResolutionError,
    UnregisteredDependencyError,
    InstantiationError,
    FactoryError
)

T = TypeVar('T')
logger = get_logger(__name__)


@contextmanager
def timed_operation(operation_name: str) -> Iterator[None]:
    """Context manager to time and log an operation."""
    start_time = time.time()
    try:
        yield
    finally:
        elapsed_time = time.time() - start_time
        logger.debug(f"{operation_name} completed in {elapsed_time:.4f}s")


def _type_name(cls: Any) -> str:
    return cls.__name__ if hasattr(cls, '__name__') else str(cls)


class DIContainer:
    """
    Dependency injection container.

    Three kinds of registration are supported:
    - instances: pre-built objects returned as they are
    - singletons: a class or factory turned into one shared instance on
      first resolution
    - factories: called on every resolution
    Unregistered classes whose constructor parameters are all typed and
    resolvable are built directly.
    """

    def __init__(self):
        self._instances: Dict[Type, Any] = {}
        self._singletons: Dict[Type, Any] = {}
        self._singleton_providers: Dict[Type, Callable[..., Any]] = {}
        self._factories: Dict[Type, Callable[..., Any]] = {}
        self._lock = threading.RLock()

    def is_registered(self, cls: Type) -> bool:
        """
        Check if a type is registered with the container.

        Args:
            cls: Class type to check

        Returns:
            True if the type is registered, False otherwise
        """
        return (
            cls in self._instances or
            cls in self._singletons or
            cls in self._singleton_providers or
            cls in self._factories
        )

    def has(self, service_type: Type[T]) -> bool:
        return self.is_registered(service_type)

    def register_singleton(self, cls: Type[T], implementation_or_factory: Any = None) -> None:
        """
        Register a singleton type.

        Args:
            cls: Class type to register
            implementation_or_factory: Optional implementation class or factory
                function taking the container. Defaults to ``cls`` itself.
        """
        provider = implementation_or_factory or cls
        if not callable(provider):
            raise TypeError(
                f"Singleton provider for {_type_name(cls)} must be a class or factory; "
                f"use register_instance for pre-built objects"
            )
        with self._lock:
            self._singletons.pop(cls, None)
            self._singleton_providers[cls] = provider
        logger.debug(f"Registered singleton {_type_name(cls)}")

    def register_factory(self, cls: Type[T], factory: Callable[..., T]) -> None:
        """
        Register a factory function for a type.

        Args:
            cls: Class type to register
            factory: Factory function taking the container
        """
        self._factories[cls] = factory
        logger.debug(f"Registered factory for {_type_name(cls)}")

    def register_instance(self, cls: Type[T], instance: T) -> None:
        """
        Register a specific instance for a type.

        Args:
            cls: Class type to register
            instance: Instance to use
        """
        self._instances[cls] = instance
        logger.debug(f"Registered instance for {_type_name(cls)}")

    def get(self, cls: Type[T], parent_type: Optional[Type] = None,
            parameter_name: Optional[str] = None,
            dependency_chain: Optional[Set[Type]] = None) -> T:
        """
        Get an instance of the specified type.

        Args:
            cls: Class type to get
            parent_type: Optional parent type that requires this dependency
            parameter_name: Optional parameter name in the parent type
            dependency_chain: Types being resolved, to detect circular dependencies

        Returns:
            Instance of the requested type

        Raises:
            DependencyResolutionError: If the dependency cannot be resolved
        """
        class_name = _type_name(cls)

        if dependency_chain is None:
            dependency_chain = set()
        if cls in dependency_chain:
            raise DependencyResolutionError(
                cls,
                f"Circular dependency detected while resolving {class_name}",
                parent_type,
                parameter_name,
            )
        new_chain = dependency_chain | {cls}

        if cls in self._instances:
            return cast(T, self._instances[cls])

        # Fast path: already built, no lock taken
        if cls in self._singletons:
            return cast(T, self._singletons[cls])

        if cls in self._singleton_providers:
            return cast(T, self._get_singleton(cls, new_chain))

        if cls in self._factories:
            logger.debug(f"Using factory to create instance of {class_name}")
            try:
                return cast(T, self._factories[cls](self))
            except DependencyResolutionError:
                raise
            except Exception as e:
                logger.error(f"Factory failed to create instance of {class_name}: {str(e)}")
                raise FactoryError(cls, f"Factory function failed: {str(e)}", e) from e

        if not isinstance(cls, type):
            raise UnregisteredDependencyError(cls, parent_type, parameter_name)

        logger.debug(f"No registration found for {class_name}, attempting direct creation")
        return self._create_instance(cls, new_chain, parent_type, parameter_name)

    def _get_singleton(self, cls: Type[T], dependency_chain: Set[Type]) -> T:
        with self._lock:
            # Another thread may have finished creation while we waited
            if cls in self._singletons:
                return cast(T, self._singletons[cls])

            provider = self._singleton_providers[cls]
            with timed_operation(f"Create singleton {_type_name(cls)}"):
                if isinstance(provider, type):
                    instance = self._create_instance(provider, dependency_chain)
                else:
                    try:
                        instance = provider(self)
                    except DependencyResolutionError:
                        raise
                    except Exception as e:
                        logger.error(f"Singleton factory failed for {_type_name(cls)}: {str(e)}")
                        raise FactoryError(cls, f"Factory function failed: {str(e)}", e) from e

            self._singletons[cls] = instance
            logger.debug(f"Singleton instance created for {_type_name(cls)}")
            return cast(T, instance)

    def _create_instance(self, cls: Type[T], dependency_chain: Set[Type],
                         parent_type: Optional[Type] = None,
                         parameter_name: Optional[str] = None) -> T:
        """
        Create an instance of the specified type with dependencies.

        Every constructor parameter without a default must be annotated with
        a type the container can resolve.
        """
        class_name = _type_name(cls)
        try:
            signature = inspect.signature(cls.__init__)
        except (ValueError, TypeError) as e:
            raise InstantiationError(cls, f"Failed to get constructor signature: {str(e)}", cause=e) from e

        kwargs = {}
        for name, param in list(signature.parameters.items())[1:]:
            if param.kind in (inspect.Parameter.VAR_POSITIONAL, inspect.Parameter.VAR_KEYWORD):
                continue
            if param.default is not inspect.Parameter.empty:
                continue
            if param.annotation is inspect.Parameter.empty or isinstance(param.annotation, str):
                raise UnregisteredDependencyError(cls, parent_type, parameter_name)
            kwargs[name] = self.get(param.annotation, cls, name, dependency_chain)

        try:
            instance = cls(**kwargs)
        except Exception as e:
            logger.error(f"Failed to instantiate {class_name}: {str(e)}")
            raise InstantiationError(cls, f"Failed to instantiate {class_name}: {str(e)}", cause=e) from e

        logger.debug(f"Successfully created instance of {class_name}")
        return instance

    def unregister(self, cls: Type) -> bool:
        """
        Unregister a dependency.

        Returns:
            True if unregistered, False if not found
        """
        found = False
        with self._lock:
            for registry in (self._instances, self._singletons, self._singleton_providers, self._factories):
                if cls in registry:
                    del registry[cls]
                    found = True
        if found:
            logger.debug(f"Unregistered {_type_name(cls)}")
        return found

    def clear(self) -> None:
        """Clear all registrations."""
        with self._lock:
            self._instances.clear()
            self._singletons.clear()
            self._singleton_providers.clear()
            self._factories.clear()
        logger.debug("Cleared all registrations")


# Global container instance
_container: Optional[DIContainer] = None
_container_lock = threading.Lock()


def get_container() -> DIContainer:
    """
    Get the global container instance.

    Returns:
        Global container instance
    """
    global _container
    if _container is None:
        with _container_lock:
            if _container is None:
                _container = DIContainer()
    return _container


def reset_container() -> None:
    """Discard the global container and everything registered in it."""
    global _container
    with _container_lock:
        if _container is not None:
            _container.clear()
        _container = None
