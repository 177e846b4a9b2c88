"""Process-wide registry holding one instance per class."""

import threading
from typing import Any, Dict, Optional, Type, TypeVar, cast

from oopatterns.infrastructure.logging.logger import get_logger

T = TypeVar("T")
logger = get_logger(__name__)


class SingletonRegistry:
    """
    Registry of singleton instances keyed by class.

    Both the registry itself and every instance it hands out are created
    with check-lock-check: the unlocked read serves every call after the
    first, and the lock is only taken while an instance may still be
    missing.
    """

    _instance: Optional["SingletonRegistry"] = None
    _instance_lock = threading.Lock()

    def __init__(self) -> None:
        self._instances: Dict[Type, Any] = {}
        self._lock = threading.RLock()

    @classmethod
    def get_instance(cls) -> "SingletonRegistry":
        """Get the process-wide registry, creating it on first use."""
        if cls._instance is None:
            with cls._instance_lock:
                if cls._instance is None:
                    cls._instance = cls()
                    logger.debug("Singleton registry created")
        return cls._instance

    @classmethod
    def reset(cls) -> None:
        """Forget the registry and every instance in it."""
        with cls._instance_lock:
            if cls._instance is not None:
                cls._instance.clear()
            cls._instance = None

    def get(self, singleton_class: Type[T], *args: Any, **kwargs: Any) -> T:
        """
        Get the instance of ``singleton_class``, creating it on first use.

        Constructor arguments are only used by the call that creates the
        instance.
        """
        instance = self._instances.get(singleton_class)
        if instance is None:
            with self._lock:
                instance = self._instances.get(singleton_class)
                if instance is None:
                    instance = singleton_class(*args, **kwargs)
                    self._instances[singleton_class] = instance
                    logger.debug("Created singleton instance", singleton=singleton_class.__name__)
        return cast(T, instance)

    def register(self, singleton_class: Type[T], instance: T) -> None:
        """Register a pre-built instance for ``singleton_class``."""
        with self._lock:
            self._instances[singleton_class] = instance

    def has(self, singleton_class: Type) -> bool:
        return singleton_class in self._instances

    def clear(self) -> None:
        with self._lock:
            self._instances.clear()
