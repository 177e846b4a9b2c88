"""Textbook singleton with a lazily created, lock-guarded instance."""
import threading
from typing import Optional

from oopatterns.infrastructure.logging.logger import get_logger

logger = get_logger(__name__)


class Singleton:
    """
    Process-wide single instance, created on first access.

    Use ``Singleton.get_instance()`` rather than the constructor. Once the
    instance exists the accessor returns it without locking; the class lock
    is only held while the first instance is being created.
    """

    _instance: Optional["Singleton"] = None
    _lock = threading.Lock()

    @classmethod
    def get_instance(cls) -> "Singleton":
        if cls._instance is None:
            with cls._lock:
                if cls._instance is None:
                    cls._instance = cls()
                    logger.debug("Singleton instance created", instance_id=id(cls._instance))
        return cls._instance

    @classmethod
    def has_instance(cls) -> bool:
        return cls._instance is not None

    @classmethod
    def reset_instance(cls) -> None:
        """Drop the instance so the next access creates a new one."""
        with cls._lock:
            cls._instance = None

    def a_method(self) -> str:
        message = "Inside Singleton::aMethod"
        logger.info(message, instance_id=id(self))
        return message
