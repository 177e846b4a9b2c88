"""Infrastructure patterns package."""

from oopatterns.infrastructure.patterns.singleton_access import get_singleton
from oopatterns.infrastructure.patterns.singleton_registry import SingletonRegistry

__all__ = ["SingletonRegistry", "get_singleton"]
