"""Tests for get_singleton."""
from unittest.mock import patch

from oopatterns.domain.singleton import Singleton
from oopatterns.infrastructure.di import get_container
from oopatterns.infrastructure.patterns import SingletonRegistry, get_singleton


class Service:
    pass


class TestGetSingleton:
    """Test container-first singleton access."""

    def test_uses_container_registration(self):
        container = get_container()
        container.register_singleton(Singleton, lambda c: Singleton.get_instance())

        instance = get_singleton(Singleton)
        assert instance is Singleton.get_instance()
        assert not SingletonRegistry.get_instance().has(Singleton)

    def test_falls_back_to_registry(self):
        first = get_singleton(Service)
        assert get_singleton(Service) is first
        assert SingletonRegistry.get_instance().has(Service)

    def test_container_is_consulted_first(self):
        container = get_container()
        service = Service()
        container.register_instance(Service, service)
        with patch.object(SingletonRegistry, "get_instance") as registry:
            assert get_singleton(Service) is service
        registry.assert_not_called()
