"""Application bootstrap - DI-based architecture."""

from __future__ import annotations

from typing import Optional, Type, TypeVar

from oopatterns.config import AppConfig, ConfigurationManager, get_config_manager
from oopatterns.domain.composite import CompositeBox, DeliveryService
from oopatterns.domain.singleton import Singleton
from oopatterns.infrastructure.di import DIContainer, get_container
from oopatterns.infrastructure.logging.logger import get_logger, setup_logging

T = TypeVar("T")


def register_services(container: DIContainer, config_manager: ConfigurationManager) -> DIContainer:
    """Register the application's services with ``container``."""
    container.register_instance(ConfigurationManager, config_manager)
    container.register_instance(AppConfig, config_manager.app_config)
    # The container owns the process-wide Singleton
    container.register_singleton(Singleton, lambda c: Singleton.get_instance())
    # A fresh, empty order for every consumer
    container.register_factory(DeliveryService, lambda c: DeliveryService(CompositeBox()))
    return container


class Application:
    """Process-level context created once at startup."""

    def __init__(self, config_path: Optional[str] = None,
                 container: Optional[DIContainer] = None,
                 log_level: Optional[str] = None) -> None:
        """Initialize the instance."""
        self.config_path = config_path
        self.log_level = log_level
        self._container = container
        self._config_manager: Optional[ConfigurationManager] = None
        self._initialized = False
        self.logger = get_logger(__name__)

    @property
    def container(self) -> DIContainer:
        self._ensure_initialized()
        return self._container

    @property
    def config(self) -> AppConfig:
        self._ensure_initialized()
        return self._config_manager.app_config

    def initialize(self) -> bool:
        """Load configuration, set up logging and register services."""
        if self._initialized:
            return True

        self._config_manager = get_config_manager(self.config_path)
        app_config = self._config_manager.get_typed(AppConfig)

        logging_config = app_config.logging
        if self.log_level:
            logging_config = type(logging_config).model_validate(
                {**logging_config.model_dump(), "level": self.log_level}
            )
        setup_logging(logging_config)

        if self._container is None:
            self._container = get_container()
        register_services(self._container, self._config_manager)

        self._initialized = True
        self.logger.info(
            "Application initialized",
            environment=app_config.environment,
            config_file=self.config_path,
        )
        return True

    def get_service(self, service_type: Type[T]) -> T:
        """Resolve a service from the application's container."""
        return self.container.get(service_type)

    def shutdown(self) -> None:
        if self._container is not None:
            self._container.clear()
        self._initialized = False
        self.logger.info("Application shut down")

    def _ensure_initialized(self) -> None:
        if not self._initialized:
            self.initialize()
