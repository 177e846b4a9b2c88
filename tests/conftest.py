import logging
import os
from unittest.mock import patch

import pytest

from oopatterns.config import reset_config_manager
from oopatterns.domain.composite import Book, CompositeBox, VideoGame
from oopatterns.domain.singleton import Singleton
from oopatterns.infrastructure.di import DIContainer, reset_container
from oopatterns.infrastructure.logging.logger import _HANDLER_MARKER
from oopatterns.infrastructure.patterns import SingletonRegistry


def _reset_process_state():
    Singleton.reset_instance()
    SingletonRegistry.reset()
    reset_container()
    reset_config_manager()
    root = logging.getLogger()
    for handler in root.handlers[:]:
        if getattr(handler, _HANDLER_MARKER, False):
            root.removeHandler(handler)
            handler.close()


@pytest.fixture(autouse=True)
def isolated_process_state():
    """Each test starts without singletons, containers or OOPATTERNS_* overrides."""
    environ = {k: v for k, v in os.environ.items() if not k.startswith("OOPATTERNS_")}
    with patch.dict(os.environ, environ, clear=True):
        _reset_process_state()
        yield
        _reset_process_state()


@pytest.fixture
def container():
    return DIContainer()


@pytest.fixture
def classroom_tree():
    """The nested box from the classroom example, worth 1500."""
    return CompositeBox(
        VideoGame("1", 100),
        CompositeBox(
            Book("2", 200),
            Book("3", 300),
        ),
        VideoGame("4", 400),
        VideoGame("5", 500),
    )


@pytest.fixture
def order_document():
    return {
        "order": [
            {"type": "composite", "children": [
                {"type": "video_game", "id": "1", "price": 100},
            ]},
            {"type": "composite", "children": [
                {"type": "composite", "children": [
                    {"type": "book", "id": "2", "price": 200},
                    {"type": "book", "id": "3", "price": 300},
                ]},
                {"type": "video_game", "id": "4", "price": 400},
                {"type": "video_game", "id": "5", "price": 500},
            ]},
        ]
    }
