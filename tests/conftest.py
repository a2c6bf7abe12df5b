import pytest
from unittest.mock import MagicMock
from loguru import logger

from patternkit.core.commands.dispatcher import EventDispatcher
from patternkit.core.locator import sl
from patternkit.receivers import IDocumentOperations, IReceiver


@pytest.fixture
def mock_docs():
    """Receiver double recording every document call."""
    return MagicMock(spec=IDocumentOperations)


@pytest.fixture
def mock_receiver():
    return MagicMock(spec=IReceiver)


@pytest.fixture
def dispatcher():
    return EventDispatcher()


@pytest.fixture
def log_messages():
    """Collect loguru messages emitted during the test."""
    messages = []
    handler_id = logger.add(lambda msg: messages.append(msg.record["message"]), level="DEBUG")
    yield messages
    logger.remove(handler_id)


@pytest.fixture
def fresh_locator():
    sl.reset()
    yield sl
    sl.reset()
