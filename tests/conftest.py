import logging
from typing import Any, Optional
from unittest.mock import Mock, AsyncMock

import pytest

from flagpoll.config import SettingsManager
from flagpoll.services import FlagClient
from flagpoll.utils.logs import setup_logging
from flagpoll.services.transport import HTTPTransport


@pytest.fixture(scope="session", autouse=True)
def configure_logging_fixture():
    setup_logging("DEBUG")
    yield
    # Teardown: Close all handlers to release file resources
    logger = logging.getLogger()
    handlers = logger.handlers[:]
    for handler in handlers:
        handler.close()
        logger.removeHandler(handler)


@pytest.fixture(autouse=True)
def reset_settings():
    SettingsManager.reset()
    yield
    SettingsManager.reset()


@pytest.fixture
def mock_http_transport():
    transport = Mock(spec=HTTPTransport)
    transport.request = AsyncMock()
    return transport


@pytest.fixture
def flag_client(mock_http_transport) -> FlagClient:
    return FlagClient(http=mock_http_transport)


@pytest.fixture
def route_requests():
    def route(transport: Mock, flags: dict[str, Any], post_response: Optional[Any] = None) -> None:
        """Answer GETs with ``flags`` and POSTs with ``post_response`` (or the raised exception)."""

        async def request(method, endpoint, data=None, params=None):
            if method == "GET":
                return dict(flags)
            if isinstance(post_response, Exception):
                raise post_response
            return post_response

        transport.request.side_effect = request

    return route
