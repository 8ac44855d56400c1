import pytest
from httpx import HTTPError

from flagpoll.clients import AdminClient
from flagpoll.clients.admin import FLAG_LABEL

pytestmark = pytest.mark.unit


@pytest.fixture
def outputs():
    return []


@pytest.fixture
def admin(flag_client, outputs):
    return AdminClient(flag_client, interval=0.05, output=outputs.append)


def test_render(admin):
    assert admin.render() == f"{FLAG_LABEL} [ ] OFF"


@pytest.mark.asyncio
async def test_toggle_sends_negation_and_commits(admin, outputs, mock_http_transport, route_requests):
    route_requests(mock_http_transport, {"feature-flag-1": False}, post_response={"success": True})
    await admin.poller.poll_once()

    committed = await admin.toggle()

    assert committed
    mock_http_transport.request.assert_called_with("POST", "/api/flags", data={"state": True})
    assert admin.flag is True
    assert outputs[-1] == f"{FLAG_LABEL} [x] ON"


@pytest.mark.asyncio
async def test_toggle_from_on_sends_false(admin, mock_http_transport, route_requests):
    route_requests(mock_http_transport, {"feature-flag-1": True}, post_response={"success": True})
    await admin.poller.poll_once()
    assert admin.flag is True

    assert await admin.toggle()

    mock_http_transport.request.assert_called_with("POST", "/api/flags", data={"state": False})
    assert admin.flag is False


@pytest.mark.asyncio
async def test_non_ok_response_leaves_state(admin, outputs, mock_http_transport, route_requests):
    route_requests(mock_http_transport, {"feature-flag-1": False}, post_response=HTTPError("HTTP 500: Database error"))
    admin.draw()
    await admin.poller.poll_once()
    before = list(outputs)

    committed = await admin.toggle()

    assert not committed
    assert admin.flag is False
    assert admin.render() == f"{FLAG_LABEL} [ ] OFF"
    assert outputs == before


@pytest.mark.asyncio
async def test_network_error_leaves_state(admin, mock_http_transport, route_requests):
    route_requests(mock_http_transport, {"feature-flag-1": True}, post_response=ConnectionError("Request failed"))
    await admin.poller.poll_once()

    assert not await admin.toggle()
    assert admin.flag is True


@pytest.mark.asyncio
async def test_rejected_ack_leaves_state(admin, mock_http_transport, route_requests):
    route_requests(mock_http_transport, {"feature-flag-1": False}, post_response={"success": False})
    await admin.poller.poll_once()

    assert not await admin.toggle()
    assert admin.flag is False


@pytest.mark.asyncio
async def test_next_poll_overrides_local_state(admin, mock_http_transport, route_requests):
    """A committed toggle holds only until the service reports something else."""
    route_requests(mock_http_transport, {"feature-flag-1": False}, post_response={"success": True})
    await admin.toggle()
    assert admin.flag is True

    await admin.poller.poll_once()

    assert admin.flag is False
