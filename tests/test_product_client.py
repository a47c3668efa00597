import httpx
import pytest

from kece.shared.domain.errors import HttpError, NetworkError
from kece.shared.domain.render_state import Err, Ok
from kece.shared.infrastructure.http.product_client import ProductClient

from tests.conftest import ENDPOINT, connection_reset, respond


@pytest.mark.asyncio
async def test_success_returns_body(make_client, requests_seen):
    client = make_client(respond(200, "Shoes"))

    result = await client.fetch_product()

    assert result == Ok("Shoes")
    assert len(requests_seen) == 1
    assert requests_seen[0].method == "GET"
    assert str(requests_seen[0].url) == ENDPOINT
    assert requests_seen[0].content == b""


@pytest.mark.asyncio
async def test_non_2xx_returns_body_as_message(make_client):
    client = make_client(respond(500, "server down"))

    result = await client.fetch_product()

    assert isinstance(result, Err)
    assert result.error.message == "server down"
    assert result.error.kind == "http"
    assert result.error.status_code == 500
    assert isinstance(result.error.cause, HttpError)


@pytest.mark.asyncio
async def test_non_2xx_with_empty_body_falls_back_to_status(make_client):
    client = make_client(respond(404, ""))

    result = await client.fetch_product()

    assert isinstance(result, Err)
    assert result.error.message == "HTTP 404"


@pytest.mark.asyncio
async def test_transport_error_returns_description(make_client):
    client = make_client(connection_reset)

    result = await client.fetch_product()

    assert isinstance(result, Err)
    assert result.error.kind == "network"
    assert "Connection reset by peer" in result.error.message
    assert isinstance(result.error.cause, NetworkError)
    assert isinstance(result.error.cause.cause, httpx.ConnectError)


@pytest.mark.asyncio
async def test_timeout_without_description_uses_type_name(make_client):
    def timeout(request):
        raise httpx.ReadTimeout("", request=request)

    client = make_client(timeout)

    result = await client.fetch_product()

    assert isinstance(result, Err)
    assert result.error.message == "ReadTimeout"


@pytest.mark.asyncio
async def test_each_call_issues_one_request(make_client, requests_seen):
    client = make_client(respond(200, "Shoes"))

    await client.fetch_product()
    await client.fetch_product()

    assert len(requests_seen) == 2


@pytest.mark.asyncio
async def test_owned_client_is_closed_on_exit():
    async with ProductClient(ENDPOINT, timeout=1.0) as client:
        assert client.timeout == 1.0
    assert client._client.is_closed


@pytest.mark.asyncio
async def test_injected_client_is_left_open(make_client):
    client = make_client(respond(200, "Shoes"))

    await client.aclose()

    assert not client._client.is_closed
