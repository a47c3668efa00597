"""Shared fixtures: product clients backed by httpx.MockTransport."""

from typing import Callable, List

import httpx
import pytest

from kece.shared.infrastructure.http.product_client import ProductClient

ENDPOINT = "https://marketfake.test/product"


@pytest.fixture
def requests_seen() -> List[httpx.Request]:
    return []


@pytest.fixture
def make_client(requests_seen) -> Callable[..., ProductClient]:
    """Build a ProductClient whose transport calls ``handler``."""

    def factory(handler: Callable[[httpx.Request], httpx.Response]) -> ProductClient:
        def recording(request: httpx.Request) -> httpx.Response:
            requests_seen.append(request)
            return handler(request)

        http_client = httpx.AsyncClient(transport=httpx.MockTransport(recording))
        return ProductClient(ENDPOINT, http_client=http_client)

    return factory


def respond(status: int, body: str) -> Callable[[httpx.Request], httpx.Response]:
    return lambda request: httpx.Response(status, text=body)


def connection_reset(request: httpx.Request) -> httpx.Response:
    raise httpx.ConnectError("Connection reset by peer", request=request)
