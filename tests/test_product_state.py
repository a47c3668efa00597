import asyncio

import httpx
import pytest

from kece.app.state.product_state import ProductState
from kece.shared.domain.render_state import IDLE, LOADING, Failure, Idle, Ok, Success

from tests.conftest import connection_reset, respond


def record(state: ProductState):
    seen = []
    state.render_state.subscribe(seen.append)
    return seen


@pytest.mark.asyncio
async def test_starts_idle(make_client):
    state = ProductState(make_client(respond(200, "Shoes")))

    assert isinstance(state.render_state.value, Idle)
    assert not state.in_flight


@pytest.mark.asyncio
async def test_fetch_forwards_loading_then_success(make_client):
    state = ProductState(make_client(respond(200, "Shoes")))
    seen = record(state)

    await state.start_fetch()

    assert seen == [IDLE, LOADING, Success("Shoes")]
    assert state.render_state.value == Success("Shoes")


@pytest.mark.asyncio
async def test_fetch_forwards_transport_failure(make_client):
    state = ProductState(make_client(connection_reset))
    seen = record(state)

    await state.start_fetch()

    assert seen[:2] == [IDLE, LOADING]
    assert isinstance(seen[2], Failure)
    assert "Connection reset by peer" in seen[2].error.message


@pytest.mark.asyncio
async def test_sequential_fetches_produce_independent_sequences(make_client, requests_seen):
    bodies = iter(["Shoes", "Hats"])
    state = ProductState(make_client(lambda request: httpx.Response(200, text=next(bodies))))
    seen = record(state)

    await state.start_fetch()
    await state.start_fetch()

    assert seen == [IDLE, LOADING, Success("Shoes"), LOADING, Success("Hats")]
    assert len(requests_seen) == 2


@pytest.mark.asyncio
async def test_fetch_while_in_flight_is_ignored():
    release = asyncio.Event()

    class GatedClient:
        calls = 0

        async def fetch_product(self):
            GatedClient.calls += 1
            await release.wait()
            return Ok("Shoes")

    state = ProductState(GatedClient())
    seen = record(state)

    first = state.start_fetch()
    await asyncio.sleep(0)
    second = state.start_fetch()

    assert second is first
    assert state.in_flight

    release.set()
    await state.wait()

    assert GatedClient.calls == 1
    assert seen == [IDLE, LOADING, Success("Shoes")]
    assert not state.in_flight


@pytest.mark.asyncio
async def test_close_cancels_and_suppresses_delivery():
    started = asyncio.Event()

    class HangingClient:
        async def fetch_product(self):
            started.set()
            await asyncio.sleep(10)

    state = ProductState(HangingClient())
    seen = record(state)

    task = state.start_fetch()
    await started.wait()
    await state.close()

    assert task.cancelled()
    assert seen == [IDLE, LOADING]
    assert state.start_fetch() is None


@pytest.mark.asyncio
async def test_wait_without_fetch_returns(make_client):
    state = ProductState(make_client(respond(200, "Shoes")))

    await state.wait()

    assert state.render_state.value == IDLE
