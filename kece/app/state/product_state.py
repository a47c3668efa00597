"""Product screen state holder.

Owns the render-state cell and the fetch task that writes into it.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Optional

from kece.shared.core.state_cell import StateCell
from kece.shared.domain.product_stream import product_states
from kece.shared.domain.render_state import IDLE, RenderState
from kece.shared.infrastructure.http.product_client import ProductClient

logger = logging.getLogger(__name__)


class ProductState:
    """Reactive state for the product screen.

    ``render_state`` starts at ``Idle``. Each fetch writes ``Loading`` and then
    one terminal state into it. A fetch requested while another is still in
    flight is ignored and the pending task is returned instead.
    """

    def __init__(self, client: ProductClient) -> None:
        """Initialize product state.

        Args:
            client: The application's product client
        """
        self.client = client
        self.render_state: StateCell[RenderState] = StateCell(IDLE, name="render_state")
        self._task: Optional[asyncio.Task] = None

    @property
    def in_flight(self) -> bool:
        return self._task is not None and not self._task.done()

    def start_fetch(self) -> Optional[asyncio.Task]:
        """Start a fetch on the running event loop.

        Returns:
            The fetch task, the already pending one if a fetch is in flight,
            or None once the state has been closed.
        """
        if self.render_state.closed:
            logger.debug("start_fetch ignored: state closed")
            return None
        if self.in_flight:
            logger.info("Fetch already in flight; ignoring new request")
            return self._task

        self._task = asyncio.create_task(self._collect(), name="product-fetch")
        return self._task

    async def wait(self) -> None:
        """Wait for the current fetch, if any, to finish."""
        if self._task is not None:
            await asyncio.gather(self._task, return_exceptions=True)

    async def close(self) -> None:
        """Cancel the in-flight fetch and stop delivering updates."""
        self.render_state.close()
        task, self._task = self._task, None
        if task is not None and not task.done():
            task.cancel()
            await asyncio.gather(task, return_exceptions=True)
            logger.info("In-flight product fetch cancelled")

    async def _collect(self) -> None:
        async for state in product_states(self.client):
            self.render_state.set(state)
