"""Controller wiring the product state to the product screen."""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from kece.app.state.product_state import ProductState
    from kece.app.ui.screen import ProductScreen
    from kece.shared.core.state_cell import Unsubscribe

logger = logging.getLogger(__name__)


class ProductController:
    """Bridges the render-state cell to the Flet screen."""

    def __init__(self, state: ProductState, screen: ProductScreen):
        self.state = state
        self.screen = screen
        self._unsubscribe: Optional[Unsubscribe] = None

    def start(self) -> Optional[asyncio.Task]:
        """Bind the screen and trigger the first fetch."""
        if self._unsubscribe is None:
            self._unsubscribe = self.state.render_state.subscribe(self.screen.render)
            logger.info("ProductController bound to render_state")
        return self.state.start_fetch()

    def fetch(self) -> Optional[asyncio.Task]:
        return self.state.start_fetch()

    async def dispose(self) -> None:
        """Unbind the screen and cancel any in-flight fetch."""
        if self._unsubscribe is not None:
            self._unsubscribe()
            self._unsubscribe = None
        await self.state.close()
        logger.info("ProductController disposed")
