"""Product screen.

``describe`` maps a RenderState to what the screen should show; ``ProductScreen``
applies that to its Flet controls.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Optional

import flet as ft

from kece.shared.domain.render_state import Failure, Idle, Loading, RenderState, Success
from kece.app.ui.theme import (
    BG_PAGE,
    CYAN_PRIMARY,
    PRODUCT_TEXT_SIZE,
    PROGRESS_SIZE,
    TEXT_ERROR,
    TEXT_PRODUCT,
    TEXT_SUBTLE,
    VERSION_TEXT_SIZE,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ScreenModel:
    """Visual output for one render state."""

    kind: str
    text: str = ""
    color: Optional[str] = None
    show_progress: bool = False


def describe(state: RenderState) -> ScreenModel:
    """Map a render state to its visual representation."""
    if isinstance(state, Idle):
        return ScreenModel(kind="idle")
    if isinstance(state, Loading):
        return ScreenModel(kind="loading", show_progress=True)
    if isinstance(state, Success):
        return ScreenModel(kind="success", text=state.payload, color=TEXT_PRODUCT)
    if isinstance(state, Failure):
        return ScreenModel(kind="failure", text=state.error.message, color=TEXT_ERROR)
    raise TypeError(f"Unknown render state: {state!r}")


class ProductScreen:
    """Single screen showing blank, a spinner, the product, or a red error."""

    def __init__(
        self,
        refresh: Optional[Callable[[], None]] = None,
        version: Optional[str] = None,
    ) -> None:
        """Build the screen controls.

        Args:
            refresh: Called after every render, normally ``page.update``
            version: Version label to show under the content, if any
        """
        self._refresh = refresh
        self.progress = ft.ProgressRing(
            width=PROGRESS_SIZE,
            height=PROGRESS_SIZE,
            stroke_width=3,
            color=CYAN_PRIMARY,
            visible=False,
        )
        self.message = ft.Text("", size=PRODUCT_TEXT_SIZE, visible=False, selectable=True)
        self.version_label = ft.Text(
            f"Version {version}" if version else "",
            size=VERSION_TEXT_SIZE,
            color=TEXT_SUBTLE,
            visible=bool(version),
        )
        self.model = describe(Idle())
        self.root = ft.Container(
            expand=True,
            bgcolor=BG_PAGE,
            alignment=ft.Alignment(0, 0),
            content=ft.Column(
                [self.progress, self.message, self.version_label],
                horizontal_alignment=ft.CrossAxisAlignment.CENTER,
                alignment=ft.MainAxisAlignment.CENTER,
                tight=True,
                spacing=12,
            ),
        )

    def render(self, state: RenderState) -> None:
        """Apply a render state to the controls and refresh synchronously."""
        model = describe(state)
        self.model = model
        self.progress.visible = model.show_progress
        self.message.value = model.text
        self.message.color = model.color
        self.message.visible = bool(model.text)
        logger.debug(f"Rendered {model.kind}")
        if self._refresh is not None:
            self._refresh()
