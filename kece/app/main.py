"""Kece Market - Main application entry point."""

from __future__ import annotations

import logging
import logging.handlers
from pathlib import Path
from typing import Optional

import flet as ft

from kece.app.controllers.product_controller import ProductController
from kece.app.state.product_state import ProductState
from kece.app.ui.screen import ProductScreen
from kece.app.ui.theme import BG_PAGE
from kece.shared.core.configuration import AppConfig, load_config
from kece.shared.infrastructure.http.product_client import ProductClient

logger = logging.getLogger(__name__)


def configure_logging(level: str = "INFO", log_dir: Optional[Path] = None) -> Path:
    """Configure root logging.

    File handler: everything at ``level`` to ``<log_dir>/kece.log``.
    Console handler: only WARNING and ERROR.

    Returns:
        Path of the log file
    """
    log_dir = log_dir or Path("data/logs")
    log_dir.mkdir(parents=True, exist_ok=True)
    log_file_path = log_dir / "kece.log"
    file_log_level = getattr(logging, level.upper(), logging.INFO)

    root_logger = logging.getLogger()
    root_logger.setLevel(file_log_level)
    # Remove existing handlers to avoid duplicates
    root_logger.handlers.clear()

    file_handler = logging.handlers.RotatingFileHandler(
        log_file_path,
        maxBytes=10 * 1024 * 1024,  # 10MB
        backupCount=5,
        encoding='utf-8'
    )
    file_handler.setLevel(file_log_level)
    file_handler.setFormatter(logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(funcName)s:%(lineno)d - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S"
    ))
    root_logger.addHandler(file_handler)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(logging.WARNING)
    console_handler.setFormatter(logging.Formatter(
        "%(asctime)s - %(levelname)s - %(message)s",
        datefmt="%H:%M:%S"
    ))
    root_logger.addHandler(console_handler)

    # Suppress verbose third-party library logs
    for name in ("httpx", "httpcore", "flet", "flet_controls", "flet_transport"):
        logging.getLogger(name).setLevel(logging.WARNING)

    logger.info(f"Logging configured: file={log_file_path}, console=WARNING+")
    return log_file_path


async def main(
    page: ft.Page,
    config: AppConfig,
    client: Optional[ProductClient] = None,
) -> ProductController:
    """Build the product screen for one Flet session.

    Teardown runs only when Flet closes the session. A web client that
    disconnects (page refresh, sleep) resumes the same session.

    Returns:
        The controller driving the screen
    """
    logger.info("Initializing Kece Market...")
    page.title = "Kece Market"
    page.bgcolor = BG_PAGE
    page.padding = 0

    client = client or ProductClient(config.endpoint_url, timeout=config.request_timeout)
    state = ProductState(client)
    screen = ProductScreen(
        refresh=page.update,
        version=config.app_version if config.show_version else None,
    )
    controller = ProductController(state, screen)

    async def teardown(e=None) -> None:
        await controller.dispose()
        await client.aclose()
        logger.info("Session closed")

    page.on_close = teardown

    page.add(screen.root)
    controller.start()
    logger.info("Application initialized successfully")
    return controller


def run() -> None:
    """Console entry point: load configuration, configure logging, start Flet."""
    config = load_config()
    configure_logging(config.log_level, Path(config.log_dir))

    async def target(page: ft.Page) -> None:
        await main(page, config)

    if config.web_mode:
        logger.info(f"Starting Flet app in WEB mode on port {config.port}")
        ft.run(target, view=ft.AppView.FLET_APP_WEB, port=config.port, host="127.0.0.1")
    else:
        logger.info("Starting Flet app in DESKTOP mode")
        ft.run(target, view=ft.AppView.FLET_APP)


if __name__ == "__main__":
    run()
