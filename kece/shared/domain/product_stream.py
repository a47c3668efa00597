"""Turns one product fetch into a sequence of render states."""

from __future__ import annotations

import logging
from typing import Any, AsyncIterator

from .errors import UnexpectedError
from .render_state import (
    LOADING,
    Err,
    ErrorInfo,
    Failure,
    Ok,
    RenderState,
    Success,
)

logger = logging.getLogger(__name__)


async def product_states(client: Any) -> AsyncIterator[RenderState]:
    """Yield ``Loading`` followed by exactly one terminal state.

    The client is not called until the first element has been consumed.
    Anything raised while calling the client, including a client that cannot
    be called at all, becomes a ``Failure``. Cancellation propagates.

    Args:
        client: Object with an async ``fetch_product()`` returning ``Ok``/``Err``
    """
    yield LOADING

    try:
        result = await client.fetch_product()
    except Exception as exc:
        logger.exception("Product fetch raised")
        yield Failure(ErrorInfo.from_exception(exc))
        return

    if isinstance(result, Ok):
        yield Success(str(result.value))
    elif isinstance(result, Err):
        yield Failure(result.error)
    else:
        error = UnexpectedError(f"Unsupported fetch result: {result!r}")
        logger.error(error.message)
        yield Failure(ErrorInfo.from_exception(error))
