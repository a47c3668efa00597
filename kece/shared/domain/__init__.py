"""
Shared Domain Module
====================

Render states, error taxonomy and the product fetch state machine.
"""

from .errors import HttpError, NetworkError, ProductError, UnexpectedError
from .render_state import (
    IDLE,
    LOADING,
    Err,
    ErrorInfo,
    Failure,
    Idle,
    Loading,
    Ok,
    RenderState,
    Result,
    Success,
)
from .product_stream import product_states

__all__ = [
    # Errors
    "ProductError",
    "NetworkError",
    "HttpError",
    "UnexpectedError",
    # States
    "RenderState",
    "Idle",
    "Loading",
    "Success",
    "Failure",
    "IDLE",
    "LOADING",
    "ErrorInfo",
    # Results
    "Result",
    "Ok",
    "Err",
    # State machine
    "product_states",
]
