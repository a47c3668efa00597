"""Reactive state for the product screen.

Architecture:
- ProductState: render-state cell plus the fetch task that writes into it
"""

from .product_state import ProductState

__all__ = ["ProductState"]
