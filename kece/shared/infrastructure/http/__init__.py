"""HTTP adapters."""

from kece.shared.infrastructure.http.product_client import ProductClient

__all__ = ["ProductClient"]
