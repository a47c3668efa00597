"""
Shared Infrastructure Module
=============================

Technical adapters for external systems.
"""

from kece.shared.infrastructure.http.product_client import ProductClient

__all__ = ["ProductClient"]
