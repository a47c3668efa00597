"""
Kece Market Shared Kernel
=========================

Architecture:
- core: latest-value state cell, configuration
- infrastructure: HTTP adapter for the product endpoint
- domain: render states, error taxonomy, the fetch state machine
"""
