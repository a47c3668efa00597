"""Kece Market Flet application (state, controllers, UI)."""
