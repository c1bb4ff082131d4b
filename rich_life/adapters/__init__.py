"""Adapters exposing the dashboard to users."""

__all__: list[str] = []
