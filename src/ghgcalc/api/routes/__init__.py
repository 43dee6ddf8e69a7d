"""Routers grouped by industry."""
