"""Presentation layer: HTTP APIs and CLI."""
