"""Presentation layer - Lambda entrypoint and HTTP response shaping."""
