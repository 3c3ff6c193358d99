"""Presentation layer (HTTP)."""
