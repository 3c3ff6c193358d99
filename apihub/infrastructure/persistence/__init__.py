"""Persistence adapters (SQLAlchemy async)."""
