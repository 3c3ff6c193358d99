"""Core application layer.

Cross-cutting building blocks shared by every other layer:
settings, the Result type, base error classes, and the DI container.
"""
