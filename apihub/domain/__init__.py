"""Domain layer: entities, enums, value objects and ports.

Nothing in this package imports from application, infrastructure or
presentation code.
"""
