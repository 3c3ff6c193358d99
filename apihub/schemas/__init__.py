"""Pydantic request/response schemas for the HTTP API.

Schemas convert application DTOs with from_dto() classmethods and never
touch domain entities directly.
"""
