"""Pydantic request/response schemas (the API contract), one module per entity."""
