"""Schemas Layer: Pydantic models validating data at the API and tool boundaries."""
