"""Pydantic models for todos, users and request payloads."""
