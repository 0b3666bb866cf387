"""Pydantic models for API request bodies."""
