"""Pydantic output schemas for API commands."""
