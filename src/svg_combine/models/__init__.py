"""Pydantic models for configuration and sprite data."""
