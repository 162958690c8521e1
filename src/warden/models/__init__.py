"""Pydantic models describing Warden runs."""
