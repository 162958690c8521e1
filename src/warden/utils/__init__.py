"""Utility helpers shared across Warden modules."""
