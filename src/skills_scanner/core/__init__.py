"""Core utilities shared across the launcher."""
