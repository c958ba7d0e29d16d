"""Backend-specific entity dictionaries."""
