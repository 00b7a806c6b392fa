"""Core models, settings and errors."""
