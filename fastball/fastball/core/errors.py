"""Exception hierarchy for config generation."""

from __future__ import annotations

from jinja2 import UndefinedError


class FastballError(Exception):
    """Base class for errors raised by Fastball itself."""


class MissingConfiguration(FastballError, FileNotFoundError):
    """Raised when no value file exists for the requested environment."""


class InvalidConfiguration(FastballError, ValueError):
    """Raised when a value file decodes to something other than a mapping."""


class UndefinedValue(FastballError, UndefinedError):
    """Raised when a template references a key missing from the value file."""


class OutputCollision(FastballError, ValueError):
    """Raised when a generated file would overwrite a template of the same run."""
