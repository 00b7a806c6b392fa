"""Value file loading and access."""

from .document import ValueDocument
from .loader import load_values, resolve_value_file

__all__ = ["ValueDocument", "load_values", "resolve_value_file"]
