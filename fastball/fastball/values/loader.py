"""Locate and decode the app_config value file."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Callable

import yaml

from ..core.errors import InvalidConfiguration, MissingConfiguration
from .document import ValueDocument

logger = logging.getLogger(__name__)

BASE_NAME = "app_config"


def _decode_yaml(text: str) -> Any:
    data = yaml.safe_load(text)
    return {} if data is None else data


# Checked in order; the first file that exists wins.
DECODERS: tuple[tuple[str, Callable[[str], Any]], ...] = (
    (".yml", _decode_yaml),
    (".json", json.loads),
)


def value_file_stem(environment: str | None = None) -> str:
    """Return ``app_config`` or ``app_config.<environment>``."""
    return f"{BASE_NAME}.{environment}" if environment else BASE_NAME


def resolve_value_file(root: Path, environment: str | None = None) -> Path:
    """Find the value file for ``environment`` under ``root``.

    Raises:
        MissingConfiguration: if no candidate file exists.
    """
    stem = value_file_stem(environment)
    candidates = [root / f"{stem}{suffix}" for suffix, _ in DECODERS]
    for candidate in candidates:
        if candidate.is_file():
            return candidate

    expected = " or ".join(path.name for path in candidates)
    raise MissingConfiguration(f"expecting {expected} to exist in {root}")


def load_values(root: Path, environment: str | None = None) -> ValueDocument:
    """Load the value file for ``environment`` into a ValueDocument.

    Decoder errors (``yaml.YAMLError``, ``json.JSONDecodeError``) are not caught.
    """
    path = resolve_value_file(root, environment)
    decode = dict(DECODERS)[path.suffix]

    logger.debug(f"Loading config values from {path}")
    data = decode(path.read_text(encoding="utf-8"))

    if not isinstance(data, dict):
        raise InvalidConfiguration(
            f"{path.name} must contain a mapping at the top level, got {type(data).__name__}"
        )

    return ValueDocument(data)
