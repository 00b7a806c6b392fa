"""Template discovery by naming convention."""

from __future__ import annotations

import logging
from pathlib import Path

logger = logging.getLogger(__name__)

TEMPLATE_SUFFIX = ".erb"
DOTENV_TEMPLATE = Path(".env.erb")
CONFIG_TEMPLATE_GLOB = "config/*.erb"


def discover_templates(root: Path) -> list[Path]:
    """Return template paths relative to ``root``.

    ``.env.erb`` comes first when present, followed by ``config/*.erb``
    (one level, sorted by name, hidden files skipped). An empty list is a
    valid result.
    """
    found: list[Path] = []

    if (root / DOTENV_TEMPLATE).is_file():
        found.append(DOTENV_TEMPLATE)

    found.extend(
        sorted(
            path.relative_to(root)
            for path in root.glob(CONFIG_TEMPLATE_GLOB)
            if path.is_file() and not path.name.startswith(".")
        )
    )

    logger.debug(f"Discovered {len(found)} template(s) under {root}")
    return found
