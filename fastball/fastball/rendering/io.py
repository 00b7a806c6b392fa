"""File I/O operations for rendering."""

from __future__ import annotations

import os
import stat
import tempfile
from pathlib import Path

from .discovery import TEMPLATE_SUFFIX


def output_path_for(template_path: Path) -> Path:
    """Strip one trailing template suffix: ``a.yml.erb`` -> ``a.yml``.

    Raises:
        ValueError: if the path does not end with the template suffix
    """
    name = template_path.name
    if not name.endswith(TEMPLATE_SUFFIX) or name == TEMPLATE_SUFFIX:
        raise ValueError(f"Not a template path: {template_path}")
    return template_path.with_name(name[: -len(TEMPLATE_SUFFIX)])


def ensure_parent(path: Path) -> None:
    """Ensure parent directories exist for the given path.

    Args:
        path: Path whose parent directories should be created
    """
    path.parent.mkdir(parents=True, exist_ok=True)


def atomic_write_text(path: Path, text: str, mode: int = 0o644) -> None:
    """Write text to a file atomically using a temporary file.

    An existing file keeps its permission bits; ``mode`` applies to new files.

    Args:
        path: Destination file path
        text: Text content to write
        mode: File permissions (octal) for a newly created file
    """
    # Write through a symlink to its target, like a plain overwrite would.
    if path.is_symlink():
        path = path.resolve()

    ensure_parent(path)

    if path.exists():
        mode = stat.S_IMODE(path.stat().st_mode)

    fd, tmp_name = tempfile.mkstemp(prefix=f".{path.name}.", dir=str(path.parent))
    try:
        with os.fdopen(fd, "w", encoding="utf-8", newline="") as tmp:
            tmp.write(text)
            tmp.flush()
            os.fsync(tmp.fileno())
        os.chmod(tmp_name, mode)
        os.replace(tmp_name, path)
    finally:
        if os.path.exists(tmp_name):
            os.remove(tmp_name)
