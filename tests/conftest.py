"""Shared fixtures for fastball tests."""

from __future__ import annotations

from pathlib import Path

import pytest


class RecordingReporter:
    """Reporter that keeps every message for assertions."""

    def __init__(self) -> None:
        self.messages: list[tuple[str, str]] = []

    def headline(self, message: str) -> None:
        self.messages.append(("headline", message))

    def progress(self, message: str) -> None:
        self.messages.append(("progress", message))

    @property
    def progress_lines(self) -> list[str]:
        return [message for kind, message in self.messages if kind == "progress"]


def write(root: Path, relative: str, text: str) -> Path:
    path = root / relative
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    return path


@pytest.fixture
def project(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Empty project directory that is also the working directory."""
    monkeypatch.chdir(tmp_path)
    for name in ("FASTBALL_ENVIRONMENT", "FASTBALL_ROOT", "FASTBALL_FILE_MODE"):
        monkeypatch.delenv(name, raising=False)
    return tmp_path


@pytest.fixture
def reporter() -> RecordingReporter:
    return RecordingReporter()


def output_files(root: Path) -> set[str]:
    """Relative paths of every non-template file under ``root``."""
    return {
        path.relative_to(root).as_posix()
        for path in root.rglob("*")
        if path.is_file()
        and not path.name.endswith(".erb")
        and not path.name.startswith("app_config")
    }
