"""Progress reporting sinks."""

from __future__ import annotations

import logging
from typing import Protocol

import typer

logger = logging.getLogger("fastball")


class Reporter(Protocol):
    def headline(self, message: str) -> None: ...

    def progress(self, message: str) -> None: ...


class LoggingReporter:
    """Sends messages to the ``fastball`` logger at INFO level."""

    def __init__(self, log: logging.Logger | None = None) -> None:
        self.log = log or logger

    def headline(self, message: str) -> None:
        self.log.info(message.strip())

    def progress(self, message: str) -> None:
        self.log.info(f"  {message.strip()}")


class ConsoleReporter:
    """Writes headlines in bold and progress lines indented to stdout."""

    def headline(self, message: str) -> None:
        typer.secho(message.rstrip("\n"), bold=True)

    def progress(self, message: str) -> None:
        typer.echo(f"  {message}")
