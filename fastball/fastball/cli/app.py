"""Main CLI application."""

from __future__ import annotations

import json
import logging
from typing import Optional

import typer
import yaml
from jinja2 import TemplateError
from typing_extensions import Annotated

from ..core.errors import FastballError
from ..core.settings import FastballSettings
from ..generator import ConfigGenerator
from ..reporting import ConsoleReporter
from .parsers import parse_file_mode, parse_root

logger = logging.getLogger(__name__)

# Failures that abort a run with exit code 1 instead of a traceback.
GENERATION_ERRORS = (
    FastballError,
    TemplateError,
    yaml.YAMLError,
    json.JSONDecodeError,
    OSError,
)

app = typer.Typer(
    name="fastball",
    help="Generate environment specific config files from templates.",
)


@app.callback()
def cli() -> None:
    """Fastball build and deploy helpers."""


@app.command()
def config(
    environment: Annotated[
        Optional[str],
        typer.Argument(
            help="Load app_config.ENVIRONMENT.yml/json instead of app_config.yml/json.",
            metavar="ENVIRONMENT",
            show_default=False,
        ),
    ] = None,
    root: Annotated[
        str,
        typer.Option(
            "--root",
            "-C",
            help="Directory holding the templates and app_config (default: cwd).",
            metavar="DIR",
        ),
    ] = "",
    file_mode: Annotated[
        str,
        typer.Option(
            "--mode",
            help="File permissions in octal for newly created files (default: 0644).",
            metavar="OCTAL",
        ),
    ] = "",
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Enable verbose logging.",
        ),
    ] = False,
) -> None:
    """Render .env.erb and config/*.erb into their config files."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="[%(levelname)s] %(message)s",
    )

    settings = FastballSettings()
    environment = environment or settings.environment
    root_path = parse_root(root) if root else settings.root
    mode = parse_file_mode(file_mode) if file_mode else settings.file_mode

    logger.debug(f"Generating config in {root_path} (environment: {environment})")

    generator = ConfigGenerator(
        root=root_path, reporter=ConsoleReporter(), file_mode=mode
    )
    try:
        outputs = generator.generate(environment)
    except GENERATION_ERRORS as exc:
        logger.error(f"{type(exc).__name__}: {exc}")
        raise typer.Exit(code=1) from exc

    logger.debug(f"Completed: {len(outputs)} file(s) written")


def main() -> None:
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
