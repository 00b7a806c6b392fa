"""Generate environment specific config files from templates.

Fastball looks for templates relative to the generation root (by default the
current working directory):

    .env.erb
    config/*.erb

Each template is rendered against the values in ``app_config.yml`` (or
``app_config.json``; with an environment, ``app_config.<environment>.yml``)
and saved next to the template with the ``.erb`` extension removed::

    config/database.yml.erb  -->  config/database.yml

Templates use ``<%= db.host %>`` to print a value, ``<% if ... %>`` /
``<% for ... %>`` blocks for control flow, and accept ``{{ db.host }}`` as a
shorthand for ``<%= db.host %>``. A missing value file or a template that
references a value the file does not define aborts the run before any file is
written.
"""

from __future__ import annotations

import logging
from functools import cached_property
from pathlib import Path

from .core.errors import OutputCollision
from .core.models import RenderPlan, RenderResult, RenderTask
from .reporting import LoggingReporter, Reporter
from .rendering import engine
from .rendering.discovery import discover_templates
from .rendering.io import atomic_write_text, output_path_for
from .values import ValueDocument, load_values

logger = logging.getLogger(__name__)


class ConfigGenerator:
    """One generation run: values and templates are loaded at most once.

    An instance sticks to the first environment it is given; create a new
    instance to generate for a different environment.
    """

    def __init__(
        self,
        root: Path | None = None,
        reporter: Reporter | None = None,
        file_mode: int = 0o644,
    ) -> None:
        self.root = Path(root) if root is not None else Path.cwd()
        self.reporter = reporter or LoggingReporter()
        self.file_mode = file_mode
        self.environment: str | None = None

    @cached_property
    def values(self) -> ValueDocument:
        return load_values(self.root, self.environment)

    @cached_property
    def plan(self) -> RenderPlan:
        tasks = [
            RenderTask(template_path=path, output_path=output_path_for(path))
            for path in discover_templates(self.root)
        ]
        plan = RenderPlan(root=self.root, tasks=tasks, file_mode=self.file_mode)
        _check_collisions(plan)
        return plan

    def generate(self, environment: str | None = None) -> list[Path]:
        """Render every template, then write every result.

        Returns:
            Written output paths, in discovery order
        """
        if self.environment is None:
            self.environment = environment

        values = self.values

        self.reporter.headline("Rendering config files from provided templates.\n")
        results = self.render_all(values)

        self.reporter.headline("Saving new config files.\n")
        return [self.save_result(result) for result in results]

    def render_all(self, values: ValueDocument) -> list[RenderResult]:
        env = engine.build_environment(self.root)
        results = []
        for task in self.plan.tasks:
            self.reporter.progress(f"rendering '{task.template_path}'")
            results.append(engine.render_template(env, task, values))
        logger.debug(f"Rendered {len(results)} template(s)")
        return results

    def save_result(self, result: RenderResult) -> Path:
        output_path = result.task.output_path
        self.reporter.progress(f"saving '{output_path}'")
        atomic_write_text(
            self.plan.resolve(output_path), result.text, mode=self.plan.file_mode
        )
        return output_path


def _check_collisions(plan: RenderPlan) -> None:
    templates = set(plan.template_paths())
    for task in plan.tasks:
        if task.output_path in templates:
            raise OutputCollision(
                f"{task.template_path} would overwrite template {task.output_path}"
            )


def generate(
    environment: str | None = None,
    *,
    root: Path | None = None,
    reporter: Reporter | None = None,
) -> list[Path]:
    """Run a fresh :class:`ConfigGenerator`. See the module docstring."""
    return ConfigGenerator(root=root, reporter=reporter).generate(environment)
