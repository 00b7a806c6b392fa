"""Template rendering engine.

Templates are rendered in a sandbox: expressions can look up config values,
use literals, filters and `<% if %>` / `<% for %>` blocks, but cannot reach
underscore attributes of the values. As with plain ERB, the newline after a
`<% %>` tag is kept; write `-%>` to drop it.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from jinja2 import Environment, FileSystemLoader, StrictUndefined, Template
from jinja2.sandbox import SandboxedEnvironment
from jinja2.utils import missing

from ..core.errors import UndefinedValue
from ..core.models import RenderResult, RenderTask
from .sugar import BraceSugarExtension

logger = logging.getLogger(__name__)

# ERB-style tags: <%= expr %> prints, <% stmt %> controls, <%# ... %> comments.
DELIMITERS = {
    "variable_start_string": "<%=",
    "variable_end_string": "%>",
    "block_start_string": "<%",
    "block_end_string": "%>",
    "comment_start_string": "<%#",
    "comment_end_string": "%>",
}


class StrictValueUndefined(StrictUndefined):
    """Fails with :class:`UndefinedValue` on any use of a missing value."""

    __slots__ = ()

    def __init__(
        self,
        hint: str | None = None,
        obj: Any = missing,
        name: str | None = None,
        exc: type[Exception] = UndefinedValue,
    ) -> None:
        super().__init__(hint, obj, name, exc)

    @property
    def _undefined_message(self) -> str:
        if self._undefined_hint:
            return self._undefined_hint
        if isinstance(self._undefined_obj, Mapping):
            return f"config value {self._undefined_name!r} is missing"
        return super()._undefined_message


def finalize_value(value: Any) -> Any:
    """Print booleans as ``true``/``false`` and null as an empty string."""
    if value is None:
        return ""
    if value is True:
        return "true"
    if value is False:
        return "false"
    return value


def build_environment(root: Path) -> Environment:
    """Create the Jinja2 environment used for one generation run.

    Args:
        root: Directory template names are resolved against

    Returns:
        Environment with sugar preprocessing and strict undefined handling
    """
    return SandboxedEnvironment(
        loader=FileSystemLoader(str(root)),
        undefined=StrictValueUndefined,
        extensions=[BraceSugarExtension],
        autoescape=False,
        finalize=finalize_value,
        keep_trailing_newline=True,
        **DELIMITERS,
    )


def load_template(env: Environment, template_path: Path) -> Template:
    """Load and compile a template by its path relative to the loader root."""
    return env.get_template(template_path.as_posix())


def render_template(
    env: Environment, task: RenderTask, values: Mapping
) -> RenderResult:
    """Render a single task against the config values.

    Raises:
        UndefinedValue: if the template uses a key that is not defined
        jinja2.TemplateSyntaxError: if the template cannot be parsed
    """
    logger.debug(f"Rendering template: {task.template_path}")

    template = load_template(env, task.template_path)
    text = template.render(values)

    return RenderResult(task=task, text=text)
