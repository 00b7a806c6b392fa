"""Domain models for a single config generation run."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, Field


class RenderTask(BaseModel):
    """A template and the file it generates."""

    template_path: Path = Field(..., description="Template path relative to the root")
    output_path: Path = Field(..., description="Output path relative to the root")


class RenderResult(BaseModel):
    """Rendered text for one task, held until the write phase."""

    task: RenderTask
    text: str


class RenderPlan(BaseModel):
    """Everything discovered for one run, in discovery order."""

    root: Path = Field(default_factory=Path.cwd, description="Generation root")
    tasks: list[RenderTask] = Field(default_factory=list, description="Render tasks")
    file_mode: int = Field(default=0o644, description="Mode for newly created files")

    def template_paths(self) -> list[Path]:
        return [task.template_path for task in self.tasks]

    def resolve(self, path: Path) -> Path:
        """Return ``path`` anchored at the plan root unless already absolute."""
        return path if path.is_absolute() else self.root / path
