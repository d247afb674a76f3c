"""README document builder/writer.

Renders a validated ``ProjectRecord`` into Markdown and saves it to the
path chosen by the pipeline.
"""

from __future__ import annotations

from pathlib import Path
from typing import Protocol

from readme_generator.builder.templates import TemplateRenderer
from readme_generator.collector.models import ProjectRecord

README_TEMPLATE = "readme.md.j2"


class DocumentBuilder(Protocol):
    """Anything that can persist a ``ProjectRecord`` at a full file path."""

    def save(self, record: ProjectRecord, full_path: str | Path) -> None:
        ...


class ReadmeBuilder:
    """Renders ``readme.md.j2`` and writes it to disk, overwriting any existing file."""

    def __init__(self, renderer: TemplateRenderer | None = None) -> None:
        self.renderer = renderer or TemplateRenderer()

    def render(self, record: ProjectRecord) -> str:
        """Return the README Markdown for *record* without writing it."""
        return self.renderer.render(README_TEMPLATE, {"project": record})

    def save(self, record: ProjectRecord, full_path: str | Path) -> None:
        self.renderer.render_to_file(README_TEMPLATE, full_path, {"project": record})
