"""README builder -- renders a ``ProjectRecord`` into a Markdown file.

Quick usage::

    from readme_generator.builder import ReadmeBuilder

    ReadmeBuilder().save(record, "/tmp/README-2024-05-01 09:07.md")
"""

from readme_generator.builder.readme import DocumentBuilder, ReadmeBuilder
from readme_generator.builder.templates import TemplateRenderer

__all__ = [
    "DocumentBuilder",
    "ReadmeBuilder",
    "TemplateRenderer",
]
