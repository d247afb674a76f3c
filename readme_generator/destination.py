"""Final confirmation and destination directory resolution."""

from __future__ import annotations

from pathlib import Path
from typing import Any

from readme_generator.prompts import PromptService


def confirm(prompts: PromptService) -> bool:
    """Ask whether to go ahead with the README; defaults to yes."""
    return bool(prompts.ask_confirmation("Are you happy to generate the README?", True))


def resolve_destination(prompts: PromptService, default_path: Path) -> Path:
    """Ask for the destination directory and canonicalise it.

    The answer is only canonicalised when it is longer than two characters;
    anything shorter (``""``, ``"."``, ``"~"``) falls back to *default_path*.
    The result is not checked for existence here.
    """
    raw = prompts.ask("Destination Path", str(default_path))
    return canonical_path(raw, default_path)


def canonical_path(raw: Any, default_path: Path) -> Path:
    """Resolve *raw* (symlinks, ``..``) or return *default_path* for short/absent input."""
    if isinstance(raw, str) and len(raw) > 2:
        return Path(raw).expanduser().resolve()
    return default_path
