"""Shared pytest fixtures for the README Generator test suite.

Provides reusable fixtures for:
- Scripted prompt answers (no terminal interaction)
- A recording document builder
- A fixed clock
- Sample ``composer.json`` manifests
"""

from __future__ import annotations

import json
from collections.abc import Sequence
from datetime import datetime
from pathlib import Path
from typing import Any, Optional

import pytest

from readme_generator.collector.models import ProjectRecord
from readme_generator.config import Config, Defaults


# ---------------------------------------------------------------------------
# Test doubles
# ---------------------------------------------------------------------------

class ScriptedPrompts:
    """``PromptService`` that replays pre-recorded answers.

    ``None`` in *answers* means "just press Enter", i.e. take the default.
    Every call is recorded in ``calls`` as ``(method, text, default)``.
    """

    def __init__(self, answers: Sequence[Optional[str]] = (), confirm: bool = True) -> None:
        self.answers = list(answers)
        self.confirm = confirm
        self.calls: list[tuple[str, str, Any]] = []

    def _next(self, default: Optional[str]) -> str:
        answer = self.answers.pop(0) if self.answers else None
        if answer is None:
            return default if default is not None else ""
        return answer

    def ask(self, text: str, default: Optional[str] = None) -> str:
        self.calls.append(("ask", text, default))
        return self._next(default)

    def ask_choice(self, text: str, choices: Sequence[str], default: str) -> str:
        self.calls.append(("ask_choice", text, default))
        return self._next(default)

    def ask_confirmation(self, text: str, default: bool = True) -> bool:
        self.calls.append(("ask_confirmation", text, default))
        return self.confirm


class RecordingBuilder:
    """``DocumentBuilder`` that records calls instead of writing files."""

    def __init__(self) -> None:
        self.saved: list[tuple[ProjectRecord, Path]] = []

    def save(self, record: ProjectRecord, full_path: str | Path) -> None:
        self.saved.append((record, Path(full_path)))


# ---------------------------------------------------------------------------
# Answers & records
# ---------------------------------------------------------------------------

FIELD_ANSWERS: list[Optional[str]] = [
    "Readme Generator",
    "Generate READMEs in seconds",
    "An interactive README generator.",
    "* Python 3.10",
    "Ada Lovelace",
    "ada@example.com",
    "https://ada.example.com",
    "ada",
    "MIT",
]


@pytest.fixture
def field_answers() -> list[Optional[str]]:
    """A fresh copy of valid answers for the nine fields, in prompt order."""
    return list(FIELD_ANSWERS)


@pytest.fixture
def sample_record() -> ProjectRecord:
    return ProjectRecord(
        name="Readme Generator",
        heading="Generate READMEs in seconds",
        description="An interactive README generator.",
        requirements="* Python 3.10",
        author="Ada Lovelace",
        email="ada@example.com",
        webpage="https://ada.example.com",
        github="ada",
        license="MIT",
    )


@pytest.fixture
def recording_builder() -> RecordingBuilder:
    return RecordingBuilder()


@pytest.fixture
def fixed_now() -> datetime:
    return datetime(2024, 5, 1, 9, 7, 42)


@pytest.fixture
def config(tmp_path: Path) -> Config:
    """Config whose default destination is an existing temp directory."""
    return Config(
        manifest_path=tmp_path / "composer.json",
        defaults=Defaults(destination_path=tmp_path),
    )


# ---------------------------------------------------------------------------
# Manifests
# ---------------------------------------------------------------------------

SAMPLE_MANIFEST: dict[str, Any] = {
    "name": "acme/php-readme-generator",
    "description": "Generate a README from the command line.",
    "homepage": "https://acme.example.com",
    "license": "GPL-3.0",
    "require": {"php": ">=8.0"},
    "authors": [
        {
            "name": "Grace Hopper",
            "email": "grace@example.com",
            "homepage": "https://grace.example.com",
        }
    ],
}


@pytest.fixture
def sample_manifest(tmp_path: Path) -> Path:
    """A ``composer.json`` written to tmp_path."""
    path = tmp_path / "composer.json"
    path.write_text(json.dumps(SAMPLE_MANIFEST, indent=2), encoding="utf-8")
    return path


@pytest.fixture
def make_prompts():
    """Factory fixture: ``make_prompts(answers, confirm=True)`` -> ``ScriptedPrompts``."""
    return ScriptedPrompts
