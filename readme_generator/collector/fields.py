"""Field collector: one prompt per README field, validated in order.

Collection stops at the first rejected field and returns a ``FieldFailure``
describing it; otherwise a complete ``ProjectRecord`` is returned. Nothing
is re-prompted here, the user re-runs the command instead.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Optional

from readme_generator.collector.models import (
    DefaultValues,
    FailureKind,
    FieldFailure,
    ProjectRecord,
    ValidationOutcome,
)
from readme_generator.collector.validators import (
    is_field_filled,
    is_valid_email,
    is_valid_url,
)
from readme_generator.config import LICENSE_CODES, Defaults
from readme_generator.prompts import PromptService


@dataclass(frozen=True)
class _FieldStep:
    field: str
    prompt: Callable[[], Optional[str]]
    empty_message: str
    validator: Optional[Callable[[Optional[str]], bool]] = None
    invalid_message: str = ""


class FieldCollector:
    """Prompts for every ``ProjectRecord`` field in a fixed order.

    Attributes:
        prompts: Prompt service used for every question.
        defaults: Manifest-derived defaults, read once before collection.
        fallbacks: Built-in constants used when the manifest is silent.
        license_codes: Ordered license codes offered in the choice menu.
    """

    def __init__(
        self,
        prompts: PromptService,
        defaults: DefaultValues | None = None,
        fallbacks: Defaults | None = None,
        license_codes: tuple[str, ...] = LICENSE_CODES,
    ) -> None:
        self.prompts = prompts
        self.defaults = defaults or DefaultValues()
        self.fallbacks = fallbacks or Defaults()
        self.license_codes = license_codes

    def collect(self) -> ValidationOutcome:
        """Run every prompt and return the record or the first failure."""
        values: dict[str, str] = {}
        for step in self._steps():
            value = step.prompt()
            if not is_field_filled(value):
                return FieldFailure(
                    kind=FailureKind.EMPTY_FIELD, field=step.field, message=step.empty_message
                )
            if step.validator is not None and not step.validator(value):
                return FieldFailure(
                    kind=FailureKind.INVALID_INPUT, field=step.field, message=step.invalid_message
                )
            values[step.field] = value
        return ProjectRecord(**values)

    # ------------------------------------------------------------------
    # Field definitions
    # ------------------------------------------------------------------

    def _steps(self) -> list[_FieldStep]:
        ask = self.prompts.ask
        d = self.defaults
        return [
            _FieldStep(
                "name",
                lambda: ask("Project Name", d.name),
                "Mention a name for your project 😺",
            ),
            _FieldStep(
                "heading",
                lambda: ask("Project Heading/Summary"),
                "Mention the README heading or a small summary.",
            ),
            _FieldStep(
                "description",
                lambda: ask("Project Description", d.description),
                "Describe a bit your project.",
            ),
            _FieldStep(
                "requirements",
                lambda: ask("Requirements / Installation?", d.requirements),
                "What are the requirements/Installation steps for this project?",
            ),
            _FieldStep(
                "author",
                lambda: ask("Author Name", d.author or self.fallbacks.author),
                "Author name is required.",
            ),
            _FieldStep(
                "email",
                lambda: ask(
                    "Valid Author Email (will also be used for your gravatar)",
                    d.email or self.fallbacks.email,
                ),
                "Author email is required.",
                is_valid_email,
                "Please mention a valid email 😀",
            ),
            _FieldStep(
                "webpage",
                lambda: ask("Valid Author Webpage (e.g. https://pierre.com)", d.webpage),
                "Can you mention your homepage (.e.g website, GitHub profile, etc)?",
                is_valid_url,
                "Please mention a valid website URL 😄",
            ),
            _FieldStep(
                "github",
                lambda: ask("GitHub Username (github.com/<username>)", self.fallbacks.github),
                "GitHub nickname is required.",
            ),
            _FieldStep(
                "license",
                self._ask_license,
                "License type is required.",
            ),
        ]

    def _ask_license(self) -> str:
        # Membership is left to the choice prompt; only emptiness is checked.
        default = self.defaults.license or self.fallbacks.license_code
        return self.prompts.ask_choice("License", self.license_codes, default)
