"""Interactive prompt service.

The collector, resolver and pipeline only talk to the ``PromptService``
protocol, so tests can drive them with scripted answers while the CLI uses
``RichPromptService`` on the shared Rich console.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Optional, Protocol

from rich.console import Console
from rich.prompt import Confirm, Prompt

from readme_generator.utils import console as default_console


class PromptService(Protocol):
    """Blocking question/answer interface used by the wizard."""

    def ask(self, text: str, default: Optional[str] = None) -> str:
        ...

    def ask_choice(self, text: str, choices: Sequence[str], default: str) -> str:
        ...

    def ask_confirmation(self, text: str, default: bool = True) -> bool:
        ...


class _ChoicePrompt(Prompt):
    """``Prompt`` with a custom message for an unlisted choice."""

    illegal_choice_message = "[prompt.invalid.choice]Select a valid license type 🤠"


class RichPromptService:
    """``PromptService`` backed by ``rich.prompt``."""

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or default_console

    def ask(self, text: str, default: Optional[str] = None) -> str:
        """Ask a free-text question; an empty answer returns *default* (or ``""``)."""
        if default is None:
            return Prompt.ask(text, console=self.console, default="", show_default=False)
        return Prompt.ask(text, console=self.console, default=default)

    def ask_choice(self, text: str, choices: Sequence[str], default: str) -> str:
        """Ask until one of *choices* is entered; an empty answer returns *default*."""
        return _ChoicePrompt.ask(
            text,
            console=self.console,
            choices=list(choices),
            default=default,
        )

    def ask_confirmation(self, text: str, default: bool = True) -> bool:
        return Confirm.ask(text, console=self.console, default=default)


__all__ = ["PromptService", "RichPromptService"]
