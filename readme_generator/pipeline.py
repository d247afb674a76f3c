"""README Generator pipeline controller.

Runs the ``markdown:generate`` wizard:

COLLECTING -- prompt and validate the nine README fields.
CONFIRMING -- show a summary and ask for confirmation.
RESOLVING  -- ask for and canonicalise the destination directory.
SAVING     -- render the README into ``README-<date> <time>.md``.

Usage::

    readme-generator markdown:generate
    python -m readme_generator markdown:generate
"""

from __future__ import annotations

import sys
from collections.abc import Callable
from datetime import datetime
from enum import Enum, IntEnum
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, ConfigDict, ValidationError

from readme_generator.builder import DocumentBuilder, ReadmeBuilder
from readme_generator.collector import (
    DefaultValues,
    FailureKind,
    FieldCollector,
    FieldFailure,
    ProjectRecord,
)
from readme_generator.config import Config
from readme_generator.destination import confirm, resolve_destination
from readme_generator.manifest import load_defaults
from readme_generator.prompts import PromptService, RichPromptService
from readme_generator.utils import (
    print_error,
    print_success,
    print_summary_table,
    print_warning,
    timestamped_filename,
)

COMMAND_NAME = "markdown:generate"


# ---------------------------------------------------------------------------
# Run states & results
# ---------------------------------------------------------------------------


class ExitCode(IntEnum):
    """Process exit status for the command."""
    SUCCESS = 0
    FAILURE = 1
    INVALID = 2


class RunState(str, Enum):
    """Where the wizard is, or where it stopped."""
    COLLECTING = "collecting"
    CONFIRMING = "confirming"
    RESOLVING = "resolving"
    SAVING = "saving"
    SAVED = "saved"
    ABORTED = "aborted"
    FAILED = "failed"


class FailureClass(str, Enum):
    """Classification of a ``FAILED`` run."""
    EMPTY_FIELD = "invalid-input"
    REJECTED_INPUT = "rejected-input"
    BAD_DESTINATION = "bad-destination"


class RunResult(BaseModel):
    """Terminal outcome of one wizard run."""

    model_config = ConfigDict(frozen=True)

    state: RunState
    exit_code: ExitCode
    failure: Optional[FailureClass] = None
    record: Optional[ProjectRecord] = None
    path: Optional[Path] = None
    message: Optional[str] = None

    @property
    def success(self) -> bool:
        return self.state is RunState.SAVED


# ---------------------------------------------------------------------------
# Pipeline Controller
# ---------------------------------------------------------------------------


class Pipeline:
    """Sequences collection, confirmation, destination resolution and saving.

    All collaborators are injected; nothing is read or initialised implicitly.

    Attributes:
        config: Wizard configuration (fallback constants, default destination).
        defaults: Manifest-derived prompt defaults.
        prompts: Prompt service used for every question.
        builder: Document builder/writer that saves the README.
        clock: Returns the current time; used for the file name.
        state: Current ``RunState``.
    """

    def __init__(
        self,
        config: Config,
        defaults: DefaultValues,
        prompts: PromptService,
        builder: DocumentBuilder,
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        self.config = config
        self.defaults = defaults
        self.prompts = prompts
        self.builder = builder
        self.clock = clock
        self.state = RunState.COLLECTING

    def run(self) -> RunResult:
        """Execute the wizard once and return its terminal result."""
        self.state = RunState.COLLECTING
        collector = FieldCollector(self.prompts, self.defaults, self.config.defaults)
        outcome = collector.collect()

        if isinstance(outcome, FieldFailure):
            return self._field_failed(outcome)

        record = outcome
        self.state = RunState.CONFIRMING
        print_summary_table(record.as_table(), title="README")
        if not confirm(self.prompts):
            return self._finish(RunState.ABORTED, ExitCode.FAILURE, record=record)

        self.state = RunState.RESOLVING
        directory = resolve_destination(self.prompts, self.config.destination_path)
        full_path = directory / timestamped_filename(self.clock())

        if not directory.is_dir():
            message = f'Oops. The path "{directory}" doesn\'t exist.'
            print_error(message)
            return self._finish(
                RunState.FAILED,
                ExitCode.INVALID,
                failure=FailureClass.BAD_DESTINATION,
                record=record,
                path=directory,
                message=message,
            )

        self.state = RunState.SAVING
        self.builder.save(record, full_path)
        message = f"File successfully saved at: {full_path}"
        print_success(message)
        return self._finish(
            RunState.SAVED, ExitCode.SUCCESS, record=record, path=full_path, message=message
        )

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _field_failed(self, failure: FieldFailure) -> RunResult:
        if failure.kind is FailureKind.EMPTY_FIELD:
            print_warning(failure.message)
            failure_class = FailureClass.EMPTY_FIELD
        else:
            print_error(failure.message)
            failure_class = FailureClass.REJECTED_INPUT
        return self._finish(
            RunState.FAILED, ExitCode.FAILURE, failure=failure_class, message=failure.message
        )

    def _finish(self, state: RunState, exit_code: ExitCode, **fields) -> RunResult:
        self.state = state
        return RunResult(state=state, exit_code=exit_code, **fields)


# ---------------------------------------------------------------------------
# CLI entry point
# ---------------------------------------------------------------------------


def build_pipeline(config: Config) -> Pipeline:
    """Wire the production collaborators; the manifest is read exactly once here."""
    return Pipeline(
        config=config,
        defaults=load_defaults(config.manifest_path),
        prompts=RichPromptService(),
        builder=ReadmeBuilder(),
    )


def main(argv: list[str] | None = None) -> int:
    """CLI entry point for ``readme-generator`` / ``python -m readme_generator``."""
    import argparse

    parser = argparse.ArgumentParser(
        prog="readme-generator",
        description="Interactive README generator",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  readme-generator markdown:generate\n"
            "  README_GENERATOR_MANIFEST=../composer.json readme-generator markdown:generate\n"
        ),
    )
    subparsers = parser.add_subparsers(dest="command", metavar="command", required=True)
    subparsers.add_parser(COMMAND_NAME, help="Generate a README through a series of questions")

    parser.parse_args(argv)

    try:
        config = Config.from_env()
    except ValidationError as exc:
        print_error(f"Invalid configuration: {exc}")
        return int(ExitCode.FAILURE)

    pipeline = build_pipeline(config)
    try:
        result = pipeline.run()
    except (KeyboardInterrupt, EOFError):
        print_warning("\nAborted.")
        return int(ExitCode.FAILURE)

    return int(result.exit_code)


if __name__ == "__main__":
    sys.exit(main())
