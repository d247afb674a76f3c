"""README Generator -- interactive ``markdown:generate`` wizard.

Quick usage::

    from readme_generator import Config, Pipeline, ReadmeBuilder, RichPromptService
    from readme_generator.manifest import load_defaults

    config = Config()
    pipeline = Pipeline(
        config,
        load_defaults(config.manifest_path),
        RichPromptService(),
        ReadmeBuilder(),
    )
    result = pipeline.run()
"""

from readme_generator.builder import ReadmeBuilder
from readme_generator.collector import DefaultValues, FieldCollector, ProjectRecord
from readme_generator.config import LICENSE_CODES, Config, Defaults
from readme_generator.pipeline import ExitCode, Pipeline, RunResult, RunState
from readme_generator.prompts import RichPromptService

__version__ = "1.0.0"

__all__ = [
    "LICENSE_CODES",
    "Config",
    "DefaultValues",
    "Defaults",
    "ExitCode",
    "FieldCollector",
    "Pipeline",
    "ProjectRecord",
    "ReadmeBuilder",
    "RichPromptService",
    "RunResult",
    "RunState",
]
