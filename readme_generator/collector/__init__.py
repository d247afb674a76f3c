"""Field collection and validation for the README wizard.

Quick usage::

    from readme_generator.collector import FieldCollector

    outcome = FieldCollector(prompts, defaults).collect()
    if isinstance(outcome, FieldFailure):
        ...
"""

from readme_generator.collector.fields import FieldCollector
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

__all__ = [
    "DefaultValues",
    "FailureKind",
    "FieldCollector",
    "FieldFailure",
    "ProjectRecord",
    "ValidationOutcome",
    "is_field_filled",
    "is_valid_email",
    "is_valid_url",
]
