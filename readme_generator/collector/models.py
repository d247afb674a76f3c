"""Pydantic v2 models for the field-collection stage.

Defines the collected project record, the manifest-derived defaults and the
failure value returned when a field is rejected.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class FailureKind(str, Enum):
    """Why a field was rejected."""
    EMPTY_FIELD = "empty_field"
    INVALID_INPUT = "invalid_input"


class ProjectRecord(BaseModel):
    """The validated bundle of project metadata rendered into the README."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1, description="Project name")
    heading: str = Field(..., min_length=1, description="README heading or short summary")
    description: str = Field(..., min_length=1)
    requirements: str = Field(..., min_length=1, description="Requirements / installation steps")
    author: str = Field(..., min_length=1)
    email: str = Field(..., min_length=1)
    webpage: str = Field(..., min_length=1)
    github: str = Field(..., min_length=1, description="GitHub username")
    license: str = Field(..., min_length=1, description="License code")

    def as_table(self) -> dict[str, str]:
        """Return ``{label: value}`` pairs for the confirmation summary."""
        return {
            "Name": self.name,
            "Heading": self.heading,
            "Description": self.description,
            "Requirements": self.requirements,
            "Author": self.author,
            "Email": self.email,
            "Webpage": self.webpage,
            "GitHub": self.github,
            "License": self.license,
        }


class DefaultValues(BaseModel):
    """Prompt defaults read once from the project manifest.

    Every field is optional; an absent or unreadable manifest yields an
    instance with every field set to ``None``.
    """

    model_config = ConfigDict(frozen=True)

    name: Optional[str] = None
    description: Optional[str] = None
    requirements: Optional[str] = None
    author: Optional[str] = None
    email: Optional[str] = None
    webpage: Optional[str] = None
    license: Optional[str] = None


class FieldFailure(BaseModel):
    """The first field that failed validation during collection."""

    model_config = ConfigDict(frozen=True)

    kind: FailureKind
    field: str = Field(..., description="Name of the rejected ProjectRecord field")
    message: str = Field(..., description="User-facing reason")


ValidationOutcome = Union[ProjectRecord, FieldFailure]
