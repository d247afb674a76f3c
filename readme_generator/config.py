"""README Generator configuration.

Centralised, typed configuration for the wizard. All settings use Pydantic v2
models so they can be validated at construction time and overridden from
environment variables without boiler-plate.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

# Ordered as presented in the license choice menu.
LICENSE_CODES: tuple[str, ...] = (
    "MIT",
    "GPL-2.0",
    "GPL-3.0",
    "LGPL-2.1",
    "LGPL-3.0",
    "AGPL-3.0",
    "Apache-2.0",
    "BSD-2-Clause",
    "BSD-3-Clause",
    "MPL-2.0",
    "ISC",
    "EPL-2.0",
)


class Defaults(BaseModel):
    """Built-in fallback values used when the manifest has nothing better."""

    model_config = ConfigDict(frozen=True)

    author: str = Field(default="Pierre-Henry Soria")
    email: str = Field(default="hi@ph7.me")
    github: str = Field(default="pH-7", description="Fallback GitHub username")
    license_code: str = Field(default="MIT")
    destination_path: Path = Field(
        default=Path("."), description="Directory used when no usable path is given"
    )

    @field_validator("license_code")
    @classmethod
    def _known_license(cls, value: str) -> str:
        if value not in LICENSE_CODES:
            raise ValueError(
                f"Unknown license code {value!r}; expected one of {', '.join(LICENSE_CODES)}"
            )
        return value


class Config(BaseModel):
    """Global README Generator configuration.

    Instances are created once by the CLI entry point and handed to the
    ``Pipeline``.
    """

    manifest_path: Path = Field(default=Path("composer.json"))
    defaults: Defaults = Field(default_factory=Defaults)

    @property
    def destination_path(self) -> Path:
        """Default destination directory offered to the user."""
        return self.defaults.destination_path

    @classmethod
    def from_env(cls) -> "Config":
        """Build a ``Config`` from environment variables.

        Recognised variables (all optional):
            README_GENERATOR_MANIFEST, README_GENERATOR_DESTINATION,
            README_GENERATOR_AUTHOR, README_GENERATOR_EMAIL,
            README_GENERATOR_GITHUB, README_GENERATOR_LICENSE.
        """
        defaults_kwargs: dict[str, Any] = {}
        if os.environ.get("README_GENERATOR_AUTHOR"):
            defaults_kwargs["author"] = os.environ["README_GENERATOR_AUTHOR"]
        if os.environ.get("README_GENERATOR_EMAIL"):
            defaults_kwargs["email"] = os.environ["README_GENERATOR_EMAIL"]
        if os.environ.get("README_GENERATOR_GITHUB"):
            defaults_kwargs["github"] = os.environ["README_GENERATOR_GITHUB"]
        if os.environ.get("README_GENERATOR_LICENSE"):
            defaults_kwargs["license_code"] = os.environ["README_GENERATOR_LICENSE"]
        if os.environ.get("README_GENERATOR_DESTINATION"):
            defaults_kwargs["destination_path"] = Path(os.environ["README_GENERATOR_DESTINATION"])

        return cls(
            manifest_path=Path(os.environ.get("README_GENERATOR_MANIFEST", "composer.json")),
            defaults=Defaults(**defaults_kwargs),
        )
