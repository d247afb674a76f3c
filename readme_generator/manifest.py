"""Manifest source: prompt defaults from an existing ``composer.json``.

The manifest is optional. A missing, unreadable or malformed file produces an
empty ``DefaultValues`` and never interrupts the wizard.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Optional

from readme_generator.collector.models import DefaultValues
from readme_generator.utils import load_json

REQUIREMENT_TEMPLATE = "* PHP {constraint}"


def read_manifest(path: str | Path) -> dict[str, Any]:
    """Return the manifest's top-level object, or ``{}`` if it cannot be used."""
    try:
        data = load_json(path)
    except (OSError, ValueError):
        # Missing, unreadable, malformed or not an object.
        return {}
    return data


def load_defaults(path: str | Path) -> DefaultValues:
    """Read the manifest at *path* once and map it to ``DefaultValues``."""
    return defaults_from_manifest(read_manifest(path))


def defaults_from_manifest(data: dict[str, Any]) -> DefaultValues:
    """Map the recognised manifest keys onto ``DefaultValues``.

    Recognised keys: ``name``, ``description``, ``require.php``,
    ``authors[0].name``, ``authors[0].email``, ``authors[0].homepage``,
    ``homepage`` and ``license``. Values that are not strings are ignored.
    """
    author = _first_author(data)
    php_constraint = _text(_as_dict(data.get("require")).get("php"))

    return DefaultValues(
        name=_package_title(_text(data.get("name"))),
        description=_text(data.get("description")),
        requirements=(
            REQUIREMENT_TEMPLATE.format(constraint=php_constraint) if php_constraint else None
        ),
        author=_text(author.get("name")),
        email=_text(author.get("email")),
        webpage=_text(author.get("homepage")) or _text(data.get("homepage")),
        license=_license(data.get("license")),
    )


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------

def _package_title(package: Optional[str]) -> Optional[str]:
    """Turn ``vendor/my-package`` into ``My Package``.

    Only the first letter of each word is upper-cased; the rest is kept as-is.
    """
    if not package:
        return None
    project = package.split("/")[1] if "/" in package else package
    words = project.replace("-", " ").split(" ")
    title = " ".join(word[:1].upper() + word[1:] for word in words)
    return title or None


def _license(value: Any) -> Optional[str]:
    # composer allows either a single identifier or a list of them.
    if isinstance(value, list):
        value = value[0] if value else None
    return _text(value)


def _first_author(data: dict[str, Any]) -> dict[str, Any]:
    authors = data.get("authors")
    if isinstance(authors, list) and authors:
        return _as_dict(authors[0])
    return {}


def _as_dict(value: Any) -> dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _text(value: Any) -> Optional[str]:
    if isinstance(value, str) and value:
        return value
    return None
