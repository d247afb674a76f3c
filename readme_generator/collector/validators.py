"""Pure predicates used to validate collected field values."""

from __future__ import annotations

from typing import Optional

from email_validator import SPECIAL_USE_DOMAIN_NAMES, EmailNotValidError, validate_email
from pydantic import AnyUrl, TypeAdapter, ValidationError

_url_adapter: TypeAdapter[AnyUrl] = TypeAdapter(AnyUrl)


def is_field_filled(value: Optional[str]) -> bool:
    """Return ``True`` if *value* is present and not blank."""
    return value is not None and len(value.strip()) > 0


def is_valid_email(value: Optional[str]) -> bool:
    """Return ``True`` if *value* is a syntactically valid ``local@domain`` address.

    Only the bare address form is accepted; ``"Ada <ada@example.com>"`` is
    rejected. The domain must contain at least one dot, so ``"a@b"`` is
    rejected too. Reserved domains such as ``.test`` or ``.local`` are judged
    on syntax alone. No DNS lookup is performed.
    """
    if not is_field_filled(value):
        return False
    try:
        validate_email(
            _with_public_tld(value),
            check_deliverability=False,
            test_environment=True,
        )
    except EmailNotValidError:
        return False
    return True


def is_valid_url(value: Optional[str]) -> bool:
    """Return ``True`` if *value* is an absolute URL with both a scheme and a host.

    The raw value must spell out ``scheme://``; forms that a browser would
    repair, like ``"https:x.com"``, are rejected.
    """
    if not is_field_filled(value):
        return False
    if not value.partition(":")[2].startswith("//"):
        return False
    try:
        url = _url_adapter.validate_python(value)
    except ValidationError:
        return False
    return bool(url.host)


def _with_public_tld(address: str) -> str:
    """Swap a special-use TLD (``local``, ``test``, ...) for ``com``."""
    local, at, domain = address.rpartition("@")
    head, dot, tld = domain.rpartition(".")
    if at and dot and tld.lower() in SPECIAL_USE_DOMAIN_NAMES:
        return f"{local}@{head}.com"
    return address
