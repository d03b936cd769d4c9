"""
Domain Entity: User

A user record read from the relational store.
"""

from dataclasses import dataclass
from typing import Any, Dict

import email_validator
from email_validator import EmailNotValidError, validate_email

from record_sync.domain.exceptions import ValidationError

# Reserved names (localhost, .local, .test, ...) are syntactically valid
# addresses; only deliverability rules reject them.
email_validator.SPECIAL_USE_DOMAIN_NAMES.clear()


def check_email_syntax(value: str) -> None:
    """
    Check an address against the RFC 5322 grammar only.

    Accepts the "Name <addr>" form, quoted local parts, dotless and
    reserved domains, and bracketed IP literals. Nothing is resolved.

    Raises:
        EmailNotValidError: if the address cannot be parsed
    """
    validate_email(
        value,
        check_deliverability=False,
        globally_deliverable=False,
        test_environment=True,
        allow_quoted_local=True,
        allow_domain_literal=True,
        allow_display_name=True,
    )


@dataclass(frozen=True)
class User:
    """
    Validated, immutable user.

    Attributes:
        id: User identifier (>= 1)
        name: Non-empty display name
        email: Syntactically valid email address
        status_code: Opaque status value, not constrained
    """

    id: int
    name: str
    email: str
    status_code: int

    def __post_init__(self):
        """Validate invariants."""
        if not isinstance(self.id, int) or isinstance(self.id, bool) or self.id < 1:
            raise ValidationError("id", f"id must be >= 1, got {self.id!r}")
        if not isinstance(self.name, str) or self.name == "":
            raise ValidationError("name", "name can not be empty")
        if not isinstance(self.email, str):
            raise ValidationError("email", f"invalid email: {self.email!r}")
        try:
            check_email_syntax(self.email)
        except EmailNotValidError as e:
            raise ValidationError("email", f"invalid email {self.email!r}: {e}") from e
        if not isinstance(self.status_code, int) or isinstance(self.status_code, bool):
            raise ValidationError("status_code", "status_code must be an integer")

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the exported JSON shape."""
        return {
            "id": self.id,
            "name": self.name,
            "email": self.email,
            "status_code": self.status_code,
        }
