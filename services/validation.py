"""Client-side form validation.

Mirrors native constraint validation (required, type) and substitutes
friendlier messages for the failures users hit most: weak passwords and
malformed email addresses.
"""
import re
from dataclasses import dataclass
from typing import Dict, Iterable, Mapping, Optional

PASSWORD_RE = re.compile(r"^(?=.*[a-z])(?=.*[A-Z])(?=.*\d)(?=.*[\W_]).{8,}$")
EMAIL_RE = re.compile(r"^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$")

WEAK_PASSWORD_MESSAGE = (
    "The password must be at least 8 characters and include an uppercase letter, "
    "lowercase letter, number and a special character."
)
INVALID_EMAIL_MESSAGE = "Please enter a valid email address (e.g., user@domain.com)."
REQUIRED_MESSAGE = "Please fill out this field."
NUMBER_MESSAGE = "Please enter a number."


class ValidationError(Exception):
    """A local validation failure; the request is never sent."""


@dataclass(frozen=True)
class FieldConstraint:
    name: str
    required: bool = True
    kind: str = "text"  # text | email | number
    strong_password: bool = False
    required_message: Optional[str] = None


def is_strong_password(value: str) -> bool:
    return bool(PASSWORD_RE.match(value or ""))


def is_valid_email(value: str) -> bool:
    return bool(EMAIL_RE.match(value or ""))


def field_message(constraint: FieldConstraint, value: str) -> Optional[str]:
    """Return the message for the first violated constraint, or None."""
    value = (value or "").strip()
    if not value:
        if constraint.required:
            return constraint.required_message or REQUIRED_MESSAGE
        return None
    if constraint.kind == "email" and not is_valid_email(value):
        return INVALID_EMAIL_MESSAGE
    if constraint.kind == "number" and not value.isdigit():
        return NUMBER_MESSAGE
    if constraint.strong_password and not is_strong_password(value):
        return WEAK_PASSWORD_MESSAGE
    return None


def check_validity(values: Mapping[str, str], constraints: Iterable[FieldConstraint]) -> Dict[str, str]:
    """Validate every field; returns field name -> message for the invalid ones."""
    errors = {}
    for c in constraints:
        msg = field_message(c, values.get(c.name, ""))
        if msg:
            errors[c.name] = msg
    return errors
