"""Built-in validators for intake fields and journey certificates."""

from __future__ import annotations

import re
from datetime import date, datetime
from typing import Any, Callable

from pydantic import BaseModel, Field

# Registry of validator functions: name -> callable(value, **params) -> str | None
# Returns an error message string on failure, None on success.
VALIDATORS: dict[str, Callable[..., str | None]] = {}

ACAS_CERTIFICATE_PATTERN = re.compile(r"[A-Z]{1,2}\d{6}/\d{2}/\d{2}", re.IGNORECASE)


class ValidationResult(BaseModel):
    """Result of validating one or more fields."""

    valid: bool
    errors: dict[str, list[str]] = Field(default_factory=dict)

    @classmethod
    def ok(cls) -> ValidationResult:
        return cls(valid=True)

    @classmethod
    def failed(cls, field: str, message: str) -> ValidationResult:
        return cls(valid=False, errors={field: [message]})


def register(name: str):
    """Decorator to register a validator function."""
    def decorator(fn):
        VALIDATORS[name] = fn
        return fn
    return decorator


def parse_date(value: Any) -> date | None:
    """Coerce a date, datetime or ISO 8601 string to a date.

    The whole string must parse; trailing text after the date is rejected.
    Returns None for anything that is not a real calendar date.
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str) or not value.strip():
        return None
    text = value.strip()
    try:
        return date.fromisoformat(text)
    except ValueError:
        pass
    try:
        return datetime.fromisoformat(text).date()
    except ValueError:
        return None


@register("required")
def validate_required(value: Any, **_kwargs: Any) -> str | None:
    if value is None or (isinstance(value, str) and not value.strip()):
        return "This field is required."
    return None


@register("email")
def validate_email(value: Any, **_kwargs: Any) -> str | None:
    if value is None or not isinstance(value, str) or not value.strip():
        return None
    if not re.fullmatch(r"[^\s@]+@[^\s@]+\.[^\s@]+", value.strip()):
        return "Please enter a valid email address."
    return None


@register("date")
def validate_date(value: Any, **_kwargs: Any) -> str | None:
    if value is None or (isinstance(value, str) and not value.strip()):
        return None
    if parse_date(value) is None:
        return "Please enter a valid date in YYYY-MM-DD format."
    return None


@register("past_date")
def validate_past_date(value: Any, today: date | None = None, **_kwargs: Any) -> str | None:
    if value is None or (isinstance(value, str) and not value.strip()):
        return None
    parsed = parse_date(value)
    if parsed is None:
        return "Please enter a valid date in YYYY-MM-DD format."
    if parsed > (today or date.today()):
        return "Date cannot be in the future."
    return None


@register("acas_certificate")
def validate_acas_certificate(value: Any, **_kwargs: Any) -> str | None:
    if value is None or not isinstance(value, str) or not value.strip():
        return "Please enter your ACAS certificate number."
    if not ACAS_CERTIFICATE_PATTERN.fullmatch(value.strip()):
        return "ACAS certificate numbers look like R123456/01/23."
    return None


@register("case_number")
def validate_case_number(value: Any, **_kwargs: Any) -> str | None:
    if value is None or not isinstance(value, str) or not value.strip():
        return "Please enter your tribunal case number."
    return None


def validate_fields(
    data: dict[str, Any], rules: dict[str, list[str]], **params: Any
) -> ValidationResult:
    """Run the named validators for each field present in ``data``."""
    all_errors: dict[str, list[str]] = {}
    for field_name, validator_names in rules.items():
        if field_name not in data:
            continue
        for name in validator_names:
            fn = VALIDATORS.get(name)
            if fn is None:
                continue
            err = fn(data[field_name], **params)
            if err:
                all_errors.setdefault(field_name, []).append(err)

    return ValidationResult(valid=len(all_errors) == 0, errors=all_errors)


INTAKE_RULES: dict[str, list[str]] = {
    "incident_date": ["past_date"],
    "acas_start_date": ["past_date"],
}

LEGAL_ADVISOR_RULES: dict[str, list[str]] = {
    "email": ["email"],
}
