"""
Validation utilities for core domain models.

Provides consistent validation across the application. Trade-level
checks raise InvalidTradeRecord so callers learn which field was wrong.
"""

import math
from datetime import date, datetime
from enum import Enum
from typing import Any

from zentrade.core.constants import ISO_DATE_FORMAT
from zentrade.core.exceptions.journal import InvalidTradeRecord, ValidationError


def validate_number(value: Any, param_name: str) -> float:
    """Validate that a value is a finite real number.

    Args:
        value: Value to validate
        param_name: Parameter name for error messages

    Returns:
        The value as float

    Raises:
        InvalidTradeRecord: If value is missing, non-numeric, or not finite
    """
    if value is None or isinstance(value, bool):
        raise InvalidTradeRecord(param_name, value, "a number is required")
    try:
        number = float(value)
    except (TypeError, ValueError) as e:
        raise InvalidTradeRecord(param_name, value, "not a number") from e
    if not math.isfinite(number):
        raise InvalidTradeRecord(param_name, value, "must be finite")
    return number


def validate_positive(value: Any, param_name: str) -> float:
    """Validate that a numeric value is positive.

    Raises:
        InvalidTradeRecord: If value is not a positive number
    """
    number = validate_number(value, param_name)
    if number <= 0:
        raise InvalidTradeRecord(param_name, value, "must be positive")
    return number


def validate_non_negative(value: Any, param_name: str) -> float:
    """Validate that a numeric value is zero or greater.

    Raises:
        InvalidTradeRecord: If value is negative or not a number
    """
    number = validate_number(value, param_name)
    if number < 0:
        raise InvalidTradeRecord(param_name, value, "must be non-negative")
    return number


def validate_iso_date(value: Any, param_name: str) -> str:
    """Validate an ISO 8601 calendar date (YYYY-MM-DD).

    Accepts date/datetime objects and normalizes them to the string form.
    Strings may carry an ISO time part, which is dropped.

    Returns:
        The date as an ISO string

    Raises:
        InvalidTradeRecord: If the value is not a valid calendar date
    """
    if isinstance(value, datetime):
        return value.date().isoformat()
    if isinstance(value, date):
        return value.isoformat()
    if not isinstance(value, str) or not value.strip():
        raise InvalidTradeRecord(param_name, value, "an ISO date string is required")
    text = value.strip()
    try:
        # Anything after the date must be an ISO time part
        if len(text) > len("YYYY-MM-DD"):
            return datetime.fromisoformat(text).date().isoformat()
        return datetime.strptime(text, ISO_DATE_FORMAT).date().isoformat()
    except ValueError as e:
        raise InvalidTradeRecord(param_name, value, "not an ISO 8601 date") from e


def validate_choice[E: Enum](value: Any, enum_type: type[E], param_name: str) -> E:
    """Coerce a value into a member of the given string enum.

    Raises:
        InvalidTradeRecord: If value does not name a member
    """
    if isinstance(value, enum_type):
        return value
    try:
        return enum_type(str(value).strip().upper())
    except ValueError as e:
        allowed = ", ".join(str(member.value) for member in enum_type)
        raise InvalidTradeRecord(param_name, value, f"expected one of {allowed}") from e


def validate_text(value: Any, param_name: str, max_length: int | None = None) -> str:
    """Validate a free-text field; None becomes an empty string.

    Raises:
        InvalidTradeRecord: If the value is not text or too long
    """
    if value is None:
        return ""
    if not isinstance(value, str):
        raise InvalidTradeRecord(param_name, value, "must be text")
    if max_length is not None and len(value) > max_length:
        raise InvalidTradeRecord(param_name, value, f"longer than {max_length} characters")
    return value


def validate_search_term(term: str | None, max_length: int) -> str:
    """Validate a journal search term.

    Raises:
        ValidationError: If the term is too long
    """
    if not term:
        return ""
    if len(term) > max_length:
        raise ValidationError(f"search term must be at most {max_length} characters")
    return term.strip()
