# Copyright (c) 2026 The quicksight-group-provider authors.
# Licensed under the Apache License, Version 2.0.

"""Attribute value validators for resource schemas.

Validators are plain callables ``(field, value) -> None`` that raise
ValidationError with a field-level message. The factories below build
the validators used by schema attributes; ``all_of`` chains several of
them and stops at the first failure.
"""

import logging
import re
from typing import Any, Callable

logger = logging.getLogger(__name__)

Validator = Callable[[str, Any], None]


class ValidationError(Exception):
    """Raised when an attribute value fails validation."""

    def __init__(self, field: str, message: str, value: Any = None):
        """
        Initialize validation error.

        Args:
            field: The attribute that failed validation
            message: Human-readable error message
            value: The invalid value (optional, for logging)
        """
        self.field = field
        self.message = message
        self.value = value
        super().__init__(f"Validation error for '{field}': {message}")


def string_len_between(min_len: int, max_len: int) -> Validator:
    """
    Build a validator requiring a string length within [min_len, max_len].

    Args:
        min_len: Minimum length, inclusive
        max_len: Maximum length, inclusive
    """

    def validate(field: str, value: Any) -> None:
        if not isinstance(value, str):
            raise ValidationError(field, f"expected type of {field} to be string", value)
        if not min_len <= len(value) <= max_len:
            raise ValidationError(
                field,
                f"expected length of {field} to be in the range ({min_len} - {max_len}), "
                f"got {value}",
                value,
            )

    return validate


def string_matches(pattern: "re.Pattern[str]", message: str) -> Validator:
    """
    Build a validator requiring the whole string to match a regular expression.

    Args:
        pattern: Compiled regular expression
        message: Explanation appended to the error when the value does not match
    """

    def validate(field: str, value: Any) -> None:
        if not isinstance(value, str):
            raise ValidationError(field, f"expected type of {field} to be string", value)
        if not pattern.fullmatch(value):
            raise ValidationError(
                field, f"invalid value for {field} ({message})", value
            )

    return validate


def all_of(*validators: Validator) -> Validator:
    """Chain validators; the first failure wins."""

    def validate(field: str, value: Any) -> None:
        for validator in validators:
            validator(field, value)

    return validate
