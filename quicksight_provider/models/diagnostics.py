# Copyright (c) 2026 The quicksight-group-provider authors.
# Licensed under the Apache License, Version 2.0.

"""Diagnostic records returned by lifecycle handlers.

Handlers report problems by returning a list of diagnostics instead of
raising. Each diagnostic is either an error (the operation failed) or a
warning (the operation succeeded but something deserves attention).
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from .enums import Severity


class Diagnostic(BaseModel):
    """A single user-facing warning or error record."""

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "severity": "error",
                "summary": "reading QuickSight Group (123456789012/default/analysts): "
                "unexpected format of ID",
                "detail": "",
                "attribute": None,
            }
        }
    )

    severity: Severity = Field(..., description="Whether this is an error or a warning")
    summary: str = Field(..., description="Short human-readable description")
    detail: str = Field(default="", description="Longer explanation, if any")
    attribute: Optional[str] = Field(
        default=None,
        description="Attribute the diagnostic refers to, when it concerns a single value",
    )

    def __str__(self) -> str:
        prefix = f"{self.severity.value.capitalize()}: "
        if self.attribute:
            prefix += f"{self.attribute}: "
        text = prefix + self.summary
        if self.detail:
            text += f"\n  {self.detail}"
        return text


Diagnostics = list[Diagnostic]


def error_diagnostic(summary: str, detail: str = "", attribute: Optional[str] = None) -> Diagnostic:
    """Build an error diagnostic."""
    return Diagnostic(
        severity=Severity.ERROR, summary=summary, detail=detail, attribute=attribute
    )


def append_errorf(diags: Diagnostics, message: str, *args: object) -> Diagnostics:
    """
    Append an error diagnostic built from a %-style format string.

    Args:
        diags: Diagnostics collected so far
        message: Format string, e.g. "reading QuickSight Group (%s): %s"
        *args: Values substituted into the format string

    Returns:
        The same list with the new error appended
    """
    summary = message % args if args else message
    diags.append(error_diagnostic(summary))
    return diags


def has_error(diags: Diagnostics) -> bool:
    """Return True if any diagnostic in the list is an error."""
    return any(d.severity == Severity.ERROR for d in diags)
