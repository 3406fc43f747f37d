# Copyright (c) 2026 The quicksight-group-provider authors.
# Licensed under the Apache License, Version 2.0.

"""Data models for the QuickSight Group resource provider."""

from .enums import Severity
from .diagnostics import (
    Diagnostic,
    Diagnostics,
    append_errorf,
    error_diagnostic,
    has_error,
)
from .group import QuickSightGroup
from .state import ResourceState

__all__ = [
    "Severity",
    "Diagnostic",
    "Diagnostics",
    "append_errorf",
    "error_diagnostic",
    "has_error",
    "QuickSightGroup",
    "ResourceState",
]
