# Copyright (c) 2026 The quicksight-group-provider authors.
# Licensed under the Apache License, Version 2.0.

"""Enumerations for diagnostic severity."""

from enum import Enum


class Severity(str, Enum):
    """Severity levels for diagnostics."""

    ERROR = "error"
    WARNING = "warning"
