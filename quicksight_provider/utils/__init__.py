# Copyright (c) 2026 The quicksight-group-provider authors.
# Licensed under the Apache License, Version 2.0.

"""Utility modules for the QuickSight Group resource provider."""

from .cloudwatch_logger import CloudWatchHandler, configure_cloudwatch_logging
from .correlation import CorrelationIdFilter, get_correlation_id, operation_context
from .input_validation import ValidationError, all_of, string_len_between, string_matches

__all__ = [
    "CloudWatchHandler",
    "configure_cloudwatch_logging",
    "CorrelationIdFilter",
    "get_correlation_id",
    "operation_context",
    "ValidationError",
    "all_of",
    "string_len_between",
    "string_matches",
]
