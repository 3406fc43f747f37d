# Copyright (c) 2026 The quicksight-group-provider authors.
# Licensed under the Apache License, Version 2.0.

"""AWS client wrapper module."""

from .quicksight_client import (
    GroupAPI,
    GroupNotFoundError,
    QuickSightAPIError,
    QuickSightClient,
)

__all__ = ["GroupAPI", "GroupNotFoundError", "QuickSightAPIError", "QuickSightClient"]
