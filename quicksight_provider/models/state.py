# Copyright (c) 2026 The quicksight-group-provider authors.
# Licensed under the Apache License, Version 2.0.

"""Stored resource state model."""

from datetime import datetime, timezone
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class ResourceState(BaseModel):
    """Persisted state of one managed resource."""

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "type_name": "aws_quicksight_group",
                "id": "123456789012/default/analysts",
                "attributes": {
                    "arn": "arn:aws:quicksight:us-east-1:123456789012:group/default/analysts",
                    "aws_account_id": "123456789012",
                    "description": "Read-only analysts",
                    "group_name": "analysts",
                    "namespace": "default",
                },
                "updated_at": "2026-01-15T10:00:00Z",
            }
        }
    )

    type_name: str = Field(..., description="Resource type, e.g. aws_quicksight_group")
    id: str = Field(..., description="Resource identifier")
    attributes: dict[str, Any] = Field(
        default_factory=dict, description="Attribute values as last read"
    )
    updated_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="When this state was last written",
    )
