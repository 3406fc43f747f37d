# Copyright (c) 2026 The quicksight-group-provider authors.
# Licensed under the Apache License, Version 2.0.

"""QuickSight group data model."""

from typing import Any, Optional

from pydantic import BaseModel, Field


class QuickSightGroup(BaseModel):
    """A QuickSight group as returned by the CreateGroup and DescribeGroup APIs."""

    arn: Optional[str] = Field(None, description="ARN of the group")
    group_name: Optional[str] = Field(None, description="Name of the group")
    description: Optional[str] = Field(None, description="Group description")
    principal_id: Optional[str] = Field(None, description="Principal ID of the group")

    @classmethod
    def from_api(cls, group: dict[str, Any]) -> "QuickSightGroup":
        """
        Build a model from the ``Group`` structure of an API response.

        Args:
            group: Response dict in AWS format, e.g. {"Arn": "...", "GroupName": "..."}

        Returns:
            QuickSightGroup with the recognised fields populated
        """
        return cls(
            arn=group.get("Arn"),
            group_name=group.get("GroupName"),
            description=group.get("Description"),
            principal_id=group.get("PrincipalId"),
        )
