# Copyright (c) 2026 The quicksight-group-provider authors.
# Licensed under the Apache License, Version 2.0.

"""Resource schema, state handle and the aws_quicksight_group resource."""

from .base import Resource, import_state_passthrough
from .data import ResourceData
from .group import (
    DEFAULT_GROUP_NAMESPACE,
    GROUP_SCHEMA,
    RESOURCE_TYPE,
    resource_group,
)
from .identifier import GroupID, GroupIDFormatError, format_group_id, parse_group_id
from .schema import Attribute, ResourceSchema

__all__ = [
    "Resource",
    "import_state_passthrough",
    "ResourceData",
    "DEFAULT_GROUP_NAMESPACE",
    "GROUP_SCHEMA",
    "RESOURCE_TYPE",
    "resource_group",
    "GroupID",
    "GroupIDFormatError",
    "format_group_id",
    "parse_group_id",
    "Attribute",
    "ResourceSchema",
]
