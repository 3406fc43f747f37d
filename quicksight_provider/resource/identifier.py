# Copyright (c) 2026 The quicksight-group-provider authors.
# Licensed under the Apache License, Version 2.0.

"""Composite identifier for QuickSight groups.

A group is identified by ``AWS_ACCOUNT_ID/NAMESPACE/GROUP_NAME``. The
identifier is built once when the group is created and parsed back into
its parts by every later operation.
"""

from typing import NamedTuple

ID_SEPARATOR = "/"


class GroupIDFormatError(ValueError):
    """Raised when a group identifier does not have three non-empty parts."""

    def __init__(self, resource_id: str):
        self.resource_id = resource_id
        super().__init__(
            f"unexpected format of ID ({resource_id}), "
            "expected AWS_ACCOUNT_ID/NAMESPACE/GROUP_NAME"
        )


class GroupID(NamedTuple):
    """The parts of a group identifier."""

    aws_account_id: str
    namespace: str
    group_name: str

    def __str__(self) -> str:
        return format_group_id(self.aws_account_id, self.namespace, self.group_name)


def format_group_id(aws_account_id: str, namespace: str, group_name: str) -> str:
    """Join account, namespace and group name into an identifier."""
    return ID_SEPARATOR.join((aws_account_id, namespace, group_name))


def parse_group_id(resource_id: str) -> GroupID:
    """
    Split an identifier into account, namespace and group name.

    The string is split at most twice, so anything after the second
    separator belongs to the group name.

    Args:
        resource_id: Identifier in AWS_ACCOUNT_ID/NAMESPACE/GROUP_NAME form

    Returns:
        GroupID with the three parts

    Raises:
        GroupIDFormatError: If there are fewer than three parts or any part is empty
    """
    parts = resource_id.split(ID_SEPARATOR, 2)
    if len(parts) < 3 or not all(parts):
        raise GroupIDFormatError(resource_id)
    return GroupID(*parts)
