# Copyright (c) 2026 The quicksight-group-provider authors.
# Licensed under the Apache License, Version 2.0.

"""The aws_quicksight_group resource.

Manages a QuickSight user group. The resource ID is
``AWS_ACCOUNT_ID/NAMESPACE/GROUP_NAME``; account, namespace and group
name cannot change after creation, only the description can be updated
in place.
"""

import logging
import re
from typing import TYPE_CHECKING

from ..clients.quicksight_client import GroupNotFoundError, QuickSightAPIError
from ..models.diagnostics import Diagnostics, append_errorf
from ..utils.correlation import get_correlation_id_for_logging
from ..utils.input_validation import all_of, string_len_between, string_matches
from .base import Resource, import_state_passthrough
from .data import ResourceData
from .identifier import GroupIDFormatError, format_group_id, parse_group_id
from .schema import Attribute, ResourceSchema

if TYPE_CHECKING:
    from ..provider import ProviderMeta

logger = logging.getLogger(__name__)

RESOURCE_TYPE = "aws_quicksight_group"
DEFAULT_GROUP_NAMESPACE = "default"

NAMESPACE_PATTERN = re.compile(r"[a-zA-Z0-9._-]*")
ACCOUNT_ID_PATTERN = re.compile(r"[^/]+")

GROUP_SCHEMA = ResourceSchema(
    type_name=RESOURCE_TYPE,
    attributes={
        "arn": Attribute(computed=True, description="ARN of the group"),
        "aws_account_id": Attribute(
            optional=True,
            computed=True,
            force_new=True,
            description="AWS account ID; defaults to the provider's account",
            validate_func=string_matches(ACCOUNT_ID_PATTERN, "must not contain slashes"),
        ),
        "description": Attribute(optional=True, description="Description of the group"),
        "group_name": Attribute(
            required=True, force_new=True, description="Name of the group"
        ),
        "namespace": Attribute(
            optional=True,
            force_new=True,
            default=DEFAULT_GROUP_NAMESPACE,
            description="QuickSight namespace",
            validate_func=all_of(
                string_len_between(1, 63),
                string_matches(
                    NAMESPACE_PATTERN,
                    "must contain only alphanumeric characters, hyphens, "
                    "underscores, and periods",
                ),
            ),
        ),
    },
)


async def resource_group_create(data: ResourceData, meta: "ProviderMeta") -> Diagnostics:
    diags: Diagnostics = []
    conn = meta.quicksight_conn()

    aws_account_id = meta.account_id
    namespace = data.get("namespace") or DEFAULT_GROUP_NAMESPACE

    value, ok = data.get_ok("aws_account_id")
    if ok:
        aws_account_id = value

    description, _ = data.get_ok("description")

    try:
        group = await conn.create_group(
            aws_account_id=aws_account_id,
            namespace=namespace,
            group_name=data.get("group_name"),
            description=description or None,
        )
    except QuickSightAPIError as e:
        return append_errorf(diags, "creating QuickSight Group: %s", e)

    data.set_id(format_group_id(aws_account_id, namespace, group.group_name))
    logger.info(
        f"Created QuickSight Group ({data.id})", extra=get_correlation_id_for_logging()
    )

    diags.extend(await resource_group_read(data, meta))
    return diags


async def resource_group_read(data: ResourceData, meta: "ProviderMeta") -> Diagnostics:
    diags: Diagnostics = []
    conn = meta.quicksight_conn()

    try:
        aws_account_id, namespace, group_name = parse_group_id(data.id)
    except GroupIDFormatError as e:
        return append_errorf(diags, "reading QuickSight Group (%s): %s", data.id, e)

    try:
        group = await conn.describe_group(
            aws_account_id=aws_account_id,
            namespace=namespace,
            group_name=group_name,
        )
    except GroupNotFoundError as e:
        if data.is_new_resource():
            return append_errorf(diags, "reading QuickSight Group (%s): %s", data.id, e)
        logger.warning(
            f"QuickSight Group ({data.id}) not found, removing from state",
            extra=get_correlation_id_for_logging(),
        )
        data.set_id("")
        return diags
    except QuickSightAPIError as e:
        return append_errorf(diags, "reading QuickSight Group (%s): %s", data.id, e)

    data.set("arn", group.arn)
    data.set("aws_account_id", aws_account_id)
    data.set("group_name", group.group_name)
    data.set("description", group.description)
    data.set("namespace", namespace)

    return diags


async def resource_group_update(data: ResourceData, meta: "ProviderMeta") -> Diagnostics:
    diags: Diagnostics = []
    conn = meta.quicksight_conn()

    try:
        aws_account_id, namespace, group_name = parse_group_id(data.id)
    except GroupIDFormatError as e:
        return append_errorf(diags, "updating QuickSight Group (%s): %s", data.id, e)

    description, ok = data.get_ok("description")

    try:
        await conn.update_group(
            aws_account_id=aws_account_id,
            namespace=namespace,
            group_name=group_name,
            description=description if ok else None,
        )
    except QuickSightAPIError as e:
        return append_errorf(diags, "updating QuickSight Group %s: %s", data.id, e)

    diags.extend(await resource_group_read(data, meta))
    return diags


async def resource_group_delete(data: ResourceData, meta: "ProviderMeta") -> Diagnostics:
    diags: Diagnostics = []
    conn = meta.quicksight_conn()

    try:
        aws_account_id, namespace, group_name = parse_group_id(data.id)
    except GroupIDFormatError as e:
        return append_errorf(diags, "deleting QuickSight Group (%s): %s", data.id, e)

    try:
        await conn.delete_group(
            aws_account_id=aws_account_id,
            namespace=namespace,
            group_name=group_name,
        )
    except GroupNotFoundError:
        logger.debug(
            f"QuickSight Group ({data.id}) already deleted",
            extra=get_correlation_id_for_logging(),
        )
        return diags
    except QuickSightAPIError as e:
        return append_errorf(diags, "deleting QuickSight Group %s: %s", data.id, e)

    logger.info(
        f"Deleted QuickSight Group ({data.id})", extra=get_correlation_id_for_logging()
    )
    return diags


def resource_group() -> Resource:
    """Build the aws_quicksight_group resource definition."""
    return Resource(
        schema=GROUP_SCHEMA,
        create=resource_group_create,
        read=resource_group_read,
        update=resource_group_update,
        delete=resource_group_delete,
        importer=import_state_passthrough,
    )
