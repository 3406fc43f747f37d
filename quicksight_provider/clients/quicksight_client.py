# Copyright (c) 2026 The quicksight-group-provider authors.
# Licensed under the Apache License, Version 2.0.

"""QuickSight client wrapper exposing the group operations."""

import asyncio
import functools
import logging
from typing import Any, Callable, Optional, Protocol

import boto3
from botocore.config import Config
from botocore.exceptions import BotoCoreError, ClientError

from ..models.group import QuickSightGroup
from ..utils.correlation import get_correlation_id_for_logging

logger = logging.getLogger(__name__)

RESOURCE_NOT_FOUND = "ResourceNotFoundException"


class QuickSightAPIError(Exception):
    """Raised when a QuickSight API call fails."""

    def __init__(self, message: str, error_code: str = "", operation: str = ""):
        self.message = message
        self.error_code = error_code
        self.operation = operation
        super().__init__(message)


class GroupNotFoundError(QuickSightAPIError):
    """Raised when the requested group (or its namespace) does not exist."""


class GroupAPI(Protocol):
    """The four group calls the Group resource depends on."""

    async def create_group(
        self,
        *,
        aws_account_id: str,
        namespace: str,
        group_name: str,
        description: Optional[str] = None,
    ) -> QuickSightGroup: ...

    async def describe_group(
        self, *, aws_account_id: str, namespace: str, group_name: str
    ) -> QuickSightGroup: ...

    async def update_group(
        self,
        *,
        aws_account_id: str,
        namespace: str,
        group_name: str,
        description: Optional[str] = None,
    ) -> None: ...

    async def delete_group(
        self, *, aws_account_id: str, namespace: str, group_name: str
    ) -> None: ...


class QuickSightClient:
    """
    Async wrapper around the boto3 QuickSight client.

    Each blocking boto3 call runs in the default executor. Retries are
    left to botocore (see ``Settings.boto_config``); this wrapper only
    translates errors into QuickSightAPIError / GroupNotFoundError.
    """

    def __init__(
        self,
        region: str = "us-east-1",
        session: Optional[boto3.Session] = None,
        boto_config: Optional[Config] = None,
        endpoint_url: Optional[str] = None,
    ):
        """
        Initialize the QuickSight client.

        Args:
            region: AWS region to call
            session: boto3 session to create the client from (default session if None)
            boto_config: botocore configuration (retries, timeouts)
            endpoint_url: Optional endpoint override
        """
        self.region = region
        session = session or boto3.Session()
        self.quicksight = session.client(
            "quicksight",
            region_name=region,
            config=boto_config,
            endpoint_url=endpoint_url,
        )

    async def _call(self, operation: str, func: Callable[..., dict], **kwargs: Any) -> dict:
        """
        Run a boto3 call in the executor and translate its errors.

        Args:
            operation: API operation name, used in logs and errors
            func: Bound boto3 client method
            **kwargs: Request parameters

        Returns:
            Raw response dict

        Raises:
            GroupNotFoundError: If QuickSight reports ResourceNotFoundException
            QuickSightAPIError: For every other client or transport failure
        """
        logger.debug(
            f"QuickSight {operation} request: {kwargs}",
            extra=get_correlation_id_for_logging(),
        )
        loop = asyncio.get_running_loop()
        try:
            return await loop.run_in_executor(None, functools.partial(func, **kwargs))
        except ClientError as e:
            error_code = e.response.get("Error", {}).get("Code", "")
            if error_code == RESOURCE_NOT_FOUND:
                raise GroupNotFoundError(str(e), error_code=error_code, operation=operation) from e
            raise QuickSightAPIError(str(e), error_code=error_code, operation=operation) from e
        except BotoCoreError as e:
            raise QuickSightAPIError(str(e), operation=operation) from e

    async def create_group(
        self,
        *,
        aws_account_id: str,
        namespace: str,
        group_name: str,
        description: Optional[str] = None,
    ) -> QuickSightGroup:
        params = {
            "AwsAccountId": aws_account_id,
            "Namespace": namespace,
            "GroupName": group_name,
        }
        if description:
            params["Description"] = description

        response = await self._call("CreateGroup", self.quicksight.create_group, **params)
        return QuickSightGroup.from_api(response.get("Group", {}))

    async def describe_group(
        self, *, aws_account_id: str, namespace: str, group_name: str
    ) -> QuickSightGroup:
        response = await self._call(
            "DescribeGroup",
            self.quicksight.describe_group,
            AwsAccountId=aws_account_id,
            Namespace=namespace,
            GroupName=group_name,
        )
        return QuickSightGroup.from_api(response.get("Group", {}))

    async def update_group(
        self,
        *,
        aws_account_id: str,
        namespace: str,
        group_name: str,
        description: Optional[str] = None,
    ) -> None:
        params = {
            "AwsAccountId": aws_account_id,
            "Namespace": namespace,
            "GroupName": group_name,
        }
        if description:
            params["Description"] = description

        await self._call("UpdateGroup", self.quicksight.update_group, **params)

    async def delete_group(
        self, *, aws_account_id: str, namespace: str, group_name: str
    ) -> None:
        await self._call(
            "DeleteGroup",
            self.quicksight.delete_group,
            AwsAccountId=aws_account_id,
            Namespace=namespace,
            GroupName=group_name,
        )
