# Copyright (c) 2026 The quicksight-group-provider authors.
# Licensed under the Apache License, Version 2.0.

"""Shared provider state handed to every resource handler.

ProviderMeta holds the account the provider runs as and creates the
QuickSight client on first use, reusing it for every later handler call.
"""

import asyncio
import logging
from typing import Optional

import boto3
from botocore.config import Config
from botocore.exceptions import BotoCoreError, ClientError

from .clients.quicksight_client import GroupAPI, QuickSightAPIError, QuickSightClient
from .config import Settings, settings as get_default_settings

logger = logging.getLogger(__name__)


class ProviderMeta:
    """
    Provider-level state: resolved account ID, region and API clients.

    Handlers only read from this object. Tests can pass a ``quicksight``
    implementation of GroupAPI to avoid building a boto3 client.
    """

    def __init__(
        self,
        account_id: str,
        region: str = "us-east-1",
        session: Optional[boto3.Session] = None,
        boto_config: Optional[Config] = None,
        endpoint_url: Optional[str] = None,
        quicksight: Optional[GroupAPI] = None,
    ):
        """
        Initialize provider state.

        Args:
            account_id: Account used when a resource does not set one
            region: AWS region for API calls
            session: boto3 session used to create clients
            boto_config: botocore configuration applied to all clients
            endpoint_url: Optional QuickSight endpoint override
            quicksight: Pre-built QuickSight client (skips lazy creation)
        """
        self._account_id = account_id
        self._region = region
        self._session = session
        self._boto_config = boto_config
        self._endpoint_url = endpoint_url
        self._quicksight = quicksight

        logger.debug(f"ProviderMeta initialized with account={account_id}, region={region}")

    @property
    def account_id(self) -> str:
        return self._account_id

    @property
    def region(self) -> str:
        return self._region

    @property
    def boto_config(self) -> Optional[Config]:
        return self._boto_config

    def quicksight_conn(self) -> GroupAPI:
        """
        Get the QuickSight client, creating it on first use.

        Returns:
            The same client instance on every call
        """
        if self._quicksight is None:
            logger.info(f"Creating QuickSight client for region {self._region}")
            self._quicksight = QuickSightClient(
                region=self._region,
                session=self._session,
                boto_config=self._boto_config,
                endpoint_url=self._endpoint_url,
            )
        return self._quicksight

    @classmethod
    async def configure(
        cls,
        settings: Optional[Settings] = None,
        session: Optional[boto3.Session] = None,
    ) -> "ProviderMeta":
        """
        Build provider state from settings.

        The account comes from ``settings.aws_account_id`` when set,
        otherwise from STS GetCallerIdentity for the current credentials.

        Args:
            settings: Provider settings (global settings if None)
            session: boto3 session (built from settings if None)

        Returns:
            Configured ProviderMeta

        Raises:
            QuickSightAPIError: If the account cannot be resolved through STS
        """
        s = settings or get_default_settings()
        session = session or boto3.Session(
            profile_name=s.aws_profile, region_name=s.aws_region
        )
        boto_config = s.boto_config()

        account_id = s.aws_account_id
        if not account_id:
            account_id = await resolve_account_id(session, boto_config)
            logger.info(f"Resolved provider account {account_id} via STS")

        return cls(
            account_id=account_id,
            region=s.aws_region,
            session=session,
            boto_config=boto_config,
            endpoint_url=s.endpoint_url,
        )


async def resolve_account_id(
    session: boto3.Session, boto_config: Optional[Config] = None
) -> str:
    """
    Look up the account of the current credentials.

    Raises:
        QuickSightAPIError: If the STS call fails
    """
    sts = session.client("sts", config=boto_config)
    loop = asyncio.get_running_loop()
    try:
        identity = await loop.run_in_executor(None, sts.get_caller_identity)
    except ClientError as e:
        error_code = e.response.get("Error", {}).get("Code", "")
        raise QuickSightAPIError(
            f"resolving AWS account ID: {e}", error_code=error_code, operation="GetCallerIdentity"
        ) from e
    except BotoCoreError as e:
        raise QuickSightAPIError(
            f"resolving AWS account ID: {e}", operation="GetCallerIdentity"
        ) from e
    return identity["Account"]
