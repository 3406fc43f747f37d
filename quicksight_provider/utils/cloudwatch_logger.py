# Copyright (c) 2026 The quicksight-group-provider authors.
# Licensed under the Apache License, Version 2.0.

"""CloudWatch logging configuration and utilities."""

import logging
import os
import socket
import sys
from typing import Optional

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from .correlation import CorrelationIdFilter

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - [%(correlation_id)s] %(message)s"


def default_log_stream() -> str:
    """Stream name used when none is configured: ``<hostname>-<pid>``."""
    return f"{socket.gethostname()}-{os.getpid()}"


class CloudWatchHandler(logging.Handler):
    """Logging handler that ships provider operation logs to CloudWatch Logs."""

    def __init__(
        self,
        log_group: str,
        log_stream: str,
        region: str = "us-east-1",
        session: Optional[boto3.Session] = None,
    ):
        """
        Initialize CloudWatch logging handler.

        Args:
            log_group: CloudWatch log group name
            log_stream: CloudWatch log stream name
            region: AWS region for CloudWatch
            session: boto3 session to create the logs client from
        """
        super().__init__()
        self.log_group = log_group
        self.log_stream = log_stream
        self.region = region
        session = session or boto3.Session()
        self.client = session.client("logs", region_name=region)
        self._ensure_log_group_and_stream()

    def _ensure_log_group_and_stream(self) -> None:
        """Create log group and stream if they don't exist."""
        try:
            for create, kwargs in (
                (self.client.create_log_group, {"logGroupName": self.log_group}),
                (
                    self.client.create_log_stream,
                    {"logGroupName": self.log_group, "logStreamName": self.log_stream},
                ),
            ):
                try:
                    create(**kwargs)
                except ClientError as e:
                    if e.response["Error"]["Code"] != "ResourceAlreadyExistsException":
                        raise
        except (ClientError, BotoCoreError) as e:
            print(f"Failed to setup CloudWatch logging: {e}", file=sys.stderr)

    def emit(self, record: logging.LogRecord) -> None:
        """
        Emit a log record to CloudWatch.

        Args:
            record: The log record to emit
        """
        try:
            self.client.put_log_events(
                logGroupName=self.log_group,
                logStreamName=self.log_stream,
                logEvents=[
                    {
                        "message": self.format(record),
                        "timestamp": int(record.created * 1000),
                    }
                ],
            )
        except Exception as e:
            # Logging handlers must never raise into the caller
            print(f"Failed to send log to CloudWatch: {e}", file=sys.stderr)


def configure_cloudwatch_logging(
    log_group: str,
    log_stream: Optional[str] = None,
    region: str = "us-east-1",
    enable: bool = True,
    profile: Optional[str] = None,
) -> Optional[CloudWatchHandler]:
    """
    Attach a CloudWatch handler to the root logger.

    Args:
        log_group: CloudWatch log group name
        log_stream: CloudWatch log stream name (default: <hostname>-<pid>)
        region: AWS region for CloudWatch
        enable: Whether to enable CloudWatch logging
        profile: AWS credentials profile, as used for the QuickSight client

    Returns:
        The installed handler, or None when disabled or setup failed
    """
    if not enable:
        return None

    log_stream = log_stream or default_log_stream()
    try:
        session = boto3.Session(profile_name=profile, region_name=region)
        handler = CloudWatchHandler(
            log_group=log_group,
            log_stream=log_stream,
            region=region,
            session=session,
        )
    except (ClientError, BotoCoreError) as e:
        print(f"Failed to configure CloudWatch logging: {e}", file=sys.stderr)
        return None

    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    handler.addFilter(CorrelationIdFilter())
    logging.getLogger().addHandler(handler)

    logging.getLogger(__name__).info(
        f"CloudWatch logging configured: group={log_group}, stream={log_stream}"
    )
    return handler
