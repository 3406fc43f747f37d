# Copyright (c) 2026 The quicksight-group-provider authors.
# Licensed under the Apache License, Version 2.0.

"""Command line interface for managing QuickSight groups.

Usage:
    quicksight-group create analysts --group-name analysts --description "BI team"
    quicksight-group read analysts
    quicksight-group update analysts --description "BI and finance"
    quicksight-group import legacy 123456789012/default/legacy-group
    quicksight-group delete analysts
    quicksight-group show
"""

import argparse
import asyncio
import json
import logging
import sys
from typing import Any, Optional

from . import __version__
from .clients.quicksight_client import QuickSightAPIError
from .config import Settings, get_settings
from .models.diagnostics import Diagnostics, has_error
from .models.state import ResourceState
from .provider import ProviderMeta
from .resource.base import Resource
from .resource.group import resource_group
from .state_store import StateStore, StateStoreError
from .utils.cloudwatch_logger import LOG_FORMAT, configure_cloudwatch_logging
from .utils.correlation import CorrelationIdFilter

logger = logging.getLogger(__name__)

CONFIG_FLAGS = ("group_name", "namespace", "description", "aws_account_id")


def configure_logging(log_level: str) -> None:
    """
    Configure logging for the command line tool.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR)
    """
    numeric_level = getattr(logging, log_level.upper(), logging.INFO)

    handler = logging.StreamHandler(sys.stderr)
    handler.addFilter(CorrelationIdFilter())
    logging.basicConfig(level=numeric_level, format=LOG_FORMAT, handlers=[handler], force=True)

    # boto internals are noisy below WARNING
    logging.getLogger("botocore").setLevel(max(numeric_level, logging.WARNING))
    logging.getLogger("urllib3").setLevel(max(numeric_level, logging.WARNING))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="quicksight-group",
        description="Manage QuickSight groups as declarative resources",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("--state", help="Path to the state file (default: from settings)")
    parser.add_argument("--log-level", help="Logging level (default: from settings)")

    sub = parser.add_subparsers(dest="command", required=True)

    def add_config_flags(p: argparse.ArgumentParser, group_name_required: bool) -> None:
        p.add_argument("--group-name", required=group_name_required, help="Group name")
        p.add_argument("--namespace", help="QuickSight namespace (default: default)")
        p.add_argument("--description", help="Group description")
        p.add_argument("--aws-account-id", help="Account ID (default: provider account)")

    p = sub.add_parser("create", help="Create a group and record it in state")
    p.add_argument("address", help="Resource address in the state file")
    add_config_flags(p, group_name_required=True)

    p = sub.add_parser("read", help="Refresh a group's state from QuickSight")
    p.add_argument("address")

    p = sub.add_parser("update", help="Update a managed group in place")
    p.add_argument("address")
    add_config_flags(p, group_name_required=False)

    p = sub.add_parser("delete", help="Delete a managed group")
    p.add_argument("address")

    p = sub.add_parser("import", help="Bring an existing group under management")
    p.add_argument("address")
    p.add_argument("id", help="Group ID: AWS_ACCOUNT_ID/NAMESPACE/GROUP_NAME")

    p = sub.add_parser("show", help="Print stored state")
    p.add_argument("address", nargs="?")

    return parser


def config_from_args(args: argparse.Namespace, base: Optional[dict[str, Any]] = None) -> dict[str, Any]:
    """
    Build a resource configuration from command line flags.

    Args:
        args: Parsed arguments
        base: Configuration to start from (flags override it)
    """
    config = {k: v for k, v in (base or {}).items() if k in CONFIG_FLAGS and v is not None}
    for name in CONFIG_FLAGS:
        value = getattr(args, name, None)
        if value is not None:
            config[name] = value
    return config


def report(diags: Diagnostics) -> None:
    for diag in diags:
        print(str(diag), file=sys.stderr)


def print_state(resource: ResourceState) -> None:
    print(json.dumps(resource.model_dump(mode="json"), indent=2))


async def run_command(
    args: argparse.Namespace,
    resource: Resource,
    store: StateStore,
    meta: ProviderMeta,
) -> int:
    """
    Execute one lifecycle command.

    Returns:
        Process exit code (0 on success)
    """
    address = args.address

    if args.command == "create":
        if store.get(address) is not None:
            print(f"Error: {address} is already managed; use update", file=sys.stderr)
            return 1
        data, diags = await resource.apply_create(config_from_args(args), meta)
        report(diags)
        created = data.to_state()
        if created is None:
            return 1
        # The group exists once it has an ID, even if the read after create failed
        store.put(address, created)
        if has_error(diags):
            print(
                f"{address} was created but could not be read back; run read to refresh it",
                file=sys.stderr,
            )
            return 1
        print_state(created)
        return 0

    if args.command == "import":
        if store.get(address) is not None:
            print(f"Error: {address} is already managed", file=sys.stderr)
            return 1
        data, diags = await resource.import_state(args.id, meta)
        report(diags)
        if has_error(diags) or data is None:
            return 1
        store.put(address, data.to_state())
        print_state(data.to_state())
        return 0

    stored = store.get(address)
    if stored is None:
        print(f"Error: {address} is not in the state file", file=sys.stderr)
        return 1

    if args.command == "read":
        data, diags = await resource.refresh(stored, meta)
        report(diags)
        if has_error(diags):
            return 1
        current = data.to_state()
        if current is None:
            store.remove(address)
            print(f"{address} no longer exists and was removed from state", file=sys.stderr)
            return 0
        store.put(address, current)
        print_state(current)
        return 0

    if args.command == "update":
        config = config_from_args(args, base=stored.attributes)
        data, diags = await resource.apply_update(stored, config, meta)
        report(diags)
        if has_error(diags):
            return 1
        current = data.to_state()
        if current is None:
            store.remove(address)
            return 0
        store.put(address, current)
        print_state(current)
        return 0

    if args.command == "delete":
        diags = await resource.destroy(stored, meta)
        report(diags)
        if has_error(diags):
            return 1
        store.remove(address)
        print(f"{address} destroyed", file=sys.stderr)
        return 0

    raise ValueError(f"unknown command: {args.command}")


def show(store: StateStore, address: Optional[str]) -> int:
    if address is None:
        for name in store.addresses():
            print(name)
        return 0
    stored = store.get(address)
    if stored is None:
        print(f"Error: {address} is not in the state file", file=sys.stderr)
        return 1
    print_state(stored)
    return 0


async def _main(args: argparse.Namespace, config: Settings) -> int:
    store = StateStore(args.state or config.state_path)
    if args.command == "show":
        return show(store, args.address)

    meta = await ProviderMeta.configure(config)
    return await run_command(args, resource_group(), store, meta)


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point for the command line tool."""
    args = build_parser().parse_args(argv)
    config = get_settings()

    configure_logging(args.log_level or config.log_level)
    if config.cloudwatch_enabled:
        configure_cloudwatch_logging(
            log_group=config.cloudwatch_log_group,
            log_stream=config.cloudwatch_log_stream,
            region=config.aws_region,
            profile=config.aws_profile,
        )

    try:
        return asyncio.run(_main(args, config))
    except (StateStoreError, QuickSightAPIError) as e:
        logger.error(str(e))
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
