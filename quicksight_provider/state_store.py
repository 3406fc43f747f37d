# Copyright (c) 2026 The quicksight-group-provider authors.
# Licensed under the Apache License, Version 2.0.

"""JSON file store for resource state."""

import logging
import os
import tempfile
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field, ValidationError

from .models.state import ResourceState

logger = logging.getLogger(__name__)

STATE_FORMAT_VERSION = 1


class StateStoreError(Exception):
    """Raised when the state file cannot be read or written."""


class StateFile(BaseModel):
    """On-disk layout of the state file."""

    version: int = Field(default=STATE_FORMAT_VERSION, description="State format version")
    resources: dict[str, ResourceState] = Field(
        default_factory=dict, description="Resource state keyed by address"
    )


class StateStore:
    """Stores resource state in a single JSON file, keyed by resource address."""

    def __init__(self, path: str = "terraform-quicksight.state.json"):
        """
        Initialize the state store.

        Args:
            path: Path to the JSON state file (created on first save)
        """
        self.path = Path(path)

    def _load(self) -> StateFile:
        if not self.path.exists():
            return StateFile()
        try:
            state = StateFile.model_validate_json(self.path.read_text(encoding="utf-8"))
        except (OSError, ValidationError) as e:
            raise StateStoreError(f"reading state file {self.path}: {e}") from e
        if state.version != STATE_FORMAT_VERSION:
            raise StateStoreError(
                f"state file {self.path} has unsupported version {state.version}"
            )
        return state

    def _write(self, state: StateFile) -> None:
        directory = self.path.parent
        directory.mkdir(parents=True, exist_ok=True)
        fd, tmp_path = tempfile.mkstemp(dir=directory, prefix=f".{self.path.name}.")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(state.model_dump_json(indent=2))
            os.replace(tmp_path, self.path)
        except OSError as e:
            Path(tmp_path).unlink(missing_ok=True)
            raise StateStoreError(f"writing state file {self.path}: {e}") from e

    def get(self, address: str) -> Optional[ResourceState]:
        """Get the stored state for an address, or None if it is not managed."""
        return self._load().resources.get(address)

    def put(self, address: str, resource: ResourceState) -> None:
        """Store (or replace) the state for an address."""
        state = self._load()
        state.resources[address] = resource
        self._write(state)
        logger.debug(f"Stored state for {address} ({resource.id})")

    def remove(self, address: str) -> bool:
        """
        Forget an address.

        Returns:
            True if the address was present
        """
        state = self._load()
        if state.resources.pop(address, None) is None:
            return False
        self._write(state)
        logger.debug(f"Removed state for {address}")
        return True

    def addresses(self) -> list[str]:
        """All managed addresses, sorted."""
        return sorted(self._load().resources)
