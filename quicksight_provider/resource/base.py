# Copyright (c) 2026 The quicksight-group-provider authors.
# Licensed under the Apache License, Version 2.0.

"""Resource definition and lifecycle driver.

A Resource bundles a schema with its create, read, update and delete
handlers and an optional importer. The ``apply_*``, ``refresh``,
``destroy`` and ``import_state`` methods drive those handlers the way a
declarative engine would: configuration is validated before any handler
runs, and create and import are followed by a read.
"""

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Awaitable, Callable, Optional

from ..models.diagnostics import Diagnostics, error_diagnostic, has_error
from ..models.state import ResourceState
from ..utils.correlation import get_correlation_id_for_logging, operation_context
from .data import ResourceData
from .schema import ResourceSchema

if TYPE_CHECKING:
    from ..provider import ProviderMeta

logger = logging.getLogger(__name__)

Handler = Callable[[ResourceData, "ProviderMeta"], Awaitable[Diagnostics]]
Importer = Callable[[ResourceData, "ProviderMeta"], Awaitable[list[ResourceData]]]


async def import_state_passthrough(data: ResourceData, meta: "ProviderMeta") -> list[ResourceData]:
    """Importer that keeps the user-supplied identifier as the resource ID."""
    return [data]


@dataclass
class Resource:
    """A resource type: its schema plus lifecycle handlers."""

    schema: ResourceSchema
    create: Handler
    read: Handler
    update: Handler
    delete: Handler
    importer: Optional[Importer] = None

    @property
    def type_name(self) -> str:
        return self.schema.type_name

    async def apply_create(
        self, config: dict[str, Any], meta: "ProviderMeta"
    ) -> tuple[ResourceData, Diagnostics]:
        """
        Validate configuration and create the resource.

        Args:
            config: Attribute values as written by the user
            meta: Provider state holding the API client

        Returns:
            The resource data (with an ID on success) and diagnostics
        """
        with operation_context(self.type_name, "create"):
            diags = self.schema.validate_config(config)
            data = ResourceData(
                self.schema, config=self.schema.apply_defaults(config), is_new=True
            )
            if has_error(diags):
                return data, diags

            diags.extend(await self.create(data, meta))
            return data, diags

    async def refresh(
        self, state: ResourceState, meta: "ProviderMeta"
    ) -> tuple[ResourceData, Diagnostics]:
        """Re-read a stored resource. An empty ID afterwards means it is gone."""
        with operation_context(self.type_name, "read"):
            data = ResourceData(self.schema, state=state.attributes, resource_id=state.id)
            diags = await self.read(data, meta)
            return data, diags

    async def apply_update(
        self, state: ResourceState, config: dict[str, Any], meta: "ProviderMeta"
    ) -> tuple[ResourceData, Diagnostics]:
        """
        Validate configuration and update a stored resource in place.

        Changing a force-new attribute is rejected without calling the
        update handler.
        """
        with operation_context(self.type_name, "update"):
            diags = self.schema.validate_config(config)
            config = self.schema.apply_defaults(config)
            data = ResourceData(
                self.schema, config=config, state=state.attributes, resource_id=state.id
            )
            if has_error(diags):
                return data, diags

            replace = self.schema.force_new_changes(state.attributes, config)
            if replace:
                diags.append(
                    error_diagnostic(
                        f"{self.type_name} ({state.id}) must be replaced",
                        f"Changing {', '.join(replace)} forces a new resource; "
                        "delete and create it instead.",
                    )
                )
                return data, diags

            diags.extend(await self.update(data, meta))
            return data, diags

    async def destroy(self, state: ResourceState, meta: "ProviderMeta") -> Diagnostics:
        """Delete a stored resource."""
        with operation_context(self.type_name, "delete"):
            data = ResourceData(self.schema, state=state.attributes, resource_id=state.id)
            return await self.delete(data, meta)

    async def import_state(
        self, import_id: str, meta: "ProviderMeta"
    ) -> tuple[Optional[ResourceData], Diagnostics]:
        """
        Import an existing remote object by identifier and read its state.

        Returns:
            The imported resource data (None on failure) and diagnostics
        """
        with operation_context(self.type_name, "import"):
            if self.importer is None:
                return None, [
                    error_diagnostic(f"resource {self.type_name} doesn't support import")
                ]

            data = ResourceData(self.schema, resource_id=import_id)
            imported = await self.importer(data, meta)
            diags: Diagnostics = []
            for item in imported:
                diags.extend(await self.read(item, meta))
                if has_error(diags):
                    return None, diags
                if not item.id:
                    logger.info(
                        f"{self.type_name} ({import_id}) does not exist remotely",
                        extra=get_correlation_id_for_logging(),
                    )
                    diags.append(
                        error_diagnostic(
                            "Cannot import non-existent remote object",
                            f"While attempting to import an existing object to "
                            f"{self.type_name}, the provider detected that no object "
                            f"exists with the given id ({import_id}).",
                        )
                    )
                    return None, diags

            return (imported[0] if imported else None), diags
