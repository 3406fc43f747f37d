# Copyright (c) 2026 The quicksight-group-provider authors.
# Licensed under the Apache License, Version 2.0.

"""Mutable state handle passed to lifecycle handlers."""

from typing import Any, Optional

from ..models.state import ResourceState
from .schema import ResourceSchema


class ResourceData:
    """
    Attribute values of one resource instance during a lifecycle operation.

    Values start from stored state overlaid with configuration. For
    attributes the provider never computes, configuration is authoritative:
    removing an optional value from configuration unsets it. Computed
    attributes keep their stored value until configuration sets one or a
    handler calls ``set``.
    """

    def __init__(
        self,
        schema: ResourceSchema,
        config: Optional[dict[str, Any]] = None,
        state: Optional[dict[str, Any]] = None,
        resource_id: str = "",
        is_new: bool = False,
    ):
        self._schema = schema
        self._id = resource_id
        self._is_new = is_new
        self._values: dict[str, Any] = {
            k: v for k, v in (state or {}).items() if k in schema.attributes
        }

        if config is not None:
            for name, attr in schema.attributes.items():
                value = config.get(name)
                if value is not None:
                    self._values[name] = value
                elif not attr.computed:
                    self._values.pop(name, None)

    @property
    def schema(self) -> ResourceSchema:
        return self._schema

    @property
    def id(self) -> str:
        """Resource identifier; empty when the resource does not exist."""
        return self._id

    def set_id(self, resource_id: str) -> None:
        self._id = resource_id

    def is_new_resource(self) -> bool:
        """True while the resource is being created in this operation."""
        return self._is_new

    def get(self, key: str) -> Any:
        """
        Get an attribute value, or None if it is unset.

        Raises:
            KeyError: If the schema has no such attribute
        """
        self._schema.attribute(key)
        return self._values.get(key)

    def get_ok(self, key: str) -> tuple[Any, bool]:
        """
        Get an attribute value and whether it is set to a non-zero value.

        An empty string counts as unset, matching how optional API
        parameters are omitted.
        """
        self._schema.attribute(key)
        value = self._values.get(key)
        return value, value is not None and value != ""

    def set(self, key: str, value: Any) -> None:
        """
        Set an attribute value.

        Raises:
            KeyError: If the schema has no such attribute
        """
        self._schema.attribute(key)
        if value is None:
            self._values.pop(key, None)
        else:
            self._values[key] = value

    def attributes(self) -> dict[str, Any]:
        """All schema attributes with their current values (None when unset)."""
        return {name: self._values.get(name) for name in self._schema.attributes}

    def to_state(self) -> Optional[ResourceState]:
        """Snapshot as stored state, or None when the resource is gone."""
        if not self._id:
            return None
        return ResourceState(
            type_name=self._schema.type_name,
            id=self._id,
            attributes=self.attributes(),
        )
