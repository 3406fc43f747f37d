# Copyright (c) 2026 The quicksight-group-provider authors.
# Licensed under the Apache License, Version 2.0.

"""Declarative resource schema.

A ResourceSchema describes the string attributes of one resource type:
whether the user must, may or cannot set them, whether
changing them forces a new resource, their default and an optional
validator. Configuration is checked against the schema before any
remote call is made.
"""

import logging
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

from ..models.diagnostics import Diagnostics, error_diagnostic
from ..utils.input_validation import ValidationError, Validator

logger = logging.getLogger(__name__)


class Attribute(BaseModel):
    """Definition of a single schema attribute."""

    model_config = ConfigDict(frozen=True)

    required: bool = Field(default=False, description="Must be set in configuration")
    optional: bool = Field(default=False, description="May be set in configuration")
    computed: bool = Field(default=False, description="Value may be filled in by the provider")
    force_new: bool = Field(
        default=False, description="Changing the value requires replacing the resource"
    )
    default: Any = Field(default=None, description="Value used when configuration omits it")
    description: str = Field(default="", description="Human-readable description")
    validate_func: Optional[Validator] = Field(
        default=None, description="Callable (field, value) raising ValidationError"
    )

    @model_validator(mode="after")
    def check_flags(self) -> "Attribute":
        if self.required and (self.optional or self.computed):
            raise ValueError("a required attribute cannot also be optional or computed")
        if not (self.required or self.optional or self.computed):
            raise ValueError("an attribute must be required, optional or computed")
        if self.default is not None and (self.required or self.computed):
            raise ValueError("only optional, non-computed attributes may have a default")
        return self

    @property
    def computed_only(self) -> bool:
        """True when the provider sets the value and configuration cannot."""
        return self.computed and not self.optional


class ResourceSchema(BaseModel):
    """Attributes of one resource type."""

    type_name: str = Field(..., description="Resource type, e.g. aws_quicksight_group")
    attributes: dict[str, Attribute] = Field(..., description="Attributes keyed by name")

    def attribute(self, name: str) -> Attribute:
        """Look up an attribute, raising KeyError for unknown names."""
        try:
            return self.attributes[name]
        except KeyError:
            raise KeyError(f"{self.type_name} has no attribute named {name!r}") from None

    def validate_config(self, config: dict[str, Any]) -> Diagnostics:
        """
        Check a configuration against the schema.

        Args:
            config: Attribute values as written by the user

        Returns:
            Error diagnostics, one per problem found (empty if valid)
        """
        diags: Diagnostics = []

        for name in config:
            if name not in self.attributes:
                diags.append(
                    error_diagnostic(
                        "Unsupported argument",
                        f'An argument named "{name}" is not expected here.',
                        attribute=name,
                    )
                )

        for name, attr in self.attributes.items():
            value = config.get(name)
            if value is None:
                if attr.required:
                    diags.append(
                        error_diagnostic(
                            "Missing required argument",
                            f'The argument "{name}" is required, but no definition was found.',
                            attribute=name,
                        )
                    )
                continue

            if attr.computed_only:
                diags.append(
                    error_diagnostic(
                        "Value for unconfigurable attribute",
                        f'Can\'t configure a value for "{name}": its value will be decided '
                        "automatically based on the result of applying this configuration.",
                        attribute=name,
                    )
                )
                continue

            if not isinstance(value, str):
                diags.append(
                    error_diagnostic(
                        "Incorrect attribute value type",
                        f"expected type of {name} to be string",
                        attribute=name,
                    )
                )
                continue

            if attr.validate_func is not None:
                try:
                    attr.validate_func(name, value)
                except ValidationError as e:
                    diags.append(error_diagnostic(e.message, attribute=name))

        if diags:
            logger.debug(f"{self.type_name} configuration rejected with {len(diags)} error(s)")
        return diags

    def apply_defaults(self, config: dict[str, Any]) -> dict[str, Any]:
        """Return a copy of the configuration with defaults filled in."""
        result = dict(config)
        for name, attr in self.attributes.items():
            if result.get(name) is None and attr.default is not None:
                result[name] = attr.default
        return result

    def force_new_changes(
        self, prior: dict[str, Any], config: dict[str, Any]
    ) -> list[str]:
        """
        List force-new attributes whose configured value differs from prior state.

        An optional computed attribute that the configuration leaves unset
        keeps its prior value and does not count as a change.

        Args:
            prior: Attribute values from stored state
            config: Configuration with defaults applied

        Returns:
            Sorted attribute names that would require replacement
        """
        changed = []
        for name, attr in self.attributes.items():
            if not attr.force_new:
                continue
            new = config.get(name)
            if new is None and attr.computed:
                continue
            if new != prior.get(name):
                changed.append(name)
        return sorted(changed)
