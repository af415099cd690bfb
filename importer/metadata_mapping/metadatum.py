"""Metadatum: one extracted value tagged with its destination field."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from .field_config import MetadataFieldConfig


@dataclass
class Metadatum:
    """A single metadata value produced by a contributor.

    The value is mutable so post-processing steps (e.g. identifier
    normalization) can rewrite it in place before the batch is returned.
    """

    field: MetadataFieldConfig
    value: Optional[str]

    @property
    def schema(self) -> str:
        return self.field.schema

    @property
    def element(self) -> str:
        return self.field.element

    @property
    def qualifier(self) -> Optional[str]:
        return self.field.qualifier

    def to_dict(self) -> dict[str, Any]:
        """Flat representation used by the CLI output."""
        return {
            "schema": self.schema,
            "element": self.element,
            "qualifier": self.qualifier,
            "value": self.value,
        }
