"""
Metadata field descriptor.

A field is addressed by a three-part key: schema, element and an optional
qualifier (e.g. ``dc.identifier.other``). Descriptors are immutable so a
single instance can be shared by every contributor and every thread.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class MetadataFieldConfig:
    """Destination slot of an extracted value in the metadata schema."""

    schema: str
    element: str
    qualifier: Optional[str] = None

    def __post_init__(self) -> None:
        if not self.schema or not isinstance(self.schema, str):
            raise ValueError("schema is required and must be a non-empty string")
        if not self.element or not isinstance(self.element, str):
            raise ValueError("element is required and must be a non-empty string")

    @classmethod
    def from_string(cls, full_field: str) -> "MetadataFieldConfig":
        """
        Parse a dotted field name.

        Args:
            full_field: Field in ``schema.element`` or ``schema.element.qualifier`` form

        Returns:
            MetadataFieldConfig for the given field

        Raises:
            ValueError: If the string does not have two or three non-empty parts

        Example:
            >>> MetadataFieldConfig.from_string("dc.identifier.other")
            MetadataFieldConfig(schema='dc', element='identifier', qualifier='other')
        """
        parts = full_field.strip().split(".") if full_field else []
        if len(parts) not in (2, 3) or not all(parts):
            raise ValueError(f"Invalid metadata field: {full_field!r}")
        return cls(*parts)

    def __str__(self) -> str:
        if self.qualifier:
            return f"{self.schema}.{self.element}.{self.qualifier}"
        return f"{self.schema}.{self.element}"
