"""
Metadata Field Mapping

A field mapping is the collaborator contributors use to turn a raw string into
a Metadatum. It also owns the set of contributors configured for a given
source and can run all of them over one harvested record.

Key Responsibilities:
- Build Metadatum records from (field, value) pairs
- Keep the registered contributors in a stable order
- Run every contributor against a record and collect the results
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import TYPE_CHECKING, Any, Optional, Protocol

from .field_config import MetadataFieldConfig
from .metadatum import Metadatum

if TYPE_CHECKING:
    from ..contributors.base import MetadataContributor

logger = logging.getLogger(__name__)


class MetadataFieldMapping(Protocol):
    """Interface contributors rely on to build their output records."""

    def to_dc_value(self, field: MetadataFieldConfig, value: str) -> Metadatum:
        ...


class SimpleMetadataFieldMapping:
    """Field mapping that builds plain Metadatum records.

    Contributors registered here are run in order by
    ``result_to_dc_value_mapping``. Each contributor keeps the field mapping
    it was constructed with; registering does not change it.

    Example:
        mapping = SimpleMetadataFieldMapping()
        mapping.register(
            ArXivIdContributor(query, field, namespaces, metadata_field_mapping=mapping)
        )
        records = mapping.result_to_dc_value_mapping(entry)
    """

    def __init__(self, contributors: Optional[Iterable["MetadataContributor"]] = None):
        self._contributors: list["MetadataContributor"] = []
        for contributor in contributors or ():
            self.register(contributor)

    @property
    def contributors(self) -> tuple["MetadataContributor", ...]:
        return tuple(self._contributors)

    def register(self, contributor: "MetadataContributor") -> None:
        """Add a contributor to the end of the run order."""
        self._contributors.append(contributor)

    def to_dc_value(self, field: MetadataFieldConfig, value: str) -> Metadatum:
        """
        Build a Metadatum for the given field.

        Args:
            field: Destination field descriptor
            value: Raw extracted value

        Returns:
            New Metadatum instance
        """
        return Metadatum(field=field, value=value)

    def result_to_dc_value_mapping(self, record: Any) -> list[Metadatum]:
        """
        Run every registered contributor over one harvested record.

        Results are concatenated in registration order. Errors raised by a
        contributor are not caught here.

        Args:
            record: Parsed source record (root element)

        Returns:
            List of Metadatum records from all contributors
        """
        values: list[Metadatum] = []
        for contributor in self._contributors:
            values.extend(contributor.contribute_metadata(record))

        logger.debug(
            "Mapped record to metadata",
            extra={
                "contributors": len(self._contributors),
                "values": len(values),
            },
        )
        return values
