"""Metadata Contributor Base Class.

This module defines the interface every metadata contributor implements.
A contributor is responsible for one destination field: given a parsed
source record it returns the Metadatum values for that field.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any, Optional

from ..metadata_mapping.field_config import MetadataFieldConfig
from ..metadata_mapping.field_mapping import MetadataFieldMapping, SimpleMetadataFieldMapping
from ..metadata_mapping.metadatum import Metadatum


class MetadataContributor(ABC):
    """Abstract base class for metadata contributors.

    Contributors are configured once and then shared: the field descriptor
    and any query configuration must not change after construction, so one
    instance can serve concurrent calls over different records.

    Usage:
        class TitleContributor(MetadataContributor):
            def contribute_metadata(self, record):
                title = record.findtext("title")
                return [self.metadata_field_mapping.to_dc_value(self.field, title)]
    """

    def __init__(
        self,
        field: MetadataFieldConfig,
        metadata_field_mapping: Optional[MetadataFieldMapping] = None,
        logger: Optional[logging.Logger] = None,
    ):
        """Initialize the contributor.

        Args:
            field: Destination field of every value this contributor produces
            metadata_field_mapping: Collaborator that builds Metadatum records
                (defaults to a plain SimpleMetadataFieldMapping)
            logger: Logger used for this contributor's messages
                (defaults to the module logger of the concrete class)
        """
        if not isinstance(field, MetadataFieldConfig):
            raise ValueError("field must be a MetadataFieldConfig")
        self._field = field
        self._metadata_field_mapping = metadata_field_mapping or SimpleMetadataFieldMapping()
        self._logger = logger or logging.getLogger(type(self).__module__)

    @property
    def field(self) -> MetadataFieldConfig:
        return self._field

    @property
    def metadata_field_mapping(self) -> MetadataFieldMapping:
        return self._metadata_field_mapping

    @abstractmethod
    def contribute_metadata(self, record: Any) -> list[Metadatum]:
        """Extract the values of this contributor's field from a record.

        Args:
            record: Parsed source record

        Returns:
            Ordered list of Metadatum values (may be empty)
        """
        pass

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(field='{self._field}')"
