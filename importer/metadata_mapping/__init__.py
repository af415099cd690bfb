"""Metadata Mapping.

Building blocks shared by every contributor:
- MetadataFieldConfig: Three-part key (schema.element.qualifier) of an output field
- Metadatum: One extracted value tagged with its destination field
- MetadataFieldMapping: Turns raw strings into Metadatum records
- NamespaceBinder: Namespace URI to prefix mapping used by XPath queries
"""

from .field_config import MetadataFieldConfig
from .field_mapping import MetadataFieldMapping, SimpleMetadataFieldMapping
from .metadatum import Metadatum
from .namespaces import NamespaceBinder, get_namespace_profile, load_namespace_profiles

__all__ = [
    "MetadataFieldConfig",
    "Metadatum",
    "MetadataFieldMapping",
    "SimpleMetadataFieldMapping",
    "NamespaceBinder",
    "get_namespace_profile",
    "load_namespace_profiles",
]
__version__ = "0.1.0"
