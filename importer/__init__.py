"""External Record Importer Package.

This package contains the pieces used to turn externally harvested records
into internal metadata:
- metadata_mapping: Field descriptors, metadata records, field mappings and
  namespace profiles
- contributors: XPath-driven contributors that extract field values from
  parsed XML records (generic and arXiv identifier)
"""

__version__ = "0.1.0"
