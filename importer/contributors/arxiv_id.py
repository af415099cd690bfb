"""
arXiv identifier contributor.

arXiv Atom entries carry their identifier as an abstract URL, e.g.
``http://arxiv.org/abs/2101.00001v2``. This contributor selects that value
with an XPath query and keeps only the trailing path segment
(``2101.00001v2``) so the stored identifier is independent of the host.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Optional

from ..metadata_mapping.metadatum import Metadatum
from .xpath import SimpleXpathContributor


PATH_DELIMITER = "/"


def normalize_identifier(value: str) -> str:
    """Return the segment after the last '/' or the value unchanged."""
    if PATH_DELIMITER not in value:
        return value
    return value[value.rindex(PATH_DELIMITER) + 1:]


def normalize_identifiers(records: Optional[Iterable[Optional[Metadatum]]]) -> None:
    """
    Rewrite every record value to its trailing path segment, in place.

    Records without '/' in their value, records with no value and missing
    records are left untouched. Applying this twice is the same as once.

    Examples:
        >>> records = [Metadatum(field, "http://arxiv.org/abs/1234.5678")]
        >>> normalize_identifiers(records)
        >>> records[0].value
        '1234.5678'
    """
    if records is None:
        return
    for record in records:
        if record is None or record.value is None:
            continue
        record.value = normalize_identifier(record.value)


class ArXivIdContributor(SimpleXpathContributor):
    """XPath contributor producing host-independent arXiv identifiers.

    Example:
        contributor = ArXivIdContributor(
            query="atom:id",
            field=MetadataFieldConfig.from_string("dc.identifier.other"),
            namespaces=get_namespace_profile("arxiv"),
        )
        contributor.contribute_metadata(entry)
        # [Metadatum(field=..., value='2101.00001v2')]
    """

    def _postprocess(self, values: list[Metadatum]) -> None:
        normalize_identifiers(values)
