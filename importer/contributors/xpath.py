"""
XPath metadata contribution.

This module evaluates namespace-aware XPath queries over parsed records and
turns every matched node into a metadata value.

Key Responsibilities:
- Bind namespace prefixes and evaluate a query (QueryExpression)
- Classify lxml results into explicit node kinds (classify_node)
- Extract a string from each recognized kind (extract_value)
- Build one Metadatum per recognized node (SimpleXpathContributor)

Unrecognized node kinds (comments, processing instructions, numbers,
booleans, namespace nodes) are logged and skipped. Query errors abort the
whole call.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Optional, Union

from lxml import etree

from ..metadata_mapping.field_config import MetadataFieldConfig
from ..metadata_mapping.field_mapping import MetadataFieldMapping
from ..metadata_mapping.metadatum import Metadatum
from ..metadata_mapping.namespaces import NamespaceBinder
from .base import MetadataContributor

logger = logging.getLogger(__name__)


class QueryError(Exception):
    """Raised when an XPath query is malformed or cannot be evaluated."""

    def __init__(self, query: str, message: str):
        super().__init__(query, message)
        self.query = query
        self.message = message

    def __str__(self) -> str:
        return f"{self.message} (query: {self.query!r})"


# ============================================================================
# Matched node kinds
# ============================================================================

@dataclass(frozen=True)
class Element:
    text: str


@dataclass(frozen=True)
class Attribute:
    value: str


@dataclass(frozen=True)
class Text:
    content: str


@dataclass(frozen=True)
class Literal:
    string: str


@dataclass(frozen=True)
class Unrecognized:
    kind: str


MatchedNode = Union[Element, Attribute, Text, Literal, Unrecognized]


def _element_text(element: etree._Element) -> str:
    """Concatenate the element's direct text children."""
    parts = [element.text or ""]
    parts.extend(child.tail or "" for child in element)
    return "".join(parts)


def classify_node(raw: Any) -> MatchedNode:
    """
    Map a raw lxml XPath result item to a MatchedNode.

    lxml returns attribute values and text nodes as "smart" strings that
    know whether they came from an attribute or a text node; any other
    string (string(), concat(), ...) is a literal.

    Args:
        raw: One item of an XPath result

    Returns:
        The corresponding MatchedNode variant
    """
    if isinstance(raw, etree._Element):
        # Comments and processing instructions are _Element subclasses
        # whose tag is a factory function, not a name
        if isinstance(raw.tag, str):
            return Element(_element_text(raw))
        return Unrecognized(type(raw).__name__)

    if isinstance(raw, etree._ElementUnicodeResult):
        if raw.is_attribute:
            return Attribute(str(raw))
        if raw.is_text or raw.is_tail:
            return Text(str(raw))
        return Literal(str(raw))

    # bool is not a str, so booleans fall through with numbers
    if isinstance(raw, str):
        return Literal(raw)

    return Unrecognized(type(raw).__name__)


def extract_value(node: MatchedNode) -> Optional[str]:
    """
    Return the string carried by a recognized node, or None for Unrecognized.

    Raises:
        TypeError: If ``node`` is not a MatchedNode variant
    """
    if isinstance(node, Element):
        return node.text
    if isinstance(node, Attribute):
        return node.value
    if isinstance(node, Text):
        return node.content
    if isinstance(node, Literal):
        return node.string
    if isinstance(node, Unrecognized):
        return None
    raise TypeError(f"Not a matched node: {type(node).__name__}")


# ============================================================================
# Query evaluation
# ============================================================================

@dataclass(frozen=True)
class QueryExpression:
    """An XPath query plus the namespace bindings used to evaluate it."""

    query: str
    namespaces: NamespaceBinder = NamespaceBinder()

    def __post_init__(self) -> None:
        if not self.query or not isinstance(self.query, str) or not self.query.strip():
            raise ValueError("query is required and must be a non-empty string")

    def evaluate(self, root: Any, log: Optional[logging.Logger] = None) -> list[MatchedNode]:
        """
        Evaluate the query against a parsed document.

        The XPath object is compiled per call so concurrent evaluations
        never share lxml state.

        Args:
            root: lxml element or element tree to evaluate against
            log: Logger receiving the failed query (defaults to the module logger)

        Returns:
            Matched nodes in the order lxml yields them

        Raises:
            QueryError: If the query cannot be compiled or evaluated
        """
        try:
            xpath = etree.XPath(self.query, namespaces=self.namespaces.bind())
            # lxml rejects anything but its own nodes and trees with TypeError
            result = xpath(root)
        except (etree.XPathError, TypeError) as exc:
            (log or logger).error(
                "XPath query failed: %s",
                self.query,
                extra={
                    "query": self.query,
                    "error": str(exc),
                    "error_type": type(exc).__name__,
                },
            )
            raise QueryError(self.query, str(exc)) from exc

        if not isinstance(result, list):
            result = [result]
        return [classify_node(item) for item in result]


def evaluate_query(query: QueryExpression, root: Any) -> list[MatchedNode]:
    """Functional alias for ``query.evaluate(root)``."""
    return query.evaluate(root)


# ============================================================================
# Contributor
# ============================================================================

class SimpleXpathContributor(MetadataContributor):
    """Contributor that maps every node matched by an XPath query to a value.

    Example:
        contributor = SimpleXpathContributor(
            query="atom:title",
            field=MetadataFieldConfig.from_string("dc.title"),
            namespaces=get_namespace_profile("arxiv"),
        )
        records = contributor.contribute_metadata(entry)
    """

    def __init__(
        self,
        query: str,
        field: MetadataFieldConfig,
        namespaces: Optional[NamespaceBinder] = None,
        metadata_field_mapping: Optional[MetadataFieldMapping] = None,
        logger: Optional[logging.Logger] = None,
    ):
        super().__init__(field, metadata_field_mapping=metadata_field_mapping, logger=logger)
        self._query = QueryExpression(query, namespaces or NamespaceBinder())

    @property
    def query(self) -> str:
        return self._query.query

    @property
    def namespaces(self) -> NamespaceBinder:
        return self._query.namespaces

    def contribute_metadata(self, record: Any) -> list[Metadatum]:
        """
        Extract values for this contributor's field from a record.

        Args:
            record: Parsed XML record (lxml element or tree)

        Returns:
            One Metadatum per recognized matched node, in document order

        Raises:
            QueryError: If the query cannot be evaluated; nothing is returned
        """
        nodes = self._query.evaluate(record, log=self._logger)

        values: list[Metadatum] = []
        for node in nodes:
            value = extract_value(node)
            if value is None:
                self._logger.error(
                    "node of type: %s",
                    node.kind,
                    extra={"node_kind": node.kind, "query": self.query},
                )
                continue
            values.append(self.metadata_field_mapping.to_dc_value(self.field, value))

        self._postprocess(values)

        self._logger.debug(
            "Contributed metadata",
            extra={
                "field": str(self.field),
                "matched_nodes": len(nodes),
                "values": len(values),
            },
        )
        return values

    def _postprocess(self, values: list[Metadatum]) -> None:
        """Hook for subclasses to rewrite the batch in place."""

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(field='{self.field}', query='{self.query}')"
