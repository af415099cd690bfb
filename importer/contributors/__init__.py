"""Metadata Contributors.

Contributors extract the values of one destination field from a parsed
source record.

Main components:
- MetadataContributor: Abstract base class for all contributors
- SimpleXpathContributor: Maps every node matched by an XPath query to a value
- ArXivIdContributor: XPath contributor that keeps the trailing identifier segment
- QueryExpression / QueryError: Namespace-aware XPath evaluation
"""

from .arxiv_id import ArXivIdContributor, normalize_identifiers
from .base import MetadataContributor
from .xpath import (
    Attribute,
    Element,
    Literal,
    MatchedNode,
    QueryError,
    QueryExpression,
    SimpleXpathContributor,
    Text,
    Unrecognized,
    classify_node,
    evaluate_query,
    extract_value,
)

__all__ = [
    "MetadataContributor",
    "SimpleXpathContributor",
    "ArXivIdContributor",
    "normalize_identifiers",
    "QueryExpression",
    "QueryError",
    "MatchedNode",
    "Element",
    "Attribute",
    "Text",
    "Literal",
    "Unrecognized",
    "classify_node",
    "evaluate_query",
    "extract_value",
]
__version__ = "0.1.0"
