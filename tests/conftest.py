"""
Pytest configuration and shared fixtures

This file contains test fixtures that can be used across all tests.
Fixtures are reusable components that set up test preconditions.

Learn more: https://docs.pytest.org/en/stable/fixture.html
"""

from pathlib import Path

import pytest
from lxml import etree

from importer.metadata_mapping import MetadataFieldConfig, NamespaceBinder


ATOM_NS = "http://www.w3.org/2005/Atom"
ARXIV_NS = "http://arxiv.org/schemas/atom"

ARXIV_FEED = b"""<?xml version="1.0" encoding="UTF-8"?>
<feed xmlns="http://www.w3.org/2005/Atom"
      xmlns:arxiv="http://arxiv.org/schemas/atom"
      xmlns:opensearch="http://a9.com/-/spec/opensearch/1.1/">
  <title type="html">ArXiv Query: search_query=all:electron</title>
  <opensearch:totalResults>2</opensearch:totalResults>
  <entry>
    <id>http://arxiv.org/abs/2101.00001v2</id>
    <title>Electron transport in layered materials</title>
    <link href="http://arxiv.org/abs/2101.00001v2" rel="alternate" type="text/html"/>
    <link title="pdf" href="http://arxiv.org/pdf/2101.00001v2" rel="related" type="application/pdf"/>
    <arxiv:doi>10.1103/PhysRevB.103.000001</arxiv:doi>
    <!-- mirrored from export.arxiv.org -->
  </entry>
  <entry>
    <id>http://arxiv.org/abs/1234.5678</id>
    <title>Quantum dots revisited</title>
    <link href="http://arxiv.org/abs/1234.5678" rel="alternate" type="text/html"/>
  </entry>
</feed>
"""


@pytest.fixture(scope="session")
def arxiv_namespaces() -> NamespaceBinder:
    """
    Provide the namespace bindings used by arXiv Atom queries.

    Scope: session (immutable, shared by all tests)

    Returns:
        NamespaceBinder: URI to prefix mapping for Atom and arXiv
    """
    return NamespaceBinder({ATOM_NS: "atom", ARXIV_NS: "arxiv"})


@pytest.fixture(scope="session")
def identifier_field() -> MetadataFieldConfig:
    """Provide the dc.identifier.other field descriptor."""
    return MetadataFieldConfig("dc", "identifier", "other")


@pytest.fixture(scope="function")
def arxiv_feed() -> etree._Element:
    """
    Provide a parsed arXiv Atom feed with two entries.

    The first entry also carries a DOI and a comment node, the second one
    uses an old-style numeric identifier.

    Scope: function (parsed fresh for each test)

    Returns:
        etree._Element: Root <feed> element
    """
    return etree.fromstring(ARXIV_FEED)


@pytest.fixture(scope="function")
def arxiv_feed_file(tmp_path: Path) -> Path:
    """Write the sample arXiv feed to a temporary file and return its path."""
    path = tmp_path / "feed.xml"
    path.write_bytes(ARXIV_FEED)
    return path


# Mark tests based on their type for selective running
def pytest_configure(config):
    """
    Register custom pytest markers.

    This allows us to run specific test categories:
    - pytest -m unit        (run only unit tests)
    - pytest -m integration (run only integration tests)
    - pytest -m "not slow"  (skip slow tests)
    """
    config.addinivalue_line(
        "markers", "unit: mark test as a unit test (isolated, fast)"
    )
    config.addinivalue_line(
        "markers", "integration: mark test as an integration test (requires services)"
    )
    config.addinivalue_line(
        "markers", "slow: mark test as slow running (>1 second)"
    )
