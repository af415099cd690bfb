"""
Unit Tests for Metadata Field Mapping

Test Organization:
- TestMetadataFieldConfig: Field descriptor parsing and rendering
- TestSimpleMetadataFieldMapping: Record building and multi-contributor mapping
"""

import pytest

from importer.contributors import ArXivIdContributor, QueryError, SimpleXpathContributor
from importer.metadata_mapping import MetadataFieldConfig, Metadatum, SimpleMetadataFieldMapping


class TestMetadataFieldConfig:
    """Tests for MetadataFieldConfig"""

    def test_from_string_with_qualifier(self):
        field = MetadataFieldConfig.from_string("dc.identifier.other")
        assert field == MetadataFieldConfig("dc", "identifier", "other")
        assert str(field) == "dc.identifier.other"

    def test_from_string_without_qualifier(self):
        field = MetadataFieldConfig.from_string("dc.title")
        assert field.qualifier is None
        assert str(field) == "dc.title"

    @pytest.mark.parametrize("bad", ["", "dc", "dc..other", "a.b.c.d", None])
    def test_from_string_invalid(self, bad):
        with pytest.raises(ValueError):
            MetadataFieldConfig.from_string(bad)

    def test_requires_schema_and_element(self):
        with pytest.raises(ValueError):
            MetadataFieldConfig("", "title")
        with pytest.raises(ValueError):
            MetadataFieldConfig("dc", "")

    def test_hashable_and_immutable(self):
        field = MetadataFieldConfig("dc", "title")
        assert {field: 1}[MetadataFieldConfig("dc", "title")] == 1
        with pytest.raises(AttributeError):
            field.schema = "other"


class TestSimpleMetadataFieldMapping:
    """Tests for SimpleMetadataFieldMapping"""

    def test_to_dc_value(self, identifier_field):
        mapping = SimpleMetadataFieldMapping()
        value = mapping.to_dc_value(identifier_field, "1234.5678")

        assert value == Metadatum(identifier_field, "1234.5678")
        assert (value.schema, value.element, value.qualifier) == ("dc", "identifier", "other")

    def test_register_keeps_contributor_mapping(self, arxiv_namespaces, identifier_field):
        """Registering only adds to the run order; the contributor's mapping is fixed at construction"""
        mapping = SimpleMetadataFieldMapping()
        own_mapping = SimpleMetadataFieldMapping()
        contributor = ArXivIdContributor(
            "//atom:id", identifier_field, arxiv_namespaces, metadata_field_mapping=own_mapping
        )

        mapping.register(contributor)

        assert contributor.metadata_field_mapping is own_mapping
        assert mapping.contributors == (contributor,)

    def test_contributor_mapping_is_read_only(self, arxiv_namespaces, identifier_field):
        contributor = ArXivIdContributor("//atom:id", identifier_field, arxiv_namespaces)
        with pytest.raises(AttributeError):
            contributor.metadata_field_mapping = SimpleMetadataFieldMapping()

    def test_result_to_dc_value_mapping(self, arxiv_feed, arxiv_namespaces, identifier_field):
        """Results of all contributors are concatenated in registration order"""
        title_field = MetadataFieldConfig.from_string("dc.title")
        mapping = SimpleMetadataFieldMapping([
            SimpleXpathContributor("//atom:entry/atom:title", title_field, arxiv_namespaces),
            ArXivIdContributor("//atom:entry/atom:id", identifier_field, arxiv_namespaces),
        ])

        values = mapping.result_to_dc_value_mapping(arxiv_feed)

        assert [(str(v.field), v.value) for v in values] == [
            ("dc.title", "Electron transport in layered materials"),
            ("dc.title", "Quantum dots revisited"),
            ("dc.identifier.other", "2101.00001v2"),
            ("dc.identifier.other", "1234.5678"),
        ]

    def test_result_mapping_propagates_query_errors(self, arxiv_feed, arxiv_namespaces, identifier_field):
        mapping = SimpleMetadataFieldMapping([
            ArXivIdContributor("//atom:id[", identifier_field, arxiv_namespaces),
        ])
        with pytest.raises(QueryError):
            mapping.result_to_dc_value_mapping(arxiv_feed)


pytestmark = pytest.mark.unit
