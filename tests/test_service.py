"""Testy rulebook.service — operacje zapytań."""

import pytest

from rulebook import (
    MalformedDocumentError,
    list_top_level_contents,
    lookup_glossary,
    lookup_rule,
    version_info,
)

RESOLVABLE = ["1", "1.1", "1.2", "1.2.a", "1.2.b", "2"]


class TestLookupRule:
    def test_concede_scenario(self, document) -> None:
        result = lookup_rule(document, "1.1")
        assert result.description == "Players may not concede."
        assert result.field("In section") == "Basics"

    @pytest.mark.parametrize("identifier", RESOLVABLE)
    def test_resolvable_is_not_error(self, document, identifier) -> None:
        assert lookup_rule(document, identifier).is_error is False

    @pytest.mark.parametrize("identifier", ["9.9", "9", "1.3", "1.1.a", "1.2.A", "2.1"])
    def test_missing_echoes_identifier(self, document, identifier) -> None:
        result = lookup_rule(document, identifier)
        assert result.is_error
        assert result.title == "Invalid rule number"
        assert identifier in result.description

    def test_malformed_section_propagates(self, document) -> None:
        with pytest.raises(MalformedDocumentError):
            lookup_rule(document, "3")

    def test_malformed_rule_propagates(self, document) -> None:
        with pytest.raises(MalformedDocumentError):
            lookup_rule(document, "3.1")


class TestLookupGlossary:
    def test_found_with_related(self, document) -> None:
        result = lookup_glossary(document, "Exhaust")
        assert not result.is_error
        assert result.title == "Exhaust"
        assert result.description == "A card is exhausted when turned sideways."
        # identyfikatory nie są sprawdzane w drzewie
        assert result.field("Related rules") == "1.1 1.2.a 9.9"

    def test_without_related(self, document) -> None:
        result = lookup_glossary(document, "Exhaust", include_related=False)
        assert result.field("Related rules") is None
        assert result.fields == ()

    def test_absent_term(self, document) -> None:
        result = lookup_glossary(document, "Teleport")
        assert result.is_error
        assert "Teleport" in result.description

    def test_lookup_is_exact(self, document) -> None:
        assert lookup_glossary(document, "exhaust").is_error

    def test_missing_description(self, document) -> None:
        with pytest.raises(MalformedDocumentError):
            lookup_glossary(document, "NoDescription")

    def test_missing_related_only_matters_when_requested(self, document) -> None:
        assert not lookup_glossary(document, "NoRelated", include_related=False).is_error
        with pytest.raises(MalformedDocumentError):
            lookup_glossary(document, "NoRelated")


class TestContentsAndVersion:
    def test_table_of_contents(self, document) -> None:
        result = list_top_level_contents(document)
        assert result.title == "Table of contents"
        assert result.description.splitlines() == ["1 - Basics", "2 - Empty", "3 - Broken"]
        assert result.field("About") == "Comprehensive rules for testing."

    def test_version(self, document) -> None:
        result = version_info(document, "0.1.0")
        assert result.field("Comprehensive Rules Version") == "1.4"
        assert result.field("Bot Version") == "0.1.0"
