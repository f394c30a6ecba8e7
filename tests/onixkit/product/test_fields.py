"""Tests for version parsing and generation-specific path resolution."""

import pytest

from onixkit.product.codes import TextConcept
from onixkit.product.fields import (
    FIELDS,
    UNIMPLEMENTED_FOR_ONIX3,
    FieldResolver,
    parse_version,
    version_at_least,
)


class TestVersions:

    @pytest.mark.parametrize("version,expected", [
        ("2.1", (2, 1)),
        ("3.0.8", (3, 0, 8)),
        ("3", (3,)),
        ("", ()),
        (None, ()),
        ("draft", ()),
    ])
    def test_parse_version(self, version, expected):
        assert parse_version(version) == expected

    @pytest.mark.parametrize("version,expected", [
        ("2.1", False),
        ("3.0", True),
        ("3", True),
        ("3.0.8", True),
        ("10.0", True),
        ("2.99", False),
        ("unknown", False),
        (None, False),
    ])
    def test_version_at_least_default_threshold(self, version, expected):
        assert version_at_least(version, "3.0") is expected

    def test_custom_threshold(self):
        assert not FieldResolver("3.0", threshold="3.1").is_onix3
        assert FieldResolver("3.1", threshold="3.1").is_onix3


class TestResolver:

    def test_legacy_paths(self):
        fields = FieldResolver("2.1")
        assert fields.generation == "legacy"
        assert fields.path("contributors") == "Contributor"
        assert fields.path("publication_date") == "PublicationDate"

    def test_onix3_paths(self):
        fields = FieldResolver("3.0")
        assert fields.generation == "onix3"
        assert fields.path("contributors") == "DescriptiveDetail/Contributor"
        assert fields.path("publication_date") == "PublishingDetail/PublishingDate/Date"
        assert fields.path("texts") == "CollateralDetail/TextContent"

    def test_candidate_paths_kept_in_order(self):
        assert FieldResolver("2.1").paths("copyright_year") == (
            "CopyrightYear", "CopyrightStatement/CopyrightYear",
        )

    def test_unimplemented_field_has_no_path(self):
        fields = FieldResolver("3.0")
        assert fields.path("number_of_pages") is None
        assert not fields.is_implemented("number_of_pages")
        assert FieldResolver("2.1").is_implemented("number_of_pages")

    def test_unknown_field_raises(self):
        with pytest.raises(KeyError):
            FieldResolver("2.1").paths("no_such_field")

    def test_unimplemented_set(self):
        assert {
            "language_of_text", "audience_codes", "audiences", "audience_ranges",
            "media_files", "measures", "no_series", "series", "number_of_pages",
        } <= UNIMPLEMENTED_FOR_ONIX3
        assert "contributors" not in UNIMPLEMENTED_FOR_ONIX3

    def test_every_field_has_a_legacy_path(self):
        assert all(location.legacy for location in FIELDS.values())


class TestTextTypes:

    @pytest.mark.parametrize("concept,legacy,onix3", [
        (TextConcept.MAIN_DESCRIPTION, "01", "03"),
        (TextConcept.REVIEW_QUOTE, "08", "06"),
        (TextConcept.BIOGRAPHICAL_NOTE, "13", "12"),
    ])
    def test_codes_differ_by_generation(self, concept, legacy, onix3):
        assert FieldResolver("2.1").text_type_code(concept) == legacy
        assert FieldResolver("3.0").text_type_code(concept) == onix3
