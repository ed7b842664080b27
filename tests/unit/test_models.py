"""Unit tests for history data models."""

import pytest
from pydantic import ValidationError

from chat_history.models import (
    ALL_CATEGORIES,
    CATEGORIES,
    FILTER_CATEGORIES,
    FilterCriteria,
    Record,
    ToolResult,
    category_label,
)


class TestRecordModel:
    """Unit tests for Record data model."""

    def test_record_creation_with_defaults(self):
        """Record can be created with just a title."""
        import uuid

        record = Record(title="Quick question")

        assert record.title == "Quick question"
        assert record.preview == ""
        assert record.archived is False
        assert record.category == "general"
        # ID should be valid UUID4 format
        uuid.UUID(record.id)

    def test_record_id_uniqueness(self):
        """Each record gets unique ID."""
        r1 = Record(title="A")
        r2 = Record(title="B")

        assert r1.id != r2.id

    def test_record_is_frozen(self):
        """Fields can't be assigned directly."""
        record = Record(id="1", title="Test")

        with pytest.raises(ValidationError):
            record.archived = True

    def test_matches_text_is_case_insensitive(self):
        """Search term matches title regardless of case."""
        record = Record(title="Blog Post Draft Review", preview="Content flow")

        assert record.matches_text("blog")
        assert record.matches_text("BLOG POST")
        assert record.matches_text("flow")
        assert not record.matches_text("metrics")

    def test_matches_text_is_substring_not_word(self):
        """Partial words match."""
        record = Record(title="Optimization", preview="")

        assert record.matches_text("timiz")

    def test_matches_text_casefolds(self):
        """Case folding handles characters lower() misses."""
        record = Record(title="Straße planning")

        assert record.matches_text("STRASSE")

    def test_empty_term_matches_everything(self):
        """Empty search term never excludes a record."""
        assert Record(title="", preview="").matches_text("")

    def test_all_rejected_as_record_category(self):
        """The filter wildcard can't be stored on a record."""
        with pytest.raises(ValidationError, match="filter value"):
            Record(title="x", category="all")

    def test_out_of_set_category_accepted(self):
        """Categories outside the known set are kept as-is."""
        assert Record(title="x", category="poetry").category == "poetry"

    def test_for_display_contains_all_fields(self):
        """for_display returns a plain dict."""
        record = Record(
            id="1",
            title="Test",
            preview="Preview",
            created_date="2024-03-15",
            created_time="14:30",
            source_label="GPT-4",
            category="coding",
        )

        data = record.for_display()

        assert data["id"] == "1"
        assert data["created_date"] == "2024-03-15"
        assert data["created_time"] == "14:30"
        assert data["source_label"] == "GPT-4"
        assert data["category"] == "coding"
        assert data["archived"] is False


class TestFilterCriteria:
    """Unit tests for the view predicate."""

    def test_defaults(self):
        criteria = FilterCriteria()

        assert criteria.search_term == ""
        assert criteria.archived_view is False
        assert criteria.category == ALL_CATEGORIES

    def test_rejects_other_partition(self):
        """Archived records never appear in the active view."""
        record = Record(title="Old", archived=True)

        assert not FilterCriteria().accepts(record)
        assert FilterCriteria(archived_view=True).accepts(record)

    def test_category_restriction(self):
        record = Record(title="Refactor", category="coding")

        assert FilterCriteria(category="coding").accepts(record)
        assert not FilterCriteria(category="writing").accepts(record)
        assert FilterCriteria(category="all").accepts(record)

    def test_all_conditions_must_hold(self):
        """Text match alone isn't enough."""
        record = Record(title="Refactor", category="coding")
        criteria = FilterCriteria(search_term="refactor", category="writing")

        assert not criteria.accepts(record)


class TestCategories:
    """Unit tests for category constants."""

    def test_all_is_not_a_record_category(self):
        assert ALL_CATEGORIES not in CATEGORIES

    def test_filter_order(self):
        assert FILTER_CATEGORIES == ("all", "coding", "writing", "analysis", "general")

    def test_category_label(self):
        assert category_label("coding") == "Coding"
        assert category_label("all") == "All"
        assert category_label("") == ""


class TestToolResult:
    def test_error_defaults_to_none(self):
        result = ToolResult(success=True, output={"count": 0})

        assert result.error is None
