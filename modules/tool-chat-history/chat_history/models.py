"""Data models for chat history records."""

from typing import Any, Optional
from uuid import uuid4

from pydantic import BaseModel, ConfigDict, Field, field_validator

CATEGORIES = ("coding", "writing", "analysis", "general")

# Filter wildcard, never a record's category
ALL_CATEGORIES = "all"

FILTER_CATEGORIES = (ALL_CATEGORIES, *CATEGORIES)


def category_label(category: str) -> str:
    """Display label for a category filter button ("coding" -> "Coding")."""
    return category[:1].upper() + category[1:]


class Record(BaseModel):
    """A single conversational-session entry.

    Design decisions:
    - Frozen: the store replaces records instead of mutating them, so a
      caller holding a Record can't change the collection
    - id: Auto-generated UUID4 unless supplied by the seeder
    - created_date / created_time: Display strings, no invariant uses them
    - source_label: Originating agent/model, display metadata only
    - archived / category: The only fields the store ever changes
    """

    model_config = ConfigDict(frozen=True)

    id: str = Field(default_factory=lambda: str(uuid4()))
    title: str
    preview: str = ""
    created_date: str = ""
    created_time: str = ""
    source_label: str = ""
    archived: bool = False
    category: str = "general"

    @field_validator("category")
    @classmethod
    def category_not_wildcard(cls, value: str) -> str:
        if value == ALL_CATEGORIES:
            raise ValueError(f"'{ALL_CATEGORIES}' is a filter value, not a record category")
        return value

    def matches_text(self, term: str) -> bool:
        """Case-insensitive substring match against title or preview."""
        if not term:
            return True
        needle = term.casefold()
        return needle in self.title.casefold() or needle in self.preview.casefold()

    def for_display(self) -> dict[str, Any]:
        """Return plain dict of the record for rendering."""
        return self.model_dump()


class FilterCriteria(BaseModel):
    """Active filter state that determines the derived view."""

    model_config = ConfigDict(frozen=True)

    search_term: str = ""
    archived_view: bool = False
    category: str = ALL_CATEGORIES

    def accepts(self, record: Record) -> bool:
        """True if record belongs in the view (all three conditions must hold)."""
        return (
            record.archived == self.archived_view
            and (self.category == ALL_CATEGORIES or record.category == self.category)
            and record.matches_text(self.search_term)
        )


class ToolResult(BaseModel):
    """Result returned by history tools."""

    success: bool
    output: Any = None
    error: Optional[dict[str, Any]] = None
