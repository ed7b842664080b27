"""Chat history records with search, category filters and archiving."""

__version__ = "1.0.0"

from .models import (
    ALL_CATEGORIES,
    CATEGORIES,
    FILTER_CATEGORIES,
    FilterCriteria,
    Record,
    ToolResult,
    category_label,
)
from .samples import sample_records
from .store import RecordStore

__all__ = [
    "ALL_CATEGORIES",
    "CATEGORIES",
    "FILTER_CATEGORIES",
    "FilterCriteria",
    "Record",
    "RecordStore",
    "ToolResult",
    "category_label",
    "sample_records",
]
