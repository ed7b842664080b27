"""Sample chat history used to seed demo stores."""

from .models import Record

_SAMPLE_DATA = [
    {
        "id": "1",
        "title": "Code Review: React Performance Optimization",
        "preview": "Analyzing the useMemo and useCallback implementation in the dashboard components...",
        "created_date": "2024-03-15",
        "created_time": "14:30",
        "source_label": "GPT-4",
        "archived": False,
        "category": "coding",
    },
    {
        "id": "2",
        "title": "Blog Post Draft Review",
        "preview": "Working on machine learning trends in 2024. Improving the content flow and structure.",
        "created_date": "2024-03-15",
        "created_time": "11:20",
        "source_label": "Claude-3",
        "archived": False,
        "category": "writing",
    },
    {
        "id": "3",
        "title": "Data Analysis: Q1 Metrics",
        "preview": "Reviewing quarterly performance data and user engagement metrics.",
        "created_date": "2024-03-14",
        "created_time": "16:45",
        "source_label": "GPT-3.5",
        "archived": True,
        "category": "analysis",
    },
]


def sample_records() -> list[Record]:
    """Return the sample records (new list on every call)."""
    return [Record(**data) for data in _SAMPLE_DATA]
