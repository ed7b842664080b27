"""In-memory record store with filtered views."""

import logging
from typing import Any, Iterable, Optional, Union

from .models import ALL_CATEGORIES, CATEGORIES, FilterCriteria, Record

logger = logging.getLogger(__name__)


class RecordStore:
    """Owns the record collection and the active filter criteria.

    Design decisions:
    - Insertion order is kept and never re-sorted
    - visible_records() is recomputed on every call, nothing is cached
    - Unknown ids on toggle/delete are no-ops, not errors
    - Unknown categories are accepted and simply match nothing
    """

    def __init__(
        self,
        records: Optional[Iterable[Union[Record, dict[str, Any]]]] = None,
        config: Optional[dict] = None,
    ):
        """Initialize store with seed records.

        Args:
            records: Seed records (Record instances or dicts)
            config: Optional configuration:
                - categories: Known category set (default: CATEGORIES)
                - archived_view: Initial partition (default: False)
                - category: Initial category filter (default: "all")
                - search_term: Initial search term (default: "")

        Raises:
            ValueError: If two seed records share an id
        """
        config = config or {}

        self.categories = tuple(config.get("categories", CATEGORIES))

        self._criteria = FilterCriteria(
            search_term=config.get("search_term", ""),
            archived_view=config.get("archived_view", False),
            category=config.get("category", ALL_CATEGORIES),
        )

        # id -> Record, dict keeps insertion order
        self._records: dict[str, Record] = {}
        for item in records or []:
            record = item if isinstance(item, Record) else Record.model_validate(item)
            if record.id in self._records:
                raise ValueError(f"Duplicate record id: {record.id}")
            self._records[record.id] = record

    @property
    def criteria(self) -> FilterCriteria:
        return self._criteria

    def set_search_term(self, term: str) -> None:
        self._criteria = self._criteria.model_copy(update={"search_term": term})

    def set_archived_view(self, flag: bool) -> None:
        self._criteria = self._criteria.model_copy(update={"archived_view": flag})

    def toggle_archived_view(self) -> bool:
        """Switch between the active and archived partitions.

        Returns:
            The new archived_view value
        """
        self.set_archived_view(not self._criteria.archived_view)
        return self._criteria.archived_view

    def set_category(self, category: str) -> None:
        """Restrict the view to one category ("all" lifts the restriction)."""
        self._criteria = self._criteria.model_copy(update={"category": category})

    def visible_records(self) -> list[Record]:
        """Records matching the current criteria, in insertion order."""
        criteria = self._criteria
        return [r for r in self._records.values() if criteria.accepts(r)]

    def toggle_archive(self, record_id: str) -> Optional[Record]:
        """Flip the archived flag of a record.

        Args:
            record_id: Record identifier

        Returns:
            The updated record, or None if the id is unknown
        """
        record = self._records.get(record_id)
        if record is None:
            logger.debug(f"toggle_archive: no record with id {record_id!r}")
            return None

        updated = record.model_copy(update={"archived": not record.archived})
        # Reassigning an existing key keeps its position
        self._records[record_id] = updated
        logger.debug(f"Record {record_id!r} archived={updated.archived}")
        return updated

    def delete_record(self, record_id: str) -> bool:
        """Remove a record permanently.

        Returns:
            True if a record was removed, False if the id was unknown
        """
        if self._records.pop(record_id, None) is None:
            logger.debug(f"delete_record: no record with id {record_id!r}")
            return False

        logger.debug(f"Record {record_id!r} deleted")
        return True

    def get(self, record_id: str) -> Optional[Record]:
        return self._records.get(record_id)

    def records(self) -> tuple[Record, ...]:
        """Full collection regardless of filters, in insertion order."""
        return tuple(self._records.values())

    def count(self) -> int:
        return len(self._records)

    def __len__(self) -> int:
        return len(self._records)

    def __contains__(self, record_id: object) -> bool:
        return record_id in self._records

    def is_known_category(self, category: str) -> bool:
        return category in self.categories

    def empty_state_message(self) -> str:
        """Text shown when the current view has no records."""
        if self._criteria.search_term:
            return "No conversations found matching your search"
        if self._criteria.archived_view:
            return "No archived conversations"
        return "No active conversations"
