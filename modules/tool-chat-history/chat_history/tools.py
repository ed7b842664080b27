"""Chat history tools."""

import logging
from typing import Any

from .models import ALL_CATEGORIES, ToolResult
from .samples import sample_records
from .store import RecordStore

logger = logging.getLogger(__name__)


def _failure(message: str) -> ToolResult:
    return ToolResult(success=False, output=None, error={"message": message})


def _validate_id(value: Any) -> str | None:
    """Return an error message if value isn't a usable record id."""
    if value is None:
        return "Record id cannot be empty"
    if not isinstance(value, str):
        return "Record id must be a string"
    if not value.strip():
        return "Record id cannot be empty"
    return None


class HistorySearchTool:
    """Tool for filtering the chat history."""

    def __init__(self, store: RecordStore):
        self.store = store
        self.name = "history_search"
        self.description = (
            "List conversations, filtered by text, category and archive state"
        )
        self.input_schema = {
            "type": "object",
            "properties": {
                "query": {
                    "type": "string",
                    "description": "Text to find in titles or previews (case-insensitive)",
                },
                "archived": {
                    "type": "boolean",
                    "description": "Show archived conversations instead of active ones",
                },
                "category": {
                    "type": "string",
                    "description": "Category to show, or 'all'",
                },
            },
        }

    async def execute(self, input: dict[str, Any]) -> ToolResult:
        """Apply filters and return the visible conversations."""
        try:
            query = input.get("query")
            archived = input.get("archived")
            category = input.get("category")

            # Validation
            if query is not None and not isinstance(query, str):
                return _failure("Query must be a string")

            if archived is not None and not isinstance(archived, bool):
                return _failure("Archived must be a boolean")

            if category is not None:
                if not isinstance(category, str):
                    return _failure("Category must be a string")
                if category != ALL_CATEGORIES and not self.store.is_known_category(
                    category
                ):
                    known = ", ".join((ALL_CATEGORIES, *self.store.categories))
                    return _failure(f"Unknown category: '{category}' (use one of {known})")

            # Apply criteria
            if query is not None:
                self.store.set_search_term(query)
            if archived is not None:
                self.store.set_archived_view(archived)
            if category is not None:
                self.store.set_category(category)

            records = [r.for_display() for r in self.store.visible_records()]

            output: dict[str, Any] = {
                "records": records,
                "count": len(records),
                "criteria": self.store.criteria.model_dump(),
            }
            if not records:
                output["message"] = self.store.empty_state_message()

            return ToolResult(success=True, output=output)

        except Exception as e:
            logger.warning(f"history_search failed: {e}")
            return _failure(str(e))


class HistoryArchiveTool:
    """Tool for archiving and unarchiving conversations."""

    def __init__(self, store: RecordStore):
        self.store = store
        self.name = "history_archive"
        self.description = "Archive a conversation, or unarchive it if already archived"
        self.input_schema = {
            "type": "object",
            "properties": {
                "id": {
                    "type": "string",
                    "description": "Conversation ID",
                },
            },
            "required": ["id"],
        }

    async def execute(self, input: dict[str, Any]) -> ToolResult:
        """Toggle archive state."""
        try:
            record_id = input.get("id")

            error = _validate_id(record_id)
            if error:
                return _failure(error)

            record = self.store.toggle_archive(record_id)

            if record is None:
                return ToolResult(
                    success=True,
                    output={
                        "id": record_id,
                        "found": False,
                        "message": f"No conversation with ID: {record_id}",
                    },
                )

            action = "Archived" if record.archived else "Unarchived"
            return ToolResult(
                success=True,
                output={
                    "id": record_id,
                    "found": True,
                    "archived": record.archived,
                    "message": f"{action} conversation: {record.title}",
                },
            )

        except Exception as e:
            logger.warning(f"history_archive failed: {e}")
            return _failure(str(e))


class HistoryDeleteTool:
    """Tool for deleting conversations."""

    def __init__(self, store: RecordStore):
        self.store = store
        self.name = "history_delete"
        self.description = "Permanently delete a conversation"
        self.input_schema = {
            "type": "object",
            "properties": {
                "id": {
                    "type": "string",
                    "description": "Conversation ID",
                },
            },
            "required": ["id"],
        }

    async def execute(self, input: dict[str, Any]) -> ToolResult:
        """Delete conversation."""
        try:
            record_id = input.get("id")

            error = _validate_id(record_id)
            if error:
                return _failure(error)

            deleted = self.store.delete_record(record_id)

            message = (
                f"Deleted conversation: {record_id}"
                if deleted
                else f"No conversation with ID: {record_id}"
            )
            return ToolResult(
                success=True,
                output={"id": record_id, "deleted": deleted, "message": message},
            )

        except Exception as e:
            logger.warning(f"history_delete failed: {e}")
            return _failure(str(e))


def mount(coordinator, config: dict | None = None):
    """Mount chat history tools.

    Seed resolution order:
    1. config["records"] (explicit seed data)
    2. sample records, if config["seed_samples"] is true
    3. empty history

    Args:
        coordinator: Amplifier coordinator
        config: Optional configuration, also passed to RecordStore

    Returns:
        List of Tool instances sharing one RecordStore
    """
    history_config = config or coordinator.config.get("history", {})

    records = history_config.get("records")
    if records is None and history_config.get("seed_samples", False):
        records = sample_records()

    store = RecordStore(records, history_config)
    logger.debug(f"Mounted chat history tools with {store.count()} records")

    return [
        HistorySearchTool(store),
        HistoryArchiveTool(store),
        HistoryDeleteTool(store),
    ]
