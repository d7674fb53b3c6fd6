# ==============================================
# Models (Data Classes)
# ==============================================
#
# PURPOSE:
#   Data classes for what gets attached to a single file:
#   free-text notes and checklist items (todos).
#
# CLASSES:
# --------
# - Todo (dataclass)
#     - id: int              → Unique within one file's todo list
#     - text: str            → What needs doing (never empty)
#     - completed: bool      → Checkbox state (starts False)
#     - created_at: str      → ISO-8601 UTC timestamp, e.g. "2026-10-18T09:15:02.123Z"
#
# - FileRecord (dataclass)
#     - notes: list[str]     → Ordered notes, identified only by position
#     - todos: list[Todo]    → Ordered todos
#     - next_todo_id: int    → High-water mark for todo ids (ids are never reused)
#
# ON-DISK SHAPE:
# --------------
#   {"notes": ["..."],
#    "todos": [{"id": 1, "text": "...", "completed": false, "createdAt": "..."}],
#    "nextTodoId": 2}
#
#   "nextTodoId" is optional when reading; documents written without it
#   derive the counter from the largest todo id.
#
# ==============================================

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional


def utc_timestamp() -> str:
    """Return the current time as ISO-8601 UTC with milliseconds and a Z suffix."""
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def _require_int(value: Any, name: str) -> int:
    # bool is an int subclass; a flag is never a valid id
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"'{name}' must be an integer, got {value!r}")
    return value


def _require_str(value: Any, name: str) -> str:
    if not isinstance(value, str):
        raise ValueError(f"'{name}' must be a string, got {value!r}")
    return value


def _require_bool(value: Any, name: str) -> bool:
    if not isinstance(value, bool):
        raise ValueError(f"'{name}' must be true or false, got {value!r}")
    return value


@dataclass
class Todo:
    """A completable checklist item scoped to one file."""

    id: int
    text: str
    completed: bool = False
    created_at: str = field(default_factory=utc_timestamp)

    def to_dict(self) -> Dict[str, Any]:
        """
        Serialize the todo using the on-disk key names.

        Returns:
            A JSON-serializable dictionary representation
        """
        return {
            "id": self.id,
            "text": self.text,
            "completed": self.completed,
            "createdAt": self.created_at,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Todo":
        """
        Reconstruct a Todo from stored metadata.

        Args:
            data: Dictionary with saved todo information

        Returns:
            A Todo instance

        Raises:
            ValueError: If the entry is not a mapping, lacks id/text,
                or a field has the wrong type
        """
        if not isinstance(data, dict):
            raise ValueError(f"Todo entry must be an object, got {type(data).__name__}")
        if "id" not in data or "text" not in data:
            raise ValueError("Todo entry must have 'id' and 'text'")

        return cls(
            id=_require_int(data["id"], "id"),
            text=_require_str(data["text"], "text"),
            completed=_require_bool(data.get("completed", False), "completed"),
            created_at=_require_str(data.get("createdAt") or "", "createdAt"),
        )


@dataclass
class FileRecord:
    """The notes and todos attached to one file path."""

    notes: List[str] = field(default_factory=list)
    todos: List[Todo] = field(default_factory=list)
    next_todo_id: int = 1

    def find_todo(self, todo_id: int) -> Optional[Todo]:
        for todo in self.todos:
            if todo.id == todo_id:
                return todo
        return None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "notes": list(self.notes),
            "todos": [todo.to_dict() for todo in self.todos],
            "nextTodoId": self.next_todo_id,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "FileRecord":
        """
        Reconstruct a FileRecord from stored metadata.

        Missing "notes"/"todos" keys load as empty lists. A missing or
        stale "nextTodoId" is raised to one past the largest todo id.

        Raises:
            ValueError: If the entry or its lists have the wrong shape
        """
        if not isinstance(data, dict):
            raise ValueError(f"File entry must be an object, got {type(data).__name__}")

        notes = data.get("notes", [])
        todos = data.get("todos", [])
        if not isinstance(notes, list) or not isinstance(todos, list):
            raise ValueError("'notes' and 'todos' must be lists")

        record = cls(
            notes=[_require_str(note, "notes") for note in notes],
            todos=[Todo.from_dict(todo) for todo in todos],
        )

        highest = max((todo.id for todo in record.todos), default=0)
        stored_next = data.get("nextTodoId", 1)
        if isinstance(stored_next, bool) or not isinstance(stored_next, int):
            stored_next = 1
        record.next_todo_id = max(stored_next, highest + 1)

        return record
