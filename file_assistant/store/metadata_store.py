# ==============================================
# MetadataStore
# ==============================================
#
# PURPOSE:
#   Hold every file's notes and todos in memory, keyed by file path,
#   and own all mutation logic (including todo id assignment).
#
# WHY THIS CLASS EXISTS:
#   The command layer should never poke at raw dicts. Every add,
#   toggle and delete goes through here so the rules stay in one place:
#     - a path that has been touched always maps to a FileRecord
#     - todo ids are unique per file and never reused
#     - bad indices / unknown ids are silent no-ops
#
#   Persistence is NOT done here; see persistence/metadata_file.py.
#
# CLASS: MetadataStore
# --------------------
#   Stateful — holds dict[str, FileRecord].
#   Paths are used verbatim (no normalization).
#
#   Methods:
#   --------
#   - get_or_create(path) -> FileRecord
#   - add_note(path, text) -> None
#   - delete_note(path, index) -> str | None
#   - add_todo(path, text) -> Todo
#   - toggle_todo(path, todo_id, completed) -> Todo | None
#   - delete_todo(path, todo_id) -> Todo | None
#   - paths() -> list[str]
#   - to_dict() / from_dict()   → whole-store (de)serialization
#
# ==============================================

from typing import Any, Dict, Iterator, List, Optional

from .models import FileRecord, Todo


class MetadataStore:
    """
    In-memory mapping from file path to FileRecord.

    Records are created lazily on first access and never removed,
    even when all of their notes and todos are deleted.
    """

    def __init__(self, records: Optional[Dict[str, FileRecord]] = None):
        self._records: Dict[str, FileRecord] = dict(records or {})

    def get_or_create(self, path: str) -> FileRecord:
        """
        Return the record for a path, inserting an empty one if needed.

        Args:
            path: File path, used verbatim as the key

        Returns:
            The (possibly new) FileRecord for that path
        """
        record = self._records.get(path)
        if record is None:
            record = FileRecord()
            self._records[path] = record
        return record

    def add_note(self, path: str, text: str) -> None:
        """
        Append a note to a file's notes.

        Raises:
            ValueError: If text is empty
        """
        if not text:
            raise ValueError("Note text must not be empty")
        self.get_or_create(path).notes.append(text)

    def delete_note(self, path: str, index: int) -> Optional[str]:
        """
        Remove the note at a position.

        Indices of the notes after it shift down by one, so callers
        must re-read the record before issuing another delete.

        Args:
            path: File path
            index: Zero-based position of the note

        Returns:
            The removed note, or None if index was out of range
        """
        notes = self.get_or_create(path).notes
        if not 0 <= index < len(notes):
            return None
        return notes.pop(index)

    def add_todo(self, path: str, text: str) -> Todo:
        """
        Append a new, not-completed todo to a file's todos.

        The id is one past the largest id in the list, but never below
        the record's high-water mark, so a deleted id is not handed out
        again.

        Args:
            path: File path
            text: Todo text

        Returns:
            The newly created Todo

        Raises:
            ValueError: If text is empty
        """
        if not text:
            raise ValueError("Todo text must not be empty")

        record = self.get_or_create(path)
        highest = max((todo.id for todo in record.todos), default=0)
        new_id = max(highest + 1, record.next_todo_id)

        todo = Todo(id=new_id, text=text)
        record.todos.append(todo)
        record.next_todo_id = new_id + 1
        return todo

    def toggle_todo(self, path: str, todo_id: int, completed: bool) -> Optional[Todo]:
        """
        Set a todo's completed flag.

        Returns:
            The updated Todo, or None if no todo has that id
        """
        todo = self.get_or_create(path).find_todo(todo_id)
        if todo is None:
            return None
        todo.completed = completed
        return todo

    def delete_todo(self, path: str, todo_id: int) -> Optional[Todo]:
        """
        Remove a todo by id.

        Returns:
            The removed Todo, or None if no todo has that id
        """
        todos = self.get_or_create(path).todos
        for index, todo in enumerate(todos):
            if todo.id == todo_id:
                return todos.pop(index)
        return None

    def paths(self) -> List[str]:
        return list(self._records.keys())

    def __contains__(self, path: object) -> bool:
        return path in self._records

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[str]:
        return iter(self._records)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MetadataStore):
            return NotImplemented
        return self._records == other._records

    def to_dict(self) -> Dict[str, Any]:
        """Serialize the whole store to {path: {notes, todos, nextTodoId}}."""
        return {path: record.to_dict() for path, record in self._records.items()}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "MetadataStore":
        """
        Rebuild a store from its serialized form.

        Raises:
            ValueError: If the document is not an object of file entries
        """
        if not isinstance(data, dict):
            raise ValueError(f"Metadata document must be an object, got {type(data).__name__}")
        return cls({
            str(path): FileRecord.from_dict(entry)
            for path, entry in data.items()
        })
