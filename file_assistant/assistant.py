# ==============================================
# FileAssistant — Command Layer
# ==============================================
#
# PURPOSE:
#   This is the MAIN CLASS the editor host talks to. It owns the
#   MetadataStore and runs every user command against it:
#
#     user command ──► MetadataStore (mutate in place)
#                          │
#                          ▼
#                     MetadataFile.save()   (whole-store flush)
#                          │
#                          ▼
#                     panel.update(path, record)
#                          │
#                          ▼
#                     notifier.info("Note added!")
#
# COLLABORATORS (all injectable, all optional):
# ---------------------------------------------
#   - store_file: MetadataFile
#       Where the store is loaded from / saved to. Built from config if None.
#   - panel: object with update(path, record)
#       Shows the active file's notes and todos. ConsolePanel if None.
#   - prompt: callable(message, placeholder) -> str | None
#       Collects note/todo text. None or "" means the user cancelled.
#   - notifier: object with info(msg), warning(msg), error(msg)
#       Short user-facing messages. ConsoleNotifier if None.
#
# CLASS: FileAssistant
# --------------------
#   Lifecycle:
#   ----------
#   - activate(active_path=None) -> None     load store, show first file
#   - deactivate() -> dict                   final flush
#   - __enter__ / __exit__                   activate / deactivate
#
#   Host events:
#   ------------
#   - set_active_file(path) -> None          active editor changed
#   - file_saved(path) -> None               a document was saved
#
#   Commands:
#   ---------
#   - add_note() / add_todo()
#   - toggle_todo(todo_id, completed)
#   - delete_note(index) / delete_todo(todo_id)
#   - refresh_view()
#   - handle_message(data)                   panel → command dispatch
#
# ERROR HANDLING:
# ---------------
#   - No active file      → notifier.error("Open a file to ..."), no mutation
#   - Save failed         → notifier.warning(...), change stays in memory
#   - Unknown id / index  → silent no-op (no save, no message)
#
# ==============================================

from typing import Any, Callable, Dict, Optional

from file_assistant.config import AppConfig, get_config
from file_assistant.persistence.metadata_file import MetadataFile
from file_assistant.store.metadata_store import MetadataStore
from file_assistant.store.models import FileRecord, Todo
from file_assistant.view.panel import ConsolePanel


PromptFn = Callable[[str, str], Optional[str]]


class ConsoleNotifier:
    """Prints user-facing messages to the terminal."""

    def info(self, message: str) -> None:
        print(f"✓ {message}")

    def warning(self, message: str) -> None:
        print(f"⚠ {message}")

    def error(self, message: str) -> None:
        print(f"✗ {message}")


def _no_input(message: str, placeholder: str) -> Optional[str]:
    return None


def _int_field(data: Dict[str, Any], key: str) -> Optional[int]:
    value = data.get(key)
    # bool is an int subclass but never a valid id or index
    if isinstance(value, bool) or not isinstance(value, int):
        return None
    return value


class FileAssistant:
    """
    Runs note/todo commands for the active file and keeps the
    panel and the metadata file in sync with the store.
    """

    def __init__(
        self,
        config: Optional[AppConfig] = None,
        store_file: Optional[MetadataFile] = None,
        panel: Any = None,
        prompt: Optional[PromptFn] = None,
        notifier: Any = None
    ):
        """
        Initialize the assistant. Nothing is read from disk until activate().

        Args:
            config: Application configuration. If None, loads from environment.
            store_file: Persistence gateway. If None, built from config.
            panel: Display collaborator. If None, a ConsolePanel.
            prompt: Text input collaborator. If None, every prompt is cancelled.
            notifier: Message collaborator. If None, a ConsoleNotifier.
        """
        self._config = config or get_config()

        if store_file is None:
            storage = self._config.storage
            store_file = MetadataFile(
                storage.storage_dir,
                filename=storage.metadata_file,
                indent=storage.indent
            )
        self._store_file = store_file
        self._panel = panel if panel is not None else ConsolePanel()
        self._prompt = prompt or _no_input
        self._notifier = notifier if notifier is not None else ConsoleNotifier()

        self._store = MetadataStore()
        self._active_path: Optional[str] = None

    @property
    def store(self) -> MetadataStore:
        return self._store

    @property
    def active_path(self) -> Optional[str]:
        return self._active_path

    # ------------------------------------------
    # Lifecycle
    # ------------------------------------------

    def activate(self, active_path: Optional[str] = None) -> None:
        """
        Load the store from disk and show the initially active file.

        Args:
            active_path: File open in the editor at startup, if any
        """
        self._store = self._store_file.load()
        print(f"✓ {self._config.app_name} is now active "
              f"({len(self._store)} files with metadata)")

        if active_path:
            self.set_active_file(active_path)

    def deactivate(self) -> Dict[str, Any]:
        """
        Flush the store one last time.

        Returns:
            The save result from MetadataFile.save()
        """
        return self._store_file.save(self._store)

    def __enter__(self):
        """Context manager entry."""
        self.activate()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit."""
        self.deactivate()
        return False  # Don't suppress exceptions

    # ------------------------------------------
    # Host events
    # ------------------------------------------

    def set_active_file(self, path: Optional[str]) -> None:
        """
        Track the active editor's file and refresh the panel for it.

        Args:
            path: File path, or None when no editor is active
        """
        self._active_path = path or None
        if self._active_path:
            self._update_view(self._active_path)

    def file_saved(self, path: str) -> None:
        self._update_view(path)

    # ------------------------------------------
    # Commands
    # ------------------------------------------

    def refresh_view(self) -> Optional[FileRecord]:
        """
        Re-send the active file's record to the panel.

        Returns:
            The record shown, or None if no file is active
        """
        if not self._active_path:
            return None
        return self._update_view(self._active_path)

    def add_note(self) -> Optional[str]:
        """
        Ask for note text and attach it to the active file.

        Returns:
            The added note, or None if there was no active file
            or the input was cancelled
        """
        path = self._require_active("add a note")
        if path is None:
            return None

        text = self._prompt(
            "Add a note for this file",
            "E.g. This file manages user authentication"
        )
        if not text:
            return None

        self._store.add_note(path, text)
        self._commit(path)
        self._notifier.info("Note added!")
        return text

    def add_todo(self) -> Optional[Todo]:
        """
        Ask for todo text and attach a new todo to the active file.

        Returns:
            The created Todo, or None if there was no active file
            or the input was cancelled
        """
        path = self._require_active("add a todo")
        if path is None:
            return None

        text = self._prompt(
            "Add a todo for this file",
            "E.g. Add error handling mechanism"
        )
        if not text:
            return None

        todo = self._store.add_todo(path, text)
        self._commit(path)
        self._notifier.info("Todo added!")
        return todo

    def toggle_todo(self, todo_id: int, completed: bool) -> Optional[Todo]:
        """
        Check or uncheck a todo of the active file.

        Returns:
            The updated Todo, or None if nothing changed
        """
        path = self._require_active("toggle a todo")
        if path is None:
            return None

        todo = self._store.toggle_todo(path, todo_id, completed)
        if todo is None:
            return None

        self._commit(path)
        if completed:
            self._notifier.info(f'"{todo.text}" todo completed!')
        else:
            self._notifier.info(f'"{todo.text}" todo undone!')
        return todo

    def delete_note(self, index: int) -> Optional[str]:
        """
        Delete a note of the active file by position.

        Returns:
            The removed note, or None if the index was out of range
        """
        path = self._require_active("delete a note")
        if path is None:
            return None

        removed = self._store.delete_note(path, index)
        if removed is None:
            return None

        self._commit(path)
        self._notifier.info(f'Note deleted: "{removed}"')
        return removed

    def delete_todo(self, todo_id: int) -> Optional[Todo]:
        """
        Delete a todo of the active file by id.

        Returns:
            The removed Todo, or None if no todo had that id
        """
        path = self._require_active("delete a todo")
        if path is None:
            return None

        removed = self._store.delete_todo(path, todo_id)
        if removed is None:
            return None

        self._commit(path)
        self._notifier.info(f'Todo deleted: "{removed.text}"')
        return removed

    def handle_message(self, data: Dict[str, Any]) -> Any:
        """
        Dispatch a message posted by the panel to the matching command.

        Messages with an unknown type, missing fields, or fields of the
        wrong type (non-integer ids/indices, non-boolean "completed")
        are ignored.

        Args:
            data: {"type": ..., plus command-specific fields}

        Returns:
            Whatever the command returned, or None if ignored
        """
        if not isinstance(data, dict):
            return None

        kind = data.get("type")
        if kind == "addNote":
            return self.add_note()
        if kind == "addTodo":
            return self.add_todo()
        if kind == "toggleTodo":
            todo_id = _int_field(data, "id")
            completed = data.get("completed")
            if todo_id is None or not isinstance(completed, bool):
                return None
            return self.toggle_todo(todo_id, completed)
        if kind == "deleteNote":
            index = _int_field(data, "noteIndex")
            if index is None:
                return None
            return self.delete_note(index)
        if kind == "deleteTodo":
            todo_id = _int_field(data, "todoId")
            if todo_id is None:
                return None
            return self.delete_todo(todo_id)
        return None

    # ------------------------------------------
    # Internal
    # ------------------------------------------

    def _require_active(self, action: str) -> Optional[str]:
        if not self._active_path:
            self._notifier.error(f"Open a file to {action}.")
            return None
        return self._active_path

    def _commit(self, path: str) -> None:
        """Flush the store, then push the fresh record to the panel."""
        result = self._store_file.save(self._store)
        if result["status"] != "success":
            self._notifier.warning(
                f"Changes kept in memory but not saved: {result.get('error')}"
            )
        self._update_view(path)

    def _update_view(self, path: str) -> FileRecord:
        record = self._store.get_or_create(path)
        self._panel.update(path, record)
        return record
