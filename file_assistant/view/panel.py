# ==============================================
# Panel
# ==============================================
#
# PURPOSE:
#   Everything the side panel needs to show one file's notes and todos.
#
#   - build_update_message()  → the "update" payload a panel receives
#   - render_record()         → plain-text rendering of a FileRecord
#   - ConsolePanel            → a panel that prints to the terminal
#
# PANEL CONTRACT:
# ---------------
#   Any object with `update(path: str, record: FileRecord) -> None`
#   can be handed to FileAssistant as its panel.
#
# ==============================================

import os
from typing import Any, Dict, List, Optional

from file_assistant.store.models import FileRecord


def build_update_message(path: str, record: FileRecord) -> Dict[str, Any]:
    """
    Build the message that refreshes the panel for one file.

    Args:
        path: Full file path
        record: That file's notes and todos

    Returns:
        {"type": "update", "filePath", "fileName", "metadata"}
    """
    return {
        "type": "update",
        "filePath": path,
        "fileName": os.path.basename(path),
        "metadata": {
            "notes": list(record.notes),
            "todos": [todo.to_dict() for todo in record.todos],
        },
    }


def render_record(path: str, record: FileRecord) -> str:
    lines: List[str] = [os.path.basename(path) or path, ""]

    lines.append("Notes")
    lines.append("-----")
    if record.notes:
        for index, note in enumerate(record.notes):
            lines.append(f"  {index}. {note}")
    else:
        lines.append("  No notes")

    lines.append("")
    lines.append("Todos")
    lines.append("-----")
    if record.todos:
        for todo in record.todos:
            mark = "x" if todo.completed else " "
            lines.append(f"  [{mark}] #{todo.id} {todo.text}")
    else:
        lines.append("  No todos")

    return "\n".join(lines)


class ConsolePanel:
    """Panel that prints the rendered record whenever it is updated."""

    def __init__(self, echo: bool = True):
        self.echo = echo
        self.last_message: Optional[Dict[str, Any]] = None

    def update(self, path: str, record: FileRecord) -> None:
        self.last_message = build_update_message(path, record)
        if self.echo:
            print(render_record(path, record))
