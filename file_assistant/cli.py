# ==============================================
# CLI — Command Line Entry Point
# ==============================================
#
# PURPOSE:
#   Run File Assistant commands from a terminal. The PATH argument
#   plays the part of the file open in the editor.
#
# COMMANDS:
# ---------
# 1. Show a file's notes and todos:
#    python -m file_assistant.cli show app.py
#
# 2. Notes:
#    python -m file_assistant.cli note add app.py "Handles login"
#    python -m file_assistant.cli note add app.py          (asks for text)
#    python -m file_assistant.cli note rm app.py 0
#
# 3. Todos:
#    python -m file_assistant.cli todo add app.py "Add retries"
#    python -m file_assistant.cli todo done app.py 1
#    python -m file_assistant.cli todo undo app.py 1
#    python -m file_assistant.cli todo rm app.py 1
#
# 4. List files that have metadata:
#    python -m file_assistant.cli files
#
# 5. Delete the metadata file:
#    python -m file_assistant.cli reset --confirm
#
# EXIT CODES:
# -----------
#   0 → command ran
#   1 → nothing changed (cancelled input, unknown id/index) or save failed
#
# ==============================================

import argparse
import os
import sys
from typing import List, Optional

from file_assistant import __version__
from file_assistant.assistant import ConsoleNotifier, FileAssistant
from file_assistant.config import AppConfig, get_config
from file_assistant.persistence.metadata_file import MetadataFile
from file_assistant.view.panel import ConsolePanel


class CliNotifier(ConsoleNotifier):
    """Console notifier that remembers whether anything went wrong."""

    def __init__(self):
        self.failed = False

    def warning(self, message: str) -> None:
        self.failed = True
        super().warning(message)

    def error(self, message: str) -> None:
        self.failed = True
        super().error(message)


def console_prompt(message: str, placeholder: str) -> Optional[str]:
    """Read a line from stdin. EOF / Ctrl+C count as cancel."""
    try:
        return input(f"{message} ({placeholder}): ").strip()
    except (EOFError, KeyboardInterrupt):
        print()
        return None


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="file-assistant",
        description="Attach notes and todos to files."
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "--storage-dir",
        help="Directory holding the metadata file (overrides FILE_ASSISTANT_STORAGE_DIR)"
    )
    commands = parser.add_subparsers(dest="command", required=True)

    show = commands.add_parser("show", help="Show a file's notes and todos")
    show.add_argument("path")

    note = commands.add_parser("note", help="Add or remove notes")
    note_actions = note.add_subparsers(dest="action", required=True)
    note_add = note_actions.add_parser("add", help="Add a note")
    note_add.add_argument("path")
    note_add.add_argument("text", nargs="?")
    note_rm = note_actions.add_parser("rm", help="Delete a note by index")
    note_rm.add_argument("path")
    note_rm.add_argument("index", type=int)

    todo = commands.add_parser("todo", help="Add, check or remove todos")
    todo_actions = todo.add_subparsers(dest="action", required=True)
    todo_add = todo_actions.add_parser("add", help="Add a todo")
    todo_add.add_argument("path")
    todo_add.add_argument("text", nargs="?")
    for name, help_text in (
        ("done", "Mark a todo completed"),
        ("undo", "Mark a todo not completed"),
        ("rm", "Delete a todo by id"),
    ):
        action = todo_actions.add_parser(name, help=help_text)
        action.add_argument("path")
        action.add_argument("id", type=int)

    commands.add_parser("files", help="List files that have metadata")

    reset = commands.add_parser("reset", help="Delete all stored notes and todos")
    reset.add_argument("--confirm", action="store_true", help="Required to actually delete")

    return parser


def _store_file(config: AppConfig, storage_dir: Optional[str]) -> MetadataFile:
    storage = config.storage
    return MetadataFile(
        storage_dir or storage.storage_dir,
        filename=storage.metadata_file,
        indent=storage.indent
    )


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    config = get_config()
    store_file = _store_file(config, args.storage_dir)

    if args.command == "reset":
        if not args.confirm:
            print("✗ Refusing to delete metadata without --confirm")
            return 1
        store_file.clear()
        return 0

    text = getattr(args, "text", None)
    prompt = (lambda message, placeholder: text) if text is not None else console_prompt

    panel = ConsolePanel(echo=False)
    notifier = CliNotifier()
    assistant = FileAssistant(
        config=config,
        store_file=store_file,
        panel=panel,
        prompt=prompt,
        notifier=notifier
    )

    if args.command == "files":
        assistant.activate()
        for path in sorted(assistant.store.paths()):
            record = assistant.store.get_or_create(path)
            print(f"{path}  ({len(record.notes)} notes, {len(record.todos)} todos)")
        return 0

    path = os.path.abspath(args.path)
    assistant.activate(path)
    panel.echo = True

    if args.command == "show":
        assistant.refresh_view()
        return 0

    result = None
    if args.command == "note" and args.action == "add":
        result = assistant.add_note()
    elif args.command == "note" and args.action == "rm":
        result = assistant.delete_note(args.index)
    elif args.command == "todo" and args.action == "add":
        result = assistant.add_todo()
    elif args.command == "todo" and args.action in ("done", "undo"):
        result = assistant.toggle_todo(args.id, args.action == "done")
    elif args.command == "todo" and args.action == "rm":
        result = assistant.delete_todo(args.id)

    if result is None:
        print("Nothing changed")
        return 1
    return 1 if notifier.failed else 0


if __name__ == "__main__":
    sys.exit(main())
