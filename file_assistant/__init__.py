# ==============================================
# File Assistant
# ==============================================
#
# Per-file notes and todos for a code editor.
#
# Package Structure:
#
# file_assistant/
# ├── store/          # In-memory metadata store (path -> notes + todos)
# ├── persistence/    # Whole-store JSON load/save
# ├── view/           # Panel payloads and plain-text rendering
# ├── config.py       # Configuration management
# ├── assistant.py    # Command layer that ties store, file and panel together
# └── cli.py          # Command line entry point
#
# ==============================================

__version__ = "0.1.0"
