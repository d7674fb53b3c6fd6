# ==============================================
# MetadataFile
# ==============================================
#
# PURPOSE:
#   Persist the whole MetadataStore to a single JSON file so notes
#   and todos survive restarts of the editor.
#
# WHY THIS CLASS EXISTS:
#   The store is small (one user's annotations), so it is simply
#   loaded in one go at startup and overwritten in one go after every
#   change. This class is the only code that touches the disk.
#
# FAILURE BEHAVIOUR:
#   - load(): unreadable or malformed file → warning + empty store.
#             The bad file is left where it is.
#   - save(): write failure → warning + {"status": "error", ...} result.
#             Nothing is raised; the in-memory store stays as it was.
#
# CLASS: MetadataFile
# -------------------
#   Constructor:
#   ------------
#   - __init__(storage_dir: str, filename: str = "fileMetadata.json", indent: int = 2)
#
#   Methods:
#   --------
#   - load() -> MetadataStore
#   - save(store: MetadataStore) -> dict
#   - exists() -> bool
#   - clear() -> None
#
# ==============================================

import json
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, Union

from file_assistant.store.metadata_store import MetadataStore


DEFAULT_FILENAME = "fileMetadata.json"


class MetadataFile:
    """
    Loads and saves the whole metadata store as one JSON document.

    File created:
    - <storage_dir>/fileMetadata.json  → {path: {notes, todos, nextTodoId}}
    """

    def __init__(
        self,
        storage_dir: Union[str, Path],
        filename: str = DEFAULT_FILENAME,
        indent: int = 2
    ):
        """
        Initialize the metadata file gateway.

        Args:
            storage_dir: Directory that holds the metadata file
            filename: Name of the JSON file inside storage_dir
            indent: JSON indentation used when saving
        """
        self.storage_dir = Path(storage_dir).expanduser()
        self.metadata_path = self.storage_dir / filename
        self.indent = indent

    def load(self) -> MetadataStore:
        """
        Load the metadata store from disk.

        Returns:
            The stored MetadataStore.
            An empty store if the file doesn't exist or can't be read.
        """
        try:
            self.storage_dir.mkdir(parents=True, exist_ok=True)

            if not self.metadata_path.exists():
                print(f"No metadata file found at {self.metadata_path}")
                return MetadataStore()

            with open(self.metadata_path, 'r', encoding='utf-8') as f:
                data = json.load(f)

            store = MetadataStore.from_dict(data)
        except (OSError, ValueError, RecursionError) as e:
            # json.JSONDecodeError and malformed entries are both ValueErrors;
            # very deeply nested documents exhaust the parser stack
            print(f"⚠ Could not load metadata from {self.metadata_path}: {e}")
            print("✓ Starting with an empty store")
            return MetadataStore()

        print(f"Loaded metadata for {len(store)} files from {self.metadata_path}")
        return store

    def save(self, store: MetadataStore) -> Dict[str, Any]:
        """
        Overwrite the metadata file with the whole store.

        Args:
            store: The store to persist

        Returns:
            Dictionary with "status" of "success" or "error".
        """
        timestamp = datetime.now(timezone.utc).isoformat()

        try:
            # Serialize before opening so a bad store can't truncate the file
            document = json.dumps(store.to_dict(), indent=self.indent, ensure_ascii=False)

            self.storage_dir.mkdir(parents=True, exist_ok=True)
            with open(self.metadata_path, 'w', encoding='utf-8') as f:
                f.write(document)
        except (OSError, TypeError, ValueError) as e:
            error_msg = f"Save failed: {e}"
            print(f"✗ {error_msg}")
            return {
                "status": "error",
                "error": error_msg,
                "path": str(self.metadata_path),
                "timestamp": timestamp
            }

        return {
            "status": "success",
            "path": str(self.metadata_path),
            "files": len(store),
            "timestamp": timestamp
        }

    def exists(self) -> bool:
        """
        Check if the metadata file exists.

        Returns:
            True if a previous session saved metadata
        """
        return self.metadata_path.exists()

    def clear(self) -> None:
        """
        Delete the metadata file (for testing or reset).
        """
        if self.metadata_path.exists():
            self.metadata_path.unlink()
            print(f"🗑️  Deleted {self.metadata_path}")

        print("All metadata cleared!")
