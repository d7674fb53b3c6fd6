# ==============================================
# STORE (in-memory notes and todos per file)
# ==============================================
#
# Modules:
# --------
# - models.py          → Todo and FileRecord data classes
# - metadata_store.py  → Path -> FileRecord mapping and its CRUD operations
#
# ==============================================

from .models import Todo, FileRecord, utc_timestamp
from .metadata_store import MetadataStore

__all__ = [
    "Todo",
    "FileRecord",
    "MetadataStore",
    "utc_timestamp"
]
