# ==============================================
# PERSISTENCE (notes and todos across restarts)
# ==============================================
#
# This package handles saving and loading the metadata store
# so that notes and todos survive editor restarts.
#
# Modules:
# --------
# - metadata_file.py  → Whole-store JSON load/save
#
# ==============================================

from .metadata_file import MetadataFile, DEFAULT_FILENAME

__all__ = [
    "MetadataFile",
    "DEFAULT_FILENAME"
]
