"""Mini README: Persistence layer for the finance tracker.

The ``blob_store`` module offers a single-slot-per-key store (memory or
JSON files on disk) and ``repository`` serialises the whole transaction
collection into one of those slots.
"""

from .blob_store import BlobStore, FileBlobStore, MemoryBlobStore, create_blob_store
from .repository import TransactionRepository

__all__ = [
    "BlobStore",
    "FileBlobStore",
    "MemoryBlobStore",
    "TransactionRepository",
    "create_blob_store",
]
