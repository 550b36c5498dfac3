"""Mini README: Key/value blob stores backing the transaction repository.

Structure:
    * BlobStore - abstract interface with whole-value read and write.
    * MemoryBlobStore - dict-backed store for tests and throwaway sessions.
    * FileBlobStore - one UTF-8 JSON file per key inside a directory.
    * create_blob_store - factory selecting a backend from settings.

Every write replaces the stored value wholesale; there are no partial
updates and no append semantics.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Dict, Optional

from ..configuration import FinanceTrackerSettings
from ..logging_utils import get_logger

LOGGER = get_logger(__name__)


class BlobStore(ABC):
    """Base interface for opaque single-slot persistence."""

    backend_name: str = "generic"

    @abstractmethod
    def read(self, key: str) -> Optional[str]:
        """Return the stored text for ``key`` or ``None`` when never written."""

    @abstractmethod
    def write(self, key: str, blob: str) -> None:
        """Overwrite the value stored under ``key``."""


class MemoryBlobStore(BlobStore):
    """Keep blobs in a dictionary for the lifetime of the object."""

    backend_name = "memory"

    def __init__(self, initial: Optional[Dict[str, str]] = None) -> None:
        self._blobs: Dict[str, str] = dict(initial or {})

    def read(self, key: str) -> Optional[str]:
        return self._blobs.get(key)

    def write(self, key: str, blob: str) -> None:
        self._blobs[key] = blob


class FileBlobStore(BlobStore):
    """Persist each key as ``<directory>/<key>.json``."""

    backend_name = "file"

    def __init__(self, directory: Path) -> None:
        self.directory = Path(directory)
        LOGGER.debug("File blob store rooted at %s", self.directory)

    def _path_for(self, key: str) -> Path:
        if not key or "/" in key or "\\" in key or key.startswith("."):
            raise ValueError(f"Invalid storage key: {key!r}")
        return self.directory / f"{key}.json"

    def read(self, key: str) -> Optional[str]:
        path = self._path_for(key)
        if not path.exists():
            return None
        return path.read_text(encoding="utf-8")

    def write(self, key: str, blob: str) -> None:
        path = self._path_for(key)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(blob, encoding="utf-8")
        LOGGER.debug("Wrote %s characters to %s", len(blob), path)


def create_blob_store(settings: FinanceTrackerSettings) -> BlobStore:
    """Instantiate the blob store named by ``settings.storage_backend``."""

    backend = settings.storage_backend.lower()
    if backend == MemoryBlobStore.backend_name:
        return MemoryBlobStore()
    if backend == FileBlobStore.backend_name:
        return FileBlobStore(settings.data_directory)
    raise ValueError(f"Unknown storage backend '{settings.storage_backend}'")
