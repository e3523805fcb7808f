"""Simple JSON persistence for the campaign document."""
from __future__ import annotations

import json
import logging
import os
import stat
import tempfile
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from campaign_api.errors import StorageError
from campaign_api.models import Document

logger = logging.getLogger(__name__)

DEFAULT_FILE_MODE = 0o644


def empty_document() -> Document:
    return {"reports": []}


def is_document(data) -> bool:
    """Shallow structural check: an object whose `reports` is a list."""
    return isinstance(data, dict) and isinstance(data.get("reports"), list)


class LoadStatus(str, Enum):
    LOADED = "loaded"
    ABSENT = "absent"
    CORRUPT = "corrupt"


@dataclass(frozen=True, slots=True)
class LoadResult:
    """Outcome of reading the backing file."""
    status: LoadStatus
    document: Document | None = None
    reason: str | None = None

    @classmethod
    def loaded(cls, document: Document) -> "LoadResult":
        return cls(LoadStatus.LOADED, document=document)

    @classmethod
    def absent(cls) -> "LoadResult":
        return cls(LoadStatus.ABSENT)

    @classmethod
    def corrupt(cls, reason: str) -> "LoadResult":
        return cls(LoadStatus.CORRUPT, reason=reason)


class DocumentStore:
    """
    File-backed store for the single campaign document.

    Holds no state between calls. Reads never fail: a missing or corrupt
    file reads as the empty document. Writes go to a temporary file in the
    same directory which then replaces the target, so readers see either
    the old or the new document.
    """

    __slots__ = ("path",)

    def __init__(self, path: Path | str):
        self.path = Path(path)

    def read(self) -> LoadResult:
        """Read and classify the backing file."""
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except FileNotFoundError:
            return LoadResult.absent()
        except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
            return LoadResult.corrupt(str(e))

        if not is_document(data):
            return LoadResult.corrupt("document has no 'reports' list")
        return LoadResult.loaded(data)

    def load(self) -> Document:
        """Load the document, degrading absent or corrupt data to empty."""
        result = self.read()
        if result.status is LoadStatus.LOADED:
            return result.document

        if result.status is LoadStatus.CORRUPT:
            logger.warning(f"Ignoring unreadable campaign data at {self.path}: {result.reason}")
        return empty_document()

    def save(self, document: Document) -> None:
        """Atomically write the document, creating the directory if needed."""
        tmp_path = None
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_path = tempfile.mkstemp(
                dir=str(self.path.parent), prefix=f"{self.path.name}.", suffix=".tmp"
            )
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(document, f, ensure_ascii=False, indent=2)
            # mkstemp creates 0600; keep the previous file's mode instead
            os.chmod(tmp_path, self._file_mode())
            os.replace(tmp_path, self.path)
            tmp_path = None
        except (OSError, TypeError, ValueError) as e:
            logger.error(f"Error saving campaign data to {self.path}: {e}")
            raise StorageError(f"Failed to save campaign data: {e}") from e
        finally:
            if tmp_path is not None:
                try:
                    os.remove(tmp_path)
                except OSError:
                    pass

        logger.info(f"Campaign data saved ({len(document['reports'])} reports)")

    def _file_mode(self) -> int:
        try:
            return stat.S_IMODE(os.stat(self.path).st_mode)
        except FileNotFoundError:
            return DEFAULT_FILE_MODE
