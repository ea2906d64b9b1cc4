"""JSON file cache for history documents.

The on-disk shape is an implementation detail. Anything that cannot be read
back (missing file, bad JSON, schema mismatch) is treated as no cache, and
write failures are logged and dropped: chart data must never break the caller.
"""

from __future__ import annotations

import os
import tempfile
from pathlib import Path
from typing import Generic, TypeVar

import structlog
from pydantic import BaseModel, ValidationError

logger = structlog.get_logger()

DocT = TypeVar("DocT", bound=BaseModel)


class JsonFileCache(Generic[DocT]):
    """Stores one pydantic document as a JSON file."""

    def __init__(self, path: str | Path, model: type[DocT]) -> None:
        self.path = Path(path)
        self.model = model

    def load(self) -> DocT | None:
        """Read the document, or None if it is missing or unreadable."""
        if not self.path.exists():
            return None
        try:
            return self.model.model_validate_json(self.path.read_bytes())
        except (OSError, ValidationError, ValueError) as e:
            logger.warning(
                "history_cache_unreadable",
                path=str(self.path),
                error=str(e)[:200],
            )
            return None

    def save(self, document: DocT) -> bool:
        """Write the document atomically. Returns False if the write failed."""
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_path = tempfile.mkstemp(dir=self.path.parent, suffix=".tmp")
            try:
                with os.fdopen(fd, "w") as f:
                    f.write(document.model_dump_json())
                os.replace(tmp_path, self.path)
            except BaseException:
                Path(tmp_path).unlink(missing_ok=True)
                raise
        except OSError as e:
            logger.warning("history_cache_write_failed", path=str(self.path), error=str(e))
            return False
        return True

    def clear(self) -> None:
        try:
            self.path.unlink(missing_ok=True)
        except OSError as e:
            logger.warning("history_cache_clear_failed", path=str(self.path), error=str(e))


__all__ = ["JsonFileCache"]
