"""Storage layer for Minimal Task: whole-document text I/O inside a vault."""

import logging
import os
import tempfile
from pathlib import Path
from typing import Union

from .config import ConfigModel
from .exceptions import DocumentNotFoundError, DocumentWriteError


logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


class DocumentStore:
    """Reads and writes named Markdown documents relative to the vault."""

    def __init__(self, config: ConfigModel):
        self.config = config
        self.root = Path(config.vault_dir)

    def resolve(self, path: PathLike) -> Path:
        """Resolve a document path against the vault root."""
        path = Path(path)
        if path.is_absolute():
            return path
        return self.root / path

    def exists(self, path: PathLike) -> bool:
        return self.resolve(path).is_file()

    def read_text(self, path: PathLike) -> str:
        """Read a whole document.

        Raises:
            DocumentNotFoundError: If the document does not exist
        """
        full_path = self.resolve(path)
        if not full_path.is_file():
            raise DocumentNotFoundError(f"Document not found: {full_path}")
        return full_path.read_text(encoding="utf-8")

    def write_text(self, path: PathLike, content: str) -> None:
        """Replace a whole document atomically.

        Raises:
            DocumentWriteError: If the document could not be written
        """
        full_path = self.resolve(path)
        tmp_name = None
        try:
            full_path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(
                prefix=f".{full_path.name}.", suffix=".tmp", dir=str(full_path.parent)
            )
            with os.fdopen(fd, "w", encoding="utf-8", newline="") as tmp:
                tmp.write(content)
                tmp.flush()
                os.fsync(tmp.fileno())
            os.replace(tmp_name, full_path)
        except OSError as e:
            logger.error(f"Failed to write {full_path}: {e}")
            raise DocumentWriteError(f"Failed to write {full_path}: {e}") from e
        finally:
            if tmp_name and os.path.exists(tmp_name):
                os.unlink(tmp_name)

        logger.debug(f"Wrote {len(content)} characters to {full_path}")

    def create_empty(self, path: PathLike) -> Path:
        """Create an empty document if it does not exist yet."""
        full_path = self.resolve(path)
        if not full_path.exists():
            self.write_text(full_path, "")
            logger.info(f"Created empty document {full_path}")
        return full_path
