# src/inventory_domain/infrastructure/persistence/json_file_document_repository.py
"""JSON file implementation of the inventory document repository."""

import logging
import os
import tempfile
from pathlib import Path
from typing import Optional

from src.common.exceptions.custom_exceptions import ApplicationError, StorageCorruptError
from src.inventory_domain.domain.entities.document import InventoryDocument
from src.inventory_domain.domain.repositories.document_repository import IDocumentRepository
from src.inventory_domain.infrastructure.persistence.document_codec import decode_document, encode_document

logger = logging.getLogger(__name__)


class JsonFileDocumentRepository(IDocumentRepository):
    """Stores the whole document as one JSON file. Writes go through a temp file and an atomic rename."""

    def __init__(self, file_path: str | os.PathLike) -> None:
        self.path = Path(file_path)

    def load_document(self) -> Optional[InventoryDocument]:
        """Reads and decodes the document file, or returns None when it does not exist yet."""
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                blob = f.read()
        except FileNotFoundError:
            logger.debug(f"No document file at {self.path}")
            return None
        except UnicodeDecodeError as e:
            raise StorageCorruptError(f"Document file {self.path} is not valid UTF-8", original_exception=e)
        except OSError as e:
            raise ApplicationError(f"Could not read document file {self.path}", original_exception=e)
        return decode_document(blob)

    def save_document(self, document: InventoryDocument) -> None:
        """Writes the document to a temp file in the same directory, then renames it over the target."""
        blob = encode_document(document)
        self.path.parent.mkdir(parents=True, exist_ok=True)

        tmp_path: Optional[Path] = None
        try:
            with tempfile.NamedTemporaryFile(
                "w", delete=False, encoding="utf-8", dir=str(self.path.parent), suffix=".tmp"
            ) as tmp:
                tmp_path = Path(tmp.name)
                tmp.write(blob)
            tmp_path.replace(self.path)
        except OSError as e:
            if tmp_path is not None and tmp_path.exists():
                tmp_path.unlink()
            raise ApplicationError(f"Could not write document file {self.path}", original_exception=e)

        logger.debug(f"Document written to {self.path} ({len(blob)} bytes)")

    def clear(self) -> None:
        """Deletes the document file if present."""
        try:
            self.path.unlink()
        except FileNotFoundError:
            pass
        except OSError as e:
            raise ApplicationError(f"Could not delete document file {self.path}", original_exception=e)
