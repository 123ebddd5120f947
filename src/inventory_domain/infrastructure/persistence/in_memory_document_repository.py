# src/inventory_domain/infrastructure/persistence/in_memory_document_repository.py
"""In-memory implementation of the inventory document repository."""

from typing import Optional

from src.inventory_domain.domain.entities.document import InventoryDocument
from src.inventory_domain.domain.repositories.document_repository import IDocumentRepository
from src.inventory_domain.infrastructure.persistence.document_codec import decode_document, encode_document


class InMemoryDocumentRepository(IDocumentRepository):
    """Keeps the encoded blob in a dict keyed by storage key, the way a browser's local storage would."""

    def __init__(self, storage_key: str = "paintShopDB", initial_blob: Optional[str] = None) -> None:
        self.storage_key = storage_key
        self._blobs: dict[str, str] = {}
        if initial_blob is not None:
            self._blobs[storage_key] = initial_blob

    @property
    def raw_blob(self) -> Optional[str]:
        """The exact stored text, or None when nothing is stored."""
        return self._blobs.get(self.storage_key)

    def load_document(self) -> Optional[InventoryDocument]:
        blob = self._blobs.get(self.storage_key)
        if blob is None:
            return None
        return decode_document(blob)

    def save_document(self, document: InventoryDocument) -> None:
        # Encode first so a failed encode never replaces the stored blob
        blob = encode_document(document)
        self._blobs[self.storage_key] = blob

    def clear(self) -> None:
        self._blobs.pop(self.storage_key, None)
