# src/inventory_domain/domain/repositories/document_repository.py
"""Inventory document repository interface."""
from abc import ABC, abstractmethod
from typing import Optional

from src.inventory_domain.domain.entities.document import InventoryDocument


class IDocumentRepository(ABC):

    @abstractmethod
    def load_document(self) -> Optional[InventoryDocument]:
        """Loads the stored document, or returns None when nothing has been stored yet.

        Raises StorageCorruptError when the stored blob cannot be decoded.
        """
        pass

    @abstractmethod
    def save_document(self, document: InventoryDocument) -> None:
        """Replaces the stored document as a whole."""
        pass

    @abstractmethod
    def clear(self) -> None:
        """Removes the stored document so the next load starts from nothing."""
        pass
