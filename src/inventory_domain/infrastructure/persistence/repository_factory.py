# src/inventory_domain/infrastructure/persistence/repository_factory.py
"""Chooses the document storage backend from settings."""

from src.common.config.settings import settings
from src.common.exceptions.custom_exceptions import ApplicationError
from src.inventory_domain.domain.repositories.document_repository import IDocumentRepository
from src.inventory_domain.infrastructure.persistence.in_memory_document_repository import (
    InMemoryDocumentRepository,
)
from src.inventory_domain.infrastructure.persistence.json_file_document_repository import (
    JsonFileDocumentRepository,
)
from src.inventory_domain.infrastructure.persistence.mysql_document_repository import MySQLDocumentRepository


def build_document_repository(backend: str | None = None) -> IDocumentRepository:
    """Returns the repository for the named backend (defaults to settings.STORAGE_BACKEND)."""
    backend = (backend or settings.STORAGE_BACKEND).strip().lower()

    if backend == "json_file":
        return JsonFileDocumentRepository(settings.STORAGE_FILE_PATH)
    if backend == "memory":
        return InMemoryDocumentRepository(storage_key=settings.STORAGE_KEY)
    if backend == "mysql":
        repo = MySQLDocumentRepository(storage_key=settings.STORAGE_KEY)
        repo.create_tables()
        return repo

    raise ApplicationError(f"Unknown storage backend '{backend}'. Expected json_file, mysql or memory.")
