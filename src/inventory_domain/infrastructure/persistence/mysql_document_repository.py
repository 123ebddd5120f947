# src/inventory_domain/infrastructure/persistence/mysql_document_repository.py
"""MySQL implementation of the inventory document repository."""

import logging
from typing import Optional

import mysql.connector
from mysql.connector import Error

from src.common.config.settings import settings
from src.common.exceptions.custom_exceptions import DatabaseError
from src.inventory_domain.domain.entities.document import InventoryDocument
from src.inventory_domain.domain.repositories.document_repository import IDocumentRepository
from src.inventory_domain.infrastructure.persistence.document_codec import decode_document, encode_document

logger = logging.getLogger(__name__)


class MySQLDocumentRepository(IDocumentRepository):
    """Stores the encoded document as a single row keyed by storage key."""

    def __init__(self, storage_key: str | None = None) -> None:
        """Initializes the repository."""
        self.storage_key = storage_key or settings.STORAGE_KEY
        self._connection = None

    def _get_connection(self):
        """Establishes or returns an active MySQL database connection."""
        if not self._connection or not self._connection.is_connected():
            try:
                self._connection = mysql.connector.connect(
                    host=settings.DB_HOST,
                    database=settings.DB_DATABASE,
                    user=settings.DB_USER,
                    password=settings.DB_PASSWORD,
                    autocommit=False,
                    charset="utf8mb4",
                    use_unicode=True,
                )
            except Error as e:
                raise DatabaseError(f"Failed to connect to MySQL: {e}", original_exception=e)
        return self._connection

    def create_tables(self) -> None:
        """Creates the document table if it does not exist."""
        create_documents_table_query = """
        CREATE TABLE IF NOT EXISTS pst_documents (
            storage_key VARCHAR(255) PRIMARY KEY,
            payload LONGTEXT NOT NULL,
            updated_at DATETIME DEFAULT CURRENT_TIMESTAMP ON UPDATE CURRENT_TIMESTAMP
        ) ENGINE=InnoDB DEFAULT CHARSET=utf8mb4;
        """
        conn = self._get_connection()
        cursor = conn.cursor()
        try:
            cursor.execute(create_documents_table_query)
            conn.commit()
            logger.info("Document table checked/created.")
        except Error as e:
            conn.rollback()
            raise DatabaseError(f"Error creating document table: {e}", original_exception=e)
        finally:
            cursor.close()

    def load_document(self) -> Optional[InventoryDocument]:
        """Fetches the payload row for the storage key and decodes it."""
        conn = self._get_connection()
        cursor = conn.cursor(dictionary=True)
        try:
            query = """
            SELECT payload
            FROM pst_documents
            WHERE storage_key = %s
            """
            cursor.execute(query, (self.storage_key,))
            row = cursor.fetchone()
        except Error as e:
            raise DatabaseError(f"Error loading document '{self.storage_key}': {e}", original_exception=e)
        finally:
            cursor.close()

        if not row:
            return None
        return decode_document(row["payload"])

    def save_document(self, document: InventoryDocument) -> None:
        """Upserts the whole payload in one committed statement."""
        payload = encode_document(document)
        conn = self._get_connection()
        cursor = conn.cursor()

        upsert_query = """
        INSERT INTO pst_documents (storage_key, payload)
        VALUES (%s, %s)
        ON DUPLICATE KEY UPDATE
        payload = VALUES(payload),
        updated_at = CURRENT_TIMESTAMP
        """
        try:
            cursor.execute(upsert_query, (self.storage_key, payload))
            conn.commit()
        except Error as e:
            conn.rollback()
            raise DatabaseError(f"Error saving document '{self.storage_key}': {e}", original_exception=e)
        finally:
            cursor.close()

    def clear(self) -> None:
        """Deletes the payload row for the storage key."""
        conn = self._get_connection()
        cursor = conn.cursor()
        try:
            cursor.execute("DELETE FROM pst_documents WHERE storage_key = %s", (self.storage_key,))
            conn.commit()
        except Error as e:
            conn.rollback()
            raise DatabaseError(f"Error clearing document '{self.storage_key}': {e}", original_exception=e)
        finally:
            cursor.close()
