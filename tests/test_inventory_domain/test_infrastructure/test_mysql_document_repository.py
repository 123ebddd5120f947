# tests/test_inventory_domain/test_infrastructure/test_mysql_document_repository.py

from unittest.mock import Mock

import pytest
from mysql.connector import Error

from src.common.exceptions.custom_exceptions import DatabaseError, StorageCorruptError
from src.inventory_domain.domain.services.seed_data import build_seed_document
from src.inventory_domain.infrastructure.persistence.document_codec import encode_document
from src.inventory_domain.infrastructure.persistence.mysql_document_repository import MySQLDocumentRepository


@pytest.fixture
def mock_connection(mocker) -> Mock:
    """Patches mysql.connector.connect and returns the patched callable."""
    return mocker.patch("mysql.connector.connect")


@pytest.fixture
def mock_cursor(mock_connection) -> Mock:
    cursor = Mock()
    mock_connection.return_value.cursor.return_value = cursor
    return cursor


def test_create_tables_success(mock_connection, mock_cursor) -> None:
    repo = MySQLDocumentRepository()

    repo.create_tables()

    mock_connection.assert_called_once()
    assert mock_cursor.execute.call_count == 1
    assert "CREATE TABLE IF NOT EXISTS pst_documents" in mock_cursor.execute.call_args[0][0]
    mock_connection.return_value.commit.assert_called_once()
    mock_cursor.close.assert_called_once()


def test_save_document_upserts_payload(mock_connection, mock_cursor) -> None:
    repo = MySQLDocumentRepository(storage_key="paintShopDB")

    repo.save_document(build_seed_document())

    mock_cursor.execute.assert_called_once()
    query, params = mock_cursor.execute.call_args[0]
    assert query.strip().startswith("INSERT INTO pst_documents")
    assert params == ("paintShopDB", encode_document(build_seed_document()))
    mock_connection.return_value.commit.assert_called_once()
    mock_cursor.close.assert_called_once()


def test_save_document_rolls_back_on_error(mock_connection, mock_cursor) -> None:
    mock_cursor.execute.side_effect = Error("write failed")
    repo = MySQLDocumentRepository()

    with pytest.raises(DatabaseError):
        repo.save_document(build_seed_document())

    mock_connection.return_value.rollback.assert_called_once()
    mock_connection.return_value.commit.assert_not_called()
    mock_cursor.close.assert_called_once()


def test_load_document_decodes_payload(mock_connection, mock_cursor) -> None:
    mock_cursor.fetchone.return_value = {"payload": encode_document(build_seed_document())}
    repo = MySQLDocumentRepository(storage_key="paintShopDB")

    document = repo.load_document()

    assert document == build_seed_document()
    mock_connection.return_value.cursor.assert_called_with(dictionary=True)
    assert mock_cursor.execute.call_args[0][1] == ("paintShopDB",)
    mock_cursor.close.assert_called_once()


def test_load_document_returns_none_when_row_missing(mock_connection, mock_cursor) -> None:
    mock_cursor.fetchone.return_value = None

    assert MySQLDocumentRepository().load_document() is None


def test_load_document_corrupt_payload_raises(mock_connection, mock_cursor) -> None:
    mock_cursor.fetchone.return_value = {"payload": "not-json"}

    with pytest.raises(StorageCorruptError):
        MySQLDocumentRepository().load_document()


def test_load_document_database_error(mock_connection, mock_cursor) -> None:
    mock_cursor.execute.side_effect = Error("read failed")

    with pytest.raises(DatabaseError) as exc_info:
        MySQLDocumentRepository().load_document()

    assert "read failed" in str(exc_info.value)
    mock_cursor.close.assert_called_once()


def test_clear_deletes_row(mock_connection, mock_cursor) -> None:
    MySQLDocumentRepository(storage_key="paintShopDB").clear()

    query, params = mock_cursor.execute.call_args[0]
    assert query.startswith("DELETE FROM pst_documents")
    assert params == ("paintShopDB",)
    mock_connection.return_value.commit.assert_called_once()


def test_connection_failure_raises_database_error(mock_connection) -> None:
    mock_connection.side_effect = Error("connection refused")

    with pytest.raises(DatabaseError):
        MySQLDocumentRepository().load_document()


def test_connection_is_reused(mock_connection, mock_cursor) -> None:
    mock_cursor.fetchone.return_value = None
    repo = MySQLDocumentRepository()

    repo.load_document()
    repo.load_document()

    mock_connection.assert_called_once()
