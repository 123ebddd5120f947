# tests/conftest.py
import itertools
from datetime import datetime
from unittest.mock import Mock

import pytest
import pytz

from src.common.config.settings import settings
from src.inventory_domain.application.inventory_service import InventoryApplicationService
from src.inventory_domain.domain.repositories.document_repository import IDocumentRepository
from src.inventory_domain.domain.services.id_generator import IdGenerator
from src.inventory_domain.domain.services.seed_data import build_seed_document
from src.inventory_domain.infrastructure.persistence.document_codec import encode_document
from src.inventory_domain.infrastructure.persistence.in_memory_document_repository import (
    InMemoryDocumentRepository,
)


@pytest.fixture(autouse=True)
def mock_settings_inventory_rules(mocker) -> None:
    """Pins the inventory settings so tests do not depend on the local .env."""
    mocker.patch.object(settings, "LOW_STOCK_THRESHOLD", 5)
    mocker.patch.object(settings, "REPORT_TIMEZONE", "UTC")
    mocker.patch.object(settings, "STORAGE_KEY", "paintShopDB")


@pytest.fixture
def fixed_now() -> datetime:
    """The instant returned by the test clock."""
    return datetime(2025, 11, 3, 15, 0, 0, tzinfo=pytz.utc)


@pytest.fixture
def fixed_clock(fixed_now) -> Mock:
    """Clock callable that always returns fixed_now."""
    return Mock(return_value=fixed_now)


@pytest.fixture
def sequential_id_generator() -> IdGenerator:
    """IdGenerator producing predictable suffixes 1, 2, 3 ... (e.g. p1 collides with the seed and is skipped)."""
    counter = itertools.count(1)
    return IdGenerator(token_factory=lambda: str(next(counter)))


@pytest.fixture
def memory_repository() -> InMemoryDocumentRepository:
    """Empty in-memory repository."""
    return InMemoryDocumentRepository(storage_key="paintShopDB")


@pytest.fixture
def seeded_repository() -> InMemoryDocumentRepository:
    """In-memory repository already holding the seed document."""
    return InMemoryDocumentRepository(storage_key="paintShopDB", initial_blob=encode_document(build_seed_document()))


@pytest.fixture
def inventory_service(seeded_repository, fixed_clock) -> InventoryApplicationService:
    """Service over the seeded in-memory repository with a fixed clock."""
    return InventoryApplicationService(document_repo=seeded_repository, clock=fixed_clock)


@pytest.fixture
def mock_document_repository() -> Mock:
    """Mock for IDocumentRepository."""
    return Mock(spec=IDocumentRepository)
