# src/inventory_domain/application/inventory_service.py
"""Application service owning the inventory document: loading, mutations and dashboard/report queries."""

import logging
from datetime import date, datetime
from threading import Lock
from typing import Any, Callable, Optional

import pytz

from src.common.config.settings import settings
from src.common.dtos.inventory_dtos import (
    ActivityEntryDTO,
    ActivityReportDTO,
    DeleteImpactDTO,
    InventorySummaryDTO,
)
from src.common.exceptions.custom_exceptions import (
    InsufficientStockError,
    NotFoundError,
    StorageCorruptError,
    ValidationError,
)
from src.common.utils.date_utils import day_bounds, truncate_to_milliseconds
from src.inventory_domain.domain.entities.document import InventoryDocument
from src.inventory_domain.domain.entities.procurement import Procurement
from src.inventory_domain.domain.entities.product import Product
from src.inventory_domain.domain.entities.sale import Sale
from src.inventory_domain.domain.repositories.document_repository import IDocumentRepository
from src.inventory_domain.domain.services.id_generator import (
    PROCUREMENT_ID_PREFIX,
    PRODUCT_ID_PREFIX,
    SALE_ID_PREFIX,
    IdGenerator,
)
from src.inventory_domain.domain.services.seed_data import build_seed_document

logger = logging.getLogger(__name__)


def _require_text(value: Any, field_name: str) -> str:
    """Returns the trimmed text, or raises ValidationError if it is missing or blank."""
    text = value.strip() if isinstance(value, str) else ""
    if not text:
        raise ValidationError(f"Please fill in the {field_name}", reason="missing_field")
    return text


def _parse_positive_int(value: Any, field_name: str = "quantity") -> int:
    """Accepts an int or a digit string (surrounding whitespace allowed) and returns it if it is >= 1."""
    if isinstance(value, bool):
        parsed = None
    elif isinstance(value, int):
        parsed = value
    elif isinstance(value, str) and value.strip().isdecimal():
        try:
            parsed = int(value.strip())
        except ValueError:
            # Past the interpreter's int string-conversion digit limit
            parsed = None
    else:
        parsed = None

    if parsed is None or parsed < 1:
        raise ValidationError(f"Please enter a valid {field_name}", reason="invalid_quantity")
    return parsed


class InventoryApplicationService:
    """Single source of truth for the inventory document.

    Every mutation is load -> validate -> mutate -> persist under one lock, and all
    validation finishes before anything is changed, so a rejected call leaves the stored
    document untouched.
    """

    def __init__(
        self,
        document_repo: IDocumentRepository,
        clock: Optional[Callable[[], datetime]] = None,
        id_generator: Optional[IdGenerator] = None,
        low_stock_threshold: Optional[int] = None,
        report_timezone: Optional[str] = None,
    ) -> None:
        """Initializes the InventoryApplicationService."""
        self.document_repo = document_repo
        self.clock = clock or (lambda: datetime.now(pytz.utc))
        self.id_generator = id_generator or IdGenerator()
        self.low_stock_threshold = (
            low_stock_threshold if low_stock_threshold is not None else settings.LOW_STOCK_THRESHOLD
        )
        self.report_timezone = report_timezone or settings.REPORT_TIMEZONE
        self._lock = Lock()

    # ------------------------------------------------------------------
    # Load / save
    # ------------------------------------------------------------------

    def _load_or_seed(self) -> InventoryDocument:
        try:
            document = self.document_repo.load_document()
        except StorageCorruptError as e:
            logger.error(f"Stored inventory document is unreadable, replacing it with seed data: {e}")
            document = None
        else:
            if document is not None:
                return document
            logger.info("No stored inventory document found, creating seed data.")

        document = build_seed_document()
        self.document_repo.save_document(document)
        return document

    def load(self) -> InventoryDocument:
        """Returns the stored document, seeding (and persisting) a fresh one if none exists or it is corrupt."""
        with self._lock:
            return self._load_or_seed()

    def save(self, document: InventoryDocument) -> None:
        """Persists the whole document, replacing the previous one."""
        with self._lock:
            self.document_repo.save_document(document)

    def reset(self) -> InventoryDocument:
        """Discards all stored data and starts over from the seed document."""
        with self._lock:
            self.document_repo.clear()
            document = build_seed_document()
            self.document_repo.save_document(document)
        logger.info("All inventory data cleared and re-seeded.")
        return document

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    def add_product(self, barcode: str, name: str, company: str, initial_stock: Any) -> str:
        """Adds a product and returns its new id."""
        try:
            barcode = _require_text(barcode, "barcode")
            name = _require_text(name, "product name")
            company = _require_text(company, "company name")
            stock = _parse_positive_int(initial_stock, "initial stock")
        except ValidationError as e:
            logger.warning(f"Product rejected: {e}")
            raise

        with self._lock:
            document = self._load_or_seed()
            product_id = self.id_generator.new_id(PRODUCT_ID_PREFIX, document.product_ids())
            document.products.append(
                Product(id=product_id, barcode=barcode, name=name, company=company, stock=stock)
            )
            self.document_repo.save_document(document)

        logger.info(f"Product added: {product_id} '{name}' ({company}), stock {stock}")
        return product_id

    def preview_delete(self, product_id: str) -> DeleteImpactDTO:
        """Reports how many sales and procurements deleting a product would remove, without changing anything."""
        with self._lock:
            document = self._load_or_seed()
            product = self._get_existing_product(document, product_id)
            sales_count, procurements_count = document.count_references(product.id)
        return DeleteImpactDTO(
            product_id=product.id,
            product_name=product.name,
            sales_count=sales_count,
            procurements_count=procurements_count,
        )

    def delete_product(self, product_id: str) -> DeleteImpactDTO:
        """Deletes a product together with all its sales and procurements."""
        with self._lock:
            document = self._load_or_seed()
            product = self._get_existing_product(document, product_id)
            sales_count, procurements_count = document.remove_product(product.id)
            self.document_repo.save_document(document)

        logger.info(
            f"Product deleted: {product.id} '{product.name}' "
            f"({sales_count} sales, {procurements_count} procurements removed)"
        )
        return DeleteImpactDTO(
            product_id=product.id,
            product_name=product.name,
            sales_count=sales_count,
            procurements_count=procurements_count,
        )

    def record_sale(self, product_id: Optional[str], qty: Any) -> Sale:
        """Records a sale and takes the units out of stock."""
        try:
            self._require_product_selected(product_id)
            quantity = _parse_positive_int(qty)
        except ValidationError as e:
            logger.warning(f"Sale rejected: {e}")
            raise

        with self._lock:
            document = self._load_or_seed()
            product = self._get_existing_product(document, product_id)
            if quantity > product.stock:
                logger.warning(f"Sale rejected for {product.id}: requested {quantity}, in stock {product.stock}")
                raise InsufficientStockError(requested=quantity, available=product.stock)

            sale = Sale(
                id=self.id_generator.new_id(SALE_ID_PREFIX, document.sale_ids()),
                product_id=product.id,
                qty=quantity,
                date=self._now(),
            )
            product.stock -= quantity
            document.sales.append(sale)
            self.document_repo.save_document(document)

        logger.info(f"Sale recorded: {quantity} x '{product.name}', stock now {product.stock}")
        return sale

    def record_procurement(self, product_id: Optional[str], qty: Any) -> Procurement:
        """Records a restock and adds the units to stock."""
        try:
            self._require_product_selected(product_id)
            quantity = _parse_positive_int(qty)
        except ValidationError as e:
            logger.warning(f"Procurement rejected: {e}")
            raise

        with self._lock:
            document = self._load_or_seed()
            product = self._get_existing_product(document, product_id)

            procurement = Procurement(
                id=self.id_generator.new_id(PROCUREMENT_ID_PREFIX, document.procurement_ids()),
                product_id=product.id,
                qty=quantity,
                date=self._now(),
            )
            product.stock += quantity
            document.procurements.append(procurement)
            self.document_repo.save_document(document)

        logger.info(f"Stock added: {quantity} x '{product.name}', stock now {product.stock}")
        return procurement

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def get_product(self, product_id: str) -> Product:
        """Returns a single product."""
        return self._get_existing_product(self.load(), product_id)

    def query_low_stock(self, threshold: Optional[int] = None) -> list[Product]:
        """Returns products whose stock is strictly below the threshold, in storage order."""
        if threshold is None:
            threshold = self.low_stock_threshold
        return [product for product in self.load().products if product.stock < threshold]

    def query_products_matching(self, term: str) -> list[Product]:
        """Product picker search: case-insensitive substring match on name or barcode.

        A blank term returns nothing rather than every product.
        """
        needle = (term or "").strip().lower()
        if not needle:
            return []
        return [
            product
            for product in self.load().products
            if needle in product.name.lower() or needle in product.barcode.lower()
        ]

    def query_inventory(self, term: str = "") -> list[Product]:
        """Inventory list filter: case-insensitive match on name or company. A blank term lists everything."""
        products = self.load().products
        needle = (term or "").strip().lower()
        if not needle:
            return products
        return [
            product for product in products if needle in product.name.lower() or needle in product.company.lower()
        ]

    def query_summary(self) -> InventorySummaryDTO:
        """Returns the dashboard totals."""
        products = self.load().products
        return InventorySummaryDTO(
            total_products=len(products),
            total_stock_units=sum(product.stock for product in products),
            low_stock_count=sum(1 for product in products if product.stock < self.low_stock_threshold),
        )

    def query_activity_in_range(self, start_day: date, end_day: date) -> ActivityReportDTO:
        """Returns sales and procurements recorded from the start of start_day to the end of end_day."""
        if start_day is None or end_day is None:
            raise ValidationError("Please choose a start and end date", reason="invalid_range")

        start, end = day_bounds(start_day, end_day, self.report_timezone)
        if start > end:
            raise ValidationError("Start date must not be after end date", reason="invalid_range")

        document = self.load()
        names = {product.id: product.name for product in document.products}

        def to_entry(event: Sale | Procurement) -> ActivityEntryDTO:
            return ActivityEntryDTO(
                id=event.id,
                product_id=event.product_id,
                product_name=names.get(event.product_id),
                qty=event.qty,
                date=event.date,
            )

        return ActivityReportDTO(
            start=start,
            end=end,
            sales=[to_entry(sale) for sale in document.sales if start <= sale.date <= end],
            procurements=[to_entry(proc) for proc in document.procurements if start <= proc.date <= end],
        )

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _now(self) -> datetime:
        """Current time at the precision the document stores."""
        return truncate_to_milliseconds(self.clock())

    @staticmethod
    def _require_product_selected(product_id: Optional[str]) -> None:
        if not product_id or not str(product_id).strip():
            raise ValidationError("Please select a product", reason="missing_product")

    @staticmethod
    def _get_existing_product(document: InventoryDocument, product_id: str) -> Product:
        product = document.find_product(product_id)
        if product is None:
            logger.warning(f"Product not found: {product_id}")
            raise NotFoundError(f"Product '{product_id}' not found", entity_id=product_id)
        return product
