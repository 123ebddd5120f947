"""Main application entry point: prints the paint shop dashboard and today's activity report."""

import logging
from datetime import datetime

import pytz

from src.common.config.settings import settings
from src.common.dtos.inventory_dtos import ActivityReportDTO
from src.common.exceptions.custom_exceptions import ApplicationError, DatabaseError
from src.common.logger_config import setup_logging
from src.common.utils.date_utils import format_report_date
from src.inventory_domain.application.inventory_service import InventoryApplicationService
from src.inventory_domain.infrastructure.persistence.repository_factory import build_document_repository

logger = logging.getLogger(__name__)


def setup_inventory_dependencies() -> InventoryApplicationService:
    """Initializes and wires up inventory domain dependencies."""
    document_repository = build_document_repository(settings.STORAGE_BACKEND)
    return InventoryApplicationService(document_repo=document_repository)


def print_dashboard(inventory_service: InventoryApplicationService) -> None:
    """Prints the dashboard totals and the low stock list."""
    summary = inventory_service.query_summary()
    print("\n--- Dashboard ---")
    print(f"  Total products:   {summary.total_products}")
    print(f"  Total stock:      {summary.total_stock_units}")
    print(f"  Low stock items:  {summary.low_stock_count}")

    low_stock_items = inventory_service.query_low_stock()
    if not low_stock_items:
        print("  No low stock items")
    for product in low_stock_items:
        print(f"    {product.name}: {product.stock} pcs")


def print_activity_report(report: ActivityReportDTO) -> None:
    """Prints sales and procurements of a report the way the report screen lists them."""
    tz_name = settings.REPORT_TIMEZONE
    print(f"\n--- Report {report.start.date()} to {report.end.date()} ---")

    print("  Sales:")
    if not report.sales:
        print("    No sales records")
    for entry in report.sales:
        print(f"    {format_report_date(entry.date, tz_name)}  {entry.product_name} - {entry.qty} units sold")

    print("  Procurements:")
    if not report.procurements:
        print("    No procurement records")
    for entry in report.procurements:
        print(f"    {format_report_date(entry.date, tz_name)}  {entry.product_name} - {entry.qty} units added")


def run_inventory_overview() -> None:
    """Loads (or seeds) the inventory document and prints the dashboard and today's report."""
    try:
        inventory_service = setup_inventory_dependencies()
        print_dashboard(inventory_service)

        today = datetime.now(pytz.timezone(settings.REPORT_TIMEZONE)).date()
        print_activity_report(inventory_service.query_activity_in_range(today, today))
    except DatabaseError as e:
        logger.error(f"Storage backend unavailable: {e}")
        raise
    except ApplicationError as e:
        logger.error(f"Could not build the inventory overview: {e}")
        raise


if __name__ == "__main__":
    setup_logging()
    logger.info(f"Paint shop inventory started (storage backend: {settings.STORAGE_BACKEND}).")
    run_inventory_overview()
