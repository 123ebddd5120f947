"""Data Transfer Objects for inventory queries."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional


@dataclass
class InventorySummaryDTO:
    """Aggregate counts shown on the dashboard."""

    total_products: int
    total_stock_units: int
    low_stock_count: int


@dataclass
class ActivityEntryDTO:
    """A sale or procurement enriched with its product's name for display."""

    id: str
    product_id: str
    product_name: Optional[str]  # None only if the product vanished outside the service
    qty: int
    date: datetime


@dataclass
class ActivityReportDTO:
    """Sales and procurements recorded within a span of calendar days."""

    start: datetime
    end: datetime
    sales: list[ActivityEntryDTO] = field(default_factory=list)
    procurements: list[ActivityEntryDTO] = field(default_factory=list)


@dataclass
class DeleteImpactDTO:
    """What deleting a product removes (or would remove) from the document."""

    product_id: str
    product_name: str
    sales_count: int
    procurements_count: int
