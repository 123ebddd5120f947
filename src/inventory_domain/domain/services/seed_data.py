# src/inventory_domain/domain/services/seed_data.py
"""Sample data written on first run and after a full reset."""

from datetime import datetime

import pytz

from src.inventory_domain.domain.entities.document import InventoryDocument
from src.inventory_domain.domain.entities.procurement import Procurement
from src.inventory_domain.domain.entities.product import Product
from src.inventory_domain.domain.entities.sale import Sale


def build_seed_document() -> InventoryDocument:
    """Builds a fresh seed document. Each call returns new, independent objects."""
    return InventoryDocument(
        products=[
            Product(id="p1", barcode="123456", name="White Paint 1L", company="ABC Paints", stock=20),
            Product(id="p2", barcode="123457", name="Red Paint 2L", company="XYZ Paints", stock=3),
            Product(id="p3", barcode="123458", name="Blue Paint 1L", company="ABC Paints", stock=8),
        ],
        sales=[
            Sale(id="s1", product_id="p1", qty=2, date=datetime(2025, 10, 30, 12, 30, tzinfo=pytz.utc)),
        ],
        procurements=[
            Procurement(id="pr1", product_id="p1", qty=10, date=datetime(2025, 10, 29, 9, 45, tzinfo=pytz.utc)),
        ],
    )
