# src/inventory_domain/infrastructure/persistence/document_codec.py
"""JSON encoding of the inventory document shared by all storage backends."""

import json
from typing import Any

from src.common.exceptions.custom_exceptions import StorageCorruptError
from src.common.utils.date_utils import format_iso_datetime, parse_iso_datetime
from src.inventory_domain.domain.entities.document import InventoryDocument
from src.inventory_domain.domain.entities.procurement import Procurement
from src.inventory_domain.domain.entities.product import Product
from src.inventory_domain.domain.entities.sale import Sale


def document_to_dict(document: InventoryDocument) -> dict[str, Any]:
    """Converts a document to the persisted layout (camelCase keys, ISO dates)."""
    return {
        "products": [
            {
                "id": product.id,
                "barcode": product.barcode,
                "name": product.name,
                "company": product.company,
                "stock": product.stock,
            }
            for product in document.products
        ],
        "sales": [
            {"id": sale.id, "productId": sale.product_id, "qty": sale.qty, "date": format_iso_datetime(sale.date)}
            for sale in document.sales
        ],
        "procurements": [
            {
                "id": proc.id,
                "productId": proc.product_id,
                "qty": proc.qty,
                "date": format_iso_datetime(proc.date),
            }
            for proc in document.procurements
        ],
    }


def document_from_dict(data: dict[str, Any]) -> InventoryDocument:
    """Builds a document from the persisted layout. Raises StorageCorruptError on any shape problem."""
    if not isinstance(data, dict):
        raise StorageCorruptError(f"Expected a JSON object, got {type(data).__name__}")

    try:
        products = [
            Product(
                id=row["id"],
                barcode=row["barcode"],
                name=row["name"],
                company=row["company"],
                stock=row["stock"],
            )
            for row in data["products"]
        ]
        sales = [
            Sale(id=row["id"], product_id=row["productId"], qty=row["qty"], date=parse_iso_datetime(row["date"]))
            for row in data["sales"]
        ]
        procurements = [
            Procurement(
                id=row["id"],
                product_id=row["productId"],
                qty=row["qty"],
                date=parse_iso_datetime(row["date"]),
            )
            for row in data["procurements"]
        ]
    except (KeyError, TypeError, ValueError) as e:
        raise StorageCorruptError(f"Stored document has an invalid shape: {e!r}", original_exception=e)

    for collection_name, entities in (("products", products), ("sales", sales), ("procurements", procurements)):
        ids = [entity.id for entity in entities]
        if len(ids) != len(set(ids)):
            raise StorageCorruptError(f"Stored document has duplicate ids in {collection_name}")

    return InventoryDocument(products=products, sales=sales, procurements=procurements)


def encode_document(document: InventoryDocument) -> str:
    """Serializes a document to its JSON blob."""
    return json.dumps(document_to_dict(document), ensure_ascii=False)


def decode_document(blob: str) -> InventoryDocument:
    """Parses a JSON blob into a document. Raises StorageCorruptError if it is not a valid document."""
    try:
        data = json.loads(blob)
    except (json.JSONDecodeError, TypeError) as e:
        raise StorageCorruptError(f"Stored document is not valid JSON: {e}", original_exception=e)
    return document_from_dict(data)
