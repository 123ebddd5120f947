"""Inventory document aggregate."""

from dataclasses import dataclass, field
from typing import Optional

from .procurement import Procurement
from .product import Product
from .sale import Sale


@dataclass
class InventoryDocument:
    """The complete persisted state: products plus the sale and procurement logs."""

    products: list[Product] = field(default_factory=list)
    sales: list[Sale] = field(default_factory=list)
    procurements: list[Procurement] = field(default_factory=list)

    def find_product(self, product_id: str) -> Optional[Product]:
        """Returns the product with the given id, or None."""
        for product in self.products:
            if product.id == product_id:
                return product
        return None

    def product_ids(self) -> set[str]:
        return {product.id for product in self.products}

    def sale_ids(self) -> set[str]:
        return {sale.id for sale in self.sales}

    def procurement_ids(self) -> set[str]:
        return {procurement.id for procurement in self.procurements}

    def count_references(self, product_id: str) -> tuple[int, int]:
        """Counts the sales and procurements that reference a product."""
        sales_count = sum(1 for sale in self.sales if sale.product_id == product_id)
        procurements_count = sum(1 for proc in self.procurements if proc.product_id == product_id)
        return sales_count, procurements_count

    def remove_product(self, product_id: str) -> tuple[int, int]:
        """Removes a product and every event referencing it. Returns the removed (sales, procurements) counts."""
        sales_count, procurements_count = self.count_references(product_id)
        self.products = [product for product in self.products if product.id != product_id]
        self.sales = [sale for sale in self.sales if sale.product_id != product_id]
        self.procurements = [proc for proc in self.procurements if proc.product_id != product_id]
        return sales_count, procurements_count
