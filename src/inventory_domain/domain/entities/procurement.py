"""Procurement entity."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class Procurement:
    """A recorded restock of one product."""

    id: str
    product_id: str
    qty: int
    date: datetime

    def __post_init__(self) -> None:
        if not (isinstance(self.id, str) and isinstance(self.product_id, str)) or not (self.id and self.product_id):
            raise ValueError("Procurement id and product id cannot be empty.")
        if isinstance(self.qty, bool) or not isinstance(self.qty, int) or self.qty < 1:
            raise ValueError("Procurement quantity must be a positive integer.")
