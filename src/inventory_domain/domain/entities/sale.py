"""Sale entity."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)  # Sales are never edited once recorded
class Sale:
    """A recorded sale of some units of one product."""

    id: str
    product_id: str
    qty: int
    date: datetime

    def __post_init__(self) -> None:
        if not (isinstance(self.id, str) and isinstance(self.product_id, str)) or not (self.id and self.product_id):
            raise ValueError("Sale id and product id cannot be empty.")
        if isinstance(self.qty, bool) or not isinstance(self.qty, int) or self.qty < 1:
            raise ValueError("Sale quantity must be a positive integer.")
