"""Product entity."""

from dataclasses import dataclass


@dataclass
class Product:
    """A stocked paint product. Stock changes only through sales and procurements after creation."""

    id: str
    barcode: str
    name: str
    company: str
    stock: int = 0

    def __post_init__(self) -> None:
        """Post-initialization for validation."""
        if not isinstance(self.id, str) or not self.id:
            raise ValueError("Product id must be a non-empty string.")
        for field_name in ("barcode", "name", "company"):
            if not isinstance(getattr(self, field_name), str):
                raise ValueError(f"Product {field_name} must be a string.")
        if isinstance(self.stock, bool) or not isinstance(self.stock, int):
            raise ValueError("Stock must be an integer.")
        if self.stock < 0:
            raise ValueError("Stock cannot be negative.")
