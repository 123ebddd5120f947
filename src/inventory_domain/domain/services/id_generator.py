# src/inventory_domain/domain/services/id_generator.py
"""Identifier generation for document entities."""

import uuid
from typing import Callable

PRODUCT_ID_PREFIX = "p"
SALE_ID_PREFIX = "s"
PROCUREMENT_ID_PREFIX = "pr"


class IdGenerator:
    """Generates type-prefixed random identifiers that are unique within a collection."""

    def __init__(self, token_factory: Callable[[], str] | None = None, max_attempts: int = 10) -> None:
        self._token_factory = token_factory or (lambda: uuid.uuid4().hex)
        self._max_attempts = max_attempts

    def new_id(self, prefix: str, existing_ids: set[str]) -> str:
        """Returns a fresh id with the given prefix that is not in existing_ids."""
        for _ in range(self._max_attempts):
            candidate = f"{prefix}{self._token_factory()}"
            if candidate not in existing_ids:
                return candidate
        raise RuntimeError(f"Could not generate a unique '{prefix}' id after {self._max_attempts} attempts")
