"""Category aggregate — groups products in the catalog."""

from __future__ import annotations

from dataclasses import dataclass

from storefront.domain.exceptions import ValidationError


@dataclass
class Category:

    id: int | None
    name: str

    def rename(self, name: str) -> None:
        if not name or not name.strip():
            raise ValidationError("Category name cannot be blank")
        self.name = name.strip()
