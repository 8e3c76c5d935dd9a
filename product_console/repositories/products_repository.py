"""Product data access."""

from __future__ import annotations

from typing import List, Optional

from product_console.db.models import Product
from product_console.repositories.base import Repository


class ProductsRepository(Repository[Product]):
    """Repository over the ``products`` table, keyed by product code."""

    model = Product

    def all(self) -> List[Product]:
        return self._db.query(Product).order_by(Product.product_code).all()

    def get_by_code(self, product_code: str) -> Optional[Product]:
        return self.get(product_code)

    def find_by_origin_country(self, origin_country: str) -> List[Product]:
        return (
            self._db.query(Product)
            .filter(Product.origin_country == origin_country)
            .order_by(Product.product_code)
            .all()
        )
