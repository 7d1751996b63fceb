class CatalogError(Exception):
    """Base error for the catalog data-access layer."""


class ProductNotFoundError(CatalogError):
    def __init__(self, product_id):
        self.product_id = product_id
        super().__init__(f"Product not found: {product_id}")
