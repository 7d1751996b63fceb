import logging
import math
import re
from decimal import Decimal
from typing import Any, Iterable, List, Mapping, Optional, Tuple
from bson import ObjectId
from bson.regex import Regex
from catalog.core.config import PRODUCTS_COLLECTION
from catalog.core.errors import ProductNotFoundError
from catalog.models.product_model import ProductModel, ProductViewModel, RelatedProductModel

logger = logging.getLogger(__name__)


def to_object_id(value: Any) -> Any:
    """
    Converts a 24-hex string to an ObjectId. Anything that isn't one is
    returned unchanged; callers compare it with $eq so it only ever
    matches an identical _id.
    """
    if isinstance(value, ObjectId):
        return value
    if isinstance(value, str) and ObjectId.is_valid(value):
        return ObjectId(value)
    return value


def compute_discount(sale_price: float, msrp: Optional[float]) -> Tuple[float, int]:
    """
    Returns (discount, discountPercent). Both are 0 unless an msrp is set
    and the sale price is below it. The percentage is rounded up.
    """
    if msrp is None or msrp <= 0 or not sale_price < msrp:
        return 0, 0

    # str() first so 249.99 - 219.99 is exactly 30
    sale = Decimal(str(sale_price))
    listed = Decimal(str(msrp))
    difference = abs(sale - listed)
    percent = math.ceil(difference / listed * 100)
    return float(difference), int(percent)


class ProductRepository:
    '''
    Read-only access to the products collection.
    '''

    def __init__(self, db, collection_name: str = PRODUCTS_COLLECTION):
        self.db = db
        self.collection_name = collection_name
        self.collection = db[collection_name]

    async def find_by_id(self, product_id) -> Optional[dict]:
        logger.debug("find_by_id %s", product_id)
        return await self.collection.find_one({"_id": {"$eq": to_object_id(product_id)}})

    async def find_by_ids(self, ids: Iterable) -> List[dict]:
        # $in pattern-matches regex values, so they never reach the filter
        object_ids = [to_object_id(i) for i in ids if not isinstance(i, (re.Pattern, Regex))]
        if not object_ids:
            return []
        logger.debug("find_by_ids %d ids", len(object_ids))
        cursor = self.collection.find({"_id": {"$in": object_ids}})
        return await cursor.to_list(length=None)

    async def find_by_brand(self, brand: str, sort: Optional[Mapping[str, int]] = None) -> List[dict]:
        logger.debug("find_by_brand %s sort=%s", brand, sort)
        cursor = self.collection.find({"brand": {"$eq": brand}})
        if sort:
            cursor = cursor.sort(list(sort.items()))
        return await cursor.to_list(length=None)

    async def serialize(self, product_id) -> ProductViewModel:
        document = await self.find_by_id(product_id)
        if not document:
            logger.info("Cannot serialize missing product %s", product_id)
            raise ProductNotFoundError(product_id)

        product = ProductModel(**document)
        related = await self.find_by_ids(product.relatedProducts)
        discount, discount_percent = compute_discount(product.salePrice, product.msrp)

        return ProductViewModel(
            id=str(product.id),
            model=product.modelNum,
            sku=f"{product.brand}-{product.modelNum}",
            title=product.name,
            brandName=product.brand,
            price=product.salePrice,
            listPrice=product.msrp,
            discount=discount,
            discountPercent=discount_percent,
            relatedProducts=[
                RelatedProductModel(
                    id=str(item["_id"]),
                    title=item["name"],
                    brandName=item["brand"],
                )
                for item in related
            ],
        )
