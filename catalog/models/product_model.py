from pydantic import BaseModel, Field
from typing import Any, List, Optional
from bson import ObjectId

class ProductModel(BaseModel):
    id: ObjectId = Field(..., alias="_id")
    modelNum: str
    brand: str
    name: str
    salePrice: float
    msrp: Optional[float] = None
    relatedProducts: List[Any] = []

    class Config:
        populate_by_name = True  # allows using "id" instead of "_id"
        arbitrary_types_allowed = True


class RelatedProductModel(BaseModel):
    id: str
    title: str
    brandName: str


class ProductViewModel(BaseModel):
    '''
    Response-shaped projection of a stored product. Built per call, never persisted.
    '''
    id: str
    model: str
    sku: str
    title: str
    brandName: str
    price: float
    listPrice: Optional[float] = None
    discount: float = 0
    discountPercent: int = 0
    relatedProducts: List[RelatedProductModel] = []

    def to_dict(self) -> dict:
        return self.model_dump()
