# product_api/models.py
from pydantic import BaseModel, ConfigDict
from typing import Optional


class ProductIn(BaseModel):
    # NaN/Infinity are valid to json.loads but have no JSON or GraphQL Float form
    model_config = ConfigDict(allow_inf_nan=False)

    name: str
    description: Optional[str] = None
    price: float
    tax: Optional[float] = None


class Product(ProductIn):
    id: int


class ErrorMessage(BaseModel):
    message: str
