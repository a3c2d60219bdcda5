# product_api/core.py
import logging
import math
import re

from fastapi import Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from .database import ProductStore

logger = logging.getLogger(__name__)

# Shared helpers for the REST app: store access and error mapping.


class ProductNotFoundError(Exception):
    def __init__(self, product_id: int):
        super().__init__(f"product {product_id} not found")
        self.product_id = product_id


class InvalidProductIdError(Exception):
    def __init__(self, raw: str):
        super().__init__(f"invalid product id: {raw!r}")
        self.raw = raw


def get_store(request: Request) -> ProductStore:
    return request.app.state.store


_PRODUCT_ID_RE = re.compile(r"[+-]?[0-9]+")


def parse_product_id(raw: str) -> int:
    if not _PRODUCT_ID_RE.fullmatch(raw):
        raise InvalidProductIdError(raw)
    return int(raw)


async def product_not_found_handler(request: Request, exc: ProductNotFoundError):
    logger.info("product %s not found", exc.product_id)
    return JSONResponse(status_code=404, content={"message": "Product not found"})


async def invalid_product_id_handler(request: Request, exc: InvalidProductIdError):
    logger.info("rejected product id %r", exc.raw)
    return JSONResponse(status_code=400, content={"message": "Invalid product id"})


def _json_safe(value):
    if isinstance(value, float) and not math.isfinite(value):
        return str(value)
    if isinstance(value, dict):
        return {k: _json_safe(v) for k, v in value.items()}
    if isinstance(value, list):
        return [_json_safe(v) for v in value]
    return value


async def validation_error_handler(request: Request, exc: RequestValidationError):
    # rejected NaN/Infinity inputs are echoed back as strings
    errors = _json_safe(jsonable_encoder(exc.errors()))
    return JSONResponse(status_code=422, content={"detail": errors})
