# product_api/rest.py
from typing import List

from fastapi import APIRouter, Depends, FastAPI, Path
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware

from .core import (
    InvalidProductIdError, ProductNotFoundError, get_store, parse_product_id,
    invalid_product_id_handler, product_not_found_handler, validation_error_handler,
)
from .database import ProductStore
from .models import ErrorMessage, Product, ProductIn

API_TITLE = "Product API (GraphQL Proxy)"
API_VERSION = "1.0.0"
API_DESCRIPTION = "REST API exposing the same product collection as the GraphQL API."

router = APIRouter(prefix="/products", tags=["products"])
system_router = APIRouter(include_in_schema=False)


# ---------------------------
# Product endpoints
# ---------------------------
@router.get("", response_model=List[Product], summary="List all products")
async def list_products(store: ProductStore = Depends(get_store)):
    return store.list()


@router.get(
    "/{product_id}",
    response_model=Product,
    summary="Get a product by id",
    responses={400: {"model": ErrorMessage}, 404: {"model": ErrorMessage}},
)
async def get_product(
    product_id: str = Path(..., description="Numeric product id", json_schema_extra={"type": "integer"}),
    store: ProductStore = Depends(get_store),
):
    pid = parse_product_id(product_id)
    p = store.get(pid)
    if p is None:
        raise ProductNotFoundError(pid)
    return p


@router.post("", response_model=Product, status_code=201, summary="Create a product")
async def create_product(payload: ProductIn, store: ProductStore = Depends(get_store)):
    return store.insert(payload)


# ---------------------------
# Utility: health and reset (for tests/demo)
# ---------------------------
@system_router.get("/health")
async def health_check():
    return {"status": "ok"}


@system_router.post("/reset")
async def reset_store(store: ProductStore = Depends(get_store)):
    store.reset()
    return {"status": "reset"}


def create_rest_app(store: ProductStore) -> FastAPI:
    """
    Build the REST app over `store`.

    Swagger UI is served at /api-docs from the OpenAPI document FastAPI derives
    from the routes and models above.
    """
    app = FastAPI(
        title=API_TITLE,
        version=API_VERSION,
        description=API_DESCRIPTION,
        docs_url="/api-docs",
        redoc_url=None,
    )
    app.state.store = store

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(ProductNotFoundError, product_not_found_handler)
    app.add_exception_handler(InvalidProductIdError, invalid_product_id_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)

    app.include_router(router)
    # legacy /rest/products paths, same handlers, kept out of the docs
    app.include_router(router, prefix="/rest", include_in_schema=False)
    app.include_router(system_router)
    return app
