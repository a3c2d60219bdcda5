# product_api/graphql_api.py
from typing import List, Optional

import strawberry
from fastapi import FastAPI
from strawberry.fastapi import GraphQLRouter
from strawberry.types import Info

from .database import ProductStore
from .models import Product, ProductIn


# The GraphQL Product type is derived from the pydantic model the REST app
# documents, so both surfaces describe the same fields.
@strawberry.experimental.pydantic.type(model=Product, all_fields=True, name="Product")
class ProductType:
    pass


def _store(info: Info) -> ProductStore:
    return info.context["store"]


@strawberry.type
class Query:
    @strawberry.field
    def get_products(self, info: Info) -> List[ProductType]:
        return [ProductType.from_pydantic(p) for p in _store(info).list()]

    @strawberry.field
    def get_product_by_id(self, info: Info, id: int) -> Optional[ProductType]:
        p = _store(info).get(id)
        return ProductType.from_pydantic(p) if p is not None else None


@strawberry.type
class Mutation:
    @strawberry.mutation
    def create_product(
        self,
        info: Info,
        name: str,
        price: float,
        description: Optional[str] = None,
        tax: Optional[float] = None,
    ) -> ProductType:
        fields = ProductIn(name=name, description=description, price=price, tax=tax)
        return ProductType.from_pydantic(_store(info).insert(fields))


schema = strawberry.Schema(query=Query, mutation=Mutation)


def create_graphql_app(store: ProductStore) -> FastAPI:
    """Build the GraphQL app over `store`, answering on both / and /graphql."""

    async def get_context():
        return {"store": store}

    app = FastAPI(title="Product GraphQL API", docs_url=None, redoc_url=None, openapi_url=None)
    app.state.store = store
    app.include_router(GraphQLRouter(schema, context_getter=get_context), prefix="/graphql")
    app.include_router(GraphQLRouter(schema, path="/", context_getter=get_context))
    return app
