# tests/test_shared_store.py
import asyncio

import httpx
from fastapi.testclient import TestClient

from product_api.database import ProductStore
from product_api.graphql_api import create_graphql_app
from product_api.main import app, graphql_app, store
from product_api.rest import create_rest_app

rest = TestClient(app)
gql = TestClient(graphql_app)


def _gql(query):
    return gql.post("/graphql", json={"query": query}).json()["data"]


def test_fresh_start_scenario():
    store.reset()
    products = _gql("{ getProducts { id name } }")["getProducts"]
    assert products == [{"id": 1, "name": "T-shirt"}, {"id": 2, "name": "Shoes"}]

    cap = _gql('mutation { createProduct(name: "Cap", price: 9.99) { id name description price tax } }')["createProduct"]
    assert cap == {"id": 3, "name": "Cap", "description": None, "price": 9.99, "tax": None}

    assert len(_gql("{ getProducts { id } }")["getProducts"]) == 3


def test_rest_sees_graphql_writes():
    store.reset()
    created = _gql('mutation { createProduct(name: "Cap", price: 9.99) { id } }')["createProduct"]
    r = rest.get(f"/products/{created['id']}")
    assert r.status_code == 200
    assert r.json()["name"] == "Cap"


def test_graphql_sees_rest_writes():
    store.reset()
    created = rest.post("/products", json={"name": "Socks", "price": 4.5}).json()
    found = _gql(f"{{ getProductById(id: {created['id']}) {{ id name price }} }}")["getProductById"]
    assert found == {"id": created["id"], "name": "Socks", "price": 4.5}


def test_rest_reset_is_visible_to_graphql():
    rest.post("/products", json={"name": "Tmp", "price": 1.0})
    rest.post("/reset")
    assert len(_gql("{ getProducts { id } }")["getProducts"]) == 2


def test_apps_built_over_a_separate_store_are_isolated():
    other = ProductStore()
    other_rest = TestClient(create_rest_app(other))
    other_gql = TestClient(create_graphql_app(other))
    store.reset()

    other_rest.post("/products", json={"name": "Elsewhere", "price": 2.0})
    assert other.count() == 3
    assert store.count() == 2
    body = other_gql.post("/graphql", json={"query": "{ getProducts { name } }"}).json()
    assert body["data"]["getProducts"][-1]["name"] == "Elsewhere"


async def _create_task(i):
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as ac:
        r = await ac.post("/products", json={"name": f"P{i}", "price": float(i)})
        return r


def test_concurrent_creates_get_distinct_ids():
    store.reset()

    async def run_all():
        return await asyncio.gather(*(_create_task(i) for i in range(10)))

    results = asyncio.run(run_all())
    assert all(r.status_code == 201 for r in results)
    ids = [r.json()["id"] for r in results]
    assert len(set(ids)) == 10
    assert sorted(ids) == list(range(3, 13))
    assert store.count() == 12
