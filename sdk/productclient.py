# sdk/productclient.py
import requests
import httpx
from typing import Any, Dict, List, Optional

PRODUCT_FIELDS = "id name description price tax"


class GraphQLError(Exception):
    def __init__(self, errors: List[Dict[str, Any]]):
        super().__init__("; ".join(e.get("message", str(e)) for e in errors))
        self.errors = errors


class ProductClient:
    def __init__(
        self,
        base_url: str = "http://localhost:3000",
        graphql_url: str = "http://localhost:4000/graphql",
        timeout: int = 10,
    ):
        self.base_url = base_url.rstrip("/")
        self.graphql_url = graphql_url
        self.session = requests.Session()
        self.timeout = timeout

    def reset(self):
        r = self.session.post(f"{self.base_url}/reset", timeout=self.timeout)
        r.raise_for_status()
        return r.json()

    # -----------------------
    # REST
    # -----------------------
    def list_products(self) -> List[Dict[str, Any]]:
        r = self.session.get(f"{self.base_url}/products", timeout=self.timeout)
        r.raise_for_status()
        return r.json()

    def get_product(self, product_id: int) -> Optional[Dict[str, Any]]:
        r = self.session.get(f"{self.base_url}/products/{product_id}", timeout=self.timeout)
        # a miss is an answer, not an error
        if r.status_code == 404:
            return None
        r.raise_for_status()
        return r.json()

    def create_product(self, name: str, price: float, description: Optional[str] = None, tax: Optional[float] = None):
        payload = {"name": name, "price": price, "description": description, "tax": tax}
        r = self.session.post(f"{self.base_url}/products", json=payload, timeout=self.timeout)
        r.raise_for_status()
        return r.json()

    async def create_product_async(self, name: str, price: float, description: Optional[str] = None, tax: Optional[float] = None):
        payload = {"name": name, "price": price, "description": description, "tax": tax}
        async with httpx.AsyncClient(timeout=self.timeout) as client:
            r = await client.post(f"{self.base_url}/products", json=payload)
            r.raise_for_status()
            return r.json()

    # -----------------------
    # GraphQL
    # -----------------------
    def graphql(self, query: str, variables: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        r = self.session.post(self.graphql_url, json={"query": query, "variables": variables or {}}, timeout=self.timeout)
        body = r.json() if r.headers.get("content-type", "").startswith("application/json") else {}
        # GraphQL errors can arrive with a 200 or a 4xx status
        if body.get("errors"):
            raise GraphQLError(body["errors"])
        r.raise_for_status()
        return body["data"]

    def gql_products(self) -> List[Dict[str, Any]]:
        return self.graphql(f"{{ getProducts {{ {PRODUCT_FIELDS} }} }}")["getProducts"]

    def gql_product(self, product_id: int) -> Optional[Dict[str, Any]]:
        query = f"query($id: Int!) {{ getProductById(id: $id) {{ {PRODUCT_FIELDS} }} }}"
        return self.graphql(query, {"id": product_id})["getProductById"]

    def gql_create_product(self, name: str, price: float, description: Optional[str] = None, tax: Optional[float] = None):
        query = (
            "mutation($name: String!, $price: Float!, $description: String, $tax: Float) {"
            " createProduct(name: $name, price: $price, description: $description, tax: $tax)"
            f" {{ {PRODUCT_FIELDS} }} }}"
        )
        variables = {"name": name, "price": price, "description": description, "tax": tax}
        return self.graphql(query, variables)["createProduct"]
