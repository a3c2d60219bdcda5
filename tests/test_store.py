# tests/test_store.py
from product_api.database import ProductStore, SEED_PRODUCTS
from product_api.models import Product, ProductIn


def test_fresh_store_holds_seed_products():
    store = ProductStore()
    products = store.list()
    assert [p.id for p in products] == [1, 2]
    assert products[0].name == "T-shirt"
    assert products[1].name == "Shoes"
    assert len(store) == 2


def test_insert_assigns_next_id_and_fills_missing_optionals():
    store = ProductStore()
    p = store.insert(ProductIn(name="Hat", price=10.0))
    assert p.id == 3
    assert p.description is None
    assert p.tax is None
    assert store.get(3) == p
    assert store.count() == 3


def test_get_missing_returns_none():
    store = ProductStore()
    assert store.get(999999) is None


def test_list_is_a_copy():
    store = ProductStore()
    out = store.list()
    out.clear()
    assert store.count() == 2


def test_reset_restores_seeds_and_counter():
    store = ProductStore()
    store.insert(ProductIn(name="A", price=1.0))
    store.insert(ProductIn(name="B", price=2.0))
    store.reset()
    assert [p.id for p in store.list()] == [1, 2]
    assert store.insert(ProductIn(name="C", price=3.0)).id == 3


def test_reset_does_not_leak_mutations_into_seed():
    store = ProductStore()
    store.get(1).name = "changed"
    store.reset()
    assert store.get(1).name == SEED_PRODUCTS[0].name


def test_ids_follow_counter_not_length():
    store = ProductStore(seed=[Product(id=10, name="X", price=1.0)])
    assert store.insert(ProductIn(name="Y", price=2.0)).id == 11
    assert store.insert(ProductIn(name="Z", price=3.0)).id == 12


def test_empty_seed_starts_at_one():
    store = ProductStore(seed=[])
    assert store.list() == []
    assert store.insert(ProductIn(name="First", price=1.0)).id == 1
