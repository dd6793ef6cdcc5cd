import asyncio
from decimal import Decimal

from app.services.product_service import ProductService

BASE_URL = "/api/v1/categorias"


def create_category(client, nombre="Bebidas", descripcion="Drinks"):
    r = client.post(BASE_URL, json={"nombre": nombre, "descripcion": descripcion})
    assert r.status_code == 201
    return r.json()


def test_category_lifecycle(client):
    r = client.post(BASE_URL, json={"nombre": "Bebidas", "descripcion": "Drinks"})
    assert r.status_code == 201
    created = r.json()
    assert created["id"] is not None
    cid = created["id"]

    r = client.get(f"{BASE_URL}/{cid}")
    assert r.status_code == 200
    assert r.json()["nombre"] == "Bebidas"
    assert r.json()["descripcion"] == "Drinks"

    r = client.put(f"{BASE_URL}/{cid}", json={"nombre": "Bebidas frías"})
    assert r.status_code == 200
    assert r.json()["id"] == cid

    r = client.get(f"{BASE_URL}/{cid}")
    assert r.json()["nombre"] == "Bebidas frías"

    r = client.delete(f"{BASE_URL}/{cid}")
    assert r.status_code == 204
    assert r.content == b""

    r = client.get(f"{BASE_URL}/{cid}")
    assert r.status_code == 404


def test_create_returns_empty_product_list(client):
    created = create_category(client)
    assert created["productos"] == []


def test_create_ignores_client_id(client):
    r = client.post(BASE_URL, json={"id": 999, "nombre": "Lácteos"})
    assert r.status_code == 201
    cid = r.json()["id"]
    assert cid != 999
    assert client.get(f"{BASE_URL}/999").status_code == 404
    assert client.get(f"{BASE_URL}/{cid}").json()["nombre"] == "Lácteos"


def test_get_missing_category(client):
    r = client.get(f"{BASE_URL}/12345")
    assert r.status_code == 404
    assert r.json()["detail"] == "Categoría con ID 12345 no encontrada"


def test_update_missing_category_does_not_create(client):
    r = client.put(f"{BASE_URL}/12345", json={"nombre": "Fantasma"})
    assert r.status_code == 404
    assert r.content == b""

    r = client.get(BASE_URL)
    assert r.json()["totalElements"] == 0


def test_delete_missing_category(client):
    create_category(client)
    r = client.delete(f"{BASE_URL}/12345")
    assert r.status_code == 404
    assert r.content == b""
    assert client.get(BASE_URL).json()["totalElements"] == 1


def test_update_replaces_all_fields(client):
    created = create_category(client, nombre="Panadería", descripcion="Pan del día")
    cid = created["id"]

    r = client.put(f"{BASE_URL}/{cid}", json={"id": cid + 100, "nombre": "Bollería"})
    assert r.status_code == 200
    body = r.json()
    assert body["id"] == cid
    assert body["nombre"] == "Bollería"
    assert body["descripcion"] is None


def test_duplicate_names_allowed(client):
    first = create_category(client, nombre="Bebidas")
    second = create_category(client, nombre="Bebidas")
    assert first["id"] != second["id"]


def test_invalid_body_is_bad_request(client):
    assert client.post(BASE_URL, json={"descripcion": "sin nombre"}).status_code == 400
    assert client.post(BASE_URL, json={"nombre": ["no", "es", "texto"]}).status_code == 400
    r = client.post(BASE_URL, content="not json", headers={"Content-Type": "application/json"})
    assert r.status_code == 400


def test_non_integer_id_is_bad_request(client):
    assert client.get(f"{BASE_URL}/abc").status_code == 400


def test_out_of_range_id_is_bad_request(client):
    too_big = "99999999999999999999"
    assert client.get(f"{BASE_URL}/{too_big}").status_code == 400
    assert client.put(f"{BASE_URL}/{too_big}", json={"nombre": "X"}).status_code == 400
    assert client.delete(f"{BASE_URL}/{too_big}").status_code == 400
    assert client.get(f"{BASE_URL}/{2**31 - 1}").status_code == 404


def test_trailing_slash_route(client):
    r = client.post(f"{BASE_URL}/", json={"nombre": "Congelados"})
    assert r.status_code == 201
    r = client.get(f"{BASE_URL}/")
    assert r.status_code == 200
    assert r.json()["totalElements"] == 1


def test_category_includes_products(client, create_product):
    cid = create_category(client)["id"]
    create_product(
        [cid],
        name="Zumo de naranja",
        price=Decimal("2.10"),
        stock=40,
        image_url="https://example.com/zumo.png",
    )

    r = client.get(f"{BASE_URL}/{cid}")
    assert r.status_code == 200
    productos = r.json()["productos"]
    assert len(productos) == 1
    producto = productos[0]
    assert producto["nombre"] == "Zumo de naranja"
    assert producto["precio"] == 2.1
    assert producto["stock"] == 40
    assert producto["imagenUrl"] == "https://example.com/zumo.png"

    # Обновление категории не трогает связи с продуктами
    r = client.put(f"{BASE_URL}/{cid}", json={"nombre": "Bebidas frías", "productos": []})
    assert r.status_code == 200
    assert len(r.json()["productos"]) == 1


def test_delete_category_keeps_products(client, create_product, session_factory):
    cid = create_category(client)["id"]
    other_id = create_category(client, nombre="Lácteos")["id"]
    pid = create_product([cid, other_id], name="Batido", price=Decimal("1.35"), stock=5)

    assert client.delete(f"{BASE_URL}/{cid}").status_code == 204

    async def load_product():
        async with session_factory() as db:
            return await ProductService.for_session(db).find_by_id(pid)

    product = asyncio.run(load_product())
    assert product is not None
    assert [category.id for category in product.categories] == [other_id]

    r = client.get(f"{BASE_URL}/{other_id}")
    assert [p["id"] for p in r.json()["productos"]] == [pid]


def test_health(client):
    assert client.get("/health").json() == {"status": "ok"}


def test_delete_product_keeps_categories(client, create_product, session_factory):
    cid = create_category(client)["id"]
    pid = create_product([cid], name="Agua mineral", price=Decimal("0.65"), stock=120)
    keep_id = create_product([cid], name="Zumo", price=Decimal("2.10"), stock=40)

    async def delete_product():
        async with session_factory() as db:
            service = ProductService.for_session(db)
            deleted = await service.delete_by_id(pid)
            return deleted, await service.find_by_id(pid), await service.find_by_category(cid)

    deleted, gone, remaining = asyncio.run(delete_product())
    assert deleted is True
    assert gone is None
    assert [product.id for product in remaining] == [keep_id]

    r = client.get(f"{BASE_URL}/{cid}")
    assert r.status_code == 200
    assert [p["id"] for p in r.json()["productos"]] == [keep_id]
