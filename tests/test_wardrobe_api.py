"""Wardrobe item CRUD endpoints."""


def _create(client, **item):
    return client.post("/wardrobe", json=item)


def test_create_accepts_camel_case_fields(client):
    response = _create(client, name="Navy Chinos", clothType="pants", purchasePrice=49.5,
                       purchaseDate="2024-03-01", gsm=220, condition="good")

    assert response.status_code == 201
    item = response.json()["data"]
    assert item["cloth_type"] == "pants"
    assert item["purchase_price"] == 49.5
    assert item["purchase_date"] == "2024-03-01"
    assert item["gsm"] == 220
    assert item["season"] is None
    assert item["id"] > 0
    assert item["created_at"]


def test_create_requires_name_and_type(client):
    for body in ({"name": "No Type"}, {"cloth_type": "shirt"}, {"name": "", "cloth_type": "shirt"}):
        response = _create(client, **body)
        assert response.status_code == 400
        assert response.json()["error"] == "Name and cloth_type are required"


def test_create_rejects_wrong_types(client):
    response = _create(client, name="Heavy Tee", cloth_type="t-shirt", gsm="heavy")

    assert response.status_code == 422
    assert response.json()["success"] is False
    assert response.json()["error_code"] == "VALIDATION_ERROR"


def test_list_is_newest_first(client):
    first = _create(client, name="First", cloth_type="shirt").json()["data"]
    second = _create(client, name="Second", cloth_type="shirt").json()["data"]

    response = client.get("/wardrobe")

    assert response.status_code == 200
    assert [i["id"] for i in response.json()["data"]] == [second["id"], first["id"]]


def test_list_filters(client):
    _create(client, name="Office Shirt", cloth_type="shirt", occasion="Work Meeting")
    _create(client, name="Party Shirt", cloth_type="shirt", occasion="party")
    _create(client, name="Jeans", cloth_type="jeans", occasion="work")

    by_type = client.get("/wardrobe", params={"cloth_type": "jeans"}).json()["data"]
    by_occasion = client.get("/wardrobe", params={"occasion": "WORK"}).json()["data"]

    assert [i["name"] for i in by_type] == ["Jeans"]
    assert sorted(i["name"] for i in by_occasion) == ["Jeans", "Office Shirt"]


def test_get_missing_item(client):
    response = client.get("/wardrobe/999")

    assert response.status_code == 404
    body = response.json()
    assert body["success"] is False
    assert body["error"] == "Item not found"
    assert body["error_code"] == "NOT_FOUND"


def test_update_is_partial(client):
    item = _create(client, name="Tee", cloth_type="t-shirt", color="white", condition="good").json()["data"]

    response = client.put(f"/wardrobe/{item['id']}", json={"condition": "poor", "cloth_type": "T-Shirt"})

    assert response.status_code == 200
    updated = response.json()["data"]
    assert updated["condition"] == "poor"
    assert updated["cloth_type"] == "T-Shirt"
    assert updated["color"] == "white"
    assert updated["name"] == "Tee"


def test_update_blank_optional_field_clears_it(client):
    item = _create(client, name="Blazer", cloth_type="blazer", occasion="work").json()["data"]

    response = client.put(f"/wardrobe/{item['id']}", json={"occasion": ""})

    assert response.status_code == 200
    assert response.json()["data"]["occasion"] is None
    assert client.get("/wardrobe", params={"occasion": "work"}).json()["data"] == []


def test_update_cannot_blank_required_fields(client):
    item = _create(client, name="Tee", cloth_type="t-shirt").json()["data"]

    response = client.put(f"/wardrobe/{item['id']}", json={"name": ""})

    assert response.status_code == 400
    assert client.get(f"/wardrobe/{item['id']}").json()["data"]["name"] == "Tee"


def test_update_missing_item(client):
    assert client.put("/wardrobe/42", json={"name": "x"}).status_code == 404


def test_delete(client):
    item = _create(client, name="Tee", cloth_type="t-shirt").json()["data"]

    response = client.delete(f"/wardrobe/{item['id']}")

    assert response.status_code == 200
    assert response.json() == {"success": True, "message": "Item deleted successfully"}
    assert client.get(f"/wardrobe/{item['id']}").status_code == 404
    assert client.delete(f"/wardrobe/{item['id']}").status_code == 404
