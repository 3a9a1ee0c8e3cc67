"""Recommendation endpoints: validation, envelopes and store failures."""

import pytest
from sqlalchemy.exc import OperationalError

from wardrobe_app import crud


def _add(client, **item):
    response = client.post("/wardrobe", json=item)
    assert response.status_code == 201
    return response.json()["data"]


@pytest.fixture
def broken_store(monkeypatch):
    calls = []

    def _fail(db):
        calls.append(db)
        raise OperationalError("SELECT * FROM wardrobe_items", {}, Exception("database is down"))

    monkeypatch.setattr(crud, "get_all_items", _fail)
    return calls


def test_outfit_for_stored_items(client):
    jeans = _add(client, name="Blue Jeans", cloth_type="jeans", condition="good",
                 occasion="casual", location="city")
    _add(client, name="Silk Blouse", cloth_type="blouse", occasion="gala")

    response = client.post("/recommendations/outfit", json={"occasion": "casual", "location": "city"})

    assert response.status_code == 200
    body = response.json()
    assert body["success"] is True
    assert body["data"]["bottom"] == jeans["id"]
    assert body["data"]["top"] is None
    assert body["data"]["accessories"] == []
    assert "Bottom: Blue Jeans." in body["data"]["reasoning"]


def test_newest_item_wins_a_tie(client):
    _add(client, name="Old Tee", cloth_type="t-shirt", condition="good")
    newer = _add(client, name="New Tee", cloth_type="t-shirt", condition="good")

    response = client.post("/recommendations/outfit", json={"occasion": "casual", "location": "park"})

    assert response.json()["data"]["top"] == newer["id"]


def test_optional_fields_accept_camel_case(client):
    response = client.post(
        "/recommendations/outfit",
        json={"occasion": "work", "location": "office", "season": "fall",
              "weather": "rainy", "colorPreference": "navy"},
    )

    assert response.status_code == 200
    assert response.json()["data"]["reasoning"] == "Recommended outfit for work at office."


@pytest.mark.parametrize("body", [{"occasion": "casual"}, {"location": "city"}, {"occasion": "", "location": "city"}])
def test_missing_required_field_is_rejected_before_store_access(client, broken_store, body):
    response = client.post("/recommendations/outfit", json=body)

    assert response.status_code == 400
    assert response.json()["success"] is False
    assert response.json()["error"] == "Occasion and location are required"
    assert broken_store == []


def test_outfit_store_failure_is_generic(client, broken_store):
    response = client.post("/recommendations/outfit", json={"occasion": "casual", "location": "city"})

    assert response.status_code == 500
    assert response.json() == {
        "success": False,
        "error": "Failed to generate outfit recommendation",
        "error_code": "RECOMMENDATION_ERROR",
    }


def test_purchases_for_empty_wardrobe(client):
    response = client.get("/recommendations/purchase")

    assert response.status_code == 200
    data = response.json()["data"]
    assert len(data) == 10
    assert [r["priority"] for r in data] == ["high"] * 5 + ["medium"] * 5


def test_purchases_include_replacements(client):
    for i in range(2):
        _add(client, name=f"Worn Shoes {i}", cloth_type="shoes", condition="poor")
    # Fill enough gaps that the low-priority entry survives truncation
    for cloth_type in ("t-shirt", "pants", "jeans", "jacket"):
        for i in range(2):
            _add(client, name=f"{cloth_type} {i}", cloth_type=cloth_type)

    data = client.get("/recommendations/purchase").json()["data"]

    replacements = [r for r in data if r["category"] == "replacement"]
    assert replacements == [{
        "category": "replacement",
        "item_type": "shoes",
        "reason": "Some shoes items are in poor condition and may need replacement.",
        "priority": "low",
        "suggested_details": None,
    }]
    assert data[-1] == replacements[0]


def test_purchase_store_failure_is_generic(client, broken_store):
    response = client.get("/recommendations/purchase")

    assert response.status_code == 500
    assert response.json()["error"] == "Failed to generate purchase recommendations"
