"""HTTP tests for the recommendation API."""

import pytest
from httpx import AsyncClient

from app.models.fashion import PinterestBoard


def _board_json(board: PinterestBoard) -> dict:
    return board.model_dump(mode="json", by_alias=True)


@pytest.mark.asyncio
async def test_root_and_health(client: AsyncClient):
    resp = await client.get("/")
    assert resp.status_code == 200
    assert "running" in resp.json()["message"]

    resp = await client.get("/health")
    assert resp.status_code == 200
    assert resp.json() == {"status": "ok", "catalog_items": 15}


@pytest.mark.asyncio
async def test_catalog_listing_and_lookup(client: AsyncClient):
    resp = await client.get("/catalog", params={"category": "accessories"})
    assert resp.status_code == 200
    ids = [item["id"] for item in resp.json()["items"]]
    assert ids == ["catalog_008", "catalog_009", "catalog_012", "catalog_013"]

    resp = await client.get("/catalog/catalog_003")
    assert resp.status_code == 200
    assert resp.json()["imageUrl"] == "https://example.com/catalog/white-sneakers.jpg"

    resp = await client.get("/catalog/unknown")
    assert resp.status_code == 404


@pytest.mark.asyncio
async def test_catalog_rejects_bad_filters(client: AsyncClient):
    resp = await client.get("/catalog", params={"min_price": 100, "max_price": 50})
    assert resp.status_code == 400

    resp = await client.get("/catalog", params={"category": "hats"})
    assert resp.status_code == 422


@pytest.mark.asyncio
async def test_profile_endpoint(client: AsyncClient, sample_board):
    resp = await client.post("/profile", json=_board_json(sample_board))

    assert resp.status_code == 200
    data = resp.json()
    assert data["preferred_categories"] == ["tops", "outerwear", "bottoms"]
    assert data["price_range"] == {"min": 35.0, "max": 350.0}


@pytest.mark.asyncio
async def test_profile_of_empty_board(client: AsyncClient):
    resp = await client.post("/profile", json={"id": "empty", "name": "Empty", "pins": []})

    assert resp.status_code == 200
    data = resp.json()
    assert data["dominant_colors"] == []
    assert data["price_range"] is None


@pytest.mark.asyncio
async def test_recommendations_against_loaded_catalog(client: AsyncClient):
    board = (await client.get("/boards/sample")).json()

    resp = await client.post("/recommendations", json={"board": board, "limit": 4})

    assert resp.status_code == 200
    data = resp.json()
    recs = data["recommendations"]
    assert len(recs) == 4
    assert recs[0]["item"]["id"] == "catalog_011"
    scores = [rec["score"] for rec in recs]
    assert scores == sorted(scores, reverse=True)
    assert data["summary"]["total_items"] == 4
    assert data["profile"]["dominant_colors"][0] == "cream"


@pytest.mark.asyncio
async def test_recommendations_with_inline_catalog_and_budget(client: AsyncClient, sample_board):
    catalog = [
        {"id": "a", "title": "Cheap tee", "category": "tops", "colors": ["white"], "price": 20},
        {"id": "b", "title": "Pricey coat", "category": "outerwear", "colors": ["camel"], "price": 900},
    ]

    resp = await client.post(
        "/recommendations",
        json={"board": _board_json(sample_board), "catalog": catalog, "max_budget": 100},
    )

    assert resp.status_code == 200
    recs = resp.json()["recommendations"]
    assert [rec["item"]["id"] for rec in recs] == ["a"]


@pytest.mark.asyncio
async def test_recommendations_limit_bounds(client: AsyncClient, sample_board):
    resp = await client.post("/recommendations", json={"board": _board_json(sample_board), "limit": 1000})
    assert resp.status_code == 400

    resp = await client.post("/recommendations", json={"board": _board_json(sample_board), "limit": 0})
    assert resp.status_code == 422


@pytest.mark.asyncio
async def test_wardrobe_gaps_endpoint(client: AsyncClient, sample_board):
    resp = await client.post("/wardrobe/gaps", json=_board_json(sample_board))

    assert resp.status_code == 200
    data = resp.json()
    assert data["gaps"] == ["dresses", "accessories"]
    assert data["details"][0] == {
        "category": "dresses",
        "current_count": 0,
        "suggested_count": 2,
        "priority": "high",
    }
