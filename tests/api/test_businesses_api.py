"""Business API tests: search, ranked listing, menu tags and rating."""

from unittest.mock import AsyncMock

from httpx import ASGITransport, AsyncClient
from sqlalchemy.exc import OperationalError

from bizdirectory.api.v1.dependencies import get_search_repo
from bizdirectory.main import app


async def test_search_concrete_scenario(client: AsyncClient, scenario) -> None:
    response = await client.get(
        "/api/v1/businesses/search", params={"q": "tacos", "area": "Coyoacán"}
    )
    assert response.status_code == 200
    data = response.json()
    assert [b["name"] for b in data["content"]] == ["Taquería Don Pepe"]
    assert data["total_elements"] == 1
    assert data["total_pages"] == 1
    assert data["page"] == 0
    assert data["size"] == 20


async def test_search_categories_repeated_or_comma_separated(client: AsyncClient, scenario) -> None:
    repeated = await client.get(
        "/api/v1/businesses/search", params=[("categories", "Tacos"), ("categories", "Mariscos")]
    )
    comma = await client.get("/api/v1/businesses/search?categories=tacos,mariscos")
    assert repeated.status_code == comma.status_code == 200
    assert [b["id"] for b in repeated.json()["content"]] == [3, 1]
    assert repeated.json()["content"] == comma.json()["content"]


async def test_search_card_shape_and_defaults(client: AsyncClient, seeder) -> None:
    await seeder.business(7, None)
    await seeder.commit()
    response = await client.get("/api/v1/businesses/search")
    assert response.status_code == 200
    assert response.json()["content"] == [
        {
            "id": 7,
            "name": "Business #7",
            "avatar_url": None,
            "review_count": 0,
            "average_rating": 0.0,
        }
    ]


async def test_search_out_of_range_paging_is_clamped(client: AsyncClient, scenario) -> None:
    response = await client.get(
        "/api/v1/businesses/search", params={"page": -4, "size": 1000, "sort": "bogus"}
    )
    assert response.status_code == 200
    data = response.json()
    assert data["page"] == 0
    assert data["size"] == 50
    assert data["total_elements"] == 3


async def test_search_sorting(client: AsyncClient, seeder) -> None:
    await seeder.business(1, "Baja", ratings=[2])
    await seeder.business(2, "Alta", ratings=[5, 4])
    await seeder.commit()
    response = await client.get("/api/v1/businesses/search", params={"sort": "rating,desc"})
    assert [b["id"] for b in response.json()["content"]] == [2, 1]
    assert response.json()["content"][0]["average_rating"] == 4.5


async def test_search_invalid_page_type_is_422(client: AsyncClient) -> None:
    response = await client.get("/api/v1/businesses/search", params={"page": "first"})
    assert response.status_code == 422
    body = response.json()
    assert body["error"] == "VALIDATION_ERROR"
    assert body["details"]["errors"][0]["loc"] == ["query", "page"]
    assert "first" not in response.text


async def test_top_in_area(client: AsyncClient, scenario) -> None:
    await scenario.business(4, "Mejor Calificada", address=("04000", "Del Carmen"), ratings=[5])
    await scenario.user(50, "Vecina")
    await scenario.address(50, "04100", "Santa Catarina")
    await scenario.commit()
    response = await client.get("/api/v1/businesses/top", params={"user_id": 50})
    assert response.status_code == 200
    data = response.json()
    assert [b["id"] for b in data["content"]] == [4, 1, 2]
    assert data["total_elements"] == 3


async def test_top_in_area_without_address_is_empty_page(client: AsyncClient, scenario) -> None:
    await scenario.user(51, "Sin Dirección")
    await scenario.commit()
    response = await client.get(
        "/api/v1/businesses/top", params={"user_id": 51, "page": 2, "size": 5}
    )
    assert response.status_code == 200
    assert response.json() == {
        "content": [],
        "page": 0,
        "size": 0,
        "total_elements": 0,
        "total_pages": 0,
    }


async def test_top_in_area_requires_user_id(client: AsyncClient) -> None:
    response = await client.get("/api/v1/businesses/top")
    assert response.status_code == 422


async def test_menu_categories(client: AsyncClient, scenario) -> None:
    response = await client.get("/api/v1/businesses/2/menu/categories")
    assert response.status_code == 200
    assert [c["category_name"] for c in response.json()] == ["Bebidas", "Postres"]


async def test_menu_categories_unknown_business_is_404(client: AsyncClient, scenario) -> None:
    response = await client.get("/api/v1/businesses/404/menu/categories")
    assert response.status_code == 404
    body = response.json()
    assert body["error"] == "RESOURCE_NOT_FOUND"
    assert body["details"] == {"resource_type": "business", "resource_id": "404"}


async def test_rating(client: AsyncClient, seeder) -> None:
    await seeder.business(1, "Reseñada", ratings=[4, 5])
    await seeder.commit()
    response = await client.get("/api/v1/businesses/1/rating")
    assert response.status_code == 200
    assert response.json() == {
        "business_id": 1,
        "average_rating": 4.5,
        "reviews_count": 2,
        "distribution": {"1": 0, "2": 0, "3": 0, "4": 1, "5": 1},
    }


async def test_search_store_failure_is_500(client: AsyncClient) -> None:
    failing_repo = AsyncMock()
    failing_repo.search_page = AsyncMock(
        side_effect=OperationalError("SELECT", {}, Exception("connection refused"))
    )
    app.dependency_overrides[get_search_repo] = lambda: failing_repo
    try:
        transport = ASGITransport(app=app, raise_app_exceptions=False)
        async with AsyncClient(transport=transport, base_url="http://test") as ac:
            response = await ac.get("/api/v1/businesses/search", params={"q": "tacos"})
    finally:
        app.dependency_overrides.pop(get_search_repo, None)
    assert response.status_code == 500
    assert response.json()["error"] == "INTERNAL_ERROR"


async def test_search_without_database_is_503(unconfigured_client: AsyncClient) -> None:
    response = await unconfigured_client.get("/api/v1/businesses/search")
    assert response.status_code == 503
    assert response.json()["error"] == "SERVICE_UNAVAILABLE"


async def test_request_id_is_echoed(client: AsyncClient, scenario) -> None:
    response = await client.get(
        "/api/v1/businesses/search", headers={"X-Request-ID": "abc-123"}
    )
    assert response.headers["x-request-id"] == "abc-123"
    generated = await client.get(
        "/api/v1/businesses/search", headers={"X-Request-ID": "bad id!"}
    )
    assert generated.headers["x-request-id"] != "bad id!"
    assert len(generated.headers["x-request-id"]) == 32


async def test_search_long_padded_input_degrades_instead_of_422(client: AsyncClient, scenario) -> None:
    response = await client.get(
        "/api/v1/businesses/search",
        params={"q": "tacos" + " " * 300, "area": " " * 150},
    )
    assert response.status_code == 200
    assert [b["id"] for b in response.json()["content"]] == [3, 1]


async def test_search_over_long_fragment_is_truncated_not_rejected(client: AsyncClient, scenario) -> None:
    response = await client.get(
        "/api/v1/businesses/search", params={"q": "z" * 500, "area": "Coyoacán" * 40}
    )
    assert response.status_code == 200
    assert response.json()["total_elements"] == 0
