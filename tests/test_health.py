import pytest
from httpx import ASGITransport, AsyncClient

from bluegreen_app.app import create_app
from bluegreen_app.settings import Settings


@pytest.mark.asyncio
async def test_health_endpoint_returns_healthy() -> None:
    app = create_app(Settings(version="blue"))
    transport = ASGITransport(app=app)

    async with AsyncClient(transport=transport, base_url="http://testserver") as client:
        response = await client.get("/health")

    assert response.status_code == 200
    assert response.headers["content-type"] == "application/json"
    assert response.json() == {"status": "healthy", "version": "blue"}


@pytest.mark.asyncio
async def test_health_endpoint_is_stable_across_requests() -> None:
    app = create_app(Settings(version="green"))
    transport = ASGITransport(app=app)

    async with AsyncClient(transport=transport, base_url="http://testserver") as client:
        await client.get("/")
        responses = [await client.get("/health") for _ in range(5)]

    for response in responses:
        assert response.status_code == 200
        assert response.json() == {"status": "healthy", "version": "green"}
