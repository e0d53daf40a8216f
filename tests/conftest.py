import pytest
from httpx import ASGITransport, AsyncClient

from app.database import Database
from app.main import app


@pytest.fixture
async def database(tmp_path):
    database = Database(f"sqlite+aiosqlite:///{tmp_path / 'test.db'}")
    await database.create_all()
    yield database
    await database.dispose()


@pytest.fixture
async def client(database):
    app.state.database = database
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        yield client


@pytest.fixture
def make_order(client):
    async def _make_order(table_number: int = 2, final_price: float = 14.0) -> dict:
        response = await client.post(
            "/orders", json={"TableNumber": table_number, "FinalPrice": final_price}
        )
        assert response.status_code == 201, response.text
        return response.json()

    return _make_order


@pytest.fixture
def make_dish(client):
    async def _make_dish(name: str = "Fish filet", price: float = 10.0) -> dict:
        response = await client.post("/dishes", json={"Name": name, "Price": price})
        assert response.status_code == 201, response.text
        return response.json()

    return _make_dish
