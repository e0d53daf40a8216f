import pytest


async def test_create_dish(make_dish):
    dish = await make_dish(name="Fish filet", price=10.0)

    assert dish["ID"] == 1
    assert dish["Name"] == "Fish filet"
    assert dish["Price"] == 10.0


async def test_created_dish_round_trips(client, make_dish):
    created = await make_dish(name="Ramen", price=12.5)

    response = await client.get(f"/dishes/{created['ID']}")

    assert response.status_code == 200
    assert response.json() == created


async def test_list_dishes(client, make_dish):
    first = await make_dish(name="Ramen")
    second = await make_dish(name="Gyoza")

    response = await client.get("/dishes")

    assert response.status_code == 200
    assert response.json() == [first, second]


async def test_dish_price_must_be_positive(client):
    response = await client.post("/dishes", json={"Name": "Free lunch", "Price": 0})

    assert response.status_code == 422
    assert "Error" in response.json()


async def test_update_dish(client, make_dish):
    dish = await make_dish(name="Ramen", price=12.5)

    response = await client.put(f"/dishes/{dish['ID']}", json={"Name": "Shoyu ramen"})

    assert response.status_code == 204
    updated = (await client.get(f"/dishes/{dish['ID']}")).json()
    assert updated["Name"] == "Shoyu ramen"
    assert updated["Price"] == 12.5


async def test_update_missing_dish(client):
    response = await client.put("/dishes/8", json={"Price": 3.0})

    assert response.status_code == 404
    assert response.json() == {"Error": "Dish with id 8 not found"}


async def test_delete_dish(client, make_dish):
    dish = await make_dish()

    response = await client.delete(f"/dishes/{dish['ID']}")

    assert response.status_code == 204
    assert (await client.get(f"/dishes/{dish['ID']}")).status_code == 404


async def test_delete_missing_dish(client):
    response = await client.delete("/dishes/5")

    assert response.status_code == 404
    assert response.json() == {"Error": "Dish with id 5 not found"}


@pytest.mark.parametrize("price", [0.004, 12.345, 123456789.55])
async def test_create_dish_rejects_unstorable_price(client, price):
    response = await client.post("/dishes", json={"Name": "Crumb", "Price": price})

    assert response.status_code == 422
    assert response.json() == {"Error": "can not convert object to JSON"}
    assert (await client.get("/dishes")).json() == []


async def test_dish_price_keeps_its_cents(client, make_dish):
    created = await make_dish(name="Dumplings", price=7.25)

    fetched = (await client.get(f"/dishes/{created['ID']}")).json()

    assert fetched == created
    assert fetched["Price"] == 7.25


@pytest.mark.parametrize("method", ["get", "delete"])
async def test_dish_id_wider_than_a_key(client, method):
    response = await client.request(method.upper(), "/dishes/99999999999999999999")

    assert response.status_code == 404
    assert response.json() == {"Error": "Dish with id 99999999999999999999 not found"}
