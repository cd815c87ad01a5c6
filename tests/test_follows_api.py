from thai_stock.modules.follows.models import Follow
from thai_stock.modules.stocks.models import Stock
from thai_stock.modules.users.models import User


EMAIL = "follower@example.com"


class TestFollow:
    async def test_follow_creates_user_and_stock(self, client, fetch_all):
        response = await client.post("/follows/", json={"symbol": "cpall", "user_email": EMAIL})

        assert response.status_code == 201
        body = response.json()
        [user] = await fetch_all(User)
        [stock] = await fetch_all(Stock)
        assert stock.symbol == "CPALL"
        assert stock.last_price == 0
        assert (body["user_id"], body["stock_id"]) == (user.id, stock.id)

    async def test_following_twice_is_not_an_error(self, client, fetch_all):
        await client.post("/follows/", json={"symbol": "PTT", "user_email": EMAIL})

        response = await client.post("/follows/", json={"symbol": "PTT", "user_email": EMAIL})

        assert response.status_code == 200
        assert response.json() == {"message": "Already following"}
        assert len(await fetch_all(Follow)) == 1

    async def test_supplied_price_is_stored(self, client, fetch_all):
        await client.post("/follows/", json={"symbol": "PTT", "user_email": EMAIL, "price": 34.25})
        [stock] = await fetch_all(Stock)
        assert stock.last_price == 34.25

        await client.post("/follows/", json={"symbol": "PTT", "user_email": "other@example.com", "price": 35.0})
        [stock] = await fetch_all(Stock)
        assert stock.last_price == 35.0
        assert stock.last_update is not None

    async def test_missing_symbol(self, client, fetch_all):
        response = await client.post("/follows/", json={"user_email": EMAIL})

        assert response.status_code == 422
        assert await fetch_all(User) == []


class TestListFollows:
    async def test_lists_follows_with_live_price_and_active_alert(self, client, price_source):
        price_source.prices = {"PTT": 34.75}
        await client.post("/follows/", json={"symbol": "AOT", "user_email": EMAIL})
        await client.post("/alerts/", json={
            "symbol": "PTT", "target_price": 35, "condition": "GT", "user_email": EMAIL,
        })

        response = await client.get("/follows/", params={"email": EMAIL})

        assert response.status_code == 200
        follows = {f["stock"]["symbol"]: f for f in response.json()}
        assert set(follows) == {"PTT", "AOT"}
        assert follows["PTT"]["live_price"] == 34.75
        assert follows["PTT"]["alert"]["target_price"] == 35
        # unavailable quote shows as zero
        assert follows["AOT"]["live_price"] == 0
        assert follows["AOT"]["alert"] is None

    async def test_unknown_user(self, client):
        response = await client.get("/follows/", params={"email": "nobody@example.com"})

        assert response.status_code == 200
        assert response.json() == []


class TestUnfollow:
    async def test_unfollow(self, client, fetch_all):
        follow = (await client.post("/follows/", json={"symbol": "PTT", "user_email": EMAIL})).json()

        response = await client.delete(f"/follows/{follow['id']}")

        assert response.status_code == 200
        assert response.json() == {"success": True}
        assert await fetch_all(Follow) == []

    async def test_unknown_follow(self, client):
        response = await client.delete("/follows/12345")

        assert response.status_code == 404
