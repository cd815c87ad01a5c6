from thai_stock.modules.alerts.models import Alert
from thai_stock.modules.follows.models import Follow
from thai_stock.modules.stocks.models import Stock
from thai_stock.modules.users.models import User


def alert_payload(**overrides):
    payload = {
        "symbol": "PTT",
        "target_price": 35,
        "condition": "GT",
        "user_email": "new.investor@example.com",
    }
    payload.update(overrides)
    return payload


class TestCreateAlert:
    async def test_creates_user_stock_alert_and_follow(self, client, fetch_all):
        response = await client.post("/alerts/", json=alert_payload())

        assert response.status_code == 201
        body = response.json()
        assert body["target_price"] == 35
        assert body["condition"] == "GT"
        assert body["is_active"] is True
        assert body["triggered_at"] is None

        [user] = await fetch_all(User)
        [stock] = await fetch_all(Stock)
        [alert] = await fetch_all(Alert)
        [follow] = await fetch_all(Follow)
        assert user.email == "new.investor@example.com"
        assert stock.symbol == "PTT"
        assert stock.last_price == 0
        assert (alert.user_id, alert.stock_id) == (user.id, stock.id)
        assert (follow.user_id, follow.stock_id) == (user.id, stock.id)

    async def test_second_alert_does_not_duplicate_follow(self, client, fetch_all):
        await client.post("/alerts/", json=alert_payload())
        response = await client.post("/alerts/", json=alert_payload(symbol="ptt", target_price=30, condition="LT"))

        assert response.status_code == 201
        assert len(await fetch_all(Alert, is_active=True)) == 2
        assert len(await fetch_all(Follow)) == 1
        assert len(await fetch_all(Stock)) == 1
        assert len(await fetch_all(User)) == 1

    async def test_alert_on_already_followed_stock(self, client, fetch_all):
        await client.post("/follows/", json={"symbol": "PTT", "user_email": "new.investor@example.com"})

        response = await client.post("/alerts/", json=alert_payload())

        assert response.status_code == 201
        assert len(await fetch_all(Follow)) == 1

    async def test_missing_fields_are_rejected_before_any_write(self, client, fetch_all):
        payload = alert_payload()
        del payload["target_price"]

        response = await client.post("/alerts/", json=payload)

        assert response.status_code == 422
        assert await fetch_all(User) == []
        assert await fetch_all(Stock) == []

    async def test_invalid_values_are_rejected(self, client, fetch_all):
        for payload in (
            alert_payload(condition="EQ"),
            alert_payload(target_price=0),
            alert_payload(symbol="  "),
            alert_payload(user_email="not-an-email"),
        ):
            response = await client.post("/alerts/", json=payload)
            assert response.status_code == 422, payload

        assert await fetch_all(Alert) == []


class TestListAlerts:
    async def test_lists_user_alerts_with_stock(self, client):
        await client.post("/alerts/", json=alert_payload(symbol="PTT"))
        await client.post("/alerts/", json=alert_payload(symbol="AOT", target_price=60, condition="LT"))
        await client.post("/alerts/", json=alert_payload(user_email="someone.else@example.com"))

        response = await client.get("/alerts/", params={"email": "new.investor@example.com"})

        assert response.status_code == 200
        alerts = response.json()
        assert [a["stock"]["symbol"] for a in alerts] == ["AOT", "PTT"]

    async def test_unknown_user_has_no_alerts(self, client, fetch_all):
        response = await client.get("/alerts/", params={"email": "nobody@example.com"})

        assert response.status_code == 200
        assert response.json() == []
        assert await fetch_all(User) == []

    async def test_email_is_required(self, client):
        response = await client.get("/alerts/")

        assert response.status_code == 422


class TestDeleteAlert:
    async def test_deletes_alert(self, client, fetch_all):
        created = (await client.post("/alerts/", json=alert_payload())).json()

        response = await client.delete(f"/alerts/{created['id']}")

        assert response.status_code == 200
        assert response.json() == {"message": "Alert deleted"}
        assert await fetch_all(Alert) == []
        # the follow created alongside the alert stays
        assert len(await fetch_all(Follow)) == 1

    async def test_unknown_alert(self, client):
        response = await client.delete("/alerts/999")

        assert response.status_code == 404
