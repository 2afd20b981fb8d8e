import pytest


def new_debt(**overrides):
    body = {
        "date": "2024-03-01",
        "employee": "Sami",
        "kind": "advance",
        "amount": 500,
    }
    body.update(overrides)
    return body


@pytest.fixture
def create(client, user_headers):
    def _create(headers=None, **overrides):
        response = client.post("/debts", json=new_debt(**overrides), headers=headers or user_headers)
        assert response.status_code == 200, response.text
        return response.json()
    return _create


class TestDebts:

    def test_advance_then_repay_scenario(self, client, user_headers, create):
        advance = create(date="2024-03-01", kind="advance", amount=500)
        repay = create(date="2024-03-05", kind="repay", amount=200)
        assert advance["delta"] == 500.0
        assert repay["delta"] == -200.0

        rows = client.get("/debts", headers=user_headers).json()
        assert [r["id"] for r in rows] == [advance["id"], repay["id"]]
        assert sum(r["delta"] for r in rows) == 300.0

    def test_oldest_first_with_same_day_ties(self, client, user_headers, create):
        late = create(date="2024-05-01")
        early = create(date="2024-01-01")
        early_second = create(date="2024-01-01", kind="repay", amount=100)

        rows = client.get("/debts", headers=user_headers).json()
        assert [r["id"] for r in rows] == [early["id"], early_second["id"], late["id"]]

    def test_delta_sign_not_taken_from_input(self, create):
        debt = create(kind="repay", amount=50, delta=50)
        assert debt["delta"] == -50.0

    @pytest.mark.parametrize("overrides", [
        {"kind": "loan"},
        {"amount": 0},
        {"amount": -10},
        {"employee": "  "},
    ])
    def test_invalid_input(self, client, user_headers, overrides):
        response = client.post("/debts", json=new_debt(**overrides), headers=user_headers)
        assert response.status_code == 400
        assert response.json()["error"] == "INVALID_INPUT"

    def test_update_recomputes_delta(self, client, user_headers, create):
        debt = create(kind="advance", amount=500)
        updated = client.put(f"/debts/{debt['id']}", json={"kind": "repay"},
                             headers=user_headers).json()
        assert updated["amount"] == 500.0
        assert updated["delta"] == -500.0

        updated = client.put(f"/debts/{debt['id']}", json={"amount": 120},
                             headers=user_headers).json()
        assert updated["delta"] == -120.0

    def test_balances_per_employee(self, client, user_headers, create):
        create(employee="Sami", kind="advance", amount=500)
        create(employee="Sami", kind="repay", amount=200)
        create(employee="Lina", kind="advance", amount=75.5)

        balances = client.get("/debts/balances", headers=user_headers).json()
        assert balances == [
            {"employee": "Lina", "balance": 75.5},
            {"employee": "Sami", "balance": 300.0},
        ]

    def test_isolation(self, client, user_headers, other_headers, create):
        debt = create()
        assert client.get("/debts", headers=other_headers).json() == []
        assert client.get(f"/debts/{debt['id']}", headers=other_headers).status_code == 404
        assert client.put(f"/debts/{debt['id']}", json={"amount": 1},
                          headers=other_headers).status_code == 404
        assert client.delete(f"/debts/{debt['id']}", headers=other_headers).json() == {"ok": True}
        assert client.get(f"/debts/{debt['id']}", headers=user_headers).json()["amount"] == 500.0

    def test_delete_is_idempotent(self, client, user_headers, create):
        debt = create()
        assert client.delete(f"/debts/{debt['id']}", headers=user_headers).json() == {"ok": True}
        assert client.delete(f"/debts/{debt['id']}", headers=user_headers).json() == {"ok": True}
        assert client.get("/debts", headers=user_headers).json() == []

    def test_requires_token(self, client):
        assert client.post("/debts", json=new_debt()).status_code == 401

    @pytest.mark.parametrize("raw_amount", ["Infinity", "NaN"])
    def test_non_finite_amount_rejected(self, client, user_headers, raw_amount):
        raw = ('{"date": "2024-03-01", "employee": "Sami", "kind": "advance", '
               f'"amount": {raw_amount}}}')
        response = client.post("/debts", content=raw,
                               headers={**user_headers, "Content-Type": "application/json"})
        assert response.status_code == 400
        assert response.json()["error"] == "INVALID_INPUT"
        assert client.get("/debts", headers=user_headers).json() == []

    def test_running_balance(self, client, user_headers, create):
        create(employee="Sami", date="2024-03-01", kind="advance", amount=500)
        create(employee="Lina", date="2024-03-02", kind="advance", amount=40)
        create(employee="Sami", date="2024-03-05", kind="repay", amount=200)

        rows = client.get("/debts/running", headers=user_headers).json()
        assert [r["balance"] for r in rows] == [500.0, 540.0, 340.0]

        sami = client.get("/debts/running", params={"employee": "Sami"}, headers=user_headers).json()
        assert [(r["delta"], r["balance"]) for r in sami] == [(500.0, 500.0), (-200.0, 300.0)]

    def test_running_balance_is_per_user(self, client, other_headers, create):
        create()
        assert client.get("/debts/running", headers=other_headers).json() == []
