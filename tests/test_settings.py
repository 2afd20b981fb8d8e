import pytest


class TestSettings:

    def test_partial_update_merges(self, client, user_headers):
        response = client.put("/settings", json={"tax_income": 10}, headers=user_headers)
        assert response.status_code == 200
        assert response.json() == {
            "currency": "ر.س",
            "tax_income": 10.0,
            "tax_expense": 15.0,
            "monthly_expense_cap": 50000.0,
        }

    def test_null_keeps_previous_value(self, client, user_headers):
        client.put("/settings", json={"currency": "USD"}, headers=user_headers)
        response = client.put("/settings", json={"currency": None, "tax_expense": 5},
                              headers=user_headers)
        assert response.json()["currency"] == "USD"
        assert response.json()["tax_expense"] == 5.0

    def test_negative_rate_rejected(self, client, user_headers):
        response = client.put("/settings", json={"tax_income": -1}, headers=user_headers)
        assert response.status_code == 400
        assert client.get("/settings", headers=user_headers).json()["tax_income"] == 15.0

    def test_settings_are_per_user(self, client, user_headers, other_headers):
        client.put("/settings", json={"tax_income": 0}, headers=user_headers)
        assert client.get("/settings", headers=other_headers).json()["tax_income"] == 15.0

    @pytest.mark.parametrize("raw", [
        '{"tax_income": Infinity}',
        '{"tax_expense": NaN}',
        '{"monthly_expense_cap": -Infinity}',
    ])
    def test_non_finite_values_rejected(self, client, user_headers, raw):
        response = client.put("/settings", content=raw,
                              headers={**user_headers, "Content-Type": "application/json"})
        assert response.status_code == 400
        assert response.json()["error"] == "INVALID_INPUT"

        stored = client.get("/settings", headers=user_headers).json()
        assert stored["tax_income"] == 15.0
        assert stored["tax_expense"] == 15.0
        assert stored["monthly_expense_cap"] == 50000.0
