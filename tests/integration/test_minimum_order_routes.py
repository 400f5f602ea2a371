"""Testes de integração das rotas de carrinho e de configuração do pedido mínimo."""

from decimal import Decimal

from app.helpers.cart.cart_validate import get_minimum_override


def create_cart(client, **data) -> str:
    response = client.post("/cart/", json=data)
    assert response.status_code == 200
    return response.json()["code"]


def add_item(client, code, price, quantity=1, name="Pizza"):
    response = client.post(
        f"/cart/{code}/items/",
        json={"product_name": name, "quantity": quantity, "unit_price": price, "size": "G"},
    )
    assert response.status_code == 200
    return response.json()


class TestMinimumOrderSettingsRoutes:
    def test_get_returns_default(self, client):
        response = client.get("/settings/minimum-order")

        assert response.status_code == 200
        body = response.json()
        assert Decimal(body["minimum_amount"]) == Decimal("50.00")
        assert Decimal(body["default_amount"]) == Decimal("50.00")

    def test_admin_updates_minimum(self, client, admin_headers):
        response = client.put("/settings/minimum-order", json={"minimum_amount": 80}, headers=admin_headers)

        assert response.status_code == 200
        assert Decimal(response.json()["minimum_amount"]) == Decimal("80.00")
        assert Decimal(client.get("/settings/minimum-order").json()["minimum_amount"]) == Decimal("80.00")

    def test_negative_minimum_is_saved_as_zero(self, client, admin_headers):
        response = client.put("/settings/minimum-order", json={"minimum_amount": -10}, headers=admin_headers)

        assert response.status_code == 200
        assert Decimal(response.json()["minimum_amount"]) == Decimal("0.00")

    def test_non_numeric_minimum_is_saved_as_zero(self, client, admin_headers):
        response = client.put("/settings/minimum-order", json={"minimum_amount": "abc"}, headers=admin_headers)

        assert response.status_code == 200
        assert Decimal(response.json()["minimum_amount"]) == Decimal("0.00")

    def test_update_requires_authentication(self, client):
        response = client.put("/settings/minimum-order", json={"minimum_amount": 10})
        assert response.status_code == 401

    def test_update_requires_admin(self, client, employee_headers):
        response = client.put("/settings/minimum-order", json={"minimum_amount": 10}, headers=employee_headers)
        assert response.status_code == 401
        assert response.json()["detail"] == "Acesso negado"


class TestCartRoutes:
    def test_create_and_read_cart(self, client):
        code = create_cart(client)
        add_item(client, code, "12.50", quantity=2)

        response = client.get(f"/cart/{code}")
        assert response.status_code == 200
        body = response.json()
        assert Decimal(body["total"]) == Decimal("25.00")
        assert body["total_items"] == 2
        assert body["status"] == "processing"

    def test_same_item_increments_quantity(self, client):
        code = create_cart(client)
        add_item(client, code, "10.00")
        item = add_item(client, code, "10.00")

        assert item["quantity"] == 2

    def test_remove_item(self, client):
        code = create_cart(client)
        item = add_item(client, code, "10.00")

        assert client.delete(f"/cart/{code}/items/{item['id']}").status_code == 200
        assert client.delete(f"/cart/{code}/items/{item['id']}").status_code == 404

    def test_clear_items(self, client):
        code = create_cart(client)
        add_item(client, code, "10.00")

        assert client.delete(f"/cart/{code}/items/").status_code == 200
        body = client.get(f"/cart/{code}").json()
        assert body["items"] == []
        assert body["status"] == "cleared"

    def test_unknown_cart_returns_404(self, client):
        assert client.get("/cart/naoexiste").status_code == 404
        assert client.get("/cart/naoexiste/minimum-order").status_code == 404
        assert client.post("/cart/naoexiste/validate").status_code == 404


class TestCartMinimumOrder:
    def test_empty_cart_is_allowed(self, client):
        code = create_cart(client)

        body = client.get(f"/cart/{code}/minimum-order").json()
        assert body["allowed"] is True
        assert body["notices"] == []

    def test_cart_below_minimum_shows_error_and_info(self, client):
        code = create_cart(client)
        add_item(client, code, "30.00")

        body = client.get(f"/cart/{code}/minimum-order").json()
        assert body["allowed"] is False
        assert Decimal(body["shortfall"]) == Decimal("20.00")
        assert Decimal(body["minimum"]) == Decimal("50.00")
        assert [notice["severity"] for notice in body["notices"]] == ["error", "info"]
        assert "20,00" in body["notices"][1]["message"]

    def test_cart_at_minimum_is_allowed(self, client):
        code = create_cart(client)
        add_item(client, code, "50.00")

        body = client.get(f"/cart/{code}/minimum-order").json()
        assert body["allowed"] is True
        assert Decimal(body["shortfall"]) == Decimal("0.00")

    def test_discount_counts_against_minimum(self, client):
        code = create_cart(client, promo_code="DESC10", promo_discount_value="10.00", delivery_fee="8.00")
        add_item(client, code, "55.00")

        body = client.get(f"/cart/{code}/minimum-order").json()
        assert Decimal(body["subtotal"]) == Decimal("45.00")
        assert body["allowed"] is False
        assert Decimal(body["shortfall"]) == Decimal("5.00")

    def test_validate_blocks_checkout_below_minimum(self, client):
        code = create_cart(client)
        add_item(client, code, "30.00")

        response = client.post(f"/cart/{code}/validate")
        assert response.status_code == 422
        body = response.json()
        assert "pedido mínimo" in body["detail"]
        assert body["errors"][0]["severity"] == "error"
        assert "20,00" in body["solution"]

    def test_validate_allows_checkout_above_minimum(self, client):
        code = create_cart(client)
        add_item(client, code, "75.50")

        response = client.post(f"/cart/{code}/validate")
        assert response.status_code == 200
        assert response.json()["allowed"] is True

    def test_zero_minimum_disables_rule(self, client, admin_headers):
        client.put("/settings/minimum-order", json={"minimum_amount": "abc"}, headers=admin_headers)
        code = create_cart(client)
        add_item(client, code, "1.00")

        assert client.post(f"/cart/{code}/validate").status_code == 200

    def test_override_dependency_adjusts_minimum(self, client):
        client.app.dependency_overrides[get_minimum_override] = lambda: (lambda default: Decimal("20.00"))
        code = create_cart(client)
        add_item(client, code, "30.00")

        body = client.get(f"/cart/{code}/minimum-order").json()
        assert body["allowed"] is True
        assert Decimal(body["minimum"]) == Decimal("20.00")
        assert Decimal(client.get("/settings/minimum-order").json()["minimum_amount"]) == Decimal("50.00")

    def test_override_runs_once_per_cart_display(self, client):
        calls = []

        def override(default):
            calls.append(default)
            return Decimal("40.00") if len(calls) == 1 else Decimal("90.00")

        client.app.dependency_overrides[get_minimum_override] = lambda: override
        code = create_cart(client)
        add_item(client, code, "30.00")

        body = client.get(f"/cart/{code}/minimum-order").json()
        assert len(calls) == 1
        assert Decimal(body["minimum"]) == Decimal("40.00")
        assert all("40,00" in notice["message"] for notice in body["notices"])
