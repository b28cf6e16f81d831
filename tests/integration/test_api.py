"""
HTTP-level tests: sessions, role guard, error shapes and the cart-to-order flow.
"""

from decimal import Decimal

import pytest
from sqlalchemy import select

from storefront.domains.commerce.domain.value_objects import Role
from storefront.models.db import UserStore

API = "/api/v1"


@pytest.mark.integration
class TestAuthFlow:
    @pytest.mark.asyncio
    async def test_register_login_me_logout(self, client):
        response = await client.post(
            f"{API}/auth/register",
            json={"name": "Ana Owner", "email": "ana@example.com", "password": "secret123"},
        )
        assert response.status_code == 201
        assert response.json()["email"] == "ana@example.com"

        response = await client.post(f"{API}/auth/login", json={"email": "ana@example.com", "password": "secret123"})
        assert response.status_code == 200
        assert "storefront_session" in response.cookies

        response = await client.get(f"{API}/auth/me")
        assert response.status_code == 200
        assert response.json()["name"] == "Ana Owner"

        response = await client.post(f"{API}/auth/logout")
        assert response.status_code == 204

        client.cookies.clear()
        response = await client.get(f"{API}/auth/me")
        assert response.status_code == 401
        assert response.json()["code"] == "UNAUTHENTICATED"

    @pytest.mark.asyncio
    async def test_wrong_password(self, client, make_user):
        await make_user(email="ana@example.com", password="secret123")
        response = await client.post(f"{API}/auth/login", json={"email": "ana@example.com", "password": "nope"})
        assert response.status_code == 401

    @pytest.mark.asyncio
    async def test_duplicate_email_conflicts(self, client, make_user):
        await make_user(email="ana@example.com")
        response = await client.post(
            f"{API}/auth/register",
            json={"name": "Ana Again", "email": "ana@example.com", "password": "secret123"},
        )
        assert response.status_code == 409
        assert response.json()["code"] == "CONFLICT"

    @pytest.mark.asyncio
    async def test_validation_errors_list_fields(self, client):
        response = await client.post(
            f"{API}/auth/register",
            json={"name": "Ana", "email": "not-an-email", "password": "123"},
        )
        body = response.json()
        assert response.status_code == 422
        assert body["code"] == "VALIDATION"
        fields = {detail["field"] for detail in body["details"]}
        assert {"body.name", "body.email", "body.password"} <= fields


@pytest.mark.integration
class TestStoreRoleGuard:
    @pytest.mark.asyncio
    async def test_anonymous_caller_is_unauthenticated(self, client, make_user, make_store):
        store = await make_store(await make_user())
        response = await client.get(f"{API}/stores/{store.id}/orders")
        assert response.status_code == 401

    @pytest.mark.asyncio
    async def test_non_member_is_forbidden(self, client, make_user, make_store, auth_headers):
        store = await make_store(await make_user())
        stranger = await make_user(name="Sam Stranger", email="sam@example.com")

        response = await client.get(f"{API}/stores/{store.id}", headers=auth_headers(stranger))

        assert response.status_code == 403
        assert response.json()["code"] == "FORBIDDEN"

    @pytest.mark.asyncio
    async def test_cashier_cannot_manage_catalog_or_members(
        self, client, make_user, make_store, add_member, auth_headers
    ):
        store = await make_store(await make_user())
        cashier = await make_user(name="Carl Cashier", email="carl@example.com")
        await add_member(store, cashier, Role.CASHIER)
        headers = auth_headers(cashier)

        response = await client.post(
            f"{API}/stores/{store.id}/products",
            json={"name": "Tea", "sku": "TEA-1", "price": "3.50", "stock": 5},
            headers=headers,
        )
        assert response.status_code == 403

        response = await client.post(
            f"{API}/stores/{store.id}/members",
            json={"email": "carl@example.com", "role": "ADMIN"},
            headers=headers,
        )
        assert response.status_code == 403

        response = await client.get(f"{API}/stores/{store.id}", headers=headers)
        assert response.status_code == 200

    @pytest.mark.asyncio
    async def test_store_creation_needs_only_a_session(self, client, make_user, auth_headers):
        user = await make_user()
        response = await client.post(f"{API}/stores", json={"name": "New Shop"}, headers=auth_headers(user))
        assert response.status_code == 201

        store_id = response.json()["id"]
        response = await client.patch(f"{API}/stores/{store_id}", json={"name": "Renamed"}, headers=auth_headers(user))
        assert response.status_code == 200
        assert response.json()["name"] == "Renamed"

    @pytest.mark.asyncio
    async def test_non_numeric_store_id_fails_validation(self, client, make_user, auth_headers):
        user = await make_user()
        response = await client.get(f"{API}/stores/not-a-number", headers=auth_headers(user))

        body = response.json()
        assert response.status_code == 422
        assert body["code"] == "VALIDATION"
        assert [detail["field"] for detail in body["details"]] == ["path.store_id"]


@pytest.mark.integration
class TestMembershipApi:
    @pytest.mark.asyncio
    async def test_owner_invites_and_admin_cannot_grant_owner(
        self, client, make_user, make_store, auth_headers
    ):
        owner = await make_user()
        store = await make_store(owner)
        admin = await make_user(name="Adam Admin", email="adam@example.com")
        await make_user(name="Carl Cashier", email="carl@example.com")

        response = await client.post(
            f"{API}/stores/{store.id}/members",
            json={"email": "adam@example.com", "role": "ADMIN"},
            headers=auth_headers(owner),
        )
        assert response.status_code == 201
        assert response.json()["role"] == "ADMIN"

        response = await client.post(
            f"{API}/stores/{store.id}/members",
            json={"email": "adam@example.com", "role": "CASHIER"},
            headers=auth_headers(owner),
        )
        assert response.status_code == 400
        assert response.json()["code"] == "ALREADY_MEMBER"

        response = await client.post(
            f"{API}/stores/{store.id}/members",
            json={"email": "carl@example.com", "role": "OWNER"},
            headers=auth_headers(admin),
        )
        assert response.status_code == 403

        response = await client.post(
            f"{API}/stores/{store.id}/members",
            json={"email": "nobody@example.com", "role": "CASHIER"},
            headers=auth_headers(admin),
        )
        assert response.status_code == 404

    @pytest.mark.asyncio
    async def test_owner_changes_role_then_removes_member(
        self, client, make_user, make_store, add_member, auth_headers
    ):
        owner = await make_user()
        store = await make_store(owner)
        carl = await make_user(name="Carl Cashier", email="carl@example.com")
        membership = await add_member(store, carl, Role.CASHIER)
        base = f"{API}/stores/{store.id}"

        response = await client.patch(
            f"{base}/members/{membership.id}", json={"role": "ADMIN"}, headers=auth_headers(owner)
        )
        assert response.status_code == 200
        assert response.json() == {
            "id": membership.id,
            "store_id": store.id,
            "user_id": carl.id,
            "name": "Carl Cashier",
            "email": "carl@example.com",
            "role": "ADMIN",
        }

        response = await client.post(f"{base}/categories", json={"name": "Tea"}, headers=auth_headers(carl))
        assert response.status_code == 201

        response = await client.delete(f"{base}/members/{membership.id}", headers=auth_headers(owner))
        assert response.status_code == 200
        assert response.json()["role"] == "ADMIN"

        response = await client.get(base, headers=auth_headers(carl))
        assert response.status_code == 403

        response = await client.delete(f"{base}/members/{membership.id}", headers=auth_headers(owner))
        assert response.status_code == 404

    @pytest.mark.asyncio
    async def test_owner_membership_is_protected(
        self, client, session_factory, make_user, make_store, add_member, auth_headers
    ):
        owner = await make_user()
        store = await make_store(owner)
        admin = await make_user(name="Adam Admin", email="adam@example.com")
        await add_member(store, admin, Role.ADMIN)
        async with session_factory() as session:
            result = await session.execute(
                select(UserStore.id).where(UserStore.user_id == owner.id, UserStore.store_id == store.id)
            )
            owner_membership_id = result.scalar_one()
        url = f"{API}/stores/{store.id}/members/{owner_membership_id}"

        response = await client.patch(url, json={"role": "CASHIER"}, headers=auth_headers(owner))
        assert response.status_code == 403

        response = await client.delete(url, headers=auth_headers(admin))
        assert response.status_code == 403

        response = await client.get(f"{API}/stores/{store.id}", headers=auth_headers(owner))
        assert response.status_code == 200


@pytest.mark.integration
class TestCatalogApi:
    @pytest.mark.asyncio
    async def test_category_lifecycle(self, client, make_user, make_store, add_member, auth_headers):
        owner = await make_user()
        store = await make_store(owner)
        cashier = await make_user(name="Carl Cashier", email="carl@example.com")
        await add_member(store, cashier, Role.CASHIER)
        base = f"{API}/stores/{store.id}/categories"
        headers = auth_headers(owner)

        response = await client.post(base, json={"name": "Drinks"}, headers=headers)
        assert response.status_code == 201
        category_id = response.json()["id"]
        await client.post(base, json={"name": "Bakery"}, headers=headers)

        response = await client.get(base, headers=auth_headers(cashier))
        assert response.status_code == 200
        assert [category["name"] for category in response.json()] == ["Bakery", "Drinks"]

        response = await client.patch(f"{base}/{category_id}", json={"name": "Cold Drinks"}, headers=headers)
        assert response.status_code == 200
        assert response.json()["name"] == "Cold Drinks"

        response = await client.delete(f"{base}/{category_id}", headers=headers)
        assert response.status_code == 200

        response = await client.get(base, headers=headers)
        assert [category["name"] for category in response.json()] == ["Bakery"]

        response = await client.patch(f"{base}/{category_id}", json={"name": "Again"}, headers=headers)
        assert response.status_code == 404

    @pytest.mark.asyncio
    async def test_category_of_another_store_is_not_found(self, client, make_user, make_store, auth_headers):
        owner = await make_user()
        store = await make_store(owner)
        other = await make_store(owner, name="Other Shop")
        headers = auth_headers(owner)

        response = await client.post(f"{API}/stores/{other.id}/categories", json={"name": "Drinks"}, headers=headers)
        category_id = response.json()["id"]

        response = await client.delete(f"{API}/stores/{store.id}/categories/{category_id}", headers=headers)
        assert response.status_code == 404
        assert response.json()["code"] == "NOT_FOUND"

    @pytest.mark.asyncio
    async def test_product_update_keeps_skus_unique(
        self, client, make_user, make_store, make_product, auth_headers
    ):
        owner = await make_user()
        store = await make_store(owner)
        await make_product(store, sku="TEA-1", name="Green Tea")
        coffee = await make_product(store, sku="COF-1", name="Coffee Beans")
        base = f"{API}/stores/{store.id}/products"
        headers = auth_headers(owner)

        response = await client.patch(f"{base}/{coffee.id}", json={"sku": "TEA-1"}, headers=headers)
        assert response.status_code == 409
        assert response.json()["code"] == "CONFLICT"

        response = await client.patch(
            f"{base}/{coffee.id}", json={"sku": "COF-1", "price": "12.50"}, headers=headers
        )
        assert response.status_code == 200
        assert Decimal(response.json()["price"]) == Decimal("12.50")
        assert response.json()["name"] == "Coffee Beans"

        response = await client.delete(f"{base}/{coffee.id}", headers=headers)
        assert response.status_code == 200

        response = await client.get(f"{base}/sku/COF-1", headers=headers)
        assert response.status_code == 404


@pytest.mark.integration
class TestCartToOrderFlow:
    @pytest.mark.asyncio
    async def test_add_merge_reject_and_place(self, client, make_user, make_store, auth_headers):
        owner = await make_user(name="Ana Owner")
        store = await make_store(owner)
        headers = auth_headers(owner)
        base = f"{API}/stores/{store.id}"

        response = await client.post(
            f"{base}/products",
            json={"name": "Coffee Beans", "sku": "SKU-1", "price": "9.99", "stock": 10},
            headers=headers,
        )
        assert response.status_code == 201
        product_id = response.json()["id"]

        response = await client.post(f"{base}/carts", json={"product_id": product_id, "quantity": 4}, headers=headers)
        assert response.status_code == 201
        assert response.json()["quantity"] == 4
        assert Decimal(response.json()["line_total"]) == Decimal("39.96")

        response = await client.post(f"{base}/carts", json={"product_id": product_id, "quantity": 7}, headers=headers)
        assert response.status_code == 400
        assert response.json()["code"] == "INSUFFICIENT_STOCK"

        response = await client.get(f"{base}/carts", headers=headers)
        assert [line["quantity"] for line in response.json()] == [4]

        response = await client.post(f"{base}/orders", headers=headers)
        assert response.status_code == 201
        order = response.json()
        assert Decimal(order["total"]) == Decimal("39.96")
        assert order["purchaser_name"] == "Ana Owner"
        assert order["store_name"] == "Corner Shop"

        response = await client.get(f"{base}/products/sku/SKU-1", headers=headers)
        assert response.json()["stock"] == 6

        response = await client.get(f"{base}/carts", headers=headers)
        assert response.json() == []

        response = await client.post(f"{base}/orders", headers=headers)
        assert response.status_code == 400
        assert response.json()["code"] == "EMPTY_CART"

        response = await client.get(f"{base}/orders/{order['id']}", headers=headers)
        assert response.status_code == 200
        assert response.json()["items"][0]["sku"] == "SKU-1"

        response = await client.get(f"{base}/orders", params={"page": 1, "size": 10}, headers=headers)
        assert response.json()["paging"] == {"current_page": 1, "size": 10, "total_page": 1}

    @pytest.mark.asyncio
    async def test_order_of_another_store_is_not_found(
        self, client, make_user, make_store, make_product, auth_headers
    ):
        owner = await make_user()
        store = await make_store(owner)
        other = await make_store(owner, name="Other Shop")
        product = await make_product(store)
        headers = auth_headers(owner)

        await client.post(
            f"{API}/stores/{store.id}/carts", json={"product_id": product.id, "quantity": 1}, headers=headers
        )
        order = (await client.post(f"{API}/stores/{store.id}/orders", headers=headers)).json()

        response = await client.get(f"{API}/stores/{other.id}/orders/{order['id']}", headers=headers)
        assert response.status_code == 404
        assert response.json()["code"] == "NOT_FOUND"

    @pytest.mark.asyncio
    async def test_product_from_another_store_cannot_be_carted(
        self, client, make_user, make_store, make_product, auth_headers
    ):
        owner = await make_user()
        store = await make_store(owner)
        other = await make_store(owner, name="Other Shop")
        foreign = await make_product(other)

        response = await client.post(
            f"{API}/stores/{store.id}/carts",
            json={"product_id": foreign.id, "quantity": 1},
            headers=auth_headers(owner),
        )
        assert response.status_code == 404

    @pytest.mark.asyncio
    async def test_update_and_remove_cart_line(
        self, client, make_user, make_store, make_product, auth_headers
    ):
        owner = await make_user()
        store = await make_store(owner)
        product = await make_product(store, stock=10)
        headers = auth_headers(owner)
        base = f"{API}/stores/{store.id}/carts"

        response = await client.post(base, json={"product_id": product.id, "quantity": 2}, headers=headers)
        line_id = response.json()["id"]

        response = await client.patch(f"{base}/{line_id}", json={"quantity": 3}, headers=headers)
        assert response.status_code == 200
        assert response.json()["quantity"] == 3
        assert Decimal(response.json()["line_total"]) == Decimal("29.97")

        response = await client.patch(f"{base}/{line_id}", json={"quantity": 11}, headers=headers)
        assert response.status_code == 400
        assert response.json()["code"] == "INSUFFICIENT_STOCK"

        response = await client.delete(f"{base}/{line_id}", headers=headers)
        assert response.status_code == 200
        assert response.json()["quantity"] == 3

        response = await client.get(base, headers=headers)
        assert response.json() == []

        response = await client.delete(f"{base}/{line_id}", headers=headers)
        assert response.status_code == 404
