"""Integration tests for the /users endpoints."""

from datetime import datetime, timedelta

from freezegun import freeze_time
from storefront.domain import revocations

PASSWORD = "password123"


def _login(client, email="customer@example.com", password=PASSWORD):
    return client.post("/users/login", json={"email": email, "password": password})


def _bearer(token):
    return {"Authorization": f"Bearer {token}"}


class TestRegisterEndpoint:
    def test_register(self, client):
        response = client.post(
            "/users/register",
            json={
                "firstname": "Jane",
                "lastname": "Doe",
                "email": "jane@example.com",
                "password": "secret1",
                "mobilenumber": "+15551234567",
            },
        )
        assert response.status_code == 201
        body = response.json()
        assert body["success"] is True
        assert body["message"] == "User created"
        assert body["statusCode"] == 201
        assert body["responseObject"]["email"] == "jane@example.com"
        assert body["responseObject"]["role"] == "CUSTOMER"
        assert "password" not in body["responseObject"]

    def test_register_reports_utc_timestamps(self, client):
        response = client.post(
            "/users/register",
            json={"firstname": "Jane", "lastname": "Doe", "email": "jane@example.com", "password": "secret1"},
        )
        created_at = datetime.fromisoformat(response.json()["responseObject"]["createdAt"])
        assert created_at.utcoffset() == timedelta(0)

        user_id = response.json()["responseObject"]["id"]
        login = _login(client, email="jane@example.com", password="secret1").json()["responseObject"]
        fetched = client.get(f"/users/{user_id}", headers=_bearer(login["token"])).json()["responseObject"]
        assert datetime.fromisoformat(fetched["createdAt"]) == created_at

    def test_register_duplicate(self, client, customer):
        response = client.post(
            "/users/register",
            json={"firstname": "J", "lastname": "D", "email": "customer@example.com", "password": "secret1"},
        )
        assert response.status_code == 409
        assert response.json()["message"] == "User already exists"

    def test_register_short_password(self, client):
        response = client.post(
            "/users/register",
            json={"firstname": "J", "lastname": "D", "email": "j@example.com", "password": "123"},
        )
        assert response.status_code == 400
        body = response.json()
        assert body["success"] is False
        assert body["message"].startswith("Invalid Input:")

    def test_register_invalid_email(self, client):
        response = client.post(
            "/users/register",
            json={"firstname": "J", "lastname": "D", "email": "not-an-email", "password": "secret1"},
        )
        assert response.status_code == 400


class TestLoginEndpoint:
    def test_login(self, client, customer):
        response = _login(client)
        assert response.status_code == 200
        body = response.json()
        assert body["message"] == "User logged in"
        assert set(body["responseObject"]) >= {
            "id",
            "name",
            "email",
            "role",
            "token",
            "refreshToken",
            "createdAt",
            "updatedAt",
        }

    def test_login_unknown_user(self, client):
        response = _login(client, email="ghost@example.com")
        assert response.status_code == 404
        assert response.json()["message"] == "User not found"

    def test_login_wrong_password(self, client, customer):
        response = _login(client, password="wrong-password")
        assert response.status_code == 401
        assert response.json()["message"] == "Invalid password"

    def test_refresh(self, client, customer):
        refresh_token = _login(client).json()["responseObject"]["refreshToken"]
        response = client.post("/users/refresh", json={"refreshToken": refresh_token})
        assert response.status_code == 200
        token = response.json()["responseObject"]["token"]

        assert client.get("/users/me", headers=_bearer(token)).status_code == 200


class TestAuthentication:
    def test_missing_token(self, client):
        response = client.get("/users/me")
        assert response.status_code == 401
        assert response.json() == {
            "success": False,
            "message": "Token not found",
            "responseObject": None,
            "statusCode": 401,
        }

    def test_malformed_token(self, client):
        response = client.get("/users/me", headers=_bearer("garbage"))
        assert response.status_code == 401
        assert response.json()["message"] == "Invalid token"

    def test_logout_then_reuse_is_blacklisted_until_expiry(self, client, customer):
        with freeze_time("2026-03-01 10:00:00", real_asyncio=True) as frozen:
            token = _login(client).json()["responseObject"]["token"]

            response = client.post("/users/logout", headers=_bearer(token))
            assert response.status_code == 200
            assert response.json()["message"] == "User logged out"

            response = client.get("/users/me", headers=_bearer(token))
            assert response.status_code == 401
            assert response.json()["message"] == "Token is blacklisted"

            frozen.tick(timedelta(minutes=61))

            response = client.get("/users/me", headers=_bearer(token))
            assert response.status_code == 401
            assert response.json()["message"] == "Token has expired"
            assert len(revocations) == 0

    def test_logout_clears_refresh_token(self, client, customer):
        tokens = _login(client).json()["responseObject"]
        client.post("/users/logout", headers=_bearer(tokens["token"]))

        response = client.post("/users/refresh", json={"refreshToken": tokens["refreshToken"]})
        assert response.status_code == 401
        assert response.json()["message"] == "Invalid refresh token"


class TestProfileEndpoints:
    def test_get_me(self, client, customer, auth_headers):
        response = client.get("/users/me", headers=auth_headers(customer))
        assert response.status_code == 200
        assert response.json()["responseObject"]["email"] == "customer@example.com"

    def test_update_me(self, client, customer, auth_headers):
        response = client.patch("/users/me", json={"mobilenumber": "+15559999999"}, headers=auth_headers(customer))
        assert response.status_code == 200
        profile = response.json()["responseObject"]
        assert profile["mobilenumber"] == "+15559999999"
        assert profile["firstname"] == "John"

    def test_list_users_requires_admin(self, client, customer, auth_headers):
        response = client.get("/users", headers=auth_headers(customer))
        assert response.status_code == 403

    def test_admin_lists_users(self, client, customer, admin, auth_headers):
        response = client.get("/users", headers=auth_headers(admin))
        assert response.status_code == 200
        assert response.json()["message"] == "Users found"
        assert len(response.json()["responseObject"]) == 2

    def test_admin_gets_user(self, client, customer, admin, auth_headers):
        response = client.get(f"/users/{customer.id}", headers=auth_headers(admin))
        assert response.status_code == 200
        assert response.json()["message"] == "User found"


class TestAddressEndpoints:
    def test_add_list_and_delete(self, client, make_user, auth_headers):
        user = make_user(email="addr@example.com")
        headers = auth_headers(user)

        response = client.post(
            "/users/me/addresses",
            json={
                "firstname": "Ann",
                "lastname": "Lee",
                "street": "1 Harbour Rd",
                "city": "Portland",
                "state": "OR",
                "zipcode": "97201",
                "country": "US",
                "phone": "+15031234567",
            },
            headers=headers,
        )
        assert response.status_code == 201
        address = response.json()["responseObject"]
        assert address["isDefault"] is True

        listed = client.get("/users/me/addresses", headers=headers).json()["responseObject"]
        assert [a["id"] for a in listed] == [address["id"]]

        response = client.delete(f"/users/me/addresses/{address['id']}", headers=headers)
        assert response.status_code == 200

        response = client.delete(f"/users/me/addresses/{address['id']}", headers=headers)
        assert response.status_code == 404
        assert response.json()["message"] == "Address not found"
