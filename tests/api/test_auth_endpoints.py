"""Tests for the authentication endpoints."""

BASE = "/api/v1/auth"


class TestLogin:
    def test_login(self, client, admin_user):
        response = client.post(f"{BASE}/login", json={"username": "admin", "password": "admin123"})

        assert response.status_code == 200
        data = response.json()["data"]
        assert data["tokenType"] == "Bearer"
        assert data["token"]
        assert "expiresAt" in data
        assert data["user"]["role"] == "Admin"
        assert data["user"]["companyName"] == "EcoTech Solutions Ltda"
        assert "passwordHash" not in data["user"]

    def test_wrong_password(self, client, admin_user):
        response = client.post(f"{BASE}/login", json={"username": "admin", "password": "nope"})

        assert response.status_code == 401
        assert response.json()["message"] == "Invalid credentials"

    def test_missing_fields(self, client):
        response = client.post(f"{BASE}/login", json={"username": "admin"})

        assert response.status_code == 400
        assert response.json()["message"] == "Invalid data"


class TestRegister:
    def test_register_then_login(self, client):
        response = client.post(f"{BASE}/register", json={
            "username": "maria",
            "email": "maria@exemplo.com.br",
            "password": "senha123",
            "firstName": "Maria",
            "lastName": "Souza",
        })

        assert response.status_code == 201
        assert response.json()["data"]["role"] == "User"
        login = client.post(f"{BASE}/login", json={"username": "maria", "password": "senha123"})
        assert login.status_code == 200

    def test_duplicate_username(self, client, admin_user):
        response = client.post(f"{BASE}/register", json={
            "username": "admin",
            "email": "other@exemplo.com.br",
            "password": "senha123",
            "firstName": "A",
            "lastName": "B",
        })

        assert response.status_code == 400
        assert response.json()["message"] == "Username or email already exists"

    def test_short_password(self, client):
        response = client.post(f"{BASE}/register", json={
            "username": "joao",
            "email": "joao@exemplo.com.br",
            "password": "123",
            "firstName": "João",
            "lastName": "Silva",
        })

        assert response.status_code == 400


class TestProfile:
    def test_profile(self, client, manager_headers):
        response = client.get(f"{BASE}/profile", headers=manager_headers)

        assert response.status_code == 200
        assert response.json()["data"]["username"] == "manager"
        assert response.json()["data"]["lastLoginAt"] is not None

    def test_profile_requires_token(self, client):
        assert client.get(f"{BASE}/profile").status_code == 401


class TestChangePassword:
    def test_change_password(self, client, user_headers):
        response = client.post(f"{BASE}/change-password", headers=user_headers, json={
            "currentPassword": "analyst123",
            "newPassword": "analyst456",
            "confirmPassword": "analyst456",
        })

        assert response.status_code == 200
        assert client.post(f"{BASE}/login", json={"username": "analyst", "password": "analyst456"}).status_code == 200
        assert client.post(f"{BASE}/login", json={"username": "analyst", "password": "analyst123"}).status_code == 401

    def test_wrong_current_password(self, client, user_headers):
        response = client.post(f"{BASE}/change-password", headers=user_headers, json={
            "currentPassword": "wrong",
            "newPassword": "analyst456",
            "confirmPassword": "analyst456",
        })

        assert response.status_code == 400
        assert response.json()["message"] == "Current password is incorrect"

    def test_confirmation_mismatch(self, client, user_headers):
        response = client.post(f"{BASE}/change-password", headers=user_headers, json={
            "currentPassword": "analyst123",
            "newPassword": "analyst456",
            "confirmPassword": "analyst789",
        })

        assert response.status_code == 400
        assert response.json()["message"] == "Invalid data"
