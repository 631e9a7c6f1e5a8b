"""Tests for admin registration, login and the admin-only profile route."""

import pytest

from placement_portal.core.auth import decode_token, generate_token
from placement_portal.core.config import get_settings


def _admin(**kw: object) -> dict:
    body = {
        "name": "Asha Verma",
        "designation": "Training & Placement Officer",
        "email": "asha.verma@chitkara.edu.in",
        "password": "placement2024",
    }
    body.update(kw)
    return body


def _login(client, email: str = "asha.verma@chitkara.edu.in", password: str = "placement2024"):
    return client.post("/api/login/admin", json={"email": email, "password": password})


class TestRegisterAdmin:
    def test_register(self, client, admins) -> None:
        resp = client.post("/api/register/admin", json=_admin())
        assert resp.status_code == 201
        assert resp.json() == {"message": "Admin registered successfully"}

        stored = admins.find_one({"email": "asha.verma@chitkara.edu.in"})
        assert stored["designation"] == "Training & Placement Officer"
        assert stored["role"] == "admin"
        assert stored["password_hash"] != "placement2024"
        assert "password" not in stored

    def test_duplicate_email(self, client, admins) -> None:
        client.post("/api/register/admin", json=_admin())
        resp = client.post("/api/register/admin", json=_admin(name="Someone Else"))
        assert resp.status_code == 400
        assert resp.json() == {"message": "Admin already exists"}
        assert admins.count_documents({}) == 1

    @pytest.mark.parametrize("missing", ["name", "designation", "email", "password"])
    def test_required_fields(self, client, admins, missing) -> None:
        body = _admin()
        del body[missing]
        resp = client.post("/api/register/admin", json=body)
        assert resp.status_code == 400
        assert resp.json()["message"].startswith(missing)
        assert admins.count_documents({}) == 0

    def test_short_password(self, client) -> None:
        resp = client.post("/api/register/admin", json=_admin(password="short"))
        assert resp.status_code == 400

    def test_email_domain_restriction(self, client, admins, monkeypatch) -> None:
        monkeypatch.setattr(get_settings(), "admin_email_domain", "chitkara.edu.in")
        resp = client.post("/api/register/admin", json=_admin(email="asha@gmail.com"))
        assert resp.status_code == 400
        assert resp.json() == {"message": "Admin email must end with @chitkara.edu.in"}
        assert admins.count_documents({}) == 0

        assert client.post("/api/register/admin", json=_admin()).status_code == 201


class TestLoginAdmin:
    def test_login(self, client) -> None:
        client.post("/api/register/admin", json=_admin())
        resp = _login(client)
        assert resp.status_code == 200
        body = resp.json()
        assert body["message"] == "Login successful"
        assert body["admin"]["email"] == "asha.verma@chitkara.edu.in"
        assert body["admin"]["designation"] == "Training & Placement Officer"

        claims = decode_token(body["token"])
        assert claims["id"] == body["admin"]["id"]
        assert claims["role"] == "admin"
        assert claims["email"] == "asha.verma@chitkara.edu.in"

    def test_wrong_password(self, client) -> None:
        client.post("/api/register/admin", json=_admin())
        resp = _login(client, password="not-the-password")
        assert resp.status_code == 400
        assert resp.json() == {"message": "Invalid credentials"}

    def test_account_without_hash(self, client, admins) -> None:
        admins.insert_one({
            "name": "Legacy", "designation": "TPO", "email": "legacy@chitkara.edu.in", "role": "admin",
        })
        resp = _login(client, email="legacy@chitkara.edu.in")
        assert resp.status_code == 400
        assert resp.json() == {"message": "Invalid credentials"}

    def test_unknown_email(self, client) -> None:
        resp = _login(client, email="nobody@chitkara.edu.in")
        assert resp.status_code == 400
        assert resp.json() == {"message": "Invalid credentials"}


class TestAdminMe:
    def test_me(self, client) -> None:
        client.post("/api/register/admin", json=_admin())
        token = _login(client).json()["token"]
        resp = client.get("/api/admin/me", headers={"Authorization": f"Bearer {token}"})
        assert resp.status_code == 200
        body = resp.json()
        assert body["name"] == "Asha Verma"
        assert body["role"] == "admin"
        assert "password_hash" not in body

    def test_login_token_unlocks_company_updates(self, client) -> None:
        client.post("/api/register/admin", json=_admin())
        token = _login(client).json()["token"]
        client.post("/api/addCompany", json={"name": "Acme"})
        resp = client.put(
            "/api/updateCompany/Acme",
            json={"location": "Pune"},
            headers={"Authorization": f"Bearer {token}"},
        )
        assert resp.status_code == 200

    def test_non_admin_role(self, client) -> None:
        token = generate_token({"id": "1", "role": "student"})
        resp = client.get("/api/admin/me", headers={"Authorization": f"Bearer {token}"})
        assert resp.status_code == 403
        assert resp.json() == {"message": "Access denied"}

    def test_admin_no_longer_exists(self, client) -> None:
        token = generate_token({"id": "65a1f0c2e4b0a1b2c3d4e5f6", "role": "admin"})
        resp = client.get("/api/admin/me", headers={"Authorization": f"Bearer {token}"})
        assert resp.status_code == 404
        assert resp.json() == {"message": "Admin not found"}

    def test_malformed_id(self, client) -> None:
        token = generate_token({"id": "not-an-object-id", "role": "admin"})
        resp = client.get("/api/admin/me", headers={"Authorization": f"Bearer {token}"})
        assert resp.status_code == 404

    def test_requires_token(self, client) -> None:
        assert client.get("/api/admin/me").status_code == 401
