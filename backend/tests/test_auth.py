# backend/tests/test_auth.py
from datetime import timedelta

from utils.tokenJWT import create_access_token


def _login(client, username="admin", password="admin"):
    return client.post("/api/auth/login", json={"username": username, "password": password})


def test_admin_login(client):
    res = _login(client)
    assert res.status_code == 200, res.text
    body = res.json()
    assert body["tokenType"] == "bearer"
    assert body["accessToken"]
    assert body["user"]["username"] == "admin"
    assert body["user"]["roleName"] == "Admin"
    assert body["user"]["permissions"] == ["all"]
    assert "passwordHash" not in body["user"]


def test_wrong_password(client):
    assert _login(client, password="nope").status_code == 401
    assert _login(client, username="ghost").status_code == 401


def test_failed_login_is_logged(client):
    _login(client, password="nope")
    logs = client.get("/api/logs", params={"action": "LOGIN", "status": "FAIL"}).json()
    assert logs["total"] == 1
    assert logs["items"][0]["meta"]["username"] == "admin"


def test_inactive_user_is_forbidden(client):
    user = client.post("/api/users", json={"username": "eski", "password": "pw", "roleId": "8",
                                           "fullName": "Eski Sevkiyat", "isActive": False}).json()
    assert user["isActive"] is False
    assert _login(client, "eski", "pw").status_code == 403


def test_me_returns_session_user(client):
    token = _login(client).json()["accessToken"]
    res = client.get("/api/auth/me", headers={"Authorization": f"Bearer {token}"})
    assert res.status_code == 200
    assert res.json()["id"] == "admin-user-id"
    assert res.json()["permissions"] == ["all"]


def test_me_rejects_bad_tokens(client):
    assert client.get("/api/auth/me", headers={"Authorization": "Bearer garbage"}).status_code == 401

    expired = create_access_token({"sub": "admin-user-id"}, expires_delta=timedelta(minutes=-5))
    assert client.get("/api/auth/me", headers={"Authorization": f"Bearer {expired}"}).status_code == 401

    unknown = create_access_token({"sub": "nobody"})
    assert client.get("/api/auth/me", headers={"Authorization": f"Bearer {unknown}"}).status_code == 401


def test_changed_password_is_used(client):
    client.patch("/api/users/admin-user-id", json={"password": "yeni-sifre"})
    assert _login(client).status_code == 401
    assert _login(client, password="yeni-sifre").status_code == 200
