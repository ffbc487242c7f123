from teamdesk.auth.jwt_handler import create_access_token, decode_jwt

from conftest import PASSWORD, register_and_login


def test_register_returns_user_without_password(client):
    resp = client.post(
        "/api/auth/register",
        json={"name": "Alice", "email": "  Alice@Example.com ", "password": PASSWORD, "companyName": "Acme"},
    )

    assert resp.status_code == 201
    user = resp.json()["user"]
    assert user["email"] == "alice@example.com"
    assert user["companyName"] == "Acme"
    assert "password" not in user and "passwordHash" not in user


def test_register_requires_fields_and_unique_email(client):
    resp = client.post("/api/auth/register", json={"name": "Alice", "email": "alice@example.com"})
    assert resp.status_code == 400
    assert resp.json()["message"] == "Name, email and password are required"

    register_and_login(client, "alice@example.com")
    resp = client.post(
        "/api/auth/register", json={"name": "Again", "email": "ALICE@example.com", "password": "x"}
    )
    assert resp.status_code == 400
    assert resp.json()["message"] == "Email already registered"


def test_login_with_wrong_password_is_401(client):
    register_and_login(client, "alice@example.com")

    resp = client.post("/api/auth/login", json={"email": "alice@example.com", "password": "nope"})

    assert resp.status_code == 401
    assert resp.json() == {"message": "Invalid email or password"}


def test_login_token_and_cookie_both_authenticate(client):
    client.post("/api/auth/register", json={"name": "Alice", "email": "alice@example.com", "password": PASSWORD})
    resp = client.post("/api/auth/login", json={"email": "alice@example.com", "password": PASSWORD})
    token = resp.json()["token"]
    assert decode_jwt(token)["sub"] == str(resp.json()["user"]["id"])

    # cookie set by login
    assert client.get("/api/auth/me").json()["user"]["email"] == "alice@example.com"

    client.cookies.clear()
    assert client.get("/api/auth/me").status_code == 401
    me = client.get("/api/auth/me", headers={"Authorization": f"Bearer {token}"})
    assert me.status_code == 200


def test_logout_drops_the_cookie(client):
    client.post("/api/auth/register", json={"name": "Alice", "email": "alice@example.com", "password": PASSWORD})
    client.post("/api/auth/login", json={"email": "alice@example.com", "password": PASSWORD})
    assert client.get("/api/auth/me").status_code == 200

    assert client.post("/api/auth/logout").status_code == 200

    assert client.get("/api/auth/me").status_code == 401


def test_protected_routes_reject_missing_or_bad_tokens(client):
    for path in ("/api/employees", "/api/projects", "/api/tasks", "/api/dashboard", "/api/salary?month=1&year=2024"):
        resp = client.get(path)
        assert resp.status_code == 401, path
        assert resp.json() == {"message": "Unauthorized"}

    resp = client.get("/api/employees", headers={"Authorization": "Bearer not-a-jwt"})
    assert resp.status_code == 401

    resp = client.get("/api/employees", headers={"Authorization": "Token abc"})
    assert resp.status_code == 401


def test_token_for_unknown_user_is_rejected(client):
    token = create_access_token({"sub": "4242"})

    resp = client.get("/api/employees", headers={"Authorization": f"Bearer {token}"})

    assert resp.status_code == 401


def test_expired_token_is_rejected(client, alice):
    user_id = client.get("/api/auth/me", headers=alice).json()["user"]["id"]
    token = create_access_token({"sub": str(user_id)}, expires_minutes=-1)

    resp = client.get("/api/employees", headers={"Authorization": f"Bearer {token}"})

    assert resp.status_code == 401


def test_update_profile_and_notifications(client, alice, bob):
    resp = client.patch(
        "/api/settings/profile",
        json={"name": "Alice Smith", "email": "alice@acme.io", "companyName": "Acme", "jobTitle": "CTO"},
        headers=alice,
    )
    assert resp.status_code == 200
    assert resp.json()["user"]["jobTitle"] == "CTO"

    # bob can't take alice's new address
    resp = client.patch(
        "/api/settings/profile", json={"name": "Bob", "email": "alice@acme.io", "companyName": ""}, headers=bob
    )
    assert resp.status_code == 400
    assert resp.json()["message"] == "Email already in use"

    resp = client.patch(
        "/api/settings/notifications",
        json={"emailNotifications": False, "taskUpdates": True, "projectUpdates": False, "weeklyReports": True},
        headers=alice,
    )
    assert resp.status_code == 200
    assert resp.json()["user"]["notificationSettings"] == {
        "emailNotifications": False,
        "taskUpdates": True,
        "projectUpdates": False,
        "weeklyReports": True,
    }
    assert client.get("/api/auth/me", headers=alice).json()["user"]["notificationSettings"]["weeklyReports"] is True


def test_new_users_get_all_notifications_enabled(client, alice):
    flags = client.get("/api/auth/me", headers=alice).json()["user"]["notificationSettings"]

    assert flags == {"emailNotifications": True, "taskUpdates": True, "projectUpdates": True, "weeklyReports": True}
