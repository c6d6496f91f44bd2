from datetime import timedelta

from lexdesk.auth.utils import create_access_token


def test_register_creates_user_without_password(client):
    resp = client.post("/api/auth/register", json={
        "email": "lawyer@example.com",
        "password": "s3cret!",
        "firstName": "Grace",
        "lastName": "Counsel",
        "phone": "555-0100",
    })
    assert resp.status_code == 201
    data = resp.json()
    assert data["id"]
    assert data["role"] == "lawyer"
    assert data["phone"] == "555-0100"
    assert "password" not in data
    assert "passwordHash" not in data


def test_register_assistant_role(client):
    resp = client.post("/api/auth/register", json={
        "email": "assistant@example.com",
        "password": "pw",
        "firstName": "Sam",
        "lastName": "Clerk",
        "role": "assistant",
    })
    assert resp.status_code == 201
    assert resp.json()["role"] == "assistant"


def test_register_duplicate_email_conflicts(client, make_user):
    make_user(email="dup@example.com")
    resp = client.post("/api/auth/register", json={
        "email": "dup@example.com",
        "password": "other",
        "firstName": "Dup",
        "lastName": "Licate",
    })
    assert resp.status_code == 409
    assert "error" in resp.json()


def test_register_missing_fields(client):
    resp = client.post("/api/auth/register", json={"email": "x@example.com", "password": "pw"})
    assert resp.status_code == 400
    error = resp.json()["error"]
    assert "firstName" in error
    assert "lastName" in error


def test_login_staff_user(client, make_user):
    user = make_user(email="grace@example.com", password="hunter2")
    resp = client.post("/api/auth/login", json={"email": "grace@example.com", "password": "hunter2"})
    assert resp.status_code == 200
    data = resp.json()
    assert data["id"] == user["id"]
    assert data["userType"] == "user"
    assert data["role"] == "lawyer"
    assert data["accessToken"]
    assert "password" not in data
    assert "passwordHash" not in data


def test_login_client_with_password(client, make_client):
    portal_client = make_client(email="portal@example.com", password="clientpw")
    resp = client.post("/api/auth/login", json={"email": "portal@example.com", "password": "clientpw"})
    assert resp.status_code == 200
    data = resp.json()
    assert data["id"] == portal_client["id"]
    assert data["userType"] == "client"
    assert data["role"] == "client"


def test_login_with_mixed_case_domain(client, make_user):
    user = make_user(email="Grace@Example.COM", password="pw")
    resp = client.post("/api/auth/login", json={"email": "Grace@Example.COM", "password": "pw"})
    assert resp.status_code == 200
    assert resp.json()["id"] == user["id"]
    assert resp.json()["userType"] == "user"


def test_login_client_with_mixed_case_domain(client, make_client):
    portal_client = make_client(email="Ada@Firm.ORG", password="clientpw")
    resp = client.post("/api/auth/login", json={"email": "Ada@Firm.ORG", "password": "clientpw"})
    assert resp.status_code == 200
    assert resp.json()["id"] == portal_client["id"]
    assert resp.json()["userType"] == "client"


def test_login_client_without_password_is_rejected(client, make_client):
    make_client(email="nopw@example.com")
    resp = client.post("/api/auth/login", json={"email": "nopw@example.com", "password": "anything"})
    assert resp.status_code == 401


def test_login_wrong_password(client, make_user):
    make_user(email="grace@example.com", password="hunter2")
    resp = client.post("/api/auth/login", json={"email": "grace@example.com", "password": "wrong"})
    assert resp.status_code == 401
    assert resp.json() == {"error": "Invalid credentials"}


def test_login_unknown_email(client):
    resp = client.post("/api/auth/login", json={"email": "ghost@example.com", "password": "pw"})
    assert resp.status_code == 401


def test_login_missing_fields(client):
    resp = client.post("/api/auth/login", json={"email": "grace@example.com"})
    assert resp.status_code == 400
    assert "password" in resp.json()["error"]


def test_me_returns_logged_in_account(client, make_user):
    user = make_user(email="grace@example.com", password="hunter2")
    token = client.post(
        "/api/auth/login", json={"email": "grace@example.com", "password": "hunter2"}
    ).json()["accessToken"]

    resp = client.get("/api/auth/me", headers={"Authorization": f"Bearer {token}"})
    assert resp.status_code == 200
    data = resp.json()
    assert data["id"] == user["id"]
    assert data["userType"] == "user"
    assert data["accessToken"] is None


def test_me_for_client_account(client, make_client):
    portal_client = make_client(email="portal@example.com", password="clientpw")
    token = client.post(
        "/api/auth/login", json={"email": "portal@example.com", "password": "clientpw"}
    ).json()["accessToken"]

    resp = client.get("/api/auth/me", headers={"Authorization": f"Bearer {token}"})
    assert resp.status_code == 200
    assert resp.json()["id"] == portal_client["id"]
    assert resp.json()["userType"] == "client"


def test_me_rejects_raw_id_token(client, make_user):
    user = make_user()
    resp = client.get("/api/auth/me", headers={"Authorization": f"Bearer {user['id']}"})
    assert resp.status_code == 401


def test_me_requires_token(client):
    resp = client.get("/api/auth/me")
    assert resp.status_code == 401
    assert resp.json() == {"error": "Not authenticated"}


def test_me_rejects_expired_token(client, make_user):
    user = make_user()
    token = create_access_token({"sub": user["id"], "type": "user"}, expires_delta=timedelta(minutes=-5))
    resp = client.get("/api/auth/me", headers={"Authorization": f"Bearer {token}"})
    assert resp.status_code == 401


def test_me_for_deleted_account(client):
    token = create_access_token({"sub": "00000000-0000-0000-0000-000000000000", "type": "user"})
    resp = client.get("/api/auth/me", headers={"Authorization": f"Bearer {token}"})
    assert resp.status_code == 404
    assert resp.json() == {"error": "Account not found"}


def test_me_for_deleted_client_account(client):
    token = create_access_token({"sub": "00000000-0000-0000-0000-000000000000", "type": "client"})
    resp = client.get("/api/auth/me", headers={"Authorization": f"Bearer {token}"})
    assert resp.status_code == 404
    assert resp.json() == {"error": "Account not found"}


def test_logout(client):
    resp = client.post("/api/auth/logout")
    assert resp.status_code == 200
    assert resp.json() == {"message": "Logged out successfully"}
