def test_create_client(client):
    resp = client.post("/api/clients", json={
        "firstName": "Ada",
        "lastName": "Lovelace",
        "email": "ada@example.com",
        "phone": "555-0101",
        "notes": "Referred by partner",
    })
    assert resp.status_code == 201
    data = resp.json()
    assert data["id"]
    assert data["firstName"] == "Ada"
    assert data["notes"] == "Referred by partner"
    assert "password" not in data
    assert "passwordHash" not in data


def test_create_client_missing_required_fields(client):
    resp = client.post("/api/clients", json={"firstName": "Ada"})
    assert resp.status_code == 400
    assert resp.json()["error"] == "lastName and email are required"


def test_create_client_duplicate_email(client, make_client):
    make_client(email="ada@example.com")
    resp = client.post("/api/clients", json={
        "firstName": "Other",
        "lastName": "Person",
        "email": "ada@example.com",
    })
    assert resp.status_code == 409
    assert resp.json() == {"error": "Client with this email already exists"}


def test_list_clients_sorted_by_name(client, make_client):
    make_client(lastName="Zeta", email="z@example.com")
    make_client(lastName="Alpha", email="a@example.com", password="pw")
    resp = client.get("/api/clients")
    assert resp.status_code == 200
    data = resp.json()
    assert [c["lastName"] for c in data] == ["Alpha", "Zeta"]
    assert all("passwordHash" not in c for c in data)


def test_get_client_includes_cases(client, make_client, make_case):
    ada = make_client()
    case = make_case(client_id=ada["id"])
    resp = client.get(f"/api/clients/{ada['id']}")
    assert resp.status_code == 200
    assert [c["id"] for c in resp.json()["cases"]] == [case["id"]]


def test_get_unknown_client(client):
    resp = client.get("/api/clients/does-not-exist")
    assert resp.status_code == 404
    assert resp.json() == {"error": "Client not found"}
