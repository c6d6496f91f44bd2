def _billing(client, case_id, **fields):
    payload = {"caseId": case_id, "amountCents": 120000}
    payload.update(fields)
    return client.post("/api/billings", json=payload)


def test_create_billing(client, make_case):
    case = make_case()
    resp = _billing(client, case["id"], taxCents=20000, description="Retainer")
    assert resp.status_code == 201
    data = resp.json()
    assert data["id"]
    assert data["invoiceNumber"].startswith("INV-")
    assert data["totalCents"] == 140000
    assert data["paidCents"] == 0
    assert data["balanceCents"] == 140000
    assert data["status"] == "draft"


def test_create_billing_missing_fields(client, make_case):
    case = make_case()
    resp = client.post("/api/billings", json={"caseId": case["id"]})
    assert resp.status_code == 400
    assert resp.json()["error"] == "amountCents is required"

    resp = client.post("/api/billings", json={"amountCents": 100})
    assert resp.status_code == 400


def test_create_billing_non_numeric_amount(client, make_case):
    resp = _billing(client, make_case()["id"], amountCents="lots")
    assert resp.status_code == 400


def test_create_billing_unknown_case(client):
    resp = _billing(client, "missing")
    assert resp.status_code == 404
    assert resp.json() == {"error": "Case not found"}


def test_list_billings_by_client(client, make_client, make_case):
    ada = make_client()
    ada_billing = _billing(client, make_case(client_id=ada["id"])["id"]).json()
    _billing(client, make_case()["id"])

    resp = client.get("/api/billings", params={"clientId": ada["id"]})
    assert resp.status_code == 200
    data = resp.json()
    assert [b["id"] for b in data] == [ada_billing["id"]]
    assert data[0]["case"]["clientId"] == ada["id"]


def test_create_payment(client, make_case):
    billing = _billing(client, make_case()["id"]).json()
    resp = client.post("/api/payments", json={
        "billingId": billing["id"],
        "amountCents": 50000,
        "method": "bank_transfer",
        "transactionReference": "TX-1",
    })
    assert resp.status_code == 201
    data = resp.json()
    assert data["id"]
    assert data["status"] == "completed"
    assert data["method"] == "bank_transfer"


def test_create_payment_missing_fields(client):
    resp = client.post("/api/payments", json={"amountCents": 100})
    assert resp.status_code == 400
    assert resp.json()["error"] == "billingId and method are required"


def test_create_payment_invalid_method(client, make_case):
    billing = _billing(client, make_case()["id"]).json()
    resp = client.post("/api/payments", json={
        "billingId": billing["id"], "amountCents": 100, "method": "barter",
    })
    assert resp.status_code == 400


def test_create_payment_unknown_billing(client):
    resp = client.post("/api/payments", json={
        "billingId": "missing", "amountCents": 100, "method": "cash",
    })
    assert resp.status_code == 404
    assert resp.json() == {"error": "Billing not found"}


def test_balance_counts_only_completed_payments(client, make_case):
    billing = _billing(client, make_case()["id"], amountCents=100000).json()
    for amount, status in ((30000, "completed"), (20000, "pending"), (10000, "completed")):
        client.post("/api/payments", json={
            "billingId": billing["id"], "amountCents": amount, "method": "cash", "status": status,
        })

    listed = client.get("/api/billings").json()[0]
    assert listed["paidCents"] == 40000
    assert listed["balanceCents"] == 60000


def test_list_payments_filters(client, make_client, make_case):
    ada = make_client()
    ada_billing = _billing(client, make_case(client_id=ada["id"])["id"]).json()
    other_billing = _billing(client, make_case()["id"]).json()
    for billing in (ada_billing, other_billing):
        client.post("/api/payments", json={
            "billingId": billing["id"], "amountCents": 100, "method": "online",
        })

    by_client = client.get("/api/payments", params={"clientId": ada["id"]}).json()
    assert [p["billingId"] for p in by_client] == [ada_billing["id"]]
    assert by_client[0]["billing"]["invoiceNumber"] == ada_billing["invoiceNumber"]

    by_billing = client.get("/api/payments", params={"billingId": other_billing["id"]}).json()
    assert [p["billingId"] for p in by_billing] == [other_billing["id"]]

    assert len(client.get("/api/payments").json()) == 2
