from fastapi.testclient import TestClient

from mws_query.main import app

client = TestClient(app)

BODY = {
    "host": "mws-eu.amazonservices.com",
    "access_key_id": "key",
    "secret_access_key": "secret",
    "action": "ListOrders",
    "seller_id": "Seller ID",
    "version": "2010-01-01",
    "timestamp": "2013-01-01T00:00:00-02:00",
}


def test_health():
    r = client.get("/health")
    assert r.status_code == 200
    assert r.json() == {"ok": True}


def test_status():
    r = client.get("/status")
    assert r.status_code == 200
    data = r.json()
    assert data["ok"] is True
    assert data["service"] == "mws-query"
    assert "default_version" in data


def test_sign_matches_reference_vectors():
    r = client.post("/mws/sign", json=BODY)
    assert r.status_code == 200
    data = r.json()
    assert data["signature"] == "7XZO1dSv7BHElkee33Rt7L5PNFiBET13pg3pOWKeoo0="
    assert data["request_uri"].startswith("https://mws-eu.amazonservices.com/?AWSAccessKeyId=key&")
    assert "Signature=7XZO1dSv7BHElkee33Rt7L5PNFiBET13pg3pOWKeoo0%3D" in data["request_uri"]
    assert data["body"] is None
    assert "secret" not in r.text


def test_sign_with_token():
    r = client.post("/mws/sign", json={**BODY, "mws_auth_token": "auth_token"})
    assert r.status_code == 200
    assert r.json()["signature"] == "rulqZzJFN7YyHfW5kMatF4cXNzxZcOAox6lT97PveCo="


def test_sign_post_returns_body():
    r = client.post("/mws/sign", json={**BODY, "verb": "POST", "uri_path": "/Orders/2013-09-01"})
    assert r.status_code == 200
    data = r.json()
    assert data["body"].startswith("AWSAccessKeyId=key&")
    assert "&Signature=" in data["body"]


def test_sign_params_and_lists():
    r = client.post("/mws/sign", json={
        **BODY,
        "params": {"custom_param": "custom", "order_status": {"status_1": "Shipped"}},
        "lists": {"ids": {"label": "Id.id", "values": [1, 2]}},
    })
    assert r.status_code == 200
    query = r.json()["query"]
    assert "CustomParam=custom" in query
    assert "OrderStatus.Status1=Shipped" in query
    assert "Id.id.1=1&Id.id.2=2" in query


def test_sign_resolves_region():
    body = {k: v for k, v in BODY.items() if k != "host"}
    r = client.post("/mws/sign", json={**body, "region": "DE"})
    assert r.status_code == 200
    assert r.json()["signature"] == "7XZO1dSv7BHElkee33Rt7L5PNFiBET13pg3pOWKeoo0="


def test_sign_reports_field_on_bad_input():
    r = client.post("/mws/sign", json={**BODY, "uri_path": "Orders"})
    assert r.status_code == 422
    assert r.json()["detail"]["field"] == "uri_path"
    assert r.json()["detail"]["error"] == "invalid_uri_path"


def test_sign_unknown_region():
    body = {k: v for k, v in BODY.items() if k != "host"}
    r = client.post("/mws/sign", json={**body, "region": "XX"})
    assert r.status_code == 422
    assert r.json()["detail"]["field"] == "region"


def test_sign_empty_secret():
    r = client.post("/mws/sign", json={**BODY, "secret_access_key": ""})
    assert r.status_code == 422
    assert r.json()["detail"]["error"] == "missing_credential"


def test_canonical():
    r = client.post("/mws/canonical", json=BODY)
    assert r.status_code == 200
    data = r.json()
    assert data["canonical"] == "GET\nmws-eu.amazonservices.com\n/\n" + data["query"]
    assert "SellerId=Seller+ID" in data["query"]


def test_endpoints():
    r = client.get("/mws/endpoints")
    assert r.status_code == 200
    assert r.json()["endpoints"]["UK"] == "mws-eu.amazonservices.com"


def test_sign_accepts_lowercase_verb():
    r = client.post("/mws/sign", json={**BODY, "verb": "post"})
    assert r.status_code == 200
    assert r.json()["body"] is not None
