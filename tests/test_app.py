from pymongo.errors import AutoReconnect


def test_root_liveness_string(client):
    resp = client.get("/")
    assert resp.status_code == 200
    assert resp.text == "Welcome to HurayraXpress Server!"


def test_health_reports_integrations(client):
    resp = client.get("/health")
    assert resp.status_code == 200
    body = resp.json()
    assert body["status"] == "healthy"
    assert set(body["integrations"]) == {"auth", "payments", "images"}


def test_create_user_is_ungated(client, fake_db):
    resp = client.post("/users", json={"email": "new@example.com", "name": "Nadia", "role": "user"})
    assert resp.status_code == 201
    assert resp.json()["acknowledged"] is True
    assert fake_db["users"].documents[0]["name"] == "Nadia"


def test_create_rider_stores_application(client, auth_headers, fake_db):
    payload = {"name": "Karim", "email": "karim@example.com", "region": "Dhaka", "bike": "Honda CB"}
    resp = client.post("/riders", json=payload, headers=auth_headers)
    assert resp.status_code == 201

    stored = fake_db["riders"].documents[0]
    assert str(stored.pop("_id")) == resp.json()["insertedId"]
    assert stored == payload


def test_unknown_route_uses_message_shape(client):
    resp = client.get("/nowhere")
    assert resp.status_code == 404
    assert resp.json() == {"message": "Not Found"}


def test_user_store_fault_is_json_500(client, fake_db):
    fake_db["users"].failures["insert_one"] = AutoReconnect("store down")

    resp = client.post("/users", json={"email": "new@example.com"})
    assert resp.status_code == 500
    assert resp.json() == {"message": "Failed to create user"}


def test_rider_store_fault_is_json_500(client, auth_headers, fake_db):
    fake_db["riders"].failures["insert_one"] = AutoReconnect("store down")

    resp = client.post("/riders", json={"name": "Karim"}, headers=auth_headers)
    assert resp.status_code == 500
    assert resp.json() == {"message": "Failed to submit rider application"}
