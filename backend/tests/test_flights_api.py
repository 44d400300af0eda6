from airline_tickets.repositories.errors import StorageError


def test_create_flight_returns_201_with_location(client, flight_payload):
    r = client.post("/flights", json=flight_payload)
    assert r.status_code == 201, r.text
    data = r.json()
    assert data["flight_id"] == 1
    assert data["flight_from"] == "BEOGRAD"
    assert data["num_of_seats"] == 30
    assert r.headers["location"].endswith("/flights/1")

    # The Location header points at a fetchable flight
    r2 = client.get("/flights/1")
    assert r2.status_code == 200
    assert r2.json()["flight_status"] == "pending"


def test_create_flight_with_trailing_slash(client, flight_payload):
    r = client.post("/flights/", json=flight_payload)
    assert r.status_code == 201


def test_create_flight_missing_field_returns_400(client, repository, flight_payload):
    del flight_payload["num_of_seats"]
    r = client.post("/flights", json=flight_payload)
    assert r.status_code == 400
    assert "num_of_seats" in r.json()["errors"]
    assert client.get("/flights").json() == []


def test_create_flight_without_body_returns_400(client):
    r = client.post("/flights")
    assert r.status_code == 400


def test_create_flight_malformed_json_returns_400(client):
    r = client.post(
        "/flights",
        content=b'{"flight_from": "BEOGRAD",',
        headers={"content-type": "application/json"},
    )
    assert r.status_code == 400, r.text
    assert list(r.json()["errors"]) == ["body"]
    assert client.get("/flights").json() == []


def test_create_flight_storage_failure_returns_500(client, repository, flight_payload, monkeypatch):
    async def fail(dto):
        raise StorageError("connection refused")

    monkeypatch.setattr(repository, "create_flight", fail)
    r = client.post("/flights", json=flight_payload)
    assert r.status_code == 500
    assert r.json() == "Failed to save flight"


def test_list_flights_hides_sold_out(client, flight_payload):
    for seats in (10, 0, 5):
        client.post("/flights", json={**flight_payload, "num_of_seats": seats})

    r = client.get("/flights")
    assert r.status_code == 200
    items = r.json()
    assert [f["flight_id"] for f in items] == [1, 3]
    assert all(f["num_of_seats"] > 0 for f in items)
    assert client.get("/flights/").json() == items


def test_list_flights_failure_returns_500(client, repository, monkeypatch):
    async def fail():
        raise RuntimeError("boom")

    monkeypatch.setattr(repository, "get_all_flights", fail)
    r = client.get("/flights")
    assert r.status_code == 500
    assert r.json() == "An unexpected error occurred"


def test_flight_detail_not_found(client):
    r = client.get("/flights/123")
    assert r.status_code == 404
    assert r.json() == {"detail": "Flight not found"}


def test_sold_out_flight_still_fetchable_by_id(client, flight_payload):
    client.post("/flights", json={**flight_payload, "num_of_seats": 0})
    r = client.get("/flights/1")
    assert r.status_code == 200
    assert r.json()["num_of_seats"] == 0


def test_health(client):
    r = client.get("/health/")
    assert r.status_code == 200
    assert r.json() == {"status": "ok"}
