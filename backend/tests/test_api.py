from fastapi.testclient import TestClient

from airline_api.main import app
from airline_api.services.seat_allocator import is_valid_seat

client = TestClient(app)


def seed_airports():
    for code, name in (("JFK", "John F. Kennedy International Airport"), ("LAX", "Los Angeles International Airport")):
        r = client.post("/airports", json={"code": code, "name": name, "country": "USA"})
        assert r.status_code == 201, r.text


def book(**overrides):
    payload = {
        "passport_id": "A1",
        "source_airport": "JFK",
        "destination_airport": "LAX",
        "departure_time": "2025-03-10T12:00:00",
        "aircraft_number": "AA101",
    }
    payload.update(overrides)
    return client.post("/tickets", json=payload)


def test_health():
    r = client.get("/health")
    assert r.status_code == 200
    assert r.json() == {"status": "ok"}


def test_create_and_list_airports():
    seed_airports()
    r = client.get("/airports")
    assert r.status_code == 200
    data = r.json()
    assert [a["code"] for a in data] == ["JFK", "LAX"]
    assert data[0]["country"] == "USA"
    assert isinstance(data[0]["id"], int)


def test_create_airport_rejects_bad_code_length():
    r = client.post("/airports", json={"code": "JFKX", "name": "x", "country": "USA"})
    assert r.status_code == 422
    r = client.post("/airports", json={"code": "JF", "name": "x", "country": "USA"})
    assert r.status_code == 422


def test_create_airport_rejects_duplicate_code():
    seed_airports()
    r = client.post("/airports", json={"code": "JFK", "name": "Another", "country": "USA"})
    assert r.status_code == 422
    assert "taken" in r.json()["detail"]
    assert len(client.get("/airports").json()) == 2


def test_create_airport_requires_all_fields():
    r = client.post("/airports", json={"code": "CDG"})
    assert r.status_code == 422


def test_booking_lifecycle():
    seed_airports()
    r = book()
    assert r.status_code == 201, r.text
    ticket = r.json()
    assert ticket["status"] == "booked"
    assert is_valid_seat(ticket["seat"])
    assert ticket["aircraft_number"] == "AA101"
    assert isinstance(ticket["source_airport"], int)

    r = client.patch(f"/tickets/{ticket['id']}/cancel")
    assert r.status_code == 200, r.text
    body = r.json()
    assert body["message"] == "Ticket cancelled"
    assert body["ticket"]["status"] == "cancelled"
    assert body["ticket"]["seat"] == ticket["seat"]

    r = client.patch(f"/tickets/{ticket['id']}/seat")
    assert r.status_code == 400
    assert r.json()["detail"] == "Cannot change seat of a cancelled ticket"

    listed = client.get("/tickets").json()
    assert len(listed) == 1
    assert listed[0]["seat"] == ticket["seat"]
    assert listed[0]["status"] == "cancelled"


def test_cancel_twice_is_not_an_error():
    seed_airports()
    ticket_id = book().json()["id"]
    assert client.patch(f"/tickets/{ticket_id}/cancel").status_code == 200
    r = client.patch(f"/tickets/{ticket_id}/cancel")
    assert r.status_code == 200
    assert r.json()["ticket"]["status"] == "cancelled"


def test_book_same_airports_fails_validation():
    seed_airports()
    r = book(destination_airport="JFK")
    assert r.status_code == 422
    assert client.get("/tickets").json() == []


def test_book_unknown_airport_code():
    seed_airports()
    r = book(destination_airport="ZZZ")
    assert r.status_code == 400
    assert r.json()["detail"] == "Invalid source or destination airport code"
    assert client.get("/tickets").json() == []


def test_book_missing_fields():
    seed_airports()
    r = client.post("/tickets", json={"passport_id": "A1", "source_airport": "JFK"})
    assert r.status_code == 422


def test_book_accepts_camel_case_body():
    seed_airports()
    r = client.post("/tickets", json={
        "passportId": "A1",
        "sourceAirport": "JFK",
        "destinationAirport": "LAX",
        "departureTime": "2025-03-10T12:00:00",
        "aircraftNumber": "AA101",
    })
    assert r.status_code == 201, r.text
    assert r.json()["passport_id"] == "A1"


def test_change_seat_on_booked_ticket():
    seed_airports()
    others = {book(passport_id=f"P{i}").json()["seat"] for i in range(10)}
    ticket = book(passport_id="mover").json()
    r = client.patch(f"/tickets/{ticket['id']}/seat")
    assert r.status_code == 200, r.text
    moved = r.json()
    assert moved["status"] == "booked"
    assert is_valid_seat(moved["seat"])
    assert moved["seat"] not in others


def test_unknown_ticket_returns_404():
    assert client.patch("/tickets/999/cancel").status_code == 404
    r = client.patch("/tickets/999/seat")
    assert r.status_code == 404
    assert r.json()["detail"] == "Ticket not found"


def test_seats_distinct_per_flight_over_http():
    seed_airports()
    seats = [book(passport_id=f"P{i}").json()["seat"] for i in range(25)]
    assert len(set(seats)) == 25


def test_create_airport_rejects_blank_code():
    r = client.post("/airports", json={"code": "   ", "name": "x", "country": "y"})
    assert r.status_code == 422
    assert r.json()["detail"] == "The code field is required."
    assert client.get("/airports").json() == []


def test_full_flight_returns_409():
    seed_airports()
    for i in range(128):
        assert book(passport_id=f"P{i}").status_code == 201
    r = book(passport_id="late")
    assert r.status_code == 409
    assert r.json()["detail"] == "No free seat left on this flight"
    assert len(client.get("/tickets").json()) == 128


def test_openapi_documents_both_validation_error_shapes():
    schema = client.get("/openapi.json").json()
    detail = schema["components"]["schemas"]["ValidationErrorOut"]["properties"]["detail"]
    assert {s.get("type") for s in detail["anyOf"]} == {"string", "array"}
    for path in ("/airports", "/tickets"):
        resp = schema["paths"][path]["post"]["responses"]["422"]
        assert resp["content"]["application/json"]["schema"]["$ref"].endswith("/ValidationErrorOut")
