"""Tests for POST /api/book and GET /api/bookings."""

import pytest

_BOOKING = {
    "serviceId": "svc-1",
    "serviceName": "Badminton - Single Court",
    "unitId": "u-1",
    "unitName": "Makati Sports Center (Indoor #1)",
    "date": "2026-10-20",
    "time": "18:00",
    "customerName": "Sam Reyes",
    "contact": "0917 555 0101",
    "price": 250,
}


class TestCreateBooking:
    def test_create(self, client):
        resp = client.post("/api/book", json=_BOOKING)
        assert resp.status_code == 200

        data = resp.json()
        assert data["success"] is True
        booking = data["booking"]
        assert booking["id"]
        assert booking["status"] == "confirmed_mock"
        assert booking["customerName"] == "Sam Reyes"
        assert booking["price"] == 250
        assert booking["createdAt"]

    @pytest.mark.parametrize("field", ["serviceId", "unitId", "date", "time", "customerName"])
    def test_missing_required_field(self, client, field):
        body = {k: v for k, v in _BOOKING.items() if k != field}
        resp = client.post("/api/book", json=body)
        assert resp.status_code == 400
        assert resp.json() == {"success": False, "error": "Missing required fields"}

    def test_optional_fields_default(self, client):
        body = {k: _BOOKING[k] for k in ("serviceId", "unitId", "date", "time", "customerName")}
        booking = client.post("/api/book", json=body).json()["booking"]
        assert booking["contact"] == ""
        assert booking["price"] is None
        assert booking["serviceName"] is None

    def test_numeric_provider_ids(self, client):
        resp = client.post("/api/book", json={**_BOOKING, "serviceId": 3, "unitId": 7})
        assert resp.status_code == 200
        assert resp.json()["booking"]["unitId"] == 7

    def test_ids_distinct(self, client):
        ids = {client.post("/api/book", json=_BOOKING).json()["booking"]["id"] for _ in range(5)}
        assert len(ids) == 5


class TestListBookings:
    def test_empty(self, client):
        resp = client.get("/api/bookings")
        assert resp.status_code == 200
        assert resp.json() == {"success": True, "bookings": []}

    def test_created_booking_is_listed(self, client):
        first = client.post("/api/book", json=_BOOKING).json()["booking"]
        second = client.post("/api/book", json={**_BOOKING, "customerName": "Lee"}).json()["booking"]

        bookings = client.get("/api/bookings").json()["bookings"]
        assert [b["id"] for b in bookings] == [first["id"], second["id"]]
        assert bookings[0] == first

    def test_rejected_booking_not_listed(self, client):
        client.post("/api/book", json={"serviceId": "svc-1"})
        assert client.get("/api/bookings").json()["bookings"] == []


class TestUnreadableLedger:
    def test_create_fails_and_keeps_file(self, client, tmp_path):
        ledger_file = tmp_path / "bookings.json"
        ledger_file.write_text('[{"id": "bk-old"', encoding="utf-8")

        resp = client.post("/api/book", json=_BOOKING)

        assert resp.status_code == 500
        assert resp.json()["success"] is False
        assert "refusing to overwrite" in resp.json()["error"]
        assert ledger_file.read_text(encoding="utf-8") == '[{"id": "bk-old"'

    def test_list_reads_as_empty(self, client, tmp_path):
        (tmp_path / "bookings.json").write_text("{not json", encoding="utf-8")
        assert client.get("/api/bookings").json() == {"success": True, "bookings": []}
