"""
Wedding Planner Backend — End-to-End Tests
============================================

What:  Drive the full stack (routes → services → repositories → SQLAlchemy)
       against a throwaway SQLite database with foreign keys enforced.
How:   `api_client` from conftest; each test starts from empty tables.
"""

import json
from decimal import Decimal

import pytest

SUBCATEGORIES = json.dumps([
    {"name": "Silver", "price": 800, "shortDescription": "Half day", "file": None},
    {"name": "Gold", "price": 1200, "shortDescription": "Full day", "file": "gold.jpg"},
])


async def _register(client, email, role="client", password="s3cret"):
    response = await client.post(
        "/adduser",
        json={
            "email": email,
            "full_name": email.split("@")[0].title(),
            "contact_number": "0712345678",
            "address": "12 Rose Lane",
            "password": password,
            "role": role,
        },
    )
    assert response.status_code == 201, response.text
    return response.json()


async def _create_service(client, vendor_id, title="Photography"):
    response = await client.post(
        "/addservice",
        json={
            "title": title,
            "description": "Wedding day coverage",
            "userId": vendor_id,
            "subcategories": SUBCATEGORIES,
        },
    )
    assert response.status_code == 201, response.text
    return response.json()["serviceId"]


async def _book_first_subcategory(client, user_id, service_id):
    listing = (await client.get("/services")).json()
    service = next(s for s in listing if s["id"] == service_id)
    sub_id = service["subcategories"][0]["id"]
    response = await client.post(
        "/addbooking",
        json={"service_id": service_id, "user_id": user_id, "sub_id": sub_id},
    )
    assert response.status_code == 201, response.text
    return response.json()["booking"]


class TestUsers:

    @pytest.mark.asyncio
    async def test_register_and_fetch(self, api_client):
        user = await _register(api_client, "anna@example.com")

        assert user["role"] == "client"
        assert user["password"] != "s3cret"
        assert user["password"].startswith("$2b$")

        fetched = await api_client.get(f"/users/{user['id']}")
        assert fetched.status_code == 200
        assert fetched.json()["email"] == "anna@example.com"

    @pytest.mark.asyncio
    async def test_duplicate_email(self, api_client):
        await _register(api_client, "anna@example.com")

        response = await api_client.post(
            "/adduser",
            json={"email": "anna@example.com", "full_name": "Other Anna", "password": "x"},
        )

        assert response.status_code == 409
        assert response.json()["error"] == "Email already registered"

    @pytest.mark.asyncio
    async def test_unknown_user(self, api_client):
        response = await api_client.get("/users/12345")

        assert response.status_code == 404
        assert response.json()["error"] == "User not found"

    @pytest.mark.asyncio
    async def test_login(self, api_client):
        user = await _register(api_client, "anna@example.com", password="correct")

        ok = await api_client.post("/login", json={"email": "anna@example.com", "password": "correct"})
        wrong = await api_client.post("/login", json={"email": "anna@example.com", "password": "nope"})
        unknown = await api_client.post("/login", json={"email": "ghost@example.com", "password": "correct"})

        assert ok.status_code == 200
        assert ok.json()["message"] == "Login successful"
        assert ok.json()["user"]["id"] == user["id"]
        assert wrong.status_code == unknown.status_code == 401
        assert wrong.json()["error"] == unknown.json()["error"] == "Invalid email or password"


class TestCatalog:

    @pytest.mark.asyncio
    async def test_service_with_subcategories(self, api_client):
        vendor = await _register(api_client, "vendor@example.com", role="vendor")
        service_id = await _create_service(api_client, vendor["id"])

        listing = (await api_client.get("/services")).json()
        [service] = listing
        assert service["id"] == service_id
        assert [sub["name"] for sub in service["subcategories"]] == ["Silver", "Gold"]
        assert all(sub["service_id"] == service_id for sub in service["subcategories"])
        assert Decimal(str(service["subcategories"][1]["price"])) == Decimal("1200")

        mine = (await api_client.get(f"/services/{vendor['id']}")).json()
        assert [s["id"] for s in mine] == [service_id]
        assert (await api_client.get("/services/9999")).json() == []

    @pytest.mark.asyncio
    async def test_malformed_subcategories_leave_nothing_behind(self, api_client):
        response = await api_client.post(
            "/addservice",
            json={"title": "Cake", "description": "Tiered", "userId": 1, "subcategories": "not json"},
        )

        assert response.status_code == 400
        assert response.json()["error"] == "Invalid subcategories format"
        assert (await api_client.get("/services")).json() == []

    @pytest.mark.asyncio
    async def test_delete_cascades_to_subcategories_and_bookings(self, api_client):
        vendor = await _register(api_client, "vendor@example.com", role="vendor")
        client = await _register(api_client, "anna@example.com")
        service_id = await _create_service(api_client, vendor["id"])
        booking = await _book_first_subcategory(api_client, client["id"], service_id)
        payment = await api_client.post(
            "/payments",
            json={"booking_id": booking["id"], "deposit": "300.00", "reference_number": "REF-1"},
        )
        assert payment.status_code == 201

        deleted = await api_client.delete(f"/services/{service_id}")
        assert deleted.status_code == 200
        assert deleted.json() == {"message": "Service deleted successfully"}

        assert (await api_client.get("/services")).json() == []
        bookings = await api_client.get(f"/bookings/{client['id']}")
        assert bookings.status_code == 404
        assert (await api_client.delete(f"/services/{service_id}")).status_code == 404


class TestBookings:

    @pytest.mark.asyncio
    async def test_client_view(self, api_client):
        vendor = await _register(api_client, "vendor@example.com", role="vendor")
        client = await _register(api_client, "anna@example.com")
        service_id = await _create_service(api_client, vendor["id"])
        booking = await _book_first_subcategory(api_client, client["id"], service_id)
        assert booking["status"] == "in progress"

        await api_client.post(
            "/payments",
            json={"booking_id": booking["id"], "deposit": 300, "reference_number": "REF-1"},
        )
        await api_client.post(
            "/payments",
            json={"booking_id": booking["id"], "deposit": 500, "reference_number": "REF-2"},
        )

        response = await api_client.get(f"/bookings/{client['id']}")
        assert response.status_code == 200
        [detail] = response.json()
        assert detail["service"]["id"] == service_id
        assert detail["subcategory"]["name"] == "Silver"
        assert detail["payment"]["reference_number"] == "REF-1"

    @pytest.mark.asyncio
    async def test_booking_without_payment(self, api_client):
        vendor = await _register(api_client, "vendor@example.com", role="vendor")
        client = await _register(api_client, "anna@example.com")
        service_id = await _create_service(api_client, vendor["id"])
        await _book_first_subcategory(api_client, client["id"], service_id)

        [detail] = (await api_client.get(f"/bookings/{client['id']}")).json()
        assert detail["payment"] is None

    @pytest.mark.asyncio
    async def test_unknown_references_rejected(self, api_client):
        client = await _register(api_client, "anna@example.com")

        booking = await api_client.post(
            "/addbooking",
            json={"service_id": 999, "user_id": client["id"], "sub_id": 999},
        )
        payment = await api_client.post(
            "/payments",
            json={"booking_id": 999, "deposit": 10, "reference_number": "REF"},
        )

        assert booking.status_code == 400
        assert payment.status_code == 400

    @pytest.mark.asyncio
    async def test_vendor_view(self, api_client):
        vendor = await _register(api_client, "vendor@example.com", role="vendor")
        client = await _register(api_client, "anna@example.com")
        booked = await _create_service(api_client, vendor["id"], title="Photography")
        await _create_service(api_client, vendor["id"], title="Video")
        await _book_first_subcategory(api_client, client["id"], booked)

        response = await api_client.get(f"/vendor_bookings/{vendor['id']}")
        assert response.status_code == 200
        [service] = response.json()
        assert service["id"] == booked
        [booking] = service["bookings"]
        assert booking["subcategory"]["name"] == "Silver"
        assert booking["user"]["email"] == "anna@example.com"

    @pytest.mark.asyncio
    async def test_vendor_view_not_found_is_repeatable(self, api_client):
        vendor = await _register(api_client, "vendor@example.com", role="vendor")

        first = await api_client.get(f"/vendor_bookings/{vendor['id']}")
        second = await api_client.get(f"/vendor_bookings/{vendor['id']}")
        assert first.status_code == second.status_code == 404
        assert first.json()["error"] == second.json()["error"] == "No services found for the given userId"

        await _create_service(api_client, vendor["id"])
        unbooked = await api_client.get(f"/vendor_bookings/{vendor['id']}")
        assert unbooked.status_code == 404
        assert unbooked.json()["error"] == "No bookings found for the services of the given userId"

    @pytest.mark.asyncio
    async def test_status_update(self, api_client):
        vendor = await _register(api_client, "vendor@example.com", role="vendor")
        client = await _register(api_client, "anna@example.com")
        service_id = await _create_service(api_client, vendor["id"])
        booking = await _book_first_subcategory(api_client, client["id"], service_id)

        confirmed = await api_client.patch(f"/bookings/{booking['id']}/status", json={"status": "confirmed"})
        invalid = await api_client.patch(f"/bookings/{booking['id']}/status", json={"status": "lost"})
        missing = await api_client.patch("/bookings/9999/status", json={"status": "completed"})

        assert confirmed.status_code == 200
        assert confirmed.json()["status"] == "confirmed"
        assert invalid.status_code == 400
        assert missing.status_code == 404


class TestAppointments:

    @pytest.mark.asyncio
    async def test_lifecycle(self, api_client):
        vendor = await _register(api_client, "vendor@example.com", role="vendor")
        client = await _register(api_client, "anna@example.com")

        created = await api_client.post(
            "/appointments",
            json={
                "date": "2026-06-20",
                "time": "14:30:00",
                "client_id": client["id"],
                "vendor_id": vendor["id"],
                "additional_info": "Bring the mood board",
            },
        )
        assert created.status_code == 201
        appointment = created.json()
        assert appointment["status"] is None

        for path in ("/appointments", f"/appointments/client/{client['id']}", f"/appointments/vendor/{vendor['id']}"):
            listed = (await api_client.get(path)).json()
            assert [a["id"] for a in listed] == [appointment["id"]]
        assert (await api_client.get(f"/appointments/client/{vendor['id']}")).json() == []

        declined = await api_client.patch(f"/appointments/{appointment['id']}/status", json={"status": False})
        assert declined.status_code == 200
        assert declined.json()["status"] is False
        [listed] = (await api_client.get(f"/appointments/client/{client['id']}")).json()
        assert listed["status"] is False

        accepted = await api_client.patch(f"/appointments/{appointment['id']}/status", json={"status": True})
        assert accepted.status_code == 200
        [listed] = (await api_client.get(f"/appointments/client/{client['id']}")).json()
        assert listed["status"] is True

        no_status = await api_client.patch(f"/appointments/{appointment['id']}/status", json={})
        assert no_status.status_code == 400
        assert no_status.json()["error"] == "Status is required"

        deleted = await api_client.delete(f"/appointments/{appointment['id']}")
        assert deleted.json() == {"message": "Appointment deleted successfully"}
        assert (await api_client.get(f"/appointments/client/{client['id']}")).json() == []
        assert (await api_client.get("/appointments")).json() == []

        again = await api_client.delete(f"/appointments/{appointment['id']}")
        patched = await api_client.patch(f"/appointments/{appointment['id']}/status", json={"status": True})
        assert again.status_code == patched.status_code == 404
        assert again.json()["error"] == "Appointment not found"

    @pytest.mark.asyncio
    async def test_missing_fields(self, api_client):
        response = await api_client.post("/appointments", json={"date": "2026-06-20"})

        assert response.status_code == 400
        assert response.json()["error"] == "date, time, client_id, and vendor_id are required"


class TestWeddingPlans:

    @pytest.mark.asyncio
    async def test_create_and_list(self, api_client):
        client = await _register(api_client, "anna@example.com")

        created = await api_client.post(
            "/wedding_plans",
            json={"user_id": client["id"], "budget": 15000, "venue": True},
        )
        assert created.status_code == 201
        plan = created.json()["plan"]
        assert plan["venue"] is True
        assert plan["catering"] is False

        listed = await api_client.get(f"/wedding_plans/{client['id']}")
        assert [p["id"] for p in listed.json()] == [plan["id"]]

    @pytest.mark.asyncio
    async def test_no_plans(self, api_client):
        response = await api_client.get("/wedding_plans/42")

        assert response.status_code == 404
        assert response.json()["error"] == "No plans found for this user"


class TestHealth:

    @pytest.mark.asyncio
    async def test_healthy(self, api_client):
        response = await api_client.get("/health")

        assert response.json()["status"] == "healthy"
        assert response.json()["database"] == "connected"
