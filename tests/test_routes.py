"""
Wedding Planner Backend — HTTP Layer Tests
============================================

What:  Status codes and error bodies produced by the route handlers and the
       global exception handlers.
How:   The service singletons are patched inside the route modules; the
       session dependency is the mock session from conftest.

Every error body has the shape {"error", "kind", "request_id"}.
"""

import pytest
from unittest.mock import AsyncMock, patch

from sqlalchemy.exc import OperationalError

from wedding_planner.exceptions import AuthenticationError, NotFoundError, ValidationError
from wedding_planner.schemas.common import MessageResponse


class TestErrorBodies:

    @pytest.mark.asyncio
    async def test_non_numeric_path_id(self, test_client):
        response = await test_client.get("/users/abc")

        assert response.status_code == 400
        body = response.json()
        assert body["error"] == "Invalid user_id"
        assert body["kind"] == "validation_error"

    @pytest.mark.asyncio
    async def test_malformed_json_body(self, test_client):
        response = await test_client.post(
            "/adduser",
            content=b"{not json",
            headers={"Content-Type": "application/json"},
        )

        assert response.status_code == 400
        assert response.json()["kind"] == "validation_error"

    @pytest.mark.asyncio
    async def test_wrong_field_type(self, test_client):
        response = await test_client.post("/addbooking", json={"service_id": "ten", "user_id": 1, "sub_id": 2})

        assert response.status_code == 400
        assert response.json()["error"] == "Invalid service_id"

    @pytest.mark.asyncio
    async def test_application_validation_error(self, test_client):
        with patch("wedding_planner.routes.users.user_service") as service:
            service.register = AsyncMock(side_effect=ValidationError("Missing required fields"))
            response = await test_client.post("/adduser", json={"email": "a@example.com"})

        assert response.status_code == 400
        assert response.json()["error"] == "Missing required fields"

    @pytest.mark.asyncio
    async def test_not_found_carries_request_id(self, test_client):
        with patch("wedding_planner.routes.users.user_service") as service:
            service.get_user = AsyncMock(side_effect=NotFoundError(resource="user", resource_id=5))
            response = await test_client.get("/users/5", headers={"X-Request-ID": "abc12345"})

        assert response.status_code == 404
        assert response.headers["X-Request-ID"] == "abc12345"
        assert response.json() == {"error": "User not found", "kind": "not_found", "request_id": "abc12345"}

    @pytest.mark.asyncio
    async def test_failed_login(self, test_client):
        with patch("wedding_planner.routes.users.user_service") as service:
            service.login = AsyncMock(side_effect=AuthenticationError())
            response = await test_client.post("/login", json={"email": "a@example.com", "password": "x"})

        assert response.status_code == 401
        assert response.json()["error"] == "Invalid email or password"
        assert response.json()["kind"] == "authentication_error"

    @pytest.mark.asyncio
    async def test_database_failure_is_generic_500(self, test_client):
        failure = OperationalError("SELECT ...", {}, Exception("connection refused"))
        with patch("wedding_planner.routes.services.catalog_service") as service:
            service.list_services = AsyncMock(side_effect=failure)
            response = await test_client.get("/services")

        assert response.status_code == 500
        body = response.json()
        assert body["error"] == "Internal server error"
        assert body["kind"] == "database_error"
        assert "connection refused" not in response.text

    @pytest.mark.asyncio
    async def test_unexpected_error_is_generic_500(self, test_client):
        with patch("wedding_planner.routes.appointments.appointment_service") as service:
            service.list_all = AsyncMock(side_effect=RuntimeError("boom"))
            response = await test_client.get("/appointments")

        assert response.status_code == 500
        assert response.json()["error"] == "Internal server error"
        assert response.json()["kind"] == "internal_error"


class TestStatusCodes:

    @pytest.mark.asyncio
    async def test_delete_appointment_returns_message(self, test_client):
        with patch("wedding_planner.routes.appointments.appointment_service") as service:
            service.cancel = AsyncMock(return_value=MessageResponse(message="Appointment deleted successfully"))
            response = await test_client.delete("/appointments/3")

        assert response.status_code == 200
        assert response.json() == {"message": "Appointment deleted successfully"}
        service.cancel.assert_awaited_once()
        assert service.cancel.await_args.args[1] == 3

    @pytest.mark.asyncio
    async def test_request_id_generated_when_absent(self, test_client):
        with patch("wedding_planner.routes.appointments.appointment_service") as service:
            service.list_all = AsyncMock(return_value=[])
            response = await test_client.get("/appointments")

        assert response.status_code == 200
        assert response.json() == []
        assert len(response.headers["X-Request-ID"]) == 8

    @pytest.mark.asyncio
    async def test_health_without_database(self, test_client):
        response = await test_client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "unhealthy"
        assert response.json()["database"] == "disconnected"
