"""Tests for the HTTP routes."""

SERVICE_FORM = {
    "name": "Classic Cut",
    "description": "A classic cut",
    "duration": "30",
    "price": "25",
    "category": "Haircuts",
}


def test_health(client):
    assert client.get("/health").json() == {"status": "ok"}


class TestAuth:

    def test_bad_credentials(self, client):
        response = client.post("/auth/login?locale=es", data={"username": "admin@admin.com", "password": "nope"})
        assert response.status_code == 401
        assert response.json()["detail"]["title"] == "Fallo de Inicio de Sesión"

    def test_login_success_notification(self, client):
        response = client.post("/auth/login?locale=pt", data={"username": "admin@admin.com", "password": "123123"})
        assert response.status_code == 200
        body = response.json()
        assert body["token_type"] == "bearer"
        assert body["notification"] == {
            "title": "Login Realizado",
            "description": "Redirecionando para o painel administrativo...",
            "variant": "default",
        }

    def test_admin_routes_require_token(self, client):
        missing = client.get("/admin/services")
        assert missing.status_code == 401
        assert missing.json()["detail"] == "Authentication required."
        assert missing.headers["www-authenticate"] == "Bearer"

        junk = client.get("/admin/services?locale=es", headers={"Authorization": "Bearer junk"})
        assert junk.status_code == 401
        assert junk.json()["detail"] == "Se requiere autenticación."


class TestPublicServices:

    def test_grouped_active_services(self, client):
        groups = client.get("/services").json()
        assert [g["key"] for g in groups] == ["beard_care", "haircuts", "shaves", "styling"]
        haircut = groups[1]["services"][0]
        assert haircut["name"] == "Classic Haircut"
        assert "25.00" in haircut["price_display"]

    def test_locale_from_header(self, client):
        groups = client.get("/services", headers={"Accept-Language": "pt-BR"}).json()
        assert "25,00" in groups[1]["services"][0]["price_display"]


class TestAdminServices:

    def test_lists_inactive_too(self, client, admin_headers):
        services = client.get("/admin/services", headers=admin_headers).json()
        assert len(services) == 10

    def test_create(self, client, admin_headers):
        response = client.post("/admin/services", json=SERVICE_FORM, headers=admin_headers)
        assert response.status_code == 201
        body = response.json()
        assert body["service"]["active"] is True
        assert body["notification"]["title"] == "Service Added"

        listed = client.get("/admin/services", headers=admin_headers).json()
        assert listed[0]["id"] == body["service"]["id"]

    def test_create_invalid_reports_fields(self, client, admin_headers):
        response = client.post(
            "/admin/services",
            json={"name": "ab", "description": "ok desc", "duration": -5, "price": 10, "category": "Cuts"},
            headers=admin_headers,
        )
        assert response.status_code == 422
        errors = response.json()["detail"]["errors"]
        assert errors == {
            "name": "Service name must be at least 3 characters.",
            "duration": "Duration must be a positive number (minutes).",
        }

    def test_create_rejects_infinite_price(self, client, admin_headers):
        response = client.post("/admin/services", json={**SERVICE_FORM, "price": "inf"}, headers=admin_headers)
        assert response.status_code == 422
        assert set(response.json()["detail"]["errors"]) == {"price"}
        assert len(client.get("/admin/services", headers=admin_headers).json()) == 10

    def test_patch_partial(self, client, admin_headers):
        response = client.patch("/admin/services/3", json={"price": 42}, headers=admin_headers)
        assert response.status_code == 200
        assert response.json()["service"]["price"] == 42
        assert response.json()["service"]["name"] == "Hot Towel Shave"

    def test_patch_missing(self, client, admin_headers):
        response = client.patch("/admin/services/missing", json={"price": 42}, headers=admin_headers)
        assert response.status_code == 404
        assert response.json()["detail"]["title"] == "Update Failed"

    def test_toggle(self, client, admin_headers):
        response = client.post("/admin/services/1/toggle?locale=pt", headers=admin_headers)
        assert response.status_code == 200
        body = response.json()
        assert body["service"]["active"] is False
        assert body["notification"]["title"] == "Serviço Desativado"

        public_ids = [s["id"] for g in client.get("/services").json() for s in g["services"]]
        assert "1" not in public_ids

    def test_delete_is_idempotent(self, client, admin_headers):
        first = client.delete("/admin/services/2", headers=admin_headers)
        second = client.delete("/admin/services/2", headers=admin_headers)
        assert first.status_code == 200
        assert first.json()["notification"]["description"] == '"Beard Trim & Shape" has been deleted.'
        assert second.status_code == 200
        assert len(client.get("/admin/services", headers=admin_headers).json()) == 9


class TestAppointments:

    def test_admin_list_sorted_with_display(self, client, admin_headers):
        appointments = client.get("/admin/appointments?locale=es", headers=admin_headers).json()
        assert [a["id"] for a in appointments] == ["a1", "a2", "a3", "a4"]
        assert appointments[1]["status_label"] == "Pendiente"
        assert "2024" in appointments[0]["date_display"]

    def test_change_status(self, client, admin_headers):
        response = client.patch(
            "/admin/appointments/a1/status", json={"status": "Completed"}, headers=admin_headers,
        )
        assert response.status_code == 200
        assert response.json()["appointment"]["status"] == "Completed"
        assert response.json()["notification"]["description"] == "Appointment ID a1 set to Completed."

    def test_change_status_missing(self, client, admin_headers):
        response = client.patch(
            "/admin/appointments/zzz/status", json={"status": "Completed"}, headers=admin_headers,
        )
        assert response.status_code == 404

    def test_change_status_rejects_unknown_status(self, client, admin_headers):
        response = client.patch(
            "/admin/appointments/a1/status", json={"status": "Archived"}, headers=admin_headers,
        )
        assert response.status_code == 422

    def test_book_and_see_on_calendar(self, client):
        response = client.post("/appointments", json={
            "name": "Ana Souza",
            "phone": "+5511987654321",
            "email": "ana@barber.com.br",
            "service_id": "1",
            "date": "2099-01-05",
            "time": "09:30",
        })
        assert response.status_code == 201
        assert response.json()["appointment"]["status"] == "Pending"

        day = client.get("/calendar?day=2099-01-05").json()
        assert [a["client_name"] for a in day] == ["Ana Souza"]

    def test_book_invalid(self, client):
        response = client.post("/appointments?locale=pt", json={"name": "A"})
        assert response.status_code == 422
        errors = response.json()["detail"]["errors"]
        assert errors["name"] == "O nome deve ter pelo menos 2 caracteres."
        assert set(errors) == {"name", "phone", "email", "service_id", "date", "time"}
