"""
End-to-end tests for the HTTP API.
"""

from contextlib import asynccontextmanager

import httpx
import pytest
from httpx import ASGITransport, AsyncClient

from garage_portal.api.app import create_app
from garage_portal.config import Settings
from garage_portal.core.exceptions import BookingSubmitError, ProfileFetchError
from garage_portal.services.auth import LocalSessionStore, create_session_provider
from garage_portal.services.booking import BookingRepository


class FailingRepository(BookingRepository):
    async def create(self, draft, user_id):
        raise BookingSubmitError("storage unavailable")


@asynccontextmanager
async def running(app):
    """Run the app lifespan and yield a client bound to it."""
    async with app.router.lifespan_context(app):
        transport = ASGITransport(app=app)
        async with AsyncClient(transport=transport, base_url="http://test") as client:
            yield client


async def walk_to_confirm(client):
    """Drive Maria's single-vehicle wizard up to the confirm step."""
    resp = await client.post("/booking/wizard", json={})
    assert resp.json()["step"] == "service"

    resp = await client.post("/booking/wizard/service", json={"service_id": "s2"})
    assert resp.json()["step"] == "datetime"

    slots = (await client.get("/booking/slots")).json()
    await client.post("/booking/wizard/date", json={"date": slots["dates"][0]})
    await client.post("/booking/wizard/time", json={"time": "10:00"})
    resp = await client.post("/booking/wizard/advance")
    assert resp.json()["step"] == "confirm"
    return slots


@pytest.mark.asyncio
async def test_health_and_headers(settings):
    async with running(create_app(settings)) as client:
        resp = await client.get("/health/")
        assert resp.status_code == 200
        assert resp.json()["auth_mode"] == "local"
        assert resp.headers["X-Frame-Options"] == "DENY"
        assert resp.headers["X-Content-Type-Options"] == "nosniff"

        assert (await client.get("/health/ready")).json() == {"status": "ready"}


@pytest.mark.asyncio
async def test_role_gated_endpoints_wait_while_loading(settings):
    app = create_app(settings)
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        resp = await client.get("/home")
        assert resp.status_code == 503

        resp = await client.get("/auth/session")
        assert resp.json()["state"] == "loading"


@pytest.mark.asyncio
async def test_anonymous_requests_are_rejected(settings):
    async with running(create_app(settings)) as client:
        session = (await client.get("/auth/session")).json()
        assert session["state"] == "anonymous"
        assert session["redirect_to"] is None

        assert (await client.get("/home")).status_code == 401
        assert (await client.get("/management/dashboard")).status_code == 401


@pytest.mark.asyncio
async def test_customer_login_and_home(settings):
    async with running(create_app(settings)) as client:
        resp = await client.post("/auth/login", json={"email": "joao@email.com", "password": "x"})
        assert resp.status_code == 200
        body = resp.json()
        assert body["role"] == "customer"
        assert body["redirect_to"] == "/"

        home = (await client.get("/home")).json()
        assert home["first_name"] == "João"
        assert home["unread_alerts"] == 2
        assert len(home["vehicles"]) == 3

        menu = (await client.get("/auth/menu")).json()
        assert menu["layout"] == "customer"

        assert (await client.get("/management/dashboard")).status_code == 403


@pytest.mark.asyncio
async def test_login_rejects_malformed_email(settings):
    async with running(create_app(settings)) as client:
        resp = await client.post("/auth/login", json={"email": "joao", "password": "x"})
        assert resp.status_code == 400
        assert resp.json()["detail"] == "Email inválido"


@pytest.mark.asyncio
async def test_demo_management_reaches_dashboard(settings):
    async with running(create_app(settings)) as client:
        resp = await client.post("/auth/demo/gestao")
        assert resp.json()["redirect_to"] == "/management"

        dashboard = (await client.get("/management/dashboard")).json()
        assert dashboard["revenue"] == 570.0
        assert dashboard["open_orders"] == 2

        patio = (await client.get("/management/patio", params={"search": "corolla"})).json()
        assert [e["id"] for e in patio["columns"]["waiting"]] == ["p2"]

        clients = (await client.get("/management/clients", params={"search": "silva"})).json()
        assert [c["id"] for c in clients["clients"]] == ["2"]

        services = (await client.get("/management/services", params={"category": "Freios"})).json()
        assert [s["id"] for s in services["services"]] == ["s4"]

        pending = (await client.get("/management/appointments", params={"status": "pending"})).json()
        assert [d["date"] for d in pending["days"]] == ["2026-01-20", "2026-01-22"]


@pytest.mark.asyncio
async def test_admin_menu_hides_management_only_items(settings):
    async with running(create_app(settings)) as client:
        await client.post("/auth/demo/admin")
        menu = (await client.get("/auth/menu")).json()

        assert menu["layout"] == "management"
        assert [s["title"] for s in menu["sections"]] == ["Operacional", "Cadastros", "Sistema"]


@pytest.mark.asyncio
async def test_session_survives_restart(settings):
    async with running(create_app(settings)) as client:
        await client.post("/auth/login", json={"email": "maria@email.com", "password": "x"})

    async with running(create_app(settings)) as client:
        session = (await client.get("/auth/session")).json()
        assert session["state"] == "authenticated"
        assert session["user_id"] == "3"

        resp = await client.post("/auth/logout")
        assert resp.json()["redirect_to"] == "/login"

    async with running(create_app(settings)) as client:
        assert (await client.get("/auth/session")).json()["state"] == "anonymous"


@pytest.mark.asyncio
async def test_signup_signs_in_locally(settings):
    async with running(create_app(settings)) as client:
        resp = await client.post(
            "/auth/signup",
            json={"email": "novo@email.com", "password": "secret1", "full_name": "Novo Cliente"},
        )
        body = resp.json()
        assert body["state"] == "authenticated"
        assert body["role"] == "customer"

        resp = await client.post(
            "/auth/signup",
            json={"email": "novo@email.com", "password": "123", "full_name": "Novo Cliente"},
        )
        assert resp.status_code == 400


@pytest.mark.asyncio
async def test_alerts_endpoints(settings):
    async with running(create_app(settings)) as client:
        await client.post("/auth/login", json={"email": "joao@email.com", "password": "x"})

        unread = (await client.get("/alerts", params={"unread_only": True})).json()
        assert unread["unread_count"] == 2

        resp = await client.post("/alerts/1/read")
        assert resp.json()["unread_count"] == 1
        assert (await client.post("/alerts/5/read")).status_code == 404

        resp = await client.post("/alerts/read-all")
        assert resp.json() == {"marked": 1, "unread_count": 0}


@pytest.mark.asyncio
async def test_booking_flow(settings):
    app = create_app(settings)
    async with running(app) as client:
        await client.post("/auth/login", json={"email": "maria@email.com", "password": "x"})
        slots = await walk_to_confirm(client)
        await client.post("/booking/wizard/note", json={"note": "Volante puxando"})

        resp = await client.post("/booking/wizard/confirm")
        assert resp.status_code == 200
        body = resp.json()
        assert body["redirect_to"] == "/booking/success"
        assert body["appointment"]["status"] == "pending"
        assert body["appointment"]["scheduled_date"] == slots["dates"][0]
        assert body["appointment"]["notes"] == "Volante puxando"

        agenda = (await client.get("/agenda")).json()
        assert slots["dates"][0] in [d["date"] for d in agenda["days"]]

        assert (await client.get("/booking/wizard")).status_code == 404


@pytest.mark.asyncio
async def test_booking_rejects_date_without_time(settings):
    async with running(create_app(settings)) as client:
        await client.post("/auth/login", json={"email": "maria@email.com", "password": "x"})
        await client.post("/booking/wizard", json={"service_id": "s1"})
        await client.post("/booking/wizard/advance")
        slots = (await client.get("/booking/slots")).json()
        await client.post("/booking/wizard/date", json={"date": slots["dates"][0]})

        resp = await client.post("/booking/wizard/advance")
        assert resp.status_code == 400

        wizard = (await client.get("/booking/wizard")).json()
        assert wizard["step"] == "datetime"
        assert wizard["service"]["id"] == "s1"


@pytest.mark.asyncio
async def test_booking_submit_failure_keeps_wizard(settings):
    app = create_app(settings, booking_repository=FailingRepository())
    async with running(app) as client:
        await client.post("/auth/login", json={"email": "maria@email.com", "password": "x"})
        await walk_to_confirm(client)

        resp = await client.post("/booking/wizard/confirm")
        assert resp.status_code == 502

        wizard = (await client.get("/booking/wizard")).json()
        assert wizard["step"] == "confirm"
        assert wizard["service"]["id"] == "s2"
        assert wizard["time"] == "10:00"


@pytest.mark.asyncio
async def test_remote_invalid_credentials_return_localized_401(remote_settings):
    def identity_service(request: httpx.Request) -> httpx.Response:
        return httpx.Response(400, json={"error_description": "Invalid login credentials"})

    provider = create_session_provider(
        remote_settings, transport=httpx.MockTransport(identity_service)
    )
    async with running(create_app(remote_settings, session_provider=provider)) as client:
        resp = await client.post("/auth/login", json={"email": "joao@email.com", "password": "bad"})

        assert resp.status_code == 401
        assert resp.json()["detail"] == "Email ou senha inválidos"

        resp = await client.post("/auth/demo/customer")
        assert resp.status_code == 401

        resp = await client.post("/auth/oauth")
        assert resp.json()["authorization_url"].startswith("https://identity.test/auth/v1/authorize")


@pytest.mark.asyncio
async def test_startup_with_token_for_deleted_user(remote_settings):
    def identity_service(request: httpx.Request) -> httpx.Response:
        return httpx.Response(404, json={"msg": "User from sub claim in JWT does not exist"})

    provider = create_session_provider(
        remote_settings, transport=httpx.MockTransport(identity_service)
    )
    LocalSessionStore(remote_settings.local_session_db_path).write("remote_session", "orphan")

    async with running(create_app(remote_settings, session_provider=provider)) as client:
        session = (await client.get("/auth/session")).json()
        assert session["state"] == "anonymous"
        assert session["mode"] == "remote"


@pytest.mark.asyncio
async def test_remote_logout_404_still_signs_out(remote_settings):
    def identity_service(request: httpx.Request) -> httpx.Response:
        if request.url.path == "/auth/v1/token":
            return httpx.Response(
                200, json={"access_token": "tok", "user": {"id": "u-9", "email": "r@email.com"}}
            )
        if request.url.path == "/rest/v1/profiles":
            return httpx.Response(200, json={"id": "u-9", "email": "r@email.com", "role": "user"})
        return httpx.Response(404, json={"message": "not found"})

    provider = create_session_provider(
        remote_settings, transport=httpx.MockTransport(identity_service)
    )
    async with running(create_app(remote_settings, session_provider=provider)) as client:
        resp = await client.post("/auth/login", json={"email": "r@email.com", "password": "x"})
        assert resp.json()["state"] == "authenticated"

        resp = await client.post("/auth/logout")
        assert resp.status_code == 200
        assert resp.json()["state"] == "anonymous"


@pytest.mark.asyncio
async def test_profile_errors_become_502(settings):
    app = create_app(settings)

    async def broken_profile():
        raise ProfileFetchError("profile store down")

    app.add_api_route("/broken-profile", broken_profile)

    async with running(app) as client:
        resp = await client.get("/broken-profile")
        assert resp.status_code == 502
        assert resp.json()["detail"] == "Serviço de autenticação indisponível"


@pytest.mark.asyncio
async def test_health_reports_app_settings_version(tmp_path, monkeypatch):
    monkeypatch.setenv("APP_VERSION", "0.0.1")
    settings = Settings(app_version="2.3.4", local_session_db_path=str(tmp_path / "session.db"))

    async with running(create_app(settings)) as client:
        assert (await client.get("/health/")).json()["version"] == "2.3.4"


@pytest.mark.asyncio
async def test_logout_discards_open_wizard(settings):
    async with running(create_app(settings)) as client:
        await client.post("/auth/login", json={"email": "maria@email.com", "password": "x"})
        await client.post("/booking/wizard", json={"service_id": "s1"})
        assert (await client.get("/booking/wizard")).status_code == 200

        await client.post("/auth/logout")
        await client.post("/auth/login", json={"email": "maria@email.com", "password": "x"})

        assert (await client.get("/booking/wizard")).status_code == 404
