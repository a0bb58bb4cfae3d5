import asyncio

import pytest

from alice_api.auth.models import SessionClaims
from alice_api.auth.token_manager import JWTSessionTokenManager
from alice_api.bookings.service import BookingService
from alice_api.leads.service import LeadService
from alice_api.staff.service import StaffService

from conftest import create_business, create_staff, login


def _tenant(business_id: str) -> dict:
    return {"X-Business-Id": business_id}


def _bearer(token: str) -> dict:
    return {"Authorization": f"Bearer {token}"}


def _book(client, business_id, client_name="Thandi", staff_id=None):
    body = {"clientName": client_name, "contact": "+27 82 000 0000", "service": "Cut", "when": "Fri 10:00"}
    if staff_id:
        body["staffId"] = staff_id
    response = client.post("/bookings", json=body, headers=_tenant(business_id))
    assert response.status_code == 200
    return response.json()


def test_health(client):
    response = client.get("/")

    assert response.status_code == 200
    body = response.json()
    assert body["ok"] is True
    assert body["service"] == "Alice Starter API"
    assert body["time"]


def test_business_creation_returns_business_with_default_timezone(client):
    response = client.post("/business/create", json={"name": "Glow Studio", "industry": "Salon"})

    body = response.json()
    assert response.status_code == 200
    assert body["business"]["id"] == body["businessId"]
    assert body["business"]["timezone"] == "Africa/Johannesburg"


def test_staff_day_end_to_end(client):
    business_id = create_business(client)
    staff_id = create_staff(client, business_id, name="Jo", national_id="123", pin="9999")

    response = client.post(
        "/staff/login",
        json={"name": "Jo", "nationalId": "123", "pin": "9999"},
        headers=_tenant(business_id),
    )
    assert response.status_code == 200
    session = response.json()
    assert session["staff"] == {"id": staff_id, "name": "Jo", "role": "staff"}
    assert "pin" not in session["staff"]

    wrong_pin = client.post(
        "/staff/login",
        json={"name": "Jo", "nationalId": "123", "pin": "0000"},
        headers=_tenant(business_id),
    )
    assert wrong_pin.status_code == 401
    assert wrong_pin.json() == {"error": "Invalid credentials"}

    booking = _book(client, business_id, staff_id=staff_id)
    _book(client, business_id, client_name="Someone else's client")
    assert booking["status"] == "confirmed"

    agenda = client.get("/staff/agenda", headers=_bearer(session["token"]))
    assert agenda.status_code == 200
    assert [b["id"] for b in agenda.json()["bookings"]] == [booking["id"]]

    assert client.post("/staff/clock-in", headers=_bearer(session["token"])).json() == {"ok": True}
    assert client.post("/staff/clock-out", headers=_bearer(session["token"])).json() == {"ok": True}


@pytest.mark.parametrize("field, value", [("name", "Joe"), ("nationalId", "124"), ("pin", "9998")])
def test_login_requires_every_credential_field(client, field, value):
    business_id = create_business(client)
    create_staff(client, business_id)
    credentials = {"name": "Jo", "nationalId": "123", "pin": "9999"}
    credentials[field] = value

    response = client.post("/staff/login", json=credentials, headers=_tenant(business_id))

    assert response.status_code == 401


def test_login_is_scoped_to_business(client):
    first = create_business(client)
    second = create_business(client, name="Other")
    create_staff(client, first)

    response = client.post(
        "/staff/login",
        json={"name": "Jo", "nationalId": "123", "pin": "9999"},
        headers=_tenant(second),
    )

    assert response.status_code == 401


def test_duplicate_credentials_log_in_as_first_record(client):
    business_id = create_business(client)
    first_id = create_staff(client, business_id)
    create_staff(client, business_id)

    response = client.post(
        "/staff/login",
        json={"name": "Jo", "nationalId": "123", "pin": "9999"},
        headers=_tenant(business_id),
    )

    assert response.json()["staff"]["id"] == first_id


@pytest.mark.parametrize("headers", [{}, {"X-Business-Id": "no-such-business"}, {"X-Business-Id": ""}])
def test_tenant_routes_reject_missing_or_unknown_business(client, headers):
    for method, path in [("get", "/bookings"), ("get", "/faqs"), ("post", "/insights/weekly")]:
        response = getattr(client, method)(path, headers=headers)
        assert response.status_code == 401
        assert response.json() == {"error": "Missing or invalid X-Business-Id"}


def test_staff_routes_reject_missing_or_bad_authorization(client):
    business_id = create_business(client)
    staff_id = create_staff(client, business_id)
    forged = JWTSessionTokenManager("some-other-secret").issue_token(
        SessionClaims(staff_id=staff_id, business_id=business_id, role="staff")
    )

    missing = client.get("/staff/agenda")
    assert missing.status_code == 401
    assert missing.json() == {"error": "Missing Authorization"}

    for headers in [{"Authorization": "Basic abc"}, {"Authorization": "Bearer"}, _bearer("garbage"), _bearer(forged)]:
        response = client.post("/staff/clock-in", headers=headers)
        assert response.status_code == 401
        assert response.json() == {"error": "Invalid token"}
        assert response.headers["www-authenticate"] == "Bearer"


def test_clock_in_appends_attendance_event(app, client):
    business_id = create_business(client)
    staff_id = create_staff(client, business_id)
    token = login(client, business_id)

    client.post("/staff/clock-in", headers=_bearer(token))
    client.post("/staff/clock-in", headers=_bearer(token))

    events = asyncio.run(app.state.stores.attendance.list_events(business_id, staff_id=staff_id))
    assert [e.type for e in events] == ["in", "in"]


def test_overtime_request_starts_pending_and_can_be_approved(app, client):
    business_id = create_business(client)
    create_staff(client, business_id)
    token = login(client, business_id)

    response = client.post("/staff/overtime", json={"hours": 2, "reason": "Stocktake"}, headers=_bearer(token))

    assert response.status_code == 200
    request = response.json()
    assert request["status"] == "pending"
    assert request["businessId"] == business_id

    stores = app.state.stores
    service = StaffService(stores.staff, stores.bookings, stores.attendance, stores.overtime)
    approved = asyncio.run(service.set_overtime_status(business_id, request["id"], "approved"))
    assert approved.status == "approved"

    with pytest.raises(ValueError):
        asyncio.run(service.set_overtime_status(business_id, request["id"], "maybe"))


def test_overtime_rejects_non_positive_hours(client):
    business_id = create_business(client)
    create_staff(client, business_id)
    token = login(client, business_id)

    response = client.post("/staff/overtime", json={"hours": 0}, headers=_bearer(token))

    assert response.status_code == 422


def test_agenda_excludes_cancelled_bookings(app, client):
    business_id = create_business(client)
    staff_id = create_staff(client, business_id)
    token = login(client, business_id)
    kept = _book(client, business_id, client_name="Kept", staff_id=staff_id)
    cancelled = _book(client, business_id, client_name="Cancelled", staff_id=staff_id)

    asyncio.run(BookingService(app.state.stores.bookings).set_status(business_id, cancelled["id"], "cancelled"))

    agenda = client.get("/staff/agenda", headers=_bearer(token)).json()["bookings"]
    assert [b["id"] for b in agenda] == [kept["id"]]
    all_bookings = client.get("/bookings", headers=_tenant(business_id)).json()
    assert [b["status"] for b in all_bookings] == ["confirmed", "cancelled"]


def test_bookings_are_isolated_per_business(client):
    first = create_business(client)
    second = create_business(client, name="Other")
    _book(client, first, client_name="A")
    _book(client, first, client_name="B")
    _book(client, second, client_name="C")

    first_list = client.get("/bookings", headers=_tenant(first)).json()
    second_list = client.get("/bookings", headers=_tenant(second)).json()

    assert [b["clientName"] for b in first_list] == ["A", "B"]
    assert [b["clientName"] for b in second_list] == ["C"]
    assert client.get("/bookings", headers=_tenant(first)).json() == first_list


def test_invalid_body_returns_error_payload(client):
    business_id = create_business(client)

    response = client.post("/bookings", json={"contact": "x"}, headers=_tenant(business_id))

    assert response.status_code == 422
    body = response.json()
    assert body["error"] == "Invalid request body"
    assert body["details"]


def test_lead_capture(app, client):
    business_id = create_business(client)

    response = client.post(
        "/leads",
        json={"name": "Thandi", "contact": "thandi@example.com", "budget": 500, "source": "Instagram"},
        headers=_tenant(business_id),
    )

    assert response.status_code == 200
    lead = response.json()
    assert lead["businessId"] == business_id
    assert lead["budget"] == 500
    assert lead["service"] is None

    stored = asyncio.run(LeadService(app.state.stores.leads).list_leads(business_id))
    assert [s.id for s in stored] == [lead["id"]]


def test_faqs_are_seeded_then_replaced(client):
    business_id = create_business(client)

    seeded = client.get("/faqs", headers=_tenant(business_id)).json()
    assert [item["q"] for item in seeded] == ["What are your hours?", "Do you accept walk-ins?"]

    new_items = [{"q": "Parking?", "a": "Free at the back."}]
    response = client.post("/faqs", json={"items": new_items}, headers=_tenant(business_id))
    assert response.json() == {"ok": True}
    assert client.get("/faqs", headers=_tenant(business_id)).json() == new_items

    client.post("/faqs", json={"items": []}, headers=_tenant(business_id))
    assert client.get("/faqs", headers=_tenant(business_id)).json() == []


def test_faq_replace_requires_items(client):
    business_id = create_business(client)

    assert client.post("/faqs", json={}, headers=_tenant(business_id)).status_code == 422


def test_weekly_plan_uses_business_industry(client):
    business_id = create_business(client, industry="Nail Bar")

    plan = client.post("/insights/weekly", headers=_tenant(business_id)).json()

    assert plan["industry"] == "Nail Bar"
    assert "#NailBar" in plan["suggestedPosts"][0]["caption"]
    assert plan["paydayWindows"] == ["15th", "25th–30th"]
    assert plan["weekOf"]


def test_forecast_without_body_uses_defaults(client):
    business_id = create_business(client)

    no_body = client.post("/insights/forecast", headers=_tenant(business_id)).json()
    empty_body = client.post("/insights/forecast", json={}, headers=_tenant(business_id)).json()

    assert no_body == empty_body
    assert no_body["projectedWeeklyRevenue"] == 11700
    assert no_body["estimatedROI"] == 0.13


def test_forecast_zero_spend(client):
    business_id = create_business(client)

    result = client.post("/insights/forecast", json={"marketingSpend": 0}, headers=_tenant(business_id)).json()

    assert result["estimatedROI"] is None
    assert result["roiNote"]


@pytest.mark.parametrize("body", [
    b'{"baselineWeeklyRevenue": 1e30, "marketingSpend": 1500}',
    b'{"baselineWeeklyRevenue": Infinity}',
    b'{"marketingSpend": NaN}',
    b'{"marketingSpend": -5}',
])
def test_forecast_rejects_out_of_range_amounts(client, body):
    business_id = create_business(client)

    response = client.post(
        "/insights/forecast",
        content=body,
        headers={**_tenant(business_id), "Content-Type": "application/json"},
    )

    assert response.status_code == 422
    assert response.json()["error"] == "Invalid request body"


def test_forecast_echoes_amounts_as_sent(client):
    business_id = create_business(client)

    defaults = client.post("/insights/forecast", headers=_tenant(business_id)).json()
    fractional = client.post(
        "/insights/forecast",
        json={"baselineWeeklyRevenue": 12000.5, "marketingSpend": 2000},
        headers=_tenant(business_id),
    ).json()

    assert defaults["baselineWeeklyRevenue"] == 10000
    assert isinstance(defaults["baselineWeeklyRevenue"], int)
    assert isinstance(defaults["marketingSpend"], int)
    assert fractional["baselineWeeklyRevenue"] == 12000.5
    assert fractional["marketingSpend"] == 2000


def test_lead_budget_may_be_free_text(app, client):
    business_id = create_business(client)

    response = client.post(
        "/leads",
        json={"name": "Sipho", "contact": "082 111 2222", "budget": "R2000"},
        headers=_tenant(business_id),
    )

    assert response.status_code == 200
    assert response.json()["budget"] == "R2000"
    stored = asyncio.run(LeadService(app.state.stores.leads).list_leads(business_id))
    assert stored[0].budget == "R2000"
