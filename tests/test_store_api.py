# tests/test_store_api.py
# FastAPI inquiry store: access control, CRUD, error shape.

from fastapi.testclient import TestClient

from conftest import ADMIN_SECRET, OFFICIAL_USER, make_store_app

ASHA = {
    "inquiry_type": "contact",
    "name": "Asha",
    "phone_number": "9876543210",
    "message": "Need Aadhaar update",
}


def _submit(http, body=ASHA, headers=None):
    r = http.post("/rpc/inquiries", json=body, headers=headers or {})
    assert r.status_code == 201, r.text
    return r.json()["id"]


def test_health(http):
    r = http.get("/health")
    assert r.status_code == 200
    assert r.json() == {"status": "healthy"}


def test_submitted_inquiry_appears_unread_for_admin(http, admin_headers):
    new_id = _submit(http)
    rows = http.get("/rpc/inquiries", headers=admin_headers).json()
    match = [r for r in rows if r["id"] == new_id]
    assert len(match) == 1
    assert match[0]["read"] is False
    assert match[0]["internal"] is False
    assert match[0]["name"] == "Asha"
    assert match[0]["created_at"].endswith("+00:00")


def test_admin_routes_require_elevation(http):
    _submit(http)
    for method, path in [
        ("GET", "/rpc/inquiries"),
        ("GET", "/rpc/inquiries/1"),
        ("DELETE", "/rpc/inquiries/1"),
    ]:
        r = http.request(method, path, headers={"X-Caller-Id": "stranger"})
        assert r.status_code == 403
        assert r.json()["detail"]["code"] == "unauthorized"
    r = http.put("/rpc/inquiries/1/read", json={"read": True})
    assert r.status_code == 403


def test_elevation_rules(http):
    headers = {"X-Caller-Id": OFFICIAL_USER}
    assert http.get("/rpc/access/is-admin", headers=headers).json() == {"is_admin": False}

    r = http.post("/rpc/access/elevate", json={"secret": "wrong"}, headers=headers)
    assert r.status_code == 401
    assert r.json()["detail"]["code"] == "unauthorized"

    r = http.post("/rpc/access/elevate", json={"secret": ADMIN_SECRET})
    assert r.status_code == 401

    r = http.post("/rpc/access/elevate", json={"secret": ADMIN_SECRET, "user_id": OFFICIAL_USER}, headers=headers)
    assert r.status_code == 200
    assert r.json()["status"] == "elevated"
    bearer = {**headers, "Authorization": f"Bearer {r.json()['session_token']}"}
    assert http.get("/rpc/access/is-admin", headers=bearer).json() == {"is_admin": True}
    # The caller id on its own is not a credential.
    assert http.get("/rpc/access/is-admin", headers=headers).json() == {"is_admin": False}

    r = http.post("/rpc/access/elevate", json={"secret": ADMIN_SECRET}, headers=bearer)
    assert r.status_code == 409
    assert r.json()["detail"]["code"] == "already_elevated"

    # A fresh elevation without a token gets its own session.
    r = http.post("/rpc/access/elevate", json={"secret": ADMIN_SECRET}, headers=headers)
    assert r.status_code == 200
    assert r.json()["session_token"] != bearer["Authorization"].split()[1]


def test_official_caller_id_without_session_token_is_refused(http, admin_headers):
    new_id = _submit(http)
    spoofed = {"X-Caller-Id": OFFICIAL_USER}
    for method, path in [
        ("GET", "/rpc/inquiries"),
        ("GET", f"/rpc/inquiries/{new_id}"),
        ("DELETE", f"/rpc/inquiries/{new_id}"),
    ]:
        r = http.request(method, path, headers=spoofed)
        assert r.status_code == 403, (method, path)
        assert r.json()["detail"]["code"] == "unauthorized"
    r = http.put(f"/rpc/inquiries/{new_id}/read", json={"read": True}, headers=spoofed)
    assert r.status_code == 403
    r = http.post("/rpc/inquiries/internal", json=ASHA, headers=spoofed)
    assert r.status_code == 403

    forged = {**spoofed, "Authorization": "Bearer not-a-real-token"}
    assert http.get("/rpc/inquiries", headers=forged).status_code == 403

    # The legitimate session is untouched and the row is still there.
    assert http.get(f"/rpc/inquiries/{new_id}", headers=admin_headers).status_code == 200


def test_session_token_is_bound_to_its_caller(http, admin_headers):
    stolen = {**admin_headers, "X-Caller-Id": "someone-else"}
    r = http.get("/rpc/inquiries", headers=stolen)
    assert r.status_code == 403


def test_set_read_get_and_delete(http, admin_headers):
    new_id = _submit(http)
    r = http.put(f"/rpc/inquiries/{new_id}/read", json={"read": True}, headers=admin_headers)
    assert r.status_code == 200
    assert http.get(f"/rpc/inquiries/{new_id}", headers=admin_headers).json()["read"] is True

    assert http.delete(f"/rpc/inquiries/{new_id}", headers=admin_headers).status_code == 204
    r = http.get(f"/rpc/inquiries/{new_id}", headers=admin_headers)
    assert r.status_code == 404
    assert r.json()["detail"]["code"] == "not_found"


def test_ids_are_not_reused_after_delete(http, admin_headers):
    first = _submit(http)
    http.delete(f"/rpc/inquiries/{first}", headers=admin_headers)
    assert _submit(http) > first


def test_empty_store_lists_nothing(http, admin_headers):
    assert http.get("/rpc/inquiries", headers=admin_headers).json() == []


def test_category_only_kept_for_service_requests(http, admin_headers):
    contact = _submit(http, {**ASHA, "service_category": "Aadhaar"})
    request = _submit(http, {**ASHA, "inquiry_type": "serviceRequest", "service_category": "Aadhaar"})
    assert http.get(f"/rpc/inquiries/{contact}", headers=admin_headers).json()["service_category"] is None
    assert http.get(f"/rpc/inquiries/{request}", headers=admin_headers).json()["service_category"] == "Aadhaar"


def test_internal_submission_is_admin_only(http, admin_headers):
    r = http.post("/rpc/inquiries/internal", json=ASHA, headers={"X-Caller-Id": "stranger"})
    assert r.status_code == 403
    r = http.post("/rpc/inquiries/internal", json=ASHA, headers=admin_headers)
    assert r.status_code == 201
    row = http.get(f"/rpc/inquiries/{r.json()['id']}", headers=admin_headers).json()
    assert row["internal"] is True


def test_validation_errors_use_structured_detail(http):
    r = http.post("/rpc/inquiries", json={**ASHA, "phone_number": "12345"})
    assert r.status_code == 422
    detail = r.json()["detail"]
    assert detail["code"] == "invalid"
    assert "phone_number" in detail["message"]


def test_maintenance_mode_is_unavailable():
    with TestClient(make_store_app(maintenance=True)) as http:
        r = http.get("/health")
        assert r.status_code == 503
        assert r.json()["detail"]["code"] == "unavailable"
        r = http.post("/rpc/access/elevate", json={"secret": ADMIN_SECRET}, headers={"X-Caller-Id": OFFICIAL_USER})
        assert r.status_code == 503
