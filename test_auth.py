import json

from app import create_app
from auth_context import SESSION_USER_KEY
from conftest import login
from translations import translate


def _stored_user(client):
    with client.session_transaction() as sess:
        raw = sess.get(SESSION_USER_KEY)
    return json.loads(raw) if raw else None


def test_login_page_loads(client):
    r = client.get("/login")
    assert r.status_code == 200
    assert b'name="csrf_token"' in r.data


def test_admin_login_stores_admin_user(client):
    r = login(client, "admin", "admin-pass")
    assert r.status_code == 200
    assert b"System Administrator" in r.data

    stored = _stored_user(client)
    assert stored["username"] == "admin"
    assert stored["role"] == "admin"


def test_admin_wrong_password_is_rejected(client):
    r = login(client, "admin", "wrong")
    assert r.status_code == 200
    assert translate("flash_invalid_credentials", "ar").encode() in r.data
    assert _stored_user(client) is None


def test_unknown_user_shows_inline_error(client):
    r = login(client, "nonexistent", "whatever")
    assert r.status_code == 200
    assert translate("flash_invalid_credentials", "ar").encode() in r.data
    assert _stored_user(client) is None


def test_donor_login_with_any_password(client):
    login(client, "donor", "anything-at-all")
    stored = _stored_user(client)
    assert stored["role"] == "donor"

    r = client.get("/admin/")
    assert r.status_code == 200
    assert b"Partner Organization" in r.data


def test_donor_login_refused_when_passwordless_disabled():
    app = create_app({
        "TESTING": True,
        "GEMINI_API_KEY": None,
        "DONOR_PASSWORDLESS_LOGIN": False,
    })
    client = app.test_client()
    login(client, "donor", "anything")
    assert _stored_user(client) is None


def test_logout_clears_session_user(client):
    login(client, "admin", "admin-pass")
    r = client.get("/logout")
    assert r.status_code == 302
    assert _stored_user(client) is None

    r = client.get("/admin/")
    assert r.status_code == 302
    assert "/login" in r.headers["Location"]


def test_authenticated_user_skips_login_page(client):
    login(client, "admin", "admin-pass")
    r = client.get("/login")
    assert r.status_code == 302
    assert r.headers["Location"].endswith("/admin/")


def test_admin_requires_login(client):
    r = client.get("/admin/")
    assert r.status_code == 302
    assert "/login" in r.headers["Location"]


def test_malformed_stored_user_means_signed_out(client):
    with client.session_transaction() as sess:
        sess[SESSION_USER_KEY] = "{not valid json"
    r = client.get("/admin/")
    assert r.status_code == 302
    assert "/login" in r.headers["Location"]


def test_stored_user_missing_fields_means_signed_out(client):
    with client.session_transaction() as sess:
        sess[SESSION_USER_KEY] = json.dumps({"username": "admin"})
    r = client.get("/api/me")
    assert r.status_code == 401


def test_stored_user_survives_requests(client):
    login(client, "admin", "admin-pass")
    r = client.get("/api/me")
    assert r.status_code == 200
    assert r.get_json()["username"] == "admin"


def test_staff_role_is_sent_home(client):
    with client.session_transaction() as sess:
        sess[SESSION_USER_KEY] = json.dumps(
            {"id": "9", "username": "clerk", "role": "staff", "name": "Clerk"})
    r = client.get("/admin/")
    assert r.status_code == 302
    assert r.headers["Location"].endswith("/")
    assert "/login" not in r.headers["Location"]
