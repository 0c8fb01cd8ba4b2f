import re

import pytest

from app import create_app


@pytest.fixture
def app():
    app = create_app({
        "TESTING": True,
        "SECRET_KEY": "test-secret",
        "ADMIN_PASSWORD": "admin-pass",
        "GEMINI_API_KEY": None,
        "LOG_LEVEL": "WARNING",
    })
    return app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def store(app):
    return app.extensions["cpa_store"]


def get_csrf(html):
    match = re.search(r'name="csrf_token".*?value="(.+?)"', html)
    return match.group(1) if match else ""


def login(client, username, password):
    r = client.get("/login")
    token = get_csrf(r.data.decode())
    return client.post("/login", data={
        "username": username,
        "password": password,
        "csrf_token": token,
    }, follow_redirects=True)


def post_form(client, page, action, data):
    """Fetch ``page`` for a CSRF token, then POST ``data`` to ``action``."""
    r = client.get(page)
    payload = dict(data, csrf_token=get_csrf(r.data.decode()))
    return client.post(action, data=payload, follow_redirects=True)
