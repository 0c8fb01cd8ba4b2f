import pytest

from conftest import get_csrf, login, post_form
from routes.admin import AdminTab, TAB_VIEWS
from icons import Icon


@pytest.fixture
def admin_client(client):
    login(client, "admin", "admin-pass")
    return client


def delete(client, page, action):
    r = client.get(page)
    return client.post(action, data={"csrf_token": get_csrf(r.data.decode())},
                       follow_redirects=True)


# ── Navigation ────────────────────────────────────────

def test_every_tab_has_view_and_icon():
    assert set(TAB_VIEWS) == set(AdminTab)
    for template, icon in TAB_VIEWS.values():
        assert template.startswith("admin/")
        assert isinstance(icon, Icon)


@pytest.mark.parametrize("tab", [t for t in AdminTab if t is not AdminTab.DASHBOARD])
def test_tab_renders(admin_client, tab):
    r = admin_client.get(f"/admin/{tab.value}")
    assert r.status_code == 200


def test_dashboard_renders(admin_client):
    r = admin_client.get("/admin/")
    assert r.status_code == 200
    assert b'data-stat="total_reports"' in r.data


def test_dashboard_slug_redirects(admin_client):
    r = admin_client.get("/admin/dashboard")
    assert r.status_code == 302
    assert r.headers["Location"].endswith("/admin/")


def test_unknown_tab_is_404(admin_client):
    assert admin_client.get("/admin/nope").status_code == 404


def test_donor_can_use_panel(client):
    login(client, "donor", "x")
    assert client.get("/admin/products").status_code == 200


# ── Users ─────────────────────────────────────────────

def test_add_user(admin_client, store):
    r = post_form(admin_client, "/admin/users", "/admin/users/add", {
        "username": "clerk", "name": "Data Clerk", "role": "staff",
    })
    assert r.status_code == 200
    assert b"Data Clerk" in r.data
    added = [u for u in store.users if u.username == "clerk"]
    assert len(added) == 1
    assert added[0].role == "staff"


def test_add_duplicate_username_rejected(admin_client, store):
    r = admin_client.get("/admin/users")
    r = admin_client.post("/admin/users/add", data={
        "username": "donor", "name": "Copy", "role": "donor",
        "csrf_token": get_csrf(r.data.decode()),
    })
    assert r.status_code == 400
    assert len([u for u in store.users if u.username == "donor"]) == 1


def test_deleting_admin_is_refused(admin_client, store):
    r = delete(admin_client, "/admin/users", "/admin/users/1/delete")
    assert r.status_code == 200
    assert any(u.username == "admin" for u in store.users)


def test_admin_row_has_no_delete_button(admin_client):
    r = admin_client.get("/admin/users")
    assert b"/admin/users/1/delete" not in r.data
    assert b"/admin/users/2/delete" in r.data


def test_delete_other_user(admin_client, store):
    delete(admin_client, "/admin/users", "/admin/users/2/delete")
    assert [u.username for u in store.users] == ["admin"]


def test_delete_missing_user_is_404(admin_client):
    r = admin_client.get("/admin/users")
    r = admin_client.post("/admin/users/missing/delete",
                          data={"csrf_token": get_csrf(r.data.decode())})
    assert r.status_code == 404


def test_delete_requires_csrf(admin_client, store):
    r = admin_client.post("/admin/users/2/delete")
    assert r.status_code == 400
    assert len(store.users) == 2


# ── Products ──────────────────────────────────────────

def test_add_product_appears_everywhere(admin_client, store):
    post_form(admin_client, "/admin/products", "/admin/products/add", {
        "code": "X1", "name_ar": "منتج", "name_en": "Test Item", "price": "100",
    })
    product = store.products[-1]
    assert product.code == "X1"
    assert product.price == 100
    assert product.unit == "Unit"
    assert product.category == "General"

    r = admin_client.get("/admin/products")
    assert b"X1" in r.data
    r = admin_client.get("/prices")
    assert b"X1" in r.data
    assert b"Test Item" in r.data


def test_add_product_without_code_rejected(admin_client, store):
    before = len(store.products)
    r = admin_client.get("/admin/products")
    r = admin_client.post("/admin/products/add", data={
        "code": "", "price": "5", "csrf_token": get_csrf(r.data.decode()),
    })
    assert r.status_code == 400
    assert len(store.products) == before


def test_delete_product(admin_client, store):
    delete(admin_client, "/admin/products", "/admin/products/1/delete")
    assert all(p.code != "6291001" for p in store.products)
    r = admin_client.get("/prices")
    assert b"6291001" not in r.data


def test_delete_missing_product_is_404(admin_client):
    r = admin_client.get("/admin/products")
    r = admin_client.post("/admin/products/nope/delete",
                          data={"csrf_token": get_csrf(r.data.decode())})
    assert r.status_code == 404


# ── News ──────────────────────────────────────────────

def test_publish_news_goes_first(admin_client, store):
    post_form(admin_client, "/admin/content", "/admin/content/add", {
        "title_ar": "خبر جديد", "title_en": "Fresh News",
        "desc_ar": "تفاصيل", "desc_en": "Details",
    })
    assert store.news[0].title_en == "Fresh News"

    admin_client.get("/set-language/en")
    r = admin_client.get("/news")
    assert b"Fresh News" in r.data


def test_delete_news(admin_client, store):
    news_id = store.news[0].id
    delete(admin_client, "/admin/content", f"/admin/content/{news_id}/delete")
    assert all(n.id != news_id for n in store.news)


# ── Jobs ──────────────────────────────────────────────

def test_post_job(admin_client, store):
    post_form(admin_client, "/admin/hr", "/admin/hr/add", {
        "title_ar": "محاسب", "title_en": "Accountant", "job_type": "Part-time",
    })
    job = store.jobs[-1]
    assert job.title_en == "Accountant"
    assert job.type == "Part-time"
    assert job.location == "Taiz"

    admin_client.get("/set-language/en")
    assert b"Accountant" in admin_client.get("/careers").data


def test_delete_job(admin_client, store):
    job_id = store.jobs[0].id
    delete(admin_client, "/admin/hr", f"/admin/hr/{job_id}/delete")
    assert all(j.id != job_id for j in store.jobs)


# ── Reports and settings ──────────────────────────────

def test_reports_tab_lists_submissions(admin_client):
    post_form(admin_client, "/report", "/report", {
        "product_code": "6291002", "reported_price": "20000", "description": "rice",
    })
    r = admin_client.get("/admin/reports")
    assert r.status_code == 200
    assert b"report-marker" in r.data


def test_save_settings_updates_about_page(admin_client, store):
    data = store.profile.to_dict()
    data["about_ar"] = "نص تعريفي محدث"
    data["email"] = "contact@cpa-taiz.org"
    post_form(admin_client, "/admin/settings", "/admin/settings/save", data)
    assert store.profile.about_ar == "نص تعريفي محدث"

    r = admin_client.get("/about")
    assert "نص تعريفي محدث".encode() in r.data
    assert b"contact@cpa-taiz.org" in r.data


def test_save_settings_rejects_bad_email(admin_client, store):
    data = store.profile.to_dict()
    data["email"] = "not-an-email"
    r = admin_client.get("/admin/settings")
    data["csrf_token"] = get_csrf(r.data.decode())
    r = admin_client.post("/admin/settings/save", data=data)
    assert r.status_code == 400
    assert store.profile.email != "not-an-email"


@pytest.mark.parametrize("price", ["inf", "Infinity"])
def test_add_product_with_non_finite_price_rejected(admin_client, store, price):
    before = len(store.products)
    r = admin_client.get("/admin/products")
    r = admin_client.post("/admin/products/add", data={
        "code": "INF1", "price": price, "csrf_token": get_csrf(r.data.decode()),
    })
    assert r.status_code == 400
    assert len(store.products) == before
    assert all(p.code != "INF1" for p in store.products)


def test_reports_table_shows_whole_prices_without_decimals(admin_client):
    post_form(admin_client, "/report", "/report", {
        "product_code": "6291001", "reported_price": "1000", "description": "milk",
    })
    r = admin_client.get("/admin/reports")
    assert b">1000<" in r.data
    assert b"1000.0" not in r.data
    r = admin_client.get("/api/reports")
    assert r.get_json()["reports"][0]["reported_price"] == 1000
    assert b"Infinity" not in r.data
