import pytest

from conftest import post_form
from models.report import Location, marker_positions
from services.ai_analysis import (Analysis, ViolationAnalyzer, FALLBACK_EMPTY, FALLBACK_ERROR,
                                  build_prompt)


class FakeResponse:
    def __init__(self, text):
        self.text = text


class FakeModels:
    def __init__(self, text=None, error=None):
        self.text = text
        self.error = error
        self.calls = []

    def generate_content(self, model, contents):
        self.calls.append((model, contents))
        if self.error is not None:
            raise self.error
        return FakeResponse(self.text)


class FakeClient:
    def __init__(self, text=None, error=None):
        self.models = FakeModels(text=text, error=error)


def submit_report(client, **overrides):
    data = {
        "product_code": "6291001",
        "reported_price": "1000",
        "description": "Shop on Jamal street sells milk above the list price",
        "latitude": "",
        "longitude": "",
    }
    data.update(overrides)
    return post_form(client, "/report", "/report", data)


# ── Analyzer ──────────────────────────────────────────

def test_prompt_carries_report_details():
    prompt = build_prompt("Premium Milk (1L)", 1000.0, 850, "too expensive")
    assert "Product: Premium Milk (1L)" in prompt
    assert "Official Price: 850 YR" in prompt
    assert "Reported Price: 1000 YR" in prompt
    assert "too expensive" in prompt
    assert "Arabic" in prompt


def test_analyzer_returns_model_text():
    client = FakeClient(text="  زيادة 17.6% - خطورة متوسطة  ")
    analyzer = ViolationAnalyzer(client=client, model="test-model")
    result = analyzer.analyze("Milk", 1000, 850, "desc")
    assert not result.is_fallback
    assert result.text == "زيادة 17.6% - خطورة متوسطة"
    assert client.models.calls[0][0] == "test-model"


def test_analyzer_empty_text_uses_fallback():
    analyzer = ViolationAnalyzer(client=FakeClient(text=""))
    result = analyzer.analyze("Milk", 1000, 850, "desc")
    assert result.is_fallback
    assert result.text == FALLBACK_EMPTY


def test_analyzer_none_text_uses_fallback():
    analyzer = ViolationAnalyzer(client=FakeClient(text=None))
    assert analyzer.analyze("Milk", 1000, 850, "desc").text == FALLBACK_EMPTY


def test_analyzer_error_uses_fallback():
    analyzer = ViolationAnalyzer(client=FakeClient(error=RuntimeError("quota exceeded")))
    result = analyzer.analyze("Milk", 1000, 850, "desc")
    assert result.is_fallback
    assert result.text == FALLBACK_ERROR


def test_analyzer_without_key_uses_fallback():
    analyzer = ViolationAnalyzer(api_key=None)
    assert not analyzer.is_configured
    assert analyzer.analyze("Milk", 1000, 850, "desc").text == FALLBACK_ERROR


def test_analysis_kinds():
    assert Analysis.ok("x").kind == Analysis.OK
    assert Analysis.fallback("y").is_fallback


# ── Location ──────────────────────────────────────────

@pytest.mark.parametrize("lat, lng", [
    ("", ""),
    (None, None),
    ("abc", "44.0"),
    ("13.5", "nan"),
    ("inf", "44.0"),
    ("95", "44.0"),
    ("13.5", "200"),
])
def test_unusable_coordinates_are_dropped(lat, lng):
    assert Location.parse(lat, lng) is None


def test_valid_coordinates_parse():
    location = Location.parse("13.5795", "44.0209")
    assert location.lat == pytest.approx(13.5795)
    assert location.lng == pytest.approx(44.0209)


def test_marker_positions_follow_fixed_pattern():
    positions = marker_positions(["a", "b", "c"])
    assert [(top, left) for _r, top, left in positions] == [(30, 20), (42, 38), (54, 56)]


# ── Submission flow ───────────────────────────────────

def test_report_form_loads(client):
    r = client.get("/report")
    assert r.status_code == 200
    assert b"6291001" in r.data
    assert b'id="latitude"' in r.data


def test_submit_report_records_pending_report(client, store):
    r = submit_report(client)
    assert r.status_code == 200
    assert len(store.reports) == 1

    report = store.reports[0]
    assert report.product_code == "6291001"
    assert report.official_price == 850
    assert report.reported_price == 1000
    assert report.status == "pending"
    assert report.ai_analysis
    assert report.location is None
    assert report.price_increase_percent == pytest.approx(17.6)


def test_submit_report_without_ai_key_shows_fallback(client, store):
    r = submit_report(client)
    assert FALLBACK_ERROR.encode() in r.data
    assert store.reports[0].ai_analysis == FALLBACK_ERROR


def test_submit_report_uses_configured_analyzer(app, client, store):
    app.extensions["cpa_analyzer"] = ViolationAnalyzer(client=FakeClient(text="High severity"))
    r = submit_report(client)
    assert b"High severity" in r.data
    assert store.reports[0].ai_analysis == "High severity"


def test_submit_report_analyzer_failure_still_stores(app, client, store):
    app.extensions["cpa_analyzer"] = ViolationAnalyzer(client=FakeClient(error=ValueError("boom")))
    submit_report(client)
    assert store.reports[0].ai_analysis == FALLBACK_ERROR


def test_submit_report_keeps_valid_location(client, store):
    submit_report(client, latitude="13.58", longitude="44.02")
    location = store.reports[0].location
    assert location.lat == pytest.approx(13.58)
    assert location.lng == pytest.approx(44.02)


def test_submit_report_drops_invalid_location(client, store):
    submit_report(client, latitude="north", longitude="999")
    assert store.reports[0].location is None


def test_newest_report_first(client, store):
    submit_report(client, product_code="6291001")
    submit_report(client, product_code="6291002")
    assert [r.product_code for r in store.reports] == ["6291002", "6291001"]


def test_missing_fields_are_rejected(client, store):
    r = submit_report(client, description="", reported_price="")
    assert r.status_code == 200
    assert store.reports == []


def test_negative_price_is_rejected(client, store):
    submit_report(client, reported_price="-5")
    assert store.reports == []


@pytest.mark.parametrize("price", ["inf", "-inf", "nan", "Infinity"])
def test_non_finite_price_is_rejected(client, store, price):
    r = submit_report(client, reported_price=price)
    assert r.status_code == 200
    assert store.reports == []


def test_whole_price_is_stored_as_integer(client, store):
    submit_report(client, reported_price="1000")
    report = store.reports[0]
    assert report.reported_price == 1000
    assert isinstance(report.reported_price, int)
    assert report.to_dict()["reported_price"] == 1000


def test_fractional_price_is_kept(client, store):
    submit_report(client, reported_price="999.5")
    assert store.reports[0].reported_price == 999.5


def test_unknown_product_is_rejected(client, store):
    submit_report(client, product_code="0000000")
    assert store.reports == []


def test_report_without_csrf_is_rejected(client, store):
    r = client.post("/report", data={
        "product_code": "6291001",
        "reported_price": "1000",
        "description": "no token",
    })
    assert r.status_code == 400
    assert store.reports == []
