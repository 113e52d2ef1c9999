from fastapi.testclient import TestClient

from chartwheel.main import app

client = TestClient(app)

PAYLOAD = {
    "planets": [
        {"name": "Sun", "longitude": 130.0, "sign": "Leo", "degree_in_sign": 10.0, "retrograde": False},
        {"name": "Ascendant", "longitude": 160.0, "sign": "Virgo", "degree_in_sign": 10.0, "retrograde": False},
        {"name": "Mars", "longitude": 0.0, "sign": "Zzz", "degree_in_sign": 0.0, "retrograde": False},
    ],
    "aspects": [
        {"planet1": "Sun", "planet2": "Mars", "aspect": "Trine", "angle": 120.0, "orb": 1.5},
    ],
    "ayanamsa": "lahiri",
    "julian_day": 2451545.0,
}


def test_health():
    r = client.get("/health")
    assert r.status_code == 200
    assert r.json()["ok"] is True


def test_houses_endpoint():
    r = client.post("/api/chart/houses", json=PAYLOAD)
    assert r.status_code == 200
    body = r.json()
    assert len(body["houses"]) == 12
    assert body["houses"][0] == {"house": 1, "sign": "Virgo", "planets": []}
    assert body["houses"][11]["planets"] == ["Su"]
    assert body["ascendant_source"] == "ascendant"
    assert body["dropped"] == ["Mars"]
    assert body["dropped_count"] == 1


def test_layout_endpoint_uses_defaults():
    r = client.post("/api/chart/layout", json={"chart": PAYLOAD})
    assert r.status_code == 200
    layout = r.json()["layout"]
    assert layout["size"] == 300
    assert layout["margin"] == 2
    assert len(layout["regions"]) == 12
    assert layout["regions"][0]["points"][0] == [150.0, 2.0]


def test_svg_endpoint():
    r = client.post("/api/chart/svg", json={"chart": PAYLOAD, "size": 280, "margin": 2})
    assert r.status_code == 200
    assert r.headers["content-type"].startswith("image/svg+xml")
    assert "Vir*" in r.text


def test_summary_endpoint():
    r = client.post("/api/chart/summary", json=PAYLOAD)
    assert r.status_code == 200
    body = r.json()
    assert body["sun_sign"] == "Leo"
    assert body["moon_sign"] is None
    assert body["aspects"] == [{"title": "Sun Trine Mars", "orb": "orb 1.5°"}]


def test_invalid_canvas_is_rejected():
    assert client.post("/api/chart/layout", json={"chart": PAYLOAD, "size": 0}).status_code == 422
    assert client.post("/api/chart/layout", json={"chart": PAYLOAD, "margin": -1}).status_code == 422
    r = client.post("/api/chart/layout", json={"chart": PAYLOAD, "size": 100, "margin": 50})
    assert r.status_code == 400


def test_missing_sign_is_a_validation_error():
    r = client.post("/api/chart/houses", json={"planets": [{"name": "Sun"}]})
    assert r.status_code == 422


def test_infinite_canvas_is_rejected():
    for body in ('{"chart": {"planets": []}, "size": Infinity}', '{"chart": {"planets": []}, "margin": Infinity}'):
        r = client.post("/api/chart/layout", content=body, headers={"content-type": "application/json"})
        assert r.status_code == 422
