import pytest
from fastapi.testclient import TestClient
from plantplan.main import app

client = TestClient(app)

ORDERS = [{"size": 250, "quantity": 300, "micron": 40}, {"size": 350, "quantity": 300, "micron": 40}]


def test_root():
    r = client.get("/")
    assert r.status_code == 200
    assert r.json()["name"] == "Plant Planner"


def test_single_order():
    r = client.post("/api/v1/calculations/single-order", json={
        "size": 300, "micron": 50, "cutting_size": 400, "job_type": "Printing",
        "edited_field": "weight", "value": 50,
    })
    assert r.status_code == 200
    result = r.json()["result"]
    assert result["meter"] == 1190
    assert result["pieces"] == 2500
    assert result["extra_meter"] == 200


def test_single_order_incomplete_is_null():
    r = client.post("/api/v1/calculations/single-order", json={"size": 300, "edited_field": "weight", "value": 50})
    assert r.status_code == 200
    assert r.json()["result"] is None


def test_label_order_both_directions():
    r = client.post("/api/v1/calculations/label-order",
                    json={"size": 250, "micron": 40, "edited_field": "qty", "value": 100})
    assert r.json() == {"qty": 100, "meter": 7246}
    r = client.post("/api/v1/calculations/label-order",
                    json={"size": 250, "micron": 40, "edited_field": "meter", "value": 7246})
    assert r.json()["qty"] == pytest.approx(99.995)


def test_slitting_row_meter():
    r = client.post("/api/v1/calculations/slitting-row", json={"net_weight": 10, "size": 250, "micron": 40})
    assert r.json() == {"meter": 720}


def test_plant_plan_defaults_sizer_to_total_width():
    r = client.post("/api/v1/calculations/plant-plan", json={"orders": ORDERS, "micron": 40, "roll_length": 2000})
    assert r.status_code == 200
    result = r.json()["result"]
    assert result["sizer_width"] == 600
    assert result["total_rolls"] == 11
    assert [c["rolls"] for c in result["coil_breakdown"]] == [11, 8]
    assert result["needs_split_run"] is True


def test_plant_plan_incomplete_is_null():
    r = client.post("/api/v1/calculations/plant-plan", json={"orders": ORDERS, "micron": 40})
    assert r.status_code == 200
    assert r.json()["result"] is None


def test_multi_up():
    r = client.post("/api/v1/calculations/multi-up", json={
        "orders": ORDERS, "micron": 40, "roll_length": 2000, "multi_up_enabled": True,
    })
    result = r.json()["result"]
    assert result["multi_up"] is True
    assert result["sizer_width"] == 950
    assert [c["size"] for c in result["coil_breakdown"]] == [250, 700]
    assert result["split_run"]["phase2_coils"] == [1]


def test_multi_up_uses_default_roll_length():
    r = client.post("/api/v1/calculations/multi-up", json={"orders": ORDERS, "micron": 40})
    assert r.json()["result"]["roll_length"] == 2000


def test_multi_up_micron_mismatch():
    orders = [ORDERS[0], {"size": 350, "quantity": 300, "micron": 45}]
    r = client.post("/api/v1/calculations/multi-up", json={"orders": orders, "micron": 40, "roll_length": 2000})
    assert r.status_code == 422
    body = r.json()
    assert body["error"] == "MicronMismatch"
    assert "Microns must match" in body["detail"]
