import pytest
from fastapi.testclient import TestClient
from plantplan.main import app

client = TestClient(app)


def create_plan(**overrides):
    payload = {
        "party_name": "Acme", "size": "300", "type": "Printing", "print_name": "Rose",
        "micron": 50, "cutting_size": 400, "weight": 50,
    }
    payload.update(overrides)
    return client.post("/api/v1/production-plans/", json=payload)


def test_create_computes_meter_and_pieces():
    r = create_plan()
    assert r.status_code == 200, r.text
    plan = r.json()
    assert plan["meter"] == 1190
    assert plan["pcs"] == 2500
    assert plan["status"] == "PENDING"
    assert plan["label"] == "300x400 (Rose)"


def test_create_from_pieces():
    r = create_plan(weight=None, pcs=2500, edited_field="pieces")
    plan = r.json()
    assert plan["meter"] == 1200
    assert plan["weight"] == pytest.approx(50.4)


def test_incomplete_plan_is_rejected():
    r = create_plan(weight=None)
    assert r.status_code == 422
    assert r.json()["detail"] == "Please fill Party, Size and Weight"


def test_size_with_unit_suffix():
    plan = create_plan(size="300 mm").json()
    assert plan["meter"] == 1190


def test_print_name_only_for_printing():
    plan = create_plan(type="Roll").json()
    assert plan["print_name"] == ""
    assert plan["label"] == "300x400"


def test_update_recalculates_from_edited_field():
    plan = create_plan().json()
    r = client.put(f"/api/v1/production-plans/{plan['id']}", json={"pcs": 2500, "edited_field": "pieces"})
    assert r.status_code == 200
    updated = r.json()
    assert updated["meter"] == 1200
    assert updated["weight"] == pytest.approx(50.4)

    r = client.put(f"/api/v1/production-plans/{plan['id']}", json={"status": "COMPLETED"})
    assert r.json()["status"] == "COMPLETED"


def test_list_pending_first_and_delete():
    done = create_plan().json()
    client.put(f"/api/v1/production-plans/{done['id']}", json={"status": "COMPLETED"})
    pending = create_plan(party_name="Beta").json()

    ids = [p["id"] for p in client.get("/api/v1/production-plans/").json()]
    assert ids == [pending["id"], done["id"]]

    assert client.delete(f"/api/v1/production-plans/{done['id']}").status_code == 200
    assert client.get(f"/api/v1/production-plans/{done['id']}").status_code == 404


def test_update_without_edited_field_keeps_the_sent_value():
    plan = create_plan().json()
    r = client.put(f"/api/v1/production-plans/{plan['id']}", json={"pcs": 5000})
    assert r.status_code == 200
    updated = r.json()
    # 400 mm x 5000 pcs + 200 m setup
    assert updated["pcs"] == 5000
    assert updated["meter"] == 2200
    assert updated["weight"] == pytest.approx(92.4)

    roll = create_plan(type="Roll").json()
    r = client.put(f"/api/v1/production-plans/{roll['id']}", json={"meter": 2000})
    updated = r.json()
    assert updated["meter"] == 2000
    assert updated["weight"] == pytest.approx(84.0)
    assert updated["pcs"] == 5000


def test_update_with_two_values_needs_edited_field():
    plan = create_plan().json()
    r = client.put(f"/api/v1/production-plans/{plan['id']}", json={"pcs": 5000, "meter": 2000})
    assert r.status_code == 422
    r = client.put(f"/api/v1/production-plans/{plan['id']}",
                   json={"pcs": 5000, "meter": 2000, "edited_field": "meter"})
    assert r.status_code == 200
    assert r.json()["meter"] == 2000
