import pytest
from fastapi.testclient import TestClient
from plantplan.main import app

client = TestClient(app)


def create_direct_job(**overrides):
    payload = {
        "party_code": "ACME", "date": "2026-10-19", "micron": 40, "qty": 600,
        "sizer": 600, "roll_length": 2000, "coil_sizes": [250, 350],
    }
    payload.update(overrides)
    r = client.post("/api/v1/slitting-jobs/direct", json=payload)
    assert r.status_code == 200, r.text
    return r.json()


def test_direct_job_runs_master_roll_count_on_every_coil():
    job = create_direct_job()
    assert job["job_no"].startswith("M-")
    assert job["job_code"] == "ACME"
    assert job["plan_qty"] == 600
    assert [c["rolls"] for c in job["coils"]] == [11, 11]
    assert [c["target_qty"] for c in job["coils"]] == [300, 300]


def test_direct_job_default_roll_length():
    job = create_direct_job(roll_length=None)
    assert job["roll_length"] == 2000


def test_direct_job_validation():
    r = client.post("/api/v1/slitting-jobs/direct", json={
        "party_code": "ACME", "micron": 40, "qty": 600, "sizer": 600, "coil_sizes": [],
    })
    assert r.status_code == 422


def test_job_specs():
    job = create_direct_job()
    r = client.get(f"/api/v1/slitting-jobs/{job['id']}/specs")
    assert r.status_code == 200
    result = r.json()["result"]
    assert result["tube_1mtr_weight"] == pytest.approx(66.24)
    assert result["jumbo_roll_weight"] == pytest.approx(66.24)
    assert result["total_rolls"] == 11


def test_read_list_status_delete():
    job = create_direct_job()
    assert client.get(f"/api/v1/slitting-jobs/{job['id']}").status_code == 200
    assert client.get("/api/v1/slitting-jobs/999").status_code == 404

    r = client.put(f"/api/v1/slitting-jobs/{job['id']}/status", json={"status": "COMPLETED"})
    assert r.json()["status"] == "COMPLETED"
    assert len(client.get("/api/v1/slitting-jobs/", params={"status": "COMPLETED"}).json()) == 1
    assert client.get("/api/v1/slitting-jobs/", params={"status": "PENDING"}).json() == []

    assert client.delete(f"/api/v1/slitting-jobs/{job['id']}").status_code == 200
    assert client.get(f"/api/v1/slitting-jobs/{job['id']}").status_code == 404


def test_record_and_overwrite_rows():
    job = create_direct_job()
    coil = job["coils"][0]
    url = f"/api/v1/slitting-jobs/{job['id']}/coils/{coil['id']}/rows"

    r = client.post(url, json={"sr_no": 1, "gross_weight": 10.5, "core_weight": 0.5})
    assert r.status_code == 200, r.text
    row = r.json()
    assert row["net_weight"] == pytest.approx(10.0)
    assert row["meter"] == 720

    r = client.post(url, json={"sr_no": 1, "gross_weight": 12.5, "core_weight": 0.5})
    assert r.json()["id"] == row["id"]

    job = client.get(f"/api/v1/slitting-jobs/{job['id']}").json()
    assert job["status"] == "IN_PROGRESS"
    assert len(job["rows"]) == 1
    assert job["rows"][0]["net_weight"] == pytest.approx(12.0)

    r = client.delete(f"/api/v1/slitting-jobs/{job['id']}/rows/{row['id']}")
    assert r.status_code == 200
    assert client.get(f"/api/v1/slitting-jobs/{job['id']}").json()["rows"] == []


def test_row_for_unknown_coil():
    job = create_direct_job()
    r = client.post(f"/api/v1/slitting-jobs/{job['id']}/coils/999/rows",
                    json={"sr_no": 1, "gross_weight": 10, "core_weight": 0.5})
    assert r.status_code == 404
