"""
Pattern alert checks for one patient and for the whole clinic.
"""


def test_patterns_for_all_patients(client):
    for payload in ({}, {"patient_id": "all"}):
        data = client.post("/agent/check-patterns", json=payload).json()["data"]
        assert data["total"] == 8
        assert data["critical"] == 2
        assert data["warnings"] == 5
        assert data["info"] == 1


def test_patterns_for_one_patient(client):
    data = client.post("/agent/check-patterns", json={"patient_id": "pat_001"}).json()["data"]
    assert data["total"] == 4
    assert (data["critical"], data["warnings"], data["info"]) == (1, 2, 1)
    assert {a["patient_id"] for a in data["alerts"]} == {"pat_001"}
    assert data["alerts"][0]["title"] == "HbA1c rising: 7.1% → 8.2% in 5 weeks"


def test_patterns_for_patient_without_alerts(client):
    data = client.post("/agent/check-patterns", json={"patient_id": "pat_005"}).json()["data"]
    assert data == {"alerts": [], "total": 0, "critical": 0, "warnings": 0, "info": 0}
