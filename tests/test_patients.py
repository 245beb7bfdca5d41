"""
Patient roster, detail, lookup and history endpoint tests.
"""


def test_list_patients_enriched(client):
    response = client.get("/patients")
    assert response.status_code == 200
    patients = response.json()["data"]
    assert [p["id"] for p in patients] == ["pat_001", "pat_002", "pat_003", "pat_004", "pat_005"]

    ramesh = patients[0]
    assert ramesh["name"] == "Ramesh Iyer"
    assert ramesh["last_visit"] == "2026-02-10"
    assert ramesh["total_notes"] == 2
    assert ramesh["alert_counts"] == {"critical": 1, "warning": 2, "info": 1}
    assert ramesh["current_medications"][0] == {"name": "Metformin", "dosage": "500mg", "frequency": "BD"}


def test_list_patients_without_alerts(client):
    patients = {p["id"]: p for p in client.get("/patients").json()["data"]}
    assert patients["pat_005"]["alert_counts"] == {"critical": 0, "warning": 0, "info": 0}
    assert patients["pat_005"]["last_visit"] == "2025-04-10"


def test_get_patient_detail(client):
    response = client.get("/patients/pat_001")
    assert response.status_code == 200
    data = response.json()["data"]
    assert data["patient"]["id"] == "pat_001"
    assert [n["date"] for n in data["notes"]] == ["2026-02-10", "2026-01-06"]
    assert {a["id"] for a in data["appointments"]} == {"apt_001", "apt_006", "apt_009"}
    assert len(data["alerts"]) == 4


def test_get_patient_detail_unknown(client):
    response = client.get("/patients/pat_999")
    assert response.status_code == 404
    body = response.json()
    assert body["success"] is False
    assert body["error"] == "PATIENT_NOT_FOUND"


def test_lookup_without_name_returns_roster(client):
    response = client.post("/agent/lookup-patient", json={})
    assert response.status_code == 200
    data = response.json()["data"]
    assert data["total"] == 5
    assert data["patients"][0] == {
        "patient_id": "pat_001",
        "name": "Ramesh Iyer",
        "age": 58,
        "gender": "Male",
        "conditions": ["Type 2 Diabetes", "Hypertension"],
    }


def test_lookup_substring_match(client):
    data = client.post("/agent/lookup-patient", json={"name": "kavitha"}).json()["data"]
    assert data["found"] is True
    assert data["patient_id"] == "pat_002"
    assert data["total_notes"] == 2
    assert data["last_visit"] == "2026-02-14"
    assert data["active_alerts"] == 1


def test_lookup_falls_back_to_any_word(client):
    data = client.post("/agent/lookup-patient", json={"name": "Mr Farooq please"}).json()["data"]
    assert data["found"] is True
    assert data["name"] == "Mohammed Farooq"
    assert data["allergies"] == ["Penicillin", "Ibuprofen"]


def test_lookup_no_match_lists_available(client):
    data = client.post("/agent/lookup-patient", json={"name": "Zzyzx"}).json()["data"]
    assert data["found"] is False
    assert 'No patient found matching "Zzyzx"' in data["message"]
    assert "Ramesh Iyer" in data["message"]
    assert len(data["available_patients"]) == 5


def test_patient_history(client):
    response = client.post("/agent/get-patient-history", json={"patient_id": "pat_003"})
    assert response.status_code == 200
    data = response.json()["data"]
    assert data["patient"]["name"] == "Mohammed Farooq"
    assert data["total_visits"] == 1
    assert data["last_visit"] == "2026-02-16"
    assert {a["id"] for a in data["appointments"]} == {"apt_002", "apt_007"}


def test_patient_history_requires_patient_id(client):
    response = client.post("/agent/get-patient-history", json={})
    assert response.status_code == 400
    assert response.json()["error"] == "INVALID_INPUT"


def test_patient_history_blank_patient_id(client):
    response = client.post("/agent/get-patient-history", json={"patient_id": "  "})
    assert response.status_code == 400


def test_patient_history_unknown_patient(client):
    response = client.post("/agent/get-patient-history", json={"patient_id": "pat_999"})
    assert response.status_code == 404
