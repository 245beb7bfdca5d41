"""
SOAP note saving and cached patient summary tests.
"""

from datetime import date


def _summarize(client, patient_id="pat_001"):
    response = client.post("/agent/summarize-history", json={"patient_id": patient_id})
    assert response.status_code == 200
    return response.json()["data"]


def test_save_note(client, store):
    response = client.post(
        "/agent/save-note",
        json={
            "patient_id": "pat_002",
            "subjective": "Tired, cold intolerance",
            "objective": "TSH 6.1",
            "assessment": "Hypothyroidism, under-replaced",
            "plan": "Increase Levothyroxine to 88mcg",
        },
    )
    assert response.status_code == 200
    body = response.json()
    assert body["message"] == "SOAP note saved for Kavitha Suresh"
    data = body["data"]
    assert data["note_id"].startswith("note_")
    assert data["soap"]["plan"] == "Increase Levothyroxine to 88mcg"

    saved = [n for n in store.notes if n.id == data["note_id"]]
    assert len(saved) == 1
    assert saved[0].date == date.today().isoformat()
    assert saved[0].mode.value == "dictate"


def test_save_note_optional_sections_default_empty(client):
    data = client.post(
        "/agent/save-note",
        json={"patient_id": "pat_005", "subjective": "Back pain", "assessment": "Mechanical low back pain"},
    ).json()["data"]
    assert data["soap"]["objective"] == ""
    assert data["soap"]["plan"] == ""


def test_save_note_missing_fields(client):
    response = client.post("/agent/save-note", json={"patient_id": "pat_001", "subjective": "Headache"})
    assert response.status_code == 400
    assert response.json()["error"] == "INVALID_INPUT"


def test_save_note_blank_subjective(client):
    response = client.post(
        "/agent/save-note",
        json={"patient_id": "pat_001", "subjective": "   ", "assessment": "Tension headache"},
    )
    assert response.status_code == 400


def test_save_note_unknown_patient(client):
    response = client.post(
        "/agent/save-note",
        json={"patient_id": "pat_999", "subjective": "Cough", "assessment": "URTI"},
    )
    assert response.status_code == 404


def test_summary_content(client):
    data = _summarize(client)
    assert data["patient_name"] == "Ramesh Iyer"
    assert data["total_visits"] == 2
    assert data["last_visit_date"] == "2026-02-10"
    assert data["key_concerns"] == [
        "Condition worsening — needs close monitoring",
        "Drug allergies: Sulfa drugs",
        "Multiple chronic conditions — consider drug interactions",
    ]
    text = data["summary_text"]
    assert text.startswith("Patient: Ramesh Iyer, 58yo Male")
    assert "Current Medications: Metformin 500mg BD; Amlodipine 5mg OD; Aspirin 75mg OD" in text
    assert "2026-02-10: Type 2 Diabetes worsening" in text
    assert "2026-03-10 — Diabetes + BP review" in text
    assert data["cached"] is False


def test_summary_without_concerns(client):
    data = _summarize(client, "pat_005")
    assert data["key_concerns"] == []
    assert "Upcoming Appointments: 2026-04-15 — Annual health checkup" in data["summary_text"]


def test_summary_is_cached(client):
    first = _summarize(client)
    second = _summarize(client)
    assert first["cached"] is False
    assert second["cached"] is True
    assert second["generated_at"] == first["generated_at"]
    assert second["summary_text"] == first["summary_text"]


def test_saving_note_invalidates_summary(client):
    _summarize(client)
    client.post(
        "/agent/save-note",
        json={"patient_id": "pat_001", "subjective": "Feeling better", "assessment": "Diabetes improving"},
    )
    data = _summarize(client)
    assert data["cached"] is False
    assert data["total_visits"] == 3
    assert data["last_visit_date"] == date.today().isoformat()
    assert "Condition worsening — needs close monitoring" not in data["key_concerns"]


def test_note_for_other_patient_keeps_cache(client):
    _summarize(client, "pat_001")
    client.post(
        "/agent/save-note",
        json={"patient_id": "pat_002", "subjective": "Fatigue", "assessment": "Hypothyroidism"},
    )
    assert _summarize(client, "pat_001")["cached"] is True


def test_booking_invalidates_summary(client):
    _summarize(client, "pat_002")
    response = client.post(
        "/agent/book-appointment",
        json={"patient_id": "pat_002", "date": "2026-03-03", "time": "10:00 AM", "reason": "Thyroid review"},
    )
    assert response.status_code == 200
    data = _summarize(client, "pat_002")
    assert data["cached"] is False
    assert "2026-03-03 — Thyroid review" in data["summary_text"]


def test_status_change_invalidates_summary(client):
    _summarize(client, "pat_001")
    client.patch("/appointments/apt_006", json={"status": "completed"})
    data = _summarize(client, "pat_001")
    assert data["cached"] is False
    assert "HbA1c and renal panel" not in data["summary_text"]


def test_summary_unknown_patient(client):
    response = client.post("/agent/summarize-history", json={"patient_id": "pat_999"})
    assert response.status_code == 404


def test_summary_requires_patient_id(client):
    response = client.post("/agent/summarize-history", json={})
    assert response.status_code == 400
