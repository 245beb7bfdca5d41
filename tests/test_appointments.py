"""
Appointment calendar, schedule check and booking endpoint tests.
"""


def test_list_all_appointments(client):
    response = client.get("/appointments")
    assert response.status_code == 200
    assert len(response.json()["data"]) == 10


def test_filter_appointments(client):
    by_date = client.get("/appointments", params={"date": "2026-02-17"}).json()["data"]
    assert [a["id"] for a in by_date] == ["apt_003", "apt_004"]

    by_patient = client.get("/appointments", params={"patient_id": "pat_001"}).json()["data"]
    assert {a["id"] for a in by_patient} == {"apt_001", "apt_006", "apt_009"}

    completed = client.get("/appointments", params={"status": "completed"}).json()["data"]
    assert {a["id"] for a in completed} == {"apt_002", "apt_003", "apt_005"}


def test_filter_appointments_invalid_status(client):
    response = client.get("/appointments", params={"status": "postponed"})
    assert response.status_code == 400


def test_update_appointment_status(client, store):
    response = client.patch("/appointments/apt_008", json={"status": "cancelled"})
    assert response.status_code == 200
    assert response.json()["data"]["status"] == "cancelled"
    assert next(a for a in store.appointments if a.id == "apt_008").status.value == "cancelled"


def test_reinstating_cancelled_appointment_into_rebooked_slot_conflicts(client, store):
    first = client.post(
        "/agent/book-appointment",
        json={"patient_id": "pat_001", "date": "2026-03-03", "time": "10:00 AM", "reason": "BP check"},
    ).json()["data"]["appointment_id"]
    assert client.patch(f"/appointments/{first}", json={"status": "cancelled"}).status_code == 200

    rebooked = client.post(
        "/agent/book-appointment",
        json={"patient_id": "pat_002", "date": "2026-03-03", "time": "10:00 AM", "reason": "Review"},
    )
    assert rebooked.status_code == 200

    response = client.patch(f"/appointments/{first}", json={"status": "scheduled"})
    assert response.status_code == 409
    assert response.json()["error"] == "SLOT_UNAVAILABLE"
    at_slot = [
        a for a in store.appointments
        if a.date == "2026-03-03" and a.time == "10:00 AM" and a.status.value == "scheduled"
    ]
    assert [a.patient_id for a in at_slot] == ["pat_002"]


def test_reinstating_cancelled_appointment_into_free_slot(client):
    first = client.post(
        "/agent/book-appointment",
        json={"patient_id": "pat_001", "date": "2026-03-03", "time": "10:00 AM", "reason": "BP check"},
    ).json()["data"]["appointment_id"]
    client.patch(f"/appointments/{first}", json={"status": "cancelled"})

    response = client.patch(f"/appointments/{first}", json={"status": "scheduled"})
    assert response.status_code == 200
    assert response.json()["data"]["status"] == "scheduled"


def test_update_unknown_appointment(client):
    response = client.patch("/appointments/apt_999", json={"status": "completed"})
    assert response.status_code == 404
    assert response.json()["error"] == "APPOINTMENT_NOT_FOUND"


def test_check_schedule_available(client):
    response = client.post("/agent/check-schedule", json={"date": "2026-03-02", "time": "3:00 PM"})
    assert response.status_code == 200
    data = response.json()["data"]
    assert data["available"] is True
    assert data["alternatives"] == []
    assert data["message"] == "The slot on 2026-03-02 at 3:00 PM is available."


def test_check_schedule_conflict_suggests_nearby_slots(client):
    data = client.post("/agent/check-schedule", json={"date": "2026-03-02", "time": "11:00 AM"}).json()["data"]
    assert data["available"] is False
    assert data["reason"] == "Another appointment is already scheduled at this time"
    assert data["alternatives"] == ["10:00 AM", "10:30 AM", "11:30 AM"]
    assert data["message"].endswith("Nearby open slots: 10:00 AM, 10:30 AM, 11:30 AM.")


def test_cancelled_appointment_frees_slot(client):
    # apt_004 at 11:30 AM on 2026-02-17 was cancelled
    data = client.post("/agent/check-schedule", json={"date": "2026-02-17", "time": "11:30 AM"}).json()["data"]
    assert data["available"] is True


def test_check_schedule_lunch_break(client):
    data = client.post("/agent/check-schedule", json={"date": "2026-03-02", "time": "1:00 PM"}).json()["data"]
    assert data["available"] is False
    assert data["reason"] == "Lunch break (1:00 PM to 2:00 PM)"
    assert data["alternatives"] == ["12:00 PM", "12:30 PM", "2:00 PM"]


def test_check_schedule_sunday(client):
    data = client.post("/agent/check-schedule", json={"date": "2026-03-01", "time": "10:00 AM"}).json()["data"]
    assert data["available"] is False
    assert data["reason"] == "The clinic is closed on Sundays"
    assert data["alternatives"] == []


def test_check_schedule_saturday_afternoon(client):
    data = client.post("/agent/check-schedule", json={"date": "2026-03-07", "time": "1:00 PM"}).json()["data"]
    assert data["available"] is False
    assert data["reason"] == "Outside clinic hours (9:00 AM to 1:00 PM)"


def test_check_schedule_invalid_date(client):
    response = client.post("/agent/check-schedule", json={"date": "next tuesday", "time": "10:00 AM"})
    assert response.status_code == 400
    assert response.json()["details"]["field"] == "date"


def test_check_schedule_missing_time(client):
    response = client.post("/agent/check-schedule", json={"date": "2026-03-02"})
    assert response.status_code == 400


def test_book_appointment(client, store):
    response = client.post(
        "/agent/book-appointment",
        json={
            "patient_id": "pat_004",
            "date": "2026-03-04",
            "time": "10:30 AM",
            "type": "procedure",
            "reason": "Second knee injection",
        },
    )
    assert response.status_code == 200
    data = response.json()["data"]
    assert data["appointment_id"].startswith("apt_")
    assert data["patient_name"] == "Deepa Krishnan"
    assert data["type"] == "procedure"
    assert data["message"] == "Appointment scheduled for Deepa Krishnan on 2026-03-04 at 10:30 AM"

    appointment = data["appointment"]
    assert appointment["status"] == "scheduled"
    assert appointment["language"] == "Malayalam"
    assert appointment["created_at"].endswith("Z")
    assert len(store.appointments) == 11


def test_book_appointment_defaults_to_follow_up(client):
    data = client.post(
        "/agent/book-appointment",
        json={"patient_id": "pat_001", "date": "2026-03-03", "time": "9:00 AM", "reason": "BP check"},
    ).json()["data"]
    assert data["type"] == "follow_up"


def test_book_appointment_for_unlisted_patient(client):
    data = client.post(
        "/agent/book-appointment",
        json={"patient_id": "walk_in_01", "date": "2026-03-03", "time": "9:30 AM", "reason": "Fever"},
    ).json()["data"]
    assert data["patient_name"] == "Unknown"
    assert data["appointment"]["language"] == ""


def test_book_appointment_name_override(client):
    data = client.post(
        "/agent/book-appointment",
        json={
            "patient_id": "walk_in_02",
            "patient_name": "Priya Nair",
            "language": "English",
            "date": "2026-03-03",
            "time": "10:00 AM",
            "reason": "Rash",
        },
    ).json()["data"]
    assert data["patient_name"] == "Priya Nair"
    assert data["appointment"]["language"] == "English"


def test_book_taken_slot_conflicts(client, store):
    response = client.post(
        "/agent/book-appointment",
        json={"patient_id": "pat_005", "date": "2026-03-02", "time": "11:00 AM", "reason": "Back pain"},
    )
    assert response.status_code == 409
    body = response.json()
    assert body["error"] == "SLOT_UNAVAILABLE"
    assert body["details"]["alternatives"] == ["10:00 AM", "10:30 AM", "11:30 AM"]
    assert len(store.appointments) == 10


def test_double_booking_is_rejected(client):
    payload = {"patient_id": "pat_002", "date": "2026-03-05", "time": "2:00 PM", "reason": "Review"}
    assert client.post("/agent/book-appointment", json=payload).status_code == 200
    assert client.post("/agent/book-appointment", json=payload).status_code == 409


def test_book_appointment_invalid_type(client):
    response = client.post(
        "/agent/book-appointment",
        json={"patient_id": "pat_001", "date": "2026-03-03", "time": "9:00 AM", "type": "surgery", "reason": "X"},
    )
    assert response.status_code == 400
    assert response.json()["error"] == "INVALID_INPUT"


def test_book_appointment_invalid_time(client):
    response = client.post(
        "/agent/book-appointment",
        json={"patient_id": "pat_001", "date": "2026-03-03", "time": "25:00", "reason": "X"},
    )
    assert response.status_code == 400
    assert response.json()["details"]["field"] == "time"
