"""
Follow-up queue, follow-up updates and follow-up messaging.
"""

import asyncio
from datetime import date

from clinicvoice.adapters.db.memory.repositories import MemoryFollowUpRepository
from clinicvoice.application.use_cases.followups import GetFollowUpsUseCase
from clinicvoice.application.use_cases.send_followup import resolve_message_type
from clinicvoice.core.config import get_settings
from clinicvoice.core.exceptions import ConfigurationError, EmailDeliveryError
from clinicvoice.domain.entities.followup import FollowUpItem
from clinicvoice.domain.enums.clinical import FollowUpMessageType, FollowUpStatus, Urgency


def _queue(store, today):
    return asyncio.run(GetFollowUpsUseCase(MemoryFollowUpRepository(store)).execute(today=today))


def test_queue_orders_overdue_then_urgency(store):
    queue = _queue(store, date(2026, 2, 20))
    assert [f.patient_id for f in queue.followups] == ["pat_004", "pat_001", "pat_003", "pat_002", "pat_005"]
    assert queue.total == 5
    assert queue.overdue == 1
    assert queue.upcoming == 4


def test_past_due_upcoming_item_reported_overdue(store):
    queue = _queue(store, date(2026, 2, 22))
    assert [f.patient_id for f in queue.followups] == ["pat_003", "pat_004", "pat_001", "pat_002", "pat_005"]
    assert queue.overdue == 2
    assert queue.upcoming == 3
    # Stored record is left as it was
    stored = next(f for f in store.followups if f.patient_id == "pat_003")
    assert stored.status.value == "upcoming"


def test_unreadable_due_date_is_never_overdue():
    for due_date in ("", "soon"):
        item = FollowUpItem(
            patient_id="pat_009",
            patient_name="Test Patient",
            reason="Review",
            due_date=due_date,
            status=FollowUpStatus.UPCOMING,
            urgency=Urgency.LOW,
            last_visit="2026-02-01",
        )
        assert item.effective_status(date(2026, 2, 22)) == FollowUpStatus.UPCOMING


def test_get_followups_endpoint(client):
    response = client.post("/agent/get-followups", json={})
    assert response.status_code == 200
    data = response.json()["data"]
    assert data["total"] == 5
    assert data["overdue"] + data["upcoming"] == 5
    assert data["followups"][0]["status"] == "overdue"


def test_complete_followup(client, store):
    response = client.patch("/followups/pat_002", json={"status": "completed"})
    assert response.status_code == 200
    assert response.json()["data"]["status"] == "completed"
    assert next(f for f in store.followups if f.patient_id == "pat_002").status.value == "completed"


def test_reschedule_overdue_followup_reopens_it(client):
    data = client.patch("/followups/pat_004", json={"due_date": "2099-01-15"}).json()["data"]
    assert data["due_date"] == "2099-01-15"
    assert data["status"] == "upcoming"


def test_reschedule_rejects_bad_date(client):
    response = client.patch("/followups/pat_004", json={"due_date": "15/01/2099"})
    assert response.status_code == 400


def test_update_unknown_followup(client):
    response = client.patch("/followups/pat_999", json={"status": "completed"})
    assert response.status_code == 404
    assert response.json()["error"] == "FOLLOWUP_NOT_FOUND"


def test_send_followup_sms_only_by_default(client, store, email_service):
    response = client.post("/agent/send-followup", json={"patient_id": "pat_001"})
    assert response.status_code == 200
    data = response.json()["data"]
    assert data["channels"] == {"sms": "queued"}
    assert data["message_type"] == "appointment_reminder"
    assert data["body"].startswith("Dear Ramesh Iyer, this is a reminder")
    assert email_service.sent == []
    assert len(store.messages) == 1


def test_send_followup_email(client, email_service):
    clinic_name = get_settings().email.clinic_name
    response = client.post(
        "/agent/send-followup",
        json={"patient_id": "pat_002", "message_type": "lab_results", "send_email": True, "send_sms": False},
    )
    assert response.status_code == 200
    data = response.json()["data"]
    assert data["channels"] == {"email": "sent"}
    assert data["subject"] == f"Lab Results Follow-up — {clinic_name}"
    assert data["deliveries"][0]["provider_message_id"] == "email_1"

    to, subject, body = email_service.sent[0]
    assert to == "kavitha.suresh@example.com"
    assert subject == data["subject"]
    assert body.endswith(f" — {clinic_name}")


def test_send_followup_email_without_address(client, email_service):
    data = client.post(
        "/agent/send-followup",
        json={"patient_id": "pat_003", "send_email": True, "send_sms": True},
    ).json()["data"]
    assert data["channels"] == {"email": "skipped", "sms": "queued"}
    assert data["deliveries"][0]["detail"] == "No email address on file"
    assert email_service.sent == []


def test_send_followup_email_not_configured(client, email_service):
    email_service.error = ConfigurationError("EMAIL_API_KEY not configured")
    data = client.post(
        "/agent/send-followup",
        json={"patient_id": "pat_001", "send_email": True, "send_sms": False},
    ).json()["data"]
    assert data["channels"] == {"email": "skipped"}
    assert data["deliveries"][0]["detail"] == "Email delivery is not configured"


def test_send_followup_email_provider_failure(client, store, email_service):
    email_service.error = EmailDeliveryError("HTTP 500")
    response = client.post(
        "/agent/send-followup",
        json={"patient_id": "pat_001", "send_email": True},
    )
    assert response.status_code == 502
    assert response.json()["message"] == "Failed to deliver follow-up email"
    assert store.messages == []


def test_send_followup_custom_message(client):
    data = client.post(
        "/agent/send-followup",
        json={"patient_id": "pat_005", "message_type": "medication_check", "message": "  Please call the clinic.  "},
    ).json()["data"]
    assert data["body"] == "Please call the clinic."
    assert data["subject"].startswith("Medication Check-in")


def test_send_followup_unknown_type_falls_back(client):
    data = client.post(
        "/agent/send-followup",
        json={"patient_id": "pat_005", "message_type": "birthday_wishes"},
    ).json()["data"]
    assert data["message_type"] == "appointment_reminder"
    assert data["subject"].startswith("Appointment Reminder")


def test_send_followup_without_any_channel(client, store, email_service):
    response = client.post(
        "/agent/send-followup",
        json={"patient_id": "pat_001", "send_email": False, "send_sms": False},
    )
    assert response.status_code == 400
    assert response.json()["details"] == {"send_email": False, "send_sms": False}
    assert email_service.sent == []
    assert store.messages == []


def test_send_followup_unknown_patient(client):
    response = client.post("/agent/send-followup", json={"patient_id": "pat_999"})
    assert response.status_code == 404


def test_resolve_message_type():
    assert resolve_message_type("lab_results") == FollowUpMessageType.LAB_RESULTS
    assert resolve_message_type("") == FollowUpMessageType.APPOINTMENT_REMINDER
