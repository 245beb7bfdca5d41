"""
Clinic hours and slot availability rules.
"""

from datetime import date, time

from clinicvoice.application.services.scheduling import check_slot, day_slots
from clinicvoice.domain.entities.appointment import Appointment
from clinicvoice.domain.enums.clinical import AppointmentStatus, AppointmentType

MONDAY = date(2026, 3, 2)
SATURDAY = date(2026, 3, 7)
SUNDAY = date(2026, 3, 1)


def _appointment(clock: str, status: AppointmentStatus = AppointmentStatus.SCHEDULED) -> Appointment:
    return Appointment(
        id="apt_x",
        patient_id="pat_001",
        patient_name="Ramesh Iyer",
        date=MONDAY.isoformat(),
        time=clock,
        type=AppointmentType.FOLLOW_UP,
        reason="Review",
        status=status,
    )


def test_weekday_slots_skip_lunch():
    slots = day_slots(MONDAY)
    assert len(slots) == 14
    assert slots[0] == time(9, 0)
    assert slots[-1] == time(16, 30)
    assert time(13, 0) not in slots
    assert time(13, 30) not in slots


def test_saturday_slots():
    slots = day_slots(SATURDAY)
    assert len(slots) == 8
    assert slots[-1] == time(12, 30)


def test_sunday_closed():
    assert day_slots(SUNDAY) == []


def test_last_slot_of_the_day_is_bookable():
    assert check_slot(MONDAY, time(16, 30), []).available is True


def test_slot_ending_after_close_is_rejected():
    result = check_slot(MONDAY, time(17, 0), [])
    assert result.available is False
    assert result.reason == "Outside clinic hours (9:00 AM to 5:00 PM)"
    assert result.alternatives == ["3:30 PM", "4:00 PM", "4:30 PM"]


def test_off_grid_time_is_rejected():
    result = check_slot(MONDAY, time(10, 15), [])
    assert result.available is False
    assert result.reason == "Appointments start on the hour or half hour"


def test_only_scheduled_appointments_block():
    cancelled = _appointment("10:00 AM", AppointmentStatus.CANCELLED)
    assert check_slot(MONDAY, time(10, 0), [cancelled]).available is True

    scheduled = _appointment("10:00 AM")
    assert check_slot(MONDAY, time(10, 0), [scheduled]).available is False


def test_alternatives_are_free_and_chronological():
    taken = [_appointment("9:30 AM"), _appointment("10:00 AM"), _appointment("10:30 AM")]
    result = check_slot(MONDAY, time(10, 0), taken)
    assert result.alternatives == ["9:00 AM", "11:00 AM", "11:30 AM"]
