"""
Clinic hours and appointment slot availability.

Weekdays 9:00 AM to 5:00 PM, Saturday 9:00 AM to 1:00 PM, closed Sunday.
Lunch 1:00 PM to 2:00 PM. Appointments occupy 30-minute slots starting on
the hour or half hour.
"""

from dataclasses import dataclass, field
from datetime import date, datetime, time, timedelta
from typing import Dict, Iterable, List, Optional, Tuple

from ...core.utils.datetime_utils import format_clock_time, parse_clock_time
from ...domain.entities.appointment import Appointment

SLOT_MINUTES = 30
MAX_ALTERNATIVES = 3

# weekday() -> (open, close); Sunday absent
CLINIC_HOURS: Dict[int, Tuple[time, time]] = {
    0: (time(9, 0), time(17, 0)),
    1: (time(9, 0), time(17, 0)),
    2: (time(9, 0), time(17, 0)),
    3: (time(9, 0), time(17, 0)),
    4: (time(9, 0), time(17, 0)),
    5: (time(9, 0), time(13, 0)),
}
LUNCH_BREAK: Tuple[time, time] = (time(13, 0), time(14, 0))


@dataclass
class SlotCheck:
    available: bool
    reason: Optional[str] = None
    alternatives: List[str] = field(default_factory=list)


def _add_minutes(value: time, minutes: int) -> time:
    return (datetime.combine(date.min, value) + timedelta(minutes=minutes)).time()


def _minutes(value: time) -> int:
    return value.hour * 60 + value.minute


def day_slots(day: date) -> List[time]:
    """Every bookable slot start for ``day`` (empty when the clinic is closed)."""
    hours = CLINIC_HOURS.get(day.weekday())
    if hours is None:
        return []
    opens, closes = hours
    slots = []
    current = opens
    while _minutes(current) + SLOT_MINUTES <= _minutes(closes):
        if not (LUNCH_BREAK[0] <= current < LUNCH_BREAK[1]):
            slots.append(current)
        current = _add_minutes(current, SLOT_MINUTES)
    return slots


def booked_slots(appointments: Iterable[Appointment], day: date) -> List[time]:
    """Start times already taken by scheduled appointments on ``day``."""
    iso_day = day.isoformat()
    taken = []
    for appointment in appointments:
        if appointment.date != iso_day or not appointment.is_scheduled:
            continue
        start = parse_clock_time(appointment.time)
        if start is not None:
            taken.append(start)
    return taken


def _outside_hours_reason(day: date, slot: time) -> Optional[str]:
    hours = CLINIC_HOURS.get(day.weekday())
    if hours is None:
        return "The clinic is closed on Sundays"
    opens, closes = hours
    if slot.minute % SLOT_MINUTES != 0 or slot.second:
        return "Appointments start on the hour or half hour"
    if slot < opens or _minutes(slot) + SLOT_MINUTES > _minutes(closes):
        return f"Outside clinic hours ({format_clock_time(opens)} to {format_clock_time(closes)})"
    if LUNCH_BREAK[0] <= slot < LUNCH_BREAK[1]:
        return "Lunch break (1:00 PM to 2:00 PM)"
    return None


def check_slot(day: date, slot: time, appointments: Iterable[Appointment]) -> SlotCheck:
    """Decide whether ``slot`` on ``day`` can be booked, suggesting nearby free slots when not."""
    taken = set(booked_slots(appointments, day))
    reason = _outside_hours_reason(day, slot)
    if reason is None and slot in taken:
        reason = "Another appointment is already scheduled at this time"
    if reason is None:
        return SlotCheck(available=True)

    free = [s for s in day_slots(day) if s not in taken]
    requested = _minutes(slot)
    nearest = sorted(free, key=lambda s: (abs(_minutes(s) - requested), _minutes(s)))[:MAX_ALTERNATIVES]
    return SlotCheck(
        available=False,
        reason=reason,
        alternatives=[format_clock_time(s) for s in sorted(nearest)],
    )
