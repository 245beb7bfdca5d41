"""
Derived appointment analytics for the dashboard.

Groups appointments into day, week (Monday start) or month buckets with
per-type counts, ranks them by type, language and hour of day, and computes
completion, cancellation and no-show rates.
"""

import logging
from collections import Counter
from dataclasses import asdict, dataclass, field
from datetime import date
from enum import Enum
from typing import Any, Dict, List, Sequence

from ...core.utils.datetime_utils import hour_label, hour_label_sort_key, parse_date, week_bounds
from ...domain.entities.appointment import Appointment
from ...domain.enums.clinical import AppointmentStatus

logger = logging.getLogger(__name__)


class Granularity(str, Enum):
    DAY = "day"
    WEEK = "week"
    MONTH = "month"


@dataclass
class VolumeBucket:
    period: str
    label: str
    total: int = 0
    follow_up: int = 0
    new_consultation: int = 0
    procedure: int = 0
    lab_review: int = 0


@dataclass
class LabeledCount:
    name: str
    value: int


@dataclass
class AnalyticsTotals:
    total_appointments: int
    unique_days: int
    avg_per_day: float
    voice_booked: int
    unique_languages: int
    patient_count: int


@dataclass
class AnalyticsRates:
    completion_rate: float
    cancellation_rate: float
    no_show_rate: float


@dataclass
class AnalyticsReport:
    granularity: Granularity
    totals: AnalyticsTotals
    rates: AnalyticsRates
    volume: List[VolumeBucket] = field(default_factory=list)
    by_type: List[LabeledCount] = field(default_factory=list)
    by_language: List[LabeledCount] = field(default_factory=list)
    by_time_slot: List[LabeledCount] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data["granularity"] = self.granularity.value
        return data


def _bucket_key(day: date, granularity: Granularity) -> tuple:
    """(sortable period key, display label)."""
    if granularity == Granularity.DAY:
        return day.isoformat(), day.strftime("%a")
    if granularity == Granularity.WEEK:
        monday, _ = week_bounds(day)
        return monday.isoformat(), f"Week of {monday.strftime('%d %b')}"
    return day.strftime("%Y-%m"), day.strftime("%b %Y")


def volume_by_period(appointments: Sequence[Appointment], granularity: Granularity) -> List[VolumeBucket]:
    buckets: Dict[str, VolumeBucket] = {}
    for appointment in appointments:
        day = parse_date(appointment.date)
        if day is None:
            logger.warning(f"Skipping appointment with unparseable date: id={appointment.id} date={appointment.date}")
            continue
        period, label = _bucket_key(day, granularity)
        bucket = buckets.setdefault(period, VolumeBucket(period=period, label=label))
        bucket.total += 1
        setattr(bucket, appointment.type.value, getattr(bucket, appointment.type.value) + 1)
    return [buckets[key] for key in sorted(buckets)]


def _ranked(counter: Counter) -> List[LabeledCount]:
    # Ties keep first-seen order
    return [LabeledCount(name=name, value=value) for name, value in sorted(counter.items(), key=lambda kv: -kv[1])]


def count_by_type(appointments: Sequence[Appointment]) -> List[LabeledCount]:
    return _ranked(Counter(a.type.label for a in appointments))


def count_by_language(appointments: Sequence[Appointment]) -> List[LabeledCount]:
    return _ranked(Counter(a.language or "Unknown" for a in appointments))


def count_by_time_slot(appointments: Sequence[Appointment]) -> List[LabeledCount]:
    counter = Counter(hour_label(a.time) for a in appointments)
    return [
        LabeledCount(name=label, value=count)
        for label, count in sorted(counter.items(), key=lambda kv: hour_label_sort_key(kv[0]))
    ]


def _rate(part: int, total: int) -> float:
    return round(part / total, 3) if total else 0.0


def compute_rates(appointments: Sequence[Appointment]) -> AnalyticsRates:
    total = len(appointments)
    statuses = Counter(a.status for a in appointments)
    return AnalyticsRates(
        completion_rate=_rate(statuses[AppointmentStatus.COMPLETED], total),
        cancellation_rate=_rate(statuses[AppointmentStatus.CANCELLED], total),
        no_show_rate=_rate(statuses[AppointmentStatus.NO_SHOW], total),
    )


def compute_totals(appointments: Sequence[Appointment], patient_count: int) -> AnalyticsTotals:
    total = len(appointments)
    unique_days = len({a.date for a in appointments})
    return AnalyticsTotals(
        total_appointments=total,
        unique_days=unique_days,
        avg_per_day=round(total / unique_days, 1) if unique_days else 0.0,
        voice_booked=sum(1 for a in appointments if a.created_at),
        unique_languages=len({a.language for a in appointments if a.language}),
        patient_count=patient_count,
    )


def build_report(
    appointments: Sequence[Appointment],
    patient_count: int,
    granularity: Granularity = Granularity.DAY,
) -> AnalyticsReport:
    return AnalyticsReport(
        granularity=granularity,
        totals=compute_totals(appointments, patient_count),
        rates=compute_rates(appointments),
        volume=volume_by_period(appointments, granularity),
        by_type=count_by_type(appointments),
        by_language=count_by_language(appointments),
        by_time_slot=count_by_time_slot(appointments),
    )


__all__ = [
    "AnalyticsReport",
    "Granularity",
    "build_report",
    "compute_rates",
    "compute_totals",
    "count_by_language",
    "count_by_time_slot",
    "count_by_type",
    "volume_by_period",
]
