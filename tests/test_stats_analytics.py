"""
Dashboard counters and appointment analytics.
"""

import asyncio
from datetime import date

from clinicvoice.adapters.db.memory.repositories import MemoryAppointmentRepository, MemoryPatientRepository
from clinicvoice.application.services.analytics import Granularity
from clinicvoice.application.use_cases.dashboard_stats import GetAnalyticsUseCase, GetDashboardStatsUseCase


def _stats(store, today):
    use_case = GetDashboardStatsUseCase(MemoryPatientRepository(store), MemoryAppointmentRepository(store))
    return asyncio.run(use_case.execute(today=today))


def _report(store, granularity=Granularity.DAY):
    use_case = GetAnalyticsUseCase(MemoryPatientRepository(store), MemoryAppointmentRepository(store))
    return asyncio.run(use_case.execute(granularity))


def test_dashboard_counts_for_a_clinic_day(store):
    stats = _stats(store, date(2026, 2, 17))
    assert stats.todayCount == 2
    assert stats.weekCount == 7
    assert stats.patientCount == 5


def test_dashboard_counts_for_a_quiet_week(store):
    stats = _stats(store, date(2026, 3, 1))
    # Sunday: the Monday-start week is 2026-02-23..2026-03-01
    assert stats.todayCount == 0
    assert stats.weekCount == 0


def test_stats_endpoint(client):
    response = client.get("/stats")
    assert response.status_code == 200
    data = response.json()["data"]
    assert set(data) == {"todayCount", "weekCount", "patientCount"}
    assert data["patientCount"] == 5


def test_report_totals_and_rates(store):
    report = _report(store)
    assert report.totals.total_appointments == 10
    assert report.totals.unique_days == 8
    assert report.totals.voice_booked == 4
    assert report.totals.unique_languages == 6
    assert report.totals.patient_count == 5
    assert report.rates.completion_rate == 0.3
    assert report.rates.cancellation_rate == 0.1
    assert report.rates.no_show_rate == 0.1


def test_report_rankings(store):
    report = _report(store)
    assert [(c.name, c.value) for c in report.by_type] == [
        ("Follow-up", 4),
        ("Lab Review", 3),
        ("New Consultation", 2),
        ("Procedure", 1),
    ]
    assert [(c.name, c.value) for c in report.by_time_slot] == [
        ("9 AM", 2),
        ("10 AM", 3),
        ("11 AM", 2),
        ("2 PM", 1),
        ("3 PM", 1),
        ("4 PM", 1),
    ]
    assert report.by_language[0].value == 2
    assert report.by_language[-1].value == 1


def test_daily_volume_is_chronological(store):
    volume = _report(store).volume
    periods = [b.period for b in volume]
    assert periods == sorted(periods)
    first = volume[0]
    assert first.period == "2026-02-16"
    assert first.label == "Mon"
    assert first.total == 2
    assert first.lab_review == 1
    assert first.follow_up == 1


def test_weekly_volume(store):
    volume = _report(store, Granularity.WEEK).volume
    assert volume[0].period == "2026-02-16"
    assert volume[0].label == "Week of 16 Feb"
    assert volume[0].total == 7


def test_analytics_endpoint_month_granularity(client):
    response = client.get("/analytics", params={"granularity": "month"})
    assert response.status_code == 200
    data = response.json()["data"]
    assert data["granularity"] == "month"
    assert [(b["period"], b["total"]) for b in data["volume"]] == [
        ("2026-02", 7),
        ("2026-03", 2),
        ("2026-04", 1),
    ]
    assert data["volume"][0]["label"] == "Feb 2026"


def test_analytics_endpoint_rejects_unknown_granularity(client):
    response = client.get("/analytics", params={"granularity": "year"})
    assert response.status_code == 400
