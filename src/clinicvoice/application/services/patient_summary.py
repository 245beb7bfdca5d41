"""
Rule-based patient summary used for verbal handoffs and the summary card.
"""

from typing import List, Sequence

from ...domain.entities.appointment import Appointment
from ...domain.entities.note import ClinicalNote
from ...domain.entities.patient import Patient
from ...domain.entities.summary import PatientSummary

RECENT_VISITS_IN_SUMMARY = 5


def key_concerns(patient: Patient, notes: Sequence[ClinicalNote]) -> List[str]:
    """Flags worth reading out first. ``notes`` must be newest first."""
    concerns = []
    if notes and "worsening" in notes[0].soap.assessment.lower():
        concerns.append("Condition worsening — needs close monitoring")
    if patient.allergies:
        concerns.append(f"Drug allergies: {', '.join(patient.allergies)}")
    if len(patient.chronic_conditions) >= 2:
        concerns.append("Multiple chronic conditions — consider drug interactions")
    return concerns


def build_patient_summary(
    patient: Patient,
    notes: Sequence[ClinicalNote],
    appointments: Sequence[Appointment],
) -> PatientSummary:
    """Compose the summary text from the roster entry, notes (newest first) and calendar."""
    diagnoses = ", ".join(patient.chronic_conditions) or "None documented"
    medications = "; ".join(m.describe() for m in patient.current_medications) or "None"
    allergies = ", ".join(patient.allergies) or "None"

    visit_lines = "\n".join(
        f"{note.date}: {note.soap.assessment}" for note in notes[:RECENT_VISITS_IN_SUMMARY]
    )
    upcoming = [a for a in appointments if a.is_scheduled]
    upcoming_text = (
        "; ".join(f"{a.date} — {a.reason}" for a in upcoming) if upcoming else "None scheduled"
    )

    summary_text = (
        f"Patient: {patient.name}, {patient.age}yo {patient.gender.value}\n"
        f"Blood Group: {patient.blood_group}\n"
        f"Diagnoses: {diagnoses}\n"
        f"Allergies: {allergies}\n"
        f"Current Medications: {medications}\n"
        f"\n"
        f"Visit History ({len(notes)} visits):\n"
        f"{visit_lines or 'No documented visits.'}\n"
        f"\n"
        f"Upcoming Appointments: {upcoming_text}"
    )

    return PatientSummary(
        patient_id=patient.id,
        patient_name=patient.name,
        summary_text=summary_text,
        key_concerns=key_concerns(patient, notes),
        last_visit_date=notes[0].date if notes else None,
        total_visits=len(notes),
    )
