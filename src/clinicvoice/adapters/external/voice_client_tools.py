"""
Normalization of client-tool callbacks from the voice platform.

The agent calls display tools with loosely typed parameters. Each handler
turns them into the display payload the UI renders, filling missing fields
with the same defaults the browser uses.
"""

import logging
from typing import Any, Callable, Dict, List, Optional

from clinicvoice.core.utils.datetime_utils import iso_timestamp
from clinicvoice.domain.value_objects.entity_id import new_note_id

logger = logging.getLogger(__name__)

SOAP_SECTIONS = {
    "s": "subjective",
    "subjective": "subjective",
    "o": "objective",
    "objective": "objective",
    "a": "assessment",
    "assessment": "assessment",
    "p": "plan",
    "plan": "plan",
}


class UnknownClientToolError(KeyError):
    def __init__(self, tool: str) -> None:
        self.tool = tool
        super().__init__(tool)


def _text(params: Dict[str, Any], key: str, default: str = "") -> str:
    value = params.get(key)
    if value is None or value == "":
        return default
    return str(value)


def _records(params: Dict[str, Any], key: str) -> List[Dict[str, Any]]:
    raw = params.get(key)
    if not isinstance(raw, list):
        return []
    return [item for item in raw if isinstance(item, dict)]


def display_soap_note(params: Dict[str, Any]) -> Dict[str, Any]:
    return {
        "note_id": _text(params, "note_id") or new_note_id(),
        "subjective": _text(params, "subjective"),
        "objective": _text(params, "objective"),
        "assessment": _text(params, "assessment"),
        "plan": _text(params, "plan"),
    }


def update_soap_section(params: Dict[str, Any]) -> Dict[str, Any]:
    """Apply one section edit to the note supplied under ``note``."""
    note = params.get("note")
    current = display_soap_note(note if isinstance(note, dict) else {})
    section = _text(params, "section").strip().lower()
    # Anything unrecognised lands in the plan
    key = SOAP_SECTIONS.get(section, "plan")
    current[key] = _text(params, "content")
    return {**current, "updated_section": key}


def display_patient_summary(params: Dict[str, Any]) -> Dict[str, Any]:
    concerns = params.get("key_concerns")
    last_visit = params.get("last_visit_date")
    return {
        "patient_name": _text(params, "patient_name"),
        "summary_text": _text(params, "summary_text"),
        "key_concerns": [str(c) for c in concerns] if isinstance(concerns, list) else [],
        "last_visit_date": str(last_visit) if last_visit else None,
    }


def display_pattern_alerts(params: Dict[str, Any]) -> Dict[str, Any]:
    created_at = iso_timestamp()
    alerts = [
        {
            "id": _text(alert, "id", f"alert_{index}"),
            "patient_id": _text(alert, "patient_id"),
            "patient_name": _text(alert, "patient_name"),
            "severity": _text(alert, "severity", "info"),
            "title": _text(alert, "title"),
            "description": _text(alert, "description"),
            "recommendation": _text(alert, "recommendation"),
            "created_at": created_at,
        }
        for index, alert in enumerate(_records(params, "alerts"))
    ]
    return {"alerts": alerts}


def display_appointment_confirmation(params: Dict[str, Any]) -> Dict[str, Any]:
    return {
        "patient_name": _text(params, "patient_name"),
        "date": _text(params, "date"),
        "time": _text(params, "time"),
        "type": _text(params, "type", "follow_up"),
        "reason": _text(params, "reason"),
        "appointment_id": _text(params, "appointment_id"),
    }


def display_followup_queue(params: Dict[str, Any]) -> Dict[str, Any]:
    followups = [
        {
            "patient_id": _text(item, "patient_id"),
            "patient_name": _text(item, "patient_name"),
            "reason": _text(item, "reason"),
            "due_date": _text(item, "due_date"),
            "status": _text(item, "status", "upcoming"),
            "urgency": _text(item, "urgency", "medium"),
            "last_visit": _text(item, "last_visit"),
        }
        for item in _records(params, "followups")
    ]
    return {"followups": followups}


CLIENT_TOOLS: Dict[str, Callable[[Dict[str, Any]], Dict[str, Any]]] = {
    "display_soap_note": display_soap_note,
    "update_soap_section": update_soap_section,
    "display_patient_summary": display_patient_summary,
    "display_pattern_alerts": display_pattern_alerts,
    "display_appointment_confirmation": display_appointment_confirmation,
    "display_followup_queue": display_followup_queue,
}

CONFIRMATIONS = {
    "display_soap_note": "SOAP note displayed",
    "update_soap_section": "SOAP section updated",
    "display_patient_summary": "Patient summary displayed",
    "display_pattern_alerts": "Pattern alerts displayed",
    "display_appointment_confirmation": "Appointment confirmation displayed",
    "display_followup_queue": "Follow-up queue displayed",
}


def handle_client_tool(tool: str, params: Optional[Dict[str, Any]]) -> Dict[str, Any]:
    """Run the normalizer for ``tool``; raises UnknownClientToolError for anything else."""
    handler = CLIENT_TOOLS.get(tool)
    if handler is None:
        raise UnknownClientToolError(tool)
    logger.debug(f"Normalizing client tool payload: tool={tool}")
    return handler(params or {})
