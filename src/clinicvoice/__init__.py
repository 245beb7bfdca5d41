"""
Clinic Voice: voice-assisted clinic management backend

Appointment calendar, patient roster, SOAP documentation, pattern alerts,
analytics and follow-up messaging behind a REST API, wired to a
conversational voice agent, a text-to-speech endpoint and an email API.
"""

__version__ = "0.1.0"
__author__ = "Clinic Voice Team"
__description__ = "Voice-assisted clinic management backend"
