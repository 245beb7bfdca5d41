class APIError(Exception):
    def __init__(self, code: str, message: str, http_status: int = 400, details: dict = None):
        super().__init__(message)
        self.code = code
        self.message = message
        self.http_status = http_status
        self.details = details


class BadRequestError(APIError):
    def __init__(self, message: str, details: dict = None):
        super().__init__("INVALID_INPUT", message, 400, details)


class NotFoundError(APIError):
    def __init__(self, message: str, details: dict = None, code: str = "NOT_FOUND"):
        super().__init__(code, message, 404, details)


class ConflictError(APIError):
    def __init__(self, message: str, details: dict = None, code: str = "CONFLICT"):
        super().__init__(code, message, 409, details)


class ServiceNotConfiguredError(APIError):
    def __init__(self, message: str, details: dict = None):
        super().__init__("SERVICE_NOT_CONFIGURED", message, 500, details)


class DownstreamError(APIError):
    def __init__(self, message: str, details: dict = None):
        super().__init__("DOWNSTREAM_ERROR", message, 502, details)


# Domain-specific
class PatientNotFoundError(NotFoundError):
    def __init__(self, patient_id: str):
        super().__init__("Patient not found", {"patient_id": patient_id}, "PATIENT_NOT_FOUND")


class AppointmentNotFoundError(NotFoundError):
    def __init__(self, appointment_id: str):
        super().__init__("Appointment not found", {"appointment_id": appointment_id}, "APPOINTMENT_NOT_FOUND")


class FollowUpNotFoundError(NotFoundError):
    def __init__(self, patient_id: str):
        super().__init__("Follow-up not found", {"patient_id": patient_id}, "FOLLOWUP_NOT_FOUND")
