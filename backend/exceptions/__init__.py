from typing import Optional, Dict, Any

class VeritraceException(Exception):
    status_code: int = 500

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)
    
    def to_dict(self) -> Dict[str, Any]:
        return {
            "error": self.__class__.__name__,
            "message": self.message,
            "details": self.details
        }

class APIException(VeritraceException):
    status_code = 502

class LLMException(APIException):
    def __init__(self, reason: str, recoverable: bool = True):
        super().__init__(
            f"LLM service error: {reason}",
            {"reason": reason, "recoverable": recoverable}
        )

    @property
    def reason(self) -> str:
        return self.details["reason"]

class CircuitBreakerOpenException(APIException):
    status_code = 503

    def __init__(self, service_name: str, failure_count: int):
        super().__init__(
            f"Circuit breaker open for {service_name}",
            {"service": service_name, "failure_count": failure_count}
        )

class ValidationException(VeritraceException):
    status_code = 400

    def __init__(self, field: str, reason: str):
        super().__init__(
            f"Validation failed for {field}: {reason}",
            {"field": field, "reason": reason}
        )

class ReportNotFoundException(VeritraceException):
    status_code = 404

    def __init__(self, report_id: str):
        super().__init__(
            f"Report {report_id} not found",
            {"report_id": report_id}
        )

class ReportStateException(VeritraceException):
    """Raised when a report that already reached a terminal status is written again."""
    status_code = 409

    def __init__(self, report_id: str, status: str):
        super().__init__(
            f"Report {report_id} is already {status}",
            {"report_id": report_id, "status": status}
        )
