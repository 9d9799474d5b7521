class LeaveServiceError(Exception):
    """
    Base error for the leave core. Every failure is caller-input driven.
    """
    code = "error"

    def __init__(self, message: str, code: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        if code is not None:
            self.code = code

    def __str__(self) -> str:
        return self.message


class ValidationError(LeaveServiceError):
    """Bad input or business rule violation (HTTP 400)."""
    code = "validation_error"


class NotFound(LeaveServiceError):
    """Referenced employee or leave request does not exist (HTTP 404)."""
    code = "not_found"

    def __init__(self, entity: str, entity_id) -> None:
        super().__init__(f"{entity} not found")
        self.entity = entity
        self.entity_id = entity_id
