"""API errors and validation helpers."""

from settings import AJAX_ACTION


class AuthorizationError(Exception):
    """Missing or invalid request token."""

    code = "invalid_token"

    def __init__(self, message: str = "Invalid or expired request token"):
        self.message = message
        super().__init__(self.message)


class ValidationError(Exception):
    """Validation error."""

    code = "invalid_request"

    def __init__(self, message: str = "Validation error", code: str | None = None):
        self.message = message
        if code:
            self.code = code
        super().__init__(self.message)


def validate_action(action: str) -> None:
    """Only the FAQ filter action is served."""
    if action != AJAX_ACTION:
        raise ValidationError(f"Unknown action: {action!r}", code="unknown_action")
