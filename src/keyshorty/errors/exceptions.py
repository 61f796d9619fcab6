"""Custom exception classes for the KeyShorty API."""


class KeyShortyError(Exception):
    """Base exception for KeyShorty."""

    def __init__(self, code: str, message: str, status_code: int = 500):
        self.code = code
        self.message = message
        self.status_code = status_code
        super().__init__(message)


class ValidationError(KeyShortyError):
    """Request validation failure (missing fields, malformed body or path)."""

    def __init__(self, message: str):
        super().__init__("VALIDATION_ERROR", message, status_code=400)


class ConstraintError(KeyShortyError):
    """Storage-layer failure (uniqueness, foreign key, NOT NULL).

    Carries the raw message reported by the database driver.
    """

    def __init__(self, message: str):
        super().__init__("CONSTRAINT_ERROR", message, status_code=400)


class NotFoundError(KeyShortyError):
    """Resource not found."""

    def __init__(self, resource: str):
        super().__init__("NOT_FOUND", f"{resource} not found", status_code=404)
