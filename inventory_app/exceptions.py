"""Application errors, each mapped to the HTTP status it is reported with."""


class InventoryError(Exception):
    """Base exception for all application errors."""

    status_code = 500

    def __init__(self, message: str = "An internal error occurred", error: str | None = None):
        super().__init__(message)
        self.message = message
        self.error = error

    def to_dict(self) -> dict:
        body = {"message": self.message}
        if self.error:
            body["error"] = self.error
        return body


class ValidationError(InventoryError):
    """Malformed, missing or out-of-range input."""

    status_code = 400


class NotFoundError(InventoryError):
    """Raised when an id does not resolve to an existing row."""

    status_code = 404

    def __init__(self, message: str = "Resource not found", error: str | None = None):
        super().__init__(message, error)


class ConflictError(InventoryError):
    status_code = 409


class StoreError(InventoryError):
    """Underlying database failure; `error` holds the driver message."""

    status_code = 500
