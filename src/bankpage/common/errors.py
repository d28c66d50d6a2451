"""Error kinds raised by the store and mapped to HTTP status codes at the API edge."""


class BankPageError(Exception):
    """Base class for all paging failures; ``status_code`` drives the HTTP response."""

    status_code: int = 500

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class CursorValidationError(BankPageError):
    """The ``current_update_at`` cursor is missing or not an RFC3339 timestamp."""

    status_code = 400


class BankNotFoundError(BankPageError):
    """No record exists in the requested direction from the cursor."""

    status_code = 404


class StoreError(BankPageError):
    """Any other persistence failure. The underlying exception is kept as ``__cause__``."""

    status_code = 500
