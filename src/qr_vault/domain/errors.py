"""Domain errors."""


class QrVaultError(Exception):
    """Base error for the application."""


class NotAuthenticatedError(QrVaultError):
    """Raised when an operation needs an active session and none exists."""

    def __init__(self) -> None:
        super().__init__("No active session; log in first.")


class AccountNotFoundError(QrVaultError):
    """Raised when an account is expected in the directory but missing."""

    def __init__(self, username: str) -> None:
        super().__init__(f"Account {username!r} is not registered.")
        self.username = username


class DuplicateRecordError(QrVaultError):
    """Raised when adding a QR record whose id is already present."""

    def __init__(self, record_id: str) -> None:
        super().__init__(f"QR record {record_id!r} already exists.")
        self.record_id = record_id


class MediaUploadError(QrVaultError):
    """Raised when the media host returns an unusable response."""
