"""Pydantic models for API payloads."""

from datetime import date

from pydantic import BaseModel

from qr_vault.domain.models import QrKind, QrRecord


class Credentials(BaseModel):
    """Signup or login form payload."""

    username: str
    password: str


class TextQrRequest(BaseModel):
    """Request to generate a text QR code."""

    payload: str


class QrRecordUpdate(BaseModel):
    """Replacement values for an existing QR record."""

    kind: QrKind
    payload: str
    created_date: date | None = None


class QrRecordOut(BaseModel):
    """QR record as returned by the API."""

    id: str
    kind: QrKind
    created_date: date
    payload: str

    @classmethod
    def from_record(cls, record: QrRecord) -> "QrRecordOut":
        """Build the response model from a domain record."""
        return cls(
            id=record.id,
            kind=record.kind,
            created_date=record.created_date,
            payload=record.payload,
        )


class AccountOut(BaseModel):
    """Logged-in account summary."""

    username: str
    qr_count: int
