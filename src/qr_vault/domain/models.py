"""Domain models for accounts and their QR codes."""

from dataclasses import dataclass, field, replace
from datetime import date
from enum import StrEnum


class QrKind(StrEnum):
    """Kind of content a QR code points at."""

    TEXT = "text"
    IMAGE = "image"
    VIDEO = "video"


@dataclass(frozen=True)
class QrRecord:
    """Represents a generated QR code."""

    id: str
    kind: QrKind
    created_date: date
    payload: str

    def to_dict(self) -> dict[str, str]:
        """Serialize to the stored layout."""
        return {
            "id": self.id,
            "type": self.kind.value,
            "date": self.created_date.isoformat(),
            "qr": self.payload,
        }

    @classmethod
    def from_dict(cls, data: dict[str, object]) -> "QrRecord":
        """Build a record from the stored layout."""
        return cls(
            id=str(data["id"]),
            kind=QrKind(str(data["type"])),
            created_date=date.fromisoformat(str(data["date"])),
            payload=str(data.get("qr", "")),
        )


@dataclass(frozen=True)
class Account:
    """Represents a registered account and its QR collection."""

    username: str
    password: str
    qr_collection: tuple[QrRecord, ...] = field(default_factory=tuple)

    def with_collection(self, records: list[QrRecord]) -> "Account":
        """Return a copy holding ``records`` as its collection."""
        return replace(self, qr_collection=tuple(records))

    def to_dict(self) -> dict[str, object]:
        """Serialize to the stored layout."""
        return {
            "userName": self.username,
            "password": self.password,
            "qrData": [record.to_dict() for record in self.qr_collection],
        }

    @classmethod
    def from_dict(cls, data: dict[str, object]) -> "Account":
        """Build an account from the stored layout."""
        raw_records = data.get("qrData") or []
        records = tuple(
            QrRecord.from_dict(item)
            for item in raw_records
            if isinstance(item, dict)
        )
        return cls(
            username=str(data["userName"]),
            password=str(data["password"]),
            qr_collection=records,
        )
