"""QR collection management for the logged-in account."""

from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import date
from typing import Literal
from uuid import uuid4

from qr_vault.domain.errors import DuplicateRecordError
from qr_vault.domain.models import Account, QrKind, QrRecord
from qr_vault.services.accounts import AccountDirectory
from qr_vault.services.sessions import SessionService

SortOrder = Literal["asc", "desc"]


def _new_id() -> str:
    return uuid4().hex


@dataclass
class QrCollectionService:
    """Add, remove, update and list the session account's QR records.

    Every mutation writes the account back to the directory and the session
    snapshot before returning. All operations raise NotAuthenticatedError
    when nobody is logged in.
    """

    session_service: SessionService
    directory: AccountDirectory
    id_factory: Callable[[], str] = field(default=_new_id)

    def records(self) -> list[QrRecord]:
        """Return the working list in insertion order."""
        return list(self.session_service.require().qr_collection)

    def new_record(
        self, kind: QrKind | str, payload: str, today: date | None = None
    ) -> QrRecord:
        """Build a record with a fresh id dated today."""
        return QrRecord(
            id=self.id_factory(),
            kind=QrKind(kind),
            created_date=today or date.today(),
            payload=payload,
        )

    def add(self, record: QrRecord) -> QrRecord:
        """Append a record to the collection."""
        account = self.session_service.require()
        if any(existing.id == record.id for existing in account.qr_collection):
            raise DuplicateRecordError(record.id)
        self._write_back(account, [*account.qr_collection, record])
        return record

    def remove(self, record_id: str) -> bool:
        """Remove the record with the given id; return whether one matched."""
        account = self.session_service.require()
        remaining = list(account.qr_collection)
        for index, existing in enumerate(remaining):
            if existing.id == record_id:
                del remaining[index]
                self._write_back(account, remaining)
                return True
        return False

    def update(self, record_id: str, record: QrRecord) -> bool:
        """Replace the record with the given id; return whether one matched."""
        account = self.session_service.require()
        if record.id != record_id and any(
            existing.id == record.id for existing in account.qr_collection
        ):
            raise DuplicateRecordError(record.id)
        updated: list[QrRecord] = []
        matched = False
        for existing in account.qr_collection:
            if existing.id == record_id and not matched:
                updated.append(record)
                matched = True
            else:
                updated.append(existing)
        if not matched:
            return False
        self._write_back(account, updated)
        return True

    def get(self, record_id: str) -> QrRecord | None:
        """Return a record by id, if present."""
        for record in self.session_service.require().qr_collection:
            if record.id == record_id:
                return record
        return None

    def filter_and_sort(
        self, kind: QrKind | str | None = None, order: SortOrder = "asc"
    ) -> list[QrRecord]:
        """Filter by kind (None or "all" keeps everything) and sort by date."""
        if order not in ("asc", "desc"):
            raise ValueError(f"Unsupported sort order: {order!r}")
        records = self.records()
        if kind is not None and kind != "all":
            wanted = QrKind(kind)
            records = [record for record in records if record.kind == wanted]
        # sorted() is stable; reversing the key keeps ties in insertion order.
        if order == "asc":
            return sorted(records, key=lambda record: record.created_date)
        return sorted(records, key=lambda record: -record.created_date.toordinal())

    def _write_back(self, account: Account, records: list[QrRecord]) -> None:
        updated = account.with_collection(records)
        self.directory.update_in_place(updated)
        self.session_service.save_snapshot(updated)
