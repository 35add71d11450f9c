"""QR generation flow for text and uploaded media."""

import logging
from dataclasses import dataclass

from qr_vault.adapters.media_upload_client import MediaUploadClient
from qr_vault.domain.models import QrKind, QrRecord
from qr_vault.services.qr_codes import QrCollectionService

_logger = logging.getLogger(__name__)


@dataclass
class QrGenerationService:
    """Creates QR records, uploading media first when needed."""

    collection: QrCollectionService
    upload_client: MediaUploadClient

    def generate_text(self, payload: str) -> QrRecord:
        """Create and store a text QR record."""
        record = self.collection.new_record(QrKind.TEXT, payload)
        return self.collection.add(record)

    async def generate_media(
        self, kind: QrKind | str, filename: str, content: bytes
    ) -> QrRecord | None:
        """Upload media and store a QR record pointing at it.

        Returns None when the upload fails; the failure is logged and no
        record is created.
        """
        media_kind = QrKind(kind)
        if media_kind is QrKind.TEXT:
            raise ValueError("Text QR codes do not take a media upload")
        # Fail before uploading when nobody is logged in.
        self.collection.session_service.require()
        try:
            url = await self.upload_client.upload(filename, content)
        except Exception:
            _logger.exception("Error uploading media: %s", filename)
            return None
        record = self.collection.new_record(media_kind, url)
        return self.collection.add(record)
