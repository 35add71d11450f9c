"""QR symbol rendering."""

import io
from dataclasses import dataclass

import segno

from qr_vault.domain.models import QrRecord


@dataclass
class QrRenderer:
    """Render QR records to PNG or SVG using segno."""

    error_correction: str = "M"
    scale: int = 10
    border: int = 4

    def can_encode(self, payload: str) -> bool:
        """Return True when the payload fits in a QR symbol."""
        try:
            segno.make(payload, error=self.error_correction)
        except segno.DataOverflowError:
            return False
        return True

    def render_png(self, record: QrRecord) -> bytes:
        """Return PNG bytes encoding the record payload."""
        buffer = io.BytesIO()
        self._make(record).save(
            buffer, kind="png", scale=self.scale, border=self.border
        )
        return buffer.getvalue()

    def render_svg(self, record: QrRecord) -> str:
        """Return an SVG document encoding the record payload."""
        buffer = io.BytesIO()
        self._make(record).save(
            buffer, kind="svg", scale=self.scale, border=self.border
        )
        return buffer.getvalue().decode("utf-8")

    def _make(self, record: QrRecord) -> "segno.QRCode":
        return segno.make(record.payload, error=self.error_correction)
