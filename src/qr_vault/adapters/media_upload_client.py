"""Media hosting upload client."""

from dataclasses import dataclass
from typing import Protocol

import httpx

from qr_vault.domain.errors import MediaUploadError


class MediaUploadClient(Protocol):
    """Interface for uploading media files to a public host."""

    async def upload(self, filename: str, content: bytes) -> str:
        """Upload a file and return its public URL."""


@dataclass
class HttpxMediaUploadClient(MediaUploadClient):
    """Unsigned multipart upload using an upload preset."""

    upload_url: str
    upload_preset: str
    http_client: httpx.AsyncClient
    timeout_seconds: float = 30.0

    @classmethod
    def create(
        cls, upload_url: str, upload_preset: str, timeout_seconds: float = 30.0
    ) -> "HttpxMediaUploadClient":
        """Create an upload client with a managed httpx session."""
        return cls(
            upload_url=upload_url,
            upload_preset=upload_preset,
            http_client=httpx.AsyncClient(),
            timeout_seconds=timeout_seconds,
        )

    async def upload(self, filename: str, content: bytes) -> str:
        """Post the file and return the ``secure_url`` from the response."""
        response = await self.http_client.post(
            self.upload_url,
            data={"upload_preset": self.upload_preset},
            files={"file": (filename, content)},
            timeout=self.timeout_seconds,
        )
        response.raise_for_status()
        payload = response.json()
        secure_url = payload.get("secure_url") if isinstance(payload, dict) else None
        if not isinstance(secure_url, str) or not secure_url:
            raise MediaUploadError("Upload response did not include secure_url")
        return secure_url

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.http_client.aclose()


@dataclass
class UnconfiguredMediaUploadClient(MediaUploadClient):
    """Client used when no upload endpoint is configured."""

    async def upload(self, filename: str, content: bytes) -> str:
        """Always fail; media uploads need an endpoint."""
        raise MediaUploadError("Media upload endpoint is not configured")

    async def close(self) -> None:
        """Nothing to release."""
