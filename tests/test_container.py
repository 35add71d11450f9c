"""Tests for container wiring."""

import asyncio

from qr_vault.adapters.json_file_store import JsonFileStore
from qr_vault.adapters.media_upload_client import (
    HttpxMediaUploadClient,
    UnconfiguredMediaUploadClient,
)
from qr_vault.config import Settings
from qr_vault.containers import build_container


def test_build_container_creates_services(settings) -> None:
    container = build_container(settings)

    assert isinstance(container.store, JsonFileStore)
    assert isinstance(
        container.qr_generation_service.upload_client, UnconfiguredMediaUploadClient
    )
    assert container.qr_collection_service.directory is container.account_directory
    asyncio.run(container.close_resources())


def test_build_container_uses_httpx_upload_client_when_configured(tmp_path) -> None:
    settings = Settings(
        storage_dir=str(tmp_path),
        media_upload_url="https://media.example.com/upload",
        media_upload_preset="preset",
    )

    container = build_container(settings)

    client = container.qr_generation_service.upload_client
    assert isinstance(client, HttpxMediaUploadClient)
    assert client.upload_preset == "preset"
    asyncio.run(container.close_resources())


def test_close_resources_closes_injected_client(container, upload_client) -> None:
    asyncio.run(container.close_resources())

    assert upload_client.closed
