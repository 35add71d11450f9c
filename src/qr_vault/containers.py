"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from qr_vault.adapters.json_file_store import JsonFileStore
from qr_vault.adapters.media_upload_client import (
    HttpxMediaUploadClient,
    MediaUploadClient,
    UnconfiguredMediaUploadClient,
)
from qr_vault.config import Settings
from qr_vault.services.accounts import AccountDirectory
from qr_vault.services.generation import QrGenerationService
from qr_vault.services.preferences import PreferencesService
from qr_vault.services.qr_codes import QrCollectionService
from qr_vault.services.rendering import QrRenderer
from qr_vault.services.sessions import SessionService
from qr_vault.services.storage import KeyValueStore


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    store: KeyValueStore
    account_directory: AccountDirectory
    session_service: SessionService
    qr_collection_service: QrCollectionService
    qr_generation_service: QrGenerationService
    qr_renderer: QrRenderer
    preferences_service: PreferencesService
    close_resources: Callable[[], Awaitable[None]]


def build_container(
    settings: Settings | None = None,
    store: KeyValueStore | None = None,
    upload_client: MediaUploadClient | None = None,
) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    resolved_store = store or JsonFileStore.create(resolved_settings.storage_dir)
    if upload_client is None:
        if resolved_settings.media_upload_enabled:
            upload_client = HttpxMediaUploadClient.create(
                upload_url=str(resolved_settings.media_upload_url),
                upload_preset=str(resolved_settings.media_upload_preset),
                timeout_seconds=resolved_settings.media_upload_timeout_seconds,
            )
        else:
            upload_client = UnconfiguredMediaUploadClient()
    account_directory = AccountDirectory(resolved_store)
    session_service = SessionService(account_directory, resolved_store)
    qr_collection_service = QrCollectionService(
        session_service=session_service,
        directory=account_directory,
    )
    qr_generation_service = QrGenerationService(
        collection=qr_collection_service,
        upload_client=upload_client,
    )
    qr_renderer = QrRenderer(
        error_correction=resolved_settings.qr_error_correction,
        scale=resolved_settings.qr_scale,
        border=resolved_settings.qr_border,
    )
    preferences_service = PreferencesService(resolved_store)
    resolved_upload_client = upload_client

    async def close_resources() -> None:
        close = getattr(resolved_upload_client, "close", None)
        if close is not None:
            await close()

    return AppContainer(
        settings=resolved_settings,
        store=resolved_store,
        account_directory=account_directory,
        session_service=session_service,
        qr_collection_service=qr_collection_service,
        qr_generation_service=qr_generation_service,
        qr_renderer=qr_renderer,
        preferences_service=preferences_service,
        close_resources=close_resources,
    )
