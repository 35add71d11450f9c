"""Shared test fixtures."""

from collections.abc import Callable
from dataclasses import dataclass, field
from itertools import count

import pytest

from qr_vault.adapters.media_upload_client import MediaUploadClient
from qr_vault.config import Settings
from qr_vault.containers import AppContainer, build_container
from qr_vault.domain.errors import MediaUploadError
from qr_vault.services.accounts import AccountDirectory
from qr_vault.services.qr_codes import QrCollectionService
from qr_vault.services.sessions import SessionService
from qr_vault.services.storage import InMemoryStore


@dataclass
class FakeMediaUploadClient(MediaUploadClient):
    """Fake upload client that records uploads and returns a fixed URL."""

    url: str = "https://media.example.com/upload/cat.png"
    uploads: list[tuple[str, bytes]] = field(default_factory=list)
    closed: bool = False

    async def upload(self, filename: str, content: bytes) -> str:
        self.uploads.append((filename, content))
        return self.url

    async def close(self) -> None:
        self.closed = True


@dataclass
class FailingMediaUploadClient(MediaUploadClient):
    """Fake upload client whose uploads always fail."""

    attempts: int = 0

    async def upload(self, filename: str, content: bytes) -> str:
        self.attempts += 1
        raise MediaUploadError("host unavailable")


def sequential_ids() -> Callable[[], str]:
    counter = count(1)
    return lambda: f"qr-{next(counter)}"


@dataclass
class Services:
    """Core services sharing one store."""

    store: InMemoryStore
    directory: AccountDirectory
    sessions: SessionService
    collection: QrCollectionService


def build_services(store: InMemoryStore | None = None) -> Services:
    resolved_store = store or InMemoryStore()
    directory = AccountDirectory(resolved_store)
    sessions = SessionService(directory, resolved_store)
    collection = QrCollectionService(
        session_service=sessions,
        directory=directory,
        id_factory=sequential_ids(),
    )
    return Services(
        store=resolved_store,
        directory=directory,
        sessions=sessions,
        collection=collection,
    )


@pytest.fixture
def settings(tmp_path) -> Settings:
    return Settings(storage_dir=str(tmp_path / "store"))


@pytest.fixture
def store() -> InMemoryStore:
    return InMemoryStore()


@pytest.fixture
def services(store: InMemoryStore) -> Services:
    return build_services(store)


@pytest.fixture
def upload_client() -> FakeMediaUploadClient:
    return FakeMediaUploadClient()


@pytest.fixture
def container(
    settings: Settings,
    store: InMemoryStore,
    upload_client: FakeMediaUploadClient,
) -> AppContainer:
    return build_container(settings, store=store, upload_client=upload_client)
