"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Literal

import segno
from fastapi import FastAPI, HTTPException, Request, Response, status
from fastapi.responses import JSONResponse

from qr_vault.api.models import (
    AccountOut,
    Credentials,
    QrRecordOut,
    QrRecordUpdate,
    TextQrRequest,
)
from qr_vault.app_logging import configure_logging
from qr_vault.containers import AppContainer
from qr_vault.domain.errors import NotAuthenticatedError
from qr_vault.domain.models import Account, QrRecord
from qr_vault.services.accounts import DUPLICATE_USERNAME_NOTICE

INVALID_CREDENTIALS_NOTICE = "Invalid username or password"
MISSING_CONTENT_NOTICE = "QR content is required."
OVERSIZED_CONTENT_NOTICE = "QR content is too long to encode."


def create_app(container: AppContainer) -> FastAPI:  # noqa: PLR0915
    """Create a FastAPI app configured with dependencies."""
    configure_logging()
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        yield
        await app.state.container.close_resources()

    app = FastAPI(lifespan=lifespan)
    app.state.container = container

    @app.exception_handler(NotAuthenticatedError)
    async def not_authenticated(
        request: Request, exc: NotAuthenticatedError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_401_UNAUTHORIZED, content={"detail": str(exc)}
        )

    def _container(request: Request) -> AppContainer:
        return request.app.state.container

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.post("/signup", status_code=status.HTTP_201_CREATED)
    async def signup(credentials: Credentials, request: Request) -> dict[str, str]:
        """Register a new account."""
        result = _container(request).account_directory.register(
            credentials.username, credentials.password
        )
        if result.notice == DUPLICATE_USERNAME_NOTICE:
            raise HTTPException(
                status_code=status.HTTP_409_CONFLICT, detail=result.notice
            )
        if not result.created:
            raise HTTPException(status_code=422, detail=result.notice)
        return {"status": "created"}

    @app.post("/login")
    async def login(credentials: Credentials, request: Request) -> AccountOut:
        """Start a session for matching credentials."""
        sessions = _container(request).session_service
        if not sessions.login(credentials.username, credentials.password):
            raise HTTPException(
                status_code=status.HTTP_401_UNAUTHORIZED,
                detail=INVALID_CREDENTIALS_NOTICE,
            )
        return _account_out(sessions.require())

    @app.post("/logout")
    async def logout(request: Request) -> dict[str, str]:
        """End the current session."""
        _container(request).session_service.logout()
        return {"status": "ok"}

    @app.get("/me")
    async def me(request: Request) -> AccountOut:
        """Return the logged-in account."""
        return _account_out(_container(request).session_service.require())

    @app.get("/qr")
    async def list_qr(
        request: Request,
        kind: str = "all",
        order: Literal["asc", "desc"] = "asc",
    ) -> dict[str, list[QrRecordOut]]:
        """List QR records filtered by kind and sorted by date."""
        try:
            records = _container(request).qr_collection_service.filter_and_sort(
                kind=kind, order=order
            )
        except ValueError as exc:
            raise HTTPException(status_code=422, detail=str(exc)) from exc
        return {"items": [QrRecordOut.from_record(record) for record in records]}

    @app.post("/qr/text", status_code=status.HTTP_201_CREATED)
    async def create_text_qr(body: TextQrRequest, request: Request) -> QrRecordOut:
        """Generate a text QR code."""
        state_container = _container(request)
        _check_content(state_container, body.payload)
        record = state_container.qr_generation_service.generate_text(body.payload)
        return QrRecordOut.from_record(record)

    @app.post("/qr/media", status_code=status.HTTP_201_CREATED)
    async def create_media_qr(
        request: Request,
        kind: Literal["image", "video"],
        filename: str = "upload",
    ) -> QrRecordOut:
        """Upload the request body as media and generate a QR code for it."""
        content = await request.body()
        if not content:
            raise HTTPException(
                status_code=422,
                detail="A media file is required.",
            )
        record = await _container(request).qr_generation_service.generate_media(
            kind, filename, content
        )
        if record is None:
            raise HTTPException(
                status_code=status.HTTP_502_BAD_GATEWAY,
                detail="Media upload failed.",
            )
        return QrRecordOut.from_record(record)

    @app.put("/qr/{record_id}")
    async def update_qr(
        record_id: str, body: QrRecordUpdate, request: Request
    ) -> QrRecordOut:
        """Replace an existing QR record."""
        state_container = _container(request)
        collection = state_container.qr_collection_service
        existing = collection.get(record_id)
        if existing is None:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
        _check_content(state_container, body.payload)
        replacement = QrRecord(
            id=record_id,
            kind=body.kind,
            created_date=body.created_date or existing.created_date,
            payload=body.payload,
        )
        collection.update(record_id, replacement)
        return QrRecordOut.from_record(replacement)

    @app.delete("/qr/{record_id}", status_code=status.HTTP_204_NO_CONTENT)
    async def delete_qr(record_id: str, request: Request) -> Response:
        """Delete a QR record."""
        if not _container(request).qr_collection_service.remove(record_id):
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
        return Response(status_code=status.HTTP_204_NO_CONTENT)

    @app.get("/qr/{record_id}/png")
    async def download_qr(record_id: str, request: Request) -> Response:
        """Download a QR record as a PNG image."""
        state_container = _container(request)
        record = state_container.qr_collection_service.get(record_id)
        if record is None:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
        try:
            image = state_container.qr_renderer.render_png(record)
        except segno.DataOverflowError as exc:
            logger.warning("QR code %s is too long to render", record_id)
            raise HTTPException(
                status_code=422, detail=OVERSIZED_CONTENT_NOTICE
            ) from exc
        return Response(
            content=image,
            media_type="image/png",
            headers={"Content-Disposition": 'attachment; filename="qr_code.png"'},
        )

    @app.get("/theme")
    async def get_theme(request: Request) -> dict[str, str]:
        """Return the current theme."""
        return {"theme": _container(request).preferences_service.get_theme()}

    @app.post("/theme/toggle")
    async def toggle_theme(request: Request) -> dict[str, str]:
        """Switch between dark and light themes."""
        return {"theme": _container(request).preferences_service.toggle_theme()}

    return app


def _account_out(account: Account) -> AccountOut:
    return AccountOut(username=account.username, qr_count=len(account.qr_collection))


def _check_content(container: AppContainer, payload: str) -> None:
    if not payload:
        raise HTTPException(status_code=422, detail=MISSING_CONTENT_NOTICE)
    if not container.qr_renderer.can_encode(payload):
        raise HTTPException(status_code=422, detail=OVERSIZED_CONTENT_NOTICE)
