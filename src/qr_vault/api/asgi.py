"""ASGI entrypoint for the QR vault API."""

from qr_vault.api.app import create_app
from qr_vault.containers import build_container

app = create_app(build_container())
