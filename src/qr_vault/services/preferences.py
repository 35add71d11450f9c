"""Display preferences."""

from dataclasses import dataclass
from typing import Literal

from qr_vault.services.storage import THEME_KEY, KeyValueStore

Theme = Literal["dark", "light"]


@dataclass
class PreferencesService:
    """Service for the persisted theme preference."""

    store: KeyValueStore

    def get_theme(self) -> Theme:
        """Return the stored theme or dark if unset."""
        return "light" if self.store.load(THEME_KEY) == "light" else "dark"

    def toggle_theme(self) -> Theme:
        """Flip between dark and light and persist the result."""
        theme: Theme = "light" if self.get_theme() == "dark" else "dark"
        self.store.save(THEME_KEY, theme)
        return theme
