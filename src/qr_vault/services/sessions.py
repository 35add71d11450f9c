"""Active session tracking."""

import logging
from dataclasses import dataclass, field

from qr_vault.domain.errors import NotAuthenticatedError
from qr_vault.domain.models import Account
from qr_vault.services.accounts import AccountDirectory
from qr_vault.services.storage import CURRENT_USER_KEY, KeyValueStore

_logger = logging.getLogger(__name__)


@dataclass
class SessionService:
    """Holds at most one logged-in account.

    The session keeps only the username; the account itself is always read
    from the directory so the two never diverge. A snapshot of the account is
    mirrored to the store under ``currentUser`` so a restart resumes the
    session.
    """

    directory: AccountDirectory
    store: KeyValueStore
    _username: str | None = field(default=None, init=False)

    def __post_init__(self) -> None:
        snapshot = self.store.load(CURRENT_USER_KEY)
        if not isinstance(snapshot, dict):
            return
        username = snapshot.get("userName")
        if isinstance(username, str) and self.directory.exists(username):
            self._username = username
            return
        _logger.warning("Discarding session snapshot for unknown account")
        self.store.remove(CURRENT_USER_KEY)

    def login(self, username: str, password: str) -> bool:
        """Start a session when the credentials match a registered account."""
        account = self.directory.find_by_credentials(username, password)
        if account is None:
            _logger.info("Login failed for %s", username)
            return False
        self._username = account.username
        self.store.save(CURRENT_USER_KEY, account.to_dict())
        _logger.info("Login succeeded for %s", username)
        return True

    def logout(self) -> None:
        """End the session and drop its persisted snapshot."""
        if self._username is not None:
            _logger.info("Logout for %s", self._username)
        self._username = None
        self.store.remove(CURRENT_USER_KEY)

    def current(self) -> Account | None:
        """Return the logged-in account, if any."""
        if self._username is None:
            return None
        return self.directory.get(self._username)

    def require(self) -> Account:
        """Return the logged-in account or raise NotAuthenticatedError."""
        account = self.current()
        if account is None:
            raise NotAuthenticatedError
        return account

    def save_snapshot(self, account: Account) -> None:
        """Persist the snapshot for the logged-in account."""
        if account.username != self._username:
            raise NotAuthenticatedError
        self.store.save(CURRENT_USER_KEY, account.to_dict())
