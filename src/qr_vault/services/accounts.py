"""Account directory backed by the key-value store."""

import logging
from dataclasses import dataclass, field

from qr_vault.domain.errors import AccountNotFoundError
from qr_vault.domain.models import Account
from qr_vault.services.storage import USERS_KEY, KeyValueStore

_logger = logging.getLogger(__name__)

DUPLICATE_USERNAME_NOTICE = "Username already exists."
MISSING_FIELDS_NOTICE = "Username and password are required."


@dataclass(frozen=True)
class SignupResult:
    """Outcome of a signup attempt with an optional user-facing notice."""

    created: bool
    notice: str | None = None


@dataclass
class AccountDirectory:
    """Registered accounts, mirrored to the store on every change."""

    store: KeyValueStore
    _accounts: list[Account] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        raw = self.store.load(USERS_KEY)
        self._accounts = [
            Account.from_dict(item) for item in raw or [] if isinstance(item, dict)
        ]

    def exists(self, username: str) -> bool:
        """Return True when a case-sensitive match for username is registered."""
        return any(account.username == username for account in self._accounts)

    def register(self, username: str, password: str) -> SignupResult:
        """Register a new account unless the username is taken."""
        if not username or not password:
            return SignupResult(created=False, notice=MISSING_FIELDS_NOTICE)
        if self.exists(username):
            _logger.info("Signup rejected, username taken: %s", username)
            return SignupResult(created=False, notice=DUPLICATE_USERNAME_NOTICE)
        self._accounts.append(Account(username=username, password=password))
        self._persist()
        _logger.info("Registered account: %s", username)
        return SignupResult(created=True)

    def find_by_credentials(self, username: str, password: str) -> Account | None:
        """Return the account matching both fields exactly."""
        for account in self._accounts:
            if account.username == username and account.password == password:
                return account
        return None

    def get(self, username: str) -> Account | None:
        """Return the account for a username, if registered."""
        for account in self._accounts:
            if account.username == username:
                return account
        return None

    def list_accounts(self) -> list[Account]:
        """Return all accounts in registration order."""
        return list(self._accounts)

    def update_in_place(self, account: Account) -> None:
        """Replace the entry sharing the account's username."""
        for index, existing in enumerate(self._accounts):
            if existing.username == account.username:
                self._accounts[index] = account
                self._persist()
                return
        raise AccountNotFoundError(account.username)

    def _persist(self) -> None:
        self.store.save(USERS_KEY, [account.to_dict() for account in self._accounts])
