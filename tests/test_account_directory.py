"""Tests for the account directory."""

import pytest

from qr_vault.domain.errors import AccountNotFoundError
from qr_vault.domain.models import Account
from qr_vault.services.accounts import (
    DUPLICATE_USERNAME_NOTICE,
    MISSING_FIELDS_NOTICE,
    AccountDirectory,
)
from qr_vault.services.storage import USERS_KEY, InMemoryStore


def test_register_persists_account() -> None:
    store = InMemoryStore()
    directory = AccountDirectory(store)

    result = directory.register("alice", "pw1")

    assert result.created
    assert result.notice is None
    assert directory.exists("alice")
    assert store.load(USERS_KEY) == [
        {"userName": "alice", "password": "pw1", "qrData": []}
    ]


def test_duplicate_username_leaves_directory_unchanged() -> None:
    store = InMemoryStore()
    directory = AccountDirectory(store)
    directory.register("alice", "pw1")
    before = store.load(USERS_KEY)

    result = directory.register("alice", "other")

    assert not result.created
    assert result.notice == DUPLICATE_USERNAME_NOTICE
    assert store.load(USERS_KEY) == before
    assert len(directory.list_accounts()) == 1


def test_register_requires_both_fields() -> None:
    directory = AccountDirectory(InMemoryStore())

    result = directory.register("", "pw1")

    assert result.notice == MISSING_FIELDS_NOTICE
    assert directory.list_accounts() == []


def test_exists_is_case_sensitive() -> None:
    directory = AccountDirectory(InMemoryStore())
    directory.register("Alice", "pw1")

    assert directory.exists("Alice")
    assert not directory.exists("alice")


def test_find_by_credentials_requires_exact_match() -> None:
    directory = AccountDirectory(InMemoryStore())
    directory.register("alice", "pw1")

    assert directory.find_by_credentials("alice", "pw1") is not None
    assert directory.find_by_credentials("alice", "pw2") is None
    assert directory.find_by_credentials("alicf", "pw1") is None


def test_directory_reloads_from_store() -> None:
    store = InMemoryStore()
    AccountDirectory(store).register("alice", "pw1")

    reloaded = AccountDirectory(store)

    assert reloaded.exists("alice")


def test_update_in_place_replaces_entry() -> None:
    directory = AccountDirectory(InMemoryStore())
    directory.register("alice", "pw1")
    directory.register("bob", "pw2")

    directory.update_in_place(Account(username="alice", password="changed"))

    assert [account.username for account in directory.list_accounts()] == [
        "alice",
        "bob",
    ]
    assert directory.get("alice").password == "changed"


def test_update_in_place_unknown_account_raises() -> None:
    directory = AccountDirectory(InMemoryStore())

    with pytest.raises(AccountNotFoundError):
        directory.update_in_place(Account(username="ghost", password="x"))
