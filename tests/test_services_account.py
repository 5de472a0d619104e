"""
Tests for the account store.
"""

import hashlib
import pytest
import sys
from pathlib import Path
from unittest.mock import patch

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from cadenza.core.exceptions import StorageError
from cadenza.services.account_service import AccountStore


@pytest.fixture
def users_file(temp_dir):
    return temp_dir / "users.txt"


class TestAccountStore:
    """Tests for AccountStore."""

    def test_hash_password(self):
        """Test hashes are lowercase SHA-256 hex digests."""
        digest = AccountStore.hash_password("password")
        assert digest == hashlib.sha256(b"password").hexdigest()
        assert len(digest) == 64
        assert digest == digest.lower()

    def test_register_and_authenticate(self, users_file):
        """Test a registered user can log in with the right password only."""
        store = AccountStore(users_file)

        assert store.register_user("alice", "secret") is True
        assert store.authenticate_user("alice", "secret") is True
        assert store.authenticate_user("alice", "wrong") is False

    def test_register_taken_username(self, users_file):
        """Test registering an existing username fails and keeps the old password."""
        store = AccountStore(users_file)
        store.register_user("alice", "secret")

        assert store.register_user("alice", "other") is False
        assert store.authenticate_user("alice", "secret") is True
        assert len(store) == 1

    def test_authenticate_unknown_user(self, users_file):
        """Test unknown users are rejected."""
        assert AccountStore(users_file).authenticate_user("ghost", "x") is False

    def test_missing_file_means_no_accounts(self, users_file):
        """Test a store without a file starts empty and creates nothing."""
        store = AccountStore(users_file)
        assert len(store) == 0
        assert not users_file.exists()

    def test_register_writes_file(self, users_file):
        """Test registration rewrites the file as username,hash lines."""
        store = AccountStore(users_file)
        store.register_user("alice", "secret")
        store.register_user("bob", "hunter2")

        lines = users_file.read_text().splitlines()
        assert lines == [
            f"alice,{AccountStore.hash_password('secret')}",
            f"bob,{AccountStore.hash_password('hunter2')}",
        ]

    def test_register_creates_parent_directory(self, temp_dir):
        """Test the accounts file directory is created on first save."""
        users_file = temp_dir / "nested" / "users.txt"
        AccountStore(users_file).register_user("alice", "secret")
        assert users_file.exists()

    def test_accounts_persist(self, users_file):
        """Test a new store sees accounts saved by an earlier one."""
        AccountStore(users_file).register_user("alice", "secret")

        reloaded = AccountStore(users_file)

        assert reloaded.has_user("alice")
        assert reloaded.authenticate_user("alice", "secret") is True

    def test_malformed_lines_are_ignored(self, users_file):
        """Test lines without exactly two fields are skipped."""
        digest = AccountStore.hash_password("pw")
        users_file.write_text(f"justaname\nalice,{digest}\na,b,c\n\n")

        store = AccountStore(users_file)

        assert len(store) == 1
        assert store.authenticate_user("alice", "pw") is True

    def test_password_with_comma(self, users_file):
        """Test passwords are hashed, so commas in them are harmless."""
        store = AccountStore(users_file)
        store.register_user("alice", "a,b,c")
        assert AccountStore(users_file).authenticate_user("alice", "a,b,c") is True

    def test_save_failure_raises_storage_error(self, users_file):
        """Test a write failure is reported and the account stays in memory."""
        store = AccountStore(users_file)
        with patch("builtins.open", side_effect=PermissionError("denied")):
            with pytest.raises(StorageError):
                store.register_user("alice", "secret")

        assert store.has_user("alice")

    def test_storage_error_is_os_error(self):
        """Test StorageError can be caught as OSError."""
        assert issubclass(StorageError, OSError)
