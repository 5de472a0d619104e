"""
Account store mapping usernames to SHA-256 password hashes.
"""

import hashlib
import logging
from pathlib import Path
from typing import Dict, Union

from ..core.config import STORAGE_CONFIG
from ..core.exceptions import StorageError
from ..utils.records import format_record, parse_record

logger = logging.getLogger(__name__)


class AccountStore:
    """Registers and authenticates users against a flat ``username,hash`` file."""

    def __init__(self, users_file: Union[str, Path]):
        self.users_file = Path(users_file)
        self._users: Dict[str, str] = {}
        self._load_users()

    @staticmethod
    def hash_password(password: str) -> str:
        """Hash a password with SHA-256, rendered as lowercase hex."""
        return hashlib.sha256(password.encode("utf-8")).hexdigest()

    def _load_users(self):
        """Read accounts from disk; a missing file means no accounts yet."""
        if not self.users_file.exists():
            logger.debug(f"No accounts file at {self.users_file}")
            return

        try:
            with open(self.users_file, encoding=STORAGE_CONFIG["ENCODING"]) as users:
                lines = users.read().splitlines()
        except (OSError, UnicodeDecodeError) as e:
            logger.error(f"Error loading accounts from {self.users_file}: {e}")
            return

        for line in lines:
            parts = parse_record(line)
            if len(parts) == 2:
                self._users[parts[0]] = parts[1]
            elif line.strip():
                logger.debug(f"Skipping malformed account line in {self.users_file}")

    def _save_users(self):
        """
        Rewrite the whole accounts file.

        Raises:
            StorageError: If the file cannot be written
        """
        try:
            self.users_file.parent.mkdir(parents=True, exist_ok=True)
            with open(self.users_file, "w", encoding=STORAGE_CONFIG["ENCODING"]) as users:
                for username, password_hash in self._users.items():
                    users.write(format_record([username, password_hash]) + "\n")
        except OSError as e:
            raise StorageError(f"Could not save accounts to {self.users_file}: {e}") from e

    def register_user(self, username: str, password: str) -> bool:
        """
        Register a new user.

        Returns:
            False if the username is already taken, True otherwise

        Raises:
            StorageError: If the account was created but could not be saved
        """
        if username in self._users:
            return False
        self._users[username] = self.hash_password(password)
        logger.info(f"Registered user '{username}'")
        self._save_users()
        return True

    def authenticate_user(self, username: str, password: str) -> bool:
        """Check a username/password pair against the stored hash."""
        stored_hash = self._users.get(username)
        return stored_hash is not None and stored_hash == self.hash_password(password)

    def has_user(self, username: str) -> bool:
        return username in self._users

    def __len__(self) -> int:
        return len(self._users)
