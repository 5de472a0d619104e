"""
Handler for registration and login.
"""

import logging
from typing import Optional

from rich.markup import escape

from .base_handler import BaseHandler
from ...core.config import ERROR_MESSAGES, SUCCESS_MESSAGES
from ...core.exceptions import StorageError
from ...services.account_service import AccountStore

logger = logging.getLogger(__name__)


class AccountHandler(BaseHandler):
    """Prompts for credentials and talks to the account store."""

    def __init__(self, account_store: AccountStore, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.account_store = account_store

    def register(self) -> bool:
        """Register a new account. Returns True when the account was created."""
        display = self.display_manager
        username = display.ask_username()
        if username is None:
            display.warning("Registration cancelled.")
            return False
        password = display.ask_password()

        try:
            created = self.account_store.register_user(username, password)
        except StorageError as e:
            logger.error(f"Account for '{username}' could not be saved: {e}")
            display.warning(f"{ERROR_MESSAGES['SAVE_FAILED']} The account works until you exit.")
            return True

        if created:
            display.success(SUCCESS_MESSAGES["REGISTERED"])
        else:
            display.error(ERROR_MESSAGES["USERNAME_TAKEN"])
        return created

    def login(self) -> Optional[str]:
        """Authenticate a user. Returns the username on success."""
        display = self.display_manager
        username = display.ask_username()
        if username is None:
            return None
        password = display.ask_password()

        if not self.account_store.authenticate_user(username, password):
            display.error(ERROR_MESSAGES["INVALID_CREDENTIALS"])
            return None

        display.success(f"Login successful! Welcome, [bold]{escape(username)}[/bold]")
        return username
