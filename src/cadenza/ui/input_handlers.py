"""
Input Handlers Module
Handles menu choices, text prompts and selections.
"""

from typing import List, Optional, Sequence, Tuple, TypeVar
from rich.console import Console
from rich.markup import escape
from rich.prompt import Prompt

from ..core.config import ERROR_MESSAGES, MENU_OPTIONS
from ..core.validation import is_valid_rating, validate_user_input, validate_username

T = TypeVar("T")


class InputHandlers:
    """Handlers for user input and selection."""

    def __init__(self, console: Console, formatters):
        self.console = console
        self.formatters = formatters

    def get_menu_choice(self, options: Sequence[Tuple[str, str]], prompt: str = "Choose an option") -> str:
        """Ask for one of the menu keys; rich re-prompts until it gets one."""
        return Prompt.ask(
            f"[bold]{prompt}[/bold]",
            choices=[key for key, _ in options],
            show_choices=False,
            console=self.console
        )

    def ask_text(self, label: str, field_name: str) -> Optional[str]:
        """
        Prompt for a free-text value.

        Returns:
            The validated value, or None if the user entered nothing
        """
        while True:
            value = Prompt.ask(f"[bold]{label}[/bold]", default="", show_default=False, console=self.console)
            if not value.strip():
                return None
            try:
                return validate_user_input(field_name, value)
            except ValueError as e:
                self.formatters.styling.error(escape(str(e)))

    def ask_username(self) -> Optional[str]:
        """Prompt for a username that is safe to store."""
        while True:
            value = Prompt.ask("[bold]Username[/bold]", default="", show_default=False, console=self.console)
            if not value.strip():
                return None
            try:
                return validate_username(value)
            except ValueError as e:
                self.formatters.styling.error(f"Invalid username: {escape(str(e))}")

    def ask_password(self) -> str:
        return Prompt.ask("[bold]Password[/bold]", password=True, console=self.console)

    def ask_rating(self) -> Optional[int]:
        """Prompt for a 1-5 rating; an empty answer cancels."""
        while True:
            value = Prompt.ask("[bold]Rating (1-5)[/bold]", default="", show_default=False, console=self.console)
            if not value.strip():
                return None
            try:
                rating = int(value)
            except ValueError:
                rating = None
            if rating is not None and is_valid_rating(rating):
                return rating
            self.formatters.styling.error(ERROR_MESSAGES["INVALID_RATING"])

    def select_index(self, count: int, prompt: str = "Select a number") -> Optional[int]:
        """
        Ask for a position in a displayed list.

        Returns:
            Zero-based index, or None if the user cancelled
        """
        if count == 0:
            return None

        while True:
            choice = Prompt.ask(
                f"[bold]{prompt}[/bold] (1-{count}, or 'q' to cancel)",
                default="q",
                show_default=False,
                console=self.console
            )
            if choice.strip().lower() in MENU_OPTIONS["QUIT"]:
                return None
            try:
                number = int(choice)
            except ValueError:
                self.formatters.styling.error("Please enter a valid number or 'q' to cancel")
                continue
            if 1 <= number <= count:
                return number - 1
            self.formatters.styling.error(f"Please enter a number between 1 and {count}")

    def select_item(self, items: List[T], prompt: str = "Select a number") -> Optional[T]:
        index = self.select_index(len(items), prompt)
        return None if index is None else items[index]
