"""
Display management for Cadenza CLI with Rich components.
"""

from typing import Iterable, List, Mapping, Optional, Sequence, Tuple, TypeVar
from rich.console import Console

from ..models.playlist import Playlist
from ..models.song import Album, Song
from .formatters import DisplayFormatters
from .input_handlers import InputHandlers
from .styling import Styling

T = TypeVar("T")


class DisplayManager:
    """Manages rendering and prompting for the console session."""

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console()

        # Initialize sub-modules
        self.formatters = DisplayFormatters(self.console)
        self.input_handlers = InputHandlers(self.console, self.formatters)
        self.styling = Styling(self.console)

    # Delegate to formatters
    def display_menu(self, title: str, options: Sequence[Tuple[str, str]]):
        self.formatters.display_menu(title, options)

    def display_songs(
        self,
        songs: List[Song],
        title: str,
        ratings: Optional[Mapping[str, int]] = None,
        play_counts: Optional[Mapping[str, int]] = None
    ):
        self.formatters.display_songs(songs, title, ratings, play_counts)

    def display_albums(self, albums: List[Album], title: str = "Albums"):
        self.formatters.display_albums(albums, title)

    def display_album_details(self, album: Album):
        self.formatters.display_album_details(album)

    def display_titles(self, titles: Iterable[str], title: str, counts: Optional[Mapping[str, int]] = None):
        self.formatters.display_titles(titles, title, counts)

    def display_playlists(self, playlists: Iterable[Playlist]):
        self.formatters.display_playlists(playlists)

    # Delegate to styling
    def success(self, message: str):
        self.styling.success(message)

    def error(self, message: str):
        self.styling.error(message)

    def warning(self, message: str):
        self.styling.warning(message)

    def info(self, message: str):
        self.styling.info(message)

    # Delegate to input handlers
    def get_menu_choice(self, options: Sequence[Tuple[str, str]], prompt: str = "Choose an option") -> str:
        return self.input_handlers.get_menu_choice(options, prompt)

    def ask_text(self, label: str, field_name: str) -> Optional[str]:
        return self.input_handlers.ask_text(label, field_name)

    def ask_username(self) -> Optional[str]:
        return self.input_handlers.ask_username()

    def ask_password(self) -> str:
        return self.input_handlers.ask_password()

    def ask_rating(self) -> Optional[int]:
        return self.input_handlers.ask_rating()

    def select_item(self, items: List[T], prompt: str = "Select a number") -> Optional[T]:
        return self.input_handlers.select_item(items, prompt)
