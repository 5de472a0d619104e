"""
Handler for the logged-in library menu.
"""

import logging
from typing import Callable, Dict, List, Optional

from rich.markup import escape
from rich.prompt import Confirm

from .base_handler import BaseHandler
from ...core.config import ERROR_MESSAGES, LIBRARY_CONFIG, MENU_OPTIONS, SUCCESS_MESSAGES
from ...core.exceptions import StorageError
from ...models.song import Song
from ...services.catalog_service import MusicCatalog
from ...services.library_model import LibraryModel
from ...services.library_storage import LibraryStorage

logger = logging.getLogger(__name__)

LOGOUT = "14"


class LibraryHandler(BaseHandler):
    """Runs one user's session against their library and the shared store."""

    def __init__(self, catalog: MusicCatalog, storage: LibraryStorage, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.catalog = catalog
        self.storage = storage
        self.username: Optional[str] = None
        self.library: Optional[LibraryModel] = None
        self._actions: Dict[str, Callable[[], None]] = {
            "1": self.view_library,
            "2": self.add_song,
            "3": self.add_album_from_store,
            "4": self.search_songs,
            "5": self.play_song,
            "6": self.rate_song,
            "7": self.view_most_played,
            "8": self.create_genre_playlists,
            "9": self.view_top_rated,
            "10": self.view_playlists,
            "11": self.shuffle_library,
            "12": self.remove_song,
            "13": self.remove_album,
        }

    def handle(self, username: str):
        """Load the user's library, run the menu until logout, then save."""
        self.start_session(username)
        display = self.display_manager

        while True:
            display.display_menu(f"Music Library Menu ({username})", MENU_OPTIONS["LIBRARY"])
            choice = display.get_menu_choice(MENU_OPTIONS["LIBRARY"])
            if choice == LOGOUT:
                display.info("Logging out...")
                self.end_session()
                return
            self._actions[choice]()

    def start_session(self, username: str):
        self.username = username
        self.library = LibraryModel()
        if not self.storage.load(username, self.library):
            self.display_manager.info(f"No previous library found for {escape(username)}.")

    def end_session(self) -> bool:
        """Save the library. Returns False if it could not be written."""
        try:
            self.storage.save(self.username, self.library)
        except StorageError as e:
            logger.error(f"Library for '{self.username}' could not be saved: {e}")
            self.display_manager.error(ERROR_MESSAGES["SAVE_FAILED"])
            return False
        self.display_manager.success(SUCCESS_MESSAGES["LIBRARY_SAVED"])
        return True

    def _pick_song(self, prompt: str = "Select a song") -> Optional[Song]:
        songs = self.library.sort_by_title()
        if not songs:
            self.display_manager.warning(ERROR_MESSAGES["EMPTY_LIBRARY"])
            return None
        self._show_songs(songs, "Your Library")
        return self.display_manager.select_item(songs, prompt)

    def _show_songs(self, songs: List[Song], title: str):
        self.display_manager.display_songs(
            songs,
            title,
            ratings=self.library.get_song_ratings(),
            play_counts=self.library.get_play_counts()
        )

    # Menu actions

    def view_library(self):
        display = self.display_manager
        if not len(self.library):
            display.warning(ERROR_MESSAGES["EMPTY_LIBRARY"])
            return

        display.display_menu("Sort order", MENU_OPTIONS["SORT"])
        order = display.get_menu_choice(MENU_OPTIONS["SORT"], "Sort by")
        if order == "2":
            songs = self.library.sort_by_title()
        elif order == "3":
            songs = self.library.sort_by_artist()
        elif order == "4":
            songs = self.library.sort_by_rating()
        else:
            songs = list(self.library)

        self._show_songs(songs, "Your Library")
        albums = list(self.library.get_albums().values())
        if albums:
            display.display_albums(albums, "Your Albums")

    def add_song(self):
        display = self.display_manager
        fields = {}
        for label, field_name in (
            ("Song title", "title"),
            ("Artist name", "artist"),
            ("Album name", "album"),
            ("Genre", "genre"),
        ):
            value = display.ask_text(label, field_name)
            if value is None:
                display.warning("Song not added.")
                return
            fields[field_name] = value

        self.library.add_song(Song(**fields))
        display.success(SUCCESS_MESSAGES["SONG_ADDED"])

    def add_album_from_store(self):
        display = self.display_manager
        albums = self.catalog.get_all_albums()
        if not albums:
            display.warning("The music store has no albums.")
            return

        display.display_albums(albums, "Music Store")
        album = display.select_item(albums, "Select an album to add")
        if album is None:
            return

        display.display_album_details(album)
        self.library.add_album(album)
        display.success(f"Added [yellow]{escape(album.title)}[/yellow] ({len(album)} songs) to your library.")

    def search_songs(self):
        display = self.display_manager
        display.display_menu("Search", MENU_OPTIONS["SEARCH"])
        mode = display.get_menu_choice(MENU_OPTIONS["SEARCH"], "Search by")

        if mode == "1":
            title = display.ask_text("Song title", "title")
            if title is None:
                return
            song = self.library.search_song_by_title(title)
            if song is None:
                display.warning(ERROR_MESSAGES["SONG_NOT_FOUND"])
                return
            self._show_songs([song], f"Title '{title}'")
        elif mode == "2":
            genre = display.ask_text("Genre", "genre")
            if genre is None:
                return
            self._show_songs(self.library.search_songs_by_genre(genre), f"Genre '{genre}'")
        else:
            artist = display.ask_text("Artist name", "artist")
            if artist is None:
                return
            songs = self.catalog.get_songs_by_artist(artist)
            display.display_songs(songs, f"Store songs by {artist}")
            song = display.select_item(songs, "Select a song to add")
            if song is not None:
                self.library.add_song(song)
                display.success(SUCCESS_MESSAGES["SONG_ADDED"])

    def play_song(self):
        song = self._pick_song("Select a song to play")
        if song is None:
            return
        self.library.play_song(song.title)
        self.display_manager.success(
            f"Now playing: [white]{escape(song.title)}[/white] by [green]{escape(song.artist)}[/green] "
            f"[dim]({self.library.get_play_count(song.title)} plays)[/dim]"
        )

    def rate_song(self):
        display = self.display_manager
        song = self._pick_song("Select a song to rate")
        if song is None:
            return
        rating = display.ask_rating()
        if rating is None:
            return
        self.library.rate_song(song.title, rating)
        display.success(f"Rated [white]{escape(song.title)}[/white] {rating}/{LIBRARY_CONFIG['MAX_RATING']}.")
        if song.title in self.library.get_favorite_songs():
            display.info(f"[white]{escape(song.title)}[/white] is one of your favorites.")

    def view_most_played(self):
        self.display_manager.display_titles(
            self.library.get_frequently_played_songs(),
            "Most Played Songs",
            counts=self.library.get_play_counts()
        )

    def create_genre_playlists(self):
        display = self.display_manager
        created = self.library.generate_genre_based_playlists()
        if not created:
            display.warning(
                f"No genre has at least {LIBRARY_CONFIG['GENRE_PLAYLIST_MIN_SONGS']} songs yet."
            )
            return
        for name in created:
            display.success(f"Created playlist: [cyan]{escape(name)}[/cyan]")

    def view_top_rated(self):
        display = self.display_manager
        display.display_titles(sorted(self.library.get_favorite_songs()), "Favorite Songs")
        playlist = self.library.generate_top_rated_playlist()
        display.display_playlists([playlist])

    def view_playlists(self):
        self.display_manager.display_playlists(self.library.get_playlists().values())

    def shuffle_library(self):
        if not len(self.library):
            self.display_manager.warning(ERROR_MESSAGES["EMPTY_LIBRARY"])
            return
        self._show_songs(self.library.shuffle_library(), "Shuffled Songs")

    def remove_song(self):
        song = self._pick_song("Select a song to remove")
        if song is None:
            return
        if Confirm.ask(f"[bold]Remove '{escape(song.title)}' from your library?[/bold]", default=False,
                       console=self.display_manager.console):
            self.library.remove_song(song.title)
            self.display_manager.success(f"Song '{escape(song.title)}' removed from library.")

    def remove_album(self):
        display = self.display_manager
        albums = list(self.library.get_albums().values())
        if not albums:
            display.warning("You have no albums in your library.")
            return

        display.display_albums(albums, "Your Albums")
        album = display.select_item(albums, "Select an album to remove")
        if album is None:
            return
        if Confirm.ask(f"[bold]Remove '{escape(album.title)}' and its songs?[/bold]", default=False,
                       console=display.console):
            self.library.remove_album(album.title)
            display.success(f"Album '{escape(album.title)}' removed from library.")
