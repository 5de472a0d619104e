"""
Per-user library persistence.

Each user's songs and albums are written to ``<username>_library.txt``:
song lines are ``title,artist,album,genre`` and album lines are
``Album:,title,artist``. Ratings, play counts and favorites are not saved.
"""

import logging
from pathlib import Path
from typing import List, Tuple, Union

from ..core.config import STORAGE_CONFIG
from ..core.exceptions import StorageError
from ..models.song import Album, Song
from ..utils.records import format_record, parse_record
from .library_model import LibraryModel

logger = logging.getLogger(__name__)

ALBUM_MARKERS = (STORAGE_CONFIG["ALBUM_RECORD_MARKER"], "Album")


class LibraryStorage:
    """Saves and restores user libraries in a directory of flat files."""

    def __init__(self, libraries_dir: Union[str, Path]):
        self.libraries_dir = Path(libraries_dir)

    def library_path(self, username: str) -> Path:
        """Get the path of a user's library file."""
        return self.libraries_dir / f"{username}{STORAGE_CONFIG['LIBRARY_FILE_SUFFIX']}"

    def save(self, username: str, library: LibraryModel):
        """
        Write a user's library, replacing any previous file.

        Raises:
            StorageError: If the file cannot be written
        """
        path = self.library_path(username)
        lines = [
            format_record([song.title, song.artist, song.album, song.genre])
            for song in library
        ]
        lines.extend(
            format_record([STORAGE_CONFIG["ALBUM_RECORD_MARKER"], album.title, album.artist])
            for album in library.get_albums().values()
        )

        try:
            self.libraries_dir.mkdir(parents=True, exist_ok=True)
            with open(path, "w", encoding=STORAGE_CONFIG["ENCODING"]) as library_file:
                for line in lines:
                    library_file.write(line + "\n")
        except OSError as e:
            raise StorageError(f"Could not save library for '{username}' to {path}: {e}") from e

        logger.info(f"Saved {len(library)} songs for '{username}' to {path}")

    def load(self, username: str, library: LibraryModel) -> bool:
        """
        Read a user's saved library into the given model.

        Returns:
            True if a saved library existed, False otherwise
        """
        path = self.library_path(username)
        if not path.exists():
            logger.debug(f"No previous library found for '{username}'")
            return False

        try:
            with open(path, encoding=STORAGE_CONFIG["ENCODING"]) as library_file:
                lines = library_file.read().splitlines()
        except (OSError, UnicodeDecodeError) as e:
            logger.error(f"Error loading library for '{username}' from {path}: {e}")
            return False

        songs, albums = self._parse_lines(lines)
        for song in songs:
            library.add_song(song)

        # Album records only carry title and artist; rebuild their track
        # lists from the songs saved alongside them.
        for title, artist in albums:
            tracks = [song for song in songs if song.album == title and song.artist == artist]
            library.add_album(Album(title, artist, "", 0, tracks))

        logger.info(f"Loaded {len(songs)} songs and {len(albums)} albums for '{username}'")
        return True

    def _parse_lines(self, lines: List[str]) -> Tuple[List[Song], List[Tuple[str, str]]]:
        songs = []
        albums = []
        for line in lines:
            parts = parse_record(line)
            if len(parts) == 3 and parts[0] in ALBUM_MARKERS:
                albums.append((parts[1], parts[2]))
            elif len(parts) == 4:
                songs.append(Song(*parts))
            elif parts:
                logger.debug(f"Skipping malformed library line: {line!r}")
        return songs, albums
