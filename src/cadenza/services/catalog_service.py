"""
Music store catalog loaded from flat album files.

The index file lists one ``Album Title,Artist`` pair per line. Each pair
points at ``<Album Title>_<Artist>.txt`` in the albums directory, whose first
line is ``Title,Artist,Genre,Year`` followed by one song title per line.
"""

import logging
from pathlib import Path
from typing import Dict, List, Optional, Union

from ..core.config import STORAGE_CONFIG
from ..models.song import Album, Song
from ..utils.records import parse_record

logger = logging.getLogger(__name__)


class MusicCatalog:
    """Shared, read-only pool of albums available to every user."""

    def __init__(
        self,
        index_path: Union[str, Path],
        albums_dir: Optional[Union[str, Path]] = None
    ):
        """
        Load the catalog.

        Args:
            index_path: Path to the album index file
            albums_dir: Directory holding per-album files (defaults to the
                index file's directory)
        """
        self.index_path = Path(index_path)
        self.albums_dir = Path(albums_dir) if albums_dir is not None else self.index_path.parent
        self._albums_by_title: Dict[str, Album] = {}
        self._songs_by_artist: Dict[str, List[Song]] = {}
        self.load()

    def load(self):
        """(Re)load every album listed in the index file."""
        self._albums_by_title = {}
        self._songs_by_artist = {}

        try:
            with open(self.index_path, encoding=STORAGE_CONFIG["ENCODING"]) as index_file:
                lines = index_file.read().splitlines()
        except (OSError, UnicodeDecodeError) as e:
            logger.error(f"Error loading albums from {self.index_path}: {e}")
            return

        for line in lines:
            parts = parse_record(line)
            # Trailing separators are tolerated: "21,Adele," names one album
            while parts and not parts[-1]:
                parts.pop()
            if len(parts) != 2:
                logger.debug(f"Skipping malformed index line: {line!r}")
                continue

            album_title, artist = parts
            album_file = self.albums_dir / f"{album_title}_{artist}{STORAGE_CONFIG['ALBUM_FILE_SUFFIX']}"
            album = self._read_album_file(album_file)
            if album is None:
                continue

            self._albums_by_title[album_title] = album
            self._songs_by_artist.setdefault(artist, []).extend(album.songs)

        logger.info(f"Loaded {len(self._albums_by_title)} albums from {self.index_path}")

    def _read_album_file(self, album_path: Path) -> Optional[Album]:
        """Read a single album file; any problem drops the whole album."""
        try:
            with open(album_path, encoding=STORAGE_CONFIG["ENCODING"]) as album_file:
                lines = album_file.read().splitlines()
        except (OSError, UnicodeDecodeError) as e:
            logger.warning(f"Error reading album file {album_path}: {e}")
            return None

        if not lines:
            logger.debug(f"Album file {album_path} is empty")
            return None

        metadata = parse_record(lines[0])
        if len(metadata) < 4:
            logger.debug(f"Album file {album_path} has an incomplete header")
            return None

        album_title, artist, genre = metadata[0], metadata[1], metadata[2]
        try:
            year = int(metadata[3])
        except ValueError:
            logger.debug(f"Album file {album_path} has a non-numeric year: {metadata[3]!r}")
            return None

        songs = [
            Song(song_title.strip(), artist, album_title, genre)
            for song_title in lines[1:]
            if song_title.strip()
        ]
        return Album(album_title, artist, genre, year, songs)

    def get_album(self, title: str) -> Optional[Album]:
        """Get an album by its title."""
        return self._albums_by_title.get(title)

    def get_songs_by_artist(self, artist: str) -> List[Song]:
        """Get all songs by an artist, or an empty list if none are known."""
        return list(self._songs_by_artist.get(artist, []))

    def get_all_albums(self) -> List[Album]:
        """Get every loaded album."""
        return list(self._albums_by_title.values())

    def get_artists(self) -> List[str]:
        """Get the names of all artists in the store."""
        return list(self._songs_by_artist)

    def __len__(self) -> int:
        return len(self._albums_by_title)
