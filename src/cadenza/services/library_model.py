"""
In-memory model of one user's music library.

Tracks songs, albums, playlists, ratings, favorites and play counts. The
"recent" list is the top played songs by count, recomputed on every play.
"""

import logging
import random
from types import MappingProxyType
from typing import Dict, FrozenSet, Iterator, List, Mapping, Optional, Set, Tuple

from ..core.config import LIBRARY_CONFIG
from ..core.exceptions import InvalidAlbumError, InvalidSongError
from ..core.validation import is_valid_rating
from ..models.playlist import Playlist
from ..models.song import Album, Song

logger = logging.getLogger(__name__)


class LibraryModel:
    """A single user's personal collection plus its derived state."""

    def __init__(self):
        self._songs: Dict[str, Song] = {}
        self._albums: Dict[str, Album] = {}
        self._playlists: Dict[str, Playlist] = {}
        self._favorite_songs: Set[str] = set()
        self._song_ratings: Dict[str, int] = {}
        self._play_counts: Dict[str, int] = {}
        self._recent_songs: List[str] = []

    # Collection management

    def add_song(self, song: Song):
        """
        Add a song, replacing any existing song with the same title.

        Raises:
            InvalidSongError: If song is None or not a Song
        """
        if not isinstance(song, Song):
            raise InvalidSongError(f"Expected a Song, got {song!r}")
        self._songs[song.title] = song

    def add_album(self, album: Album):
        """
        Add an album and every song on it.

        Raises:
            InvalidAlbumError: If album is None or not an Album
        """
        if not isinstance(album, Album):
            raise InvalidAlbumError(f"Expected an Album, got {album!r}")
        self._albums[album.title] = album
        for song in album.songs:
            self.add_song(song)

    def remove_song(self, title: str):
        """Remove a song together with its rating, favorite flag and play count."""
        if title not in self._songs:
            return
        del self._songs[title]
        self._song_ratings.pop(title, None)
        self._favorite_songs.discard(title)
        self._play_counts.pop(title, None)
        if title in self._recent_songs:
            self._update_most_frequently_played()
        logger.debug(f"Song '{title}' removed from library")

    def remove_album(self, title: str):
        """Remove an album and each of its songs."""
        album = self._albums.get(title)
        if album is None:
            return
        for song in album.songs:
            self.remove_song(song.title)
        del self._albums[title]
        logger.debug(f"Album '{title}' removed from library")

    # Playlists

    def create_playlist(self, name: str):
        """Create an empty playlist unless one with that name exists."""
        if name not in self._playlists:
            self._playlists[name] = Playlist(name)

    def add_song_to_playlist(self, name: str, song: Song):
        """Add a song to a named playlist; unknown playlists are ignored."""
        playlist = self._playlists.get(name)
        if playlist is not None:
            playlist.add_song(song)

    def get_playlist(self, name: str) -> Optional[Playlist]:
        return self._playlists.get(name)

    def generate_genre_based_playlists(self) -> List[str]:
        """
        Create a "<Genre> Playlist" for every genre with enough songs.

        Existing playlists of the same name are replaced.

        Returns:
            Names of the playlists created
        """
        songs_by_genre: Dict[str, List[Song]] = {}
        for song in self._songs.values():
            songs_by_genre.setdefault(song.genre, []).append(song)

        created = []
        for genre, genre_songs in songs_by_genre.items():
            if len(genre_songs) < LIBRARY_CONFIG["GENRE_PLAYLIST_MIN_SONGS"]:
                continue
            playlist = Playlist(f"{genre}{LIBRARY_CONFIG['GENRE_PLAYLIST_SUFFIX']}", genre_songs)
            self._playlists[playlist.name] = playlist
            created.append(playlist.name)
            logger.info(f"Created playlist for genre: {genre}")
        return created

    def generate_top_rated_playlist(self) -> Playlist:
        """Create (or replace) the playlist of songs rated at or above the threshold."""
        top_rated = Playlist(LIBRARY_CONFIG["TOP_RATED_PLAYLIST_NAME"])
        for title, rating in self._song_ratings.items():
            if rating >= LIBRARY_CONFIG["TOP_RATED_THRESHOLD"]:
                top_rated.add_song(self._songs[title])
        self._playlists[top_rated.name] = top_rated
        logger.info(f"Top Rated playlist created with {len(top_rated)} songs")
        return top_rated

    # Ratings and plays

    def rate_song(self, title: str, rating: int):
        """
        Rate a song in the library.

        Unknown titles and ratings outside 1-5 are ignored. A rating of 5 also
        marks the song as a favorite; lower ratings never unmark it.
        """
        if title not in self._songs or not is_valid_rating(rating):
            logger.debug(f"Ignoring rating {rating!r} for '{title}'")
            return
        self._song_ratings[title] = rating
        if rating == LIBRARY_CONFIG["FAVORITE_RATING"]:
            self._favorite_songs.add(title)

    def play_song(self, title: str):
        """Count a play of a song and refresh the most played list."""
        if title not in self._songs:
            return
        self._play_counts[title] = self._play_counts.get(title, 0) + 1
        self._update_most_frequently_played()

    def _update_most_frequently_played(self):
        # sorted() is stable: equal counts keep first-played order
        ranked = sorted(self._play_counts.items(), key=lambda item: item[1], reverse=True)
        self._recent_songs = [title for title, _ in ranked[:LIBRARY_CONFIG["TOP_PLAYED_LIMIT"]]]

    # Queries

    def sort_by_title(self) -> List[Song]:
        return sorted(self._songs.values(), key=lambda song: song.title)

    def sort_by_artist(self) -> List[Song]:
        return sorted(self._songs.values(), key=lambda song: song.artist)

    def sort_by_rating(self) -> List[Song]:
        """Return all songs, highest rating first."""
        return sorted(self._songs.values(), key=lambda song: song.rating, reverse=True)

    def search_songs_by_genre(self, genre: str) -> List[Song]:
        """Find songs whose genre matches, ignoring case."""
        wanted = genre.casefold()
        return [song for song in self._songs.values() if song.genre.casefold() == wanted]

    def search_song_by_title(self, title: str) -> Optional[Song]:
        return self._songs.get(title)

    def shuffle_library(self, rng: Optional[random.Random] = None) -> List[Song]:
        """Return the songs in random order without changing the library."""
        songs = list(self._songs.values())
        (rng or random).shuffle(songs)
        return songs

    def get_rating(self, title: str) -> Optional[int]:
        return self._song_ratings.get(title)

    def get_play_count(self, title: str) -> int:
        return self._play_counts.get(title, 0)

    # Read-only views

    def get_songs(self) -> Mapping[str, Song]:
        return MappingProxyType(self._songs)

    def get_albums(self) -> Mapping[str, Album]:
        return MappingProxyType(self._albums)

    def get_playlists(self) -> Mapping[str, Playlist]:
        return MappingProxyType(self._playlists)

    def get_song_ratings(self) -> Mapping[str, int]:
        return MappingProxyType(self._song_ratings)

    def get_play_counts(self) -> Mapping[str, int]:
        return MappingProxyType(self._play_counts)

    def get_favorite_songs(self) -> FrozenSet[str]:
        return frozenset(self._favorite_songs)

    def get_recent_songs(self) -> Tuple[str, ...]:
        """Most played titles, highest count first (at most 10)."""
        return tuple(self._recent_songs)

    def get_frequently_played_songs(self) -> Tuple[str, ...]:
        """Same list as get_recent_songs."""
        return tuple(self._recent_songs)

    def __iter__(self) -> Iterator[Song]:
        return iter(list(self._songs.values()))

    def __len__(self) -> int:
        return len(self._songs)

    def __contains__(self, title: object) -> bool:
        return title in self._songs
