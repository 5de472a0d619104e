"""
Core song and album data models.
"""

from dataclasses import dataclass, field
from typing import Iterator, List, Set

from ..core.config import LIBRARY_CONFIG
from ..core.validation import is_valid_rating


@dataclass(frozen=True)
class Song:
    """A single song. Songs with identical fields are interchangeable."""
    title: str
    artist: str
    album: str
    genre: str
    rating: int = LIBRARY_CONFIG["DEFAULT_RATING"]

    def __post_init__(self):
        """Validate rating after initialization."""
        if not is_valid_rating(self.rating):
            raise ValueError(
                f"Rating must be between {LIBRARY_CONFIG['MIN_RATING']} and "
                f"{LIBRARY_CONFIG['MAX_RATING']}, got {self.rating!r}"
            )

    def __str__(self) -> str:
        return f"{self.title} - {self.artist} ({self.album}, Genre: {self.genre}, Rating: {self.rating})"


@dataclass
class Album:
    """An album with its metadata and ordered, duplicate-free track list."""
    title: str
    artist: str
    genre: str = ""
    year: int = 0
    songs: List[Song] = None
    _members: Set[Song] = field(default=None, init=False, repr=False, compare=False)

    def __post_init__(self):
        """Collapse duplicate songs, keeping the first occurrence."""
        unique = list(dict.fromkeys(self.songs or []))
        self.songs = unique
        self._members = set(unique)

    def add_song(self, song: Song):
        """Append a song unless an identical one is already on the album."""
        if song in self._members:
            return
        self.songs.append(song)
        self._members.add(song)

    def get_songs(self) -> List[Song]:
        """Return a copy of the track list."""
        return list(self.songs)

    def __contains__(self, song: object) -> bool:
        return song in self._members

    def __iter__(self) -> Iterator[Song]:
        return iter(list(self.songs))

    def __len__(self) -> int:
        return len(self.songs)
