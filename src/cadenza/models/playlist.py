"""
Playlist model.
"""

import random
from typing import Dict, Iterator, List, Optional

from .song import Song


class Playlist:
    """A named, ordered collection of unique songs."""

    def __init__(self, name: str, songs: Optional[List[Song]] = None):
        self.name = name
        # Insertion-ordered set of songs
        self._songs: Dict[Song, None] = dict.fromkeys(songs or [])

    def add_song(self, song: Song):
        """Append a song; adding a song already present does nothing."""
        self._songs.setdefault(song, None)

    def remove_song(self, song: Song):
        """Remove a song if present."""
        self._songs.pop(song, None)

    def get_songs(self) -> List[Song]:
        """Return a copy of the songs in playlist order."""
        return list(self._songs)

    def shuffle(self, rng: Optional[random.Random] = None):
        """Reorder the songs randomly in place."""
        songs = list(self._songs)
        (rng or random).shuffle(songs)
        self._songs = dict.fromkeys(songs)

    def __contains__(self, song: object) -> bool:
        return song in self._songs

    def __iter__(self) -> Iterator[Song]:
        return iter(list(self._songs))

    def __len__(self) -> int:
        return len(self._songs)

    def __repr__(self) -> str:
        return f"Playlist(name={self.name!r}, songs={len(self._songs)})"
