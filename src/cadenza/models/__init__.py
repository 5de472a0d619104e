"""
Data models for Cadenza.
"""

from .song import Song, Album
from .playlist import Playlist

__all__ = [
    'Song',
    'Album',
    'Playlist'
]
