"""
Configuration for Cadenza Music Library Manager
Contains all constants, settings, and global parameters.
"""

import os
from pathlib import Path

# Project Information
PROJECT_NAME = "Cadenza"
PROJECT_VERSION = "1.0.0"
PROJECT_DESCRIPTION = "Personal music library manager with a shared album store"

# File Paths
DATA_DIR = Path(os.environ.get("CADENZA_DATA_DIR", Path.cwd() / "resources"))
ALBUMS_DIR = DATA_DIR / "albums"
ALBUMS_INDEX_FILE = ALBUMS_DIR / "albums.txt"
USERS_FILE = DATA_DIR / "users.txt"
USER_LIBRARIES_DIR = DATA_DIR / "users"

# Library Configuration
LIBRARY_CONFIG = {
    "MIN_RATING": 1,
    "MAX_RATING": 5,
    "DEFAULT_RATING": 3,
    "FAVORITE_RATING": 5,
    "TOP_RATED_THRESHOLD": 4,
    "TOP_PLAYED_LIMIT": 10,
    "GENRE_PLAYLIST_MIN_SONGS": 10,
    "GENRE_PLAYLIST_SUFFIX": " Playlist",
    "TOP_RATED_PLAYLIST_NAME": "Top Rated Songs",
}

# Storage Configuration
STORAGE_CONFIG = {
    "ENCODING": "utf-8",
    "ALBUM_FILE_SUFFIX": ".txt",
    "LIBRARY_FILE_SUFFIX": "_library.txt",
    "ALBUM_RECORD_MARKER": "Album:",
}

# Logging Configuration
LOGGING_CONFIG = {
    "LEVEL": os.environ.get("CADENZA_LOG_LEVEL", "WARNING"),
    "FORMAT": "%(levelname)s - %(name)s - %(message)s",
}

# Validation Rules
VALIDATION_RULES = {
    "MIN_TITLE_LENGTH": 1,
    "MAX_TITLE_LENGTH": 200,
    "MIN_ARTIST_LENGTH": 1,
    "MAX_ARTIST_LENGTH": 100,
    "MAX_ALBUM_LENGTH": 200,
    "MAX_GENRE_LENGTH": 50,
    "MIN_USERNAME_LENGTH": 1,
    "MAX_USERNAME_LENGTH": 32,
    "FORBIDDEN_USERNAME_CHARS": [",", "/", "\\"],
}

# Error Messages
ERROR_MESSAGES = {
    "INVALID_SELECTION": "Invalid choice! Please try again.",
    "INVALID_CREDENTIALS": "Invalid username or password.",
    "USERNAME_TAKEN": "Username already exists. Try again.",
    "SONG_NOT_FOUND": "Song not found in your library.",
    "INVALID_RATING": "Rating must be a whole number between 1 and 5.",
    "SAVE_FAILED": "Could not save your data.",
    "EMPTY_LIBRARY": "Your library is empty.",
}

# Success Messages
SUCCESS_MESSAGES = {
    "REGISTERED": "Registration successful! You can now log in.",
    "SONG_ADDED": "Song added to your library!",
    "LIBRARY_SAVED": "Library saved.",
}

# Menu Options
MENU_OPTIONS = {
    "MAIN": [
        ("1", "Register"),
        ("2", "Login"),
        ("3", "Exit"),
    ],
    "LIBRARY": [
        ("1", "View Library"),
        ("2", "Add Song"),
        ("3", "Add Album from Store"),
        ("4", "Search Songs"),
        ("5", "Play Song"),
        ("6", "Rate Song"),
        ("7", "View Most Played"),
        ("8", "Create Genre Playlists"),
        ("9", "View Top-Rated"),
        ("10", "View Playlists"),
        ("11", "Shuffle Library"),
        ("12", "Remove Song"),
        ("13", "Remove Album"),
        ("14", "Logout"),
    ],
    "SORT": [
        ("1", "Unsorted"),
        ("2", "By title"),
        ("3", "By artist"),
        ("4", "By rating"),
    ],
    "SEARCH": [
        ("1", "Title in my library"),
        ("2", "Genre in my library"),
        ("3", "Artist in the store"),
    ],
    "QUIT": ["q", "quit", "cancel"],
}
