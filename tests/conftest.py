"""
Pytest configuration and shared fixtures.
"""

import pytest
import sys
import tempfile
import shutil
from pathlib import Path
from typing import Generator

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for tests."""
    temp_path = Path(tempfile.mkdtemp())
    yield temp_path
    shutil.rmtree(temp_path, ignore_errors=True)


@pytest.fixture
def sample_song():
    """Sample song for testing."""
    from cadenza.models.song import Song
    return Song(
        title="Test Song",
        artist="Test Artist",
        album="Test Album",
        genre="Pop"
    )


@pytest.fixture
def sample_album():
    """Sample album with two tracks."""
    from cadenza.models.song import Album, Song
    return Album(
        title="Test Album",
        artist="Test Artist",
        genre="Pop",
        year=2024,
        songs=[
            Song("Song 1", "Test Artist", "Test Album", "Pop"),
            Song("Song 2", "Test Artist", "Test Album", "Pop"),
        ]
    )


@pytest.fixture
def library():
    """Empty library model."""
    from cadenza.services.library_model import LibraryModel
    return LibraryModel()


@pytest.fixture
def catalog_dir(temp_dir: Path) -> Path:
    """Write a small music store to disk and return its albums directory."""
    albums_dir = temp_dir / "albums"
    albums_dir.mkdir()
    (albums_dir / "albums.txt").write_text(
        "Old Ideas,Leonard Cohen\n"
        "19,Adele\n"
        "21,Adele\n"
        "InvalidDataWithoutComma\n"
        "Missing Album,Nobody\n"
    )
    (albums_dir / "Old Ideas_Leonard Cohen.txt").write_text(
        "Old Ideas,Leonard Cohen,Singer/Songwriter,2012\n"
        "Going Home\n"
        "Amen\n"
        "Show Me the Place\n"
    )
    (albums_dir / "19_Adele.txt").write_text(
        "19,Adele,Pop,2008\n"
        "Daydreamer\n"
        "Best for Last\n"
    )
    (albums_dir / "21_Adele.txt").write_text(
        "21,Adele,Pop,2011\n"
        "Rolling in the Deep\n"
        "Rumour Has It\n"
        "Someone Like You\n"
    )
    return albums_dir


@pytest.fixture
def catalog(catalog_dir: Path):
    """Music store loaded from catalog_dir."""
    from cadenza.services.catalog_service import MusicCatalog
    return MusicCatalog(catalog_dir / "albums.txt")
