"""
Tests for custom exceptions.
"""

import pytest
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from cadenza.core.exceptions import (
    CadenzaError,
    LibraryError,
    InvalidSongError,
    InvalidAlbumError,
    StorageError,
    ConfigurationError
)


class TestExceptions:
    """Tests for custom exception classes."""

    def test_cadenza_error_is_exception(self):
        """Test that CadenzaError is an Exception."""
        assert issubclass(CadenzaError, Exception)

    def test_cadenza_error_can_be_raised(self):
        """Test that CadenzaError can be raised."""
        with pytest.raises(CadenzaError):
            raise CadenzaError("Test error")

    def test_library_error_inherits_from_cadenza_error(self):
        """Test that LibraryError inherits from CadenzaError."""
        assert issubclass(LibraryError, CadenzaError)

    @pytest.mark.parametrize("error_class", [InvalidSongError, InvalidAlbumError])
    def test_invalid_argument_errors(self, error_class):
        """Test invalid song/album errors are library errors and ValueErrors."""
        assert issubclass(error_class, LibraryError)
        assert issubclass(error_class, ValueError)
        with pytest.raises(ValueError):
            raise error_class("bad argument")

    def test_storage_error_inherits_from_os_error(self):
        """Test that StorageError inherits from CadenzaError and OSError."""
        assert issubclass(StorageError, CadenzaError)
        assert issubclass(StorageError, OSError)

    def test_configuration_error_inherits_from_cadenza_error(self):
        """Test that ConfigurationError inherits from CadenzaError."""
        assert issubclass(ConfigurationError, CadenzaError)

    def test_exception_message_preserved(self):
        """Test that exception messages are preserved."""
        error = LibraryError("Custom message")
        assert str(error) == "Custom message"

    def test_exception_chaining(self):
        """Test that exceptions can be chained."""
        try:
            raise PermissionError("Original error")
        except PermissionError as e:
            with pytest.raises(StorageError) as exc_info:
                raise StorageError("Wrapped error") from e

            assert exc_info.value.__cause__ == e
