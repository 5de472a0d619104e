"""
Configuration and input validation utilities.
"""

import importlib
from pathlib import Path
from typing import Any, List, Optional, Tuple
from .config import (
    DATA_DIR,
    LIBRARY_CONFIG,
    LOGGING_CONFIG,
    VALIDATION_RULES,
)
from .exceptions import ConfigurationError


def check_dependencies() -> Tuple[bool, List[str]]:
    """
    Check if all required dependencies are installed.

    Returns:
        Tuple of (all_installed, list_of_missing_dependencies)
    """
    required_packages = {
        "rich": "rich",
    }

    missing = []
    for module_name, package_name in required_packages.items():
        try:
            importlib.import_module(module_name)
        except ImportError:
            missing.append(package_name)

    return len(missing) == 0, missing


def validate_configuration(data_dir: Optional[Path] = None) -> Tuple[bool, List[str]]:
    """
    Validate application configuration.

    Args:
        data_dir: Data directory to check instead of the configured one

    Returns:
        Tuple of (is_valid, list_of_errors)
    """
    errors = []

    deps_ok, missing_deps = check_dependencies()
    if not deps_ok:
        errors.append(
            f"Missing required dependencies: {', '.join(missing_deps)}. "
            f"Please install them with: pip install -e ."
        )

    # The data directory is created on demand and must be writable
    target_dir = Path(data_dir) if data_dir is not None else DATA_DIR
    try:
        target_dir.mkdir(parents=True, exist_ok=True)
        test_file = target_dir / ".test_write"
        test_file.write_text("test")
        test_file.unlink()
    except OSError as e:
        errors.append(f"Cannot write to directory {target_dir}: {e}")

    if LIBRARY_CONFIG["MIN_RATING"] > LIBRARY_CONFIG["MAX_RATING"]:
        errors.append("MIN_RATING must be <= MAX_RATING")

    if not (LIBRARY_CONFIG["MIN_RATING"] <= LIBRARY_CONFIG["DEFAULT_RATING"] <= LIBRARY_CONFIG["MAX_RATING"]):
        errors.append("DEFAULT_RATING must lie between MIN_RATING and MAX_RATING")

    if LIBRARY_CONFIG["TOP_PLAYED_LIMIT"] < 1:
        errors.append("TOP_PLAYED_LIMIT must be >= 1")

    if LIBRARY_CONFIG["GENRE_PLAYLIST_MIN_SONGS"] < 1:
        errors.append("GENRE_PLAYLIST_MIN_SONGS must be >= 1")

    valid_log_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
    if LOGGING_CONFIG["LEVEL"].upper() not in valid_log_levels:
        errors.append(f"LOG_LEVEL must be one of: {', '.join(valid_log_levels)}")

    is_valid = len(errors) == 0
    return is_valid, errors


def validate_and_raise(data_dir: Optional[Path] = None):
    """
    Validate configuration and raise ConfigurationError if invalid.
    """
    is_valid, errors = validate_configuration(data_dir)
    if not is_valid:
        error_msg = "Configuration validation failed:\n" + "\n".join(f"  - {e}" for e in errors)
        raise ConfigurationError(error_msg)


def validate_user_input(field_name: str, value: str, max_length: Optional[int] = None) -> str:
    """
    Validate and sanitize free-text input such as song titles.

    Args:
        field_name: Name of the field being validated (for error messages)
        value: Input value to validate
        max_length: Optional maximum length (uses VALIDATION_RULES if not provided)

    Returns:
        Validated and sanitized value

    Raises:
        ValueError: If input is invalid
    """
    if not isinstance(value, str):
        raise ValueError(f"{field_name} must be a string")

    value = value.strip()

    min_length = VALIDATION_RULES.get(f"MIN_{field_name.upper()}_LENGTH", 1)
    if len(value) < min_length:
        raise ValueError(f"{field_name} must be at least {min_length} character(s) long")

    if max_length is None:
        max_length = VALIDATION_RULES.get(f"MAX_{field_name.upper()}_LENGTH", 500)

    if len(value) > max_length:
        # Truncate instead of raising error for better UX
        value = value[:max_length]

    # Records are one per line
    if "\n" in value or "\r" in value:
        value = " ".join(value.split())

    return value


def validate_username(username: str) -> str:
    """
    Validate a username for registration.

    Usernames end up in the accounts file and in a per-user file name, so
    separators are rejected rather than escaped.

    Raises:
        ValueError: If the username cannot be used
    """
    username = validate_user_input(
        "username", username, VALIDATION_RULES["MAX_USERNAME_LENGTH"]
    )
    for char in VALIDATION_RULES["FORBIDDEN_USERNAME_CHARS"]:
        if char in username:
            raise ValueError(f"username must not contain '{char}'")
    if username in (".", ".."):
        raise ValueError("username is reserved")
    return username


def is_valid_rating(rating: Any) -> bool:
    """Check that a rating is an integer in the allowed range."""
    if isinstance(rating, bool) or not isinstance(rating, int):
        return False
    return LIBRARY_CONFIG["MIN_RATING"] <= rating <= LIBRARY_CONFIG["MAX_RATING"]
