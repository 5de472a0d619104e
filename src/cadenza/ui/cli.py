"""
Cadenza CLI Module
Interactive console session: register, log in and manage a music library.
"""

import argparse
from pathlib import Path
from typing import List, Optional

from rich.console import Console

from ..core.config import (
    ALBUMS_INDEX_FILE,
    DATA_DIR,
    MENU_OPTIONS,
    PROJECT_DESCRIPTION,
    PROJECT_NAME,
    PROJECT_VERSION,
    USER_LIBRARIES_DIR,
    USERS_FILE,
)
from ..core.logger import setup_logging
from ..core.validation import validate_and_raise
from ..services.account_service import AccountStore
from ..services.catalog_service import MusicCatalog
from ..services.library_storage import LibraryStorage
from ..ui.display import DisplayManager
from ..ui.handlers import AccountHandler, LibraryHandler

REGISTER, LOGIN, EXIT = "1", "2", "3"


class CadenzaCLI:
    """Main CLI class for the Cadenza music library."""

    def __init__(self, console: Optional[Console] = None):
        """Initialize the CLI."""
        self.display_manager = DisplayManager(console)
        self.catalog: Optional[MusicCatalog] = None
        self.account_handler: Optional[AccountHandler] = None
        self.library_handler: Optional[LibraryHandler] = None

    def create_parser(self) -> argparse.ArgumentParser:
        """Create the argument parser."""
        parser = argparse.ArgumentParser(
            prog=PROJECT_NAME.lower(),
            description=f"{PROJECT_NAME} - {PROJECT_DESCRIPTION} v{PROJECT_VERSION}",
            formatter_class=argparse.RawDescriptionHelpFormatter,
            epilog="""
Examples:
  %(prog)s
  %(prog)s --data-dir ~/music-data
  %(prog)s --albums-index ./albums/albums.txt --log-level DEBUG
            """
        )

        parser.add_argument(
            '--version',
            action='version',
            version=f'{PROJECT_NAME} {PROJECT_VERSION}'
        )
        parser.add_argument(
            '--data-dir', '-d',
            type=Path,
            help=f'Directory holding accounts and libraries (default: {DATA_DIR})'
        )
        parser.add_argument(
            '--albums-index', '-a',
            type=Path,
            help='Album index file of the music store '
                 '(default: albums/albums.txt inside the data directory)'
        )
        parser.add_argument(
            '--log-level', '-l',
            choices=['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'],
            help='Logging level for diagnostics written to stderr'
        )

        return parser

    def setup(self, data_dir: Path, albums_index: Optional[Path] = None):
        """Load the store and wire up the handlers for a data directory."""
        if albums_index is None:
            albums_index = data_dir / ALBUMS_INDEX_FILE.relative_to(DATA_DIR)

        self.catalog = MusicCatalog(albums_index)
        self.account_handler = AccountHandler(
            AccountStore(data_dir / USERS_FILE.relative_to(DATA_DIR)),
            self.display_manager
        )
        self.library_handler = LibraryHandler(
            self.catalog,
            LibraryStorage(data_dir / USER_LIBRARIES_DIR.relative_to(DATA_DIR)),
            self.display_manager
        )

    def run(self, args: List[str] = None) -> int:
        """Run the CLI with given arguments and return the exit status."""
        parser = self.create_parser()
        parsed_args = parser.parse_args(args)

        if parsed_args.log_level:
            setup_logging(parsed_args.log_level)

        data_dir = parsed_args.data_dir or DATA_DIR
        validate_and_raise(data_dir)
        self.setup(data_dir, parsed_args.albums_index)

        console = self.display_manager.console
        try:
            self.display_manager.styling.print_ascii_header(
                f"Welcome to the Music Library! ({len(self.catalog)} albums in store)",
                art_type="notes"
            )
            self.display_manager.styling.log_path(str(data_dir))
            while True:
                self.display_manager.display_menu("Main Menu", MENU_OPTIONS["MAIN"])
                choice = self.display_manager.get_menu_choice(MENU_OPTIONS["MAIN"])

                if choice == REGISTER:
                    self.account_handler.register()
                elif choice == LOGIN:
                    username = self.account_handler.login()
                    if username is not None:
                        self.library_handler.handle(username)
                elif choice == EXIT:
                    console.print("[cyan]Exiting... Goodbye![/cyan]")
                    return 0
        except (KeyboardInterrupt, EOFError):
            console.print("\n[yellow]⚠[/yellow] Operation cancelled by user.")
            return 1
