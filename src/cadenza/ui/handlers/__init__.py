"""
Menu handlers for the interactive session.
"""

from .account_handler import AccountHandler
from .library_handler import LibraryHandler

__all__ = ['AccountHandler', 'LibraryHandler']
