"""
Core services for Cadenza.
"""

from .catalog_service import MusicCatalog
from .library_model import LibraryModel
from .account_service import AccountStore
from .library_storage import LibraryStorage

__all__ = [
    'MusicCatalog',
    'LibraryModel',
    'AccountStore',
    'LibraryStorage'
]
