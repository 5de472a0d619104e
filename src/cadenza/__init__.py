"""
Cadenza - personal music library manager.
"""

from .core.config import PROJECT_VERSION as __version__

__all__ = ['__version__']
