"""
User interface components for Cadenza.
"""

from .cli import CadenzaCLI
from .display import DisplayManager

__all__ = [
    'CadenzaCLI',
    'DisplayManager'
]
