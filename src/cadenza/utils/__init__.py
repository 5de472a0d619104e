"""
Utility modules for Cadenza.
"""

from .records import parse_record, format_record

__all__ = [
    'parse_record',
    'format_record'
]
