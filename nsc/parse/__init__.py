"""
Parsers for human-entered command arguments: expirations, counts and data sizes.
"""

from .expiry import parse_expiry, add_months, NO_EXPIRATION
from .quantity import parse_number, parse_data_size, NUMBER_UNITS, DATA_SIZE_UNITS

__all__ = [
    'parse_expiry',
    'add_months',
    'NO_EXPIRATION',
    'parse_number',
    'parse_data_size',
    'NUMBER_UNITS',
    'DATA_SIZE_UNITS',
]
