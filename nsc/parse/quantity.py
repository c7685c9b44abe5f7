"""
Count and data size parsing.

Both parsers accept a bare decimal or a decimal followed by a single unit
letter (case-insensitive). Multipliers are decimal, not binary. Counts know
``K``/``M``/``G``; data sizes know ``B``/``K``/``M`` and deliberately stop there.
"""

import logging
import re
from typing import Dict

from ..types.errors import InvalidNumberSyntax

logger = logging.getLogger(__name__)

NUMBER_UNITS: Dict[str, int] = {
    'K': 1000,
    'M': 1000000,
    'G': 1000000000,
}

DATA_SIZE_UNITS: Dict[str, int] = {
    'B': 1,
    'K': 1000,
    'M': 1000000,
}

_DIGITS = re.compile(r'[0-9]+')
_SCALED = re.compile(r'([0-9]+)([A-Z])')


def _parse_scaled(s: str, units: Dict[str, int], kind: str) -> int:
    text = s.strip().upper()
    if text == "":
        return 0

    if _DIGITS.fullmatch(text):
        return int(text)

    m = _SCALED.fullmatch(text)
    if m and m.group(2) in units:
        return int(m.group(1)) * units[m.group(2)]

    logger.warning("Rejected %s %r", kind, s)
    raise InvalidNumberSyntax(s, kind)


def parse_number(s: str) -> int:
    """Parse a count such as ``"100"``, ``"5k"`` or ``"2G"``."""
    return _parse_scaled(s, NUMBER_UNITS, "number")


def parse_data_size(s: str) -> int:
    """Parse a byte size such as ``"512"``, ``"10B"`` or ``"4M"``. There is no ``G``."""
    return _parse_scaled(s, DATA_SIZE_UNITS, "data size")
