"""
Output destinations for formatted blocks.

``"--"`` means standard output. Anything else names a file that must not
exist yet: generated secrets are never written over an existing file.
"""

import logging
import os
import sys
from typing import Optional

from ..types.errors import OutputError

logger = logging.getLogger(__name__)

STDOUT = "--"
NOT_SPECIFIED = "(not specified)"


def is_stdout(fp: str) -> bool:
    return fp == STDOUT


def ok_to_write(fp: str) -> bool:
    """True for stdout or a path that doesn't exist yet."""
    if is_stdout(fp):
        return True
    return not os.path.exists(fp)


def is_readable_file(fp: str) -> bool:
    return os.path.exists(fp)


def write_output(fp: Optional[str], data: bytes, default: str = STDOUT) -> None:
    """
    Write ``data`` to stdout or to a new file.

    ``fp`` of None falls back to ``default``, usually ``Settings.output``.
    Raises OutputError if the file already exists or can't be written.
    """
    fp = fp or default

    if is_stdout(fp):
        sys.stdout.write(data.decode('utf-8'))
        sys.stdout.flush()
        return

    try:
        f = open(fp, 'xb')
    except FileExistsError as e:
        raise OutputError(f"{fp!r} already exists", fp, cause=e) from e
    except OSError as e:
        raise OutputError(f"error creating output file {fp!r}: {e}", fp, cause=e) from e

    with f:
        try:
            f.write(data)
            f.flush()
            os.fsync(f.fileno())
        except OSError as e:
            raise OutputError(f"error writing {fp!r}: {e}", fp, cause=e) from e

    logger.info("Wrote %d bytes to %s", len(data), fp)


def default_name(s: str) -> str:
    """Placeholder for names the user left empty."""
    return s if s else NOT_SPECIFIED
