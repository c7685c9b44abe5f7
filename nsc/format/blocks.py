"""
Delimited text blocks for key material and signed tokens.

Blocks look like::

    -----BEGIN OPERATOR JWT-----
    <payload>
    ------END OPERATOR JWT------

The END marker carries one dash more on each side than BEGIN. Both the
formatter and ``extract_token`` depend on that shape.
"""

import io
import logging
import re

logger = logging.getLogger(__name__)

IMPORTANT_BANNER = "************************* IMPORTANT *************************"
CLOSING_RULE = "*************************************************************"

SECRET_WARNING = (
    "Your options generated NKEYs which can be used to create",
    "entities or prove identity.",
    "",
    "Generated keys printed below are sensitive and should be",
    "treated as secrets to prevent unauthorized access.",
    "",
    "The private key is not saved by the tool. Please save",
    "it now as it will be required by the user to connect to NATS.",
    "The public key is saved and uniquely identifies the user.",
    "",
)

_WHITESPACE = re.compile(r'\s+')
_DASHES = re.compile(r'-+')
_BLOCK = re.compile(r'(-BEGIN.+(JWT|KEY)-)(?P<token>.+)(-END.+(JWT|KEY)-)')


def _write_block(w: io.StringIO, label: str, kind: str, payload: str) -> None:
    print(f"-----BEGIN {label} {kind}-----", file=w)
    print(payload, file=w)
    print(f"------END {label} {kind}------", file=w)
    print(file=w)


def format_keys(key_type: str, public_key: str = "", private_key: str = "") -> bytes:
    """
    Render key material as delimited blocks.

    When ``private_key`` is given it is preceded by a warning that the tool
    does not keep it. Empty keys are skipped.
    """
    w = io.StringIO()
    label = key_type.upper()

    if private_key:
        print(IMPORTANT_BANNER, file=w)
        for line in SECRET_WARNING:
            print(line, file=w)
        _write_block(w, label, "PRIVATE KEY", private_key)
        print(CLOSING_RULE, file=w)
        print(file=w)

    if public_key:
        _write_block(w, label, "PUB KEY", public_key)

    print(file=w)

    return w.getvalue().encode('utf-8')


def format_jwt(jwt_type: str, jwt: str) -> bytes:
    """Render a signed token as a delimited block."""
    w = io.StringIO()
    _write_block(w, jwt_type.upper(), "JWT", jwt)
    return w.getvalue().encode('utf-8')


def extract_token(s: str) -> str:
    """
    Return the payload of a delimited block found in ``s``.

    Whitespace is dropped and dash runs collapse to a single dash before
    matching, so reflowed or hand-edited blocks still work. Text without a
    block is returned unchanged.
    """
    w = _WHITESPACE.sub('', s)
    w = _DASHES.sub('-', w)

    # the block now reads -BEGINXXXXPUBKEY-token-ENDXXXXPUBKEY-
    m = _BLOCK.search(w)
    if m:
        return m.group('token')

    logger.debug("No delimited block found, passing input through")
    return s
