""" Cursor codec: opaque cursors that encode an offset """

from __future__ import annotations

import base64
import binascii
import logging

from relaypager import exc
from relaypager.typing import Cursor


logger = logging.getLogger(__name__)


# Prefix that every cursor carries.
# Compatible with `connectionFromArray()` cursors generated by graphql-relay-js and friends.
CURSOR_PREFIX = 'arrayconnection:'


def encode_cursor(offset: int) -> Cursor:
    """ Encode an offset as an opaque cursor string

    Example:
        >>> encode_cursor(0)
        'YXJyYXljb25uZWN0aW9uOjA='
    """
    return base64.b64encode(f'{CURSOR_PREFIX}{offset}'.encode()).decode()


def decode_cursor(cursor: Cursor) -> int:
    """ Decode an opaque cursor string into an offset

    Raises:
        exc.CursorDecodeError: the cursor is not base64, has a wrong prefix, or is not an integer
    """
    if not isinstance(cursor, str):
        raise _fail(cursor, 'must be a string')

    # base64
    try:
        payload = base64.b64decode(cursor.encode(), validate=True).decode()
    except (binascii.Error, UnicodeError):
        raise _fail(cursor, 'malformed encoding')

    # Prefix
    if not payload.startswith(CURSOR_PREFIX):
        raise _fail(cursor, 'unknown cursor type')

    # Offset
    # Only plain decimals: int() is too forgiving and would accept "+1", " 1" and "1_000".
    # A negative offset is let through: resolve_offset() clamps it to zero
    raw_offset = payload[len(CURSOR_PREFIX):]
    digits = raw_offset[1:] if raw_offset.startswith('-') else raw_offset
    if not digits.isascii() or not digits.isdigit():
        raise _fail(cursor, 'offset is not an integer')

    # Very long payloads exceed the int() digit limit
    try:
        return int(raw_offset)
    except ValueError:
        raise _fail(cursor, 'offset is not an integer')


def _fail(cursor: object, reason: str) -> exc.CursorDecodeError:
    logger.debug('Cursor rejected: %r (%s)', cursor, reason)
    return exc.CursorDecodeError(cursor, reason)
