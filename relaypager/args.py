""" Pagination arguments: `first`, `after`, `last`, `before`

Resolves them into a pagination direction, an offset, and a limit.
"""

from __future__ import annotations

from collections import abc
from enum import Enum
from typing import NamedTuple, Optional, Union

from relaypager import exc
from relaypager.cursor import decode_cursor
from relaypager.typing import Cursor


class Direction(Enum):
    """ Pagination direction """
    # Paginate from the beginning: `first`, `after`
    FORWARD = 'forward'

    # Paginate from the end: `last`, `before`
    BACKWARD = 'backward'


class PaginationArgs(NamedTuple):
    """ Relay pagination arguments

    Only one of `first` and `last` is honored: when both are given, `first` wins.
    Only one of `after` and `before` is honored: when both are given, `after` wins.
    """
    # Cursor: start after this item
    after: Optional[Cursor] = None

    # Cursor: end before this item
    before: Optional[Cursor] = None

    # The number of items to take from the beginning
    first: Optional[int] = None

    # The number of items to take from the end
    last: Optional[int] = None

    @classmethod
    def from_dict(cls, args: abc.Mapping) -> PaginationArgs:
        """ Get pagination arguments from a dict, e.g. resolver keyword arguments

        Unknown keys are ignored: the dict may contain other field arguments.

        Raises:
            exc.PaginationArgsError
        """
        after, before = args.get('after'), args.get('before')
        first, last = args.get('first'), args.get('last')

        # Check types
        for name, cursor in (('after', after), ('before', before)):
            if cursor is not None and not isinstance(cursor, str):
                raise exc.PaginationArgsError(f'"{name}" must be a string')
        for name, count in (('first', first), ('last', last)):
            if count is not None and (not isinstance(count, int) or isinstance(count, bool)):
                raise exc.PaginationArgsError(f'"{name}" must be an integer')

        # Construct
        return cls(after=after, before=before, first=first, last=last)

    def export(self) -> dict:
        return self._asdict()


# Pagination arguments: as an object, or as a dict
PaginationArgsInput = Union[PaginationArgs, abc.Mapping]


def pagination_args(args: PaginationArgsInput) -> PaginationArgs:
    """ Get a PaginationArgs object, or convert a dict into one """
    if isinstance(args, PaginationArgs):
        return args
    else:
        return PaginationArgs.from_dict(args)


def resolve_limit(args: PaginationArgsInput, max_limit: Optional[int] = None) -> tuple[Direction, int]:
    """ Get the pagination direction and the number of items requested

    * `first` is set: forward pagination, `first` items
    * `last` is set: backward pagination, `last` items
    * neither: forward pagination, 0 items.

    NOTE: when neither `first` nor `last` is given, you get an empty page, not "everything".
    Relay clients always provide one of them; use a default in your schema if you want otherwise.

    Args:
        args: Pagination arguments
        max_limit: Upper bound for the page size, regardless of what the client has requested

    Raises:
        exc.PaginationArgsError: negative `first` or `last`
        ValueError: negative `max_limit`
    """
    args = pagination_args(args)

    direction: Direction
    limit: int
    if args.first is not None:
        direction, limit = Direction.FORWARD, _non_negative('first', args.first)
    elif args.last is not None:
        direction, limit = Direction.BACKWARD, _non_negative('last', args.last)
    else:
        direction, limit = Direction.FORWARD, 0

    # Apply max limit
    if max_limit is not None:
        if max_limit < 0:
            raise ValueError('`max_limit` cannot be negative')
        limit = min(limit, max_limit)

    # Done
    return direction, limit


def resolve_offset(args: PaginationArgsInput) -> Optional[int]:
    """ Get the offset that the cursor points to

    * `after` is set: the position right after the item it points to
    * `before` is set: the position of the item it points to
    * neither: None. The caller has to decide, depending on the direction.

    Raises:
        exc.CursorDecodeError
    """
    args = pagination_args(args)

    if args.after is not None:
        return max(decode_cursor(args.after) + 1, 0)
    elif args.before is not None:
        return max(decode_cursor(args.before), 0)
    else:
        return None


def resolve_list_window(args: PaginationArgsInput, count: int, max_limit: Optional[int] = None) -> tuple[int, int]:
    """ Get (offset, limit) for a list of `count` items

    When paginating backwards, the page ends at the cursor (or at the end of the list).
    If there are not enough items before it, the page starts at 0 and includes everything up to the cursor.

    Raises:
        exc.PaginationArgsError
        exc.CursorDecodeError
    """
    direction, limit = resolve_limit(args, max_limit)
    offset = resolve_offset(args)

    if direction == Direction.FORWARD:
        return offset or 0, limit
    else:
        end_offset = offset if offset is not None else count
        start_offset = max(end_offset - limit, 0)

        # The start was clamped: take everything up to the end
        if start_offset == 0:
            limit = end_offset

        return start_offset, limit


def resolve_query_window(args: PaginationArgsInput, count: Optional[int] = None, max_limit: Optional[int] = None) -> tuple[int, int]:
    """ Get (offset, limit) for an external source, like a database query

    Backward pagination needs to know where the page ends: either the `before` cursor, or the total `count`.

    Raises:
        exc.PaginationArgsError
        exc.CursorDecodeError
        exc.MissingCountError: `last` without `before`, and no `count`
    """
    direction, limit = resolve_limit(args, max_limit)
    offset = resolve_offset(args)

    if direction == Direction.FORWARD:
        return offset or 0, limit
    else:
        if offset is not None:
            end_offset = offset
        elif count is not None:
            end_offset = count
        else:
            raise exc.MissingCountError()

        return max(end_offset - limit, 0), limit


def _non_negative(name: str, value: int) -> int:
    if value < 0:
        raise exc.PaginationArgsError(f'"{name}" cannot be negative')
    return value
