""" Connections from an external source: e.g. a database query """

from __future__ import annotations

import logging
from collections import abc
from typing import Any, Optional

from relaypager.args import PaginationArgs, PaginationArgsInput, pagination_args, resolve_query_window
from relaypager.typing import ApplyWindowFunc, FetchFunc, QueryT

from .slice import from_slice
from .types import Connection


logger = logging.getLogger(__name__)


def from_query(query: QueryT, fetch: FetchFunc, args: PaginationArgsInput, *,
               apply_window: ApplyWindowFunc,
               max_limit: Optional[int] = None,
               count: Optional[int] = None,
               has_next_page: Optional[bool] = None,
               has_previous_page: Optional[bool] = None,
               ) -> Connection:
    """ Build a connection from an external query

    Applies LIMIT/OFFSET to the query, loads exactly one page, and builds a connection from it.
    The query must have a stable ordering: offsets make no sense without one.

    `last` must be accompanied by either the `before` cursor, or an explicit `count`:
    otherwise it is impossible to tell where the page starts.

    Example:
        from_query(
            sa.select(User).order_by(User.id),
            session_fetcher(ssn),
            dict(first=10),
            apply_window=apply_limit_offset,
        )

    Args:
        query: The query descriptor, e.g. SqlAlchemy `Select`
        fetch: Function that executes the query and returns a list of items
        args: Pagination arguments
        apply_window: Function that applies limit and offset to the query: apply_window(query, limit=, offset=)
        max_limit: Upper bound for the page size
        count: The total number of items. Needed for `last` without `before`.
        has_next_page: Override the computed flag
        has_previous_page: Override the computed flag

    Raises:
        exc.PaginationArgsError
        exc.CursorDecodeError
        exc.MissingCountError
    """
    args, offset, limit, windowed_query = _prepare_query(query, args, apply_window=apply_window, max_limit=max_limit, count=count)
    items = fetch(windowed_query)
    return _connection_from_fetched(items, args, offset, limit, has_next_page=has_next_page, has_previous_page=has_previous_page)


async def from_query_async(query: QueryT, fetch: abc.Callable[[Any], abc.Awaitable[abc.Sequence]], args: PaginationArgsInput, *,
                           apply_window: ApplyWindowFunc,
                           max_limit: Optional[int] = None,
                           count: Optional[int] = None,
                           has_next_page: Optional[bool] = None,
                           has_previous_page: Optional[bool] = None,
                           ) -> Connection:
    """ Build a connection from an external query, async version

    Same as from_query(), but `fetch` is a coroutine function.
    """
    args, offset, limit, windowed_query = _prepare_query(query, args, apply_window=apply_window, max_limit=max_limit, count=count)
    items = await fetch(windowed_query)
    return _connection_from_fetched(items, args, offset, limit, has_next_page=has_next_page, has_previous_page=has_previous_page)


def _prepare_query(query: QueryT, args: PaginationArgsInput, *,
                   apply_window: ApplyWindowFunc,
                   max_limit: Optional[int],
                   count: Optional[int]) -> tuple[PaginationArgs, int, int, Any]:
    """ Resolve the window and apply it to the query """
    args = pagination_args(args)
    offset, limit = resolve_query_window(args, count, max_limit)
    logger.debug('Paginating query: offset=%d limit=%d', offset, limit)

    return args, offset, limit, apply_window(query, limit=limit, offset=offset)


def _connection_from_fetched(items: abc.Sequence, args: PaginationArgs, offset: int, limit: int, *,
                             has_next_page: Optional[bool],
                             has_previous_page: Optional[bool]) -> Connection:
    """ Build a connection from the fetched items """
    items = list(items)

    # Flags
    # A full page implies there may be more
    if has_next_page is None:
        has_next_page = args.first is not None and len(items) >= limit
    if has_previous_page is None:
        has_previous_page = args.last is not None and offset > 0

    return from_slice(items, offset, has_next_page=has_next_page, has_previous_page=has_previous_page)
