""" Connections from in-memory data: a slice, or a complete list """

from __future__ import annotations

from collections import abc
from typing import Optional

from relaypager.args import PaginationArgsInput, pagination_args, resolve_list_window
from relaypager.cursor import encode_cursor
from relaypager.typing import NodeT

from .types import Connection, Edge, PageInfo


def from_slice(items: abc.Sequence[NodeT], offset: int, *,
               has_next_page: bool = False,
               has_previous_page: bool = False,
               ) -> Connection[NodeT]:
    """ Build a connection from a slice of items

    Use it when you have already loaded precisely the items for this page.
    The slice cannot tell whether there are more pages: it is up to the caller to provide the flags.

    Args:
        items: The items for this page, in order
        offset: Absolute position of the first item
        has_next_page: Is there a next page?
        has_previous_page: Is there a previous page?
    """
    edges = [
        Edge(node=item, cursor=encode_cursor(offset + i))
        for i, item in enumerate(items)
    ]

    page_info = PageInfo(
        start_cursor=edges[0].cursor if edges else None,
        end_cursor=edges[-1].cursor if edges else None,
        has_previous_page=has_previous_page,
        has_next_page=has_next_page,
    )

    return Connection(edges=edges, page_info=page_info)


def from_list(items: abc.Sequence[NodeT], args: PaginationArgsInput, *,
              max_limit: Optional[int] = None,
              has_next_page: Optional[bool] = None,
              has_previous_page: Optional[bool] = None,
              ) -> Connection[NodeT]:
    """ Build a connection from a complete list of items

    The list has to contain every item that pagination may ever go over: it just discards what it does not need.
    If your data comes from a database, see from_query(): it loads only the items it needs.

    NOTE: as Relay connections define it, `has_next_page` is only reported when paginating with `first`,
    and `has_previous_page` is only reported when paginating with `last`.
    The flag for the other direction is always `False`.

    Example:
        from_list(['a', 'b', 'c'], dict(first=2))

    Args:
        items: All items, in order
        args: Pagination arguments
        max_limit: Upper bound for the page size
        has_next_page: Override the computed flag
        has_previous_page: Override the computed flag

    Raises:
        exc.PaginationArgsError
        exc.CursorDecodeError
    """
    args = pagination_args(args)
    count = len(items)
    offset, limit = resolve_list_window(args, count, max_limit)

    # Flags
    if has_next_page is None:
        has_next_page = args.first is not None and count > offset + limit
    if has_previous_page is None:
        has_previous_page = args.last is not None and offset > 0

    # Done
    return from_slice(
        items[offset:offset + limit],
        offset,
        has_next_page=has_next_page,
        has_previous_page=has_previous_page,
    )
