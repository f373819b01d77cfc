import asyncio
from typing import NamedTuple

import pytest

from relaypager import exc
from relaypager import encode_cursor as cur
from relaypager import from_query, from_query_async


ITEMS = list(range(10))


class ListQuery(NamedTuple):
    """ A fake query descriptor: a list with limit/offset """
    items: list
    limit: int = None
    offset: int = None


class FakeSource:
    """ A fake external source: records every query it gets """
    def __init__(self, items: list):
        self.items = items
        self.fetched = []

    def apply_window(self, query: ListQuery, *, limit: int, offset: int) -> ListQuery:
        return query._replace(limit=limit, offset=offset)

    def fetch(self, query: ListQuery) -> list:
        self.fetched.append((query.offset, query.limit))
        return query.items[query.offset:query.offset + query.limit]

    async def fetch_async(self, query: ListQuery) -> list:
        return self.fetch(query)


@pytest.mark.parametrize(('args', 'options', 'expected_window', 'expected_nodes', 'expected_has_prev', 'expected_has_next'), [
    # Forward
    (dict(first=3), {}, (0, 3), [0, 1, 2], False, True),
    (dict(first=3, after=cur(2)), {}, (3, 3), [3, 4, 5], False, True),
    (dict(first=3, after=cur(6)), {}, (7, 3), [7, 8, 9], False, True),  # a full page: there may be more
    (dict(first=3, after=cur(8)), {}, (9, 3), [9], False, False),
    (dict(first=3, after=cur(9)), {}, (10, 3), [], False, False),
    # Forward: max limit
    (dict(first=100), dict(max_limit=4), (0, 4), [0, 1, 2, 3], False, True),
    # Backward: with count
    (dict(last=3), dict(count=10), (7, 3), [7, 8, 9], True, False),
    (dict(last=10), dict(count=5), (0, 10), [0, 1, 2, 3, 4, 5, 6, 7, 8, 9], False, False),
    # Backward: with a cursor
    (dict(last=3, before=cur(5)), {}, (2, 3), [2, 3, 4], True, False),
    (dict(last=3, before=cur(5)), dict(count=100), (2, 3), [2, 3, 4], True, False),
    # Backward: the start is clamped, the limit is not
    (dict(last=3, before=cur(1)), {}, (0, 3), [0, 1, 2], False, False),
    # Neither `first` nor `last`
    (dict(), {}, (0, 0), [], False, False),
    # Explicit flags
    (dict(first=3), dict(has_next_page=False, has_previous_page=True), (0, 3), [0, 1, 2], True, False),
])
def test_from_query(args: dict, options: dict, expected_window: tuple, expected_nodes: list, expected_has_prev: bool, expected_has_next: bool):
    """ Typical test: arguments, the query that was made, the page """
    source = FakeSource(ITEMS)
    conn = from_query(ListQuery(ITEMS), source.fetch, args, apply_window=source.apply_window, **options)

    # Exactly one query, exactly this window
    assert source.fetched == [expected_window]

    # Page
    assert conn.nodes == expected_nodes
    assert conn.page_info.has_previous_page == expected_has_prev
    assert conn.page_info.has_next_page == expected_has_next

    # Cursors point to absolute positions
    for edge in conn.edges:
        assert conn.edges.index(edge) + expected_window[0] == ITEMS.index(edge.node)


def test_from_query_missing_count():
    """ `last` without `before` and `count`: fails before making any queries """
    source = FakeSource(ITEMS)

    with pytest.raises(exc.MissingCountError):
        from_query(ListQuery(ITEMS), source.fetch, dict(last=3), apply_window=source.apply_window)

    assert source.fetched == []


def test_from_query_invalid_cursor():
    source = FakeSource(ITEMS)

    with pytest.raises(exc.CursorDecodeError):
        from_query(ListQuery(ITEMS), source.fetch, dict(first=3, after='invalid'), apply_window=source.apply_window)

    assert source.fetched == []


def test_from_query_async():
    """ Async fetch function """
    source = FakeSource(ITEMS)

    async def main():
        return await from_query_async(ListQuery(ITEMS), source.fetch_async, dict(last=2, before=cur(4)), apply_window=source.apply_window)

    conn = asyncio.run(main())

    assert source.fetched == [(2, 2)]
    assert conn.nodes == [2, 3]
    assert conn.page_info.has_previous_page is True
    assert conn.page_info.has_next_page is False
