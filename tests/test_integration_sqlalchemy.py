import pytest
import sqlalchemy as sa
import sqlalchemy.orm

from relaypager import exc
from relaypager import encode_cursor as cur
from relaypager import from_query
from relaypager.integration.sqlalchemy import apply_limit_offset, connection_fetcher, session_fetcher, count_rows

from .util.models import Base, User, users


def test_apply_limit_offset():
    """ What SQL is generated """
    stmt = apply_limit_offset(sa.select(User.id).order_by(User.id), limit=3, offset=2)
    sql = str(stmt.compile(compile_kwargs={'literal_binds': True}))

    assert 'ORDER BY u.id' in sql
    assert 'LIMIT 3 OFFSET 2' in sql


@pytest.mark.parametrize(('args', 'options', 'expected_ids', 'expected_has_prev', 'expected_has_next'), [
    (dict(first=3), {}, [1, 2, 3], False, True),
    (dict(first=3, after=cur(2)), {}, [4, 5, 6], False, True),
    (dict(first=3, after=cur(8)), {}, [10], False, False),
    (dict(last=3, before=cur(5)), {}, [3, 4, 5], True, False),
    (dict(first=100), dict(max_limit=2), [1, 2], False, True),
])
def test_session_fetcher(ssn: sa.orm.Session, args: dict, options: dict, expected_ids: list, expected_has_prev: bool, expected_has_next: bool):
    """ Typical test: ORM models, real query, real results """
    # Data
    Base.metadata.create_all(ssn.connection())
    ssn.add_all(users(10))
    ssn.flush()

    # Test
    conn = from_query(
        sa.select(User).order_by(User.id),
        session_fetcher(ssn),
        args,
        apply_window=apply_limit_offset,
        **options
    )

    assert all(isinstance(user, User) for user in conn.nodes)
    assert [user.id for user in conn.nodes] == expected_ids
    assert conn.page_info.has_previous_page == expected_has_prev
    assert conn.page_info.has_next_page == expected_has_next


def test_connection_fetcher(connection: sa.engine.Connection):
    """ Core statements, rows as dicts; backward pagination with a count """
    # Data
    table = User.__table__
    table.create(connection)
    connection.execute(table.insert(), [{'id': user.id, 'login': user.login} for user in users(10)])

    # Count
    stmt = sa.select(table.c.id, table.c.login).order_by(table.c.id)
    count = count_rows(connection, stmt)
    assert count == 10

    # Last page
    conn = from_query(stmt, connection_fetcher(connection), dict(last=2), apply_window=apply_limit_offset, count=count)
    assert conn.nodes == [
        {'id': 9, 'login': 'user-9'},
        {'id': 10, 'login': 'user-10'},
    ]
    assert conn.page_info.has_previous_page is True

    # Previous page
    conn = from_query(stmt, connection_fetcher(connection), dict(last=2, before=conn.page_info.start_cursor), apply_window=apply_limit_offset)
    assert [row['id'] for row in conn.nodes] == [7, 8]

    # No count, no cursor
    with pytest.raises(exc.MissingCountError):
        from_query(stmt, connection_fetcher(connection), dict(last=2), apply_window=apply_limit_offset)


def test_count_rows_ignores_window(connection: sa.engine.Connection):
    """ count_rows() drops ORDER BY, LIMIT, OFFSET """
    Base.metadata.create_all(connection)
    connection.execute(User.__table__.insert(), [{'id': user.id, 'login': user.login} for user in users(5)])

    stmt = apply_limit_offset(sa.select(User.id).order_by(User.id.desc()), limit=2, offset=1)
    assert count_rows(connection, stmt) == 5
    assert count_rows(connection, stmt.where(User.id > 3)) == 2
