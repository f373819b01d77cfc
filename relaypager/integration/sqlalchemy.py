""" Integration with SqlAlchemy: paginate `Select` statements

Example:
    with Session() as ssn:
        conn = relaypager.from_query(
            sa.select(User).order_by(User.id),
            session_fetcher(ssn),
            args,
            apply_window=apply_limit_offset,
            count=count_rows(ssn, sa.select(User)),
        )
"""

from __future__ import annotations

from collections import abc
from typing import Any, Union

import sqlalchemy as sa
import sqlalchemy.orm


def apply_limit_offset(stmt: sa.sql.Select, *, limit: int, offset: int) -> sa.sql.Select:
    """ Window function for from_query(): add LIMIT/OFFSET clauses

    The statement must have an ORDER BY clause: offsets make no sense without one.
    """
    return stmt.limit(limit).offset(offset)


def connection_fetcher(connection: Union[sa.engine.Connection, sa.orm.Session]) -> abc.Callable[[sa.sql.Select], list[abc.Mapping[str, Any]]]:
    """ Fetch function for from_query(): execute the statement and get rows as dicts

    Use it with Core statements: e.g. sa.select(table)
    """
    def fetch(stmt: sa.sql.Select) -> list[abc.Mapping[str, Any]]:
        return [dict(row) for row in connection.execute(stmt).mappings()]
    return fetch


def session_fetcher(session: sa.orm.Session) -> abc.Callable[[sa.sql.Select], list[object]]:
    """ Fetch function for from_query(): execute the statement and get ORM instances

    Use it with ORM statements: e.g. sa.select(Model)
    """
    def fetch(stmt: sa.sql.Select) -> list[object]:
        return list(session.scalars(stmt).all())
    return fetch


def count_rows(connection: Union[sa.engine.Connection, sa.orm.Session], stmt: sa.sql.Select) -> int:
    """ Count the rows that a statement would return

    Use it to provide the `count` for backward pagination: `last` without `before`.
    ORDER BY, LIMIT and OFFSET of the original statement are dropped.
    """
    subquery = stmt.order_by(None).limit(None).offset(None).subquery()
    count_stmt = sa.select(sa.func.count()).select_from(subquery)
    return connection.execute(count_stmt).scalar_one()
