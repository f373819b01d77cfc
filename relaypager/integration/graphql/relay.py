""" Relay pagination for GraphQL """

from __future__ import annotations

import contextlib
from collections import abc
from typing import Optional, TypedDict

import graphql

from relaypager import exc
from relaypager.args import PaginationArgs
from relaypager.connection import Connection, from_list
from relaypager.settings import PaginationSettings
from relaypager.typing import Cursor


# Arguments for a connection field: first, after, last, before
# Example:
#   GraphQLField(UserConnection, args=relay_connection_args, resolve=resolve_users)
relay_connection_args: dict[str, graphql.GraphQLArgument] = {
    'after': graphql.GraphQLArgument(graphql.GraphQLString, description='Return items after this cursor'),
    'first': graphql.GraphQLArgument(graphql.GraphQLInt, description='Return this many items from the beginning'),
    'before': graphql.GraphQLArgument(graphql.GraphQLString, description='Return items before this cursor'),
    'last': graphql.GraphQLArgument(graphql.GraphQLInt, description='Return this many items from the end'),
}


@contextlib.contextmanager
def relay_errors():
    """ Report invalid pagination arguments as GraphQL errors

    Example:
        with relay_errors():
            return relay_connection(from_list(items, kwargs))
    """
    try:
        yield
    except exc.PaginationArgsError as e:
        raise graphql.GraphQLError(str(e), original_error=e) from e


def pagination_args_from(kwargs: abc.Mapping) -> PaginationArgs:
    """ Get pagination arguments from the resolver's keyword arguments

    Raises:
        graphql.GraphQLError: invalid arguments
    """
    with relay_errors():
        return PaginationArgs.from_dict(kwargs)


def relay_connection(connection: Connection) -> ConnectionDict:
    """ Get results in Relay paginated format: camel case """
    page_info = connection.page_info
    return {
        'edges': [{'node': edge.node, 'cursor': edge.cursor} for edge in connection.edges],
        'pageInfo': {
            'hasPreviousPage': page_info.has_previous_page,
            'hasNextPage': page_info.has_next_page,
            'startCursor': page_info.start_cursor,
            'endCursor': page_info.end_cursor,
        }
    }


def relay_connection_from_list(items: abc.Sequence, kwargs: abc.Mapping, settings: Optional[PaginationSettings] = None) -> ConnectionDict:
    """ Paginate a complete list of items in a resolver

    Example:
        def resolve_pets(person, info, **kwargs):
            return relay_connection_from_list(person.pets, kwargs, PaginationSettings(max_limit=100))

    Raises:
        graphql.GraphQLError: invalid arguments
    """
    settings = settings or PaginationSettings()

    with relay_errors():
        connection = from_list(items, PaginationArgs.from_dict(kwargs), max_limit=settings.max_limit)

    return relay_connection(connection)


class ConnectionDict(TypedDict):
    """ Relay Connection type: paginated list """
    edges: list[EdgeDict]
    pageInfo: PageInfoDict


class EdgeDict(TypedDict):
    """ Relay Edge type: paginated item """
    node: object
    cursor: Cursor


class PageInfoDict(TypedDict):
    """ Relay Page Info """
    hasPreviousPage: bool
    hasNextPage: bool
    startCursor: Optional[Cursor]
    endCursor: Optional[Cursor]
