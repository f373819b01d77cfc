""" Integration with GraphQL: graphql-core """

from .relay import relay_connection, relay_connection_from_list, relay_connection_args
from .relay import pagination_args_from, relay_errors
from .relay import ConnectionDict, EdgeDict, PageInfoDict
