from .types import Connection, Edge, PageInfo
from .types import ConnectionSnakeDict, EdgeDict, PageInfoSnakeDict
from .slice import from_slice, from_list
from .query import from_query, from_query_async
