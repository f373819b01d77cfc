__version__ = __import__('importlib.metadata').metadata.version('relaypager')

from .cursor import encode_cursor, decode_cursor, CURSOR_PREFIX
from .args import PaginationArgs, Direction
from .args import resolve_limit, resolve_offset, resolve_list_window, resolve_query_window
from .settings import PaginationSettings
from .connection import Connection, Edge, PageInfo
from .connection import from_slice, from_list, from_query, from_query_async

from . import exc
