from typing import Any, Callable, Sequence, TypeVar


# An opaque cursor string
Cursor = str

# A node: any item being paginated
NodeT = TypeVar('NodeT')

# A query descriptor for an external source. E.g. SqlAlchemy `Select`
QueryT = TypeVar('QueryT')

# Fetch function: execute a query that has limit/offset applied, get the items
FetchFunc = Callable[[Any], Sequence[Any]]

# Window function: apply limit/offset to a query descriptor.
# Called as: apply_window(query, limit=limit, offset=offset)
ApplyWindowFunc = Callable[..., Any]
