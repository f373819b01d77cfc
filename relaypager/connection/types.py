from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Optional, TypedDict

from relaypager.typing import Cursor, NodeT


@dataclass(frozen=True)
class Edge(Generic[NodeT]):
    """ Relay Edge: an item, and its position """
    # The item
    node: NodeT

    # Cursor that points to the item
    cursor: Cursor

    __slots__ = 'node', 'cursor'


@dataclass(frozen=True)
class PageInfo:
    """ Relay Page Info: where we are, and where we can go """
    # Cursor of the first edge, if any
    start_cursor: Optional[Cursor] = None

    # Cursor of the last edge, if any
    end_cursor: Optional[Cursor] = None

    # Is there a page before this one?
    has_previous_page: bool = False

    # Is there a page after this one?
    has_next_page: bool = False

    def export(self) -> PageInfoSnakeDict:
        return {
            'start_cursor': self.start_cursor,
            'end_cursor': self.end_cursor,
            'has_previous_page': self.has_previous_page,
            'has_next_page': self.has_next_page,
        }


@dataclass(frozen=True)
class Connection(Generic[NodeT]):
    """ Relay Connection: a page of items """
    # Items, with cursors, in ascending order
    edges: list[Edge[NodeT]]

    # Page info
    page_info: PageInfo

    __slots__ = 'edges', 'page_info'

    @property
    def nodes(self) -> list[NodeT]:
        """ Get the items without their cursors """
        return [edge.node for edge in self.edges]

    def export(self) -> ConnectionSnakeDict:
        """ Export as a dict, snake case """
        return {
            'edges': [{'node': edge.node, 'cursor': edge.cursor} for edge in self.edges],
            'page_info': self.page_info.export(),
        }


class ConnectionSnakeDict(TypedDict):
    """ Relay Connection type, snake case """
    edges: list[EdgeDict]
    page_info: PageInfoSnakeDict


class EdgeDict(TypedDict):
    """ Relay Edge type: paginated item """
    node: object
    cursor: Cursor


class PageInfoSnakeDict(TypedDict):
    """ Relay page info, snake case """
    has_previous_page: bool
    has_next_page: bool
    start_cursor: Optional[Cursor]
    end_cursor: Optional[Cursor]
