from __future__ import annotations

import dataclasses
from typing import Optional


@dataclasses.dataclass
class PaginationSettings:
    """ Settings for pagination

    This object defines additional behavior that integrations apply to every request:
    for instance, limit the page size regardless of what the client has asked for.
    """
    # The max number of items per page, regardless of `first` and `last`
    max_limit: Optional[int] = None

    def __post_init__(self):
        assert self.max_limit is None or self.max_limit >= 0, '`max_limit` cannot be negative'
