from typing import Optional

import fastapi

from relaypager import exc
from relaypager.args import PaginationArgs, resolve_limit, resolve_offset


def pagination_args(*,
        first: Optional[int] = fastapi.Query(
            None,
            title='Pagination. The number of items to take from the beginning.',
        ),
        after: Optional[str] = fastapi.Query(
            None,
            title='Pagination. Cursor: return items after this one.',
        ),
        last: Optional[int] = fastapi.Query(
            None,
            title='Pagination. The number of items to take from the end.',
        ),
        before: Optional[str] = fastapi.Query(
            None,
            title='Pagination. Cursor: return items before this one.',
        ),
) -> PaginationArgs:
    """ Get Relay pagination arguments from the request parameters

    Example:
        /api/users?first=10&after=YXJyYXljb25uZWN0aW9uOjk=

    Cursors and counts are validated right away, so that a bad request never gets an empty page.

    Raises:
        fastapi.HTTPException: 400, invalid arguments
    """
    args = PaginationArgs(after=after, before=before, first=first, last=last)

    try:
        resolve_limit(args)
        resolve_offset(args)
    except exc.PaginationArgsError as e:
        raise fastapi.HTTPException(status_code=400, detail=str(e)) from e

    return args
