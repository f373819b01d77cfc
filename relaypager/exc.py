class BaseRelaypagerException(Exception):
    pass


class PaginationArgsError(BaseRelaypagerException):
    """ Invalid pagination arguments provided by the User

    Reported when `first`, `last`, `before` or `after` have unacceptable values
    """

    def __init__(self, err: str):
        super().__init__(f'Pagination arguments error: {err}')


class CursorDecodeError(PaginationArgsError):
    """ Cursor value could not be decoded into an offset

    Reported when the cursor is not valid base64, does not carry the expected prefix,
    or its payload is not an integer. Most likely, the cursor was forged or came from some other API.
    """

    def __init__(self, cursor: object, reason: str):
        self.cursor = cursor
        self.reason = reason

        super().__init__(f'Invalid cursor {cursor!r}: {reason}')


class MissingCountError(BaseRelaypagerException):
    """ Backward pagination over an external source is not possible

    Reported when `last` is used without `before`, and the total `count` of items was not given.
    Without either of them, the offset of the page cannot be computed.
    This is a programming error rather than a user error.
    """

    def __init__(self):
        super().__init__('You must supply a `count` if using `last` without `before`')
