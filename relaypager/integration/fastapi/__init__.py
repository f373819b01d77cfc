""" Integration with FastAPI """

from .pagination_args import pagination_args
