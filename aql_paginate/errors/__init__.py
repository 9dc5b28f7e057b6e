"""Error handling module for aql-paginate."""

from .problem_details import (
    ProblemDetail,
    ProblemDetailException,
    BadRequestError,
    InvalidSortFieldError,
    UnprocessableEntityError,
    create_problem_response
)
from .handlers import register_exception_handlers

__all__ = [
    "ProblemDetail",
    "ProblemDetailException",
    "BadRequestError",
    "InvalidSortFieldError",
    "UnprocessableEntityError",
    "create_problem_response",
    "register_exception_handlers"
]
