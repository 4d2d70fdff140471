# -*- coding: utf-8 -*-

from .config import PaginationConfig, DEFAULT_CONFIG
from .logger import get_logger
from .exceptions import (
    TransportError,
    RestPagerException,
    MalformedURLError,
    PageDecodeError,
    UnexpectedShapeError,
    UnexpectedContentTypeError,
    PaginationLimitError,
    PaginationCycleError,
    PaginationCancelled,
)

__all__ = [
    "PaginationConfig",
    "DEFAULT_CONFIG",
    "get_logger",
    "TransportError",
    "RestPagerException",
    "MalformedURLError",
    "PageDecodeError",
    "UnexpectedShapeError",
    "UnexpectedContentTypeError",
    "PaginationLimitError",
    "PaginationCycleError",
    "PaginationCancelled",
]
