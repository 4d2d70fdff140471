# -*- coding: utf-8 -*-
from .modules.version import __version__, __appname__, __fullname__
from .modules.link_header import Link, LinkHeader, parse_link_header, next_page_url
from .modules.query_normalizer import set_per_page, resolve_url
from .modules.response_merger import merge_responses, merge_pages
from .modules.pagination_handler import PaginationHandler
from .modules.http_client import HTTPClient, PaginatingAdapter, wrap_session
from .infrastructure.config import PaginationConfig
from .infrastructure.exceptions import (
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
    "__version__",
    "__appname__",
    "__fullname__",
    "Link",
    "LinkHeader",
    "parse_link_header",
    "next_page_url",
    "set_per_page",
    "resolve_url",
    "merge_responses",
    "merge_pages",
    "PaginationHandler",
    "HTTPClient",
    "PaginatingAdapter",
    "wrap_session",
    "PaginationConfig",
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
