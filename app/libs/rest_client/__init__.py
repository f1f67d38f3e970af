"""Synchronous HTTP convenience layer over httpx."""

from .errors import (
    EmptyURLError,
    HTTPStatusError,
    MethodNotSupportedError,
    ReplyDecodeError,
    RestClientError,
)
from .models import ApiStdRes, Reply, ReqOpt
from .params import build_cookies, cookie_header, parse_data, render_value
from .service import DEFAULT_REQ_TIMEOUT, Service
from .types import ParamMap, ParamValue

__all__ = [
    "Service",
    "ReqOpt",
    "Reply",
    "ApiStdRes",
    "DEFAULT_REQ_TIMEOUT",
    "ParamMap",
    "ParamValue",
    "parse_data",
    "render_value",
    "build_cookies",
    "cookie_header",
    "RestClientError",
    "MethodNotSupportedError",
    "EmptyURLError",
    "HTTPStatusError",
    "ReplyDecodeError",
]
