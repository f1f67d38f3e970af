import json
import time
from collections.abc import Mapping
from http.cookiejar import Cookie
from typing import TYPE_CHECKING

import httpx

from .types import ParamMap, ParamValue

if TYPE_CHECKING:
    from .models import ReqOpt


def render_value(value: ParamValue) -> str:
    """Render a request parameter value as the string sent on the wire.

    Strings pass through untouched, booleans become ``true``/``false`` and
    ``None`` becomes an empty string. Nested mappings and sequences are
    rendered as compact JSON.
    """
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if value is None:
        return ""
    if isinstance(value, bytes):
        return value.decode("utf-8", errors="replace")
    if isinstance(value, (int, float)):
        return str(value)
    if isinstance(value, (Mapping, list, tuple)):
        return json.dumps(value, ensure_ascii=False, separators=(",", ":"), default=str)
    return str(value)


def parse_data(d: ParamMap | None) -> dict[str, str] | None:
    if not d:
        return None
    return {key: render_value(value) for key, value in d.items()}


def make_cookie(
    name: str,
    value: str,
    path: str = "",
    domain: str = "",
    max_age: int = 0,
    http_only: bool = False,
) -> Cookie:
    # max_age <= 0 leaves a session cookie
    expires = int(time.time()) + max_age if max_age > 0 else None
    return Cookie(
        version=0,
        name=name,
        value=value,
        port=None,
        port_specified=False,
        domain=domain,
        domain_specified=bool(domain),
        domain_initial_dot=domain.startswith("."),
        path=path or "/",
        path_specified=bool(path),
        secure=False,
        expires=expires,
        discard=expires is None,
        comment=None,
        comment_url=None,
        rest={"HttpOnly": ""} if http_only else {},
        rfc2109=False,
    )


def build_cookies(opt: "ReqOpt") -> httpx.Cookies | None:
    if not opt.cookies:
        return None

    cookies = httpx.Cookies()
    for name, value in opt.cookies.items():
        cookies.jar.set_cookie(
            make_cookie(
                name,
                render_value(value),
                path=opt.cookie_path,
                domain=opt.cookie_domain,
                max_age=opt.cookie_max_age,
                http_only=opt.cookie_http_only,
            )
        )
    return cookies


def cookie_header(opt: "ReqOpt") -> str | None:
    """Render every cookie of ``opt`` as one ``Cookie`` request header value.

    Path and domain attributes are not matched against the request url,
    so each entry is always sent.
    """
    cookies = build_cookies(opt)
    if cookies is None:
        return None
    return "; ".join(f"{cookie.name}={cookie.value}" for cookie in cookies.jar)
