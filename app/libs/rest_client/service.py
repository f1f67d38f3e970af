import logging
import time
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

import httpx

from extensions.ext_logging import trace_id_generator, trace_id_var

from .errors import EmptyURLError, HTTPStatusError, MethodNotSupportedError
from .models import Reply, ReqOpt
from .params import cookie_header, parse_data
from .types import QUERY_METHODS, SUPPORTED_METHODS

if TYPE_CHECKING:
    from configs.http_config import HttpClientConfig

logger = logging.getLogger(__name__)

DEFAULT_REQ_TIMEOUT = 5.0
ERROR_PAYLOAD_MAX_SIZE = 512


@dataclass(frozen=True)
class Service:
    """Request handle shared by calls against one upstream.

    Example usage:
        s = Service(base_uri="https://api.example.com", timeout=2.0)
        reply = s.do("get", "v1/users", ReqOpt(params={"page": 1}))
        if reply.err is None:
            users = reply.json()
    """

    base_uri: str = ""
    timeout: float = 0
    proxy: str = ""
    enable_keep_alive: bool = False
    error_payload_max_size: int = ERROR_PAYLOAD_MAX_SIZE
    transport: httpx.BaseTransport | None = field(default=None, repr=False, compare=False)

    @classmethod
    def from_config(cls, config: "HttpClientConfig", **overrides: Any) -> "Service":
        kwargs: dict[str, Any] = {
            "base_uri": config.HTTP_BASE_URI,
            "timeout": config.HTTP_TIMEOUT,
            "proxy": config.HTTP_PROXY,
            "enable_keep_alive": config.HTTP_ENABLE_KEEP_ALIVE,
            "error_payload_max_size": config.HTTP_ERROR_PAYLOAD_MAX_SIZE,
        }
        kwargs.update(overrides)
        return cls(**kwargs)

    @property
    def effective_timeout(self) -> float:
        return self.timeout or DEFAULT_REQ_TIMEOUT

    def resolve_url(self, url: str) -> str:
        if self.base_uri:
            return self.base_uri.rstrip("/") + "/" + url
        return url

    def _build_client(self, opt: ReqOpt) -> httpx.Client:
        headers: dict[str, str] = {}
        if not self.enable_keep_alive:
            headers["Connection"] = "close"
        headers.update(parse_data(opt.headers) or {})
        cookies = cookie_header(opt)
        if cookies:
            headers["Cookie"] = cookies

        return httpx.Client(
            timeout=self.effective_timeout,
            proxy=self.proxy or None,
            transport=self.transport,
            headers=headers,
        )

    def _request_kwargs(self, method: str, opt: ReqOpt) -> dict[str, Any]:
        if method in QUERY_METHODS:
            return {"params": parse_data(opt.params)}

        # json set after data, so it wins when both are given
        body: dict[str, Any] = {}
        if opt.data:
            body = {"data": parse_data(opt.data)}
        if opt.json is not None:
            body = {"json": opt.json}
        return body

    def do(self, method: str, url: str, opt: ReqOpt | None = None) -> Reply:
        """
        Issue one request and normalize its outcome.

        Args:
            method: get, post, put, patch, delete or head, case-insensitive
            url: path joined to ``base_uri``, or an absolute url when ``base_uri`` is empty
            opt: query params, form data, json body, headers and cookies

        Returns:
            Reply whose ``err`` is set on any failure; errors are never raised
        """
        if opt is None:
            opt = ReqOpt()

        req_url = self.resolve_url(url)
        if not req_url:
            logger.debug("rejected request with empty url")
            return Reply(err=EmptyURLError())

        method = method.lower()
        if method not in SUPPORTED_METHODS:
            logger.debug(f"rejected unsupported method {method!r} for {req_url}")
            return Reply(err=MethodNotSupportedError())

        token = trace_id_var.set(trace_id_generator())
        try:
            kwargs = self._request_kwargs(method, opt)
            logger.info(f"-> {method.upper()} {req_url}")
            start_time = time.time()
            # TypeError and ValueError come from unserializable json bodies and bad proxy urls
            try:
                with self._build_client(opt) as client:
                    response = client.request(method.upper(), req_url, **kwargs)
            except (httpx.HTTPError, httpx.InvalidURL, TypeError, ValueError) as e:
                logger.warning(f"{method.upper()} {req_url} failed: {e!r}")
                return self.get_result(None, e)

            latency_ms = int((time.time() - start_time) * 1000)
            logger.info(f"<- {response.status_code} ({latency_ms}ms)")
            return self.get_result(response, None)
        finally:
            trace_id_var.reset(token)

    def get_result(self, response: httpx.Response | None, err: Exception | None) -> Reply:
        if err is not None:
            return Reply(err=err)
        assert response is not None

        if not response.is_success or response.status_code != 200:
            status = f"{response.status_code} {response.reason_phrase}".strip()
            return Reply(
                err=HTTPStatusError(
                    status_code=response.status_code,
                    status=status,
                    payload=response.text[: self.error_payload_max_size],
                ),
                body=response.content,
            )

        return Reply(body=response.content)

    def get(self, url: str, opt: ReqOpt | None = None) -> Reply:
        return self.do("get", url, opt)

    def post(self, url: str, opt: ReqOpt | None = None) -> Reply:
        return self.do("post", url, opt)

    def put(self, url: str, opt: ReqOpt | None = None) -> Reply:
        return self.do("put", url, opt)

    def patch(self, url: str, opt: ReqOpt | None = None) -> Reply:
        return self.do("patch", url, opt)

    def delete(self, url: str, opt: ReqOpt | None = None) -> Reply:
        return self.do("delete", url, opt)

    def head(self, url: str, opt: ReqOpt | None = None) -> Reply:
        return self.do("head", url, opt)
