class RestClientError(Exception):
    detail: str = "rest client error."

    def __init__(self, detail: str | None = None):
        self.detail = detail or self.__class__.detail
        super().__init__(self.detail)


class MethodNotSupportedError(RestClientError):
    detail = "method not supported"


class EmptyURLError(RestClientError):
    detail = "url is empty"


class HTTPStatusError(RestClientError):
    """Response was received but is not a 2xx with status 200."""

    detail = "request error"

    def __init__(self, status_code: int, status: str, payload: str = ""):
        self.status_code = status_code
        self.status = status
        self.payload = payload
        super().__init__(
            f"request error: {payload or 'empty response'}, http status code: {status_code}, status: {status}"
        )


class ReplyDecodeError(RestClientError):
    detail = "reply body is not valid json"

    def __init__(self, detail: str | None = None, cause: Exception | None = None):
        super().__init__(detail)
        self.cause = cause
