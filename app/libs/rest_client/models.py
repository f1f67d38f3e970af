import json
from dataclasses import dataclass, field
from typing import Any

from pydantic import BaseModel, Field, TypeAdapter

from .errors import ReplyDecodeError
from .params import parse_data
from .types import ParamMap


@dataclass
class ReqOpt:
    """Per-call request options.

    ``params`` goes to the query string of get/delete/head requests.
    ``data`` is sent as a form body and ``json`` as a JSON body for
    post/put/patch; when both are given the JSON body is the one sent.
    Cookie attributes are shared by every entry of ``cookies``.
    """

    params: ParamMap = field(default_factory=dict)
    data: ParamMap = field(default_factory=dict)
    json: Any = None
    headers: ParamMap = field(default_factory=dict)

    cookies: ParamMap = field(default_factory=dict)
    cookie_path: str = ""
    cookie_domain: str = ""
    cookie_max_age: int = 0
    cookie_http_only: bool = False

    @staticmethod
    def parse_data(d: ParamMap | None) -> dict[str, str] | None:
        return parse_data(d)


@dataclass(frozen=True)
class Reply:
    """Outcome of one Service.do call.

    Request failures are reported in ``err``, never raised; ``body`` is only
    the full payload when ``err`` is None. ``json()`` is the one operation
    that raises, with ReplyDecodeError, when the body cannot be decoded.
    """

    err: Exception | None = None
    body: bytes = b""

    @property
    def ok(self) -> bool:
        return self.err is None

    def raise_for_err(self) -> "Reply":
        if self.err is not None:
            raise self.err
        return self

    def text(self) -> str:
        return self.body.decode("utf-8", errors="replace")

    def json(self, target: Any = None) -> Any:
        """Decode the body as JSON.

        ``target`` may be omitted, a type understood by pydantic (a model,
        a dataclass, ``list[int]`` ...), or a ``dict``/``list``/model
        instance which is filled in place. An empty body returns
        ``target`` untouched.

        Raises:
            ReplyDecodeError: body is not valid JSON or does not fit ``target``.
        """
        if not self.body:
            return target

        try:
            if target is None:
                return json.loads(self.body)
            if isinstance(target, BaseModel):
                return _fill_model(target, target.__class__.model_validate_json(self.body))
            if isinstance(target, (dict, list)):
                return _fill_container(target, json.loads(self.body))
            return TypeAdapter(target).validate_json(self.body)
        except ValueError as e:
            # json.JSONDecodeError and pydantic.ValidationError both land here
            raise ReplyDecodeError(str(e), cause=e) from e


def _fill_model(target: BaseModel, parsed: BaseModel) -> BaseModel:
    for name in parsed.model_fields_set:
        setattr(target, name, getattr(parsed, name))
    return target


def _fill_container(target: dict | list, value: Any) -> dict | list:
    expected = dict if isinstance(target, dict) else list
    if not isinstance(value, expected):
        raise ReplyDecodeError(
            f"cannot decode json {type(value).__name__} into {type(target).__name__}"
        )
    if isinstance(target, dict):
        target.update(value)
    else:
        target[:] = value
    return target


class ApiStdRes(BaseModel):
    """Standard ``{"code", "message", "data"}`` API envelope."""

    code: int = Field(default=0)
    message: str = Field(default="")
    data: Any = Field(default=None)
