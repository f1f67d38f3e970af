from collections.abc import Mapping, Sequence
from typing import Union

ParamValue = Union[str, bytes, int, float, bool, None, Mapping[str, "ParamValue"], Sequence["ParamValue"]]
ParamMap = Mapping[str, ParamValue]

SUPPORTED_METHODS = frozenset({"get", "post", "put", "patch", "delete", "head"})
QUERY_METHODS = frozenset({"get", "delete", "head"})
BODY_METHODS = frozenset({"post", "put", "patch"})
