# ajax_utils/request_builder.py - query serialization and request descriptors
from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, Mapping, Optional, Tuple
from urllib.parse import quote

JSON_CONTENT_TYPE = "application/json"


@dataclass(frozen=True)
class AjaxRequest:
    """Fully resolved request handed to the transport. Never mutated."""
    method: str
    url: str
    headers: Dict[str, str] = field(default_factory=dict)
    body: Any = None
    timeout: Optional[int] = None


# characters encodeURIComponent leaves as-is, on top of quote()'s unreserved set
URI_COMPONENT_SAFE = "!'()*"


def _render(value: Any) -> str:
    # match what browser endpoints expect for booleans and whole floats
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def _pairs(params: Mapping[str, Any]) -> Iterator[Tuple[str, Any]]:
    for key, value in params.items():
        if value is None:
            continue
        if isinstance(value, (list, tuple)):
            for item in value:
                if item is not None:
                    yield key, item
        else:
            yield key, value


def serialize_params(params: Optional[Mapping[str, Any]]) -> str:
    """
    Turn a parameter bag into a query string without the leading '?'.

    - None values are dropped, keys included.
    - list/tuple values produce one pair per non-None element, key repeated.
    - 0, False and "" are real values and are kept.
    Returns "" when nothing contributes.
    """
    if not params:
        return ""
    return "&".join(
        f"{quote(str(key), safe=URI_COMPONENT_SAFE)}="
        f"{quote(_render(value), safe=URI_COMPONENT_SAFE)}"
        for key, value in _pairs(params)
    )


def build_url(base_url: str, path: str, params: Optional[Mapping[str, Any]] = None) -> str:
    url = f"{base_url}{path}"
    query = serialize_params(params)
    return f"{url}?{query}" if query else url


def build_request(method, url, headers, body=None, timeout=None) -> AjaxRequest:
    # instance headers win over the injected Content-Type
    if body is not None:
        merged = {"Content-Type": JSON_CONTENT_TYPE, **headers}
    else:
        merged = dict(headers)
    return AjaxRequest(method=method, url=url, headers=merged, body=body, timeout=timeout)
