# ajax_utils/transport.py - default requests-backed transport for Ajax
import asyncio
import functools
from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional, Protocol

import requests

from ajax_utils.logger import get_logger
from ajax_utils.request_builder import JSON_CONTENT_TYPE, AjaxRequest

log = get_logger("ajax-client.transport")


@dataclass
class AjaxResponse:
    """Envelope for a successful call. Ajax only exposes `response`."""
    request: AjaxRequest
    status: int
    response: Any
    response_text: str = ""
    headers: Dict[str, str] = field(default_factory=dict)


class AjaxError(Exception):
    """Request failed: non-2xx status, or status 0 for network failures."""

    def __init__(self, message: str, request: AjaxRequest, status: int = 0, response: Any = None):
        super().__init__(message)
        self.message = message
        self.request = request
        self.status = status
        self.response = response


class AjaxTimeoutError(AjaxError):
    def __init__(self, request: AjaxRequest):
        super().__init__("ajax timeout", request)


class Transport(Protocol):
    async def __call__(self, request: AjaxRequest) -> AjaxResponse:
        ...


def _content_type(headers: Mapping[str, str]) -> str:
    for key, value in headers.items():
        if key.lower() == "content-type":
            return value
    return ""


def body_kwargs(request: AjaxRequest) -> Dict[str, Any]:
    """
    Keyword arguments carrying the body for session.request.
    JSON content types go through requests' json=, anything else through data=.
    """
    if request.body is None:
        return {}
    if JSON_CONTENT_TYPE in _content_type(request.headers):
        return {"json": request.body}
    return {"data": request.body}


def decode_body(resp: requests.Response) -> Any:
    if not resp.content:
        return None
    try:
        return resp.json()
    except ValueError:
        return resp.text


class RequestsTransport:
    """
    Runs each request on a requests.Session inside the loop's default executor.
    Timeouts on the descriptor are milliseconds.
    """

    def __init__(self, session: Optional[requests.Session] = None):
        self.session = session or requests.Session()

    async def __call__(self, request: AjaxRequest) -> AjaxResponse:
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(None, functools.partial(self.send, request))

    def send(self, request: AjaxRequest) -> AjaxResponse:
        timeout = request.timeout / 1000 if request.timeout is not None else None
        try:
            resp = self.session.request(
                request.method,
                request.url,
                headers=dict(request.headers),
                timeout=timeout,
                **body_kwargs(request),
            )
        except requests.Timeout as exc:
            log.warning("%s %s timed out after %sms", request.method, request.url, request.timeout)
            raise AjaxTimeoutError(request) from exc
        except requests.RequestException as exc:
            log.warning("%s %s failed: %s", request.method, request.url, exc)
            raise AjaxError("ajax error", request) from exc

        body = decode_body(resp)
        if not 200 <= resp.status_code < 300:
            log.warning("%s %s -> %s", request.method, request.url, resp.status_code)
            raise AjaxError(f"ajax error {resp.status_code}", request, resp.status_code, body)
        return AjaxResponse(
            request=request,
            status=resp.status_code,
            response=body,
            response_text=resp.text,
            headers=dict(resp.headers),
        )

    def close(self):
        self.session.close()
