# ajax_client.py - minimal async HTTP helper around a pluggable transport
from typing import Any, Dict, Mapping, Optional

from ajax_utils import settings
from ajax_utils.logger import get_logger
from ajax_utils.request_builder import AjaxRequest, build_request, build_url
from ajax_utils.transport import RequestsTransport, Transport

log = get_logger()


class Ajax:
    """
    Issues GET/POST calls against `base_url` and resolves to the response payload.

    Headers set with set_req_headers apply to every later call. Transport
    errors are raised to the awaiting caller untouched.
    """

    def __init__(self, base_url: str, timeout: Optional[int] = None, transport: Optional[Transport] = None):
        self._base_url = base_url
        self._timeout = timeout
        self._headers: Dict[str, str] = {}
        self._transport = transport or RequestsTransport()

    @classmethod
    def from_env(cls, transport: Optional[Transport] = None) -> "Ajax":
        return cls(settings.base_url(), timeout=settings.timeout_ms(), transport=transport)

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def timeout(self) -> Optional[int]:
        return self._timeout

    @property
    def headers(self) -> Dict[str, str]:
        return dict(self._headers)

    def set_req_headers(self, headers: Mapping[str, str]):
        self._headers = dict(headers)

    def get(self, path: str, params: Optional[Mapping[str, Any]] = None):
        url = build_url(self._base_url, path, params)
        return self._send(build_request("GET", url, self._headers, timeout=self._timeout))

    def post(self, path: str, body: Any = None):
        url = build_url(self._base_url, path)
        return self._send(build_request("POST", url, self._headers, body, self._timeout))

    async def _send(self, request: AjaxRequest):
        log.debug("%s %s", request.method, request.url)
        resp = await self._transport(request)
        return resp.response

    def close(self):
        """Release the transport's resources, if it holds any."""
        close = getattr(self._transport, "close", None)
        if callable(close):
            close()
