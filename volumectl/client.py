"""HTTP transport for the volume API."""
import json
import logging
from typing import IO, Any, Dict, Optional, Sequence, Tuple

import httpx

from volumectl.codec import form_body
from volumectl.config import Settings
from volumectl.const import API_VERSION, FORM_CONTENT_TYPE
from volumectl.errors import DecodeError, InvalidTargetError, StreamError

log = logging.getLogger("volumectl.client")


class ApiClient:
    """
    Synchronous client for the versioned volume API.

    Args:
        settings (Settings): Target, token and timeout to use.
        transport (httpx.BaseTransport): Optional httpx transport, mainly for tests.
    """

    def __init__(self, settings: Settings, transport: Optional[httpx.BaseTransport] = None):
        self.settings = settings
        headers = {}
        if settings.token:
            headers["Authorization"] = f"bearer {settings.token}"
        self._client = httpx.Client(
            headers=headers,
            timeout=httpx.Timeout(settings.timeout),
            transport=transport,
        )

    def __enter__(self) -> "ApiClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def close(self) -> None:
        self._client.close()

    def url_for(self, path: str, version: str = API_VERSION) -> str:
        """Build ``<target>/<version><path>``; raises before any network call."""
        target = self.settings.target
        if not target:
            raise InvalidTargetError(
                "No API target configured. Pass --target or set VOLUMECTL_TARGET."
            )
        url = f"{target}/{version}{path}"
        try:
            parsed = httpx.URL(url)
        except httpx.InvalidURL as e:
            raise InvalidTargetError(f"Invalid API URL {url!r}: {e}") from e
        if parsed.scheme not in ("http", "https") or not parsed.host:
            raise InvalidTargetError(f"Invalid API URL {url!r}")
        return url

    def request(
        self,
        method: str,
        path: str,
        params: Optional[Dict[str, str]] = None,
        form: Optional[Sequence[Tuple[str, str]]] = None,
        stream: bool = False,
    ) -> httpx.Response:
        """Send one request and return the response if its status is 2xx.

        Any other status raises ``httpx.HTTPStatusError`` whose message is the
        response body. With ``stream=True`` the body is left unread and the
        caller must close the response.
        """
        url = self.url_for(path)
        headers = {}
        content = None
        if form is not None:
            headers["Content-Type"] = FORM_CONTENT_TYPE
            content = form_body(form)
        request = self._client.build_request(
            method, url, params=params or None, headers=headers, content=content
        )
        response = self._client.send(request, stream=stream)
        log.debug("%s %s -> %s", method, request.url, response.status_code)
        if not response.is_success:
            try:
                body = response.read().decode("utf-8", errors="replace").strip()
            finally:
                response.close()
            message = body or f"{response.status_code} {response.reason_phrase}"
            raise httpx.HTTPStatusError(message, request=request, response=response)
        return response


def stream_json_messages(response: httpx.Response, out: IO[str]) -> None:
    """Copy a newline-delimited JSON message stream to ``out``.

    Each line is an object with an optional ``Message`` written as it arrives
    and an optional ``Error`` that aborts the stream. The response is closed
    when done.
    """
    try:
        for line in response.iter_lines():
            if not line.strip():
                continue
            try:
                msg: Any = json.loads(line)
            except ValueError as e:
                raise DecodeError(f"Invalid message in response stream: {line!r}") from e
            if not isinstance(msg, dict):
                raise DecodeError(f"Invalid message in response stream: {line!r}")
            if msg.get("Error"):
                raise StreamError(str(msg["Error"]))
            if msg.get("Message"):
                out.write(str(msg["Message"]))
                out.flush()
    finally:
        response.close()
