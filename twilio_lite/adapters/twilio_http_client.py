"""Transport used by `Client.request`.

The layer above (Domain / Version) only needs a small contract:
`request(method, url, ...) -> Response` where `Response` carries the status
code, the raw body text and the headers. This module provides that contract
on top of the shared pooled `requests` session.

Nothing here interprets the vendor payload: status codes are reported as-is
and transport errors (`requests.RequestException`) propagate unchanged.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any

from ..common.config import settings
from ..common.http_client import get_session
from ..common.logging import logger as default_logger
from ..common.logging_utils import mask_sid, shorten_body
from ..common.timing import timed


@dataclass
class Request:
    method: str
    url: str
    auth: tuple[str, str] | None = None
    params: dict[str, Any] | None = None
    data: dict[str, Any] | None = None
    headers: dict[str, str] | None = None


@dataclass
class Response:
    status_code: int
    text: str
    headers: dict[str, str] = field(default_factory=dict)
    url: str | None = None

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 400

    def json(self) -> Any:
        return json.loads(self.text) if self.text else {}


class TwilioHttpClient:
    """Performs one HTTP round-trip per call; no retries, no caching."""

    def __init__(self, *, timeout: float | None = None, logger=None) -> None:
        self.timeout = timeout if timeout is not None else settings.http_timeout_s
        self.logger = logger or default_logger
        self.last_request: Request | None = None
        self.last_response: Response | None = None

    def request(
        self,
        method: str,
        url: str,
        params: dict[str, Any] | None = None,
        data: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
        auth: tuple[str, str] | None = None,
        timeout: float | None = None,
        allow_redirects: bool = False,
    ) -> Response:
        method = method.upper()
        self.last_request = Request(
            method=method, url=url, auth=auth, params=params, data=data, headers=headers
        )
        self.last_response = None

        self.logger.debug({
            "msg": "Twilio request",
            "method": method,
            "url": url,
            "account": mask_sid(auth[0]) if auth else None,
            "params": params,
        })

        s = get_session()
        with timed("http_request", logger=self.logger, component="twilio_http_client",
                   extra={"method": method, "url": url}):
            resp = s.request(
                method,
                url,
                params=params,
                data=data,
                headers=headers,
                auth=auth,
                timeout=timeout if timeout is not None else self.timeout,
                allow_redirects=allow_redirects,
            )

        response = Response(
            status_code=int(resp.status_code),
            text=resp.text,
            headers=dict(resp.headers or {}),
            url=url,
        )
        self.last_response = response

        if response.ok:
            self.logger.debug({"msg": "Twilio response", "status": response.status_code, "url": url})
        else:
            self.logger.warning({
                "msg": "Twilio error response",
                "status": response.status_code,
                "method": method,
                "url": url,
                "body": shorten_body(response.text),
            })
        return response
