from __future__ import annotations

from typing import Any


class TwilioException(Exception):
    pass


class TwilioRestException(TwilioException):
    """Raised on non-2xx answers from the REST API.

    Attributes mirror the vendor error body:
        status: HTTP status code
        uri: the request URI
        msg: the vendor message (or the raw body when it is not JSON)
        code: vendor error code, if any
        method: HTTP method of the failed request
        details: optional structured details
        more_info: documentation link for `code`
    """

    def __init__(
        self,
        status: int,
        uri: str,
        msg: str = "",
        code: int | None = None,
        method: str = "GET",
        details: dict[str, Any] | None = None,
        more_info: str | None = None,
    ) -> None:
        self.status = status
        self.uri = uri
        self.msg = msg
        self.code = code
        self.method = method
        self.details = details
        self.more_info = more_info
        super().__init__(str(self))

    def __str__(self) -> str:
        out = f"Twilio API error {self.status}: {self.msg}"
        if self.code is not None:
            out += f" (code {self.code})"
        if self.more_info:
            out += f" - {self.more_info}"
        return out
