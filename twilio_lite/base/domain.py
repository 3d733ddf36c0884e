from __future__ import annotations

from typing import Any


class Domain:
    """One product host (api, pricing, trunking...) of the REST API.

    Builds absolute URLs and hands the actual call to the client.
    """

    def __init__(self, twilio, base_url: str) -> None:
        self.twilio = twilio
        self.base_url = base_url

    def absolute_url(self, uri: str) -> str:
        return f"{self.base_url.strip('/')}/{uri.strip('/')}"

    def request(
        self,
        method: str,
        uri: str,
        params: dict[str, Any] | None = None,
        data: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
        auth: tuple[str, str] | None = None,
        timeout: float | None = None,
        allow_redirects: bool = False,
    ):
        url = self.absolute_url(uri)
        return self.twilio.request(
            method,
            url,
            params=params,
            data=data,
            headers=headers,
            auth=auth,
            timeout=timeout,
            allow_redirects=allow_redirects,
        )
