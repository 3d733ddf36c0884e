"""SDK entrypoint: `Client(account_sid, auth_token)`.

    client = Client()  # TWILIO_ACCOUNT_SID / TWILIO_AUTH_TOKEN from env
    for trunk in client.trunking.trunks.stream(limit=20):
        ...
"""

from __future__ import annotations

import os
import platform
from typing import Any, Mapping
from urllib.parse import urlparse, urlunparse

from ..adapters.twilio_http_client import Response, TwilioHttpClient
from ..base.exceptions import TwilioException
from ..common.config import SDK_VERSION, settings


class Client:
    """Holds credentials, routing and transport; builds product domains lazily."""

    def __init__(
        self,
        username: str | None = None,
        password: str | None = None,
        account_sid: str | None = None,
        region: str | None = None,
        edge: str | None = None,
        http_client=None,
        environment: Mapping[str, str] | None = None,
        user_agent_extensions: list[str] | None = None,
    ) -> None:
        environment = os.environ if environment is None else environment

        self.username = (
            username
            or environment.get("TWILIO_API_KEY")
            or environment.get("TWILIO_ACCOUNT_SID")
        )
        self.password = (
            password
            or environment.get("TWILIO_API_SECRET")
            or environment.get("TWILIO_AUTH_TOKEN")
        )

        self.region = region or environment.get("TWILIO_REGION") or settings.region or None
        self.edge = edge or environment.get("TWILIO_EDGE") or settings.edge or None
        self.user_agent_extensions = list(
            user_agent_extensions if user_agent_extensions is not None else settings.user_agent_extensions
        )

        if not self.username or not self.password:
            raise TwilioException("Credentials are required to create a TwilioClient")

        # an API key SID (SK...) never names an account
        self.account_sid = account_sid or environment.get("TWILIO_ACCOUNT_SID")
        if not self.account_sid and not self.username.startswith("SK"):
            self.account_sid = self.username

        self.auth = (self.username, self.password)
        self.http_client = http_client or TwilioHttpClient()

        # Domains
        self._api = None
        self._pricing = None
        self._trunking = None

    @property
    def user_agent(self) -> str:
        ua = (
            f"twilio-lite/{SDK_VERSION} ({platform.system()} {platform.machine()}) "
            f"Python/{platform.python_version()}"
        )
        for extension in self.user_agent_extensions:
            ua += f" {extension}"
        return ua

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
    ) -> Response:
        """Send one HTTP request to the REST API and return the raw response."""
        auth = auth or self.auth
        headers = dict(headers or {})
        method = method.upper()

        headers["User-Agent"] = self.user_agent
        headers["Accept-Charset"] = "utf-8"
        if method == "POST" and "Content-Type" not in headers:
            headers["Content-Type"] = "application/x-www-form-urlencoded"
        if "Accept" not in headers:
            headers["Accept"] = "application/json"

        uri = self.get_hostname(uri)

        return self.http_client.request(
            method,
            uri,
            params=params,
            data=data,
            headers=headers,
            auth=auth,
            timeout=timeout,
            allow_redirects=allow_redirects,
        )

    def get_hostname(self, uri: str) -> str:
        """Rewrite `product[.edge][.region].twilio.com` for the configured edge/region.

        An edge without a region routes through `us1`.
        """
        if not self.edge and not self.region:
            return uri

        parsed_url = urlparse(uri)
        pieces = parsed_url.netloc.split(".")
        prefix = pieces[0]
        suffix = ".".join(pieces[-2:])
        region = None
        edge = None
        if len(pieces) == 4:
            # product.region.twilio.com
            region = pieces[1]
        elif len(pieces) == 5:
            # product.edge.region.twilio.com
            edge = pieces[1]
            region = pieces[2]

        edge = self.edge or edge
        region = self.region or region or (edge and "us1")

        netloc = ".".join(part for part in (prefix, edge, region, suffix) if part)
        return urlunparse(parsed_url._replace(netloc=netloc))

    # ------------------------------------------------------------------ #
    # Domains
    # ------------------------------------------------------------------ #

    @property
    def api(self):
        if self._api is None:
            from .api.api import Api
            self._api = Api(self)
        return self._api

    @property
    def pricing(self):
        if self._pricing is None:
            from .pricing.pricing import Pricing
            self._pricing = Pricing(self)
        return self._pricing

    @property
    def trunking(self):
        if self._trunking is None:
            from .trunking.trunking import Trunking
            self._trunking = Trunking(self)
        return self._trunking

    # shortcuts into the account of this client

    @property
    def account(self):
        return self.api.account

    @property
    def usage(self):
        return self.api.account.usage

    def __repr__(self) -> str:
        return f"<Twilio {self.account_sid}>"
