from __future__ import annotations

import json
import math
from typing import Any, Dict, Iterator, Optional

from . import values
from .exceptions import TwilioRestException

MAX_PAGE_SIZE = 1000


class Version:
    """One API version of a domain (e.g. trunking `v1`, api `2010-04-01`).

    Dispatches the CRUD verbs, turns error answers into
    `TwilioRestException` and drives page-by-page streaming.
    """

    def __init__(self, domain, version: str) -> None:
        self.domain = domain
        self.version = version

    def relative_uri(self, uri: str) -> str:
        return f"{self.version.strip('/')}/{uri.strip('/')}"

    def absolute_url(self, uri: str) -> str:
        return self.domain.absolute_url(self.relative_uri(uri))

    def request(
        self,
        method: str,
        uri: str,
        params: Optional[Dict[str, Any]] = None,
        data: Optional[Dict[str, Any]] = None,
        headers: Optional[Dict[str, str]] = None,
        auth=None,
        timeout: Optional[float] = None,
        allow_redirects: bool = False,
    ):
        return self.domain.request(
            method,
            self.relative_uri(uri),
            params=params,
            data=data,
            headers=headers,
            auth=auth,
            timeout=timeout,
            allow_redirects=allow_redirects,
        )

    @classmethod
    def exception(cls, method: str, uri: str, response, message: str) -> TwilioRestException:
        """Build the exception for an error answer.

        The vendor returns JSON for errors too, but a proxy in between may not;
        fall back to the raw body then.
        """
        try:
            error_payload = json.loads(response.text)
        except (TypeError, ValueError):
            error_payload = None

        if not isinstance(error_payload, dict):
            return TwilioRestException(
                response.status_code, uri, f"{message}: {response.text}", method=method
            )

        error_message = error_payload.get("message") or message
        return TwilioRestException(
            response.status_code,
            uri,
            error_message,
            code=error_payload.get("code"),
            method=method,
            details=error_payload.get("details"),
            more_info=error_payload.get("more_info"),
        )

    @staticmethod
    def _is_error(response) -> bool:
        return not 200 <= response.status_code < 300

    def _parse(self, method: str, uri: str, response, message: str) -> Dict[str, Any]:
        if self._is_error(response):
            raise self.exception(method, uri, response, message)
        return json.loads(response.text)

    def fetch(self, method: str, uri: str, params=None, data=None, headers=None,
              auth=None, timeout=None, allow_redirects=False) -> Dict[str, Any]:
        response = self.request(method, uri, params=params, data=data, headers=headers,
                                auth=auth, timeout=timeout, allow_redirects=allow_redirects)
        return self._parse(method, uri, response, "Unable to fetch record")

    def update(self, method: str, uri: str, params=None, data=None, headers=None,
               auth=None, timeout=None, allow_redirects=False) -> Dict[str, Any]:
        response = self.request(method, uri, params=params, data=data, headers=headers,
                                auth=auth, timeout=timeout, allow_redirects=allow_redirects)
        return self._parse(method, uri, response, "Unable to update record")

    def create(self, method: str, uri: str, params=None, data=None, headers=None,
               auth=None, timeout=None, allow_redirects=False) -> Dict[str, Any]:
        response = self.request(method, uri, params=params, data=data, headers=headers,
                                auth=auth, timeout=timeout, allow_redirects=allow_redirects)
        return self._parse(method, uri, response, "Unable to create record")

    def delete(self, method: str, uri: str, params=None, data=None, headers=None,
               auth=None, timeout=None, allow_redirects=False) -> bool:
        response = self.request(method, uri, params=params, data=data, headers=headers,
                                auth=auth, timeout=timeout, allow_redirects=allow_redirects)
        if self._is_error(response):
            raise self.exception(method, uri, response, "Unable to delete record")
        return response.status_code == 204

    def page(self, method: str, uri: str, params=None, data=None, headers=None,
             auth=None, timeout=None, allow_redirects=False):
        response = self.request(method, uri, params=params, data=data, headers=headers,
                                auth=auth, timeout=timeout, allow_redirects=allow_redirects)
        if self._is_error(response):
            raise self.exception(method, uri, response, "Unable to fetch page")
        return response

    def read_limits(self, limit: Optional[int] = None, page_size: Optional[int] = None) -> Dict[str, Any]:
        """Work out how many records and pages a stream may read.

        With a limit but no page size the page size is min(limit, MAX_PAGE_SIZE),
        so small limits are served by a single request.
        """
        if limit is values.unset:
            limit = None
        if page_size is values.unset:
            page_size = None

        if limit is not None and (not isinstance(limit, int) or isinstance(limit, bool) or limit <= 0):
            raise ValueError("Parameter limit must be a positive integer")
        if page_size is not None and (
            not isinstance(page_size, int) or isinstance(page_size, bool) or page_size <= 0
        ):
            raise ValueError("Parameter page_size must be a positive integer")

        if limit is not None and page_size is None:
            page_size = min(limit, MAX_PAGE_SIZE)

        page_limit = None
        if limit is not None:
            page_limit = int(math.ceil(limit / float(page_size)))

        return {
            "limit": limit,
            "page_size": page_size if page_size is not None else values.unset,
            "page_limit": page_limit,
        }

    def stream(self, page, limit: Optional[int] = None, page_limit: Optional[int] = None) -> Iterator[Any]:
        """Yield records lazily, one page request at a time.

        The next page is requested only once every record of the current page
        has been consumed.
        """
        current_record = 0
        current_page = 1

        while page is not None:
            for record in page:
                if limit is not None and current_record >= limit:
                    return
                yield record
                current_record += 1

            if limit is not None and current_record >= limit:
                return
            if page_limit is not None and current_page >= page_limit:
                return

            current_page += 1
            page = page.next_page()
