from __future__ import annotations

import json
from typing import Any, Dict, Iterator, List, Optional

from .exceptions import TwilioException


class Page:
    """One response of a listing endpoint plus the cursor to its neighbours.

    Two envelope styles exist on the wire:
    - newer products: records under `meta.key`, absolute `meta.next_page_url`
    - api 2010: records under the only non-meta key, relative `next_page_uri`
    """

    META_KEYS = {
        "end",
        "first_page_uri",
        "next_page_uri",
        "last_page_uri",
        "page",
        "page_size",
        "previous_page_uri",
        "total",
        "num_pages",
        "start",
        "uri",
    }

    def __init__(self, version, response, solution: Optional[Dict[str, Any]] = None) -> None:
        payload = self.process_response(version, response)

        self._version = version
        self._payload = payload
        self._solution = solution or {}
        self._records: List[Dict[str, Any]] = self.load_page(payload)

    def __iter__(self) -> Iterator[Any]:
        for record in self._records:
            yield self.get_instance(record)

    def __len__(self) -> int:
        return len(self._records)

    @property
    def instances(self) -> List[Any]:
        return list(self)

    @classmethod
    def process_response(cls, version, response) -> Dict[str, Any]:
        if response.status_code != 200:
            raise version.exception("GET", response.url or "", response, "Unable to fetch page")
        return json.loads(response.text)

    def load_page(self, payload: Dict[str, Any]) -> List[Dict[str, Any]]:
        if "meta" in payload and "key" in payload["meta"]:
            return payload[payload["meta"]["key"]]

        keys = set(payload.keys()) - self.META_KEYS
        if len(keys) == 1:
            return payload[keys.pop()]

        raise TwilioException("Page Records can not be deserialized")

    def _cursor_url(self, meta_key: str, uri_key: str) -> Optional[str]:
        meta = self._payload.get("meta")
        if isinstance(meta, dict) and meta_key in meta:
            return meta[meta_key] or None
        uri = self._payload.get(uri_key)
        if uri:
            return self._version.domain.absolute_url(uri)
        return None

    @property
    def next_page_url(self) -> Optional[str]:
        return self._cursor_url("next_page_url", "next_page_uri")

    @property
    def previous_page_url(self) -> Optional[str]:
        return self._cursor_url("previous_page_url", "previous_page_uri")

    def _load(self, url: Optional[str]) -> Optional["Page"]:
        if not url:
            return None
        response = self._version.domain.twilio.request("GET", url)
        return type(self)(self._version, response, self._solution)

    def next_page(self) -> Optional["Page"]:
        return self._load(self.next_page_url)

    def previous_page(self) -> Optional["Page"]:
        return self._load(self.previous_page_url)

    def get_instance(self, payload: Dict[str, Any]) -> Any:
        raise NotImplementedError("Page subclasses must build their instances")

    def __repr__(self) -> str:
        return f"<{type(self).__name__}>"
