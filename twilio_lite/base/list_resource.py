from __future__ import annotations

from typing import Any, Callable, Dict, Iterator, List, Optional

from . import values


class ListResource:
    """Collection endpoint of one resource.

    Subclasses set `_uri`, `_solution` and `_page_class` and implement
    `page()` with the filters the endpoint accepts; everything that walks
    pages (`stream`, `list`, `each`) is shared.
    """

    _page_class: type = None  # type: ignore[assignment]

    def __init__(self, version) -> None:
        self._version = version
        self._solution: Dict[str, Any] = {}
        self._uri = ""

    def _read_page(self, params: Dict[str, Any]):
        response = self._version.page(method="GET", uri=self._uri, params=values.of(params))
        return self._page_class(self._version, response, self._solution)

    def page(self, page_token=values.unset, page_number=values.unset, page_size=values.unset):
        return self._read_page({"PageToken": page_token, "Page": page_number, "PageSize": page_size})

    def get_page(self, target_url: str):
        """Retrieve a page from an absolute URL (e.g. a stored `next_page_url`)."""
        response = self._version.domain.twilio.request("GET", target_url)
        return self._page_class(self._version, response, self._solution)

    def stream(self, limit: Optional[int] = None, page_size: Optional[int] = None, **filters: Any) -> Iterator[Any]:
        """Lazily yield instances, fetching pages as they are consumed.

        :param limit: upper bound of records; never exceeded
        :param page_size: records per request; defaults to min(limit, 1000)
            when only `limit` is given, else the server default (50)
        :param filters: endpoint specific filters, passed to `page()`
        """
        limits = self._version.read_limits(limit, page_size)
        page = self.page(page_size=limits["page_size"], **filters)
        return self._version.stream(page, limits["limit"], limits["page_limit"])

    def list(self, limit: Optional[int] = None, page_size: Optional[int] = None, **filters: Any) -> List[Any]:
        return list(self.stream(limit=limit, page_size=page_size, **filters))

    def each(
        self,
        callback: Callable[[Any, Callable[[], None]], Any],
        limit: Optional[int] = None,
        page_size: Optional[int] = None,
        done: Optional[Callable[[Optional[BaseException]], Any]] = None,
        **filters: Any,
    ) -> None:
        """Feed instances to `callback(instance, stop)` one by one.

        Calling `stop()` ends the iteration once the callback returns; no
        further pages are requested.
        `done(error)` is invoked exactly once at the end: `error` is None on
        exhaustion/limit/stop, else the exception that aborted the walk.
        Without `done`, that exception is raised instead.
        """
        if not callable(callback):
            raise TypeError("Callback function must be provided")

        stopped = False

        def stop() -> None:
            nonlocal stopped
            stopped = True

        try:
            for instance in self.stream(limit=limit, page_size=page_size, **filters):
                callback(instance, stop)
                if stopped:
                    break
        except Exception as e:
            if done is None:
                raise
            done(e)
            return

        if done is not None:
            done(None)

    def __repr__(self) -> str:
        return f"<{type(self).__name__}>"
