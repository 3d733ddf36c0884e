"""Shared shape of every usage-record endpoint.

`/Usage/Records.json` and its time windows (`AllTime`, `Daily`, `Today`...)
return the same record fields and accept the same filters; they only differ
in the path segment.
"""

from __future__ import annotations

from typing import Any, Dict

from .......base import deserialize, serialize, values
from .......base.instance_resource import Field, InstanceResource
from .......base.list_resource import ListResource


class UsageRecordInstance(InstanceResource):
    account_sid = Field()
    api_version = Field()
    as_of = Field()
    category = Field()
    count = Field()
    count_unit = Field()
    description = Field()
    end_date = Field(deserialize.iso8601_date)
    price = Field(deserialize.decimal)
    price_unit = Field()
    start_date = Field(deserialize.iso8601_date)
    subresource_uris = Field()
    uri = Field()
    usage = Field()
    usage_unit = Field()

    def __init__(self, version, payload: Dict[str, Any], account_sid: str) -> None:
        super().__init__(version, payload)
        self._solution = {"account_sid": account_sid}


class UsageRecordListBase(ListResource):
    # Path segment below /Usage/Records; empty for the unwindowed list.
    _segment = ""

    def __init__(self, version, account_sid: str) -> None:
        super().__init__(version)
        self._solution = {"account_sid": account_sid}
        if self._segment:
            self._uri = "/Accounts/{account_sid}/Usage/Records/{segment}.json".format(
                segment=self._segment, **self._solution
            )
        else:
            self._uri = "/Accounts/{account_sid}/Usage/Records.json".format(**self._solution)

    def page(
        self,
        category=values.unset,
        start_date=values.unset,
        end_date=values.unset,
        include_subaccounts=values.unset,
        page_token=values.unset,
        page_number=values.unset,
        page_size=values.unset,
    ):
        """Retrieve a single page of usage records. The request is executed immediately.

        :param category: only records of this usage category (e.g. `calls`)
        :param start_date: only usage on or after this date (date or YYYY-MM-DD)
        :param end_date: only usage on or before this date
        :param include_subaccounts: include usage of sub-accounts
        """
        return self._read_page({
            "Category": category,
            "StartDate": serialize.iso8601_date(start_date),
            "EndDate": serialize.iso8601_date(end_date),
            "IncludeSubaccounts": serialize.boolean_to_string(include_subaccounts),
            "PageToken": page_token,
            "Page": page_number,
            "PageSize": page_size,
        })
