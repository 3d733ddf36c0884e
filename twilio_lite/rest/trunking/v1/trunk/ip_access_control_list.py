"""IP access control lists associated with a trunk (source IP allow-lists for termination)."""

from __future__ import annotations

from typing import Any, Dict

from .....base import deserialize, values
from .....base.instance_context import InstanceContext
from .....base.instance_resource import Field, InstanceResource
from .....base.list_resource import ListResource
from .....base.page import Page


class IpAccessControlListPage(Page):
    def get_instance(self, payload: Dict[str, Any]) -> "IpAccessControlListInstance":
        return IpAccessControlListInstance(self._version, payload, trunk_sid=self._solution["trunk_sid"])

    def __repr__(self) -> str:
        return "<Twilio.Trunking.V1.IpAccessControlListPage>"


class IpAccessControlListList(ListResource):
    _page_class = IpAccessControlListPage

    def __init__(self, version, trunk_sid: str) -> None:
        super().__init__(version)
        self._solution = {"trunk_sid": trunk_sid}
        self._uri = "/Trunks/{trunk_sid}/IpAccessControlLists".format(**self._solution)

    def create(self, ip_access_control_list_sid: str) -> "IpAccessControlListInstance":
        """Associate an existing IP access control list (`AL...`) with the trunk."""
        data = values.of({"IpAccessControlListSid": ip_access_control_list_sid})
        payload = self._version.create(method="POST", uri=self._uri, data=data)
        return IpAccessControlListInstance(self._version, payload, trunk_sid=self._solution["trunk_sid"])

    def get(self, sid: str) -> "IpAccessControlListContext":
        return IpAccessControlListContext(self._version, trunk_sid=self._solution["trunk_sid"], sid=sid)

    def __call__(self, sid: str) -> "IpAccessControlListContext":
        return self.get(sid)

    def __repr__(self) -> str:
        return "<Twilio.Trunking.V1.IpAccessControlListList>"


class IpAccessControlListInstance(InstanceResource):
    account_sid = Field()
    sid = Field()
    trunk_sid = Field()
    friendly_name = Field()
    date_created = Field(deserialize.iso8601_datetime)
    date_updated = Field(deserialize.iso8601_datetime)
    url = Field()

    def __init__(self, version, payload: Dict[str, Any], trunk_sid: str, sid: str | None = None) -> None:
        super().__init__(version, payload)
        self._solution = {"trunk_sid": trunk_sid, "sid": sid or self._properties["sid"]}

    @property
    def _proxy(self) -> "IpAccessControlListContext":
        if self._context is None:
            self._context = IpAccessControlListContext(
                self._version,
                trunk_sid=self._solution["trunk_sid"],
                sid=self._solution["sid"],
            )
        return self._context

    def fetch(self) -> "IpAccessControlListInstance":
        return self._proxy.fetch()

    def delete(self) -> bool:
        return self._proxy.delete()


class IpAccessControlListContext(InstanceContext):
    def __init__(self, version, trunk_sid: str, sid: str) -> None:
        super().__init__(version)
        self._solution = {"trunk_sid": trunk_sid, "sid": sid}
        self._uri = "/Trunks/{trunk_sid}/IpAccessControlLists/{sid}".format(**self._solution)

    def fetch(self) -> IpAccessControlListInstance:
        payload = self._version.fetch(method="GET", uri=self._uri)
        return IpAccessControlListInstance(self._version, payload, **self._solution)

    def delete(self) -> bool:
        """Detach the IP access control list from the trunk; the list itself is kept."""
        return self._version.delete(method="DELETE", uri=self._uri)
