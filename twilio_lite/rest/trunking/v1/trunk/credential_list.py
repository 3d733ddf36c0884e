"""Credential lists associated with a trunk (SIP digest auth for termination)."""

from __future__ import annotations

from typing import Any, Dict

from .....base import deserialize, values
from .....base.instance_context import InstanceContext
from .....base.instance_resource import Field, InstanceResource
from .....base.list_resource import ListResource
from .....base.page import Page


class CredentialListPage(Page):
    def get_instance(self, payload: Dict[str, Any]) -> "CredentialListInstance":
        return CredentialListInstance(self._version, payload, trunk_sid=self._solution["trunk_sid"])

    def __repr__(self) -> str:
        return "<Twilio.Trunking.V1.CredentialListPage>"


class CredentialListList(ListResource):
    _page_class = CredentialListPage

    def __init__(self, version, trunk_sid: str) -> None:
        super().__init__(version)
        self._solution = {"trunk_sid": trunk_sid}
        self._uri = "/Trunks/{trunk_sid}/CredentialLists".format(**self._solution)

    def create(self, credential_list_sid: str) -> "CredentialListInstance":
        """Associate an existing credential list (`CL...`) with the trunk."""
        data = values.of({"CredentialListSid": credential_list_sid})
        payload = self._version.create(method="POST", uri=self._uri, data=data)
        return CredentialListInstance(self._version, payload, trunk_sid=self._solution["trunk_sid"])

    def get(self, sid: str) -> "CredentialListContext":
        return CredentialListContext(self._version, trunk_sid=self._solution["trunk_sid"], sid=sid)

    def __call__(self, sid: str) -> "CredentialListContext":
        return self.get(sid)

    def __repr__(self) -> str:
        return "<Twilio.Trunking.V1.CredentialListList>"


class CredentialListInstance(InstanceResource):
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
    def _proxy(self) -> "CredentialListContext":
        if self._context is None:
            self._context = CredentialListContext(
                self._version,
                trunk_sid=self._solution["trunk_sid"],
                sid=self._solution["sid"],
            )
        return self._context

    def fetch(self) -> "CredentialListInstance":
        return self._proxy.fetch()

    def delete(self) -> bool:
        return self._proxy.delete()


class CredentialListContext(InstanceContext):
    def __init__(self, version, trunk_sid: str, sid: str) -> None:
        super().__init__(version)
        self._solution = {"trunk_sid": trunk_sid, "sid": sid}
        self._uri = "/Trunks/{trunk_sid}/CredentialLists/{sid}".format(**self._solution)

    def fetch(self) -> CredentialListInstance:
        payload = self._version.fetch(method="GET", uri=self._uri)
        return CredentialListInstance(self._version, payload, **self._solution)

    def delete(self) -> bool:
        """Detach the credential list from the trunk; the list itself is kept."""
        return self._version.delete(method="DELETE", uri=self._uri)
