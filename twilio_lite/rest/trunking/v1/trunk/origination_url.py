"""Origination URLs of a trunk: where inbound calls to the trunk are sent.

Calls are distributed by `priority` first (lowest wins), then by `weight`
among URLs of the same priority.
"""

from __future__ import annotations

from typing import Any, Dict

from .....base import deserialize, serialize, values
from .....base.instance_context import InstanceContext
from .....base.instance_resource import Field, InstanceResource
from .....base.list_resource import ListResource
from .....base.page import Page


def _origination_url_params(weight, priority, enabled, friendly_name, sip_url) -> Dict[str, Any]:
    return values.of({
        "Weight": weight,
        "Priority": priority,
        "Enabled": serialize.boolean_to_string(enabled),
        "FriendlyName": friendly_name,
        "SipUrl": sip_url,
    })


class OriginationUrlPage(Page):
    def get_instance(self, payload: Dict[str, Any]) -> "OriginationUrlInstance":
        return OriginationUrlInstance(self._version, payload, trunk_sid=self._solution["trunk_sid"])

    def __repr__(self) -> str:
        return "<Twilio.Trunking.V1.OriginationUrlPage>"


class OriginationUrlList(ListResource):
    _page_class = OriginationUrlPage

    def __init__(self, version, trunk_sid: str) -> None:
        super().__init__(version)
        self._solution = {"trunk_sid": trunk_sid}
        self._uri = "/Trunks/{trunk_sid}/OriginationUrls".format(**self._solution)

    def create(self, weight, priority, enabled, friendly_name, sip_url) -> "OriginationUrlInstance":
        data = _origination_url_params(weight, priority, enabled, friendly_name, sip_url)
        payload = self._version.create(method="POST", uri=self._uri, data=data)
        return OriginationUrlInstance(self._version, payload, trunk_sid=self._solution["trunk_sid"])

    def get(self, sid: str) -> "OriginationUrlContext":
        return OriginationUrlContext(self._version, trunk_sid=self._solution["trunk_sid"], sid=sid)

    def __call__(self, sid: str) -> "OriginationUrlContext":
        return self.get(sid)

    def __repr__(self) -> str:
        return "<Twilio.Trunking.V1.OriginationUrlList>"


class OriginationUrlInstance(InstanceResource):
    account_sid = Field()
    sid = Field()
    trunk_sid = Field()
    weight = Field(deserialize.integer)
    enabled = Field()
    sip_url = Field()
    friendly_name = Field()
    priority = Field(deserialize.integer)
    date_created = Field(deserialize.iso8601_datetime)
    date_updated = Field(deserialize.iso8601_datetime)
    url = Field()

    def __init__(self, version, payload: Dict[str, Any], trunk_sid: str, sid: str | None = None) -> None:
        super().__init__(version, payload)
        self._solution = {"trunk_sid": trunk_sid, "sid": sid or self._properties["sid"]}

    @property
    def _proxy(self) -> "OriginationUrlContext":
        if self._context is None:
            self._context = OriginationUrlContext(
                self._version,
                trunk_sid=self._solution["trunk_sid"],
                sid=self._solution["sid"],
            )
        return self._context

    def fetch(self) -> "OriginationUrlInstance":
        return self._proxy.fetch()

    def delete(self) -> bool:
        return self._proxy.delete()

    def update(
        self,
        weight=values.unset,
        priority=values.unset,
        enabled=values.unset,
        friendly_name=values.unset,
        sip_url=values.unset,
    ) -> "OriginationUrlInstance":
        return self._proxy.update(
            weight=weight,
            priority=priority,
            enabled=enabled,
            friendly_name=friendly_name,
            sip_url=sip_url,
        )


class OriginationUrlContext(InstanceContext):
    def __init__(self, version, trunk_sid: str, sid: str) -> None:
        super().__init__(version)
        self._solution = {"trunk_sid": trunk_sid, "sid": sid}
        self._uri = "/Trunks/{trunk_sid}/OriginationUrls/{sid}".format(**self._solution)

    def fetch(self) -> OriginationUrlInstance:
        payload = self._version.fetch(method="GET", uri=self._uri)
        return OriginationUrlInstance(self._version, payload, **self._solution)

    def delete(self) -> bool:
        return self._version.delete(method="DELETE", uri=self._uri)

    def update(
        self,
        weight=values.unset,
        priority=values.unset,
        enabled=values.unset,
        friendly_name=values.unset,
        sip_url=values.unset,
    ) -> OriginationUrlInstance:
        data = _origination_url_params(weight, priority, enabled, friendly_name, sip_url)
        payload = self._version.update(method="POST", uri=self._uri, data=data)
        return OriginationUrlInstance(self._version, payload, **self._solution)
