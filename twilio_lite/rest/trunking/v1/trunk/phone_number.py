"""Phone numbers attached to a trunk.

Attaching moves the number's voice routing to the trunk; detaching (delete)
returns the number to the account, it is not released.
"""

from __future__ import annotations

from typing import Any, Dict

from .....base import deserialize, values
from .....base.instance_context import InstanceContext
from .....base.instance_resource import Field, InstanceResource
from .....base.list_resource import ListResource
from .....base.page import Page
from .....common.logging import logger
from .....common.logging_utils import mask_sid


class PhoneNumberPage(Page):
    def get_instance(self, payload: Dict[str, Any]) -> "PhoneNumberInstance":
        return PhoneNumberInstance(self._version, payload, trunk_sid=self._solution["trunk_sid"])

    def __repr__(self) -> str:
        return "<Twilio.Trunking.V1.PhoneNumberPage>"


class PhoneNumberList(ListResource):
    _page_class = PhoneNumberPage

    def __init__(self, version, trunk_sid: str) -> None:
        super().__init__(version)
        self._solution = {"trunk_sid": trunk_sid}
        self._uri = "/Trunks/{trunk_sid}/PhoneNumbers".format(**self._solution)

    def create(self, phone_number_sid: str) -> "PhoneNumberInstance":
        """Attach an incoming phone number (`PN...`) of the account to the trunk."""
        logger.info({
            "msg": "Attaching phone number to trunk",
            "trunk": mask_sid(self._solution["trunk_sid"]),
            "phone_number": mask_sid(phone_number_sid),
        })
        data = values.of({"PhoneNumberSid": phone_number_sid})
        payload = self._version.create(method="POST", uri=self._uri, data=data)
        return PhoneNumberInstance(self._version, payload, trunk_sid=self._solution["trunk_sid"])

    def get(self, sid: str) -> "PhoneNumberContext":
        return PhoneNumberContext(self._version, trunk_sid=self._solution["trunk_sid"], sid=sid)

    def __call__(self, sid: str) -> "PhoneNumberContext":
        return self.get(sid)

    def __repr__(self) -> str:
        return "<Twilio.Trunking.V1.PhoneNumberList>"


class PhoneNumberInstance(InstanceResource):
    account_sid = Field()
    address_requirements = Field()
    api_version = Field()
    beta = Field()
    capabilities = Field()
    date_created = Field(deserialize.iso8601_datetime)
    date_updated = Field(deserialize.iso8601_datetime)
    friendly_name = Field()
    links = Field()
    phone_number = Field()
    sid = Field()
    sms_application_sid = Field()
    sms_fallback_method = Field()
    sms_fallback_url = Field()
    sms_method = Field()
    sms_url = Field()
    status_callback = Field()
    status_callback_method = Field()
    trunk_sid = Field()
    url = Field()
    voice_application_sid = Field()
    voice_caller_id_lookup = Field()
    voice_fallback_method = Field()
    voice_fallback_url = Field()
    voice_method = Field()
    voice_url = Field()

    def __init__(self, version, payload: Dict[str, Any], trunk_sid: str, sid: str | None = None) -> None:
        super().__init__(version, payload)
        self._solution = {"trunk_sid": trunk_sid, "sid": sid or self._properties["sid"]}

    @property
    def _proxy(self) -> "PhoneNumberContext":
        if self._context is None:
            self._context = PhoneNumberContext(
                self._version,
                trunk_sid=self._solution["trunk_sid"],
                sid=self._solution["sid"],
            )
        return self._context

    def fetch(self) -> "PhoneNumberInstance":
        return self._proxy.fetch()

    def delete(self) -> bool:
        return self._proxy.delete()


class PhoneNumberContext(InstanceContext):
    def __init__(self, version, trunk_sid: str, sid: str) -> None:
        super().__init__(version)
        self._solution = {"trunk_sid": trunk_sid, "sid": sid}
        self._uri = "/Trunks/{trunk_sid}/PhoneNumbers/{sid}".format(**self._solution)

    def fetch(self) -> PhoneNumberInstance:
        payload = self._version.fetch(method="GET", uri=self._uri)
        return PhoneNumberInstance(self._version, payload, **self._solution)

    def delete(self) -> bool:
        return self._version.delete(method="DELETE", uri=self._uri)
