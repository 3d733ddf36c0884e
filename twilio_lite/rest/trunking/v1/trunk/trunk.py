"""SIP trunks: `/Trunks` and `/Trunks/{Sid}`.

A trunk's sid parameterizes the URLs of its sub-resources (origination
URLs, credential lists, IP access control lists, phone numbers).
"""

from __future__ import annotations

from typing import Any, Dict

from .....base import deserialize, serialize, values
from .....base.instance_context import InstanceContext
from .....base.instance_resource import Field, InstanceResource
from .....base.list_resource import ListResource
from .....base.page import Page
from .credential_list import CredentialListList
from .ip_access_control_list import IpAccessControlListList
from .origination_url import OriginationUrlList
from .phone_number import PhoneNumberList


def _trunk_params(
    friendly_name,
    domain_name,
    disaster_recovery_url,
    disaster_recovery_method,
    recording,
    secure,
) -> Dict[str, Any]:
    return values.of({
        "FriendlyName": friendly_name,
        "DomainName": domain_name,
        "DisasterRecoveryUrl": disaster_recovery_url,
        "DisasterRecoveryMethod": disaster_recovery_method,
        "Recording": recording,
        "Secure": serialize.boolean_to_string(secure),
    })


class TrunkPage(Page):
    def get_instance(self, payload: Dict[str, Any]) -> "TrunkInstance":
        return TrunkInstance(self._version, payload)

    def __repr__(self) -> str:
        return "<Twilio.Trunking.V1.TrunkPage>"


class TrunkList(ListResource):
    _page_class = TrunkPage

    def __init__(self, version) -> None:
        super().__init__(version)
        self._uri = "/Trunks"

    def create(
        self,
        friendly_name=values.unset,
        domain_name=values.unset,
        disaster_recovery_url=values.unset,
        disaster_recovery_method=values.unset,
        recording=values.unset,
        secure=values.unset,
    ) -> "TrunkInstance":
        """Create a new trunk.

        :param friendly_name: human readable name
        :param domain_name: unique SIP domain (`<name>.pstn.twilio.com`)
        :param disaster_recovery_url: URL called when the trunk's origination fails
        :param disaster_recovery_method: HTTP method for `disaster_recovery_url`
        :param recording: recording setting, e.g. `record-from-ringing`
        :param secure: whether SRTP/TLS is required
        """
        data = _trunk_params(
            friendly_name, domain_name, disaster_recovery_url,
            disaster_recovery_method, recording, secure,
        )
        payload = self._version.create(method="POST", uri=self._uri, data=data)
        return TrunkInstance(self._version, payload)

    def get(self, sid: str) -> "TrunkContext":
        return TrunkContext(self._version, sid)

    def __call__(self, sid: str) -> "TrunkContext":
        return self.get(sid)

    def __repr__(self) -> str:
        return "<Twilio.Trunking.V1.TrunkList>"


class TrunkInstance(InstanceResource):
    account_sid = Field()
    domain_name = Field()
    disaster_recovery_method = Field()
    disaster_recovery_url = Field()
    friendly_name = Field()
    secure = Field()
    recording = Field()
    auth_type = Field()
    auth_type_set = Field()
    date_created = Field(deserialize.iso8601_datetime)
    date_updated = Field(deserialize.iso8601_datetime)
    sid = Field()
    url = Field()
    links = Field()

    def __init__(self, version, payload: Dict[str, Any], sid: str | None = None) -> None:
        super().__init__(version, payload)
        self._solution = {"sid": sid or self._properties["sid"]}

    @property
    def _proxy(self) -> "TrunkContext":
        if self._context is None:
            self._context = TrunkContext(self._version, self._solution["sid"])
        return self._context

    def fetch(self) -> "TrunkInstance":
        return self._proxy.fetch()

    def delete(self) -> bool:
        return self._proxy.delete()

    def update(
        self,
        friendly_name=values.unset,
        domain_name=values.unset,
        disaster_recovery_url=values.unset,
        disaster_recovery_method=values.unset,
        recording=values.unset,
        secure=values.unset,
    ) -> "TrunkInstance":
        return self._proxy.update(
            friendly_name=friendly_name,
            domain_name=domain_name,
            disaster_recovery_url=disaster_recovery_url,
            disaster_recovery_method=disaster_recovery_method,
            recording=recording,
            secure=secure,
        )

    @property
    def origination_urls(self) -> OriginationUrlList:
        return self._proxy.origination_urls

    @property
    def credentials_lists(self) -> CredentialListList:
        return self._proxy.credentials_lists

    @property
    def ip_access_control_lists(self) -> IpAccessControlListList:
        return self._proxy.ip_access_control_lists

    @property
    def phone_numbers(self) -> PhoneNumberList:
        return self._proxy.phone_numbers

    def __repr__(self) -> str:
        return f"<Twilio.Trunking.V1.TrunkInstance sid={self._solution['sid']}>"


class TrunkContext(InstanceContext):
    def __init__(self, version, sid: str) -> None:
        super().__init__(version)
        self._solution = {"sid": sid}
        self._uri = "/Trunks/{sid}".format(**self._solution)

        # Dependents
        self._origination_urls = None
        self._credentials_lists = None
        self._ip_access_control_lists = None
        self._phone_numbers = None

    def fetch(self) -> TrunkInstance:
        payload = self._version.fetch(method="GET", uri=self._uri)
        return TrunkInstance(self._version, payload, sid=self._solution["sid"])

    def delete(self) -> bool:
        return self._version.delete(method="DELETE", uri=self._uri)

    def update(
        self,
        friendly_name=values.unset,
        domain_name=values.unset,
        disaster_recovery_url=values.unset,
        disaster_recovery_method=values.unset,
        recording=values.unset,
        secure=values.unset,
    ) -> TrunkInstance:
        data = _trunk_params(
            friendly_name, domain_name, disaster_recovery_url,
            disaster_recovery_method, recording, secure,
        )
        payload = self._version.update(method="POST", uri=self._uri, data=data)
        return TrunkInstance(self._version, payload, sid=self._solution["sid"])

    @property
    def origination_urls(self) -> OriginationUrlList:
        if self._origination_urls is None:
            self._origination_urls = OriginationUrlList(self._version, trunk_sid=self._solution["sid"])
        return self._origination_urls

    @property
    def credentials_lists(self) -> CredentialListList:
        if self._credentials_lists is None:
            self._credentials_lists = CredentialListList(self._version, trunk_sid=self._solution["sid"])
        return self._credentials_lists

    @property
    def ip_access_control_lists(self) -> IpAccessControlListList:
        if self._ip_access_control_lists is None:
            self._ip_access_control_lists = IpAccessControlListList(
                self._version, trunk_sid=self._solution["sid"]
            )
        return self._ip_access_control_lists

    @property
    def phone_numbers(self) -> PhoneNumberList:
        if self._phone_numbers is None:
            self._phone_numbers = PhoneNumberList(self._version, trunk_sid=self._solution["sid"])
        return self._phone_numbers

    def __repr__(self) -> str:
        return f"<Twilio.Trunking.V1.TrunkContext sid={self._solution['sid']}>"
