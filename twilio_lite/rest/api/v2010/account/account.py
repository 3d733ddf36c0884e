from __future__ import annotations

from .....base import deserialize
from .....base.instance_context import InstanceContext
from .....base.instance_resource import Field, InstanceResource
from .usage.usage import UsageList


class AccountList:
    """Accounts are only addressed by sid here; listing/creating sub-accounts is not exposed."""

    def __init__(self, version) -> None:
        self._version = version

    def get(self, sid: str) -> "AccountContext":
        return AccountContext(self._version, sid)

    def __call__(self, sid: str) -> "AccountContext":
        return self.get(sid)

    def __repr__(self) -> str:
        return "<Twilio.Api.V2010.AccountList>"


class AccountInstance(InstanceResource):
    auth_token = Field()
    date_created = Field(deserialize.rfc2822_datetime)
    date_updated = Field(deserialize.rfc2822_datetime)
    friendly_name = Field()
    owner_account_sid = Field()
    sid = Field()
    status = Field()
    subresource_uris = Field()
    type = Field()
    uri = Field()

    def __init__(self, version, payload, sid: str | None = None) -> None:
        super().__init__(version, payload)
        self._solution = {"sid": sid or self._properties["sid"]}

    @property
    def _proxy(self) -> "AccountContext":
        if self._context is None:
            self._context = AccountContext(self._version, self._solution["sid"])
        return self._context

    def fetch(self) -> "AccountInstance":
        return self._proxy.fetch()

    @property
    def usage(self) -> UsageList:
        return self._proxy.usage


class AccountContext(InstanceContext):
    def __init__(self, version, sid: str) -> None:
        super().__init__(version)
        self._solution = {"sid": sid}
        self._uri = "/Accounts/{sid}.json".format(**self._solution)

        # Dependents
        self._usage = None

    def fetch(self) -> AccountInstance:
        payload = self._version.fetch(method="GET", uri=self._uri)
        return AccountInstance(self._version, payload, sid=self._solution["sid"])

    @property
    def usage(self) -> UsageList:
        if self._usage is None:
            self._usage = UsageList(self._version, account_sid=self._solution["sid"])
        return self._usage
