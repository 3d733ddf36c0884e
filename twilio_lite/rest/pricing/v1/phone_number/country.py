from __future__ import annotations

from typing import Any, Dict

from .....base.instance_context import InstanceContext
from .....base.instance_resource import Field, InstanceResource
from .....base.list_resource import ListResource
from .....base.page import Page


class CountryPage(Page):
    def get_instance(self, payload: Dict[str, Any]) -> "CountryInstance":
        return CountryInstance(self._version, payload)

    def __repr__(self) -> str:
        return "<Twilio.Pricing.V1.CountryPage>"


class CountryList(ListResource):
    """Countries with phone number pricing. Listing returns names only;
    fetch a country for its `phone_number_prices`."""

    _page_class = CountryPage

    def __init__(self, version) -> None:
        super().__init__(version)
        self._uri = "/PhoneNumbers/Countries"

    def get(self, iso_country: str) -> "CountryContext":
        return CountryContext(self._version, iso_country)

    def __call__(self, iso_country: str) -> "CountryContext":
        return self.get(iso_country)

    def __repr__(self) -> str:
        return "<Twilio.Pricing.V1.CountryList>"


class CountryInstance(InstanceResource):
    country = Field()
    iso_country = Field()
    phone_number_prices = Field()
    price_unit = Field()
    url = Field()

    def __init__(self, version, payload: Dict[str, Any], iso_country: str | None = None) -> None:
        super().__init__(version, payload)
        self._solution = {"iso_country": iso_country or self._properties["iso_country"]}

    @property
    def _proxy(self) -> "CountryContext":
        if self._context is None:
            self._context = CountryContext(self._version, self._solution["iso_country"])
        return self._context

    def fetch(self) -> "CountryInstance":
        return self._proxy.fetch()


class CountryContext(InstanceContext):
    def __init__(self, version, iso_country: str) -> None:
        super().__init__(version)
        self._solution = {"iso_country": iso_country}
        self._uri = "/PhoneNumbers/Countries/{iso_country}".format(**self._solution)

    def fetch(self) -> CountryInstance:
        payload = self._version.fetch(method="GET", uri=self._uri)
        return CountryInstance(self._version, payload, iso_country=self._solution["iso_country"])
