from __future__ import annotations

from typing import Any, Dict

from .....base.instance_context import InstanceContext
from .....base.instance_resource import Field, InstanceResource
from .....common.logging import logger
from .....common.logging_utils import mask_phone


class NumberList:
    """Voice prices for one phone number; there is no listing endpoint."""

    def __init__(self, version) -> None:
        self._version = version

    def get(self, number: str) -> "NumberContext":
        return NumberContext(self._version, number)

    def __call__(self, number: str) -> "NumberContext":
        return self.get(number)

    def __repr__(self) -> str:
        return "<Twilio.Pricing.V1.NumberList>"


class NumberInstance(InstanceResource):
    number = Field()
    country = Field()
    iso_country = Field()
    outbound_call_price = Field()
    inbound_call_price = Field()
    price_unit = Field()
    url = Field()

    def __init__(self, version, payload: Dict[str, Any], number: str | None = None) -> None:
        super().__init__(version, payload)
        self._solution = {"number": number or self._properties["number"]}

    @property
    def _proxy(self) -> "NumberContext":
        if self._context is None:
            self._context = NumberContext(self._version, self._solution["number"])
        return self._context

    def fetch(self) -> "NumberInstance":
        return self._proxy.fetch()

    def __repr__(self) -> str:
        return f"<Twilio.Pricing.V1.NumberInstance number={mask_phone(self._solution['number'])}>"


class NumberContext(InstanceContext):
    def __init__(self, version, number: str) -> None:
        super().__init__(version)
        self._solution = {"number": number}
        self._uri = "/Voice/Numbers/{number}".format(**self._solution)

    def fetch(self) -> NumberInstance:
        logger.debug({"msg": "Voice price lookup", "number": mask_phone(self._solution["number"])})
        payload = self._version.fetch(method="GET", uri=self._uri)
        return NumberInstance(self._version, payload, number=self._solution["number"])

    def __repr__(self) -> str:
        return f"<Twilio.Pricing.V1.NumberContext number={mask_phone(self._solution['number'])}>"
