from .country import CountryList


class PhoneNumberList:
    """Phone number pricing; only the per-country listing lives below it."""

    def __init__(self, version) -> None:
        self._version = version
        self._countries = None

    @property
    def countries(self) -> CountryList:
        if self._countries is None:
            self._countries = CountryList(self._version)
        return self._countries

    def __repr__(self) -> str:
        return "<Twilio.Pricing.V1.PhoneNumberList>"
