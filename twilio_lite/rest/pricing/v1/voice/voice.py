from .country import CountryList
from .number import NumberList


class VoiceList:
    """Voice pricing: per destination country, or for a single number."""

    def __init__(self, version) -> None:
        self._version = version
        self._countries = None
        self._numbers = None

    @property
    def countries(self) -> CountryList:
        if self._countries is None:
            self._countries = CountryList(self._version)
        return self._countries

    @property
    def numbers(self) -> NumberList:
        if self._numbers is None:
            self._numbers = NumberList(self._version)
        return self._numbers

    def __repr__(self) -> str:
        return "<Twilio.Pricing.V1.VoiceList>"
