from ....base.version import Version
from .phone_number.phone_number import PhoneNumberList
from .voice.voice import VoiceList


class V1(Version):
    def __init__(self, domain) -> None:
        super().__init__(domain, "v1")
        self._phone_numbers = None
        self._voice = None

    @property
    def phone_numbers(self) -> PhoneNumberList:
        if self._phone_numbers is None:
            self._phone_numbers = PhoneNumberList(self)
        return self._phone_numbers

    @property
    def voice(self) -> VoiceList:
        if self._voice is None:
            self._voice = VoiceList(self)
        return self._voice

    def __repr__(self) -> str:
        return "<Twilio.Pricing.V1>"
