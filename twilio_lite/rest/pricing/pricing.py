from ...base.domain import Domain


class Pricing(Domain):
    def __init__(self, twilio) -> None:
        super().__init__(twilio, "https://pricing.twilio.com")
        self._v1 = None

    @property
    def v1(self):
        if self._v1 is None:
            from .v1.version import V1
            self._v1 = V1(self)
        return self._v1

    @property
    def phone_numbers(self):
        return self.v1.phone_numbers

    @property
    def voice(self):
        return self.v1.voice

    def __repr__(self) -> str:
        return "<Twilio.Pricing>"
