from ...base.domain import Domain


class Trunking(Domain):
    def __init__(self, twilio) -> None:
        super().__init__(twilio, "https://trunking.twilio.com")
        self._v1 = None

    @property
    def v1(self):
        if self._v1 is None:
            from .v1.version import V1
            self._v1 = V1(self)
        return self._v1

    @property
    def trunks(self):
        return self.v1.trunks

    def __repr__(self) -> str:
        return "<Twilio.Trunking>"
