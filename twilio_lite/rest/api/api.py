from ...base.domain import Domain


class Api(Domain):
    def __init__(self, twilio) -> None:
        super().__init__(twilio, "https://api.twilio.com")
        self._v2010 = None

    @property
    def v2010(self):
        if self._v2010 is None:
            from .v2010.version import V2010
            self._v2010 = V2010(self)
        return self._v2010

    @property
    def account(self):
        """Context of the account the client authenticates as."""
        return self.v2010.account

    @property
    def accounts(self):
        return self.v2010.accounts

    def __repr__(self) -> str:
        return "<Twilio.Api>"
