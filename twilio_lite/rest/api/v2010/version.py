from ....base.exceptions import TwilioException
from ....base.version import Version
from .account.account import AccountList


class V2010(Version):
    def __init__(self, domain) -> None:
        super().__init__(domain, "2010-04-01")
        self._accounts = None
        self._account = None

    @property
    def accounts(self) -> AccountList:
        if self._accounts is None:
            self._accounts = AccountList(self)
        return self._accounts

    @property
    def account(self):
        if self._account is None:
            if not self.domain.twilio.account_sid:
                raise TwilioException("An account SID is required when authenticating with an API key")
            self._account = self.accounts(self.domain.twilio.account_sid)
        return self._account

    def __repr__(self) -> str:
        return "<Twilio.Api.V2010>"
