from .record.record import RecordList


class UsageList:
    """Usage namespace of an account; holds no records itself."""

    def __init__(self, version, account_sid: str) -> None:
        self._version = version
        self._solution = {"account_sid": account_sid}

        # Components
        self._records = None

    @property
    def records(self) -> RecordList:
        if self._records is None:
            self._records = RecordList(self._version, account_sid=self._solution["account_sid"])
        return self._records

    def __repr__(self) -> str:
        return "<Twilio.Api.V2010.UsageList>"
