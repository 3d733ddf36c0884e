from .......base.page import Page
from .usage_record import UsageRecordInstance, UsageRecordListBase


class AllTimeInstance(UsageRecordInstance):
    pass


class AllTimePage(Page):
    def get_instance(self, payload) -> AllTimeInstance:
        return AllTimeInstance(self._version, payload, account_sid=self._solution["account_sid"])

    def __repr__(self) -> str:
        return "<Twilio.Api.V2010.AllTimePage>"


class AllTimeList(UsageRecordListBase):
    """Usage summed over the whole life of the account, one record per category."""

    _segment = "AllTime"
    _page_class = AllTimePage

    def __repr__(self) -> str:
        return "<Twilio.Api.V2010.AllTimeList>"
