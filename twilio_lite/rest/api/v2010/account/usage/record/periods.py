"""Calendar windows of usage records (`/Usage/Records/<Window>.json`).

All windows share the record shape of `usage_record`; each one only names
its path segment and the page class that builds its instances.
"""

from .......base.page import Page
from .usage_record import UsageRecordInstance, UsageRecordListBase


class DailyInstance(UsageRecordInstance):
    pass


class DailyPage(Page):
    def get_instance(self, payload) -> DailyInstance:
        return DailyInstance(self._version, payload, account_sid=self._solution["account_sid"])


class DailyList(UsageRecordListBase):
    _segment = "Daily"
    _page_class = DailyPage


class MonthlyInstance(UsageRecordInstance):
    pass


class MonthlyPage(Page):
    def get_instance(self, payload) -> MonthlyInstance:
        return MonthlyInstance(self._version, payload, account_sid=self._solution["account_sid"])


class MonthlyList(UsageRecordListBase):
    _segment = "Monthly"
    _page_class = MonthlyPage


class YearlyInstance(UsageRecordInstance):
    pass


class YearlyPage(Page):
    def get_instance(self, payload) -> YearlyInstance:
        return YearlyInstance(self._version, payload, account_sid=self._solution["account_sid"])


class YearlyList(UsageRecordListBase):
    _segment = "Yearly"
    _page_class = YearlyPage


class TodayInstance(UsageRecordInstance):
    pass


class TodayPage(Page):
    def get_instance(self, payload) -> TodayInstance:
        return TodayInstance(self._version, payload, account_sid=self._solution["account_sid"])


class TodayList(UsageRecordListBase):
    _segment = "Today"
    _page_class = TodayPage


class YesterdayInstance(UsageRecordInstance):
    pass


class YesterdayPage(Page):
    def get_instance(self, payload) -> YesterdayInstance:
        return YesterdayInstance(self._version, payload, account_sid=self._solution["account_sid"])


class YesterdayList(UsageRecordListBase):
    _segment = "Yesterday"
    _page_class = YesterdayPage


class ThisMonthInstance(UsageRecordInstance):
    pass


class ThisMonthPage(Page):
    def get_instance(self, payload) -> ThisMonthInstance:
        return ThisMonthInstance(self._version, payload, account_sid=self._solution["account_sid"])


class ThisMonthList(UsageRecordListBase):
    _segment = "ThisMonth"
    _page_class = ThisMonthPage


class LastMonthInstance(UsageRecordInstance):
    pass


class LastMonthPage(Page):
    def get_instance(self, payload) -> LastMonthInstance:
        return LastMonthInstance(self._version, payload, account_sid=self._solution["account_sid"])


class LastMonthList(UsageRecordListBase):
    _segment = "LastMonth"
    _page_class = LastMonthPage
