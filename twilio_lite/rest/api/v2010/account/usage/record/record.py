from __future__ import annotations

from .......base.page import Page
from .all_time import AllTimeList
from .periods import (
    DailyList,
    LastMonthList,
    MonthlyList,
    ThisMonthList,
    TodayList,
    YearlyList,
    YesterdayList,
)
from .usage_record import UsageRecordInstance, UsageRecordListBase


class RecordInstance(UsageRecordInstance):
    pass


class RecordPage(Page):
    def get_instance(self, payload) -> RecordInstance:
        return RecordInstance(self._version, payload, account_sid=self._solution["account_sid"])

    def __repr__(self) -> str:
        return "<Twilio.Api.V2010.RecordPage>"


class RecordList(UsageRecordListBase):
    """Usage records of an account, plus the windowed views below it."""

    _page_class = RecordPage

    def __init__(self, version, account_sid: str) -> None:
        super().__init__(version, account_sid)

        # Dependents
        self._windows: dict[str, UsageRecordListBase] = {}

    def _window(self, cls):
        if cls.__name__ not in self._windows:
            self._windows[cls.__name__] = cls(self._version, account_sid=self._solution["account_sid"])
        return self._windows[cls.__name__]

    @property
    def all_time(self) -> AllTimeList:
        return self._window(AllTimeList)

    @property
    def daily(self) -> DailyList:
        return self._window(DailyList)

    @property
    def monthly(self) -> MonthlyList:
        return self._window(MonthlyList)

    @property
    def yearly(self) -> YearlyList:
        return self._window(YearlyList)

    @property
    def today(self) -> TodayList:
        return self._window(TodayList)

    @property
    def yesterday(self) -> YesterdayList:
        return self._window(YesterdayList)

    @property
    def this_month(self) -> ThisMonthList:
        return self._window(ThisMonthList)

    @property
    def last_month(self) -> LastMonthList:
        return self._window(LastMonthList)

    def __repr__(self) -> str:
        return "<Twilio.Api.V2010.RecordList>"
