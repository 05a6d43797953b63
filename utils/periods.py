"""Target period navigation and the historical lookback window.

Target months are 0-based (0 = January) to match the month picker that drives
the planner; calendar months inside the lookback window are 1-based.
"""
from __future__ import annotations

import calendar
from dataclasses import dataclass
from datetime import date
from typing import List, Optional

import pandas as pd

from utils.config import LOOKBACK_MONTHS


@dataclass(frozen=True)
class TargetPeriod:
    month: int
    year: int

    def __post_init__(self):
        # normalize out-of-range months with year carry, e.g. (12, 2024) -> (0, 2025)
        carry, month = divmod(self.month, 12)
        object.__setattr__(self, "month", month)
        object.__setattr__(self, "year", self.year + carry)

    def previous(self) -> "TargetPeriod":
        if self.month == 0:
            return TargetPeriod(11, self.year - 1)
        return TargetPeriod(self.month - 1, self.year)

    def next(self) -> "TargetPeriod":
        if self.month == 11:
            return TargetPeriod(0, self.year + 1)
        return TargetPeriod(self.month + 1, self.year)

    def set(self, month: Optional[int] = None, year: Optional[int] = None) -> "TargetPeriod":
        return TargetPeriod(
            self.month if month is None else month,
            self.year if year is None else year,
        )

    def to_period(self) -> pd.Period:
        return pd.Period(year=self.year, month=self.month + 1, freq="M")

    def label(self) -> str:
        return f"{calendar.month_name[self.month + 1]} {self.year}"


@dataclass(frozen=True)
class LookbackWindow:
    start: date
    end: date

    @property
    def first_period(self) -> pd.Period:
        return pd.Period(self.start, freq="M")

    @property
    def last_period(self) -> pd.Period:
        return pd.Period(self.end, freq="M")

    def periods(self) -> List[pd.Period]:
        return list(pd.period_range(self.first_period, self.last_period, freq="M"))

    def label(self) -> str:
        def short(p: pd.Period) -> str:
            return f"{calendar.month_abbr[p.month]}-{p.year % 100:02d}"
        return f"Data: {short(self.first_period)} to {short(self.last_period)}"


NAVIGATION_INTENTS = ("previous", "next", "set")


def navigate(period: TargetPeriod, intent: str, month: Optional[int] = None, year: Optional[int] = None) -> TargetPeriod:
    if intent == "previous":
        return period.previous()
    if intent == "next":
        return period.next()
    if intent == "set":
        return period.set(month=month, year=year)
    raise ValueError(f"Unknown navigation intent {intent!r}; expected one of {NAVIGATION_INTENTS}")


def lookback_window(period: TargetPeriod, months: int = LOOKBACK_MONTHS) -> LookbackWindow:
    """Whole calendar months strictly preceding the target month.

    start = first day of (year, month - months), end = last day of (year, month - 1).
    """
    target = period.to_period()
    first = target - months
    last = target - 1
    return LookbackWindow(start=first.start_time.date(), end=last.end_time.date())


def default_target_period(today: Optional[date] = None) -> TargetPeriod:
    """The planner opens on the month after today."""
    today = today or date.today()
    return TargetPeriod(today.month - 1, today.year).next()
