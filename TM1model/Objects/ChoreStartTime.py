# -*- coding: utf-8 -*-

import datetime

from TM1model.Exceptions import TM1modelDecodeException
from TM1model.Utils.Utils import ODATA_TIMESTAMP_PATTERN


class ChoreStartTime:
    """Utility class to handle time representation for Chore Start Time

    The offset (e.g. +01:00) is kept as it is, the time itself is held as naive datetime.
    """

    def __init__(self, year: int, month: int, day: int, hour: int, minute: int, second: int = 0, tz: str = None):
        self._datetime = datetime.datetime(year, month, day, hour, minute, second)
        self.tz = tz

    @classmethod
    def from_string(cls, start_time_string: str) -> "ChoreStartTime":
        """ e.g. 2020-11-05T08:00:01+01:00, 2020-11-05T08:00:01Z or 2016-09-25T20:25Z (no seconds)

        """
        match = ODATA_TIMESTAMP_PATTERN.match(start_time_string or "")
        if not match:
            raise TM1modelDecodeException(f"Invalid start time: '{start_time_string}'", "ChoreStartTime")

        tz = match.group("tz")
        try:
            return cls(
                year=int(match.group("year")),
                month=int(match.group("month")),
                day=int(match.group("day")),
                hour=int(match.group("hour")),
                minute=int(match.group("minute")),
                second=int(match.group("second") or 0),
                tz=None if tz == "Z" else tz)
        except ValueError as e:
            raise TM1modelDecodeException(str(e), "ChoreStartTime") from e

    @property
    def start_time_string(self) -> str:
        # always written with seconds, 2016-09-25T20:25:00Z instead of 2016-09-25T20:25Z
        return self._datetime.strftime("%Y-%m-%dT%H:%M:%S") + (self.tz or "Z")

    @property
    def datetime(self) -> datetime.datetime:
        return self._datetime

    def __str__(self):
        return self.start_time_string

    def set_time(self, year: int = None, month: int = None, day: int = None, hour: int = None, minute: int = None,
                 second: int = None):
        replacements = dict(year=year, month=month, day=day, hour=hour, minute=minute, second=second)
        self._datetime = self._datetime.replace(
            **{unit: value for unit, value in replacements.items() if value is not None})

    def add(self, days: int = 0, hours: int = 0, minutes: int = 0, seconds: int = 0):
        self._datetime = self._datetime + datetime.timedelta(days=days, hours=hours, minutes=minutes, seconds=seconds)

    def subtract(self, days: int = 0, hours: int = 0, minutes: int = 0, seconds: int = 0):
        self._datetime = self._datetime - datetime.timedelta(days=days, hours=hours, minutes=minutes, seconds=seconds)
