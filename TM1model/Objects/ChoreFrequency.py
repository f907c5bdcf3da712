# -*- coding: utf-8 -*-
import re
from typing import Union

from TM1model.Exceptions import TM1modelDecodeException

FREQUENCY_PATTERN = re.compile(r"^P(?P<days>\d+)DT(?P<hours>\d+)H(?P<minutes>\d+)M(?P<seconds>\d+)S$")


class ChoreFrequency:
    """Utility class to handle the ISO-8601 duration of a Chore, e.g. P01DT00H00M00S"""

    def __init__(self, days: Union[str, int] = 0, hours: Union[str, int] = 0, minutes: Union[str, int] = 0,
                 seconds: Union[str, int] = 0):
        self.days = days
        self.hours = hours
        self.minutes = minutes
        self.seconds = seconds

    @property
    def days(self) -> str:
        return self._days

    @days.setter
    def days(self, value: Union[str, int]):
        self._days = str(value).zfill(2)

    @property
    def hours(self) -> str:
        return self._hours

    @hours.setter
    def hours(self, value: Union[str, int]):
        self._hours = str(value).zfill(2)

    @property
    def minutes(self) -> str:
        return self._minutes

    @minutes.setter
    def minutes(self, value: Union[str, int]):
        self._minutes = str(value).zfill(2)

    @property
    def seconds(self) -> str:
        return self._seconds

    @seconds.setter
    def seconds(self, value: Union[str, int]):
        self._seconds = str(value).zfill(2)

    @classmethod
    def from_string(cls, frequency_string: str) -> "ChoreFrequency":
        match = FREQUENCY_PATTERN.match(frequency_string or "")
        if not match:
            raise TM1modelDecodeException(f"Invalid frequency: '{frequency_string}'", "ChoreFrequency")
        return cls(**match.groupdict())

    @property
    def frequency_string(self) -> str:
        return "P{}DT{}H{}M{}S".format(self._days, self._hours, self._minutes, self._seconds)

    def __str__(self) -> str:
        return self.frequency_string

    def __eq__(self, other):
        if not isinstance(other, ChoreFrequency):
            return NotImplemented
        return self.frequency_string == other.frequency_string

    def __hash__(self):
        return hash(self.frequency_string)
