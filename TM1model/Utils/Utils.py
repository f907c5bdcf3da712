import collections
import datetime
import json
import re
from typing import Any, Dict, Iterable, List, Optional
from urllib.parse import quote, unquote

import pytz

from TM1model.Exceptions.Exceptions import (
    TM1modelDecodeException,
    TM1modelEncodeException,
    TM1modelInvalidNameException,
    TM1modelMissingBindingException,
)

ODATA_TIMESTAMP_PATTERN = re.compile(
    r"^(?P<year>\d{4})-(?P<month>\d{2})-(?P<day>\d{2})"
    r"T(?P<hour>\d{2}):(?P<minute>\d{2})(?::(?P<second>\d{2})(?:\.(?P<fraction>\d+))?)?"
    r"(?P<tz>Z|[+-]\d{2}:\d{2})?$")


def build_url_friendly_object_name(object_name: str) -> str:
    """ percent-encode a TM1 object name for use as an OData path segment

    Everything outside of ALPHA / DIGIT / '-' / '.' / '_' / '~' is encoded as UTF-8 %XX sequence.
    TM1 doesn't accept single quotes in object names, so they are rejected instead of being escaped.
    """
    if "'" in object_name:
        raise TM1modelInvalidNameException(object_name)
    return quote(object_name, safe="")


def format_url(url, *args: str, **kwargs: str) -> str:
    """build url and percent-encode the str args and kwargs
    :param url: url with {} placeholders
    :param args: arguments to placeholders
    :return:
    """
    args = [build_url_friendly_object_name(arg) if isinstance(arg, str) else arg for arg in args]

    kwargs = {
        key: build_url_friendly_object_name(value) if isinstance(value, str) else value for key, value in kwargs.items()
    }

    return url.format(*args, **kwargs)


def _require_names(**names: str):
    for field, value in names.items():
        if not value:
            raise TM1modelMissingBindingException(field)


def dimension_reference(dimension_name: str) -> str:
    """ Dimensions('<dimension>') """
    _require_names(dimension_name=dimension_name)
    return format_url("Dimensions('{}')", dimension_name)


def hierarchy_reference(dimension_name: str, hierarchy_name: str) -> str:
    """ Dimensions('<dimension>')/Hierarchies('<hierarchy>') """
    _require_names(dimension_name=dimension_name, hierarchy_name=hierarchy_name)
    return format_url("Dimensions('{}')/Hierarchies('{}')", dimension_name, hierarchy_name)


def element_reference(dimension_name: str, hierarchy_name: str, element_name: str) -> str:
    _require_names(dimension_name=dimension_name, hierarchy_name=hierarchy_name, element_name=element_name)
    return hierarchy_reference(dimension_name, hierarchy_name) + format_url("/Elements('{}')", element_name)


def subset_reference(dimension_name: str, hierarchy_name: str, subset_name: str) -> str:
    _require_names(dimension_name=dimension_name, hierarchy_name=hierarchy_name, subset_name=subset_name)
    return hierarchy_reference(dimension_name, hierarchy_name) + format_url("/Subsets('{}')", subset_name)


def read_object_name_from_url(url: str, pattern: str) -> Optional[str]:
    """ e.g. read_object_name_from_url("Processes('p%201')", r"Processes\\('(.+)'\\)") -> 'p 1' """
    match = re.match(pattern, url)
    if not match:
        return None

    return unquote(match.group(1))


def dimension_name_from_unique_name(unique_name: str) -> str:
    """ [d1].[h1].[s1] -> d1

    returns an empty string if the unique name doesn't start with a bracketed segment
    """
    if not unique_name.startswith("["):
        return ""
    end = unique_name.find("]")
    if end < 0:
        return ""
    return unique_name[1:end]


def hierarchy_name_from_unique_name(unique_name: str) -> Optional[str]:
    """ [d1].[h1].[s1] -> h1, [d1].[s1] -> None """
    if unique_name.count("].[") < 2:
        return None
    return unique_name[unique_name.find("].[") + 3: unique_name.rfind("].[")]


def lower_and_drop_spaces(item: str) -> str:
    return item.replace(" ", "").lower()


def case_and_space_insensitive_equals(item1: str, item2: str) -> bool:
    return lower_and_drop_spaces(item1) == lower_and_drop_spaces(item2)


def parse_odata_timestamp(timestamp: Optional[str]) -> Optional[datetime.datetime]:
    """ Parse a TM1 timestamp into a timezone aware UTC datetime

    Accepts the flavors TM1 returns: 2025-07-26T10:53:18.870Z, 2020-11-05T08:00:01+01:00, 2016-09-25T20:25Z
    Timestamps without offset are interpreted as UTC.

    :param timestamp: string or None
    :return: datetime in UTC or None
    """
    if not timestamp:
        return None

    match = ODATA_TIMESTAMP_PATTERN.match(timestamp.strip()) if isinstance(timestamp, str) else None
    if not match:
        raise TM1modelDecodeException(f"Invalid timestamp: '{timestamp}'")

    fraction = match.group("fraction") or "0"
    try:
        naive = datetime.datetime(
            year=int(match.group("year")),
            month=int(match.group("month")),
            day=int(match.group("day")),
            hour=int(match.group("hour")),
            minute=int(match.group("minute")),
            second=int(match.group("second") or 0),
            microsecond=int(fraction[:6].ljust(6, "0")))
    except ValueError as e:
        raise TM1modelDecodeException(f"Invalid timestamp: '{timestamp}'") from e

    tz = match.group("tz")
    if not tz or tz == "Z":
        return pytz.utc.localize(naive)

    sign = -1 if tz[0] == "-" else 1
    offset_minutes = sign * (int(tz[1:3]) * 60 + int(tz[4:6]))
    return pytz.FixedOffset(offset_minutes).localize(naive).astimezone(pytz.utc)


def load_json(payload: str, payload_type: str = None) -> Any:
    """ json.loads that raises TM1modelDecodeException for malformed JSON """
    try:
        return json.loads(payload)
    except (TypeError, ValueError) as e:
        raise TM1modelDecodeException(str(e), payload_type) from e


def dump_body(body_as_dict: Dict) -> str:
    """ json.dumps that raises TM1modelEncodeException for objects that are not serializable """
    try:
        return json.dumps(body_as_dict, ensure_ascii=False)
    except (TypeError, ValueError) as e:
        raise TM1modelEncodeException(str(e)) from e


def expect_dict(value: Any, payload_type: str) -> Dict:
    if not isinstance(value, collections.abc.Mapping):
        raise TM1modelDecodeException(
            f"expected JSON object but got '{type(value).__name__}'", payload_type)
    return value


def expect_list(value: Any, payload_type: str) -> List:
    if value is None:
        return []
    if not isinstance(value, list):
        raise TM1modelDecodeException(
            f"expected JSON array but got '{type(value).__name__}'", payload_type)
    return value


def name_of(value: Any) -> Optional[str]:
    """ Name of an expanded sub object, e.g. {"Name": "Region"} -> "Region" """
    if isinstance(value, collections.abc.Mapping):
        name = value.get("Name")
        if isinstance(name, str):
            return name
    return None


class CaseAndSpaceInsensitiveDict(collections.abc.MutableMapping):
    """
    A case-and-space-insensitive dict-like object with string keys.

    The structure remembers the case of the last key set, and methods like `__iter__`,
    `keys()`, `items()`, etc., will contain case-sensitive keys.

    However, querying and membership tests are case-and-space-insensitive:
        data = CaseAndSpaceInsensitiveDict()
        data['Travel Expenses'] = 100
        assert data['travelexpenses'] == 100  # True

    Entries are ordered.
    """

    def __init__(self, data=None, **kwargs):
        self._store = collections.OrderedDict()
        if data is None:
            data = {}
        self.update(data, **kwargs)

    def _adjust_key(self, key):
        if not isinstance(key, str):
            raise TypeError("Keys must be strings.")
        return lower_and_drop_spaces(key)

    def __setitem__(self, key, value):
        self._store[self._adjust_key(key)] = (key, value)

    def __getitem__(self, key):
        try:
            return self._store[self._adjust_key(key)][1]
        except KeyError:
            raise KeyError(f"Key '{key}' not found.") from None

    def __delitem__(self, key):
        try:
            del self._store[self._adjust_key(key)]
        except KeyError:
            raise KeyError(f"Key '{key}' not found.") from None

    def __iter__(self):
        return (key for key, _ in self._store.values())

    def __len__(self):
        return len(self._store)

    def __contains__(self, key):
        return self._adjust_key(key) in self._store

    def adjusted_keys(self):
        return (adjusted_key for adjusted_key in self._store.keys())

    def __eq__(self, other):
        if not isinstance(other, collections.abc.Mapping):
            return NotImplemented
        other = CaseAndSpaceInsensitiveDict(other)
        return {k: v[1] for k, v in self._store.items()} == {k: v[1] for k, v in other._store.items()}

    def copy(self):
        return CaseAndSpaceInsensitiveDict(self._store.values())

    def __repr__(self):
        items = ", ".join(f"{key!r}: {value!r}" for key, value in self.items())
        return f"{self.__class__.__name__}({{{items}}})"


class CaseAndSpaceInsensitiveSet(collections.abc.MutableSet):
    """
    A case-and-space-insensitive set-like object for strings.

    The set keeps the spelling of the first value added. Membership tests are case-and-space-insensitive:
        data = CaseAndSpaceInsensitiveSet('Apple', 'Banana')
        assert 'apple' in data         # True
        assert '  BANANA ' in data     # True

    Entries are ordered based on insertion order.
    """

    def __init__(self, *values):
        self._store = {}
        for value in values:
            if isinstance(value, str):
                self.add(value)
            elif isinstance(value, Iterable):
                for item in value:
                    self.add(item)
            else:
                self.add(value)

    def _adjust_value(self, value):
        if not isinstance(value, str):
            raise TypeError("Value must be string.")
        return lower_and_drop_spaces(value)

    def __contains__(self, value):
        return self._adjust_value(value) in self._store

    def __iter__(self):
        return iter(self._store.values())

    def __len__(self):
        return len(self._store)

    def add(self, value):
        adjusted_value = self._adjust_value(value)
        # first spelling wins, so the position in the set is kept as well
        if adjusted_value not in self._store:
            self._store[adjusted_value] = value

    def discard(self, value):
        self._store.pop(self._adjust_value(value), None)

    def __repr__(self):
        items = ", ".join(repr(value) for value in self)
        return f"{self.__class__.__name__}([{items}])"
