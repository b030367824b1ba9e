# Copyright (c) 2011-2015 Rackspace US, Inc.
# All Rights Reserved.
#    Licensed under the Apache License, Version 2.0 (the "License"); you may
#    not use this file except in compliance with the License. You may obtain
#    a copy of the License at
#
#         http://www.apache.org/licenses/LICENSE-2.0
#
#    Unless required by applicable law or agreed to in writing, software
#    distributed under the License is distributed on an "AS IS" BASIS, WITHOUT
#    WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied. See the
#    License for the specific language governing permissions and limitations
#    under the License.

"""Polyfill time utilities.

Calendar helpers, template based date formatting and conversion to and
from the platform's date/time strings.

Naive datetimes are read as local wall-clock time, except by the platform
string helpers which always speak UTC (see `to_platform_string`). Every
helper returns a new value.

Format a date with `chronos.format_date()`:

    >>> format_date(datetime.datetime(2024, 3, 5, 14, 7, 9),
    ...             'dddd D/MM/YYYY h:mm A')
    'Tuesday 5/03/2024 2:07 PM'

Day and month names go through a resolver callable (see
:mod:`polyfill.i18n`) so they can be translated.
"""

import calendar
import datetime
import re
import time

from polyfill import i18n
from polyfill.exceptions import InvalidArgument

PLATFORM_FORMAT = "%Y-%m-%d %H:%M:%S"
PLATFORM_DATE_FORMAT = "%Y-%m-%d"

# Longer tokens come before the shorter tokens they contain.
FORMAT_TOKENS = (
    'dddd', 'ddd', 'DD', 'D',
    'MM', 'M',
    'YYYY', 'YY',
    'HH', 'H', 'hh', 'h',
    'mm', 'm',
    'ssss', 'ss', 's',
    'A', 'a',
)
_TOKEN_PATTERNS = {token: re.compile(r'\b%s\b' % token, re.ASCII)
                   for token in FORMAT_TOKENS}


def _as_datetime(value):
    """Promote a date to a datetime at midnight."""
    if isinstance(value, datetime.datetime):
        return value
    if isinstance(value, datetime.date):
        return datetime.datetime.combine(value, datetime.time())
    raise TypeError("value must be a date or datetime. A %s was passed."
                    % type(value))


def _midnight(value):
    return _as_datetime(value).replace(hour=0, minute=0, second=0,
                                       microsecond=0)


def _zero(number):
    """Prepend "0" to a value lesser than 10."""
    return '%02d' % number


def add_days(value, days):
    """Add (or remove, when negative) days from a date."""
    return _as_datetime(value) + datetime.timedelta(days=days)


def get_monday(value):
    """Midnight of the Monday starting the week of `value`."""
    return _midnight(value) - datetime.timedelta(days=value.weekday())


def get_sunday(value):
    """Midnight of the Sunday closing the week of `value`."""
    return _midnight(value) + datetime.timedelta(days=6 - value.weekday())


def month_days(value):
    """Number of days in the month of `value`."""
    return calendar.monthrange(value.year, value.month)[1]


def first_day_of_month(value):
    """Midnight of the first day in the month of `value`."""
    return _midnight(value).replace(day=1)


def last_day_of_month(value):
    """Midnight of the last day in the month of `value`."""
    return _midnight(value).replace(day=month_days(value))


def last_sunday(value):
    """Midnight of the last Sunday in the month of `value`."""
    last = last_day_of_month(value)
    return last - datetime.timedelta(days=(last.weekday() + 1) % 7)


def is_midnight(value):
    """Check if hours, minutes and seconds of `value` are all zero."""
    value = _as_datetime(value)
    return value.hour == 0 and value.minute == 0 and value.second == 0


def shift_minutes(value, minutes):
    """Move a date by the given minutes (backwards when negative)."""
    return _as_datetime(value) + datetime.timedelta(minutes=minutes)


def to_utc(value):
    """Return the UTC wall-clock time of `value` as a naive datetime.

    Naive values are taken as local time.
    """
    value = _as_datetime(value)
    return value.astimezone(datetime.timezone.utc).replace(tzinfo=None)


def diff_days(value, other):
    """Whole days from `value` to `other`, both compared at UTC midnight."""
    delta = _midnight(to_utc(other)) - _midnight(to_utc(value))
    return delta.days


def _local_offset(value):
    """UTC offset of the local timezone at `value`."""
    return _as_datetime(value).astimezone().utcoffset()


def is_dst(value):
    """Check if Daylight Saving Time is in effect locally at `value`.

    The standard offset is the smaller of the offsets on January 1st and
    July 1st, which works on both hemispheres.
    """
    standard = min(_local_offset(datetime.datetime(value.year, 1, 1)),
                   _local_offset(datetime.datetime(value.year, 7, 1)))
    return _local_offset(value) > standard


def is_europe_dst(value, offset=None):
    """Check if European Daylight Saving Time is in effect at `value`.

    European DST runs from 01:00 UTC on the last Sunday of March to 01:00
    UTC on the last Sunday of October, whatever the local timezone.

    :keyword offset: minutes added to `value` before the comparison, to
        bring it to UTC. If not provided, `value` is converted with
        `to_utc`.
    """
    if offset is None:
        moment = to_utc(value)
    else:
        moment = shift_minutes(value, offset).replace(tzinfo=None)
    start = last_sunday(datetime.datetime(moment.year, 3, 1))
    end = last_sunday(datetime.datetime(moment.year, 10, 1))
    start, end = start.replace(hour=1), end.replace(hour=1)
    return start <= moment < end


def day_name(value, language=i18n.DEFAULT_LANGUAGE, resolver=None):
    """Name of the weekday of `value`, translated by `resolver`."""
    resolver = resolver or i18n.default_resolver
    name = i18n.DAY_NAMES[value.isoweekday() % 7]
    return resolver(name, language or i18n.DEFAULT_LANGUAGE)


def month_name(value, language=i18n.DEFAULT_LANGUAGE, resolver=None):
    """Name of the month of `value`, translated by `resolver`."""
    resolver = resolver or i18n.default_resolver
    name = i18n.MONTH_NAMES[value.month - 1]
    return resolver(name, language or i18n.DEFAULT_LANGUAGE)


def format_date(value, template, language=i18n.DEFAULT_LANGUAGE,
                resolver=None):
    """Transform a date into a string using the provided template.

    Available placeholders:

    - D: Day without padding (i.e. 1-31)
    - DD: Two digit day number (i.e. 01-31)
    - ddd: Abbreviation of week day (i.e. Mon)
    - dddd: Full name of week day (i.e. Monday)
    - M: Month without padding (i.e. 1-12)
    - MM: Two digit month number (i.e. 01-12)
    - YY: Decade only year value (i.e. 24)
    - YYYY: Full year value (i.e. 2024)
    - H: Hours without padding (24h format, i.e. 0-23)
    - HH: Two digit hours (24h format, i.e. 00-23)
    - h: Hours without padding (12h format, i.e. 0-11)
    - hh: Two digit hours (12h format, i.e. 00-11)
    - m: Minutes without padding (i.e. 0-59)
    - mm: Two digit minutes (i.e. 00-59)
    - s: Seconds without padding (i.e. 0-59)
    - ss: Two digit seconds (i.e. 00-59)
    - ssss: Milliseconds without padding (i.e. 0-999)
    - A: Uppercase meridiem indicator (i.e. AM, PM)
    - a: Lowercase meridiem indicator (i.e. am, pm)

    Placeholders only match as whole words. The 12h hours are not
    normalized: midnight and noon both render as 0, and noon is still AM
    (PM starts at 13:00).

    :param value: the date or datetime to format.
    :param template: string with one or more of the placeholders.
    :keyword language: language code passed to `resolver` for day names.
    :keyword resolver: callable translating canonical day names (default:
        no translation).
    :returns: the formatted string.
    """
    if not template:
        return template
    value = _as_datetime(value)
    hours = value.hour
    twelve = hours - 12 if hours >= 12 else hours
    meridiem = 'PM' if hours > 12 else 'AM'

    def weekday():
        return day_name(value, language=language, resolver=resolver)

    values = {
        'dddd': weekday,
        'ddd': lambda: weekday()[:3],
        'DD': lambda: _zero(value.day),
        'D': lambda: str(value.day),
        'MM': lambda: _zero(value.month),
        'M': lambda: str(value.month),
        'YYYY': lambda: str(value.year),
        'YY': lambda: _zero(value.year % 100),
        'HH': lambda: _zero(hours),
        'H': lambda: str(hours),
        'hh': lambda: _zero(twelve),
        'h': lambda: str(twelve),
        'mm': lambda: _zero(value.minute),
        'm': lambda: str(value.minute),
        'ssss': lambda: str(value.microsecond // 1000),
        'ss': lambda: _zero(value.second),
        's': lambda: str(value.second),
        'A': lambda: meridiem,
        'a': lambda: meridiem.lower(),
    }
    for token in FORMAT_TOKENS:
        pattern = _TOKEN_PATTERNS[token]
        if pattern.search(template):
            replacement = values[token]()
            template = pattern.sub(lambda _: replacement, template)
    return template


def to_platform_string(value=None):
    """The platform date/time string format (in UTC).

    :keyword value: a time_struct, datetime class, or None. If None, the
        current time is used. Aware datetimes are converted to UTC; naive
        datetimes and time_structs are taken as UTC already.
    """
    if isinstance(value, datetime.datetime):
        if value.tzinfo is not None:
            value = to_utc(value)
        value = value.timetuple()
    if value is None:
        value = time.gmtime()
    if isinstance(value, time.struct_time):
        return time.strftime(PLATFORM_FORMAT, value)
    raise TypeError("value must be a time_struct, datetime, or None. A %s "
                    "was passed." % type(value))


def from_platform_string(text):
    """Convert a platform date or date/time string to a naive UTC datetime.

    A trailing ` UTC` marker is accepted.
    """
    stripped = (text or '').strip()
    if stripped.endswith(' UTC'):
        stripped = stripped[:-4].rstrip()
    for fmt in (PLATFORM_FORMAT, PLATFORM_DATE_FORMAT):
        try:
            return datetime.datetime.strptime(stripped, fmt)
        except ValueError:
            continue
    raise InvalidArgument("Invalid parameter: %r is not a platform date "
                          "or date/time string" % text,
                          argument='text', value=text)
