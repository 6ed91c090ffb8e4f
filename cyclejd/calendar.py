#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Created on Mon Mar 10 21:37:55 2025

Proleptic Gregorian calendar rules and the 400 year cycle.

The year before +1 is the year 0 (as is usually done in astronomy) and
there is no smallest or largest year: the leap year rule is applied to all
integer years. Day counts are taken relative to January 1.0 of the year 0
(JD 1721059.5). Every 400 years the calendar repeats itself after
CYCLE_DAYS = 146097 days.
"""

from collections import namedtuple
from enum import IntEnum
from operator import index as _index
from cyclejd.constants import (MONTH_LEN, DAYS_BEFORE, SHORT_YR, LONG_YR,
                               YEAR_MAX)
from cyclejd.cnumba import cnjit


CalendarDate = namedtuple("CalendarDate", ["year", "month", "day", "fraction"])


class JulianDate(namedtuple("JulianDate", ["epoch_day", "remainder"])):
    """
    A Julian date as two parts. Either part may hold the whole date.
    """
    __slots__ = ()

    @property
    def jd(self):
        return self.epoch_day + self.remainder


class Status(IntEnum):
    OK = 0
    OUT_OF_RANGE = -1
    INVALID_MONTH = -2
    INVALID_DAY = -3


@cnjit(signature_or_function='boolean(i8)')
def is_leapyear(year:int) -> bool:
    """
    Check if a given year is a leap year in the (proleptic)
    Gregorian calendar.

    Parameters
    ----------
    year : int
        Any year, 0 and negative years included.

    Returns
    -------
    Boolean
        True if year is a leap year
    """
    if year % 4 == 0:               # possibly leap
        if year % 400 == 0:         # leap
            leapyear = True
        else:
            if year % 100 == 0:     # common
                leapyear = False
            else:                   # leap
                leapyear = True
    else:
        leapyear = False
    return leapyear


@cnjit(signature_or_function='i8(i8)')
def year_len(year:int) -> int:
    if is_leapyear(year):
        return LONG_YR
    return SHORT_YR


@cnjit(signature_or_function='i8(i8, i8)')
def month_len(year:int, month:int) -> int:
    """
    The length of a month in days.

    Parameters
    ----------
    year : int

    month : int
        Month (1-12).

    Returns
    -------
    int
        28, 29, 30 or 31.
    """
    length = MONTH_LEN[month - 1]
    if month == 2 and is_leapyear(year):
        length += 1
    return length


@cnjit
def days_from_jan0(year, month, day):
    """
    Number of days from January 0.0 (December 31.0 of the previous year)
    to the given date.
    """
    days = DAYS_BEFORE[month - 1] + day
    if month > 2 and is_leapyear(year):
        days += 1
    return days


@cnjit
def days_from_dec32(year, month, day):
    """
    Number of days from the given date to December 32.0 (January 1.0 of
    the next year), counting backwards in time.
    """
    return year_len(year) - days_from_jan0(year, month, day) + 1


@cnjit
def _tdiv(a, b):
    # integer division rounding towards 0, b > 0
    q = abs(a) // b
    if a < 0:
        return -q
    return q


@cnjit
def leap_years_before(year:int) -> int:
    """
    Signed number of leap years between the year 0 and year.

    For positive years this is the number of leap years in [0, year), for
    negative years minus the number of leap years in [year, 0). The count
    uses y/4 - y/100 + y/400 with division towards 0 (O'Leary). For
    positive years it is applied to year - 1 and the year 0, which is a
    leap year, is added.

    Parameters
    ----------
    year : int

    Returns
    -------
    int
        Number of leap years.
    """
    y = year - 1 if year >= 0 else year
    n = _tdiv(y, 4) - _tdiv(y, 100) + _tdiv(y, 400)
    if year > 0:
        n += 1
    return n


@cnjit
def days_before_year(year:int) -> int:
    """
    Days from January 1.0 of the year 0 to January 1.0 of year.
    Negative for negative years.
    """
    return SHORT_YR * year + leap_years_before(year)


@cnjit
def days_in_complete_years(start_year, end_year):
    """
    Number of days in the years start_year until end_year.

    Includes the start year, but excludes the end year. Returns 0 if the
    start and end are the same year. The count is closed form, there is no
    loop over the years.

    Parameters
    ----------
    start_year : int

    end_year : int
        end_year >= start_year.

    Returns
    -------
    int
        Number of days.
    """
    return days_before_year(end_year) - days_before_year(start_year)


@cnjit
def days_in_complete_years_loop(start_year, end_year):
    # reference version of days_in_complete_years, one year at a time
    days = 0
    for year in range(start_year, end_year):
        days += year_len(year)
    return days


def validate(year:int, month:int, day:int) -> Status:
    """
    Check a date in the proleptic Gregorian calendar.

    Any integer year is valid, as long as the day count fits in a 64 bit
    integer: |year| <= YEAR_MAX.

    Parameters
    ----------
    year : int

    month : int

    day : int


    Raises
    ------
    TypeError
        An argument is not an integer.

    Returns
    -------
    Status
        Status.OK, Status.OUT_OF_RANGE, Status.INVALID_MONTH or
        Status.INVALID_DAY, checked in that order.
    """
    year = _index(year)
    month = _index(month)
    day = _index(day)
    if abs(year) > YEAR_MAX:
        return Status.OUT_OF_RANGE
    if not 1 <= month <= 12:
        return Status.INVALID_MONTH
    if not 1 <= day <= month_len(year, month):
        return Status.INVALID_DAY
    return Status.OK
