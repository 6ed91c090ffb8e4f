#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Created on Thu Mar 13 20:05:12 2025

Conversion between dates in the proleptic Gregorian calendar and julian
dates, without a restriction on the year or on the julian date.

The closed form algorithms of Meeus and SOFA (iauCal2jd, iauJd2cal) are
valid from -4799 January 1, and from JD -68569.5 in reverse. Modern
precession and nutation models and Gaia astrometry give meaningful star
positions over much longer time spans, so here the calendar cycles are
counted instead, largest cycles first:
    - 400 year cycles of 146097 days, starting at N*400 January 1.0,
    - whole years within the cycle,
    - whole months within the year,
    - days.

The 400 year cycle is not symmetric around the year 0 under truncating
integer division, so the positive and negative years are handled
separately. Positive years are counted forward from January 0.0 of the
year 0 (JD 1721058.5), negative years backwards from December 32.0.

The year before +1 is the year 0 (as is usually done in astronomy).
"""

from math import isfinite
from collections import namedtuple
from operator import index as _index
from cyclejd.constants import (CYCLE_YEARS, CYCLE_DAYS, JAN0_YEAR0,
                               JDN_YEAR0, LONG_YR, DJMAX, DJLIM, MJD0)
from cyclejd.calendar import (CalendarDate, JulianDate, Status, year_len,
                              month_len, days_from_jan0, days_from_dec32,
                              _tdiv, leap_years_before,
                              days_in_complete_years,
                              days_in_complete_years_loop, validate)
from cyclejd.ksum import split_jd
from cyclejd.cnumba import cnjit


class Cal2jdResult(namedtuple("Cal2jdResult",
                              ["epoch_day", "remainder", "status"])):
    __slots__ = ()

    @property
    def julian_date(self):
        if self.epoch_day is None:
            return None
        return JulianDate(self.epoch_day, self.remainder)


class Jd2calResult(namedtuple("Jd2calResult",
                              ["year", "month", "day", "fraction", "status"])):
    __slots__ = ()

    @property
    def date(self):
        if self.year is None:
            return None
        return CalendarDate(self.year, self.month, self.day, self.fraction)


# =============================================================================
# calendar date -> julian date
# =============================================================================

@cnjit
def _cal2jd_nonneg(year, month, day, loop):
    # 1. full cycles
    num_cycles = year // CYCLE_YEARS
    full_cycles = num_cycles * CYCLE_DAYS
    # 2. whole years left after the full cycles
    if loop:
        remainder_years = days_in_complete_years_loop(
            num_cycles * CYCLE_YEARS, year)
    else:
        remainder_years = days_in_complete_years(
            num_cycles * CYCLE_YEARS, year)
    # 3. days in the final year
    remainder_days = days_from_jan0(year, month, day)
    return JAN0_YEAR0 + (full_cycles + remainder_years + remainder_days)


@cnjit
def _cal2jd_neg(year, month, day, loop):
    # counting backwards, the cycles are aligned to year + 1
    y_biased = year + 1
    # 1. full cycles
    num_cycles = _tdiv(y_biased, CYCLE_YEARS)
    full_cycles = abs(num_cycles * CYCLE_DAYS)
    # 2. whole years left after the full cycles
    if loop:
        remainder_years = days_in_complete_years_loop(
            y_biased, num_cycles * CYCLE_YEARS)
    else:
        remainder_years = days_in_complete_years(
            y_biased, num_cycles * CYCLE_YEARS)
    # 3. days until the end of the final year
    remainder_days = days_from_dec32(year, month, day)
    # January 0.0 of the year 0 is one day into the negative years
    overhang = 1
    total = full_cycles + remainder_years + remainder_days
    return JAN0_YEAR0 + (overhang - total)


@cnjit
def cal2jd_cycles(year, month, day):
    """
    Julian date at 0h of a date in the proleptic Gregorian calendar.

    Counts 400 year cycles, then whole years, months and days. Any year
    with |year| <= YEAR_MAX can be used. Assumes that month is valid.

    Parameters
    ----------
    year : int

    month : int
        Month (1-12).
    day : int
        Day of the month.

    Returns
    -------
    float
        The julian date.
    """
    if year >= 0:
        return _cal2jd_nonneg(year, month, day, False)
    return _cal2jd_neg(year, month, day, False)


@cnjit
def cal2jd_loop(year, month, day):
    # as cal2jd_cycles, whole years in the last cycle added one at a time
    if year >= 0:
        return _cal2jd_nonneg(year, month, day, True)
    return _cal2jd_neg(year, month, day, True)


@cnjit
def cal2jd_leapcount(year, month, day):
    """
    Julian date at 0h of a date in the proleptic Gregorian calendar.

    Counts the leap years since the year 0 directly (O'Leary), without
    splitting off the 400 year cycles.
    """
    num_366yrs = leap_years_before(year)
    num_365yrs = year - num_366yrs
    days = num_365yrs * 365 + num_366yrs * 366
    days += days_from_jan0(year, month, day)
    return JAN0_YEAR0 + days


# =============================================================================
# julian date -> calendar date
# =============================================================================

@cnjit
def _jd2cal_nonneg(n, coarse):
    """
    Date of day n >= 0, counted from January 1 of the year 0.

    A cursor starts at the January 1 preceding n that begins a 400 year
    cycle and is moved forward to n: whole years, then months.
    """
    num_cycles = n // CYCLE_DAYS            # rounds towards -infinity
    year = num_cycles * CYCLE_YEARS
    cursor = num_cycles * CYCLE_DAYS        # January 1.0 of year

    # at least this many whole years, this leaves at most 2 loop iterations
    if coarse:
        more_years = (n - cursor) // LONG_YR - 1
        if more_years > 0:
            cursor += days_in_complete_years(year, year + more_years)
            year += more_years

    for i in range(CYCLE_YEARS):
        length = year_len(year)
        if cursor + length <= n:
            cursor += length                # January 1.0 of the next year
            year += 1
        else:
            break

    month = 1
    while month < 12:
        length = month_len(year, month)
        if cursor + length <= n:
            cursor += length                # 1st of the next month
            month += 1
        else:
            break
    day = n - cursor + 1
    return year, month, day


@cnjit
def _jd2cal_neg(n, coarse):
    """
    Date of day n < 0, counted from January 1 of the year 0.

    A cursor starts at the January 1 following n that begins a 400 year
    cycle and is moved backwards to n: whole years, then months from
    December.
    """
    num_cycles = n // CYCLE_DAYS + 1
    year = num_cycles * CYCLE_YEARS - 1
    cursor = num_cycles * CYCLE_DAYS        # December 32.0 of year

    if coarse:
        fewer_years = (cursor - n) // LONG_YR - 1
        if fewer_years > 0:
            cursor -= days_in_complete_years(year + 1 - fewer_years, year + 1)
            year -= fewer_years

    for i in range(CYCLE_YEARS):
        length = year_len(year)
        if cursor - length > n:
            cursor -= length                # December 32.0 of the year before
            year -= 1
        else:
            break

    month = 12
    while month > 1:
        length = month_len(year, month)
        if cursor - length > n:
            cursor -= length                # 32nd of the month before
            month -= 1
        else:
            break
    # count backwards from the end of the month
    day = month_len(year, month) + 1 + n - cursor
    return year, month, day


@cnjit
def jd2cal_days(jdn, coarse):
    """
    Date in the proleptic Gregorian calendar of a julian day number.

    Parameters
    ----------
    jdn : int
        Julian day number (the noon of the day).
    coarse : bool
        Estimate the number of whole years in the last cycle before
        stepping through them. False steps through all of them.

    Returns
    -------
    year : int

    month : int

    day : int
    """
    n = jdn - JDN_YEAR0
    if n >= 0:
        return _jd2cal_nonneg(n, coarse)
    return _jd2cal_neg(n, coarse)


# =============================================================================
# public interface
# =============================================================================

CAL2JD_STRATEGIES = {"cycles": cal2jd_cycles,
                     "loop": cal2jd_loop,
                     "leapcount": cal2jd_leapcount}

JD2CAL_STRATEGIES = {"cycles": True,       # coarse year estimate, then loop
                     "loop": False}


def cal2jd(year:int, month:int, day:int, strategy:str="cycles",
           strict:bool=False) -> Cal2jdResult:
    """
    Julian date of a date in the proleptic Gregorian calendar.

    There is no restriction on the year other than the 64 bit day count
    (|year| <= 10**16). The julian date is at 0h of the given day; add the
    day fraction to the result for other times.

    Parameters
    ----------
    year : int
        Year, 0 and negative years included.
    month : int
        Month (1-12).
    day : int
        Day of the month.
    strategy : str
        "cycles" (default), "loop" or "leapcount". All give the same
        result.
    strict : bool
        If True, an invalid day gives no julian date.

    Raises
    ------
    TypeError
        year, month or day is not an integer.
    ValueError
        Unknown strategy.

    Returns
    -------
    Cal2jdResult
        epoch_day : float
            The julian date, or None for a year out of range or an
            invalid month.
        remainder : float
            0.0
        status : Status
            Status.OK, Status.OUT_OF_RANGE, Status.INVALID_MONTH or
            Status.INVALID_DAY. An invalid day does not stop the
            computation unless strict is set. Check the status before
            using the julian date.
    """
    try:
        func = CAL2JD_STRATEGIES[strategy]
    except KeyError:
        raise ValueError(f"unknown strategy {strategy!r}") from None
    year = _index(year)
    month = _index(month)
    day = _index(day)
    status = validate(year, month, day)
    if status in (Status.OUT_OF_RANGE, Status.INVALID_MONTH):
        return Cal2jdResult(None, None, status)
    if strict and status != Status.OK:
        return Cal2jdResult(None, None, status)
    return Cal2jdResult(float(func(year, month, day)), 0.0, status)


def jd2cal(dj1:float, dj2:float=0.0, strategy:str="cycles") -> Jd2calResult:
    """
    Date in the proleptic Gregorian calendar of a julian date.

    There is no lower limit other than the 64 bit day count (each part
    above -2**62). The two parts of the julian date are combined
    with compensated summation, so the day fraction keeps its precision
    whatever the division over dj1 and dj2.

    Parameters
    ----------
    dj1 : float
        First part of the julian date.
    dj2 : float
        Second part of the julian date.
    strategy : str
        "cycles" (default) or "loop". Both give the same result.

    Raises
    ------
    ValueError
        Unknown strategy.

    Returns
    -------
    Jd2calResult
        year : int

        month : int

        day : int

        fraction : float
            Fraction of the day, 0 <= fraction < 1.
        status : Status
            Status.OK, or Status.OUT_OF_RANGE when dj1 + dj2 > 1e9, when
            it is not finite or when |dj1| or |dj2| reaches 2**62. All
            other fields are None in that case.
    """
    try:
        coarse = JD2CAL_STRATEGIES[strategy]
    except KeyError:
        raise ValueError(f"unknown strategy {strategy!r}") from None
    dj1 = float(dj1)
    dj2 = float(dj2)
    dj = dj1 + dj2
    if not isfinite(dj) or dj > DJMAX:
        return Jd2calResult(None, None, None, None, Status.OUT_OF_RANGE)
    if abs(dj1) >= DJLIM or abs(dj2) >= DJLIM:
        return Jd2calResult(None, None, None, None, Status.OUT_OF_RANGE)
    jdn, f = split_jd(dj1, dj2)
    year, month, day = jd2cal_days(jdn, coarse)
    return Jd2calResult(int(year), int(month), int(day), float(f), Status.OK)


calendar_to_julian_date = cal2jd
julian_date_to_calendar = jd2cal


def MJD(year:int, month:int, day:int) -> float:
    """
    Modified julian day of a date in the proleptic Gregorian calendar.

    Parameters
    ----------
    year : int

    month : int

    day : int


    Raises
    ------
    ValueError
        Not a valid date.

    Returns
    -------
    float
        Modified julian day for the given date.
    """
    epoch_day, remainder, status = cal2jd(year, month, day, strict=True)
    if status != Status.OK:
        raise ValueError(f"invalid date ({year}-{month}-{day})", status)
    return (epoch_day - MJD0) + remainder


def RMJD(mjd:float) -> CalendarDate:
    """
    Reverse modified julian day. Compute the date (year, month, day) and the
    day fraction of a modified julian day.

    Parameters
    ----------
    mjd : float
        Modified julian day.

    Returns
    -------
    CalendarDate
    """
    result = jd2cal(MJD0, mjd)
    if result.status != Status.OK:
        raise ValueError(f"modified julian day out of range ({mjd})")
    return result.date
