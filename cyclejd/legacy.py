#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Created on Sat Mar 15 11:20:48 2025

The SOFA algorithms iauCal2jd and iauJd2cal (Gregorian calendar).

These closed form algorithms fail for dates before -4799 January 1 and for
julian dates before -68569.5 (-4900 March 1). They are kept as a reference
to test the cycle counting algorithms in dtmath against, inside the range
where both are valid.
"""

from cyclejd.constants import MONTH_LEN, MJD0, IYMIN, DJMIN, DJMAX
from cyclejd.ksum import split_jd


def iau_cal2jd(iy, im, id):
    """
    Gregorian calendar to julian date (SOFA iauCal2jd).

    Parameters
    ----------
    iy : int
        Year, -4799 or later.
    im : int
        Month (1-12).
    id : int
        Day.

    Returns
    -------
    djm0 : float
        MJD zero-point, always 2400000.5. None for status -1 and -2.
    djm : float
        Modified julian date at 0h. None for status -1 and -2.
    status : int
         0 = OK
        -1 = bad year (the date is not computed)
        -2 = bad month (the date is not computed)
        -3 = bad day (the date is computed)
    """
    if iy < IYMIN:
        return None, None, -1
    if im < 1 or im > 12:
        return None, None, -2

    # if February in a leap year, 1, otherwise 0
    ly = int(im == 2 and iy % 4 == 0 and (iy % 100 != 0 or iy % 400 == 0))
    j = 0
    if id < 1 or id > MONTH_LEN[im - 1] + ly:
        j = -3

    # all integer divisions below have non-negative operands
    my = -1 if im <= 2 else 0
    iypmy = iy + my
    djm = ((1461 * (iypmy + 4800)) // 4
           + (367 * (im - 2 - 12 * my)) // 12
           - (3 * ((iypmy + 4900) // 100)) // 4
           + id - 2432076)
    return MJD0, float(djm), j


def iau_jd2cal(dj1, dj2):
    """
    Julian date to Gregorian year, month, day and fraction of a day
    (SOFA iauJd2cal).

    Parameters
    ----------
    dj1 : float

    dj2 : float
        dj1 + dj2 is the julian date, -68569.5 <= dj1 + dj2 <= 1e9.

    Returns
    -------
    iy : int

    im : int

    id : int

    fd : float
        Fraction of the day.
    status : int
         0 = OK
        -1 = unacceptable date, all other values are None
    """
    dj = dj1 + dj2
    if dj < DJMIN or dj > DJMAX:
        return None, None, None, None, -1

    jd, f = split_jd(dj1, dj2)
    l = jd + 68569
    n = (4 * l) // 146097
    l -= (146097 * n + 3) // 4
    i = (4000 * (l + 1)) // 1461001
    l -= (1461 * i) // 4 - 31
    k = (80 * l) // 2447
    iday = l - (2447 * k) // 80
    l = k // 11
    imonth = k + 2 - 12 * l
    iyear = 100 * (n - 49) + i + l
    return int(iyear), int(imonth), int(iday), float(f), 0
