#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Created on Wed Mar 12 19:48:26 2025

Compensated summation for two part Julian dates.

A julian date near 2.5e6 leaves only about 30 bits for the day fraction.
When a date is given as two doubles (for instance 2400000.5 + 50123.9999)
adding the parts directly rounds away the low order bits of the fraction.
Here each part is split into a whole number and a fraction first and the
fractions are added with compensated summation (Klein 2006), the way SOFA
does it in iauJd2cal.
"""

from math import fabs, floor, ceil
from cyclejd.constants import DBL_EPSILON
from cyclejd.cnumba import cnjit


@cnjit
def dnint(x):
    """
    Nearest whole number, halves are rounded away from zero.

    Parameters
    ----------
    x : float

    Returns
    -------
    float
    """
    if fabs(x) < 0.5:
        return 0.0
    if x < 0.0:
        return float(ceil(x - 0.5))
    return float(floor(x + 0.5))


@cnjit
def two_sum(s, x):
    """
    Compensated addition.

    Parameters
    ----------
    s : float
        Running sum.
    x : float
        Term to add.

    Returns
    -------
    t : float
        s + x, rounded.
    err : float
        The rounding error of t. (s + x) == t + err exactly.
    """
    t = s + x
    if fabs(s) >= fabs(x):
        err = (s - t) + x
    else:
        err = (x - t) + s
    return t, err


@cnjit
def split_jd(dj1, dj2):
    """
    Separate a two part julian date into a day number and a day fraction.

    Parameters
    ----------
    dj1 : float
        First part of the julian date.
    dj2 : float
        Second part. dj1 + dj2 is the julian date, it does not matter how
        the date is divided over the two parts. The compiled version
        needs |dj1| and |dj2| below DJLIM.

    Returns
    -------
    jdn : int
        Julian day number, the noon of the day that contains the date.
    f : float
        Fraction of the day, counted from midnight. 0 <= f < 1.
    """
    # whole days and fractions (where -0.5 <= fraction <= 0.5)
    d = dnint(dj1)
    f1 = dj1 - d
    jdn = int(d)
    d = dnint(dj2)
    f2 = dj2 - d
    jdn += int(d)

    # f1 + f2 + 0.5 with a correction term carried along
    s = 0.5
    cs = 0.0
    for x in (f1, f2):
        s, err = two_sum(s, x)
        cs += err
        if s >= 1.0:
            jdn += 1
            s -= 1.0
    f = s + cs
    cs = f - s

    # negative f, |s| <= 1
    if f < 0.0:
        f = s + 1.0
        cs += (1.0 - f) + s
        s = f
        f = s + cs
        cs = f - s
        jdn -= 1

    # f is 1.0 or more when rounded to double
    if (f - 1.0) >= -DBL_EPSILON / 4.0:
        t = s - 1.0
        cs += (s - t) - 1.0
        s = t
        f = s + cs
        if -DBL_EPSILON / 2.0 < f:
            jdn += 1
            f = max(f, 0.0)
    return jdn, f
