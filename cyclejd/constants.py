#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Created on Mon Mar 10 20:14:02 2025

Constants for day counting in the proleptic Gregorian calendar.
"""

from numpy import array, int64

# tables for the compiled kernels, index = month - 1
MONTH_LEN   = array([31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31],
                    dtype=int64)
DAYS_BEFORE = array([0, 31, 59, 90, 120, 151, 181, 212, 243, 273, 304, 334],
                    dtype=int64)   # Explanatory Supplement 1961, p. 434

SHORT_YR    = 365
LONG_YR     = 366
CYCLE_YEARS = 400
CYCLE_DAYS  = SHORT_YR * CYCLE_YEARS + CYCLE_YEARS // 4 \
              - CYCLE_YEARS // 100 + CYCLE_YEARS // 400    # 146097

JAN0_YEAR0  = 1721058.5        # January 0.0 of year 0 = December 31.0, -1
JDN_YEAR0   = 1721060          # JD number (noon) of January 1, year 0

DJMAX       = 1e9              # largest JD accepted by the reverse conversion
DBL_EPSILON = 2.220446049250313e-16

# day and year counts must fit in 64 bit integers
DJLIM       = 2.0**62          # |dj1|, |dj2| accepted by the reverse conversion
YEAR_MAX    = 10**16           # |year| accepted by the forward conversion

MJD0        = 2400000.5        # For computing Modified Julian days

# legacy (SOFA) algorithm limits
IYMIN       = -4799            # earliest year, -4799 January 1
DJMIN       = -68569.5         # earliest JD, -4900 March 1
