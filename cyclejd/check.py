#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Created on Sun Mar 16 15:31:09 2025

Cross validation of calendar <-> julian date conversions.

Published dates and their julian dates are converted in both directions.
The checks run for any pair of functions with the call signatures of
cal2jd / jd2cal, so both the cycle counting algorithms in dtmath and the
SOFA algorithms in legacy can be checked against the same cases.

    python -m cyclejd.check
"""

from collections import namedtuple
from cyclejd.constants import JAN0_YEAR0, SHORT_YR, LONG_YR
from cyclejd.calendar import month_len
from cyclejd.dtmath import cal2jd, jd2cal
from cyclejd.legacy import iau_cal2jd, iau_jd2cal


FLT_EPSILON = 1.1920928955078125e-07

Case = namedtuple("Case", ["year", "month", "day", "fraction", "jd1", "jd2"])
Outcome = namedtuple("Outcome", ["source", "direction", "expected", "result",
                                 "ok"])
CheckReport = namedtuple("CheckReport", ["passed", "failed", "failures"])

REFERENCE_CASES = (
    # SOFA test suite, t_sofa_c.c
    Case(2003, 6, 1, 0.0, 2400000.5, 52791.0),
    Case(1996, 2, 11, 0.0, 2400000.5, 50124.0),
    # Explanatory Supplement 1961, p. 437
    Case(1500, 1, 1, 0.0, 2268923.5, 0.0),
    Case(1600, 1, 1, 0.0, 2305447.5, 0.0),
    Case(1700, 1, 1, 0.0, 2341972.5, 0.0),
    Case(1800, 1, 1, 0.0, 2378496.5, 0.0),
    Case(1900, 1, 1, 0.0, 2415020.5, 0.0),
    Case(1500, 3, 1, 0.0, 2268923.5 + 59, 0.0),
    Case(1600, 3, 1, 0.0, 2305447.5 + 60, 0.0),   # 1600 is a leap year
    Case(1700, 3, 1, 0.0, 2341972.5 + 59, 0.0),
    Case(1800, 3, 1, 0.0, 2378496.5 + 59, 0.0),
    Case(1900, 3, 1, 0.0, 2415020.5 + 59, 0.0),
    # Guide de Donnees Astronomiques 2017, Bureau des longitudes, p. 8
    Case(1950, 1, 1, 0.5, 2433283.0, 0.0),
    Case(2000, 1, 1, 0.5, 2451545.0, 0.0),
    Case(2050, 1, 1, 0.5, 2469808.0, 0.0),
    Case(2090, 1, 1, 0.5, 2484418.0, 0.0),
    # Vondrak, Wallace, Capitaine 2011: -1374 May 3, 13:52:19.2 TT
    Case(-1374, 5, 3, 0.578, 1219339.078, 0.0),
    # Observer's Handbook, RASC, 2024, p. 47
    Case(2024, 1, 1, 0.0, 2460310.5, 0.0),
    Case(2024, 3, 1, 0.0, 2460370.5, 0.0),
    # Astronomical Algorithms, Meeus 1991, p. 61
    Case(1957, 10, 4, 0.81, 2436116.31, 0.0),
    Case(1987, 6, 19, 0.5, 2446966.0, 0.0),
    # legacy-www.math.harvard.edu/computing/javascript/Calendar
    Case(-8, 1, 1, 0.5, 1718138.0, 0.0),
    Case(-101, 1, 1, 0.5, 1684171.0, 0.0),
    Case(-799, 1, 1, 0.5, 1429232.0, 0.0),
    Case(-800, 1, 1, 0.5, 1428866.0, 0.0),
    Case(-801, 1, 1, 0.5, 1428501.0, 0.0),
    Case(99, 12, 31, 0.5, 1757584.0, 0.0),
    Case(100, 1, 1, 0.5, 1757585.0, 0.0),
    Case(100, 1, 31, 0.5, 1757615.0, 0.0),
    Case(100, 2, 1, 0.5, 1757616.0, 0.0),
    Case(100, 2, 28, 0.5, 1757643.0, 0.0),        # 100 is not a leap year
    Case(100, 3, 1, 0.5, 1757644.0, 0.0),
    Case(101, 1, 1, 0.5, 1757950.0, 0.0),
    Case(200, 1, 1, 0.5, 1794109.0, 0.0),
    Case(300, 1, 1, 0.5, 1830633.0, 0.0),
    Case(400, 1, 1, 0.5, 1867157.0, 0.0),
    Case(700, 1, 1, 0.5, 1976730.0, 0.0),
    Case(800, 1, 1, 0.5, 2013254.0, 0.0),
    Case(3000, 1, 1, 0.5, 2816788.0, 0.0),
    Case(30000, 1, 1, 0.5, 12678335.0, 0.0),
    # origin of the julian date, -4712-01-01 12h in the Julian calendar
    Case(-4713, 11, 24, 0.5, 0.0, 0.0),
    # first date supported by the SOFA algorithm
    Case(-4799, 1, 1, 0.0, -31738.5, 0.0),
)

# January 0.0 of the years near 0, counted by hand: (year, leap, common)
SMALL_YEARS = ((-9, -2, -7), (-8, -2, -6), (-7, -1, -6), (-6, -1, -5),
               (-5, -1, -4), (-4, -1, -3), (-3, 0, -3), (-2, 0, -2),
               (-1, 0, -1), (0, 0, 0), (1, 1, 0), (2, 1, 1), (3, 1, 2),
               (4, 1, 3), (5, 2, 3), (6, 2, 4), (7, 2, 5), (8, 2, 6),
               (9, 3, 6), (10, 3, 7), (11, 3, 8), (12, 3, 9))


def check_date_to_jd(case, cal2jd_func, source="ALT"):
    """
    Convert the date of case to a julian date and compare.

    There is no day fraction argument, it is added to the result.
    """
    expected = case.jd1 + case.jd2
    djm0, djm, status = cal2jd_func(case.year, case.month, case.day)
    if status != 0 or djm0 is None:
        return Outcome(source, "date->jd", expected, status, False)
    result = djm0 + djm + case.fraction
    return Outcome(source, "date->jd", expected, result, expected == result)


def check_jd_to_date(case, jd2cal_func, source="ALT"):
    """
    Convert the julian date of case to a date and compare.

    The day fraction must agree to single precision.
    """
    expected = (case.year, case.month, case.day, case.fraction)
    y, m, d, fd, status = jd2cal_func(case.jd1, case.jd2)
    if status != 0:
        return Outcome(source, "jd->date", expected, status, False)
    result = (y, m, d, fd)
    ok = (y, m, d) == expected[:3] and abs(fd - case.fraction) < FLT_EPSILON
    return Outcome(source, "jd->date", expected, result, ok)


def check_both_directions(case, cal2jd_func=cal2jd, jd2cal_func=jd2cal,
                          source="ALT"):
    return [check_jd_to_date(case, jd2cal_func, source),
            check_date_to_jd(case, cal2jd_func, source)]


def check_entire_year(year, jd_jan0, cal2jd_func=cal2jd, jd2cal_func=jd2cal,
                      source="ALT"):
    """
    Check every day of a year in both directions.

    Parameters
    ----------
    year : int

    jd_jan0 : float
        Julian date of January 0.0 of year.

    Returns
    -------
    list of Outcome
    """
    outcomes = []
    day_num = 0
    for month in range(1, 13):
        for day in range(1, month_len(year, month) + 1):
            day_num += 1
            case = Case(year, month, day, 0.0, jd_jan0 + day_num, 0.0)
            outcomes.extend(check_both_directions(case, cal2jd_func,
                                                  jd2cal_func, source))
    return outcomes


def small_years():
    for year, n_leap, n_common in SMALL_YEARS:
        yield year, JAN0_YEAR0 + n_leap * LONG_YR + n_common * SHORT_YR


def run_checks(cal2jd_func=cal2jd, jd2cal_func=jd2cal, source="ALT",
               cases=REFERENCE_CASES, entire_years=True):
    """
    Run the reference cases, and optionally every day of the years near 0.

    Parameters
    ----------
    cal2jd_func : callable
        (year, month, day) -> (djm0, djm, status)
    jd2cal_func : callable
        (dj1, dj2) -> (year, month, day, fraction, status)
    source : str
        Label of the algorithm in the outcomes.
    cases : sequence of Case

    entire_years : bool
        Also check every day of the years -9 .. 12.

    Returns
    -------
    CheckReport
        Number of passed and failed checks, and the failed outcomes.
    """
    outcomes = []
    for case in cases:
        outcomes.extend(check_both_directions(case, cal2jd_func, jd2cal_func,
                                              source))
    if entire_years:
        for year, jd_jan0 in small_years():
            outcomes.extend(check_entire_year(year, jd_jan0, cal2jd_func,
                                              jd2cal_func, source))
    failures = [outcome for outcome in outcomes if not outcome.ok]
    return CheckReport(len(outcomes) - len(failures), len(failures), failures)


def merge(*reports):
    """
    Add up check reports.
    """
    passed = sum(report.passed for report in reports)
    failed = sum(report.failed for report in reports)
    failures = [f for report in reports for f in report.failures]
    return CheckReport(passed, failed, failures)


def main():
    reports = []
    for source, c2j, j2c in (("SOFA", iau_cal2jd, iau_jd2cal),
                             ("ALT ", cal2jd, jd2cal)):
        report = run_checks(c2j, j2c, source)
        print(f"{source} passed: {report.passed} failed: {report.failed}")
        for outcome in report.failures:
            print(f"{outcome.source}  X {outcome.direction} "
                  f"Expected: {outcome.expected} Result: {outcome.result}")
        reports.append(report)
    total = merge(*reports)
    print(f"\nNum failed tests: {total.failed}")
    print(f"Num successful tests: {total.passed}")
    return total.failed


if __name__ == "__main__":
    raise SystemExit(main())
