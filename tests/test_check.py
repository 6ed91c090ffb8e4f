#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Created on Sun Mar 16 16:48:12 2025
"""

from cyclejd.check import *
from cyclejd.legacy import iau_cal2jd, iau_jd2cal


def test_run_checks():
    report = run_checks()
    assert(report.failed == 0)
    assert(report.failures == [])
    assert(report.passed == 2 * len(REFERENCE_CASES) + 2 * 8036)

def test_run_checks_loop():
    c2j = lambda y, m, d: cal2jd(y, m, d, strategy="loop")
    j2c = lambda dj1, dj2: jd2cal(dj1, dj2, strategy="loop")
    assert(run_checks(c2j, j2c).failed == 0)

def test_run_checks_legacy():
    report = run_checks(iau_cal2jd, iau_jd2cal, "SOFA")
    assert(report.failed == 0)

def test_failures_are_reported():
    broken = lambda y, m, d: (0.0, 0.0, 0)
    report = run_checks(broken, jd2cal, cases=REFERENCE_CASES[:3],
                        entire_years=False)
    assert(report.passed == 3)
    assert(report.failed == 3)
    assert(all(f.direction == "date->jd" for f in report.failures))

def test_status_is_a_failure():
    outcome = check_date_to_jd(Case(-4800, 1, 1, 0.0, -32104.5, 0.0),
                               iau_cal2jd, "SOFA")
    assert(outcome.ok is False)
    assert(outcome.result == -1)
    outcome = check_date_to_jd(Case(-4800, 1, 1, 0.0, -32104.5, 0.0), cal2jd)
    assert(outcome.ok is True)

def test_check_entire_year():
    outcomes = check_entire_year(2024, 2460310.5 - 1)
    assert(len(outcomes) == 2 * 366)
    assert(all(outcome.ok for outcome in outcomes))
    outcomes = check_entire_year(2023, 2460310.5 - 1)
    assert(not any(outcome.ok for outcome in outcomes))

def test_merge():
    a = CheckReport(3, 1, ["x"])
    b = CheckReport(2, 0, [])
    assert(merge(a, b) == CheckReport(5, 1, ["x"]))

def test_main(capsys):
    assert(main() == 0)
    out = capsys.readouterr().out
    assert("Num failed tests: 0" in out)
