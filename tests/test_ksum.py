#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Created on Wed Mar 12 21:10:44 2025
"""


from cyclejd.ksum import *


def test_dnint():
    assert(dnint(0.0) == 0.0)
    assert(dnint(0.49) == 0.0)
    assert(dnint(-0.49) == 0.0)
    assert(dnint(0.5) == 1.0)
    assert(dnint(-0.5) == -1.0)
    assert(dnint(2.5) == 3.0)
    assert(dnint(-2.5) == -3.0)
    assert(dnint(2460310.5) == 2460311.0)
    assert(dnint(-31738.4) == -31738.0)

def test_two_sum():
    t, err = two_sum(1.0, 1e-17)
    assert(t == 1.0)
    assert(err == 1e-17)
    t, err = two_sum(1e-17, 1.0)
    assert(t == 1.0)
    assert(err == 1e-17)
    t, err = two_sum(0.5, 0.25)
    assert(t == 0.75)
    assert(err == 0.0)

def test_split_jd():
    assert(split_jd(2460310.5, 0.0) == (2460311, 0.0))
    assert(split_jd(0.0, 2460310.5) == (2460311, 0.0))
    assert(split_jd(0.0, 0.0) == (0, 0.5))
    assert(split_jd(-0.5, 0.0) == (0, 0.0))
    assert(split_jd(-1.0, 0.0) == (-1, 0.5))
    assert(split_jd(2400000.5, 52791.0) == (2452792, 0.0))

def test_split_jd_resplit():
    ref = split_jd(2460310.75, 0.0)
    assert(ref == (2460311, 0.25))
    assert(split_jd(2460310.5, 0.25) == ref)
    assert(split_jd(0.25, 2460310.5) == ref)
    assert(split_jd(2460311.0, -0.25) == ref)
    assert(split_jd(1000000.25, 1460310.5) == ref)

def test_split_jd_fraction():
    jdn, f = split_jd(2400000.5, 50123.9999)
    assert(jdn == 2450124)
    assert(abs(f - 0.9999) < 1e-9)
    jdn, f = split_jd(-1000000.5, -0.25)
    assert(jdn == -1000001)
    assert(f == 0.75)

def test_split_jd_precision():
    # the fraction keeps bits that are lost in 2451545.0 + 1e-9
    jdn, f = split_jd(2451545.0, 1e-9)
    assert(jdn == 2451545)
    assert(abs(f - 0.500000001) < 1e-15)
    naive = (2451545.0 + 1e-9) - 2451544.5
    assert(abs(naive - 0.500000001) > 1e-12)

def test_split_jd_range():
    for f1 in (-0.75, -0.5, -0.25, 0.0, 0.25, 0.5, 0.75):
        for f2 in (-0.5, 0.0, 0.5):
            jdn, f = split_jd(100.0 + f1, f2)
            assert(0.0 <= f < 1.0)
            assert(jdn - 0.5 + f == 100.0 + f1 + f2)
