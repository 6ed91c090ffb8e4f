#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Created on Sun Mar 09 16:27:27 2025
"""


def test_numba_installed():
    import numba

def test_cnumba():
    import cyclejd.cnumba

def test_acc():
    import cyclejd.cnumba
    assert(cyclejd.cnumba.numba_acc)

def test_compiled():
    from numba.core.registry import CPUDispatcher
    from cyclejd.dtmath import cal2jd_cycles, jd2cal_days
    from cyclejd.ksum import split_jd
    for func in (cal2jd_cycles, jd2cal_days, split_jd):
        assert(isinstance(func, CPUDispatcher))

def test_cnjit_disabled(monkeypatch):
    import cyclejd.cnumba
    monkeypatch.setattr(cyclejd.cnumba, "numba_acc", False)

    def f(x):
        return x + 1

    assert(cyclejd.cnumba.cnjit(f) is f)
    assert(cyclejd.cnumba.cnjit(signature_or_function='i8(i8)')(f) is f)
