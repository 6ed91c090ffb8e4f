#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Created on Sun Mar 09 16:02:41 2025

Conditional numba compilation.

cnjit is used like numba.jit. Whether the kernels are compiled is set in
cnumba.ini, next to this file. With jit = no the decorated functions are
returned unchanged and run as plain Python.
"""

import os
from configparser import ConfigParser
import numba


path, ext = os.path.splitext(__file__)
config_filename = f"{path}.ini"
config = ConfigParser()
config.read(config_filename)

numba_acc   = config.getboolean("Numba", "jit", fallback=True)
numba_cache = config.getboolean("Numba", "cache", fallback=False)


def cnjit(signature_or_function=None, **kwargs):
    """
    Compile a function in nopython mode if numba acceleration is enabled.

    Parameters
    ----------
    signature_or_function : str, callable or None
        A numba signature, or the function when used as a bare decorator.
    **kwargs :
        Passed on to numba.jit.

    Returns
    -------
    callable
        A numba dispatcher, a decorator or the undecorated function.
    """
    if not numba_acc:
        if callable(signature_or_function):
            return signature_or_function
        return lambda func: func
    kwargs.setdefault("nopython", True)
    kwargs.setdefault("cache", numba_cache)
    return numba.jit(signature_or_function, **kwargs)
