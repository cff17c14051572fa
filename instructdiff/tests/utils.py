# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import copy

from instructdiff import diff
from instructdiff.diff_format import is_valid_diff


def check_no_diff(a):
    "Check that a compares equal to itself and to a deep copy of itself."
    assert diff(a, a) == {}
    assert diff(a, copy.deepcopy(a)) == {}


def check_diff_detected(a, b):
    "Check that diff(a, b) is a valid, non-empty diff."
    d = diff(a, b)
    assert is_valid_diff(d)
    assert d
    return d


def check_symmetric_diff_detected(a, b):
    "Check that a difference between a and b is detected in both directions."
    check_diff_detected(a, b)
    check_diff_detected(b, a)
