# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from ..diff_format import op_add, op_change, op_remove
from ..utils import json_type, json_equal, join_key_path, join_index_path

__all__ = ["diff"]


def merged_keys(a, b):
    """Iterate over the union of keys in dicts a and b.

    All keys of a come first in their stored order,
    followed by the keys only found in b in their stored order.
    """
    for key in a:
        yield key
    for key in b:
        if key not in a:
            yield key


def diff(a, b, path=""):
    """Compute the diff of two json-like values.

    Returns a dict mapping paths like 'steps[0].warnings[1]' to
    diff entries with the old and new values at that path.
    Equal inputs give an empty dict. The inputs are not modified.

    Keys are joined into paths verbatim, so a key containing a dot
    can produce the same path as a nested key, e.g. {"a.b": 1} and
    {"a": {"b": 1}}. Such entries collide and the one found last
    is kept.
    """
    d = {}
    _diff_into(d, a, b, path)
    return d


def _diff_into(d, a, b, path):
    if isinstance(a, list) and isinstance(b, list):
        diff_lists(d, a, b, path)
    elif isinstance(a, dict) and isinstance(b, dict):
        diff_dicts(d, a, b, path)
    elif not json_equal(a, b):
        d[path] = op_change(a, b)


def diff_lists(d, a, b, path=""):
    """Diff two lists into d.

    Lists of different length are reported as a single entry
    holding both complete lists, without aligning the items.
    """
    if len(a) != len(b):
        d[path] = op_change(a, b)
        return
    for i, (aval, bval) in enumerate(zip(a, b)):
        _diff_into(d, aval, bval, join_index_path(path, i))


def diff_dicts(d, a, b, path=""):
    """Diff two dicts into d.

    Keys only in a are reported as removed, keys only in b as added.
    For keys in both, values of different json types are reported
    as a whole, containers of the same kind are recursed into,
    and other values are compared for equality.
    """
    if not isinstance(a, dict) or not isinstance(b, dict):
        raise TypeError('Arguments to diff_dicts need to be dicts, got %r and %r' % (a, b))

    for key in merged_keys(a, b):
        subpath = join_key_path(path, key)
        if key in a and key in b:
            avalue = a[key]
            bvalue = b[key]
            atype = json_type(avalue)
            if atype != json_type(bvalue):
                d[subpath] = op_change(avalue, bvalue)
            elif atype in ("array", "object"):
                _diff_into(d, avalue, bvalue, subpath)
            elif avalue != bvalue:
                d[subpath] = op_change(avalue, bvalue)
        elif key in a:
            d[subpath] = op_remove(a[key])
        else:
            d[subpath] = op_add(b[key])
