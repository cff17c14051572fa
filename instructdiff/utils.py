# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import codecs
import locale
import os
import re
import sys


def json_type(value):
    """Return the JSON type tag of a parsed JSON value.

    bool is checked before numbers, since in Python True == 1
    and a boolean must never compare equal to a number.
    """
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, list):
        return "array"
    if isinstance(value, dict):
        return "object"
    raise TypeError("Not a JSON value: %r" % (value,))


def json_equal(a, b):
    "Strict JSON equality: same type tag and equal value."
    return json_type(a) == json_type(b) and a == b


def join_key_path(path, key):
    "Append a mapping key to a path, e.g. ('header', 'tags') -> 'header.tags'."
    return "%s.%s" % (path, key) if path else key


def join_index_path(path, index):
    "Append a sequence index to a path, e.g. ('tags', 2) -> 'tags[2]'."
    return "%s[%d]" % (path, index)


_r_section = re.compile(r"^(\[\d+\]|[^.\[]*)")

def section_of(path):
    """Get the top-level segment of a diff path.

    'steps[0].title' -> 'steps', 'header.tags[1]' -> 'header',
    '[2].name' -> '[2]', '' -> ''.
    """
    return _r_section.match(path).group(1)


def group_by_section(diff):
    """Group a flat diff by the top-level segment of its paths.

    Sections appear in the order their first path was discovered,
    and paths keep their order within a section.
    """
    groups = {}
    for path, entry in diff.items():
        groups.setdefault(section_of(path), {})[path] = entry
    return groups


def _setup_std_stream_encoding():
    """Setup encoding on stdout/err

    Ensures sys.stdout/err have error-escaping encoders,
    rather than raising errors.
    """
    if os.getenv('PYTHONIOENCODING'):
        # setting PYTHONIOENCODING overrides anything we would do here
        return
    _default_encoding = locale.getpreferredencoding() or 'UTF-8'
    for name in ('stdout', 'stderr'):
        stream = getattr(sys, name)
        raw_stream = getattr(sys, '__%s__' % name)
        if stream is not raw_stream:
            # don't wrap captured or redirected output
            continue
        enc = getattr(stream, 'encoding', None) or _default_encoding
        errors = getattr(stream, 'errors', None) or 'strict'
        # if error-handler is strict, switch to replace
        if errors == 'strict' or errors.startswith('surrogate'):
            bin_stream = stream.buffer
            new_stream = codecs.getwriter(enc)(bin_stream, errors='backslashreplace')
            setattr(sys, name, new_stream)


def setup_std_streams():
    """Setup sys.stdout/err

    - Ensures sys.stdout/err have error-escaping encoders,
      rather than raising errors.
    - enables colorama for ANSI escapes on Windows
    """

    _setup_std_stream_encoding()
    # must enable colorama after setting up encoding,
    # or encoding will undo colorama setup
    if sys.platform.startswith('win'):
        import colorama
        colorama.init()
