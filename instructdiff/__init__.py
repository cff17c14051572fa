# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from ._version import __version__

from .diffing import diff
from .diff_format import DiffEntry, Missing, serialize_diff, deserialize_diff
from .revisions import (
    RevisionStore, RevisionError, RevisionNotFound, InvalidRevisionContent,
    compare_revisions,
)


__all__ = [
    "__version__",
    "diff",
    "DiffEntry", "Missing",
    "serialize_diff", "deserialize_diff",
    "RevisionStore", "RevisionError", "RevisionNotFound",
    "InvalidRevisionContent", "compare_revisions",
    ]
