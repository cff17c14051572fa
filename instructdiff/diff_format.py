# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from .log import DiffFormatError


class _MissingType(object):
    "Sentinel for a key or index that is absent on one side of a diff."
    __slots__ = ()

    def __repr__(self):
        return "Missing"

    def __bool__(self):
        return False

    def __copy__(self):
        return self

    def __deepcopy__(self, memo):
        return self

    def __reduce__(self):
        return "Missing"


# Sentinel to allow None as a value
Missing = _MissingType()


class DiffEntry(dict):
    """For internal usage in instructdiff library.

    Minimal class providing attribute access to the old/new
    values of a diff entry. Either side may be Missing,
    which is distinct from an explicit None (json null).
    """
    def __getattr__(self, name):
        if name.startswith("__") and name.endswith("__"):
            return self.__getattribute__(name)
        return self[name]

    def __setattr__(self, name, value):
        self[name] = value

    @property
    def added(self):
        return self["old"] is Missing

    @property
    def removed(self):
        return self["new"] is Missing


def op_change(old, new):
    "Create a diff entry for a value present on both sides."
    return DiffEntry(old=old, new=new)

def op_add(value):
    "Create a diff entry for a key only present on the new side."
    return DiffEntry(old=Missing, new=value)

def op_remove(value):
    "Create a diff entry for a key only present on the old side."
    return DiffEntry(old=value, new=Missing)


def validate_diff(diff):
    """Check whether a diff (mapping of path to diff entry) is well formed.

    Raises a DiffFormatError if not well formed.
    """
    if not isinstance(diff, dict):
        raise DiffFormatError("Diff must be a dict.")
    for path, e in diff.items():
        validate_diff_entry(path, e)


def validate_diff_entry(path, e):
    """Check that e is a well formed diff entry at path.

    Raises a DiffFormatError if not well formed.
    """
    if not isinstance(path, str):
        raise DiffFormatError(
            "Invalid diff path '{}' of type '{}'. Expecting str.".format(path, type(path)))
    if not isinstance(e, DiffEntry):
        raise DiffFormatError("Diff entry '{}' at '{}' is not a diff type.".format(e, path))
    if set(e.keys()) != {"old", "new"}:
        raise DiffFormatError(
            "Diff entry at '{}' must have exactly the keys 'old' and 'new'.".format(path))
    if e.old is Missing and e.new is Missing:
        raise DiffFormatError(
            "Diff entry at '{}' has neither an old nor a new value.".format(path))


def is_valid_diff(diff):
    try:
        validate_diff(diff)
        result = True
    except DiffFormatError:
        result = False
    return result


def serialize_diff(diff):
    """Convert a diff into its json form.

    A side that is Missing is left out of the entry, while
    an explicit None is kept as json null. Every entry has
    at least one of the keys "old" and "new".
    """
    validate_diff(diff)
    output = {}
    for path, e in diff.items():
        entry = {}
        if e.old is not Missing:
            entry["old"] = e.old
        if e.new is not Missing:
            entry["new"] = e.new
        output[path] = entry
    return output


def deserialize_diff(data):
    "Convert the json form of a diff back into diff entries."
    if not isinstance(data, dict):
        raise DiffFormatError("Serialized diff must be a json object.")
    diff = {}
    for path, entry in data.items():
        if not isinstance(entry, dict) or not set(entry) <= {"old", "new"}:
            raise DiffFormatError(
                "Serialized diff entry at '{}' must be an object with "
                "only the keys 'old' and 'new'.".format(path))
        diff[path] = DiffEntry(
            old=entry.get("old", Missing),
            new=entry.get("new", Missing),
        )
    validate_diff(diff)
    return diff
