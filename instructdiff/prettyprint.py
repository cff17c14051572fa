# -*- coding: utf-8 -*-

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from collections import namedtuple
import datetime
import os
import pprint
import sys

import colorama

from .diff_format import Missing
from .utils import group_by_section


# Indentation offset in pretty-print
IND = "  "

# Max line width used some placed in pretty-print
MAXWIDTH = 78


ColoredConstants = namedtuple('ColoredConstants', (
    'KEEP',
    'REMOVE',
    'ADD',
    'INFO',
    'SECTION',
    'RESET',
))


col_const = {
    True: ColoredConstants(
        KEEP    = '{color}   '.format(color=''),
        REMOVE  = '{color}-  '.format(color=colorama.Fore.RED),
        ADD     = '{color}+  '.format(color=colorama.Fore.GREEN),
        INFO    = '{color}## '.format(color=colorama.Fore.BLUE + colorama.Style.BRIGHT),
        SECTION = '{color}== '.format(color=colorama.Fore.CYAN + colorama.Style.BRIGHT),
        RESET   = colorama.Style.RESET_ALL,
    ),

    False: ColoredConstants(
        KEEP    = '   ',
        REMOVE  = '-  ',
        ADD     = '+  ',
        INFO    = '## ',
        SECTION = '== ',
        RESET   = '',
    )
}


class PrettyPrintConfig:
    def __init__(
            self,
            out=sys.stdout,
            use_color=True,
            ):
        self.out = out
        self.use_color = use_color

    @property
    def KEEP(self):
        return col_const[self.use_color].KEEP

    @property
    def REMOVE(self):
        return col_const[self.use_color].REMOVE

    @property
    def ADD(self):
        return col_const[self.use_color].ADD

    @property
    def INFO(self):
        return col_const[self.use_color].INFO

    @property
    def SECTION(self):
        return col_const[self.use_color].SECTION

    @property
    def RESET(self):
        return col_const[self.use_color].RESET

DefaultConfig = PrettyPrintConfig()


def format_value(v):
    "Format simple value for printing. Quotes strings and uses pprint for the rest."
    if isinstance(v, str) and "\n" in v:
        # Multiline strings are printed as-is, line by line
        return v
    return pprint.pformat(v)


def pretty_print_value(value, prefix="", config=DefaultConfig):
    """Print a possibly complex value with all lines prefixed.

    Calls out to generic formatters based on value
    type for dicts, lists, and multiline strings.
    Uses format_value for simple values.
    """
    if isinstance(value, dict) and value:
        pretty_print_dict(value, (), prefix, config)
    elif isinstance(value, list) and value:
        pretty_print_list(value, prefix, config)
    else:
        pretty_print_multiline(format_value(value), prefix, config)


def pretty_print_key(k, prefix, config):
    config.out.write("%s%s:\n" % (prefix, k))


def pretty_print_key_value(k, v, prefix, config):
    config.out.write("%s%s: %s\n" % (prefix, k, v))


def pretty_print_diff_action(msg, path, config):
    config.out.write("%s%s %s:%s\n" % (config.INFO, msg, path, config.RESET))


def pretty_print_item(k, v, prefix="", config=DefaultConfig):
    if isinstance(v, dict):
        pretty_print_key(k, prefix, config)
        pretty_print_dict(v, (), prefix+IND, config)
    elif isinstance(v, list):
        pretty_print_key(k, prefix, config)
        pretty_print_list(v, prefix+IND, config)
    else:
        vstr = format_value(v)
        if "\n" in vstr:
            # Multiline strings
            pretty_print_key(k, prefix, config)
            for line in vstr.splitlines(False):
                config.out.write("%s%s\n" % (prefix+IND, line))
        else:
            # Singleline strings
            pretty_print_key_value(k, vstr, prefix, config)


def pretty_print_multiline(text, prefix="", config=DefaultConfig):
    assert isinstance(text, str), 'expected string argument'

    # Preprend prefix to lines, letting lines keep their own newlines
    lines = text.splitlines(True)
    for line in lines:
        config.out.write(prefix + line)

    # If the final line doesn't have a newline,
    # make sure we still start a new line
    if not text.endswith("\n"):
        config.out.write("\n")


def pretty_print_list(li, prefix="", config=DefaultConfig):
    listr = pprint.pformat(li)
    if len(listr) < MAXWIDTH - len(prefix) and "\\n" not in listr:
        config.out.write("%s%s\n" % (prefix, listr))
    else:
        for k, v in enumerate(li):
            pretty_print_item("item[%d]" % k, v, prefix, config)


def pretty_print_dict(d, exclude_keys=(), prefix="", config=DefaultConfig):
    """Pretty-print a dict without wrapper keys

    Instead of {'key': 'value'}, do

        key: value
        key:
          long
          value

    """
    for k in sorted(set(d) - set(exclude_keys)):
        v = d[k]
        pretty_print_item(k, v, prefix, config)


def pretty_print_diff_entry(path, e, config=DefaultConfig):
    if e.old is Missing:
        pretty_print_diff_action("added", path, config)
        pretty_print_value(e.new, config.ADD, config)
    elif e.new is Missing:
        pretty_print_diff_action("removed", path, config)
        pretty_print_value(e.old, config.REMOVE, config)
    else:
        pretty_print_diff_action("changed", path or "<root>", config)
        pretty_print_value(e.old, config.REMOVE, config)
        pretty_print_value(e.new, config.ADD, config)
    if config.RESET:
        config.out.write(config.RESET)


def pretty_print_diff(di, config=DefaultConfig):
    """Pretty-print a flat diff, grouped by top-level section.

    Sections are printed in the order their first change
    was found, e.g. header, parts, steps, footer, changeLog.
    """
    for section, entries in group_by_section(di).items():
        config.out.write("%s%s%s\n" % (config.SECTION, section or "<root>", config.RESET))
        for path, e in entries.items():
            pretty_print_diff_entry(path, e, config)


def file_timestamp(filename):
    "Return modification time for filename as a string."
    if os.path.exists(filename):
        t = os.path.getmtime(filename)
        dt = datetime.datetime.fromtimestamp(t)
        return dt.isoformat(str(" "))
    else:
        return "(no timestamp)"


document_diff_header = """\
instructdiff {afn} {bfn}
--- {afn}{atime}
+++ {bfn}{btime}
"""

def pretty_print_document_diff(afn, bfn, di, config=DefaultConfig):
    """Pretty-print the diff of two document files

    Parameters
    ----------

    afn: str
        Filename of the old document
    bfn: str
        Filename of the new document
    di: diff
        The diff object describing the changes from old to new
    config: PrettyPrintConfig
        Config object determining where and how it gets printed
    """
    if di:
        atime = "  " + file_timestamp(afn)
        btime = "  " + file_timestamp(bfn)
        config.out.write(document_diff_header.format(
            afn=afn, bfn=bfn, atime=atime, btime=btime))
        pretty_print_diff(di, config)


revision_diff_header = """\
instructdiff revision {old[id]} -> {new[id]}
--- Rev. {old[revision]}  {old[date]}  by {old[author]}
+++ Rev. {new[revision]}  {new[date]}  by {new[author]}
"""

def pretty_print_revision_diff(comparison, config=DefaultConfig):
    """Pretty-print the result of comparing two stored revisions

    Parameters
    ----------

    comparison: dict
        As returned by revisions.compare_revisions, with the
        summaries of both revisions and the diff between them.
    config: PrettyPrintConfig
        Config object determining where and how it gets printed
    """
    di = comparison['diff']
    if di:
        config.out.write(revision_diff_header.format(
            old=comparison['oldRevision'], new=comparison['newRevision']))
        pretty_print_diff(di, config)
