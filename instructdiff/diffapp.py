# coding: utf-8

# Copyright (c) IPython Development Team.
# Distributed under the terms of the Modified BSD License.

import json
import os
import sys

from .args import (
    add_generic_args, add_store_args, add_prettyprint_args,
    ConfigBackedParser, prettyprint_config_from_args,
    )
from .diff_format import serialize_diff
from .diffing import diff
from .log import logger
from .prettyprint import pretty_print_document_diff, pretty_print_revision_diff
from .revisions import (
    RevisionStore, RevisionError, compare_revisions, load_document,
    )
from .utils import setup_std_streams


_description = "Compute the difference between two instruction documents or revisions."


def main_diff(args):
    """Main handler of diff CLI"""
    output = getattr(args, 'out', None)
    old, new = args.old, args.new

    if args.store:
        return _handle_revision_diff(old, new, output, args)
    return _handle_diff(old, new, output, args)


def _handle_diff(old, new, output, args):
    """Handles diffs of two document files"""
    for fn in (old, new):
        if not os.path.exists(fn):
            print("Missing file {}".format(fn))
            return 1

    try:
        a = load_document(old)
        b = load_document(new)
    except RevisionError as e:
        logger.error('%s', e)
        return 1

    d = diff(a, b)

    if output:
        _write_diff(output, serialize_diff(d))
    else:
        config = prettyprint_config_from_args(args, out=_Printer())
        pretty_print_document_diff(old, new, d, config)
    return 0


def _handle_revision_diff(old_id, new_id, output, args):
    """Handles diffs of two revisions looked up by id"""
    store = RevisionStore(args.store)
    try:
        comparison = compare_revisions(store, old_id, new_id)
    except RevisionError as e:
        logger.error('%s', e)
        return 1

    if output:
        data = dict(comparison, diff=serialize_diff(comparison['diff']))
        _write_diff(output, data)
    else:
        config = prettyprint_config_from_args(args, out=_Printer())
        pretty_print_revision_diff(comparison, config)
    return 0


def _write_diff(output, data):
    with open(output, "w") as df:
        json.dump(data, df, indent=2, separators=(",", ": "))


class _Printer:
    # Writes through print, so that tests capturing
    # output with capsys pick it up
    def write(self, text):
        print(text, end="")


def _build_arg_parser(prog='instructdiff-diff'):
    """Creates an argument parser for the diff command."""
    parser = ConfigBackedParser(
        description=_description,
        prog=prog,
        )
    add_generic_args(parser)
    add_store_args(parser)
    add_prettyprint_args(parser)

    parser.add_argument(
        "old", help="the old document filename, or old revision id with --store.")
    parser.add_argument(
        "new", help="the new document filename, or new revision id with --store.")

    parser.add_argument(
        '--out',
        default=None,
        help="if supplied, the diff is written to this file as json. "
             "Otherwise it is printed to the terminal.")

    return parser


def main(args=None):
    if args is None:
        args = sys.argv[1:]
    setup_std_streams()
    arguments = _build_arg_parser().parse_args(args)
    return main_diff(arguments)


if __name__ == "__main__":
    sys.exit(main())
