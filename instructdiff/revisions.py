# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

"""Lookup of stored instruction revisions and their comparison.

A revision store is a directory of json files, one revision record each::

    {"id": "rev-a", "instructionId": "ins-001", "revision": "A",
     "date": "2024-01-10T00:00:00.000Z", "author": "J. Smith",
     "jsonContent": "{\\"header\\": ...}"}

The document itself is kept as json text in ``jsonContent``, and is
only decoded when a comparison is requested.
"""

import glob
import io
import json
import os

from .diffing import diff
from .log import logger


class RevisionError(ValueError):
    pass


class RevisionNotFound(RevisionError, KeyError):
    def __init__(self, revision_id):
        super(RevisionNotFound, self).__init__(revision_id)
        self.revision_id = revision_id

    def __str__(self):
        return 'Revision not found: %r' % (self.revision_id,)


class InvalidRevisionContent(RevisionError):
    def __init__(self, message, revision_id=None, side=None):
        super(InvalidRevisionContent, self).__init__(message)
        self.revision_id = revision_id
        self.side = side


class Revision(object):
    """One stored snapshot of an instruction document."""

    summary_keys = ('id', 'revision', 'date', 'author')

    def __init__(self, record):
        self.record = record

    @property
    def id(self):
        return self.record['id']

    @property
    def instruction_id(self):
        return self.record.get('instructionId')

    @property
    def date(self):
        return self.record.get('date') or ''

    def summary(self):
        "Metadata identifying the revision in a comparison."
        return {k: self.record.get(k) for k in self.summary_keys}

    def load_content(self, side=None):
        """Decode the stored document text.

        Raises InvalidRevisionContent if it is not valid json.
        """
        text = self.record.get('jsonContent')
        if isinstance(text, (dict, list)):
            # Already decoded by whoever wrote the record
            return text
        if not isinstance(text, str):
            raise InvalidRevisionContent(
                'Missing JSON content in %srevision %r' % (_side_prefix(side), self.id),
                revision_id=self.id, side=side)
        try:
            return json.loads(text)
        except ValueError:
            raise InvalidRevisionContent(
                'Invalid JSON content in %srevision %r' % (_side_prefix(side), self.id),
                revision_id=self.id, side=side)

    def __repr__(self):
        return 'Revision(%r)' % (self.id,)


def _side_prefix(side):
    return '%s ' % side if side else ''


class RevisionStore(object):
    """Read-only access to a directory of revision records."""

    def __init__(self, path):
        self.path = os.path.abspath(path)
        self._index = None

    def _load_index(self):
        index = {}
        for fn in sorted(glob.glob(os.path.join(self.path, '*.json'))):
            try:
                with io.open(fn, encoding='utf8') as f:
                    record = json.load(f)
            except ValueError:
                logger.warning('Skipping unreadable revision record %s', fn)
                continue
            if not isinstance(record, dict):
                logger.warning('Skipping revision record %s: not a json object', fn)
                continue
            record.setdefault('id', os.path.splitext(os.path.basename(fn))[0])
            if not isinstance(record['id'], str):
                logger.warning('Skipping revision record %s: id is not a string', fn)
                continue
            if not isinstance(record.get('date') or '', str):
                logger.warning('Skipping revision record %s: date is not a string', fn)
                continue
            if record['id'] in index:
                logger.warning('Duplicate revision id %r in %s', record['id'], fn)
            index[record['id']] = Revision(record)
        logger.debug('Indexed %d revisions in %s', len(index), self.path)
        return index

    @property
    def index(self):
        if self._index is None:
            self._index = self._load_index()
        return self._index

    def reload(self):
        self._index = None

    def get(self, revision_id):
        try:
            return self.index[revision_id]
        except KeyError:
            raise RevisionNotFound(revision_id)

    def list(self, instruction_id=None):
        "List revisions, newest first."
        revisions = [
            r for r in self.index.values()
            if instruction_id is None or r.instruction_id == instruction_id
        ]
        return sorted(revisions, key=lambda r: r.date, reverse=True)


def load_document(filename):
    """Read an instruction document from a json file.

    Raises InvalidRevisionContent if the file is not valid utf8 json.
    """
    try:
        with io.open(filename, encoding='utf8') as f:
            return json.loads(f.read())
    except ValueError:
        # Includes UnicodeDecodeError for files that are not utf8
        raise InvalidRevisionContent('Invalid JSON content in %s' % filename)


def compare_revisions(store, old_id, new_id):
    """Compare two stored revisions.

    Returns a dict with the summaries of both revisions and their diff.
    Raises RevisionNotFound or InvalidRevisionContent before any
    diffing is attempted.
    """
    old_revision = store.get(old_id)
    new_revision = store.get(new_id)

    old_content = old_revision.load_content(side='old')
    new_content = new_revision.load_content(side='new')

    logger.debug('Comparing revision %r to %r', old_id, new_id)
    return {
        'oldRevision': old_revision.summary(),
        'newRevision': new_revision.summary(),
        'diff': diff(old_content, new_content),
    }
