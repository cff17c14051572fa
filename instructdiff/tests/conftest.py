# -*- coding: utf-8 -*-

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import io
import json
import os

from jsonschema import Draft4Validator as Validator
from pytest import fixture

from instructdiff.revisions import RevisionStore


pjoin = os.path.join

schema_dir = os.path.abspath(pjoin(os.path.dirname(__file__), ".."))


def testspath():
    return os.path.abspath(os.path.dirname(__file__))


@fixture(scope='session')
def filespath():
    return os.path.join(testspath(), "files")


@fixture
def old_document(filespath):
    with io.open(pjoin(filespath, 'instruction--1.json'), encoding='utf8') as f:
        return json.load(f)


@fixture
def new_document(filespath):
    with io.open(pjoin(filespath, 'instruction--2.json'), encoding='utf8') as f:
        return json.load(f)


def write_revision(dirname, filename, **record):
    with io.open(pjoin(dirname, filename), 'w', encoding='utf8') as f:
        json.dump(record, f)


@fixture
def revisions_dir(tmpdir, old_document, new_document):
    """Fixture for a directory of revision records.

    rev-a and rev-b are two revisions of the same instruction,
    rev-bad has stored content that is not valid json, and
    rev-other belongs to a different instruction.
    """
    dest = str(tmpdir.mkdir('revisions'))
    write_revision(
        dest, 'rev-a.json',
        id='rev-a', instructionId='ins-001', revision='A',
        date='2024-01-10T00:00:00.000Z', author='J. Smith',
        jsonContent=json.dumps(old_document))
    write_revision(
        dest, 'rev-b.json',
        id='rev-b', instructionId='ins-001', revision='B',
        date='2024-02-01T00:00:00.000Z', author='J. Smith',
        jsonContent=json.dumps(new_document))
    write_revision(
        dest, 'rev-bad.json',
        id='rev-bad', instructionId='ins-001', revision='C',
        date='2024-03-01T00:00:00.000Z', author='K. Lee',
        jsonContent='{"header": {"title": ')
    write_revision(
        dest, 'other.json',
        id='rev-other', instructionId='ins-002', revision='A',
        date='2023-12-24T00:00:00.000Z', author='K. Lee',
        jsonContent=json.dumps({"header": {"title": "Other"}}))
    return dest


@fixture
def revision_store(revisions_dir):
    return RevisionStore(revisions_dir)


@fixture
def json_schema_diff(request):
    schema_path = os.path.join(schema_dir, 'diff_format.schema.json')
    with io.open(schema_path, encoding="utf8") as f:
        schema_json = json.load(f)
    return schema_json


@fixture
def diff_validator(request, json_schema_diff):
    return Validator(json_schema_diff)
