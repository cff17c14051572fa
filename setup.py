#!/usr/bin/env python
# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.
from setuptools import setup, find_packages
import pathlib
import re

HERE = pathlib.Path(__file__).parent.absolute()

INSTRUCTDIFF_PATH = HERE / "instructdiff"


def get_version(path):
    with open(path) as f:
        return re.search(r'^__version__ = "([^"]+)"', f.read(), re.M).group(1)


VERSION = get_version(INSTRUCTDIFF_PATH / '_version.py')

with open(HERE / 'README.md') as f:
    LONG_DESCRIPTION = f.read()


if __name__ == '__main__':
    setup(
      name="instructdiff",
      version=VERSION,
      description="Structural diffs of instruction document revisions",
      long_description=LONG_DESCRIPTION,
      long_description_content_type="text/markdown",
      license="BSD",
      packages=find_packages(),
      package_data={
          "instructdiff": ["diff_format.schema.json"],
          "instructdiff.tests": ["files/*.json"],
      },
      python_requires=">=3.8",
      install_requires=[
          "colorama",
          "jupyter_core",
          "tornado",
          "traitlets>=5",
      ],
      extras_require={
          "test": [
              "jsonschema",
              "pytest>=6.0",
          ],
      },
      entry_points={
          "console_scripts": [
              "instructdiff = instructdiff.__main__:main_dispatch",
              "instructdiff-diff = instructdiff.diffapp:main",
              "instructdiff-server = instructdiff.webapp.diffserver:main",
          ],
      },
      )
