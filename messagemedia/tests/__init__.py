"""
Copyright (c) 2016-present, Facebook, Inc.
All rights reserved.

This source code is licensed under the BSD-style license found in the
LICENSE file in the root directory of this source tree. An additional grant
of patent rights can be found in the PATENTS file in the same directory.
"""

import os


def get_fixture_path(filename):
  """Path to a file in messagemedia/tests/fixtures."""
  return os.path.join(os.path.dirname(__file__), 'fixtures', filename)


def read_fixture(filename):
  with open(get_fixture_path(filename), 'rb') as f:
    return f.read()
