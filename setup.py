"""
Copyright (c) 2016-present, Facebook, Inc.
All rights reserved.

This source code is licensed under the BSD-style license found in the
LICENSE file in the root directory of this source tree. An additional grant
of patent rights can be found in the PATENTS file in the same directory.
"""

"""The messagemedia package."""

from setuptools import setup


with open('readme.md') as f:
  README = f.read()


VERSION = '0.1.0'


setup(
  name='messagemedia-soap',
  version=VERSION,
  description='MessageMedia SOAP API client',
  long_description=README,
  long_description_content_type='text/markdown',
  license='BSD',
  packages=['messagemedia', 'messagemedia.tests'],
  package_data={'messagemedia.tests': ['fixtures/*.xml']},
  python_requires='>=3.6',
  install_requires=[
    "requests>=2.20",
    "xmltodict>=0.13",
  ],
  extras_require={
    'test': [
      "mock>=4.0",
      "pytest",
    ],
  },
  zip_safe=False
)
