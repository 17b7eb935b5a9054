# -*- coding: utf-8 -*- #
# Copyright 2026 The rmcmdlets Authors. All Rights Reserved.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#    http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Resource tag validation shared by the create commands."""

from __future__ import absolute_import
from __future__ import division
from __future__ import unicode_literals

import collections

from rmcmdlets.calliope import arg_parsers
from rmcmdlets.calliope import exceptions

import six


MAX_TAGS = 15
MAX_KEY_LENGTH = 512
MAX_VALUE_LENGTH = 256


def AddTagsFlag(parser, resource_kind):
  parser.add_argument(
      '--tags',
      metavar='KEY=VALUE',
      type=arg_parsers.ArgDict(),
      help='Tags to attach to the {0}, as a comma separated list of '
      'KEY=VALUE pairs. At most {1} tags are allowed.'.format(
          resource_kind, MAX_TAGS))


def ValidateTags(tags):
  """Checks tags against the limits of the management API.

  Args:
    tags: {str: str}, The tags given on the command line, or None.

  Raises:
    exceptions.InvalidArgumentException: A limit is exceeded.

  Returns:
    collections.OrderedDict, The tags sorted by key, or None if tags is None.
  """
  if tags is None:
    return None
  if len(tags) > MAX_TAGS:
    raise exceptions.InvalidArgumentException(
        '--tags',
        'At most {0} tags are allowed, got {1}.'.format(MAX_TAGS, len(tags)))
  for key, value in sorted(six.iteritems(tags)):
    if not key:
      raise exceptions.InvalidArgumentException(
          '--tags', 'Tag keys must not be empty.')
    if len(key) > MAX_KEY_LENGTH:
      raise exceptions.InvalidArgumentException(
          '--tags',
          'Tag key [{0}...] is longer than {1} characters.'.format(
              key[:20], MAX_KEY_LENGTH))
    if value is not None and len(value) > MAX_VALUE_LENGTH:
      raise exceptions.InvalidArgumentException(
          '--tags',
          'The value of tag [{0}] is longer than {1} characters.'.format(
              key, MAX_VALUE_LENGTH))
  return collections.OrderedDict(
      (key, value or '') for key, value in sorted(six.iteritems(tags)))
