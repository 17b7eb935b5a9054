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

"""Tests for rmcmdlets.command_lib.util.tags."""

from __future__ import absolute_import
from __future__ import division
from __future__ import unicode_literals

from rmcmdlets.calliope import exceptions
from rmcmdlets.command_lib.util import tags
from tests.lib import test_case


class ValidateTagsTest(test_case.Base):

  def testNone(self):
    self.assertIsNone(tags.ValidateTags(None))

  def testSortedByKey(self):
    self.assertEqual([('a', '1'), ('b', '2')],
                     list(tags.ValidateTags({'b': '2', 'a': '1'}).items()))

  def testMissingValueBecomesEmpty(self):
    self.assertEqual({'env': ''}, dict(tags.ValidateTags({'env': None})))

  def testFifteenTagsAllowed(self):
    value = dict(('k{0}'.format(i), 'v') for i in range(15))
    self.assertEqual(15, len(tags.ValidateTags(value)))

  def testTooManyTags(self):
    value = dict(('k{0}'.format(i), 'v') for i in range(16))
    with self.assertRaisesRegex(exceptions.InvalidArgumentException,
                                r'At most 15 tags are allowed, got 16\.'):
      tags.ValidateTags(value)

  def testKeyLimit(self):
    tags.ValidateTags({'k' * 512: 'v'})
    with self.assertRaisesRegex(exceptions.InvalidArgumentException,
                                r'longer than 512 characters'):
      tags.ValidateTags({'k' * 513: 'v'})

  def testValueLimit(self):
    tags.ValidateTags({'k': 'v' * 256})
    with self.assertRaisesRegex(exceptions.InvalidArgumentException,
                                r'The value of tag \[k\] is longer than 256'):
      tags.ValidateTags({'k': 'v' * 257})

  def testEmptyKey(self):
    with self.assertRaises(exceptions.InvalidArgumentException):
      tags.ValidateTags({'': 'v'})
