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

"""Tests for the resource printers."""

from __future__ import absolute_import
from __future__ import division
from __future__ import unicode_literals

import datetime

from apitools.base.protorpclite import messages
from rmcmdlets.core.resource import resource_printer
from rmcmdlets.core.resource import resource_projector
from rmcmdlets.core.util import times
from tests.lib import test_case

import six


class _Color(messages.Enum):
  RED = 0


class _Thing(messages.Message):
  color = messages.EnumField(_Color, 1)
  name = messages.StringField(2)


class _Model(object):

  def __init__(self):
    self.name = 'm'
    self.when = datetime.datetime(2026, 5, 1, 10, 0, tzinfo=times.UTC)
    self._hidden = True


class MakeSerializableTest(test_case.Base):

  def testMessage(self):
    self.assertEqual(
        {'color': 'RED', 'name': 't'},
        resource_projector.MakeSerializable(
            _Thing(color=_Color.RED, name='t')))

  def testPresentationObject(self):
    self.assertEqual(
        {'name': 'm', 'when': '2026-05-01T10:00:00Z'},
        resource_projector.MakeSerializable(_Model()))


class PrinterTest(test_case.Base):

  def SetUp(self):
    self.out = six.StringIO()

  def testJsonList(self):
    resource_printer.Print([{'a': 1}, {'b': 2}], 'json', out=self.out)
    self.assertEqual('[\n  {\n    "a": 1\n  },\n  {\n    "b": 2\n  }\n]\n',
                     self.out.getvalue())

  def testJsonEmptyList(self):
    resource_printer.Print([], 'json', out=self.out)
    self.assertEqual('[]\n', self.out.getvalue())

  def testJsonSingle(self):
    resource_printer.Print({'a': 1}, 'json', out=self.out, single=True)
    self.assertEqual('{\n  "a": 1\n}\n', self.out.getvalue())

  def testYamlList(self):
    resource_printer.Print([{'a': 1}, {'b': [1, 2]}], 'yaml', out=self.out)
    self.assertEqual('---\na: 1\n---\nb:\n- 1\n- 2\n', self.out.getvalue())

  def testUnknownFormat(self):
    with self.assertRaises(resource_printer.UnknownFormatError):
      resource_printer.Printer('table')
