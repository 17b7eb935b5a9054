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

"""Tests for the load balancer child resource file flags."""

from __future__ import absolute_import
from __future__ import division
from __future__ import unicode_literals

import os

from rmcmdlets.calliope import exceptions
from rmcmdlets.command_lib.network import flags
from tests.lib import test_case


class LoadChildResourcesTest(test_case.Base):

  def testNotGiven(self):
    self.assertIsNone(flags.LoadChildResources(None, '--probes-from-file'))

  def testEmptyFile(self):
    path = self.Touch('probes.yaml')
    self.assertEqual([], flags.LoadChildResources(path, '--probes-from-file'))

  def testYamlList(self):
    path = self.Touch('probes.yaml', (
        '- name: http\n'
        '  properties:\n'
        '    port: 80\n'
        '    protocol: Http\n'))
    self.assertEqual(
        [{'name': 'http', 'properties': {'port': 80, 'protocol': 'Http'}}],
        flags.LoadChildResources(path, '--probes-from-file'))

  def testJsonList(self):
    path = self.Touch('pools.json', '[{"name": "pool"}]')
    self.assertEqual(
        [{'name': 'pool'}],
        flags.LoadChildResources(path, '--backend-address-pools-from-file'))

  def testNotAList(self):
    path = self.Touch('probes.yaml', 'name: http\n')
    with self.assertRaisesRegex(
        exceptions.BadFileException,
        r'The file given to \[--probes-from-file\] must hold a list of '
        r'objects.'):
      flags.LoadChildResources(path, '--probes-from-file')

  def testMissingFile(self):
    with self.assertRaisesRegex(exceptions.BadFileException,
                                r'Could not read \[--probes-from-file\]'):
      flags.LoadChildResources(os.path.join(self.temp_path, 'missing.yaml'),
                               '--probes-from-file')
