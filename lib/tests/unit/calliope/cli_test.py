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

"""Tests for the generated command line tool."""

from __future__ import absolute_import
from __future__ import division
from __future__ import unicode_literals

import signal
import sys

from rmcmdlets import rm_main
from rmcmdlets.core import config
from rmcmdlets.core import properties
from tests.lib import cli_test_base

import six


class CLITest(cli_test_base.CliTestBase):

  def testFormatBeforeCommand(self):
    self.Run('--format json config list')
    self.AssertOutputContains('"subscription": "sub-0000"')

  def testFormatAfterCommand(self):
    self.Run('config list --format json')
    self.AssertOutputContains('"subscription": "sub-0000"')

  def testDefaultFormatIsYaml(self):
    self.Run('config list')
    self.AssertOutputEquals('core:\n  subscription: sub-0000\n')

  def testFlagValuesDoNotOutliveTheInvocation(self):
    self.Run('config list --subscription other')
    self.AssertOutputContains('subscription: other')
    self.assertEqual(cli_test_base.SUBSCRIPTION,
                     properties.VALUES.core.subscription.Get())

  def testQuietSetsAssumeYes(self):
    self.assertTrue(self.Run('config list -q').assume_yes)
    self.assertFalse(self.Run('config list').assume_yes)

  def testVersion(self):
    stdout = self.StartObjectPatch(sys, 'stdout', six.StringIO())
    with self.assertRaises(SystemExit) as e:
      self.Run('--version')
    self.assertEqual(0, e.exception.code)
    self.assertIn(config.CLI_VERSION, stdout.getvalue())

  def testUnknownCommand(self):
    self.StartObjectPatch(sys, 'stderr', six.StringIO())
    with self.assertRaises(SystemExit) as e:
      self.Run('network gateways list')
    self.assertEqual(2, e.exception.code)

  def testExecuteRejectsString(self):
    with self.assertRaises(ValueError):
      self.cli.Execute('config list')


class MainTest(cli_test_base.CliTestBase):

  def SetUp(self):
    self.StartObjectPatch(signal, 'signal')

  def _Main(self, argv):
    self.StartObjectPatch(sys, 'argv', ['rmcmdlets'] + argv)
    with self.assertRaises(SystemExit) as e:
      rm_main.main(self.cli)
    return e.exception.code

  def testExitCodeSuccess(self):
    self.assertEqual(0, self._Main(['config', 'list']))

  def testExitCodeOnReportedError(self):
    self.assertEqual(1, self._Main(['config', 'set', 'core/nothing', 'x']))
    self.AssertErrContains(
        'ERROR: (rmcmdlets.config.set) Section [core] has no property '
        '[nothing].')

  def testExitCodeWhenStopping(self):
    properties.VALUES.core.error_action.Set('stop')
    self.assertEqual(1, self._Main(['config', 'set', 'core/nothing', 'x']))
