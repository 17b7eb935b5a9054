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

"""Base classes for all rmcmdlets tests."""

from __future__ import absolute_import
from __future__ import division
from __future__ import unicode_literals

import os
import shutil
import tempfile
import unittest
from unittest import mock

from rmcmdlets.core import config
from rmcmdlets.core import log

import six


_ENV_PREFIX = 'RMCMDLETS_'


class Base(unittest.TestCase):
  """Base class for all tests.

  Every test gets an empty config directory, an environment without any
  RMCMDLETS_ overrides and captured stdout/stderr. Subclasses override
  SetUp() and TearDown() rather than setUp() and tearDown().
  """

  def setUp(self):
    self.temp_path = tempfile.mkdtemp()
    self.addCleanup(shutil.rmtree, self.temp_path, True)

    env = dict((k, v) for k, v in six.iteritems(os.environ)
               if not k.startswith(_ENV_PREFIX))
    env[config.RMCMDLETS_CONFIG] = self.temp_path
    self.StartDictPatch(os.environ, env, clear=True)

    self.stdout = six.StringIO()
    self.stderr = six.StringIO()
    log.Reset(self.stdout, self.stderr)
    self.addCleanup(log.Reset)

    self.PreSetUp()
    self.SetUp()

  def tearDown(self):
    self.TearDown()

  def PreSetUp(self):
    """Fixture setup shared by a family of test bases, run before SetUp()."""
    pass

  def SetUp(self):
    pass

  def TearDown(self):
    pass

  def StartPatch(self, *args, **kwargs):
    patcher = mock.patch(*args, **kwargs)
    self.addCleanup(patcher.stop)
    return patcher.start()

  def StartObjectPatch(self, *args, **kwargs):
    patcher = mock.patch.object(*args, **kwargs)
    self.addCleanup(patcher.stop)
    return patcher.start()

  def StartDictPatch(self, *args, **kwargs):
    patcher = mock.patch.dict(*args, **kwargs)
    self.addCleanup(patcher.stop)
    return patcher.start()

  def Touch(self, name, contents=''):
    """Writes contents to a file under the test's temp directory."""
    path = os.path.join(self.temp_path, name)
    with open(path, 'w') as f:
      f.write(contents)
    return path

  def GetOutput(self):
    return self.stdout.getvalue()

  def GetErr(self):
    return self.stderr.getvalue()

  def AssertOutputEquals(self, expected):
    self.assertEqual(expected, self.GetOutput())

  def AssertOutputContains(self, expected):
    self.assertIn(expected, self.GetOutput())

  def AssertErrContains(self, expected):
    self.assertIn(expected, self.GetErr())

  def AssertErrNotContains(self, unexpected):
    self.assertNotIn(unexpected, self.GetErr())
