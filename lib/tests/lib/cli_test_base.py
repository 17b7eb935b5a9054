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

"""Test bases for running commands through the generated CLI."""

from __future__ import absolute_import
from __future__ import division
from __future__ import unicode_literals

import shlex
from unittest import mock

from apitools.base.py import exceptions as apitools_exceptions
from apitools.base.py.testing import mock as apitools_mock
from rmcmdlets import rm_main
from rmcmdlets.api_lib.util import apis
from rmcmdlets.core import properties
from rmcmdlets.core.diagnostics import check_base
from tests.lib import test_case

import six


SUBSCRIPTION = 'sub-0000'


def MakeHttpError(status, content='', url='https://management.azure.com/'):
  """Returns an apitools HttpError with the given status and body."""
  return apitools_exceptions.HttpError(
      {'status': six.text_type(status)}, content, url)


def MakeDetailedErrorBody(code, message):
  return ('{{"details": [{{"code": "BadRequest", "message": "Bad request"}}, '
          '{{"code": "{0}", "message": "{1}"}}]}}'.format(code, message))


class CliTestBase(test_case.Base):
  """Runs commands through a freshly generated CLI.

  The connectivity check and the confirmation prompt are fakes: by default
  the endpoint is reachable and every prompt is answered with yes.
  """

  def PreSetUp(self):
    properties.VALUES.core.subscription.Set(SUBSCRIPTION)
    self.checker = mock.Mock()
    self.checker.Check.return_value = check_base.CheckResult(
        passed=True, message='Reachability Check passed.')
    self.prompter = mock.Mock(return_value=True)
    self.cli = rm_main.CreateCLI()

  def WriteInput(self, answer):
    """Makes the fake prompt answer with answer (True for yes)."""
    self.prompter.return_value = answer

  def Run(self, command):
    """Runs command, a string or list of args after the CLI name.

    Args:
      command: str or [str], The command line.

    Returns:
      execution.InvocationContext, The finished invocation.
    """
    if isinstance(command, six.string_types):
      command = shlex.split(command)
    return self.cli.Execute(command, prompter=self.prompter,
                            connectivity_checker=self.checker)


class ApiMockBase(CliTestBase):
  """A CliTestBase whose generated API clients are apitools mocks.

  Subclasses set API_NAME; expectations go on self.client and request and
  response messages come from self.messages.
  """

  API_NAME = None
  API_VERSION = 'v1'

  def PreSetUp(self):
    super(ApiMockBase, self).PreSetUp()
    client_class = apis.GetClientClass(self.API_NAME, self.API_VERSION)
    self.client = apitools_mock.Client(
        client_class, real_client=client_class(get_credentials=False))
    self.client.Mock()
    self.addCleanup(self.client.Unmock)
    self.messages = client_class.MESSAGES_MODULE
