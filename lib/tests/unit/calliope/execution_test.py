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

"""Tests for rmcmdlets.calliope.execution."""

from __future__ import absolute_import
from __future__ import division
from __future__ import unicode_literals

import argparse
import sys
from unittest import mock

from rmcmdlets.api_lib.util import exceptions as api_exceptions
from rmcmdlets.calliope import execution
from rmcmdlets.core import exceptions as core_exceptions
from rmcmdlets.core import properties
from rmcmdlets.core.console import console_io
from rmcmdlets.core.diagnostics import check_base
from rmcmdlets.core.diagnostics import network_diagnostics
from tests.lib import cli_test_base
from tests.lib import test_case
import six


class _Operation(object):
  """A stand-in command recording the envelope steps it went through."""

  def __init__(self, results=(), execute_error=None, post_error=None):
    self.steps = []
    self._results = results
    self._execute_error = execute_error
    self._post_error = post_error

  def Execute(self, context):
    self.steps.append('Execute')
    for result in self._results:
      context.WriteObject(result)
    if self._execute_error:
      raise self._execute_error

  def PostProcess(self, context):
    self.steps.append('PostProcess')
    if self._post_error:
      raise self._post_error


class _ExecuteOnly(object):

  def __init__(self):
    self.ran = False

  def Execute(self, context):
    self.ran = True
    context.WriteObject('done')


class InvokeTest(test_case.Base):

  def SetUp(self):
    self.checker = mock.Mock()
    self.checker.Check.return_value = check_base.CheckResult(
        passed=True, message='ok')
    self.context = execution.InvocationContext(
        argparse.Namespace(), 'rmcmdlets.test.command',
        connectivity_checker=self.checker)

  def testSuccess(self):
    operation = _Operation(results=['a', 'b'])
    results = execution.Invoke(operation, self.context)
    self.assertEqual(['a', 'b'], results)
    self.assertEqual(['Execute', 'PostProcess'], operation.steps)
    self.assertEqual([], self.context.errors)
    self.assertEqual(0, self.context.exit_code)
    self.checker.Check.assert_called_once_with()

  def testPostProcessIsOptional(self):
    operation = _ExecuteOnly()
    self.assertEqual(['done'], execution.Invoke(operation, self.context))
    self.assertTrue(operation.ran)

  def testDetailedRemoteFailureIsNormalized(self):
    error = cli_test_base.MakeHttpError(
        409, cli_test_base.MakeDetailedErrorBody('Conflict', 'Name in use'))
    operation = _Operation(execute_error=error)

    execution.Invoke(operation, self.context)

    self.assertEqual(['Execute'], operation.steps)
    self.assertEqual(1, len(self.context.errors))
    record = self.context.errors[0]
    self.assertIsInstance(record.exception, api_exceptions.HttpException)
    self.assertIs(error, record.exception.error)
    self.assertEqual('Conflict: Name in use', record.message)
    self.assertEqual(1, self.context.exit_code)
    self.AssertErrContains(
        '(rmcmdlets.test.command) Conflict: Name in use')

  def testRemoteFailureWithoutDetailsIsReportedUnchanged(self):
    error = cli_test_base.MakeHttpError(500, 'oops')
    execution.Invoke(_Operation(execute_error=error), self.context)
    self.assertEqual(1, len(self.context.errors))
    self.assertIs(error, self.context.errors[0].exception)

  def testUnparseablyNestedBodyIsReportedUnchanged(self):
    error = cli_test_base.MakeHttpError(
        400, '[' * 100000 + ']' * 100000)
    execution.Invoke(_Operation(execute_error=error), self.context)
    self.assertEqual(1, len(self.context.errors))
    self.assertIs(error, self.context.errors[0].exception)

  def testOtherFailureIsReportedUnchanged(self):
    error = ValueError('broken')
    execution.Invoke(_Operation(execute_error=error), self.context)
    self.assertIs(error, self.context.errors[0].exception)
    self.AssertErrContains('(rmcmdlets.test.command) broken')

  def testResultsWrittenBeforeFailureAreKept(self):
    operation = _Operation(results=['partial'], execute_error=ValueError('x'))
    self.assertEqual(['partial'], execution.Invoke(operation, self.context))
    self.assertEqual(1, len(self.context.errors))

  def testPostProcessFailureIsReportedLikeExecuteFailure(self):
    error = cli_test_base.MakeHttpError(
        400, cli_test_base.MakeDetailedErrorBody('Invalid', 'bad tag'))
    operation = _Operation(results=['a'], post_error=error)

    execution.Invoke(operation, self.context)

    self.assertEqual(['Execute', 'PostProcess'], operation.steps)
    self.assertEqual(1, len(self.context.errors))
    self.assertEqual('Invalid: bad tag', self.context.errors[0].message)

  def testConnectivityFailureStopsBeforeExecute(self):
    self.checker.Check.return_value = check_base.CheckResult(
        passed=False, message='Reachability Check failed.')
    operation = _Operation(results=['a'])

    self.assertEqual([], execution.Invoke(operation, self.context))

    self.assertEqual([], operation.steps)
    self.assertEqual(1, len(self.context.errors))
    self.assertIsInstance(self.context.errors[0].exception,
                          network_diagnostics.ConnectivityError)

  def testConnectivityCheckCanBeDisabled(self):
    properties.VALUES.core.check_connectivity.Set(False)
    execution.Invoke(_Operation(), self.context)
    self.checker.Check.assert_not_called()

  def testCommandsWithoutRemoteCallsSkipConnectivityCheck(self):
    operation = _Operation()
    operation.requires_connectivity = False
    execution.Invoke(operation, self.context)
    self.checker.Check.assert_not_called()
    self.assertEqual(['Execute', 'PostProcess'], operation.steps)

  def testErrorActionStopReraisesAfterRecording(self):
    properties.VALUES.core.error_action.Set('stop')
    error = cli_test_base.MakeHttpError(
        409, cli_test_base.MakeDetailedErrorBody('Conflict', 'Name in use'))

    with self.assertRaises(api_exceptions.HttpException) as ctx:
      execution.Invoke(_Operation(execute_error=error), self.context)

    self.assertEqual('Conflict: Name in use', ctx.exception.message)
    self.assertEqual(1, len(self.context.errors))


class InvocationContextTest(test_case.Base):

  def testConfirmWithAssumeYesDoesNotPrompt(self):
    prompter = mock.Mock()
    context = execution.InvocationContext(
        argparse.Namespace(), 'cmd', assume_yes=True, prompter=prompter)
    self.assertTrue(context.Confirm('Overwrite?', 'lb1'))
    prompter.assert_not_called()

  def testConfirmDelegatesToPrompter(self):
    prompter = mock.Mock(return_value=False)
    context = execution.InvocationContext(
        argparse.Namespace(), 'cmd', prompter=prompter)
    self.assertFalse(context.Confirm('Overwrite?', 'lb1'))
    prompter.assert_called_once_with(
        message='Overwrite?', default=False)

  def testConfirmAtConsoleUsesDefaultAtEndOfInput(self):
    self.StartObjectPatch(sys, 'stderr', six.StringIO())
    self.StartObjectPatch(console_io, '_RawInput', return_value=None)
    context = execution.InvocationContext(argparse.Namespace(), 'cmd')
    self.assertFalse(context.Confirm('Delete?', 'lb1'))
    self.assertIn('Do you want to continue (y/N)?', sys.stderr.getvalue())

  def testWriteErrorRecordsAndLogs(self):
    context = execution.InvocationContext(argparse.Namespace(), 'a.b')
    record = context.WriteError(core_exceptions.Error('boom'))
    self.assertEqual([record], context.errors)
    self.assertEqual('(a.b) boom', str(record))
    self.AssertErrContains('ERROR: (a.b) boom')
