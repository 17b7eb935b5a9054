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

"""The invocation envelope shared by every command.

Invoke() runs one command against an InvocationContext:

  1. fail fast when the management endpoint cannot be reached,
  2. command.Execute(context),
  3. command.PostProcess(context).

Every failure from any step is caught here, once. Remote call failures are
normalized to their detailed message first. The failure is then written to
the context's error channel and the session goes on, unless the
core/error_action property is 'stop'.
"""

from __future__ import absolute_import
from __future__ import division
from __future__ import unicode_literals

import sys

from rmcmdlets.api_lib.util import exceptions as api_exceptions
from rmcmdlets.core import exceptions as core_exceptions
from rmcmdlets.core import log
from rmcmdlets.core import properties
from rmcmdlets.core.console import console_io
from rmcmdlets.core.diagnostics import network_diagnostics

import six


class ErrorRecord(object):
  """A failure reported by a command.

  Attributes:
    exception: Exception, The reported exception. For normalized remote
      failures the original HttpError is exception.error.
    command_path: str, The dotted path of the command that failed.
  """

  def __init__(self, exception, command_path):
    self.exception = exception
    self.command_path = command_path

  @property
  def message(self):
    return six.text_type(self.exception)

  def __str__(self):
    return '({0}) {1}'.format(self.command_path, self.message)


class InvocationContext(object):
  """Everything one command invocation reads from and writes to.

  Created by the CLI right before the invocation and owned by it alone.

  Attributes:
    args: argparse.Namespace, The bound command line arguments.
    command_path: str, The dotted command path, e.g.
      'rmcmdlets.network.load-balancers.create'.
    results: [object], The output channel, in write order.
    errors: [ErrorRecord], The error channel, in write order.
    assume_yes: bool, True to answer every confirmation with yes.
    connectivity_checker: check_base.Checker, The reachability check run
      before the command, None for the default one.
  """

  def __init__(self, args, command_path, assume_yes=False, prompter=None,
               connectivity_checker=None):
    self.args = args
    self.command_path = command_path
    self.results = []
    self.errors = []
    self.assume_yes = assume_yes
    self.connectivity_checker = connectivity_checker
    self._prompter = prompter or console_io.PromptContinue

  def WriteObject(self, resource):
    """Appends resource to the output channel."""
    self.results.append(resource)

  def WriteError(self, error):
    """Appends a record for error to the error channel and logs it.

    Args:
      error: Exception, The failure to report.

    Returns:
      ErrorRecord, The appended record.
    """
    record = ErrorRecord(error, self.command_path)
    self.errors.append(record)
    log.error(six.text_type(record))
    return record

  def Confirm(self, message, item_name, default=False):
    """Asks the user whether to go on with an operation on item_name.

    Args:
      message: str, The explanation printed before the yes/no question.
      item_name: str, The name of the resource the operation acts on.
      default: bool, The answer used on an empty line or at end of input.

    Returns:
      bool, True to go on, False otherwise.
    """
    if self.assume_yes:
      log.debug('Prompts disabled, going on with [{0}].'.format(item_name))
      return True
    return self._prompter(message=message, default=default)

  @property
  def exit_code(self):
    """The process exit code for this invocation: 1 if anything failed."""
    return 1 if self.errors else 0


def _CheckConnectivity(operation, context):
  if not getattr(operation, 'requires_connectivity', True):
    return
  if not properties.VALUES.core.check_connectivity.GetBool():
    return
  network_diagnostics.CheckConnectivity(context.connectivity_checker)


def Invoke(operation, context):
  """Runs operation inside the invocation envelope.

  Args:
    operation: An object with an Execute(context) method and, optionally, a
      PostProcess(context) method.
    context: InvocationContext, The context for this invocation.

  Raises:
    Exception: The reported failure, but only when core/error_action is
      'stop'.

  Returns:
    [object], The context's results.
  """
  try:
    _CheckConnectivity(operation, context)
    operation.Execute(context)
    post_process = getattr(operation, 'PostProcess', None)
    if post_process is not None:
      post_process(context)
  except Exception as e:  # pylint: disable=broad-except
    exc_info = sys.exc_info()
    reported = api_exceptions.NormalizeError(e)
    log.debug('({0}) {1}'.format(context.command_path, e), exc_info=exc_info)
    context.WriteError(reported)
    if properties.VALUES.core.error_action.Get() == 'stop':
      core_exceptions.reraise(reported, exc_info[2])
  return context.results
