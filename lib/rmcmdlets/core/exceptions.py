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

"""Base exceptions for the rmcmdlets library.

Do not use this module for creating command-specific exceptions; keep those
beside the command or API library that raises them and have them extend
Error.
"""

from __future__ import absolute_import
from __future__ import division
from __future__ import unicode_literals

import sys

import six


class _Error(Exception):
  """A base exception for all rmcmdlets errors.

  This exception should not be used directly. Use Error instead.
  """


class Error(_Error):
  """A base exception for all user recoverable errors.

  Any exception that extends this class will not be printed with a stack trace
  when running from the CLI, only the message will be printed.

  Attributes:
    exit_code: int, The process exit code to use when this error is the last
      thing reported by a command.
  """

  def __init__(self, *args, **kwargs):
    """Initialize a core.Error.

    Args:
      *args: positional args for exceptions.
      **kwargs: keyword args for exceptions, and additional arguments:
        - exit_code: int, The desired exit code for the CLI.
    """
    super(Error, self).__init__(*args)
    self.exit_code = kwargs.get('exit_code', 1)


class NetworkIssueError(Error):
  """An error to wrap a general network issue."""

  def __init__(self, message):
    super(NetworkIssueError, self).__init__(
        '{message}\n'
        'This may be due to network connectivity issues. Please check your '
        'network settings, and the status of the service you are trying to '
        'reach.'.format(message=message))


def reraise(exc_value, tb=None):
  """Re-raises exc_value with the traceback of the exception being handled.

  Args:
    exc_value: Exception, The exception to raise.
    tb: traceback, Use this traceback instead of the current one.
  """
  if tb is None:
    tb = sys.exc_info()[2]
  six.reraise(type(exc_value), exc_value, tb)
