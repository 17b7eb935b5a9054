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

"""A library that is used to support our commands' HTTP error handling.

Remote calls fail with an apitools HttpError whose generic message says little
more than the status line. The management API usually puts something better
in the response body:

  {"details": [{...}, {"code": "Conflict", "message": "Name in use"}]}

ExtractDetailedMessage() digs that out, and NormalizeError() swaps it in for
the generic message while keeping the original failure reachable.
"""

from __future__ import absolute_import
from __future__ import division
from __future__ import unicode_literals

import json

from apitools.base.py import exceptions as apitools_exceptions
from rmcmdlets.core import exceptions as core_exceptions
from rmcmdlets.core.util import encoding

import six


class HttpException(core_exceptions.Error):
  """Transforms apitools HttpError to api_lib HttpException.

  Attributes:
    error: The original HttpError.
  """

  def __init__(self, message, error):
    super(HttpException, self).__init__(message)
    self.error = error

  @property
  def status_code(self):
    return getattr(self.error, 'status_code', None)

  @property
  def message(self):
    return six.text_type(self)

  def __eq__(self, other):
    if isinstance(other, HttpException):
      return self.message == other.message
    return False

  def __hash__(self):
    return hash(self.message)


def _GetIgnoringCase(entry, key):
  """Returns entry's value for key, matching key names case-insensitively.

  Args:
    entry: dict, A detail entry.
    key: str, The lower case key name.

  Returns:
    The first value whose key matches, or None. A null value counts as absent.
  """
  for entry_key, value in six.iteritems(entry):
    if (isinstance(entry_key, six.string_types) and
        entry_key.lower() == key and value is not None):
      return value
  return None


def _SelectDetailEntry(details):
  """Picks the detail entry that best describes the failure.

  The first entry repeats the generic error, so only the entries after it are
  candidates. Entries that are not objects are skipped. The first entry with
  a code wins; failing that, the first entry with a message.

  Args:
    details: list, The details array of the error body.

  Returns:
    dict, The selected entry or None.
  """
  candidates = [d for d in details[1:] if isinstance(d, dict)]
  for key in ('code', 'message'):
    for entry in candidates:
      if _GetIgnoringCase(entry, key) is not None:
        return entry
  return None


def ExtractDetailedMessage(content):
  """Returns the specific error message buried in an error response body.

  Never raises: anything that is not the expected shape yields None so the
  original failure is reported instead.

  Args:
    content: str or bytes, The raw response body of a failed remote call.

  Returns:
    str, '<code>: <message>', just '<message>' when there is no code, or None
    when no detail entry has either.
  """
  if not content:
    return None
  try:
    parsed = json.loads(encoding.Decode(content))
  except (ValueError, TypeError, RecursionError):
    return None
  if not isinstance(parsed, dict):
    return None

  details = parsed.get('details')
  if not isinstance(details, list) or len(details) < 2:
    return None

  entry = _SelectDetailEntry(details)
  if entry is None:
    return None

  message = ''
  code = _GetIgnoringCase(entry, 'code')
  if code is not None:
    message += '{0}: '.format(code)
  detail_message = _GetIgnoringCase(entry, 'message')
  if detail_message is not None:
    message += six.text_type(detail_message)
  return message or None


def NormalizeError(error):
  """Returns the exception that should be reported in place of error.

  Args:
    error: Exception, A failure raised by a command.

  Returns:
    An HttpException carrying the detailed message when error is an HttpError
    whose body has one, otherwise error itself.
  """
  if not isinstance(error, apitools_exceptions.HttpError):
    return error
  message = ExtractDetailedMessage(error.content)
  if message is None:
    return error
  normalized = HttpException(message, error)
  normalized.__cause__ = error
  return normalized
