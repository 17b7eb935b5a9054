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

"""dateutil and datetime with portable timezones.

         => ParseDateTime =>
  string                      datetime
         <= FormatDateTime <=

LocalizeDateTime(datetime, tzinfo) returns a datetime object relative to the
timezone tzinfo.

This module is biased to the local timezone by default. Timestamps exchanged
with the management API are UTC; the presentation layer shows local times.
"""

from __future__ import absolute_import
from __future__ import division
from __future__ import unicode_literals

import datetime

from dateutil import parser
from dateutil import tz

from rmcmdlets.core import exceptions

import six


class Error(exceptions.Error):
  """Base errors for this module."""


class DateTimeSyntaxError(Error):
  """Date/Time string syntax error."""


class DateTimeValueError(Error):
  """Date/Time part overflow error."""


LOCAL = tz.tzlocal()  # The local timezone.
UTC = tz.tzutc()  # The UTC timezone.


def _StrFtime(dt, fmt):
  """Convert strftime exceptions to Datetime Errors."""
  try:
    return dt.strftime(fmt)
  except (AttributeError, OverflowError, TypeError, ValueError) as e:
    raise DateTimeValueError(six.text_type(e))


def FormatDateTime(dt, fmt=None, tzinfo=None):
  """Returns a string of a datetime object formatted by strftime().

  Args:
    dt: The datetime object to be formatted.
    fmt: The strftime(3) format string, None for the RFC 3339 format in the dt
      timezone ('%Y-%m-%dT%H:%M:%S%Ez').  %Ez formats a +0000 offset as Z and
      any other offset as +/-HH:MM.
    tzinfo: Format dt relative to this timezone.

  Raises:
    DateTimeValueError: A DateTime numeric constant exceeded its range.

  Returns:
    A string of a datetime object formatted by strftime().
  """
  if tzinfo:
    dt = LocalizeDateTime(dt, tzinfo)
  if not fmt:
    fmt = '%Y-%m-%dT%H:%M:%S%Ez'
  if '%Ez' not in fmt:
    return _StrFtime(dt, fmt)
  offset = _StrFtime(dt, '%z')
  if offset in ('', '+0000'):
    offset = 'Z'
  elif len(offset) == 5:
    offset = offset[:3] + ':' + offset[3:]
  return offset.join(_StrFtime(dt, part) for part in fmt.split('%Ez'))


def ParseDateTime(string, tzinfo=LOCAL):
  """Parses a date/time string and returns a datetime.datetime object.

  Args:
    string: The date/time string to parse, anything dateutil.parser.parse()
      accepts.
    tzinfo: A default timezone tzinfo object to use if string has no timezone.

  Raises:
    DateTimeSyntaxError: Invalid date/time syntax.
    DateTimeValueError: A date/time numeric constant exceeds its range.

  Returns:
    A datetime.datetime object for the given date/time string.
  """
  try:
    dt = parser.parse(string)
  except OverflowError as e:
    raise DateTimeValueError(six.text_type(e))
  except (AttributeError, ValueError, TypeError) as e:
    raise DateTimeSyntaxError(six.text_type(e))
  if tzinfo and not dt.tzinfo:
    dt = dt.replace(tzinfo=tzinfo)
  return dt


def LocalizeDateTime(dt, tzinfo=LOCAL):
  """Returns a datetime object localized to the timezone tzinfo.

  Args:
    dt: The datetime object to localize. A timezone naive dt is taken to be
      UTC.
    tzinfo: The timezone of the localized dt.

  Returns:
    A datetime object localized to the timezone tzinfo.
  """
  if not dt.tzinfo:
    dt = dt.replace(tzinfo=UTC)
  return dt.astimezone(tzinfo)


def Now(tzinfo=LOCAL):
  """Returns a timezone aware datetime object for the current time."""
  return datetime.datetime.now(tzinfo)
