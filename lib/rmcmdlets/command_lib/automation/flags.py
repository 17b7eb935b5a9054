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

"""Flags for the automation schedules commands."""

from __future__ import absolute_import
from __future__ import division
from __future__ import unicode_literals

from rmcmdlets.calliope import arg_parsers


def AddAutomationAccountFlag(parser):
  parser.add_argument(
      '--automation-account',
      required=True,
      help='The automation account that owns the schedule.')


def AddScheduleTimingFlags(parser):
  """Adds the start/expiry flags and the mutually exclusive recurrence."""
  parser.add_argument(
      '--start-time',
      required=True,
      type=arg_parsers.Datetime.Parse,
      help='When the schedule first runs. Times without an offset are local '
      'time.')
  parser.add_argument(
      '--expiry-time',
      type=arg_parsers.Datetime.Parse,
      help='When the schedule expires.')
  parser.add_argument(
      '--description',
      help='A description of the schedule.')
  recurrence = parser.add_mutually_exclusive_group(required=True)
  recurrence.add_argument(
      '--one-time',
      action='store_true',
      help='Run once, at the start time.')
  recurrence.add_argument(
      '--day-interval',
      type=arg_parsers.BoundedInt(1, None),
      help='Run every N days.')
  recurrence.add_argument(
      '--hour-interval',
      type=arg_parsers.BoundedInt(1, None),
      help='Run every N hours.')
