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

"""Command for creating or replacing automation schedules."""

from __future__ import absolute_import
from __future__ import division
from __future__ import unicode_literals

from rmcmdlets.api_lib.automation import schedules
from rmcmdlets.calliope import base
from rmcmdlets.command_lib.automation import flags as automation_flags
from rmcmdlets.command_lib.util import flags
from rmcmdlets.command_lib.util import overwrite
from rmcmdlets.core import log


class Create(base.CreateCommand):
  """Create or replace a schedule of an automation account.

  The schedule runs once (--one-time), every N days (--day-interval) or every
  N hours (--hour-interval) from its start time. An existing schedule of the
  same name is only overwritten after confirmation, or with --force.
  """

  @staticmethod
  def Args(parser):
    flags.AddNameArg(parser, 'schedule')
    automation_flags.AddAutomationAccountFlag(parser)
    flags.AddResourceGroupFlag(parser)
    automation_flags.AddScheduleTimingFlags(parser)
    flags.AddForceFlag(parser, 'Overwrite an existing schedule')

  def Execute(self, context):
    args = context.args
    client = schedules.SchedulesClient()

    if not overwrite.ConfirmOverwrite(
        context,
        lambda: client.Exists(args.resource_group, args.automation_account,
                              args.name),
        args.force, 'schedule', args.name):
      return

    schedule = schedules.BuildSchedule(
        client.messages, args.name, args.start_time,
        expiry_time=args.expiry_time,
        description=args.description,
        day_interval=args.day_interval,
        hour_interval=args.hour_interval)
    created = client.CreateOrUpdate(
        args.resource_group, args.automation_account, args.name, schedule)
    log.CreatedResource(args.name, kind='schedule')
    context.WriteObject(schedules.ScheduleFromMessage(created))
