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

"""Tests for rmcmdlets.api_lib.automation.schedules."""

from __future__ import absolute_import
from __future__ import division
from __future__ import unicode_literals

import datetime

from dateutil import tz
from rmcmdlets.api_lib.automation import schedules
from rmcmdlets.core.util import times
from rmcmdlets.third_party.apis.automation.v1 import automation_v1_messages
from tests.lib import cli_test_base
from tests.lib import test_case

messages = automation_v1_messages
Frequency = messages.Schedule.FrequencyValueValuesEnum


def _Wire(**kwargs):
  values = dict(
      id='id-1', accountId='account-1', name='nightly',
      description='desc', isEnabled=True,
      startTime='2026-01-02T03:04:05Z',
      expiryTime='2027-01-01T00:00:00Z',
      creationTime='2026-01-01T00:00:00Z',
      lastModifiedTime='2026-01-01T12:00:00Z')
  values.update(kwargs)
  return messages.Schedule(**values)


class ScheduleFromMessageTest(test_case.Base):

  def testHourly(self):
    model = schedules.ScheduleFromMessage(
        _Wire(frequency=Frequency.Hour, hourInterval=4,
              nextRun='2026-01-02T07:04:05Z'))
    self.assertIsInstance(model, schedules.HourlySchedule)
    self.assertEqual(4, model.hour_interval)
    self.assertEqual('Hour', model.frequency)
    self.assertEqual('nightly', model.name)
    self.assertEqual('account-1', model.account_id)
    self.assertTrue(model.is_enabled)
    self.assertEqual(
        datetime.datetime(2026, 1, 2, 3, 4, 5, tzinfo=times.UTC),
        model.start_time)
    self.assertEqual(times.LOCAL, model.start_time.tzinfo)
    self.assertEqual(
        datetime.datetime(2026, 1, 2, 7, 4, 5, tzinfo=times.UTC),
        model.next_run)

  def testHourlyWithoutIntervalIsInvalid(self):
    with self.assertRaisesRegex(
        schedules.InvalidScheduleModelError,
        r'^The hourly schedule \[nightly\] is invalid\.$'):
      schedules.ScheduleFromMessage(_Wire(frequency=Frequency.Hour))

  def testDaily(self):
    model = schedules.ScheduleFromMessage(
        _Wire(frequency=Frequency.Day, dayInterval=2))
    self.assertIsInstance(model, schedules.DailySchedule)
    self.assertEqual(2, model.day_interval)

  def testDailyWithoutIntervalIsInvalid(self):
    with self.assertRaisesRegex(schedules.InvalidScheduleModelError,
                                r'daily schedule \[nightly\]'):
      schedules.ScheduleFromMessage(_Wire(frequency=Frequency.Day))

  def testOneTime(self):
    model = schedules.ScheduleFromMessage(_Wire(frequency=Frequency.OneTime))
    self.assertIsInstance(model, schedules.OneTimeSchedule)
    self.assertIsNone(model.next_run)

  def testNoFrequencyRunsOnce(self):
    self.assertIsInstance(schedules.ScheduleFromMessage(_Wire()),
                          schedules.OneTimeSchedule)

  def testMissingTimesStayNone(self):
    model = schedules.ScheduleFromMessage(
        _Wire(frequency=Frequency.OneTime, expiryTime=None))
    self.assertIsNone(model.expiry_time)


class BuildScheduleTest(test_case.Base):

  def SetUp(self):
    self.start = datetime.datetime(2026, 3, 1, 9, 30, tzinfo=times.UTC)

  def testOneTime(self):
    schedule = schedules.BuildSchedule(messages, 's1', self.start)
    self.assertEqual(
        messages.Schedule(name='s1', startTime='2026-03-01T09:30:00Z',
                          frequency=Frequency.OneTime),
        schedule)

  def testHourly(self):
    schedule = schedules.BuildSchedule(
        messages, 's1', self.start, hour_interval=3, description='d')
    self.assertEqual(Frequency.Hour, schedule.frequency)
    self.assertEqual(3, schedule.hourInterval)
    self.assertIsNone(schedule.dayInterval)
    self.assertEqual('d', schedule.description)

  def testDailyWithExpiry(self):
    expiry = datetime.datetime(2026, 4, 1, tzinfo=times.UTC)
    schedule = schedules.BuildSchedule(
        messages, 's1', self.start, expiry_time=expiry, day_interval=1)
    self.assertEqual(Frequency.Day, schedule.frequency)
    self.assertEqual(1, schedule.dayInterval)
    self.assertEqual('2026-04-01T00:00:00Z', schedule.expiryTime)

  def testLocalStartTimeIsSentAsUtc(self):
    offset = tz.tzoffset(None, 2 * 3600)
    start = datetime.datetime(2026, 3, 1, 11, 30, tzinfo=offset)
    schedule = schedules.BuildSchedule(messages, 's1', start)
    self.assertEqual('2026-03-01T09:30:00Z', schedule.startTime)


class SchedulesClientTest(cli_test_base.ApiMockBase):

  API_NAME = 'automation'

  def testListFollowsAccount(self):
    self.client.schedules.ListByAutomationAccount.Expect(
        messages.AutomationSchedulesListByAutomationAccountRequest(
            automationAccountName='acct', resourceGroupName='rg',
            subscriptionId=cli_test_base.SUBSCRIPTION),
        response=messages.ScheduleListResult(value=[_Wire()]))
    client = schedules.SchedulesClient()
    self.assertEqual(['nightly'],
                     [s.name for s in client.List('rg', 'acct')])

  def testExistsNotFound(self):
    self.client.schedules.Get.Expect(
        messages.AutomationSchedulesGetRequest(
            automationAccountName='acct', resourceGroupName='rg',
            scheduleName='nightly',
            subscriptionId=cli_test_base.SUBSCRIPTION),
        exception=cli_test_base.MakeHttpError(404))
    self.assertFalse(
        schedules.SchedulesClient().Exists('rg', 'acct', 'nightly'))
