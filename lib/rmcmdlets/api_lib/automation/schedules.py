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

"""Utilities for automation account schedules.

The API exchanges schedules as a single wire message whose frequency decides
which interval field applies. Commands present them as OneTimeSchedule,
DailySchedule or HourlySchedule objects with times in the local timezone.
"""

from __future__ import absolute_import
from __future__ import division
from __future__ import unicode_literals

from apitools.base.py import exceptions as apitools_exceptions
from rmcmdlets.api_lib.util import apis
from rmcmdlets.api_lib.util import paging
from rmcmdlets.core import exceptions
from rmcmdlets.core import properties
from rmcmdlets.core.util import times

from six.moves import http_client as httplib


API_NAME = 'automation'
API_VERSION = 'v1'

ONE_TIME = 'OneTime'
DAY = 'Day'
HOUR = 'Hour'


class InvalidScheduleModelError(exceptions.Error):
  """A wire schedule lacks the interval its frequency requires."""

  def __init__(self, kind, name):
    super(InvalidScheduleModelError, self).__init__(
        'The {0} schedule [{1}] is invalid.'.format(kind, name))


def GetClientInstance(http_client=None):
  return apis.GetClientInstance(API_NAME, API_VERSION, http_client=http_client)


def GetMessagesModule(client=None):
  client = client or GetClientInstance()
  return client.MESSAGES_MODULE


def _ToLocalTime(value):
  """Parses a UTC wire timestamp and returns it in the local timezone."""
  if not value:
    return None
  dt = times.ParseDateTime(value, tzinfo=times.UTC)
  try:
    return times.LocalizeDateTime(dt, times.LOCAL)
  except OverflowError:
    # The far end of the calendar, e.g. a 9999-12-31 expiry east of UTC.
    return dt


def _ToWireTime(dt):
  if dt is None:
    return None
  return times.FormatDateTime(dt, tzinfo=times.UTC)


class Schedule(object):
  """A schedule of an automation account, as shown to the user.

  Attributes:
    id: str, The schedule id.
    account_id: str, The id of the owning automation account.
    name: str, The schedule name.
    description: str, The schedule description.
    frequency: str, One of OneTime, Day or Hour.
    is_enabled: bool, Whether the schedule is enabled.
    start_time: datetime, The first run, local time.
    expiry_time: datetime, When the schedule expires, local time.
    creation_time: datetime, When the schedule was created, local time.
    last_modified_time: datetime, When the schedule last changed, local time.
    next_run: datetime, The next run, local time, or None.
  """

  frequency = None

  def __init__(self, schedule=None):
    self.id = None
    self.account_id = None
    self.name = None
    self.description = None
    self.frequency = type(self).frequency
    self.is_enabled = None
    self.start_time = None
    self.expiry_time = None
    self.creation_time = None
    self.last_modified_time = None
    self.next_run = None
    if schedule is not None:
      self._Populate(schedule)

  def _Populate(self, schedule):
    self.id = schedule.id
    self.account_id = schedule.accountId
    self.name = schedule.name
    self.description = schedule.description
    self.is_enabled = schedule.isEnabled
    self.start_time = _ToLocalTime(schedule.startTime)
    self.expiry_time = _ToLocalTime(schedule.expiryTime)
    self.creation_time = _ToLocalTime(schedule.creationTime)
    self.last_modified_time = _ToLocalTime(schedule.lastModifiedTime)
    self.next_run = _ToLocalTime(schedule.nextRun)

  def __eq__(self, other):
    return (isinstance(other, self.__class__)
            and self.__dict__ == other.__dict__)

  def __ne__(self, other):
    return not self.__eq__(other)

  def __repr__(self):
    return '{0}(name={1!r})'.format(type(self).__name__, self.name)


class OneTimeSchedule(Schedule):
  """A schedule that runs once."""

  frequency = ONE_TIME


class DailySchedule(Schedule):
  """A schedule that runs every day_interval days."""

  frequency = DAY

  def __init__(self, schedule=None):
    self.day_interval = None
    super(DailySchedule, self).__init__(schedule)

  def _Populate(self, schedule):
    if schedule.dayInterval is None:
      raise InvalidScheduleModelError('daily', schedule.name)
    super(DailySchedule, self)._Populate(schedule)
    self.day_interval = schedule.dayInterval


class HourlySchedule(Schedule):
  """A schedule that runs every hour_interval hours."""

  frequency = HOUR

  def __init__(self, schedule=None):
    self.hour_interval = None
    super(HourlySchedule, self).__init__(schedule)

  def _Populate(self, schedule):
    if schedule.hourInterval is None:
      raise InvalidScheduleModelError('hourly', schedule.name)
    super(HourlySchedule, self)._Populate(schedule)
    self.hour_interval = schedule.hourInterval


_MODELS = {
    ONE_TIME: OneTimeSchedule,
    DAY: DailySchedule,
    HOUR: HourlySchedule,
}


def ScheduleFromMessage(schedule):
  """Returns the presentation model for a wire Schedule message.

  A schedule without a frequency runs once.

  Args:
    schedule: The automation API Schedule message.

  Raises:
    InvalidScheduleModelError: A daily or hourly schedule lacks its interval.

  Returns:
    Schedule, One of OneTimeSchedule, DailySchedule or HourlySchedule.
  """
  frequency = schedule.frequency.name if schedule.frequency else ONE_TIME
  return _MODELS[frequency](schedule)


def BuildSchedule(messages, name, start_time, expiry_time=None,
                  description=None, day_interval=None, hour_interval=None):
  """Builds the Schedule message sent to CreateOrUpdate.

  Args:
    messages: The automation API messages module.
    name: str, The schedule name.
    start_time: datetime, The first run.
    expiry_time: datetime, When the schedule expires, or None.
    description: str, The schedule description, or None.
    day_interval: int, Run every day_interval days.
    hour_interval: int, Run every hour_interval hours.

  Returns:
    messages.Schedule, The request body. Without an interval the schedule
    runs once.
  """
  frequency_enum = messages.Schedule.FrequencyValueValuesEnum
  schedule = messages.Schedule(
      name=name,
      description=description,
      startTime=_ToWireTime(start_time),
      expiryTime=_ToWireTime(expiry_time))
  if day_interval is not None:
    schedule.frequency = frequency_enum.Day
    schedule.dayInterval = day_interval
  elif hour_interval is not None:
    schedule.frequency = frequency_enum.Hour
    schedule.hourInterval = hour_interval
  else:
    schedule.frequency = frequency_enum.OneTime
  return schedule


class SchedulesClient(object):
  """Client for the schedules service in the automation API."""

  def __init__(self, client=None, messages=None, subscription=None):
    self.client = client or GetClientInstance()
    self.messages = messages or self.client.MESSAGES_MODULE
    self._service = self.client.schedules
    self._subscription = subscription

  @property
  def subscription(self):
    return (self._subscription or
            properties.VALUES.core.subscription.Get(required=True))

  def Get(self, resource_group, account, name):
    request = self.messages.AutomationSchedulesGetRequest(
        automationAccountName=account,
        resourceGroupName=resource_group,
        scheduleName=name,
        subscriptionId=self.subscription)
    return self._service.Get(request)

  def Exists(self, resource_group, account, name):
    try:
      self.Get(resource_group, account, name)
    except apitools_exceptions.HttpError as e:
      if getattr(e, 'status_code', None) == httplib.NOT_FOUND:
        return False
      raise
    return True

  def CreateOrUpdate(self, resource_group, account, name, schedule):
    request = self.messages.AutomationSchedulesCreateOrUpdateRequest(
        automationAccountName=account,
        resourceGroupName=resource_group,
        schedule=schedule,
        scheduleName=name,
        subscriptionId=self.subscription)
    return self._service.CreateOrUpdate(request)

  def Delete(self, resource_group, account, name):
    request = self.messages.AutomationSchedulesDeleteRequest(
        automationAccountName=account,
        resourceGroupName=resource_group,
        scheduleName=name,
        subscriptionId=self.subscription)
    return self._service.Delete(request)

  def List(self, resource_group, account, limit=None):
    request = self.messages.AutomationSchedulesListByAutomationAccountRequest(
        automationAccountName=account,
        resourceGroupName=resource_group,
        subscriptionId=self.subscription)
    return paging.YieldFromNextLink(self._service, 'ListByAutomationAccount',
                                    request, limit=limit)
