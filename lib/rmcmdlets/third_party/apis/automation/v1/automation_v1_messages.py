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

"""Message classes for the automation resource provider, version v1.

Schedules of an automation account, as exchanged with the management API
under Microsoft.Automation. Times on the wire are RFC 3339 UTC strings.
"""

from __future__ import absolute_import

from apitools.base.protorpclite import messages as _messages
from apitools.base.py import encoding


package = 'automation'

API_VERSION = '2015-10-31'


class Schedule(_messages.Message):
  r"""A schedule of an automation account.

  Enums:
    FrequencyValueValuesEnum: How often the schedule fires.

  Fields:
    accountId: The id of the automation account that owns the schedule.
    creationTime: When the schedule was created.
    dayInterval: The number of days between runs of a Day schedule.
    description: The description of the schedule.
    expiryTime: When the schedule stops firing.
    frequency: How often the schedule fires.
    hourInterval: The number of hours between runs of an Hour schedule.
    id: Resource Id.
    isEnabled: Whether the schedule is enabled.
    lastModifiedTime: When the schedule was last modified.
    name: The name of the schedule.
    nextRun: The next time the schedule fires, if any.
    startTime: When the schedule starts firing.
  """

  class FrequencyValueValuesEnum(_messages.Enum):
    r"""How often the schedule fires.

    Values:
      OneTime: The schedule fires once, at its start time.
      Day: The schedule fires every dayInterval days.
      Hour: The schedule fires every hourInterval hours.
    """
    OneTime = 0
    Day = 1
    Hour = 2

  accountId = _messages.StringField(1)
  creationTime = _messages.StringField(2)
  dayInterval = _messages.IntegerField(3, variant=_messages.Variant.INT32)
  description = _messages.StringField(4)
  expiryTime = _messages.StringField(5)
  frequency = _messages.EnumField('FrequencyValueValuesEnum', 6)
  hourInterval = _messages.IntegerField(7, variant=_messages.Variant.INT32)
  id = _messages.StringField(8)
  isEnabled = _messages.BooleanField(9)
  lastModifiedTime = _messages.StringField(10)
  name = _messages.StringField(11)
  nextRun = _messages.StringField(12)
  startTime = _messages.StringField(13)


class ScheduleListResult(_messages.Message):
  r"""Response for a list schedules call.

  Fields:
    nextLink: The URL to get the next page of results.
    value: The schedules in this page.
  """

  nextLink = _messages.StringField(1)
  value = _messages.MessageField('Schedule', 2, repeated=True)


class AutomationSchedulesCreateOrUpdateRequest(_messages.Message):
  r"""A AutomationSchedulesCreateOrUpdateRequest object.

  Fields:
    apiVersion: The management API version.
    automationAccountName: The name of the automation account.
    resourceGroupName: The name of the resource group.
    schedule: A Schedule resource to be passed as the request body.
    scheduleName: The name of the schedule.
    subscriptionId: The subscription that owns the resource group.
  """

  apiVersion = _messages.StringField(1, default=API_VERSION)
  automationAccountName = _messages.StringField(2, required=True)
  resourceGroupName = _messages.StringField(3, required=True)
  schedule = _messages.MessageField('Schedule', 4)
  scheduleName = _messages.StringField(5, required=True)
  subscriptionId = _messages.StringField(6, required=True)


class AutomationSchedulesDeleteRequest(_messages.Message):
  r"""A AutomationSchedulesDeleteRequest object.

  Fields:
    apiVersion: The management API version.
    automationAccountName: The name of the automation account.
    resourceGroupName: The name of the resource group.
    scheduleName: The name of the schedule.
    subscriptionId: The subscription that owns the resource group.
  """

  apiVersion = _messages.StringField(1, default=API_VERSION)
  automationAccountName = _messages.StringField(2, required=True)
  resourceGroupName = _messages.StringField(3, required=True)
  scheduleName = _messages.StringField(4, required=True)
  subscriptionId = _messages.StringField(5, required=True)


class AutomationSchedulesDeleteResponse(_messages.Message):
  r"""An empty AutomationSchedulesDelete response."""


class AutomationSchedulesGetRequest(_messages.Message):
  r"""A AutomationSchedulesGetRequest object.

  Fields:
    apiVersion: The management API version.
    automationAccountName: The name of the automation account.
    resourceGroupName: The name of the resource group.
    scheduleName: The name of the schedule.
    subscriptionId: The subscription that owns the resource group.
  """

  apiVersion = _messages.StringField(1, default=API_VERSION)
  automationAccountName = _messages.StringField(2, required=True)
  resourceGroupName = _messages.StringField(3, required=True)
  scheduleName = _messages.StringField(4, required=True)
  subscriptionId = _messages.StringField(5, required=True)


class AutomationSchedulesListByAutomationAccountRequest(_messages.Message):
  r"""A AutomationSchedulesListByAutomationAccountRequest object.

  Fields:
    apiVersion: The management API version.
    automationAccountName: The name of the automation account.
    resourceGroupName: The name of the resource group.
    subscriptionId: The subscription that owns the resource group.
  """

  apiVersion = _messages.StringField(1, default=API_VERSION)
  automationAccountName = _messages.StringField(2, required=True)
  resourceGroupName = _messages.StringField(3, required=True)
  subscriptionId = _messages.StringField(4, required=True)


class StandardQueryParameters(_messages.Message):
  r"""Query parameters accepted by all methods.

  Fields:
    prettyPrint: Returns response with indentations and line breaks.
  """

  prettyPrint = _messages.BooleanField(1, default=True)


for _request in (AutomationSchedulesCreateOrUpdateRequest,
                 AutomationSchedulesDeleteRequest,
                 AutomationSchedulesGetRequest,
                 AutomationSchedulesListByAutomationAccountRequest):
  encoding.AddCustomJsonFieldMapping(_request, 'apiVersion', 'api-version')
