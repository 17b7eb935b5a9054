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

"""Client for the automation resource provider, version v1."""

from __future__ import absolute_import

from apitools.base.py import base_api
from rmcmdlets.third_party.apis.automation.v1 import automation_v1_messages as messages

_SCHEDULES_PATH = (
    'subscriptions/{subscriptionId}/resourceGroups/{resourceGroupName}/'
    'providers/Microsoft.Automation/automationAccounts/'
    '{automationAccountName}/schedules')


class AutomationV1(base_api.BaseApiClient):
  """Client for the automation v1 API."""

  MESSAGES_MODULE = messages
  BASE_URL = 'https://management.azure.com/'
  MTLS_BASE_URL = ''

  _PACKAGE = 'automation'
  _SCOPES = ['https://management.azure.com/.default']
  _VERSION = 'v1'
  _CLIENT_ID = ''
  _CLIENT_SECRET = ''
  _USER_AGENT = 'rmcmdlets'
  _CLIENT_CLASS_NAME = 'AutomationV1'
  _URL_VERSION = 'v1'
  _API_KEY = None

  def __init__(self, url='', credentials=None,
               get_credentials=True, http=None, model=None,
               log_request=False, log_response=False,
               credentials_args=None, default_global_params=None,
               additional_http_headers=None, response_encoding=None):
    """Create a new automation handle."""
    url = url or self.BASE_URL
    super(AutomationV1, self).__init__(
        url, credentials=credentials,
        get_credentials=get_credentials, http=http, model=model,
        log_request=log_request, log_response=log_response,
        credentials_args=credentials_args,
        default_global_params=default_global_params,
        additional_http_headers=additional_http_headers,
        response_encoding=response_encoding)
    self.schedules = self.SchedulesService(self)

  class SchedulesService(base_api.BaseApiService):
    """Service class for the schedules resource."""

    _NAME = 'schedules'

    def __init__(self, client):
      super(AutomationV1.SchedulesService, self).__init__(client)
      self._upload_configs = {
          }

    def CreateOrUpdate(self, request, global_params=None):
      r"""Creates or replaces a schedule.

      Args:
        request: (AutomationSchedulesCreateOrUpdateRequest) input message
        global_params: (StandardQueryParameters, default: None) global arguments
      Returns:
        (Schedule) The response message.
      """
      config = self.GetMethodConfig('CreateOrUpdate')
      return self._RunMethod(
          config, request, global_params=global_params)

    CreateOrUpdate.method_config = lambda: base_api.ApiMethodInfo(
        http_method='PUT',
        method_id='automation.schedules.createOrUpdate',
        ordered_params=['subscriptionId', 'resourceGroupName', 'automationAccountName', 'scheduleName'],
        path_params=['automationAccountName', 'resourceGroupName', 'scheduleName', 'subscriptionId'],
        query_params=['apiVersion'],
        relative_path=_SCHEDULES_PATH + '/{scheduleName}',
        request_field='schedule',
        request_type_name='AutomationSchedulesCreateOrUpdateRequest',
        response_type_name='Schedule',
        supports_download=False,
    )

    def Delete(self, request, global_params=None):
      r"""Deletes a schedule.

      Args:
        request: (AutomationSchedulesDeleteRequest) input message
        global_params: (StandardQueryParameters, default: None) global arguments
      Returns:
        (AutomationSchedulesDeleteResponse) The response message.
      """
      config = self.GetMethodConfig('Delete')
      return self._RunMethod(
          config, request, global_params=global_params)

    Delete.method_config = lambda: base_api.ApiMethodInfo(
        http_method='DELETE',
        method_id='automation.schedules.delete',
        ordered_params=['subscriptionId', 'resourceGroupName', 'automationAccountName', 'scheduleName'],
        path_params=['automationAccountName', 'resourceGroupName', 'scheduleName', 'subscriptionId'],
        query_params=['apiVersion'],
        relative_path=_SCHEDULES_PATH + '/{scheduleName}',
        request_field='',
        request_type_name='AutomationSchedulesDeleteRequest',
        response_type_name='AutomationSchedulesDeleteResponse',
        supports_download=False,
    )

    def Get(self, request, global_params=None):
      r"""Gets a schedule.

      Args:
        request: (AutomationSchedulesGetRequest) input message
        global_params: (StandardQueryParameters, default: None) global arguments
      Returns:
        (Schedule) The response message.
      """
      config = self.GetMethodConfig('Get')
      return self._RunMethod(
          config, request, global_params=global_params)

    Get.method_config = lambda: base_api.ApiMethodInfo(
        http_method='GET',
        method_id='automation.schedules.get',
        ordered_params=['subscriptionId', 'resourceGroupName', 'automationAccountName', 'scheduleName'],
        path_params=['automationAccountName', 'resourceGroupName', 'scheduleName', 'subscriptionId'],
        query_params=['apiVersion'],
        relative_path=_SCHEDULES_PATH + '/{scheduleName}',
        request_field='',
        request_type_name='AutomationSchedulesGetRequest',
        response_type_name='Schedule',
        supports_download=False,
    )

    def ListByAutomationAccount(self, request, global_params=None):
      r"""Lists the schedules of an automation account.

      Args:
        request: (AutomationSchedulesListByAutomationAccountRequest) input message
        global_params: (StandardQueryParameters, default: None) global arguments
      Returns:
        (ScheduleListResult) The response message.
      """
      config = self.GetMethodConfig('ListByAutomationAccount')
      return self._RunMethod(
          config, request, global_params=global_params)

    ListByAutomationAccount.method_config = lambda: base_api.ApiMethodInfo(
        http_method='GET',
        method_id='automation.schedules.listByAutomationAccount',
        ordered_params=['subscriptionId', 'resourceGroupName', 'automationAccountName'],
        path_params=['automationAccountName', 'resourceGroupName', 'subscriptionId'],
        query_params=['apiVersion'],
        relative_path=_SCHEDULES_PATH,
        request_field='',
        request_type_name='AutomationSchedulesListByAutomationAccountRequest',
        response_type_name='ScheduleListResult',
        supports_download=False,
    )
