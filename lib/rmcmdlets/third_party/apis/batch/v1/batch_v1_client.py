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

"""Client for the batch resource provider, version v1."""

from __future__ import absolute_import

from apitools.base.py import base_api
from rmcmdlets.third_party.apis.batch.v1 import batch_v1_messages as messages

_ACCOUNT_PATH = (
    'subscriptions/{subscriptionId}/resourceGroups/{resourceGroupName}/'
    'providers/Microsoft.Batch/batchAccounts/{accountName}')
_ORDERED_ACCOUNT_PARAMS = ['subscriptionId', 'resourceGroupName', 'accountName']
_ACCOUNT_PATH_PARAMS = ['accountName', 'resourceGroupName', 'subscriptionId']


class BatchV1(base_api.BaseApiClient):
  """Client for the batch v1 API."""

  MESSAGES_MODULE = messages
  BASE_URL = 'https://management.azure.com/'
  MTLS_BASE_URL = ''

  _PACKAGE = 'batch'
  _SCOPES = ['https://management.azure.com/.default']
  _VERSION = 'v1'
  _CLIENT_ID = ''
  _CLIENT_SECRET = ''
  _USER_AGENT = 'rmcmdlets'
  _CLIENT_CLASS_NAME = 'BatchV1'
  _URL_VERSION = 'v1'
  _API_KEY = None

  def __init__(self, url='', credentials=None,
               get_credentials=True, http=None, model=None,
               log_request=False, log_response=False,
               credentials_args=None, default_global_params=None,
               additional_http_headers=None, response_encoding=None):
    """Create a new batch handle."""
    url = url or self.BASE_URL
    super(BatchV1, self).__init__(
        url, credentials=credentials,
        get_credentials=get_credentials, http=http, model=model,
        log_request=log_request, log_response=log_response,
        credentials_args=credentials_args,
        default_global_params=default_global_params,
        additional_http_headers=additional_http_headers,
        response_encoding=response_encoding)
    self.batchAccount = self.BatchAccountService(self)

  class BatchAccountService(base_api.BaseApiService):
    """Service class for the batchAccount resource."""

    _NAME = 'batchAccount'

    def __init__(self, client):
      super(BatchV1.BatchAccountService, self).__init__(client)
      self._upload_configs = {
          }

    def Create(self, request, global_params=None):
      r"""Creates or replaces a batch account.

      Args:
        request: (BatchBatchAccountCreateRequest) input message
        global_params: (StandardQueryParameters, default: None) global arguments
      Returns:
        (BatchAccount) The response message.
      """
      config = self.GetMethodConfig('Create')
      return self._RunMethod(
          config, request, global_params=global_params)

    Create.method_config = lambda: base_api.ApiMethodInfo(
        http_method='PUT',
        method_id='batch.batchAccount.create',
        ordered_params=_ORDERED_ACCOUNT_PARAMS,
        path_params=_ACCOUNT_PATH_PARAMS,
        query_params=['apiVersion'],
        relative_path=_ACCOUNT_PATH,
        request_field='batchAccountCreateParameters',
        request_type_name='BatchBatchAccountCreateRequest',
        response_type_name='BatchAccount',
        supports_download=False,
    )

    def Delete(self, request, global_params=None):
      r"""Deletes a batch account.

      Args:
        request: (BatchBatchAccountDeleteRequest) input message
        global_params: (StandardQueryParameters, default: None) global arguments
      Returns:
        (BatchBatchAccountDeleteResponse) The response message.
      """
      config = self.GetMethodConfig('Delete')
      return self._RunMethod(
          config, request, global_params=global_params)

    Delete.method_config = lambda: base_api.ApiMethodInfo(
        http_method='DELETE',
        method_id='batch.batchAccount.delete',
        ordered_params=_ORDERED_ACCOUNT_PARAMS,
        path_params=_ACCOUNT_PATH_PARAMS,
        query_params=['apiVersion'],
        relative_path=_ACCOUNT_PATH,
        request_field='',
        request_type_name='BatchBatchAccountDeleteRequest',
        response_type_name='BatchBatchAccountDeleteResponse',
        supports_download=False,
    )

    def Get(self, request, global_params=None):
      r"""Gets a batch account.

      Args:
        request: (BatchBatchAccountGetRequest) input message
        global_params: (StandardQueryParameters, default: None) global arguments
      Returns:
        (BatchAccount) The response message.
      """
      config = self.GetMethodConfig('Get')
      return self._RunMethod(
          config, request, global_params=global_params)

    Get.method_config = lambda: base_api.ApiMethodInfo(
        http_method='GET',
        method_id='batch.batchAccount.get',
        ordered_params=_ORDERED_ACCOUNT_PARAMS,
        path_params=_ACCOUNT_PATH_PARAMS,
        query_params=['apiVersion'],
        relative_path=_ACCOUNT_PATH,
        request_field='',
        request_type_name='BatchBatchAccountGetRequest',
        response_type_name='BatchAccount',
        supports_download=False,
    )

    def GetKeys(self, request, global_params=None):
      r"""Lists the access keys of a batch account.

      Args:
        request: (BatchBatchAccountGetKeysRequest) input message
        global_params: (StandardQueryParameters, default: None) global arguments
      Returns:
        (BatchAccountKeys) The response message.
      """
      config = self.GetMethodConfig('GetKeys')
      return self._RunMethod(
          config, request, global_params=global_params)

    GetKeys.method_config = lambda: base_api.ApiMethodInfo(
        http_method='POST',
        method_id='batch.batchAccount.getKeys',
        ordered_params=_ORDERED_ACCOUNT_PARAMS,
        path_params=_ACCOUNT_PATH_PARAMS,
        query_params=['apiVersion'],
        relative_path=_ACCOUNT_PATH + '/listKeys',
        request_field='',
        request_type_name='BatchBatchAccountGetKeysRequest',
        response_type_name='BatchAccountKeys',
        supports_download=False,
    )

    def List(self, request, global_params=None):
      r"""Lists the batch accounts in a subscription.

      Args:
        request: (BatchBatchAccountListRequest) input message
        global_params: (StandardQueryParameters, default: None) global arguments
      Returns:
        (BatchAccountListResult) The response message.
      """
      config = self.GetMethodConfig('List')
      return self._RunMethod(
          config, request, global_params=global_params)

    List.method_config = lambda: base_api.ApiMethodInfo(
        http_method='GET',
        method_id='batch.batchAccount.list',
        ordered_params=['subscriptionId'],
        path_params=['subscriptionId'],
        query_params=['apiVersion'],
        relative_path=(
            'subscriptions/{subscriptionId}/providers/Microsoft.Batch/'
            'batchAccounts'),
        request_field='',
        request_type_name='BatchBatchAccountListRequest',
        response_type_name='BatchAccountListResult',
        supports_download=False,
    )

    def ListByResourceGroup(self, request, global_params=None):
      r"""Lists the batch accounts in a resource group.

      Args:
        request: (BatchBatchAccountListByResourceGroupRequest) input message
        global_params: (StandardQueryParameters, default: None) global arguments
      Returns:
        (BatchAccountListResult) The response message.
      """
      config = self.GetMethodConfig('ListByResourceGroup')
      return self._RunMethod(
          config, request, global_params=global_params)

    ListByResourceGroup.method_config = lambda: base_api.ApiMethodInfo(
        http_method='GET',
        method_id='batch.batchAccount.listByResourceGroup',
        ordered_params=['subscriptionId', 'resourceGroupName'],
        path_params=['resourceGroupName', 'subscriptionId'],
        query_params=['apiVersion'],
        relative_path=(
            'subscriptions/{subscriptionId}/resourceGroups/'
            '{resourceGroupName}/providers/Microsoft.Batch/batchAccounts'),
        request_field='',
        request_type_name='BatchBatchAccountListByResourceGroupRequest',
        response_type_name='BatchAccountListResult',
        supports_download=False,
    )

    def RegenerateKey(self, request, global_params=None):
      r"""Regenerates one of the access keys of a batch account.

      Args:
        request: (BatchBatchAccountRegenerateKeyRequest) input message
        global_params: (StandardQueryParameters, default: None) global arguments
      Returns:
        (BatchAccountKeys) The response message.
      """
      config = self.GetMethodConfig('RegenerateKey')
      return self._RunMethod(
          config, request, global_params=global_params)

    RegenerateKey.method_config = lambda: base_api.ApiMethodInfo(
        http_method='POST',
        method_id='batch.batchAccount.regenerateKey',
        ordered_params=_ORDERED_ACCOUNT_PARAMS,
        path_params=_ACCOUNT_PATH_PARAMS,
        query_params=['apiVersion'],
        relative_path=_ACCOUNT_PATH + '/regenerateKeys',
        request_field='batchAccountRegenerateKeyParameters',
        request_type_name='BatchBatchAccountRegenerateKeyRequest',
        response_type_name='BatchAccountKeys',
        supports_download=False,
    )
