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

"""Client for the network resource provider, version v1."""

from __future__ import absolute_import

from apitools.base.py import base_api
from rmcmdlets.third_party.apis.network.v1 import network_v1_messages as messages

_LOAD_BALANCERS_PATH = (
    'subscriptions/{subscriptionId}/resourceGroups/{resourceGroupName}/'
    'providers/Microsoft.Network/loadBalancers')


class NetworkV1(base_api.BaseApiClient):
  """Client for the network v1 API."""

  MESSAGES_MODULE = messages
  BASE_URL = 'https://management.azure.com/'
  MTLS_BASE_URL = ''

  _PACKAGE = 'network'
  _SCOPES = ['https://management.azure.com/.default']
  _VERSION = 'v1'
  _CLIENT_ID = ''
  _CLIENT_SECRET = ''
  _USER_AGENT = 'rmcmdlets'
  _CLIENT_CLASS_NAME = 'NetworkV1'
  _URL_VERSION = 'v1'
  _API_KEY = None

  def __init__(self, url='', credentials=None,
               get_credentials=True, http=None, model=None,
               log_request=False, log_response=False,
               credentials_args=None, default_global_params=None,
               additional_http_headers=None, response_encoding=None):
    """Create a new network handle."""
    url = url or self.BASE_URL
    super(NetworkV1, self).__init__(
        url, credentials=credentials,
        get_credentials=get_credentials, http=http, model=model,
        log_request=log_request, log_response=log_response,
        credentials_args=credentials_args,
        default_global_params=default_global_params,
        additional_http_headers=additional_http_headers,
        response_encoding=response_encoding)
    self.loadBalancers = self.LoadBalancersService(self)

  class LoadBalancersService(base_api.BaseApiService):
    """Service class for the loadBalancers resource."""

    _NAME = 'loadBalancers'

    def __init__(self, client):
      super(NetworkV1.LoadBalancersService, self).__init__(client)
      self._upload_configs = {
          }

    def CreateOrUpdate(self, request, global_params=None):
      r"""Creates or replaces a load balancer.

      Args:
        request: (NetworkLoadBalancersCreateOrUpdateRequest) input message
        global_params: (StandardQueryParameters, default: None) global arguments
      Returns:
        (LoadBalancer) The response message.
      """
      config = self.GetMethodConfig('CreateOrUpdate')
      return self._RunMethod(
          config, request, global_params=global_params)

    CreateOrUpdate.method_config = lambda: base_api.ApiMethodInfo(
        http_method='PUT',
        method_id='network.loadBalancers.createOrUpdate',
        ordered_params=['subscriptionId', 'resourceGroupName', 'loadBalancerName'],
        path_params=['loadBalancerName', 'resourceGroupName', 'subscriptionId'],
        query_params=['apiVersion'],
        relative_path=_LOAD_BALANCERS_PATH + '/{loadBalancerName}',
        request_field='loadBalancer',
        request_type_name='NetworkLoadBalancersCreateOrUpdateRequest',
        response_type_name='LoadBalancer',
        supports_download=False,
    )

    def Delete(self, request, global_params=None):
      r"""Deletes a load balancer.

      Args:
        request: (NetworkLoadBalancersDeleteRequest) input message
        global_params: (StandardQueryParameters, default: None) global arguments
      Returns:
        (NetworkLoadBalancersDeleteResponse) The response message.
      """
      config = self.GetMethodConfig('Delete')
      return self._RunMethod(
          config, request, global_params=global_params)

    Delete.method_config = lambda: base_api.ApiMethodInfo(
        http_method='DELETE',
        method_id='network.loadBalancers.delete',
        ordered_params=['subscriptionId', 'resourceGroupName', 'loadBalancerName'],
        path_params=['loadBalancerName', 'resourceGroupName', 'subscriptionId'],
        query_params=['apiVersion'],
        relative_path=_LOAD_BALANCERS_PATH + '/{loadBalancerName}',
        request_field='',
        request_type_name='NetworkLoadBalancersDeleteRequest',
        response_type_name='NetworkLoadBalancersDeleteResponse',
        supports_download=False,
    )

    def Get(self, request, global_params=None):
      r"""Gets a load balancer.

      Args:
        request: (NetworkLoadBalancersGetRequest) input message
        global_params: (StandardQueryParameters, default: None) global arguments
      Returns:
        (LoadBalancer) The response message.
      """
      config = self.GetMethodConfig('Get')
      return self._RunMethod(
          config, request, global_params=global_params)

    Get.method_config = lambda: base_api.ApiMethodInfo(
        http_method='GET',
        method_id='network.loadBalancers.get',
        ordered_params=['subscriptionId', 'resourceGroupName', 'loadBalancerName'],
        path_params=['loadBalancerName', 'resourceGroupName', 'subscriptionId'],
        query_params=['apiVersion'],
        relative_path=_LOAD_BALANCERS_PATH + '/{loadBalancerName}',
        request_field='',
        request_type_name='NetworkLoadBalancersGetRequest',
        response_type_name='LoadBalancer',
        supports_download=False,
    )

    def List(self, request, global_params=None):
      r"""Lists the load balancers in a resource group.

      Args:
        request: (NetworkLoadBalancersListRequest) input message
        global_params: (StandardQueryParameters, default: None) global arguments
      Returns:
        (LoadBalancerListResult) The response message.
      """
      config = self.GetMethodConfig('List')
      return self._RunMethod(
          config, request, global_params=global_params)

    List.method_config = lambda: base_api.ApiMethodInfo(
        http_method='GET',
        method_id='network.loadBalancers.list',
        ordered_params=['subscriptionId', 'resourceGroupName'],
        path_params=['resourceGroupName', 'subscriptionId'],
        query_params=['apiVersion'],
        relative_path=_LOAD_BALANCERS_PATH,
        request_field='',
        request_type_name='NetworkLoadBalancersListRequest',
        response_type_name='LoadBalancerListResult',
        supports_download=False,
    )

    def ListAll(self, request, global_params=None):
      r"""Lists the load balancers in a subscription.

      Args:
        request: (NetworkLoadBalancersListAllRequest) input message
        global_params: (StandardQueryParameters, default: None) global arguments
      Returns:
        (LoadBalancerListResult) The response message.
      """
      config = self.GetMethodConfig('ListAll')
      return self._RunMethod(
          config, request, global_params=global_params)

    ListAll.method_config = lambda: base_api.ApiMethodInfo(
        http_method='GET',
        method_id='network.loadBalancers.listAll',
        ordered_params=['subscriptionId'],
        path_params=['subscriptionId'],
        query_params=['apiVersion'],
        relative_path=(
            'subscriptions/{subscriptionId}/providers/Microsoft.Network/'
            'loadBalancers'),
        request_field='',
        request_type_name='NetworkLoadBalancersListAllRequest',
        response_type_name='LoadBalancerListResult',
        supports_download=False,
    )
