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

"""Utilities for the batch accounts service of the batch API."""

from __future__ import absolute_import
from __future__ import division
from __future__ import unicode_literals

from apitools.base.py import encoding
from apitools.base.py import exceptions as apitools_exceptions
from rmcmdlets.api_lib.util import apis
from rmcmdlets.api_lib.util import paging
from rmcmdlets.core import properties

from six.moves import http_client as httplib


API_NAME = 'batch'
API_VERSION = 'v1'

KEY_TYPES = ('primary', 'secondary')


def GetClientInstance(http_client=None):
  return apis.GetClientInstance(API_NAME, API_VERSION, http_client=http_client)


def GetMessagesModule(client=None):
  client = client or GetClientInstance()
  return client.MESSAGES_MODULE


class BatchAccountKeys(object):
  """The access keys of a batch account, tagged with the account name."""

  def __init__(self, account_name, keys):
    self.account_name = account_name
    self.primary = keys.primary
    self.secondary = keys.secondary

  def __eq__(self, other):
    return (isinstance(other, self.__class__)
            and self.__dict__ == other.__dict__)

  def __ne__(self, other):
    return not self.__eq__(other)


class BatchAccountsClient(object):
  """Client for the batch accounts service in the batch API."""

  def __init__(self, client=None, messages=None, subscription=None):
    self.client = client or GetClientInstance()
    self.messages = messages or self.client.MESSAGES_MODULE
    self._service = self.client.batchAccount
    self._subscription = subscription

  @property
  def subscription(self):
    return (self._subscription or
            properties.VALUES.core.subscription.Get(required=True))

  def _AccountRequest(self, request_type, resource_group, name, **kwargs):
    return request_type(
        accountName=name,
        resourceGroupName=resource_group,
        subscriptionId=self.subscription,
        **kwargs)

  def Get(self, resource_group, name):
    return self._service.Get(self._AccountRequest(
        self.messages.BatchBatchAccountGetRequest, resource_group, name))

  def Exists(self, resource_group, name):
    try:
      self.Get(resource_group, name)
    except apitools_exceptions.HttpError as e:
      if getattr(e, 'status_code', None) == httplib.NOT_FOUND:
        return False
      raise
    return True

  def Create(self, resource_group, name, location, tags=None):
    """Creates or replaces a batch account.

    Args:
      resource_group: str, The resource group name.
      name: str, The account name.
      location: str, The region of the account.
      tags: {str: str}, Resource tags or None.

    Returns:
      BatchAccount, The account as returned by the API.
    """
    parameters = self.messages.BatchAccountCreateParameters(location=location)
    if tags:
      parameters.tags = encoding.DictToAdditionalPropertyMessage(
          tags, self.messages.BatchAccountCreateParameters.TagsValue,
          sort_items=True)
    return self._service.Create(self._AccountRequest(
        self.messages.BatchBatchAccountCreateRequest, resource_group, name,
        batchAccountCreateParameters=parameters))

  def Delete(self, resource_group, name):
    """Deletes a batch account; None when the API accepted it for later."""
    try:
      return self._service.Delete(self._AccountRequest(
          self.messages.BatchBatchAccountDeleteRequest, resource_group, name))
    except apitools_exceptions.HttpError as e:
      if getattr(e, 'status_code', None) == httplib.ACCEPTED:
        return None
      raise

  def List(self, resource_group=None, limit=None):
    if resource_group:
      request = self.messages.BatchBatchAccountListByResourceGroupRequest(
          resourceGroupName=resource_group,
          subscriptionId=self.subscription)
      return paging.YieldFromNextLink(self._service, 'ListByResourceGroup',
                                      request, limit=limit)
    request = self.messages.BatchBatchAccountListRequest(
        subscriptionId=self.subscription)
    return paging.YieldFromNextLink(self._service, 'List', request,
                                    limit=limit)

  def GetKeys(self, resource_group, name):
    keys = self._service.GetKeys(self._AccountRequest(
        self.messages.BatchBatchAccountGetKeysRequest, resource_group, name))
    return BatchAccountKeys(name, keys)

  def RegenerateKey(self, resource_group, name, key_type):
    """Regenerates one access key and returns the resulting keys.

    Args:
      resource_group: str, The resource group name.
      name: str, The account name.
      key_type: str, primary or secondary.

    Returns:
      BatchAccountKeys, The keys after regeneration.
    """
    key_enum = (self.messages.BatchAccountRegenerateKeyParameters
                .KeyNameValueValuesEnum)
    parameters = self.messages.BatchAccountRegenerateKeyParameters(
        keyName=key_enum(key_type.capitalize()))
    keys = self._service.RegenerateKey(self._AccountRequest(
        self.messages.BatchBatchAccountRegenerateKeyRequest, resource_group,
        name, batchAccountRegenerateKeyParameters=parameters))
    return BatchAccountKeys(name, keys)
