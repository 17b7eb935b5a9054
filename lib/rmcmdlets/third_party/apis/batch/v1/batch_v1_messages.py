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

"""Message classes for the batch resource provider, version v1.

Batch accounts and their access keys, as exchanged with the management API
under Microsoft.Batch.
"""

from __future__ import absolute_import

from apitools.base.protorpclite import messages as _messages
from apitools.base.py import encoding


package = 'batch'

API_VERSION = '2015-12-01'


class BatchAccountProperties(_messages.Message):
  r"""Properties of a batch account.

  Fields:
    accountEndpoint: The endpoint used by the batch service for the account.
    provisioningState: The provisioning state of the account.
  """

  accountEndpoint = _messages.StringField(1)
  provisioningState = _messages.StringField(2)


class BatchAccount(_messages.Message):
  r"""A batch account resource.

  Messages:
    TagsValue: Resource tags.

  Fields:
    id: Resource Id.
    location: Resource location.
    name: Resource name.
    properties: The properties of the account.
    tags: Resource tags.
    type: Resource type.
  """

  @encoding.MapUnrecognizedFields('additionalProperties')
  class TagsValue(_messages.Message):
    r"""Resource tags.

    Messages:
      AdditionalProperty: An additional property for a TagsValue object.

    Fields:
      additionalProperties: Additional properties of type TagsValue
    """

    class AdditionalProperty(_messages.Message):
      r"""An additional property for a TagsValue object.

      Fields:
        key: Name of the additional property.
        value: A string attribute.
      """

      key = _messages.StringField(1)
      value = _messages.StringField(2)

    additionalProperties = _messages.MessageField('AdditionalProperty', 1, repeated=True)

  id = _messages.StringField(1)
  location = _messages.StringField(2)
  name = _messages.StringField(3)
  properties = _messages.MessageField('BatchAccountProperties', 4)
  tags = _messages.MessageField('TagsValue', 5)
  type = _messages.StringField(6)


class BatchAccountCreateParameters(_messages.Message):
  r"""Parameters supplied to the create call.

  Messages:
    TagsValue: Resource tags.

  Fields:
    location: The region in which to create the account.
    tags: Resource tags.
  """

  @encoding.MapUnrecognizedFields('additionalProperties')
  class TagsValue(_messages.Message):
    r"""Resource tags.

    Messages:
      AdditionalProperty: An additional property for a TagsValue object.

    Fields:
      additionalProperties: Additional properties of type TagsValue
    """

    class AdditionalProperty(_messages.Message):
      r"""An additional property for a TagsValue object.

      Fields:
        key: Name of the additional property.
        value: A string attribute.
      """

      key = _messages.StringField(1)
      value = _messages.StringField(2)

    additionalProperties = _messages.MessageField('AdditionalProperty', 1, repeated=True)

  location = _messages.StringField(1)
  tags = _messages.MessageField('TagsValue', 2)


class BatchAccountKeys(_messages.Message):
  r"""The access keys of a batch account.

  Fields:
    primary: The primary key.
    secondary: The secondary key.
  """

  primary = _messages.StringField(1)
  secondary = _messages.StringField(2)


class BatchAccountListResult(_messages.Message):
  r"""Response for a list batch accounts call.

  Fields:
    nextLink: The URL to get the next page of results.
    value: The accounts in this page.
  """

  nextLink = _messages.StringField(1)
  value = _messages.MessageField('BatchAccount', 2, repeated=True)


class BatchAccountRegenerateKeyParameters(_messages.Message):
  r"""Parameters supplied to the regenerate key call.

  Enums:
    KeyNameValueValuesEnum: The key to regenerate.

  Fields:
    keyName: The key to regenerate.
  """

  class KeyNameValueValuesEnum(_messages.Enum):
    r"""The key to regenerate.

    Values:
      Primary: The primary key.
      Secondary: The secondary key.
    """
    Primary = 0
    Secondary = 1

  keyName = _messages.EnumField('KeyNameValueValuesEnum', 1)


class BatchBatchAccountCreateRequest(_messages.Message):
  r"""A BatchBatchAccountCreateRequest object.

  Fields:
    accountName: The name of the account.
    apiVersion: The management API version.
    batchAccountCreateParameters: A BatchAccountCreateParameters resource to
      be passed as the request body.
    resourceGroupName: The name of the resource group.
    subscriptionId: The subscription that owns the resource group.
  """

  accountName = _messages.StringField(1, required=True)
  apiVersion = _messages.StringField(2, default=API_VERSION)
  batchAccountCreateParameters = _messages.MessageField('BatchAccountCreateParameters', 3)
  resourceGroupName = _messages.StringField(4, required=True)
  subscriptionId = _messages.StringField(5, required=True)


class BatchBatchAccountDeleteRequest(_messages.Message):
  r"""A BatchBatchAccountDeleteRequest object.

  Fields:
    accountName: The name of the account.
    apiVersion: The management API version.
    resourceGroupName: The name of the resource group.
    subscriptionId: The subscription that owns the resource group.
  """

  accountName = _messages.StringField(1, required=True)
  apiVersion = _messages.StringField(2, default=API_VERSION)
  resourceGroupName = _messages.StringField(3, required=True)
  subscriptionId = _messages.StringField(4, required=True)


class BatchBatchAccountDeleteResponse(_messages.Message):
  r"""An empty BatchBatchAccountDelete response."""


class BatchBatchAccountGetRequest(_messages.Message):
  r"""A BatchBatchAccountGetRequest object.

  Fields:
    accountName: The name of the account.
    apiVersion: The management API version.
    resourceGroupName: The name of the resource group.
    subscriptionId: The subscription that owns the resource group.
  """

  accountName = _messages.StringField(1, required=True)
  apiVersion = _messages.StringField(2, default=API_VERSION)
  resourceGroupName = _messages.StringField(3, required=True)
  subscriptionId = _messages.StringField(4, required=True)


class BatchBatchAccountGetKeysRequest(_messages.Message):
  r"""A BatchBatchAccountGetKeysRequest object.

  Fields:
    accountName: The name of the account.
    apiVersion: The management API version.
    resourceGroupName: The name of the resource group.
    subscriptionId: The subscription that owns the resource group.
  """

  accountName = _messages.StringField(1, required=True)
  apiVersion = _messages.StringField(2, default=API_VERSION)
  resourceGroupName = _messages.StringField(3, required=True)
  subscriptionId = _messages.StringField(4, required=True)


class BatchBatchAccountListRequest(_messages.Message):
  r"""A BatchBatchAccountListRequest object.

  Fields:
    apiVersion: The management API version.
    subscriptionId: The subscription to list accounts in.
  """

  apiVersion = _messages.StringField(1, default=API_VERSION)
  subscriptionId = _messages.StringField(2, required=True)


class BatchBatchAccountListByResourceGroupRequest(_messages.Message):
  r"""A BatchBatchAccountListByResourceGroupRequest object.

  Fields:
    apiVersion: The management API version.
    resourceGroupName: The name of the resource group.
    subscriptionId: The subscription that owns the resource group.
  """

  apiVersion = _messages.StringField(1, default=API_VERSION)
  resourceGroupName = _messages.StringField(2, required=True)
  subscriptionId = _messages.StringField(3, required=True)


class BatchBatchAccountRegenerateKeyRequest(_messages.Message):
  r"""A BatchBatchAccountRegenerateKeyRequest object.

  Fields:
    accountName: The name of the account.
    apiVersion: The management API version.
    batchAccountRegenerateKeyParameters: A
      BatchAccountRegenerateKeyParameters resource to be passed as the
      request body.
    resourceGroupName: The name of the resource group.
    subscriptionId: The subscription that owns the resource group.
  """

  accountName = _messages.StringField(1, required=True)
  apiVersion = _messages.StringField(2, default=API_VERSION)
  batchAccountRegenerateKeyParameters = _messages.MessageField('BatchAccountRegenerateKeyParameters', 3)
  resourceGroupName = _messages.StringField(4, required=True)
  subscriptionId = _messages.StringField(5, required=True)


class StandardQueryParameters(_messages.Message):
  r"""Query parameters accepted by all methods.

  Fields:
    prettyPrint: Returns response with indentations and line breaks.
  """

  prettyPrint = _messages.BooleanField(1, default=True)


for _request in (BatchBatchAccountCreateRequest,
                 BatchBatchAccountDeleteRequest,
                 BatchBatchAccountGetRequest,
                 BatchBatchAccountGetKeysRequest,
                 BatchBatchAccountListRequest,
                 BatchBatchAccountListByResourceGroupRequest,
                 BatchBatchAccountRegenerateKeyRequest):
  encoding.AddCustomJsonFieldMapping(_request, 'apiVersion', 'api-version')
