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

"""Library for obtaining API clients and messages."""

from __future__ import absolute_import
from __future__ import division
from __future__ import unicode_literals

from rmcmdlets.core import exceptions
from rmcmdlets.core import http
from rmcmdlets.core import properties
from rmcmdlets.third_party.apis import apis_map


class Error(exceptions.Error):
  """A base class for apis helper errors."""


class UnknownAPIError(Error):
  """Unable to find API in APIs map."""

  def __init__(self, api_name):
    super(UnknownAPIError, self).__init__(
        'API named [{0}] does not exist in the APIs map'.format(api_name))


class UnknownVersionError(Error):
  """Unable to find API version in APIs map."""

  def __init__(self, api_name, api_version):
    super(UnknownVersionError, self).__init__(
        'The [{0}] API does not have version [{1}] in the APIs map'.format(
            api_name, api_version))


def GetVersions(api_name):
  """Return available versions for given api.

  Args:
    api_name: str, The API name.

  Raises:
    UnknownAPIError: If api_name does not exist in the APIs map.

  Returns:
    list, of version names.
  """
  version_map = apis_map.MAP.get(api_name, None)
  if version_map is None:
    raise UnknownAPIError(api_name)
  return list(version_map.keys())


def GetApiDef(api_name, api_version):
  """Returns the APIDef for the specified API and version.

  Args:
    api_name: str, The API name.
    api_version: str, The version of the API.

  Raises:
    UnknownAPIError: If api_name does not exist in the APIs map.
    UnknownVersionError: If api_version does not exist for given api_name in
      the APIs map.

  Returns:
    APIDef, The APIDef for the specified API and version.
  """
  if api_name not in apis_map.MAP:
    raise UnknownAPIError(api_name)
  api_versions = apis_map.MAP[api_name]
  if api_version is None or api_version not in api_versions:
    raise UnknownVersionError(api_name, api_version)
  return api_versions[api_version]


def GetClientClass(api_name, api_version):
  """Returns the client class for the API specified in the args.

  Args:
    api_name: str, The API name.
    api_version: str, The version of the API.

  Returns:
    base_api.BaseApiClient, Client class for the specified API.
  """
  api_def = GetApiDef(api_name, api_version)
  module_path, client_class_name = api_def.client_full_classpath.rsplit('.', 1)
  module_obj = __import__(module_path, fromlist=[client_class_name])
  return getattr(module_obj, client_class_name)


def GetEffectiveApiEndpoint(api_name, api_version, client_class=None):
  """Returns the endpoint override for api_name, or the client's BASE_URL."""
  override = properties.VALUES.api_endpoint_overrides.Property(api_name).Get()
  if override:
    return override
  client_class = client_class or GetClientClass(api_name, api_version)
  return client_class.BASE_URL


def GetClientInstance(api_name, api_version, http_client=None):
  """Returns an instance of the API client specified in the args.

  Args:
    api_name: str, The API name.
    api_version: str, The version of the API.
    http_client: An http object to use instead of a fresh core.http.Http()
      carrying the auth/access_token bearer header.

  Returns:
    base_api.BaseApiClient, An instance of the specified API client.
  """
  if http_client is None:
    http_client = http.Http(
        access_token=properties.VALUES.auth.access_token.Get())
  client_class = GetClientClass(api_name, api_version)
  return client_class(
      url=GetEffectiveApiEndpoint(api_name, api_version, client_class),
      get_credentials=False,
      http=http_client)


def GetMessagesModule(api_name, api_version):
  """Returns the messages module for the API specified in the args.

  Args:
    api_name: str, The API name.
    api_version: str, The version of the API.

  Returns:
    Module containing the definitions of messages for the specified API.
  """
  api_def = GetApiDef(api_name, api_version)
  # fromlist below must not be empty, see:
  # http://stackoverflow.com/questions/2724260/why-does-pythons-import-require-fromlist.
  return __import__(api_def.messages_full_modulepath, fromlist=['something'])
