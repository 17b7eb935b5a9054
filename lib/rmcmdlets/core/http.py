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

"""A module to get a configured http object."""

from __future__ import absolute_import
from __future__ import division
from __future__ import unicode_literals

import platform

from rmcmdlets.core import config
from rmcmdlets.core import properties

import httplib2


def Http(timeout='unset', access_token=None):
  """Get an httplib2.Http client that is properly configured for rmcmdlets.

  Args:
    timeout: double, The timeout in seconds to pass to httplib2.  This is the
        socket level timeout.  If timeout is None, timeout is infinite.  If
        default argument 'unset' is given, a sensible default is selected.
    access_token: str, A bearer token added to the Authorization header of
        every request. If None, the request goes out unauthenticated.

  Returns:
    An httplib2.Http client object with the user agent (and, when a token is
    given, the authorization header) added to every request.
  """
  effective_timeout = timeout if timeout != 'unset' else GetDefaultTimeout()
  http_client = httplib2.Http(timeout=effective_timeout)

  headers = {'user-agent': MakeUserAgentString()}
  if access_token:
    headers['authorization'] = 'Bearer {0}'.format(access_token)
  return _Wrap(http_client, headers)


def MakeUserAgentString():
  """Return a user-agent string for requests made by rmcmdlets."""
  return '{ua} python/{py_version}'.format(
      ua=config.USER_AGENT, py_version=platform.python_version())


def GetDefaultTimeout():
  return properties.VALUES.core.http_timeout.GetInt() or 300


def _Wrap(http_client, extra_headers):
  """Wraps the request method of http_client to send extra_headers.

  Args:
    http_client: The original http object.
    extra_headers: {str: str}, Headers to set on every request, overriding
      any header of the same name the caller passed.

  Returns:
    http, The same http object but with the request method wrapped.
  """
  orig_request = http_client.request

  def WrappedRequest(uri, method='GET', body=None, headers=None,
                     redirections=httplib2.DEFAULT_MAX_REDIRECTS,
                     connection_type=None):
    modified_headers = dict(headers or {})
    modified_headers.update(extra_headers)
    return orig_request(uri, method=method, body=body,
                        headers=modified_headers, redirections=redirections,
                        connection_type=connection_type)

  http_client.request = WrappedRequest
  return http_client
