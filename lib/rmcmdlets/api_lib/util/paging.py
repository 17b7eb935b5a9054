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

"""Paging over management API list results.

List responses carry their items in 'value' and, when more remain, an absolute
'nextLink' URL to GET for the following page.
"""

from __future__ import absolute_import
from __future__ import division
from __future__ import unicode_literals

from apitools.base.py import encoding
from apitools.base.py import exceptions as apitools_exceptions
from rmcmdlets.core import log
from rmcmdlets.core.util import encoding as core_encoding


def YieldFromNextLink(service, method, request, limit=None):
  """Yields the items of a list call, following nextLink across pages.

  Args:
    service: base_api.BaseApiService, The service owning method.
    method: str, The name of the list method on service.
    request: The request message for the first page.
    limit: int, The maximum number of items to yield, None for all.

  Yields:
    The 'value' items of every page, in order.

  Raises:
    apitools_exceptions.HttpError: A page request failed.
  """
  response = getattr(service, method)(request)
  result_type = type(response)
  count = 0
  while True:
    for item in response.value:
      if limit is not None and count >= limit:
        return
      count += 1
      yield item
    next_link = response.nextLink
    if not next_link:
      return
    log.debug('Fetching next page: %s', next_link)
    http_response, content = service.client.http.request(next_link, 'GET')
    if int(http_response['status']) >= 300:
      raise apitools_exceptions.HttpError(http_response, content, next_link)
    response = encoding.JsonToMessage(
        result_type, core_encoding.Decode(content))
