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

"""A module for checking that the management endpoint can be reached."""

from __future__ import absolute_import
from __future__ import division
from __future__ import unicode_literals

import socket
import ssl

from rmcmdlets.core import config
from rmcmdlets.core import exceptions
from rmcmdlets.core import http
from rmcmdlets.core import log
from rmcmdlets.core import properties
from rmcmdlets.core.diagnostics import check_base

import httplib2
from six.moves import http_client


class ConnectivityError(exceptions.NetworkIssueError):
  """The management endpoint could not be reached."""


def DefaultUrls():
  """Returns the endpoints whose reachability is essential for rmcmdlets.

  Returns:
    list(str): The urls to check reachability for, one per distinct endpoint.
  """
  urls = []
  for prop in properties.VALUES.api_endpoint_overrides:
    url = prop.Get() or config.DEFAULT_MANAGEMENT_ENDPOINT
    if url not in urls:
      urls.append(url)
  return sorted(urls)


class ReachabilityChecker(check_base.Checker):
  """Checks whether the hosts of given urls are reachable."""

  @property
  def issue(self):
    return 'network connection'

  def Check(self, urls=None):
    """Run reachability check.

    Args:
      urls: iterable(str), The list of urls to check connection to. Defaults to
        DefaultUrls() (above) if not supplied.

    Returns:
      check_base.CheckResult, The result of the check.
    """
    if urls is None:
      urls = DefaultUrls()

    failures = [f for f in (self._CheckURL(url) for url in urls) if f]
    if failures:
      return check_base.CheckResult(
          passed=False, message=self._ConstructMessageFromFailures(failures),
          failures=failures)

    return check_base.CheckResult(
        passed=True,
        message='No URLs to check.' if not urls else
        'Reachability Check passed.')

  def _CheckURL(self, url):
    try:
      http.Http().request(url, method='GET')
    except (http_client.HTTPException, socket.error, ssl.SSLError,
            httplib2.HttpLib2Error) as err:
      msg = 'Cannot reach {0} ({1})'.format(url, type(err).__name__)
      return check_base.Failure(message=msg, exception=err)
    return None

  def _ConstructMessageFromFailures(self, failures):
    message = 'Reachability Check failed.\n'
    for failure in failures:
      message += '    {0}\n'.format(failure.message)
    message += ('Network connection problems may be due to proxy or '
                'firewall settings.')
    return message


def CheckConnectivity(checker=None):
  """Verifies that the management endpoints are reachable.

  Any HTTP response, including an error status, counts as reachable; only
  transport failures fail the check.

  Args:
    checker: check_base.Checker, The checker to run. Defaults to a
      ReachabilityChecker.

  Raises:
    ConnectivityError: If an endpoint could not be reached.
  """
  checker = checker or ReachabilityChecker()
  result = checker.Check()
  if not result.passed:
    raise ConnectivityError(result.message)
  log.debug(result.message)
