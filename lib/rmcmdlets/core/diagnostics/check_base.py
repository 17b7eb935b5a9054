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

"""Base classes for checks."""

from __future__ import absolute_import
from __future__ import division
from __future__ import unicode_literals

import abc

import six


@six.add_metaclass(abc.ABCMeta)
class Checker(object):
  """Base class for a single check."""

  @abc.abstractproperty
  def issue(self):
    """The aspect of the user's machine that is being checked."""

  @abc.abstractmethod
  def Check(self):
    """Runs a single check and returns the result.

    Returns:
      check_base.CheckResult, The result of the check.
    """


class CheckResult(object):
  """Holds information about the result of a single check."""

  def __init__(self, passed, message='', failures=None):
    self.passed = passed
    self.message = message
    self.failures = failures or []


class Failure(object):

  def __init__(self, message='', exception=None):
    self.message = message
    self.exception = exception
