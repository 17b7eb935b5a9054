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

"""Converts resource objects into JSON-serializable Python objects.

Resources written by commands are apitools messages, presentation model
objects or plain Python data. The printers only ever see the serializable
copy returned by MakeSerializable().
"""

from __future__ import absolute_import
from __future__ import division
from __future__ import unicode_literals

import datetime

from apitools.base.protorpclite import messages
from apitools.base.py import encoding
from rmcmdlets.core.util import times

import six


def MakeSerializable(resource):
  """Returns resource or a JSON-serializable copy of resource.

  Args:
    resource: The resource object.

  Returns:
    The original resource if it is a primitive type object, otherwise a
    JSON-serializable copy of resource.
  """
  if resource is None or isinstance(
      resource, (bool, float, six.integer_types, six.string_types)):
    return resource
  if isinstance(resource, messages.Enum):
    return six.text_type(resource)
  if isinstance(resource, messages.Message):
    return MakeSerializable(encoding.MessageToPyValue(resource))
  if isinstance(resource, datetime.datetime):
    return times.FormatDateTime(resource)
  if isinstance(resource, dict):
    return dict((six.text_type(k), MakeSerializable(v))
                for k, v in six.iteritems(resource))
  if isinstance(resource, (list, tuple, set)):
    return [MakeSerializable(item) for item in resource]
  if hasattr(resource, '__dict__'):
    # Presentation models: public attributes only.
    return dict((k, MakeSerializable(v))
                for k, v in six.iteritems(vars(resource))
                if not k.startswith('_'))
  return six.text_type(resource)
