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

"""A module for dealing with unknown string and environment encodings."""

from __future__ import absolute_import
from __future__ import division
from __future__ import unicode_literals

import six


def Decode(data, encoding=None):
  """Returns data decoded to text.

  UTF-8, the suggested encoding, and iso-8859-1 are attempted in that order.
  Text is returned unchanged.

  Args:
    data: A string or bytes object that may need decoding.
    encoding: str, The suggested encoding if known.

  Returns:
    str, The decoded text or None if data is None.
  """
  if data is None or isinstance(data, six.text_type):
    return data
  if not isinstance(data, bytes):
    return six.text_type(data)
  for candidate in (encoding, 'utf-8'):
    if not candidate:
      continue
    try:
      return data.decode(candidate)
    except (UnicodeError, LookupError):
      pass
  # iso-8859-1 maps every byte, so this never fails.
  return data.decode('iso-8859-1')


def GetEncodedValue(env, name, default=None):
  """Returns the decoded value of the env var name.

  Args:
    env: {str: str}, The env dict.
    name: str, The env var name.
    default: The value to return if name is not in env.

  Returns:
    The decoded value of the env var name.
  """
  value = env.get(name)
  return default if value is None else Decode(value)


def SetEncodedValue(env, name, value):
  """Sets the value of name in env.

  Args:
    env: {str: str}, The env dict.
    name: str, The env var name.
    value: str, The value for name. If None then name is removed from env.
  """
  if value is None:
    env.pop(name, None)
    return
  env[name] = Decode(value)
