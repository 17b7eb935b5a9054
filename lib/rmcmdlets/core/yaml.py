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

"""Wrapper module for ensuring consistent usage of yaml parsing.

Everything goes through the safe loader and dumper; sub-resource files handed
to commands are either YAML or JSON, and JSON parses as YAML.
"""

from __future__ import absolute_import
from __future__ import division
import collections

from rmcmdlets.core import exceptions
from ruamel import yaml
from ruamel.yaml import representer
import six
from typing import Any, AnyStr, IO, Optional, Union  # pylint: disable=unused-import, for pytype


def _SafeYAML():
  # type: () -> yaml.YAML
  """Returns a YAML instance restricted to the safe loader and dumper."""
  yaml_obj = yaml.YAML(typ='safe', pure=True)
  yaml_obj.default_flow_style = False
  yaml_obj.representer.add_representer(
      collections.OrderedDict, representer.SafeRepresenter.represent_dict)
  return yaml_obj


class Error(exceptions.Error):
  """Top level error for this module.

  Attributes:
    inner_error: Exception, The original exception that is being wrapped. This
      will always be populated.
    file: str, The path to the thing being loaded (if applicable).
  """

  def __init__(self, e, verb, f=None):
    # type: (Exception, str, Optional[str]) -> None
    file_text = ' from [{}]'.format(f) if f else ''
    super(Error, self).__init__(
        'Failed to {} YAML{}: {}'.format(verb, file_text, e))
    self.inner_error = e
    self.file = f


class YAMLParseError(Error):
  """An error that wraps all YAML parsing errors."""

  def __init__(self, e, f=None):
    # type: (Exception, Optional[str]) -> None
    super(YAMLParseError, self).__init__(e, verb='parse', f=f)


class FileLoadError(Error):
  """An error that wraps errors when loading/reading files."""

  def __init__(self, e, f):
    # type: (Exception, str) -> None
    super(FileLoadError, self).__init__(e, verb='load', f=f)


def load(stream, file_hint=None):
  # type: (Union[str, IO[AnyStr]], Optional[str]) -> Any
  """Loads YAML from the given steam.

  Args:
    stream: A file like object or string that can be read from.
    file_hint: str, The name of a file or url that the stream data is coming
      from. This is used for better error handling.

  Raises:
    YAMLParseError: If the data could not be parsed.

  Returns:
    The parsed YAML data.
  """
  try:
    return _SafeYAML().load(stream)
  except yaml.YAMLError as e:
    raise YAMLParseError(e, f=file_hint)


def load_path(path):
  # type: (str) -> Any
  """Loads YAML from the given file path.

  Args:
    path: str, A file path to open and read from.

  Raises:
    YAMLParseError: If the data could not be parsed.
    FileLoadError: If the file could not be opened or read.

  Returns:
    The parsed YAML data.
  """
  try:
    with open(path, 'r') as fp:
      return load(fp, file_hint=path)
  except EnvironmentError as e:
    # Raised when file does not exist or can't be opened/read.
    raise FileLoadError(e, f=path)


def dump(data, stream=None):
  # type: (Any, Optional[IO[AnyStr]]) -> Optional[str]
  """Dumps the given YAML data to the stream.

  Args:
    data: The YAML serializable Python object to dump.
    stream: The stream to write the data to or None to return it as a string.

  Returns:
    The string representation of the YAML data if stream is None.
  """
  yaml_obj = _SafeYAML()
  if stream is not None:
    yaml_obj.dump(data, stream)
    return None
  buf = six.StringIO()
  yaml_obj.dump(data, buf)
  return buf.getvalue()
