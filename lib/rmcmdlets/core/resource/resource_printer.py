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

"""Methods to print resources in a given format.

Each format is a ResourcePrinter subclass registered in _FORMATTERS:

  json: Prints resource records as a JSON list.
  yaml: Prints each resource record as a YAML document.

Example:

  printer = resource_printer.Printer('json', out=log.out)
  printer.Print(resources)
"""

from __future__ import absolute_import
from __future__ import division
from __future__ import unicode_literals

import json

from rmcmdlets.core import exceptions as core_exceptions
from rmcmdlets.core import log
from rmcmdlets.core import yaml
from rmcmdlets.core.resource import resource_projector

import six

# Structured output indentation.
STRUCTURED_INDENTATION = 2


class Error(core_exceptions.Error):
  """Exceptions for this module."""


class UnknownFormatError(Error):
  """UnknownFormatError for unknown format names."""


class ResourcePrinter(object):
  """Base class for printing JSON-serializable Python objects.

  Attributes:
    _empty: True if there are no records.
    _out: Output stream.
  """

  def __init__(self, out=None):
    """Constructor.

    Args:
      out: The output stream, log.out if None.
    """
    self._empty = True
    self._out = out or log.out

  def _AddRecord(self, record, delimit=True):
    """Format specific AddRecord().

    Args:
      record: A JSON-serializable object.
      delimit: Prints resource delimiters if True.
    """
    pass

  def AddRecord(self, record, delimit=True):
    """Adds a record for printing.

    Args:
      record: A resource object, converted with MakeSerializable() first.
      delimit: Prints resource delimiters if True.
    """
    self._empty = False
    self._AddRecord(resource_projector.MakeSerializable(record), delimit)

  def Finish(self):
    """Prints the results for non-streaming formats."""
    pass

  def Print(self, resources, single=False):
    """Prints resources using printer.AddRecord() and printer.Finish().

    Args:
      resources: A singleton or list of resource objects.
      single: If True then resources is a single item and not a list.
    """
    try:
      if single or not isinstance(resources, (list, tuple)):
        if resources is not None:
          self.AddRecord(resources, delimit=False)
      else:
        for resource in resources:
          self.AddRecord(resource)
    finally:
      self.Finish()


class JsonPrinter(ResourcePrinter):
  """Prints resource records as a JSON list.

  A single record printed with single=True is written as a bare JSON object.
  """

  _BEGIN_DELIMITER = '[\n'

  def __init__(self, *args, **kwargs):
    super(JsonPrinter, self).__init__(*args, **kwargs)
    self._delimiter = self._BEGIN_DELIMITER
    self._indent = ' ' * STRUCTURED_INDENTATION

  def _Dump(self, resource):
    return json.dumps(
        resource,
        indent=STRUCTURED_INDENTATION,
        sort_keys=True,
        separators=(',', ': '))

  def _AddRecord(self, record, delimit=True):
    if delimit:
      delimiter = self._delimiter + self._indent
      self._delimiter = ',\n'
      for line in self._Dump(record).split('\n'):
        self._out.write(delimiter + line)
        delimiter = '\n' + self._indent
    else:
      if self._delimiter != self._BEGIN_DELIMITER:
        self._out.write('\n]\n')
        self._delimiter = self._BEGIN_DELIMITER
      self._out.write(self._Dump(record) + '\n')

  def Finish(self):
    """Prints the final delimiter and preps for the next resource list."""
    if self._empty:
      self._out.write('[]\n')
    elif self._delimiter != self._BEGIN_DELIMITER:
      self._out.write('\n]\n')
      self._delimiter = self._BEGIN_DELIMITER


class YamlPrinter(ResourcePrinter):
  """Prints the YAML representations of JSON-serializable objects.

  For example:

    printer = YamlPrinter(log.out)
    printer.AddRecord({'a': ['hello', 'world'], 'b': {'x': 'bye'}})

  produces:

    ---
    a:
    - hello
    - world
    b:
      x: bye
  """

  def _AddRecord(self, record, delimit=True):
    if delimit:
      self._out.write('---\n')
    self._out.write(yaml.dump(record))


_FORMATTERS = {
    'json': JsonPrinter,
    'yaml': YamlPrinter,
}


def SupportedFormats():
  """Returns a sorted list of supported format names."""
  return sorted(_FORMATTERS)


def Printer(print_format, out=None):
  """Returns a resource printer given a format name.

  Args:
    print_format: str, The format name, one of SupportedFormats().
    out: Output stream, log.out if None.

  Raises:
    UnknownFormatError: The print_format is invalid.

  Returns:
    An initialized ResourcePrinter class.
  """
  printer_class = _FORMATTERS.get(print_format)
  if not printer_class:
    raise UnknownFormatError(
        'Format must be one of {0}; received [{1}].'.format(
            ', '.join(SupportedFormats()), six.text_type(print_format)))
  return printer_class(out=out)


def Print(resources, print_format, out=None, single=False):
  """Prints the given resources.

  Args:
    resources: A singleton or list of resource objects.
    print_format: str, The format name.
    out: Output stream, log.out if None.
    single: If True then resources is a single item and not a list.
  """
  Printer(print_format, out=out).Print(resources, single)
