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

"""Base classes for calliope commands and groups.

Every module under surface/ defines exactly one subclass of Group (in a
package __init__.py) or Command (in a command module). The CLI loader finds
it, calls its static Args(parser) to register flags, and hands an instance to
execution.Invoke().
"""

from __future__ import absolute_import
from __future__ import division
from __future__ import unicode_literals

import abc

import six


class LayoutException(Exception):
  """An exception for when a command or group module has improper layout."""


@six.add_metaclass(abc.ABCMeta)
class _Common(object):
  """Base class for Command and Group.

  Attributes:
    detailed_help: {str: str}, Optional help sections. 'brief' becomes the
      one line summary shown in the parent's help and 'DESCRIPTION' the
      parser description.
  """

  detailed_help = None

  @staticmethod
  def Args(parser):
    """Set up arguments for this command.

    Args:
      parser: An argparse.ArgumentParser.
    """
    pass

  @classmethod
  def Brief(cls):
    """Returns the one line summary for this command or group."""
    if cls.detailed_help and 'brief' in cls.detailed_help:
      return cls.detailed_help['brief']
    doc = (cls.__doc__ or '').strip()
    return doc.splitlines()[0] if doc else None

  @classmethod
  def Description(cls):
    """Returns the long description for this command or group."""
    if cls.detailed_help and 'DESCRIPTION' in cls.detailed_help:
      return cls.detailed_help['DESCRIPTION']
    return cls.__doc__


class Group(_Common):
  """Group is a base class for groups to implement."""


class Command(_Common):
  """Command is a base class for commands to implement.

  A command is an operation for execution.Invoke(): it gets an
  InvocationContext, writes results with context.WriteObject() and signals
  failure by raising.

  Attributes:
    requires_connectivity: bool, False for commands that never call the
      management API and so skip the reachability check.
  """

  requires_connectivity = True

  @abc.abstractmethod
  def Execute(self, context):
    """Runs the command.

    Args:
      context: execution.InvocationContext, The bound arguments plus the
        output, error and confirmation channels for this invocation.
    """
    pass

  def PostProcess(self, context):
    """Runs after a successful Execute().

    Failures raised here are reported exactly like failures in Execute().

    Args:
      context: execution.InvocationContext, The same context given to
        Execute().
    """
    pass


class DescribeCommand(Command):
  """A command that prints one resource."""


class ListCommand(Command):
  """A command that prints a list of resources, even a list of one."""


class CreateCommand(Command):
  """A command that creates resources."""


class DeleteCommand(Command):
  """A command that deletes resources."""


def FromModule(module, is_command):
  """Get the type implementing Command or Group from the module.

  Args:
    module: module, The module resulting from importing the file containing a
      command or group.
    is_command: bool, True if we are loading a command, False to load a group.

  Returns:
    type, The class that implements Command or Group.

  Raises:
    LayoutException: If there is not exactly one such type.
  """
  base_type = Command if is_command else Group
  found = [
      value for value in vars(module).values()
      if (isinstance(value, type) and issubclass(value, base_type) and
          value.__module__ == module.__name__)]
  if len(found) != 1:
    raise LayoutException(
        'There must be exactly one [{0}] type defined in [{1}]; found [{2}].'
        .format(base_type.__name__, module.__name__, len(found)))
  return found[0]
