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

"""The calliope CLI/API is a framework for building library interfaces."""

from __future__ import absolute_import
from __future__ import division
from __future__ import unicode_literals

import argparse
import importlib
import pkgutil

from rmcmdlets.calliope import actions
from rmcmdlets.calliope import base
from rmcmdlets.calliope import execution
from rmcmdlets.core import config
from rmcmdlets.core import log
from rmcmdlets.core import properties
from rmcmdlets.core.resource import resource_printer


def _ModuleNameToCommandName(module_name):
  return module_name.replace('_', '-')


def AddGlobalFlags(parser):
  """Adds the flags every command accepts.

  Each flag is backed by a property and leaves the namespace untouched unless
  given, so the flags may appear both before and after the command name.

  Args:
    parser: argparse.ArgumentParser, The parser to add the flags to.
  """
  parser.add_argument(
      '--subscription',
      metavar='SUBSCRIPTION_ID',
      default=argparse.SUPPRESS,
      action=actions.StoreProperty(properties.VALUES.core.subscription),
      help='The subscription to use for this invocation. Overrides the '
      'core/subscription property.')
  parser.add_argument(
      '--verbosity',
      choices=log.OrderedVerbosityNames(),
      default=argparse.SUPPRESS,
      action=actions.StoreProperty(properties.VALUES.core.verbosity),
      help='Override the default verbosity for this command.')
  parser.add_argument(
      '--quiet', '-q',
      default=argparse.SUPPRESS,
      action=actions.StoreConstProperty(
          properties.VALUES.core.disable_prompts, True),
      help='Disable all interactive prompts and answer overwrite '
      'confirmations with yes.')
  parser.add_argument(
      '--format',
      choices=resource_printer.SupportedFormats(),
      default=argparse.SUPPRESS,
      action=actions.StoreProperty(properties.VALUES.core.default_format),
      help='The format for printing command output resources.')
  parser.add_argument(
      '--access-token',
      default=argparse.SUPPRESS,
      action=actions.StoreProperty(properties.VALUES.auth.access_token),
      help='The bearer token to send with API requests for this invocation.')


class CLILoader(object):
  """A class to encapsulate loading the CLI and bootstrapping the REPL.

  The command tree is the package hierarchy under the surface package: every
  package is a group whose __init__ module defines a base.Group, every other
  module is a command that defines a base.Command.
  """

  def __init__(self, name, surface_package):
    """Initialize Calliope.

    Args:
      name: str, The name of the top level command, used for nice error
        reporting.
      surface_package: str, The dotted name of the root surface package.
    """
    self.__name = name
    self.__surface_package = surface_package

  def Generate(self):
    """Uses the registered information to generate the CLI tool.

    Returns:
      CLI, The generated CLI tool.
    """
    root = importlib.import_module(self.__surface_package)
    group_class = base.FromModule(root, is_command=False)
    parser = argparse.ArgumentParser(
        prog=self.__name, description=group_class.Description())
    parser.add_argument(
        '--version', action='version',
        version='{0} {1}'.format(self.__name, config.CLI_VERSION))
    AddGlobalFlags(parser)
    group_class.Args(parser)
    self._LoadGroup(root, parser, [self.__name], [group_class])
    return CLI(self.__name, parser)

  def _LoadGroup(self, package, parser, path, group_classes):
    """Adds a subparser for every group and command inside package."""
    subparsers = parser.add_subparsers(
        dest='_'.join(path) + '_subcommand', metavar='COMMAND')
    subparsers.required = True
    for _, module_name, is_pkg in sorted(
        pkgutil.iter_modules(package.__path__), key=lambda m: m[1]):
      if module_name.startswith('_'):
        continue
      module = importlib.import_module(
          '{0}.{1}'.format(package.__name__, module_name))
      name = _ModuleNameToCommandName(module_name)
      cls = base.FromModule(module, is_command=not is_pkg)
      sub_parser = subparsers.add_parser(
          name, help=cls.Brief(), description=cls.Description(),
          formatter_class=argparse.RawDescriptionHelpFormatter)
      if is_pkg:
        cls.Args(sub_parser)
        self._LoadGroup(module, sub_parser, path + [name], group_classes + [cls])
      else:
        # Group flags apply to every command under the group.
        for group_class in group_classes[1:]:
          group_class.Args(sub_parser)
        cls.Args(sub_parser)
        AddGlobalFlags(sub_parser)
        sub_parser.set_defaults(
            calliope_command=cls, command_path=path + [name])


class CLI(object):
  """A generated command line tool."""

  def __init__(self, name, parser):
    self.__name = name
    self.__parser = parser

  @property
  def name(self):
    return self.__name

  def Execute(self, args=None, prompter=None, connectivity_checker=None):
    """Execute the CLI tool with the given arguments.

    Args:
      args: [str], The arguments from the command line or None to use sys.argv
      prompter: The confirmation primitive to use instead of
        console_io.PromptContinue.
      connectivity_checker: check_base.Checker, The reachability check to run
        instead of the default one.

    Raises:
      ValueError: for ill-typed arguments.

    Returns:
      execution.InvocationContext, The finished invocation. Its results were
      printed and its errors logged.
    """
    if isinstance(args, str):
      raise ValueError('Execute expects an iterable of strings, not a string.')

    properties.VALUES.PushInvocationValues()
    old_user_output_enabled = None
    old_verbosity = None
    try:
      namespace = self.__parser.parse_args(args)
      command_path = '.'.join(namespace.command_path)

      # Now that we have parsed the args, reload the settings so the flags will
      # take effect.  These will use the values from the properties.
      old_user_output_enabled = log.SetUserOutputEnabled(None)
      old_verbosity = log.SetVerbosity(None)
      log.AddFileLogging(properties.VALUES.core.log_dir.Get())

      context = execution.InvocationContext(
          namespace, command_path,
          assume_yes=bool(properties.VALUES.core.disable_prompts.GetBool()),
          prompter=prompter,
          connectivity_checker=connectivity_checker)
      command = namespace.calliope_command()
      execution.Invoke(command, context)
      self._Display(command, context)
      return context
    finally:
      properties.VALUES.PopInvocationValues()
      # Reset these values to their previous state now that we popped the flag
      # values.
      if old_user_output_enabled is not None:
        log.SetUserOutputEnabled(old_user_output_enabled)
      if old_verbosity is not None:
        log.SetVerbosity(old_verbosity)

  def _Display(self, command, context):
    """Prints the results of command in the core/default_format format."""
    results = context.results
    if context.errors and not results:
      return
    print_format = properties.VALUES.core.default_format.Get()
    if isinstance(command, base.ListCommand):
      resource_printer.Print(results, print_format)
    elif len(results) == 1:
      resource_printer.Print(results[0], print_format, single=True)
    elif results:
      resource_printer.Print(results, print_format)
