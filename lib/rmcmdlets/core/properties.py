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

"""Read and write properties for rmcmdlets.

A property value is looked up, in order, in the flags of the running command,
the RMCMDLETS_<SECTION>_<NAME> environment variable, the user properties file
and finally the property default.
"""

from __future__ import absolute_import
from __future__ import division
from __future__ import unicode_literals

import functools
import os
import re

from rmcmdlets.core import config
from rmcmdlets.core import exceptions
from rmcmdlets.core import properties_file as prop_files_lib
from rmcmdlets.core.util import encoding

import six


_VALID_ENDPOINT_OVERRIDE_REGEX = re.compile(
    r'^'
    # require http or https for scheme
    r'(?:https?)://'
    # domain name, localhost or an ipv4 address
    r'(?:(?:[A-Z0-9](?:[A-Z0-9-]{0,61}[A-Z0-9])?\.)+(?:[A-Z]{2,6}|[A-Z0-9-]{2,})'
    r'|localhost|\d{1,3}\.\d{1,3}\.\d{1,3}\.\d{1,3})'
    # optional port
    r'(?::\d+)?'
    # require trailing slash
    r'(?:/|[/?]\S+/)'
    r'$', re.IGNORECASE)


def Stringize(value):
  if isinstance(value, six.string_types):
    return value
  return str(value)


def _BooleanValidator(property_name, value):
  """Validates boolean properties.

  Args:
    property_name: str, the name of the property
    value: str | bool, the value to validate

  Raises:
    InvalidValueError: if value is not boolean
  """
  accepted_strings = ['true', '1', 'on', 'yes', 'y',
                      'false', '0', 'off', 'no', 'n',
                      '', 'none']
  if Stringize(value).lower() not in accepted_strings:
    raise InvalidValueError(
        'The [{0}] value [{1}] is not valid. Possible values: [{2}].'.format(
            property_name, value,
            ', '.join([x if x else "''" for x in accepted_strings])))


def _ChoiceValidator(property_name, choices, value):
  if value is not None and value not in choices:
    raise InvalidValueError(
        'The [{0}] value [{1}] is not valid. Possible values: [{2}].'.format(
            property_name, value, ', '.join(choices)))


class Error(exceptions.Error):
  """Exceptions for the properties module."""


class NoSuchPropertyError(Error):
  """An exception to be raised when the desired property does not exist."""


class InvalidValueError(Error):
  """An exception to be raised when the set value of a property is invalid."""


class RequiredPropertyError(Error):
  """Generic exception for when a required property was not set."""
  FLAG_STRING = ('It can be set on a per-command basis by re-running your '
                 'command with the [{flag}] flag.\n\n')

  def __init__(self, prop, flag=None, extra_msg=None):
    section = (prop.section + '/' if prop.section != VALUES.default_section.name
               else '')
    if flag:
      flag_msg = RequiredPropertyError.FLAG_STRING.format(flag=flag)
    else:
      flag_msg = ''

    msg = ("""\
The required property [{property_name}] is not currently set.
{flag_msg}You may set it for your current workspace by running:

  $ rmcmdlets config set {section}{property_name} VALUE

or it can be set temporarily by the environment variable [{env_var}]"""
           .format(property_name=prop.name,
                   flag_msg=flag_msg,
                   section=section,
                   env_var=prop.EnvironmentName()))
    if extra_msg:
      msg += '\n\n' + extra_msg
    super(RequiredPropertyError, self).__init__(msg)
    self.property = prop


class _Sections(object):
  """Represents the available sections in the properties file.

  Attributes:
    api_endpoint_overrides: Section, Overrides of the management endpoint per
      API.
    auth: Section, The section containing auth properties.
    core: Section, The section containing core properties.
    default_section: Section, The main section of the properties file (core).
  """

  class _ValueFlag(object):

    def __init__(self, value, flag):
      self.value = value
      self.flag = flag

  def __init__(self):
    self.api_endpoint_overrides = _SectionApiEndpointOverrides()
    self.auth = _SectionAuth()
    self.core = _SectionCore()

    self.__sections = dict(
        (section.name, section) for section in
        [self.api_endpoint_overrides, self.auth, self.core])
    self.__invocation_value_stack = [{}]

  @property
  def default_section(self):
    return self.core

  def __iter__(self):
    return iter(self.__sections.values())

  def PushInvocationValues(self):
    self.__invocation_value_stack.append({})

  def PopInvocationValues(self):
    self.__invocation_value_stack.pop()

  def SetInvocationValue(self, prop, value, flag):
    """Set the value of this property for this command, using a flag.

    Args:
      prop: _Property, The property with an explicit value.
      value: str, The value that should be returned while this command is
          running.
      flag: str, The flag that a user can use to set the property, reported
          if it was required at some point but not set by the command line.
    """
    value_flags = self.GetLatestInvocationValues()
    if value:
      prop.Validate(value)
    value_flags[prop] = _Sections._ValueFlag(value, flag)

  def GetLatestInvocationValues(self):
    return self.__invocation_value_stack[-1]

  def GetInvocationStack(self):
    return self.__invocation_value_stack

  def Section(self, section):
    """Gets a section given its name.

    Args:
      section: str, The section for the desired property.

    Returns:
      Section, The section corresponding to the given name.

    Raises:
      NoSuchPropertyError: If the section is not known.
    """
    try:
      return self.__sections[section]
    except KeyError:
      raise NoSuchPropertyError('Section "{section}" does not exist.'.format(
          section=section))

  def AllValues(self, list_unset=False):
    """Gets the entire collection of property values for all sections.

    Args:
      list_unset: bool, If True, include unset properties in the result.

    Returns:
      {str:{str:str}}, A dict of sections to dicts of properties to values.
    """
    result = {}
    for section in self:
      section_result = section.AllValues(list_unset=list_unset)
      if section_result:
        result[section.name] = section_result
    return result


class _Section(object):
  """Represents a section of the properties file that has related properties.

  Attributes:
    name: str, The name of the section.
  """

  def __init__(self, name):
    self.__name = name
    self.__properties = {}

  @property
  def name(self):
    return self.__name

  def __iter__(self):
    return iter(self.__properties.values())

  def _Add(self, name, help_text=None, default=None, validator=None,
           choices=None):
    prop = _Property(
        section=self.__name, name=name, help_text=help_text, default=default,
        validator=validator, choices=choices)
    self.__properties[name] = prop
    return prop

  def _AddBool(self, name, help_text=None, default=None):
    return self._Add(name=name, help_text=help_text, default=default,
                     validator=functools.partial(_BooleanValidator, name),
                     choices=('true', 'false'))

  def _AddChoice(self, name, choices, help_text=None, default=None):
    return self._Add(name=name, help_text=help_text, default=default,
                     validator=functools.partial(_ChoiceValidator, name,
                                                 choices),
                     choices=choices)

  def Property(self, property_name):
    """Gets a property from this section, given its name.

    Args:
      property_name: str, The name of the desired property.

    Returns:
      Property, The property corresponding to the given name.

    Raises:
      NoSuchPropertyError: If the property is not known for this section.
    """
    try:
      return self.__properties[property_name]
    except KeyError:
      raise NoSuchPropertyError(
          'Section [{s}] has no property [{p}].'.format(
              s=self.__name,
              p=property_name))

  def AllValues(self, list_unset=False):
    """Gets all the properties and their values for this section.

    Args:
      list_unset: bool, If True, include unset properties in the result.

    Returns:
      {str:str}, The dict of {property:value} for this section.
    """
    properties_file = _ActivePropertiesFile()
    result = {}
    for prop in self:
      value = _GetPropertyWithoutDefault(prop, properties_file)
      if value is None and not list_unset:
        continue
      result[prop.name] = value
    return result


class _SectionCore(_Section):
  """Contains the properties for the 'core' section."""

  def __init__(self):
    super(_SectionCore, self).__init__('core')
    self.subscription = self._Add(
        'subscription',
        help_text='The subscription id that owns the resources being '
        'managed.')
    self.verbosity = self._AddChoice(
        'verbosity',
        ('debug', 'info', 'warning', 'error', 'critical', 'none'),
        help_text='Default logging verbosity for commands.')
    self.user_output_enabled = self._AddBool(
        'user_output_enabled',
        help_text='True, by default. If False, messages to the user and '
        'command output on both standard output and standard error will be '
        'suppressed.',
        default=True)
    self.disable_prompts = self._AddBool(
        'disable_prompts',
        help_text='If True, the default answer will be assumed for all user '
        'prompts and overwrite confirmations are answered with yes.',
        default=False)
    self.check_connectivity = self._AddBool(
        'check_connectivity',
        help_text='If True, the management endpoint is probed before every '
        'command and the command fails fast when it is unreachable.',
        default=True)
    self.error_action = self._AddChoice(
        'error_action', ('continue', 'stop'),
        help_text='What to do after a command failure has been reported. '
        '"continue" writes an error record and lets the session go on, '
        '"stop" re-raises the failure to the caller.',
        default='continue')
    self.http_timeout = self._Add(
        'http_timeout',
        help_text='The socket timeout, in seconds, for API requests.')
    self.log_dir = self._Add(
        'log_dir',
        help_text='Directory in which to write log files. Unset by default, '
        'which disables file logging.')
    self.default_format = self._AddChoice(
        'default_format', ('yaml', 'json'),
        help_text='The output format used when --format is not given.',
        default='yaml')


class _SectionAuth(_Section):
  """Contains the properties for the 'auth' section."""

  def __init__(self):
    super(_SectionAuth, self).__init__('auth')
    self.access_token = self._Add(
        'access_token',
        help_text='The bearer token sent with every API request.')


class _SectionApiEndpointOverrides(_Section):
  """Contains the properties for the 'api_endpoint_overrides' section.

  This overrides the management endpoint an API client talks to.
  """

  def __init__(self):
    super(_SectionApiEndpointOverrides, self).__init__(
        'api_endpoint_overrides')
    self.automation = self._AddEndpoint('automation')
    self.batch = self._AddEndpoint('batch')
    self.network = self._AddEndpoint('network')

  def EndpointValidator(self, value):
    """Checks to see if the endpoint override string is valid."""
    if value is None:
      return
    if not _VALID_ENDPOINT_OVERRIDE_REGEX.match(value):
      raise InvalidValueError(
          'The endpoint_overrides property must be an absolute URI beginning '
          'with http:// or https:// and ending with a trailing \'/\'. '
          '[{value}] is not a valid endpoint override.'
          .format(value=value))

  def _AddEndpoint(self, name):
    return self._Add(name, validator=self.EndpointValidator)


class _Property(object):
  """An individual property that can be gotten from the properties file.

  Attributes:
    section: str, The name of the section the property appears in in the file.
    name: str, The name of the property.
    help_text: str, The help text for what this property does.
    default: str, A final value to use if no value is found elsewhere.
    validator: func(str), A function that is called on the value when .Set()'d
      or .Get()'d. For valid values, the function should do nothing. For
      invalid values, it should raise InvalidValueError with an explanation of
      why it was invalid.
    choices: [str], The allowable values for this property.
  """

  def __init__(self, section, name, help_text=None, default=None,
               validator=None, choices=None):
    self.__section = section
    self.__name = name
    self.__help_text = help_text
    self.__default = default
    self.__validator = validator
    self.__choices = choices

  @property
  def section(self):
    return self.__section

  @property
  def name(self):
    return self.__name

  @property
  def help_text(self):
    return self.__help_text

  @property
  def default(self):
    return self.__default

  @property
  def choices(self):
    return self.__choices

  def __eq__(self, other):
    return self.section == other.section and self.name == other.name

  def __ne__(self, other):
    return not self == other

  def __hash__(self):
    return hash((self.section, self.name))

  def GetOrFail(self):
    """Shortcut for Get(required=True).

    Returns:
      str, The value for this property.
    Raises:
      RequiredPropertyError if property is not set.
    """
    return self.Get(required=True)

  def Get(self, required=False, validate=True):
    """Gets the value for this property.

    Args:
      required: bool, True to raise an exception if the property is not set.
      validate: bool, Whether or not to run the fetched value through the
          validation function.

    Returns:
      str, The value for this property.
    """
    value = _GetProperty(self, _ActivePropertiesFile(), required)
    if validate:
      self.Validate(value)
    return value

  def Validate(self, value):
    """Test to see if the value is valid for this property.

    Args:
      value: str, The value of the property to be validated.

    Raises:
      InvalidValueError: If the value was invalid according to the property's
          validator.
    """
    if self.__validator:
      self.__validator(value)

  def GetBool(self, required=False, validate=False):
    """Gets the boolean value for this property.

    Args:
      required: bool, True to raise an exception if the property is not set.
      validate: bool, Whether or not to run the fetched value through the
          validation function.

    Returns:
      bool, The boolean value for this property, or None if it is not set.

    Raises:
      InvalidValueError: if value is not boolean
    """
    value = _GetProperty(self, _ActivePropertiesFile(), required)
    if validate:
      _BooleanValidator(self.name, value)
    if value is None or Stringize(value).lower() == 'none':
      return None
    return value.lower() in ['1', 'true', 'on', 'yes', 'y']

  def GetInt(self, required=False):
    """Gets the integer value for this property.

    Args:
      required: bool, True to raise an exception if the property is not set.

    Returns:
      int, The integer value for this property.
    """
    value = _GetProperty(self, _ActivePropertiesFile(), required)
    if value is None:
      return None
    try:
      return int(value)
    except ValueError:
      raise InvalidValueError(
          'The property [{section}.{name}] must have an integer value: '
          '[{value}]'.format(
              section=self.section, name=self.name, value=value))

  def Set(self, value):
    """Sets the value for this property as an environment variable.

    Args:
      value: str/bool, The proposed value for this property.  If None, it is
        removed from the environment.
    """
    self.Validate(value)
    if value is not None:
      value = Stringize(value)
    encoding.SetEncodedValue(os.environ, self.EnvironmentName(), value)

  def EnvironmentName(self):
    """Get the name of the environment variable for this property.

    Returns:
      str, The name of the correct environment variable.
    """
    return 'RMCMDLETS_{section}_{name}'.format(
        section=self.__section.upper(),
        name=self.__name.upper(),
    )

  def __str__(self):
    return '{section}/{name}'.format(section=self.__section, name=self.__name)


VALUES = _Sections()


def FromString(property_string):
  """Gets the property object corresponding the given string.

  Args:
    property_string: str, The string to parse.  It can be in the format
      section/property, or just property if the section is the default one.

  Returns:
    properties.Property, The property.

  Raises:
    NoSuchPropertyError: If the section or property is not known.
  """
  section, _, prop = property_string.rpartition('/')
  return VALUES.Section(section or VALUES.default_section.name).Property(prop)


def PersistProperty(prop, value):
  """Sets the given property in the user properties file.

  Args:
    prop: properties.Property, The property to set.
    value: str, The value to set for the property. If None, the property is
      removed.
  """
  prop.Validate(value)
  prop_files_lib.PersistProperty(
      config.Paths().user_properties_path, prop.section, prop.name, value)


def _ActivePropertiesFile():
  return prop_files_lib.PropertiesFile([config.Paths().user_properties_path])


def _GetProperty(prop, properties_file, required):
  """Gets the given property.

  Args:
    prop: properties.Property, The property to get.
    properties_file: properties_file.PropertiesFile, An already loaded
      properties files to use.
    required: bool, True to raise an exception if the property is not set.

  Raises:
    RequiredPropertyError: If the property was required but unset.

  Returns:
    str, The value of the property, or None if it is not set.
  """
  flag_to_use = None

  # The bottom entry holds the flags registered when the parser was built.
  for value_flags in reversed(VALUES.GetInvocationStack()):
    if prop in value_flags and value_flags[prop].flag:
      flag_to_use = value_flags[prop].flag
      break

  value = _GetPropertyWithoutDefault(prop, properties_file)
  if value is not None:
    return Stringize(value)

  # Still nothing, check the final default.
  if prop.default is not None:
    return Stringize(prop.default)

  # Not set, throw if required.
  if required:
    raise RequiredPropertyError(prop, flag=flag_to_use)

  return None


def _GetPropertyWithoutDefault(prop, properties_file):
  """Gets the given property without using a default.

  Args:
    prop: properties.Property, The property to get.
    properties_file: properties_file.PropertiesFile, An already loaded
      properties files to use.

  Returns:
    str, The value of the property, or None if it is not set.
  """
  # Look for a value in the flags that were used on this command.
  for value_flags in reversed(VALUES.GetInvocationStack()):
    value_flag = value_flags.get(prop, None)
    if value_flag and value_flag.value is not None:
      return Stringize(value_flag.value)

  # Check the environment variable overrides.
  value = encoding.GetEncodedValue(os.environ, prop.EnvironmentName())
  if value is not None:
    return Stringize(value)

  # Check the property file itself.
  value = properties_file.Get(prop.section, prop.name)
  if value is not None:
    return Stringize(value)

  return None
