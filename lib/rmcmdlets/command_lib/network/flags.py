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

"""Flags and helpers for the network load-balancers commands."""

from __future__ import absolute_import
from __future__ import division
from __future__ import unicode_literals

from rmcmdlets.api_lib.network import load_balancers
from rmcmdlets.calliope import exceptions
from rmcmdlets.core import yaml


# (flag, collection, description)
CHILD_RESOURCE_FLAGS = (
    ('--frontend-ip-configurations-from-file',
     load_balancers.FRONTEND_IP_CONFIGURATIONS,
     'frontend IP configurations'),
    ('--backend-address-pools-from-file',
     load_balancers.BACKEND_ADDRESS_POOLS,
     'backend address pools'),
    ('--probes-from-file',
     load_balancers.PROBES,
     'probes'),
    ('--inbound-nat-rules-from-file',
     load_balancers.INBOUND_NAT_RULES,
     'inbound NAT rules'),
    ('--load-balancing-rules-from-file',
     load_balancers.LOAD_BALANCING_RULES,
     'load-balancing rules'),
)


def _DestFor(flag):
  return flag.lstrip('-').replace('-', '_')


def AddChildResourceFlags(parser):
  for flag, _, description in CHILD_RESOURCE_FLAGS:
    parser.add_argument(
        flag,
        metavar='PATH',
        help='A YAML or JSON file holding a list of {0}. Each entry is an '
        'object with a name and properties; references to sibling resources '
        'may use the bare name of the sibling.'.format(description))


def LoadChildResources(path, flag):
  """Loads a list of child resource objects from a YAML or JSON file.

  Args:
    path: str, The file path, or None if the flag was not given.
    flag: str, The flag name, for error messages.

  Raises:
    exceptions.BadFileException: The file does not hold a list of objects.

  Returns:
    [dict], The parsed objects, or None when path is None.
  """
  if path is None:
    return None
  try:
    data = yaml.load_path(path)
  except yaml.Error as e:
    raise exceptions.BadFileException(
        'Could not read [{0}]: {1}'.format(flag, e))
  if data is None:
    return []
  if not isinstance(data, list) or not all(
      isinstance(item, dict) for item in data):
    raise exceptions.BadFileException(
        'The file given to [{0}] must hold a list of objects.'.format(flag))
  return data


def ChildResourcesFromArgs(messages, args):
  """Returns {collection: [message] or None} for the child resource flags."""
  children = {}
  for flag, collection, _ in CHILD_RESOURCE_FLAGS:
    values = LoadChildResources(getattr(args, _DestFor(flag)), flag)
    children[collection] = load_balancers.ChildResourcesFromDicts(
        messages, collection, values)
  return children
