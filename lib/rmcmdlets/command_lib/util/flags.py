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

"""Flags shared by the resource commands of every API."""

from __future__ import absolute_import
from __future__ import division
from __future__ import unicode_literals

from rmcmdlets.calliope import arg_parsers


def AddNameArg(parser, resource_kind):
  parser.add_argument(
      'name',
      metavar='NAME',
      help='The name of the {0}.'.format(resource_kind))


def AddResourceGroupFlag(parser, required=True):
  parser.add_argument(
      '--resource-group',
      required=required,
      help='The resource group of the resource.' if required else
      'Restrict the listing to this resource group.')


def AddLocationFlag(parser):
  parser.add_argument(
      '--location',
      required=True,
      help='The region to create the resource in, for example westus.')


def AddForceFlag(parser, action):
  parser.add_argument(
      '--force',
      action='store_true',
      default=False,
      help='{0} without asking for confirmation.'.format(action))


def AddLimitFlag(parser):
  parser.add_argument(
      '--limit',
      type=arg_parsers.BoundedInt(1, None),
      help='The maximum number of resources to list.')
