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

"""Command to set properties."""

from __future__ import absolute_import
from __future__ import division
from __future__ import unicode_literals

from rmcmdlets.calliope import base
from rmcmdlets.core import log
from rmcmdlets.core import properties


class Set(base.Command):
  """Set a rmcmdlets property in the user properties file.

  SECTION/ may be left out for properties of the core section.
  """

  requires_connectivity = False

  @staticmethod
  def Args(parser):
    parser.add_argument(
        'property',
        metavar='SECTION/PROPERTY',
        help='The property to be set. Note that SECTION/ is optional while '
        'referring to properties in the core section.')
    parser.add_argument(
        'value',
        help='The value to be set.')

  def Execute(self, context):
    args = context.args
    prop = properties.FromString(args.property)
    properties.PersistProperty(prop, args.value)
    log.status.Print('Updated property [{0}].'.format(prop))
