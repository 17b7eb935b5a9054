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

"""Command to list properties."""

from __future__ import absolute_import
from __future__ import division
from __future__ import unicode_literals

from rmcmdlets.calliope import base
from rmcmdlets.core import properties


class List(base.DescribeCommand):
  """List rmcmdlets properties.

  Only properties that are set are shown, unless --all is given.
  """

  requires_connectivity = False

  @staticmethod
  def Args(parser):
    parser.add_argument(
        '--all',
        action='store_true',
        help='List all set and unset properties.')

  def Execute(self, context):
    context.WriteObject(
        properties.VALUES.AllValues(list_unset=context.args.all))
