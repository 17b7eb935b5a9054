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

"""Command for describing load balancers."""

from __future__ import absolute_import
from __future__ import division
from __future__ import unicode_literals

from rmcmdlets.api_lib.network import load_balancers
from rmcmdlets.calliope import base
from rmcmdlets.command_lib.util import flags


class Describe(base.DescribeCommand):
  """Describe a load balancer."""

  @staticmethod
  def Args(parser):
    flags.AddNameArg(parser, 'load balancer')
    flags.AddResourceGroupFlag(parser)

  def Execute(self, context):
    args = context.args
    client = load_balancers.LoadBalancersClient()
    context.WriteObject(client.Get(args.resource_group, args.name))
