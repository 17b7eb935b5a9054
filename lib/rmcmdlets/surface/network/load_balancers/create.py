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

"""Command for creating or replacing load balancers."""

from __future__ import absolute_import
from __future__ import division
from __future__ import unicode_literals

from rmcmdlets.api_lib.network import load_balancers
from rmcmdlets.calliope import base
from rmcmdlets.command_lib.network import flags as network_flags
from rmcmdlets.command_lib.util import flags
from rmcmdlets.command_lib.util import overwrite
from rmcmdlets.command_lib.util import tags as tags_util
from rmcmdlets.core import log


class Create(base.CreateCommand):
  """Create or replace a load balancer.

  Creates the load balancer together with the child resources read from the
  given files. If a load balancer of the same name already exists you are
  asked before it is overwritten, unless --force or --quiet is given.
  """

  @staticmethod
  def Args(parser):
    flags.AddNameArg(parser, 'load balancer')
    flags.AddResourceGroupFlag(parser)
    flags.AddLocationFlag(parser)
    network_flags.AddChildResourceFlags(parser)
    tags_util.AddTagsFlag(parser, 'load balancer')
    flags.AddForceFlag(parser, 'Overwrite an existing load balancer')

  def Execute(self, context):
    args = context.args
    client = load_balancers.LoadBalancersClient()

    tags = tags_util.ValidateTags(args.tags)
    children = network_flags.ChildResourcesFromArgs(client.messages, args)

    if not overwrite.ConfirmOverwrite(
        context,
        lambda: client.Exists(args.resource_group, args.name),
        args.force, 'load balancer', args.name):
      return

    load_balancer = load_balancers.BuildLoadBalancer(
        client.messages, args.name, args.location,
        frontend_ip_configurations=children[
            load_balancers.FRONTEND_IP_CONFIGURATIONS],
        backend_address_pools=children[load_balancers.BACKEND_ADDRESS_POOLS],
        probes=children[load_balancers.PROBES],
        inbound_nat_rules=children[load_balancers.INBOUND_NAT_RULES],
        load_balancing_rules=children[load_balancers.LOAD_BALANCING_RULES],
        tags=tags)
    load_balancers.NormalizeChildResourceIds(
        load_balancer, client.subscription, args.resource_group)

    client.CreateOrUpdate(args.resource_group, args.name, load_balancer)
    log.CreatedResource(args.name, kind='load balancer')
    context.WriteObject(client.Get(args.resource_group, args.name))
