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

"""Command for creating or replacing batch accounts."""

from __future__ import absolute_import
from __future__ import division
from __future__ import unicode_literals

from rmcmdlets.api_lib.batch import accounts
from rmcmdlets.calliope import base
from rmcmdlets.command_lib.util import flags
from rmcmdlets.command_lib.util import overwrite
from rmcmdlets.command_lib.util import tags as tags_util
from rmcmdlets.core import log


class Create(base.CreateCommand):
  """Create or replace a batch account."""

  @staticmethod
  def Args(parser):
    flags.AddNameArg(parser, 'batch account')
    flags.AddResourceGroupFlag(parser)
    flags.AddLocationFlag(parser)
    tags_util.AddTagsFlag(parser, 'batch account')
    flags.AddForceFlag(parser, 'Overwrite an existing batch account')

  def Execute(self, context):
    args = context.args
    client = accounts.BatchAccountsClient()
    tags = tags_util.ValidateTags(args.tags)

    if not overwrite.ConfirmOverwrite(
        context,
        lambda: client.Exists(args.resource_group, args.name),
        args.force, 'batch account', args.name):
      return

    context.WriteObject(
        client.Create(args.resource_group, args.name, args.location,
                      tags=tags))

  def PostProcess(self, context):
    for account in context.results:
      endpoint = account.properties and account.properties.accountEndpoint
      log.CreatedResource(
          account.name, kind='batch account',
          details='with endpoint [{0}]'.format(endpoint) if endpoint else None)
