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

"""Command for deleting batch accounts."""

from __future__ import absolute_import
from __future__ import division
from __future__ import unicode_literals

from rmcmdlets.api_lib.batch import accounts
from rmcmdlets.calliope import base
from rmcmdlets.command_lib.util import flags
from rmcmdlets.command_lib.util import overwrite
from rmcmdlets.core import log


class Delete(base.DeleteCommand):
  """Delete a batch account."""

  @staticmethod
  def Args(parser):
    flags.AddNameArg(parser, 'batch account')
    flags.AddResourceGroupFlag(parser)
    flags.AddForceFlag(parser, 'Delete the batch account')

  def Execute(self, context):
    args = context.args
    if not overwrite.ConfirmDelete(context, args.force, 'batch account',
                                   args.name):
      return
    client = accounts.BatchAccountsClient()
    client.Delete(args.resource_group, args.name)
    log.DeletedResource(args.name, kind='batch account')
