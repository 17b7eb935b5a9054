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

"""The confirm-then-mutate gate for commands that overwrite named resources.

A create command that would silently replace an existing resource asks
first, and so does every delete command:

  if not overwrite.ConfirmOverwrite(context, exists, args.force,
                                    'load balancer', args.name):
    return

Answering no is a successful no-op, not an error.
"""

from __future__ import absolute_import
from __future__ import division
from __future__ import unicode_literals

from rmcmdlets.core import log


OVERWRITE_MESSAGE = (
    'The {kind} [{name}] already exists and will be overwritten.')


def ConfirmOverwrite(context, exists, force, kind, name):
  """Returns whether a create-or-update of name may go ahead.

  Args:
    context: execution.InvocationContext, The invocation asking.
    exists: callable, A read-only lookup returning True if the resource is
      already there. It must not prompt or mutate.
    force: bool, True to overwrite without asking.
    kind: str, The resource kind for the prompt, e.g. 'load balancer'.
    name: str, The resource name.

  Returns:
    bool, True to go on with the mutation, False if the user declined.
  """
  if not exists():
    return True
  if force:
    log.debug('Overwriting {0} [{1}] without asking.'.format(kind, name))
    return True
  if context.Confirm(OVERWRITE_MESSAGE.format(kind=kind, name=name), name,
                     default=False):
    return True
  log.info('Aborted by user. The {0} [{1}] was left unchanged.'.format(
      kind, name))
  return False


def ConfirmDelete(context, force, kind, name):
  """Returns whether the deletion of name may go ahead.

  Args:
    context: execution.InvocationContext, The invocation asking.
    force: bool, True to delete without asking.
    kind: str, The resource kind for the prompt.
    name: str, The resource name.

  Returns:
    bool, True to go on with the deletion, False if the user declined.
  """
  if force:
    return True
  if context.Confirm('The {0} [{1}] will be deleted.'.format(kind, name), name,
                     default=False):
    return True
  log.info('Aborted by user. The {0} [{1}] was left unchanged.'.format(
      kind, name))
  return False
