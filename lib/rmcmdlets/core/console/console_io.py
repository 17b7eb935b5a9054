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

"""General console prompting utilities used by rmcmdlets."""

from __future__ import absolute_import
from __future__ import division
from __future__ import unicode_literals

import sys
import textwrap

from rmcmdlets.core import properties

from six.moves import input  # pylint: disable=redefined-builtin


TEXTWRAP = textwrap.TextWrapper(replace_whitespace=False,
                                drop_whitespace=False,
                                break_on_hyphens=False)


def _DoWrap(message):
  """Text wrap the given message and correctly handle newlines in the middle.

  Args:
    message: str, The message to wrap.  It may have newlines in the middle of
      it.

  Returns:
    str, The wrapped message.
  """
  return '\n'.join([TEXTWRAP.fill(line) for line in message.splitlines()])


def _RawInput():
  """Reads a line from stdin, or None on EOF."""
  try:
    return input()
  except EOFError:
    return None


def PromptContinue(message=None, default=True):
  """Prompts the user a yes or no question and asks if they want to continue.

  Args:
    message: str, The prompt to print before the question.
    default: bool, What the default answer should be.  True for yes, False for
      no.

  Returns:
    bool, False if the user said no, True if the user said yes, the default
    if the user just hit enter, closed the stream or prompts are disabled.
  """
  if properties.VALUES.core.disable_prompts.GetBool():
    return default

  if message:
    sys.stderr.write(_DoWrap(message) + '\n\n')

  prompt_string = 'Do you want to continue'
  if default:
    prompt_string += ' (Y/n)?  '
  else:
    prompt_string += ' (y/N)?  '
  sys.stderr.write(_DoWrap(prompt_string))

  while True:
    answer = _RawInput()
    # pylint:disable=g-explicit-bool-comparison, We explicitly want to
    # distinguish between empty string and None.
    if answer == '':
      # User just hit enter, return default.
      sys.stderr.write('\n')
      return default
    elif answer is None:
      # This means we hit EOF, no input or user closed the stream.
      sys.stderr.write('\n')
      return default
    elif answer.strip().lower() in ['y', 'yes']:
      sys.stderr.write('\n')
      return True
    elif answer.strip().lower() in ['n', 'no']:
      sys.stderr.write('\n')
      return False
    else:
      sys.stderr.write("Please enter 'y' or 'n':  ")
