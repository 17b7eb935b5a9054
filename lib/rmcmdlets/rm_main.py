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

"""rmcmdlets command line tool."""

from __future__ import absolute_import
from __future__ import division
from __future__ import unicode_literals

import os
import signal
import sys

from rmcmdlets.calliope import cli
from rmcmdlets.core import config
from rmcmdlets.core import log


def CTRLCHandler(unused_signal, unused_frame):
  """Custom SIGINT handler.

  Signal handler that doesn't print the stack trace when a command is
  killed by keyboard interrupt.
  """
  log.err.Print('\n\nCommand killed by keyboard interrupt\n')
  # Kill ourselves with SIGINT so our parent can detect that we exited because
  # of a signal. SIG_DFL disables further KeyboardInterrupt exceptions.
  signal.signal(signal.SIGINT, signal.SIG_DFL)
  os.kill(os.getpid(), signal.SIGINT)
  # Just in case the kill failed ...
  sys.exit(1)


def CreateCLI():
  """Generates the rmcmdlets CLI from the 'surface' package.

  Returns:
    calliope cli object.
  """
  loader = cli.CLILoader(
      name=config.CLI_NAME, surface_package='rmcmdlets.surface')
  return loader.Generate()


def main(rm_cli=None):
  signal.signal(signal.SIGINT, CTRLCHandler)
  if hasattr(signal, 'SIGPIPE'):
    signal.signal(signal.SIGPIPE, signal.SIG_DFL)

  if rm_cli is None:
    rm_cli = CreateCLI()
  try:
    context = rm_cli.Execute()
  except Exception as err:  # pylint:disable=broad-except
    # Failures re-raised under core/error_action=stop were already reported;
    # anything else is a crash.
    log.file_only_logger.exception('BEGIN CRASH STACKTRACE')
    sys.exit(getattr(err, 'exit_code', 1))
  sys.exit(context.exit_code)


if __name__ == '__main__':
  main()
