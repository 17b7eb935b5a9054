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

"""Config for rmcmdlets: version, user agent and well known paths."""

from __future__ import absolute_import
from __future__ import division
from __future__ import unicode_literals

import os

from rmcmdlets.core.util import encoding

CLI_NAME = 'rmcmdlets'
CLI_VERSION = '0.1.0'
USER_AGENT = '{0}/{1}'.format(CLI_NAME, CLI_VERSION)

# The environment variable that overrides the global config directory.
RMCMDLETS_CONFIG = 'RMCMDLETS_CONFIG'

DEFAULT_MANAGEMENT_ENDPOINT = 'https://management.azure.com/'


class Paths(object):
  """Class to encapsulate the various directory paths of rmcmdlets.

  Attributes:
    global_config_dir: str, The path to the user's global config area.
  """

  _GLOBAL_CONFIG_DIR_NAME = CLI_NAME
  PROPERTIES_NAME = 'properties'

  def __init__(self):
    default_config_path = os.path.join(
        os.path.expanduser('~'), '.config', Paths._GLOBAL_CONFIG_DIR_NAME)
    self.global_config_dir = encoding.GetEncodedValue(
        os.environ, RMCMDLETS_CONFIG, default_config_path)

  @property
  def logs_dir(self):
    """Gets the path to the directory to put logs in for calliope commands.

    Returns:
      str, The path to the directory to put logs in.
    """
    return os.path.join(self.global_config_dir, 'logs')

  @property
  def user_properties_path(self):
    """Gets the path to the properties file in the user's global config dir.

    Returns:
      str, The path to the file.
    """
    return os.path.join(self.global_config_dir, Paths.PROPERTIES_NAME)
