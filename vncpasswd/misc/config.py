# Copyright (C) 2017 Johnny Vestergaard <jkv@unixcluster.dk>
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.

# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <http://www.gnu.org/licenses/>.

import os
import copy
import logging

import yaml

from vncpasswd.misc.errors import ConfigNotFound

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_FILE = os.path.join(os.path.dirname(os.path.dirname(__file__)), 'vncpasswd.yml')


def _merge(defaults, overrides):
    merged = copy.deepcopy(defaults)
    for key, value in overrides.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def _read_yaml(config_file):
    with open(config_file, 'r', encoding='utf-8') as f:
        return yaml.safe_load(f) or {}


def load_config(config_file=None):
    """
    Loads the YAML configuration.

    :param config_file: path to a configuration file. Keys missing from it are taken from the
                        default configuration shipped with the package.
    :return: configuration dictionary.
    """
    config = _read_yaml(DEFAULT_CONFIG_FILE)
    if config_file is not None:
        if not os.path.isfile(config_file):
            raise ConfigNotFound('Configuration file could not be found. ({0})'.format(config_file))
        config = _merge(config, _read_yaml(config_file))
        logger.debug('Using configuration file {0}'.format(config_file))

    config['passwd_file'] = os.path.expanduser(config['passwd_file'])
    return config
