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
import logging

from vncpasswd.vnc.des import BLOCK_SIZE
from vncpasswd.vnc.obfuscator import encode_block, decode_block
from vncpasswd.misc.errors import InvalidEncoding

logger = logging.getLogger(__name__)

PASSWD_FILE_MODE = 0o600


def write_passwd_file(path, password, view_only_password=None):
    """
    Writes a passwd file in the format read by TightVNC and TigerVNC servers.

    :param path: location of the file, usually ~/.vnc/passwd.
    :param password: full access password.
    :param view_only_password: optional password granting view-only access.
    """
    data = encode_block(password)
    if view_only_password is not None:
        data += encode_block(view_only_password)

    directory = os.path.dirname(path)
    if directory and not os.path.isdir(directory):
        os.makedirs(directory)

    fd = os.open(path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, PASSWD_FILE_MODE)
    with os.fdopen(fd, 'wb') as passwd_file:
        passwd_file.write(data)
    # O_CREAT does not touch the mode of an existing file
    os.chmod(path, PASSWD_FILE_MODE)
    logger.info('Wrote VNC password file {0}'.format(path))


def read_passwd_file(path):
    with open(path, 'rb') as passwd_file:
        data = passwd_file.read()

    if len(data) not in (BLOCK_SIZE, BLOCK_SIZE * 2):
        raise InvalidEncoding('{0} is not a VNC password file, expected {1} or {2} bytes but found {3}'.format(
            path, BLOCK_SIZE, BLOCK_SIZE * 2, len(data)))

    password = decode_block(data[:BLOCK_SIZE])
    view_only_password = None
    if len(data) == BLOCK_SIZE * 2:
        view_only_password = decode_block(data[BLOCK_SIZE:])
    logger.debug('Read VNC password file {0}'.format(path))
    return password, view_only_password
