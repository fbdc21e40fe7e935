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

import logging

from vncpasswd.vnc.des import RFBDes
from vncpasswd.vnc.password import normalize_password
from vncpasswd.vnc.hexcodec import to_hex, from_hex

logger = logging.getLogger(__name__)

# every byte value maps to exactly one character
RAW_ENCODING = 'latin-1'


def encode_block(password):
    block = normalize_password(password)
    return RFBDes().encrypt(block)


def decode_block(block):
    return RFBDes().decrypt(block).decode(RAW_ENCODING)


def encode(password):
    """
    Obfuscates a password the way VNC servers store it in their configuration.

    :param password: the password, only the first 8 characters are kept.
    :return: 16 lowercase hex digits.
    """
    obfuscated = to_hex(encode_block(password))
    logger.debug('Encoded password {0!r} to {1}'.format(password, obfuscated), extra={'secret': True})
    return obfuscated


def decode(obfuscated):
    """
    Recovers the stored password from its obfuscated form.

    The result is always 8 characters, passwords that were shorter keep
    their '0' padding.

    :param obfuscated: 16 hex digits, case insensitive.
    """
    password = decode_block(from_hex(obfuscated))
    logger.debug('Decoded {0} to password {1!r}'.format(obfuscated, password), extra={'secret': True})
    return password
