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

from Crypto.Cipher import DES

from vncpasswd.misc.errors import InvalidBlockLength

BLOCK_SIZE = DES.block_size

# Fixed key shared by all VNC implementations
VNC_KEY = bytes((23, 82, 107, 6, 35, 78, 88, 7))


def reverse_bits(byte):
    """RFB protocol puts the bits of each key byte in reverse order before
       handing the key to DES."""
    reversed_byte = 0
    for i in range(8):
        if byte & (1 << i):
            reversed_byte |= 1 << 7 - i
    return reversed_byte


def transform_key(key):
    if len(key) != BLOCK_SIZE:
        raise InvalidBlockLength('DES key must be {0} bytes, got {1}'.format(BLOCK_SIZE, len(key)))
    return bytes(reverse_bits(b) for b in key)


RFB_KEY = transform_key(VNC_KEY)


class RFBDes(object):
    """Single block DES in ECB mode. No IV, no padding, no chaining."""

    def __init__(self, key=RFB_KEY):
        if len(key) != BLOCK_SIZE:
            raise InvalidBlockLength('DES key must be {0} bytes, got {1}'.format(BLOCK_SIZE, len(key)))
        self.key = bytes(key)

    def _check_block(self, block):
        if len(block) != BLOCK_SIZE:
            raise InvalidBlockLength('Expected a single {0} byte block, got {1} bytes'.format(BLOCK_SIZE,
                                                                                           len(block)))

    def encrypt(self, block):
        self._check_block(block)
        return DES.new(self.key, DES.MODE_ECB).encrypt(bytes(block))

    def decrypt(self, block):
        self._check_block(block)
        return DES.new(self.key, DES.MODE_ECB).decrypt(bytes(block))


def encrypt_block(block, key):
    return RFBDes(key).encrypt(block)


def decrypt_block(block, key):
    return RFBDes(key).decrypt(block)
