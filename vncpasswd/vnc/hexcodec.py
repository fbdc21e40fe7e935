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

import binascii

from vncpasswd.vnc.des import BLOCK_SIZE
from vncpasswd.misc.errors import InvalidEncoding, InvalidBlockLength

HEX_ALPHABET = '0123456789ABCDEF'
HEX_LENGTH = BLOCK_SIZE * 2


def to_hex(block):
    if len(block) != BLOCK_SIZE:
        raise InvalidBlockLength('Expected a single {0} byte block, got {1} bytes'.format(BLOCK_SIZE, len(block)))
    # hexlify emits the high nibble first
    return binascii.hexlify(bytes(block)).decode().lower()


def from_hex(text):
    # validate before upper-casing, upper() may expand a character into several
    if len(text) != HEX_LENGTH:
        raise InvalidEncoding('Obfuscated password must be {0} hex digits, got {1}'.format(HEX_LENGTH, len(text)))
    for c in text:
        if c not in HEX_ALPHABET and c not in HEX_ALPHABET.lower():
            raise InvalidEncoding('Invalid hex digit {0!r} in obfuscated password'.format(c))
    return binascii.unhexlify(text.upper())
