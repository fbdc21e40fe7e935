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

from vncpasswd.misc.errors import UnsupportedCharacter

PASSWORD_LENGTH = 8
PAD_CHAR = '0'


def normalize_password(password):
    """
    Turns a password into the single 8 byte block VNC servers store.

    Longer passwords are truncated and shorter ones are padded with '0', exactly
    like the VNC server configuration tools do. Only the retained characters are
    encoded, and they must be ASCII.

    :param password: the password as a str.
    :return: 8 bytes.
    """
    fitted = password[:PASSWORD_LENGTH].ljust(PASSWORD_LENGTH, PAD_CHAR)
    try:
        return fitted.encode('ascii')
    except UnicodeEncodeError as ex:
        raise UnsupportedCharacter('Password character {0!r} at position {1} is not ASCII'.format(
            ex.object[ex.start], ex.start)) from ex
