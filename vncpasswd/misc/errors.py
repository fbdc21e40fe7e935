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


class VncPasswdError(Exception):
    pass


class InvalidEncoding(VncPasswdError, ValueError):
    """Obfuscated value is not 16 hex digits, or a passwd file has the wrong size."""


class InvalidBlockLength(VncPasswdError, ValueError):
    """A cipher block or key was not exactly 8 bytes."""


class UnsupportedCharacter(VncPasswdError, ValueError):
    """Password contains characters that can not be stored in a single ASCII byte."""


class ConfigNotFound(VncPasswdError):
    pass
