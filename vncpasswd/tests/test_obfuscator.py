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

import string
import unittest

from vncpasswd.vnc.obfuscator import encode, decode
from vncpasswd.misc.errors import InvalidEncoding, UnsupportedCharacter


class ObfuscatorTests(unittest.TestCase):
    def test_known_password(self):
        self.assertEqual(encode('sT333ve2'), '6bcf2a4b6e5aca0f')
        self.assertEqual(decode('6BCF2A4B6E5ACA0F'), 'sT333ve2')

    def test_output_format(self):
        obfuscated = encode('hi')
        self.assertEqual(len(obfuscated), 16)
        self.assertTrue(all(c in '0123456789abcdef' for c in obfuscated))

    def test_eight_character_passwords_survive(self):
        for password in ('password', '12345678', 'P@$$w0rd', ' !~{}|\t\n', string.ascii_letters[:8]):
            self.assertEqual(decode(encode(password)), password)

    def test_short_password_keeps_padding(self):
        self.assertEqual(decode(encode('hi')), 'hi000000')

    def test_long_password_is_truncated(self):
        self.assertEqual(encode('abcdefghij'), encode('abcdefgh'))
        self.assertEqual(decode(encode('abcdefghij')), 'abcdefgh')

    def test_deterministic(self):
        self.assertEqual(encode('vncpass'), encode('vncpass'))

    def test_any_block_decodes(self):
        self.assertEqual(len(decode('ffffffffffffffff')), 8)
        self.assertEqual(len(decode('0000000000000000')), 8)

    def test_malformed_input(self):
        for obfuscated in ('6bcf2a4b', '6bcf2a4b6e5aca0fa', 'zzzzzzzzzzzzzzzz', '\ufb00' + '0' * 14):
            with self.assertRaises(InvalidEncoding):
                decode(obfuscated)

    def test_unsupported_character(self):
        with self.assertRaises(UnsupportedCharacter):
            encode('пайтон')


if __name__ == '__main__':
    unittest.main()
