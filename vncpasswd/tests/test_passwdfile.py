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
import stat
import shutil
import tempfile
import unittest

from vncpasswd.vnc.passwdfile import write_passwd_file, read_passwd_file
from vncpasswd.misc.errors import InvalidEncoding


class PasswdFileTests(unittest.TestCase):
    def setUp(self):
        self.work_dir = tempfile.mkdtemp()
        self.passwd_file = os.path.join(self.work_dir, '.vnc', 'passwd')

    def tearDown(self):
        if os.path.isdir(self.work_dir):
            shutil.rmtree(self.work_dir)

    def test_write_and_read(self):
        write_passwd_file(self.passwd_file, 'sT333ve2')

        with open(self.passwd_file, 'rb') as f:
            self.assertEqual(f.read(), bytes.fromhex('6bcf2a4b6e5aca0f'))
        self.assertEqual(read_passwd_file(self.passwd_file), ('sT333ve2', None))

    def test_view_only_password(self):
        write_passwd_file(self.passwd_file, 'secret', view_only_password='viewer')

        self.assertEqual(os.path.getsize(self.passwd_file), 16)
        self.assertEqual(read_passwd_file(self.passwd_file), ('secret00', 'viewer00'))

    def test_file_mode(self):
        os.makedirs(os.path.dirname(self.passwd_file))
        with open(self.passwd_file, 'w') as f:
            f.write('old')
        os.chmod(self.passwd_file, 0o644)

        write_passwd_file(self.passwd_file, 'password')
        self.assertEqual(stat.S_IMODE(os.stat(self.passwd_file).st_mode), 0o600)
        self.assertEqual(read_passwd_file(self.passwd_file), ('password', None))

    def test_invalid_size(self):
        os.makedirs(os.path.dirname(self.passwd_file))
        with open(self.passwd_file, 'wb') as f:
            f.write(b'\x01\x02\x03')

        with self.assertRaises(InvalidEncoding):
            read_passwd_file(self.passwd_file)


if __name__ == '__main__':
    unittest.main()
