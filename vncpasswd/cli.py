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

import sys
import logging
from argparse import ArgumentParser

import vncpasswd
from vncpasswd.misc.common import setup_logging, teardown_logging
from vncpasswd.misc.config import load_config
from vncpasswd.misc.errors import VncPasswdError
from vncpasswd.vnc.obfuscator import encode, decode
from vncpasswd.vnc.passwdfile import write_passwd_file, read_passwd_file

logger = logging.getLogger(__name__)


def build_parser():
    parser = ArgumentParser(description='Obfuscate and recover VNC server passwords')
    parser.add_argument('--version', action='version', version='%(prog)s {0}'.format(vncpasswd.version))
    parser.add_argument('--config', dest='config_file', default=None,
                        help='YAML configuration file, defaults to the packaged vncpasswd.yml')
    parser.add_argument('--logfile', dest='logfile', default=None)
    parser.add_argument('-v', action='store_true', default=False,
                        help='Output more verbose information to console. This will include passwords.')

    subparsers = parser.add_subparsers(dest='command')
    subparsers.required = True

    encode_parser = subparsers.add_parser('encode', help='print the obfuscated hex form of a password')
    encode_parser.add_argument('password')

    decode_parser = subparsers.add_parser('decode', help='recover a password from its obfuscated hex form')
    decode_parser.add_argument('obfuscated')

    write_parser = subparsers.add_parser('write', help='write a VNC passwd file')
    write_parser.add_argument('password')
    write_parser.add_argument('--file', dest='passwd_file', default=None)
    write_parser.add_argument('--view-only', dest='view_only_password', default=None)

    read_parser = subparsers.add_parser('read', help='recover the passwords stored in a VNC passwd file')
    read_parser.add_argument('--file', dest='passwd_file', default=None)

    return parser


def run_command(args, config):
    if args.command == 'encode':
        print(encode(args.password))
    elif args.command == 'decode':
        print(decode(args.obfuscated))
    elif args.command == 'write':
        passwd_file = args.passwd_file or config['passwd_file']
        write_passwd_file(passwd_file, args.password, args.view_only_password)
    elif args.command == 'read':
        passwd_file = args.passwd_file or config['passwd_file']
        password, view_only_password = read_passwd_file(passwd_file)
        print(password)
        if view_only_password is not None:
            print(view_only_password)


def main(argv=None):
    args = build_parser().parse_args(argv)

    try:
        config = load_config(args.config_file)
    except VncPasswdError as ex:
        logger.error(ex)
        return 1

    logfile = args.logfile
    if logfile is None and config['logging']['file']['enabled']:
        logfile = config['logging']['file']['filename']
    handlers = setup_logging(logfile, args.v or config['logging']['verbose'])

    try:
        run_command(args, config)
    except (VncPasswdError, OSError) as ex:
        logger.error(ex)
        return 1
    finally:
        teardown_logging(handlers)
    return 0
