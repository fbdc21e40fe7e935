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


def setup_logging(logfile, verbose):
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)

    formatter = logging.Formatter('%(asctime)-15s (%(name)s) %(message)s')
    console_log = logging.StreamHandler()

    if verbose:
        loglevel = logging.DEBUG
    else:
        loglevel = logging.INFO
        console_log.addFilter(LogFilter())

    console_log.setLevel(loglevel)
    console_log.setFormatter(formatter)
    root_logger.addHandler(console_log)
    handlers = [console_log]

    if logfile:
        file_log = logging.FileHandler(logfile)
        file_log.setLevel(logging.DEBUG)
        file_log.setFormatter(formatter)
        root_logger.addHandler(file_log)
        handlers.append(file_log)

    return handlers


def teardown_logging(handlers):
    root_logger = logging.getLogger()
    for handler in handlers:
        root_logger.removeHandler(handler)
        handler.close()


class LogFilter(logging.Filter):
    """Keeps records flagged as secret, e.g. plaintext passwords, off the console."""

    def filter(self, rec):
        if getattr(rec, 'secret', False):
            return False
        else:
            return True
