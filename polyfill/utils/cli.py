# Copyright (c) 2011-2015 Rackspace US, Inc.
#
# All Rights Reserved.
#    Licensed under the Apache License, Version 2.0 (the "License"); you may
#    not use this file except in compliance with the License. You may obtain
#    a copy of the License at
#
#         http://www.apache.org/licenses/LICENSE-2.0
#
#    Unless required by applicable law or agreed to in writing, software
#    distributed under the License is distributed on an "AS IS" BASIS, WITHOUT
#    WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied. See the
#    License for the specific language governing permissions and limitations
#    under the License.
"""CLI utilities."""

import argparse
import sys


PolyfillHelpFormatter = type('PolyfillHelpFormatter',
                             (argparse.ArgumentDefaultsHelpFormatter,
                              argparse.RawTextHelpFormatter), {})

_MISSING_ARGUMENTS = ('too few arguments', 'arguments are required')


class HelpfulParser(argparse.ArgumentParser):

    """An argparser that won't leave you hanging."""

    def __init__(self, *args, **kwargs):
        """Set formatter_class if it is not explicitly specified."""
        kwargs.setdefault('formatter_class', PolyfillHelpFormatter)
        super(HelpfulParser, self).__init__(*args, **kwargs)

    def error(self, message, print_help=False):
        """Provide a more helpful message if there are too few arguments."""
        if any(hint in message.lower() for hint in _MISSING_ARGUMENTS):
            message = ("%s. Try getting help with `%s --help`"
                       % (message, self.prog))
        if print_help:
            self.print_help(sys.stderr)
        else:
            self.print_usage(sys.stderr)
        sys.stderr.write('\nerror: %s\n' % message)
        sys.exit(2)


def read_text(value, stdin=None):
    """Return `value`, or the content of stdin when `value` is `-`."""
    if value == '-':
        stdin = stdin or sys.stdin
        return stdin.read()
    return value
