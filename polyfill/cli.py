# Copyright 2013-2015 Rackspace US, Inc.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#    http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Polyfill's base module for its command line interface."""

import argparse
import sys

from polyfill import charsets
from polyfill import chronos
from polyfill import config
from polyfill import htmlstring
from polyfill import log
from polyfill.exceptions import InvalidArgument
from polyfill.utils import cli as cli_utils

LOG = log.getLogger(__name__)


def platform_datetime(value):
    """Parse a --date value for argparse."""
    try:
        return chronos.from_platform_string(value)
    except InvalidArgument as exc:
        raise argparse.ArgumentTypeError(str(exc))


def encode(conf, args):
    return htmlstring.encode(cli_utils.read_text(args.text), conf.charset)


def decode(conf, args):
    return htmlstring.decode(cli_utils.read_text(args.text), conf.charset)


def format_date(conf, args):
    value = args.date or chronos.from_platform_string(
        chronos.to_platform_string())
    return chronos.format_date(value, args.template,
                               language=conf.language,
                               resolver=conf.catalog)


def list_charsets(conf, args):
    return '\n'.join('%-8s %3d characters' % (name, len(table))
                     for name, table in charsets.CHARSETS.items())


def build_parser(conf):
    """Return the `polyfill` parser with all its subcommands attached."""
    common = conf.build_cli_parser(add_help=False)
    parser = cli_utils.HelpfulParser(
        prog='polyfill',
        description='Encode HTML entities and format dates.',
        parents=[common],
    )
    subparser = parser.add_subparsers(
        title='commands',
        description='Available commands',
    )

    for name, func, summary in (
            ('encode', encode, 'translate characters into HTML entities'),
            ('decode', decode, 'translate HTML entities into characters')):
        sub = subparser.add_parser(
            name, help=summary, parents=[common],
            formatter_class=cli_utils.PolyfillHelpFormatter)
        sub.add_argument('text', nargs='?', default='-',
                         help="text to %s, `-` reads stdin" % name)
        sub.set_defaults(_func=func)

    sub = subparser.add_parser(
        'format', help='format a date with a placeholder template',
        parents=[common], formatter_class=cli_utils.PolyfillHelpFormatter)
    sub.add_argument('template', help="template such as 'YYYY-MM-DD HH:mm'")
    sub.add_argument('--date', type=platform_datetime, default=None,
                     help="UTC date to format as 'YYYY-MM-DD HH:MM:SS' "
                     "(default: now, in UTC)")
    sub.set_defaults(_func=format_date)

    sub = subparser.add_parser(
        'charsets', help='list the available charsets', parents=[common],
        formatter_class=cli_utils.PolyfillHelpFormatter)
    sub.set_defaults(_func=list_charsets)
    return parser


def main(argv=None):
    """Entry point for the `polyfill` command."""
    conf = config.Config(options=config.OPTIONS + log.OPTIONS,
                         prog='polyfill')
    parser = build_parser(conf)
    args = parser.parse_args(argv)
    if not hasattr(args, '_func'):
        parser.error('too few arguments')
    try:
        conf.parse(cli_args=vars(args))
    except argparse.ArgumentTypeError as exc:
        parser.error(str(exc))
    log.configure(conf)
    LOG.debug("Running %s.", args._func.__name__, extra={"data": dict(conf)})

    try:
        result = args._func(conf, args)
    except InvalidArgument as exc:
        parser.error(str(exc))
    sys.stdout.write(result + '\n')
    return 0


if __name__ == '__main__':

    sys.exit(main())
