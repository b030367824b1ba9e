# pylint: disable=C0103,C0111,R0903,R0904,W0212,W0232

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

"""Functional tests for command line use."""

from io import StringIO
import argparse
import datetime
import os
import tempfile
import time
import unittest

import mock

from polyfill import chronos
from polyfill import cli as polyfill_cli
from polyfill import config
from polyfill import log
from polyfill.utils import cli as cli_utils

# Captured before any test patches chronos.time.gmtime.
_real_gmtime = time.gmtime


class CLITestCase(unittest.TestCase):

    def setUp(self):
        patchers = [
            mock.patch.dict(os.environ, {}, clear=True),
            mock.patch.object(log, 'configure'),
            mock.patch('sys.stdout', new_callable=StringIO),
            mock.patch('sys.stderr', new_callable=StringIO),
        ]
        for patcher in patchers:
            patcher.start()
            self.addCleanup(patcher.stop)

    def run_cli(self, *argv):
        returncode = polyfill_cli.main(list(argv))
        self.assertEqual(returncode, 0)
        return polyfill_cli.sys.stdout.getvalue()

    def assertExits(self, *argv):
        with self.assertRaises(SystemExit) as ctx:
            polyfill_cli.main(list(argv))
        self.assertEqual(ctx.exception.code, 2)
        return polyfill_cli.sys.stderr.getvalue()


class TestEncodeDecode(CLITestCase):

    def test_encode(self):
        self.assertEqual(self.run_cli('encode', '<é>'), '&lt;&eacute;&gt;\n')

    def test_encode_charset_after_command(self):
        self.assertEqual(self.run_cli('encode', '<é>', '--charset', 'ascii'),
                         '&lt;é&gt;\n')

    def test_encode_charset_before_command(self):
        self.assertEqual(self.run_cli('--charset', 'ascii', 'encode', '<é>'),
                         '&lt;é&gt;\n')

    def test_charset_from_env(self):
        os.environ['POLYFILL_CHARSET'] = 'latin_1'
        self.assertEqual(self.run_cli('encode', '<é>'), '<&eacute;>\n')

    def test_decode(self):
        self.assertEqual(self.run_cli('decode', '&lt;&euro;&gt;'), '<€>\n')

    def test_decode_stdin(self):
        with mock.patch('sys.stdin', StringIO('&amp;lt;\n')):
            self.assertEqual(self.run_cli('decode', '-'), '&lt;\n\n')

    def test_encode_stdin_by_default(self):
        with mock.patch('sys.stdin', StringIO('a<b')):
            self.assertEqual(self.run_cli('encode'), 'a&lt;b\n')

    def test_invalid_charset(self):
        stderr = self.assertExits('encode', 'text', '--charset', 'latin-9')
        self.assertIn('error:', stderr)
        self.assertIn('LATIN-9', stderr)

    def test_errors_leave_stdout_empty(self):
        stderr = self.assertExits('encode', 'x', '--charset', 'bogus')
        self.assertEqual(polyfill_cli.sys.stdout.getvalue(), '')
        self.assertIn('usage: polyfill encode', stderr)

    def test_invalid_charset_from_env(self):
        os.environ['POLYFILL_CHARSET'] = 'bogus'
        stderr = self.assertExits('encode', 'text')
        self.assertIn('BOGUS', stderr)


class TestFormat(CLITestCase):

    def test_format(self):
        self.assertEqual(
            self.run_cli('format', 'YYYY-MM-DD HH:mm:ss',
                         '--date', '2024-03-05 14:07:09'),
            '2024-03-05 14:07:09\n')

    def test_format_twelve_hours(self):
        self.assertEqual(
            self.run_cli('format', 'hh:mm A', '--date', '2024-03-05 14:07:09'),
            '02:07 PM\n')

    def test_format_weekday(self):
        self.assertEqual(
            self.run_cli('format', 'dddd DD', '--date', '2024-03-05'),
            'Tuesday 05\n')

    def test_format_with_catalog(self):
        fd, path = tempfile.mkstemp(suffix='.yaml')
        self.addCleanup(os.remove, path)
        with os.fdopen(fd, 'w', encoding='utf-8') as writer:
            writer.write("it:\n  Tuesday: Martedì\n")
        self.assertEqual(
            self.run_cli('format', 'dddd', '--date', '2024-03-05',
                         '--language', 'it', '--catalog', path),
            'Martedì\n')

    def test_format_language_without_catalog(self):
        self.assertEqual(
            self.run_cli('format', 'ddd', '--date', '2024-03-05',
                         '--language', 'it'),
            'Tue\n')

    @mock.patch.object(chronos.time, 'gmtime')
    def test_format_defaults_to_utc_now(self, mock_gmt):
        mock_gmt.return_value = _real_gmtime(86400 * 366 + 3 * 3600)
        self.assertEqual(self.run_cli('format', 'YYYY/M/D H'), '1971/1/2 3\n')

    @mock.patch.object(chronos.time, 'gmtime')
    def test_default_matches_explicit_date(self, mock_gmt):
        mock_gmt.return_value = _real_gmtime(0)
        implicit = self.run_cli('format', 'YYYY-MM-DD HH:mm')
        polyfill_cli.sys.stdout.truncate(0)
        polyfill_cli.sys.stdout.seek(0)
        explicit = self.run_cli('format', 'YYYY-MM-DD HH:mm',
                                '--date', chronos.to_platform_string())
        self.assertEqual(implicit, explicit)
        self.assertEqual(explicit, '1970-01-01 00:00\n')

    def test_invalid_date(self):
        stderr = self.assertExits('format', 'YYYY', '--date', 'yesterday')
        self.assertIn('yesterday', stderr)

    def test_missing_template(self):
        stderr = self.assertExits('format')
        self.assertIn('template', stderr)


class TestCharsets(CLITestCase):

    def test_charsets(self):
        output = self.run_cli('charsets').splitlines()
        self.assertEqual([line.split()[0] for line in output],
                         ['ASCII', 'LATIN_1', 'LATIN_2', 'UTF8'])
        self.assertEqual(output[0], 'ASCII      5 characters')


class TestPolyfillCLI(CLITestCase):

    def test_no_command(self):
        stderr = self.assertExits()
        self.assertIn('too few arguments', stderr)
        self.assertIn('Try getting help with `polyfill --help`', stderr)

    def test_help(self):
        with self.assertRaises(SystemExit) as ctx:
            polyfill_cli.main(['--help'])
        self.assertEqual(ctx.exception.code, 0)
        output = polyfill_cli.sys.stdout.getvalue()
        self.assertIn('usage: polyfill', output)
        for command in ('encode', 'decode', 'format', 'charsets'):
            self.assertIn(command, output)

    def test_logging_configured(self):
        self.run_cli('--quiet', 'charsets')
        conf = log.configure.call_args[0][0]
        self.assertIsInstance(conf, config.Config)
        self.assertTrue(conf.quiet)
        self.assertFalse(conf.verbose)

    def test_platform_datetime(self):
        self.assertEqual(polyfill_cli.platform_datetime('2024-01-31 UTC'),
                         datetime.datetime(2024, 1, 31))
        with self.assertRaises(argparse.ArgumentTypeError):
            polyfill_cli.platform_datetime('31/01/2024')


class TestCLIUtils(unittest.TestCase):

    def test_read_text(self):
        self.assertEqual(cli_utils.read_text('plain'), 'plain')
        self.assertEqual(cli_utils.read_text('-', stdin=StringIO('piped')),
                         'piped')

    @mock.patch('sys.stderr', new_callable=StringIO)
    def test_helpful_parser_hint(self, mock_stderr):
        parser = cli_utils.HelpfulParser(prog='polyfill')
        parser.add_argument('text')
        with self.assertRaises(SystemExit) as ctx:
            parser.parse_args([])
        self.assertEqual(ctx.exception.code, 2)
        self.assertIn('Try getting help with `polyfill --help`',
                      mock_stderr.getvalue())

    @mock.patch('sys.stderr', new_callable=StringIO)
    def test_helpful_parser_other_errors(self, mock_stderr):
        parser = cli_utils.HelpfulParser(prog='polyfill')
        with self.assertRaises(SystemExit):
            parser.error('something else')
        self.assertIn('error: something else', mock_stderr.getvalue())
        self.assertNotIn('--help', mock_stderr.getvalue())


if __name__ == '__main__':
    unittest.main()
