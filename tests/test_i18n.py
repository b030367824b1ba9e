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

"""Tests for :mod:`i18n`."""

import os
import tempfile
import textwrap
import unittest

from polyfill import exceptions
from polyfill import i18n


class TestResolvers(unittest.TestCase):

    def test_default_resolver(self):
        self.assertEqual(i18n.default_resolver('Monday', 'it'), 'Monday')
        self.assertEqual(i18n.default_resolver('May'), 'May')

    def test_names(self):
        self.assertEqual(len(i18n.DAY_NAMES), 7)
        self.assertEqual(i18n.DAY_NAMES[0], 'Sunday')
        self.assertEqual(len(i18n.MONTH_NAMES), 12)


class TestMessageCatalog(unittest.TestCase):

    def setUp(self):
        self.catalog = i18n.MessageCatalog({
            'en': {'Monday': 'Monday'},
            'it': {'Monday': 'Lunedì', 'May': 'Maggio'},
        }, default_language='it')

    def write_catalog(self, content):
        fd, path = tempfile.mkstemp(suffix='.yaml')
        self.addCleanup(os.remove, path)
        with os.fdopen(fd, 'w', encoding='utf-8') as writer:
            writer.write(textwrap.dedent(content))
        return path

    def test_resolve(self):
        self.assertEqual(self.catalog.resolve('May', 'it'), 'Maggio')

    def test_callable(self):
        self.assertEqual(self.catalog('Monday', 'it'), 'Lunedì')

    def test_fallback_to_default_language(self):
        self.assertEqual(self.catalog('May', 'de'), 'Maggio')

    def test_fallback_to_canonical(self):
        self.assertEqual(self.catalog('June', 'de'), 'June')
        self.assertEqual(i18n.MessageCatalog()('June', 'de'), 'June')

    def test_repr(self):
        self.assertEqual(repr(self.catalog), '<MessageCatalog en, it>')

    def test_from_file(self):
        path = self.write_catalog("""\
            it:
              Monday: Lunedì
              January: Gennaio
            de:
              Monday: Montag
            """)
        catalog = i18n.MessageCatalog.from_file(path)
        self.assertEqual(catalog('Monday', 'it'), 'Lunedì')
        self.assertEqual(catalog('Monday', 'de'), 'Montag')
        self.assertEqual(catalog('January', 'de'), 'January')

    def test_from_file_keeps_codes_as_strings(self):
        path = self.write_catalog("""\
            no:
              Monday: Mandag
            on:
              Monday: "On"
            """)
        catalog = i18n.MessageCatalog.from_file(path)
        self.assertEqual(sorted(catalog.messages), ['no', 'on'])
        self.assertEqual(catalog('Monday', 'no'), 'Mandag')
        self.assertEqual(catalog('Monday', 'on'), 'On')

    def test_from_empty_file(self):
        catalog = i18n.MessageCatalog.from_file(self.write_catalog(''))
        self.assertEqual(catalog.messages, {})

    def test_from_invalid_file(self):
        for content in ("- Monday\n- Tuesday\n", "it: Lunedi\n"):
            path = self.write_catalog(content)
            with self.assertRaises(exceptions.InvalidArgument):
                i18n.MessageCatalog.from_file(path)


if __name__ == '__main__':
    unittest.main()
