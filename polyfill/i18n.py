# Copyright (c) 2011-2015 Rackspace US, Inc.
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

"""Name translation for day and month names.

A resolver is any callable taking the canonical English name and a
language code and returning the translated name, or the canonical name
when no translation exists:

    resolver('Monday', 'it')  # 'Lunedì'

:func:`default_resolver` never translates. :class:`MessageCatalog` looks
names up in a dict, optionally loaded from a YAML file shaped like:

    it:
      Monday: Lunedì
      January: Gennaio
    de:
      Monday: Montag
"""

import logging

import yaml

from polyfill.exceptions import InvalidArgument

LOG = logging.getLogger(__name__)

DEFAULT_LANGUAGE = 'en'

# Sunday first, matching the platform's weekday numbering.
DAY_NAMES = ('Sunday', 'Monday', 'Tuesday', 'Wednesday', 'Thursday',
             'Friday', 'Saturday')
MONTH_NAMES = ('January', 'February', 'March', 'April', 'May', 'June',
               'July', 'August', 'September', 'October', 'November',
               'December')


def default_resolver(name, language=DEFAULT_LANGUAGE):
    """Return the canonical name untranslated."""
    return name


class MessageCatalog(object):

    """Resolve canonical names from per-language message tables."""

    def __init__(self, messages=None, default_language=DEFAULT_LANGUAGE):
        self.messages = messages or {}
        self.default_language = default_language

    @classmethod
    def from_file(cls, path, **kwargs):
        """Load a catalog from a YAML file.

        Every scalar is read as a string, so language codes such as `no`
        or `on` are not turned into booleans.
        """
        with open(path, 'r', encoding='utf-8') as reader:
            data = yaml.load(reader, Loader=yaml.BaseLoader)
        if data is None:
            data = {}
        if not isinstance(data, dict) or not all(
                isinstance(v, dict) for v in data.values()):
            raise InvalidArgument(
                "Invalid message catalog: %s must map languages to "
                "name/translation pairs" % path,
                argument='path', value=path)
        LOG.debug("Loaded %d languages from %s.", len(data), path)
        return cls(messages=data, **kwargs)

    def resolve(self, name, language=None):
        """Translate `name`, falling back to the default language."""
        for lang in (language, self.default_language):
            if lang and name in self.messages.get(lang, {}):
                return self.messages[lang][name]
        LOG.debug("No translation of %s for %s.", name, language)
        return name

    def __call__(self, name, language=None):
        return self.resolve(name, language=language)

    def __repr__(self):
        return "<MessageCatalog %s>" % ', '.join(sorted(self.messages))
