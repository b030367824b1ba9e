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

"""HTML string helpers.

Encode characters that would display corrupted or unsafe in an HTML string
into named entities, and decode them back.

Usage:

    from polyfill import htmlstring

    htmlstring.encode('<b>Café</b>')             # all charsets
    htmlstring.encode('<b>Café</b>', 'ascii')    # '&lt;b&gt;Café&lt;/b&gt;'
    htmlstring.decode('&Eacute;t&eacute;', 'LATIN_1')

The charset name is case-insensitive. `ALL` (the default) merges every
registered charset in registry order; on a collision the earlier charset
wins. Decoding inverts that merged table, so when two characters share an
entity only the first one can be recovered.
"""

import functools
import logging
import re

from polyfill import charsets
from polyfill.exceptions import InvalidArgument

LOG = logging.getLogger(__name__)


def resolve_charset_names(charset=None):
    """Return the registry names selected by a charset argument.

    :keyword charset: a registered charset name, `ALL` or None (same as
        `ALL`). Case-insensitive.
    :raises InvalidArgument: if the charset is not supported.
    """
    name = charsets.ALL if not charset else charset.upper()
    if name == charsets.ALL:
        return charsets.charset_names()
    if name not in charsets.CHARSETS:
        raise InvalidArgument(
            "Invalid parameter: the requested charset (%s) is not "
            "supported" % name, argument='charset', value=name)
    return (name,)


def merge_charsets(names, registry=None):
    """Merge several charsets into a single character to entity dict.

    Charsets are read in the order given. When a character is already in
    the result, later definitions are ignored. Names missing from the
    registry are skipped.

    :param names: iterable of charset names.
    :keyword registry: mapping of names to charsets (defaults to the
        built-in registry).
    """
    if registry is None:
        registry = charsets.CHARSETS
    merged = {}
    for name in names:
        charset = registry.get(name)
        if not charset:
            LOG.debug("Skipping unknown charset %s.", name)
            continue
        for char, entity in charset.items():
            merged.setdefault(char, entity)
    return merged


def invert_mapping(mapping):
    """Swap keys and values; the first key seen for a value is kept."""
    inverted = {}
    for key, value in mapping.items():
        if value in inverted:
            LOG.debug("Dropping %r -> %r, %r already decodes to %r.",
                      value, key, value, inverted[value])
            continue
        inverted[value] = key
    return inverted


def _alternation(keys):
    """Compile a regex matching any of the literal keys, longest first."""
    ordered = sorted(keys, key=len, reverse=True)
    return re.compile('|'.join(re.escape(key) for key in ordered))


@functools.lru_cache(maxsize=None)
def _encoder(names):
    table = merge_charsets(names)
    return _alternation(table), table


@functools.lru_cache(maxsize=None)
def _decoder(names):
    table = invert_mapping(merge_charsets(names))
    return _alternation(table), table


def _translate(text, pattern, table):
    return pattern.sub(lambda match: table[match.group(0)], text)


def encode(text, charset=None):
    """Encode a string with the provided charset.

    Available charsets are: ALL, ASCII, LATIN_1, LATIN_2, UTF8.

    :param text: string to encode. Empty or None returns an empty string.
    :keyword charset: name of the charset used for the encoding
        (default: ALL).
    :returns: the string with characters translated into HTML entities.
    :raises InvalidArgument: if the charset is not supported.
    """
    if not text:
        return ''
    pattern, table = _encoder(resolve_charset_names(charset))
    return _translate(text, pattern, table)


def decode(text, charset=None):
    """Decode a string using the provided charset.

    Available charsets are: ALL, ASCII, LATIN_1, LATIN_2, UTF8.

    Entities that are not part of the charset are left untouched. The
    string is scanned once, so `&amp;lt;` decodes to `&lt;`.

    :param text: string to decode. Empty or None returns an empty string.
    :keyword charset: name of the charset used for the decoding
        (default: ALL).
    :returns: the string with HTML entities translated into characters.
    :raises InvalidArgument: if the charset is not supported.
    """
    if not text:
        return ''
    pattern, table = _decoder(resolve_charset_names(charset))
    return _translate(text, pattern, table)
