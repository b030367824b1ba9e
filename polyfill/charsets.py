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

"""Character set tables used to translate characters into HTML entities.

Each charset maps a single literal character to its named entity. The
registry keeps the charsets in declaration order, which is the priority
order used when several charsets are merged together (see
:func:`polyfill.htmlstring.merge_charsets`).

All tables are read-only.
"""

import collections
import types

ALL = 'ALL'

# Only the characters HTML cannot carry literally.
ASCII = types.MappingProxyType(collections.OrderedDict([
    ('&', '&amp;'),
    ('"', '&quot;'),
    ('<', '&lt;'),
    ('>', '&gt;'),
    ("'", '&apos;'),  # HTML5; not standard in HTML 4.01
]))

# ISO-8859-1, Western Europe.
LATIN_1 = types.MappingProxyType(collections.OrderedDict([
    ('À', '&Agrave;'),
    ('Á', '&Aacute;'),
    ('Â', '&Acirc;'),
    ('Ã', '&Atilde;'),
    ('Ä', '&Auml;'),
    ('Å', '&Aring;'),
    ('Æ', '&AElig;'),
    ('Ç', '&Ccedil;'),
    ('È', '&Egrave;'),
    ('É', '&Eacute;'),
    ('Ê', '&Ecirc;'),
    ('Ë', '&Euml;'),
    ('Ì', '&Igrave;'),
    ('Í', '&Iacute;'),
    ('Î', '&Icirc;'),
    ('Ï', '&Iuml;'),
    ('Ð', '&ETH;'),
    ('Ñ', '&Ntilde;'),
    ('Ò', '&Ograve;'),
    ('Ó', '&Oacute;'),
    ('Ô', '&Ocirc;'),
    ('Õ', '&Otilde;'),
    ('Ö', '&Ouml;'),
    ('Ø', '&Oslash;'),
    ('Ù', '&Ugrave;'),
    ('Ú', '&Uacute;'),
    ('Û', '&Ucirc;'),
    ('Ü', '&Uuml;'),
    ('Ý', '&Yacute;'),
    ('Þ', '&THORN;'),
    ('ß', '&szlig;'),
    ('à', '&agrave;'),
    ('á', '&aacute;'),
    ('â', '&acirc;'),
    ('ã', '&atilde;'),
    ('ä', '&auml;'),
    ('å', '&aring;'),
    ('æ', '&aelig;'),
    ('ç', '&ccedil;'),
    ('è', '&egrave;'),
    ('é', '&eacute;'),
    ('ê', '&ecirc;'),
    ('ë', '&euml;'),
    ('ì', '&igrave;'),
    ('í', '&iacute;'),
    ('î', '&icirc;'),
    ('ï', '&iuml;'),
    ('ð', '&eth;'),
    ('ñ', '&ntilde;'),
    ('ò', '&ograve;'),
    ('ó', '&oacute;'),
    ('ô', '&ocirc;'),
    ('õ', '&otilde;'),
    ('ö', '&ouml;'),
    ('ø', '&oslash;'),
    ('ù', '&ugrave;'),
    ('ú', '&uacute;'),
    ('û', '&ucirc;'),
    ('ü', '&uuml;'),
    ('ý', '&yacute;'),
    ('þ', '&thorn;'),
    ('ÿ', '&yuml;'),
]))

# ISO-8859-2, Central and Eastern Europe, plus common typographic symbols.
# NOTE: Ń/ń reuse the &Ntilde;/&ntilde; entities, so decoding them through
# a merged table gives back Ñ/ñ.
LATIN_2 = types.MappingProxyType(collections.OrderedDict([
    ('Č', '&Ccaron;'),
    ('č', '&ccaron;'),
    ('Ď', '&Dcaron;'),
    ('ď', '&dcaron;'),
    ('Ě', '&Ecaron;'),
    ('ě', '&ecaron;'),
    ('Ī', '&Imacr;'),
    ('ī', '&imacr;'),
    ('Ľ', '&Lcaron;'),
    ('ľ', '&lcaron;'),
    ('Ń', '&Ntilde;'),
    ('ń', '&ntilde;'),
    ('Ř', '&Rcaron;'),
    ('ř', '&rcaron;'),
    ('Š', '&Scaron;'),
    ('š', '&scaron;'),
    ('Ť', '&Tcaron;'),
    ('ť', '&tcaron;'),
    ('Ů', '&Uring;'),
    ('ů', '&uring;'),
    ('Ÿ', '&Yuml;'),
    ('Ź', '&Zacute;'),
    ('ź', '&zacute;'),
    ('Ż', '&Zdot;'),
    ('ż', '&zdot;'),
    ('Ž', '&Zcaron;'),
    ('ž', '&zcaron;'),
    ('€', '&euro;'),  # ISO-8859-15, but commonly used
    ('°', '&deg;'),
    ('²', '&sup2;'),
    ('³', '&sup3;'),
    ('¼', '&frac14;'),
    ('½', '&frac12;'),
    ('¾', '&frac34;'),
    ('×', '&times;'),
    ('÷', '&divide;'),
    ('±', '&plusmn;'),
    ('•', '&bull;'),
    ('¶', '&para;'),
    ('§', '&sect;'),
    ('©', '&copy;'),
    ('®', '&reg;'),
    ('™', '&trade;'),
    ('–', '&ndash;'),
    ('—', '&mdash;'),
    ('«', '&laquo;'),
    ('»', '&raquo;'),
    ('…', '&hellip;'),
    ('‰', '&permil;'),
    ('¡', '&iexcl;'),
    ('¿', '&iquest;'),
]))

# A broad subset of common symbols and accented letters.
UTF8 = types.MappingProxyType(collections.OrderedDict([
    ('©', '&copy;'),
    ('®', '&reg;'),
    ('™', '&trade;'),
    ('€', '&euro;'),
    ('£', '&pound;'),
    ('¥', '&yen;'),
    ('¢', '&cent;'),
    ('§', '&sect;'),
    ('¶', '&para;'),
    ('•', '&bull;'),
    ('†', '&dagger;'),
    ('‡', '&Dagger;'),
    ('‰', '&permil;'),
    ('∞', '&infin;'),
    ('≠', '&ne;'),
    ('≤', '&le;'),
    ('≥', '&ge;'),
    ('√', '&radic;'),
    ('≈', '&asymp;'),
    ('±', '&plusmn;'),
    ('÷', '&divide;'),
    ('×', '&times;'),
    ('¬', '&not;'),
    ('°', '&deg;'),
    ('µ', '&micro;'),
    ('‾', '&oline;'),
    ('½', '&frac12;'),
    ('¼', '&frac14;'),
    ('¾', '&frac34;'),
    ('¹', '&sup1;'),
    ('²', '&sup2;'),
    ('³', '&sup3;'),
    ('æ', '&aelig;'),
    ('Æ', '&AElig;'),
    ('œ', '&oelig;'),
    ('Œ', '&OElig;'),
    ('ß', '&szlig;'),
    ('ñ', '&ntilde;'),
    ('Ñ', '&Ntilde;'),
    ('ç', '&ccedil;'),
    ('Ç', '&Ccedil;'),
    ('á', '&aacute;'),
    ('Á', '&Aacute;'),
    ('é', '&eacute;'),
    ('É', '&Eacute;'),
    ('í', '&iacute;'),
    ('Í', '&Iacute;'),
    ('ó', '&oacute;'),
    ('Ó', '&Oacute;'),
    ('ú', '&uacute;'),
    ('Ú', '&Uacute;'),
    ('à', '&agrave;'),
    ('À', '&Agrave;'),
    ('è', '&egrave;'),
    ('È', '&Egrave;'),
    ('ì', '&igrave;'),
    ('Ì', '&Igrave;'),
    ('ò', '&ograve;'),
    ('Ò', '&Ograve;'),
    ('ù', '&ugrave;'),
    ('Ù', '&Ugrave;'),
    ('â', '&acirc;'),
    ('Â', '&Acirc;'),
    ('ê', '&ecirc;'),
    ('Ê', '&Ecirc;'),
    ('î', '&icirc;'),
    ('Î', '&Icirc;'),
    ('ô', '&ocirc;'),
    ('Ô', '&Ocirc;'),
    ('û', '&ucirc;'),
    ('Û', '&Ucirc;'),
    ('ä', '&auml;'),
    ('Ä', '&Auml;'),
    ('ë', '&euml;'),
    ('Ë', '&Euml;'),
    ('ï', '&iuml;'),
    ('Ï', '&Iuml;'),
    ('ö', '&ouml;'),
    ('Ö', '&Ouml;'),
    ('ü', '&uuml;'),
    ('Ü', '&Uuml;'),
    ('ÿ', '&yuml;'),
    ('Ÿ', '&Yuml;'),
    ('ø', '&oslash;'),
    ('Ø', '&Oslash;'),
    ('å', '&aring;'),
    ('Å', '&Aring;'),
]))

CHARSETS = types.MappingProxyType(collections.OrderedDict([
    ('ASCII', ASCII),
    ('LATIN_1', LATIN_1),
    ('LATIN_2', LATIN_2),
    ('UTF8', UTF8),
]))


def charset_names():
    """Registered charset names, in priority order."""
    return tuple(CHARSETS)
