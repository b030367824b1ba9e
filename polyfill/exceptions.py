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
"""Polyfill exceptions.

Every error raised on purpose by this package derives from
PolyfillException. InvalidArgument is also a ValueError so callers that
only know the builtin hierarchy still catch it.
"""

__all__ = (
    'PolyfillException',
    'InvalidArgument',
    'PolyfillConfigException',
)


class PolyfillException(Exception):

    """Base exception for all exceptions raised by the polyfill package."""


class InvalidArgument(PolyfillException, ValueError):

    """Raised when a caller supplies a value the operation cannot accept.

    The offending value is kept on the instance so callers can report it
    without parsing the message.
    """

    def __init__(self, message, argument=None, value=None):
        """Customize Exception Constructor."""
        super(InvalidArgument, self).__init__(message)
        self.message = message
        self.argument = argument
        self.value = value

    def __str__(self):
        """Include custom data in string."""
        return self.message

    def __repr__(self):
        """Include custom data in representation."""
        rpr = 'InvalidArgument("%s"' % self.message
        if self.argument:
            rpr += ', argument=%s, value=%r' % (self.argument, self.value)
        rpr += ')'
        return rpr


class PolyfillConfigException(PolyfillException):

    """Errors raised by polyfill/config."""

