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
#
"""Logging Boilerplate.

Named `log` so as not to conflict with stdlib logging.

Implements:
- integration with :mod:`config` for configuring logging.
- enhanced handling of extra data and output formatting.


Usage with config:

    from polyfill import config
    from polyfill import log

    conf = config.Config(options=config.OPTIONS + log.OPTIONS)
    conf.parse()
    log.configure(conf)


Usage in module:

    from polyfill import log  # instead of `import logging`

    LOG = log.getLogger(__name__)
"""
import logging
import logging.config
import os
import sys

from polyfill import config

OPTIONS = [
    config.Option("--logconfig",
                  group="logging",
                  help="Optional logging configuration file"),
    config.Option("-d", "--debug",
                  group="logging",
                  default=False,
                  action="store_true",
                  help="turn on additional debugging output. Log output "
                  "includes source file path and line numbers"),
    config.Option("-v", "--verbose",
                  group="logging",
                  default=False,
                  action="store_true",
                  help="turn up logging to DEBUG (default is WARNING)"),
    config.Option("-q", "--quiet",
                  group="logging",
                  default=False,
                  action="store_true",
                  help="turn down logging to ERROR (default is WARNING)"),
]

getLogger = logging.getLogger  # pylint: disable=C0103


def log_level(conf):
    """Get debug settings from arguments.

    --debug: turn on additional debug output (implies logging.DEBUG)
    --verbose: turn up logging output (logging.DEBUG)
    --quiet: turn down logging output (logging.ERROR)
    default is logging.WARNING, the command line prints its results on
    stdout and only problems belong on stderr.
    """
    if conf.get('debug') is True:
        return logging.DEBUG
    elif conf.get('verbose') is True:
        return logging.DEBUG
    elif conf.get('quiet') is True:
        return logging.ERROR
    else:
        return logging.WARNING


def configure(conf, default_config=None):
    """Configure logging based on log config file.

    Turn on console logging if no logging files found

    :param conf: mapping with configuration values (ex. config.Config)
    """
    logconfig = conf.get('logconfig')
    if logconfig and os.path.isfile(logconfig):
        logging.config.fileConfig(logconfig,
                                  disable_existing_loggers=False)
    elif default_config and os.path.isfile(default_config):
        logging.config.fileConfig(default_config,
                                  disable_existing_loggers=False)
    else:
        init_console_logging(conf)


def _get_debug_formatter(conf):
    """Get debug formatter based on configuration.

    --debug: log line numbers and file data also
    --verbose: standard debug
    --quiet: bare messages
    """
    if conf.get('debug') is True:
        return DebugFormatter('%(pathname)s:%(lineno)d: %(levelname)-8s '
                              '%(message)s')
    elif conf.get('verbose') is True:
        return logging.Formatter(
            '%(name)-30s: %(levelname)-8s %(message)s')
    elif conf.get('quiet') is True:
        return logging.Formatter('%(message)s')
    else:
        return logging.Formatter(logging.BASIC_FORMAT)


def init_console_logging(conf):
    """Log to console."""
    console = find_console_handler(logging.getLogger())
    if not console:
        console = logging.StreamHandler()
    logging_level = log_level(conf)
    console.setLevel(logging_level)
    console.setFormatter(_get_debug_formatter(conf))
    logging.getLogger().addHandler(console)
    logging.getLogger().setLevel(logging_level)


class DebugFormatter(logging.Formatter):

    """Log formatter.

    Outputs any 'data' values passed in the 'extra' parameter if provided.
    """

    def format(self, record):
        """Print out any 'extra' data provided in logs."""
        if hasattr(record, 'data'):
            return "%s. DEBUG DATA=%s" % (
                logging.Formatter.format(self, record),
                record.__dict__['data'])
        return logging.Formatter.format(self, record)


def find_console_handler(logger):
    """Return a stream handler, if it exists."""
    for handler in logger.handlers:
        if (isinstance(handler, logging.StreamHandler) and
                handler.stream == sys.stderr):
            return handler
