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
# pylint: disable=W0212

r"""Configuration Parser.

Configurable parser that will parse config files, environment variables
and command-line arguments.

Example polyfill.ini file:

    [polyfill]
    charset = latin_1

    [format]
    language = it

Example usage:

    from polyfill import config

    options = [
        config.Option("--charset",
                      help="charset used to encode and decode",
                      default="ALL",
                      type=config.charset_name,
                      env="POLYFILL_CHARSET"),
        config.Option("--language",
                      help="language of day and month names",
                      default="en",
                      ini_section="format"),
    ]
    conf = config.Config(prog='polyfill', options=options,
                         ini_paths=['/etc/polyfill/polyfill.ini'])
    conf.parse()
    print(conf)

Precedence, lowest first: defaults, ini files, environment, command line.

    $ POLYFILL_CHARSET=ascii polyfill encode '<b>' --language de
    <Config charset=ASCII, language=de>
"""

import argparse
import collections.abc
import configparser
import copy
import logging
import os
import sys

from polyfill import htmlstring
from polyfill import i18n
from polyfill.exceptions import InvalidArgument
from polyfill.exceptions import PolyfillConfigException

LOG = logging.getLogger(__name__)


class Option(object):

    """Holds a configuration option and the names and locations for it.

    Instantiate options using the same arguments as you would for an
    add_arguments call in argparse. However, you have additional kwargs
    available:

        env: the name of the environment variable to use for this option
        ini_section: the ini file section to look this value up from
        group: the title of the argument group shown in the help output
    """

    def __init__(self, *args, **kwargs):
        """Initialize options."""
        self.args = args or []
        self.kwargs = kwargs or {}
        self._action = None

    def __copy__(self):
        """Implement copy."""
        newone = type(self)(*copy.copy(self.args), **copy.copy(self.kwargs))
        updater = {k: v for k, v in self.__dict__.items()
                   if k not in ('args', 'kwargs')}
        newone.__dict__.update(updater)
        return newone

    def __repr__(self):
        """Customize repr to show option args and kwargs."""
        args = ', '.join(self.args)
        kwrgs = ', '.join(['%s=%s' % (k, v) for k, v in self.kwargs.items()])
        rpr = 'Option(%s' % args
        if kwrgs:
            rpr = '%s, %s' % (rpr, kwrgs)
        return '%s)' % rpr

    def add_argument(self, parser, permissive=False, **override_kwargs):
        """Add an option to a an argparse parser.

        :keyword permissive: when true, build a parser that does not validate
            required arguments.
        """
        kwargs = copy.copy(self.kwargs)
        if 'env' in kwargs and 'help' in kwargs:
            kwargs['help'] = "%s (or set %s)" % (kwargs['help'],
                                                 kwargs['env'])
        if permissive:
            kwargs.pop('required', None)
        kwargs.pop('env', None)
        kwargs.pop('ini_section', None)

        groupname = kwargs.pop('group', None)
        if groupname:
            exists = [grp for grp in parser._action_groups
                      if grp.title == groupname]
            if exists:
                parser = exists[0]
            else:
                parser = parser.add_argument_group(title=groupname)

        kwargs.update(override_kwargs)
        self._action = parser.add_argument(*self.args, **kwargs)

    @property
    def type(self):
        """The callable used to parse values of this option."""
        return self.kwargs.get("type", str)

    @property
    def name(self):
        """The name of the option as determined from the args."""
        for arg in self.args:
            if arg.startswith("--"):
                return arg[2:].replace("-", "_")
            elif arg.startswith("-"):
                continue
            else:
                return arg.replace("-", "_")

    @property
    def dest(self):
        """The destination name of the option as determined from the args."""
        if 'dest' in self.kwargs:
            return self.kwargs['dest']
        return self.name

    @property
    def default(self):
        """The default for the option."""
        return self.kwargs.get("default")


class Config(collections.abc.MutableMapping):

    """Parses configuration sources."""

    def __init__(self, options=None, ini_paths=None, argv=None,
                 **parser_kwargs):
        """Initialize with list of options.

        :param ini_paths: optional paths to ini files to look up values from
        :param parser_kwargs: kwargs used to init argparse parsers.
        :param argv: argument strings (defaults to sys.argv)
        """
        self._parser_kwargs = parser_kwargs or {}
        self._ini_paths = list(ini_paths or [])
        self._options = copy.copy(options) or []
        dests = [option.dest for option in self._options]
        duplicates = sorted(set(d for d in dests if dests.count(d) > 1))
        if duplicates:
            raise PolyfillConfigException(
                "Options share the same destination: %s"
                % ', '.join(duplicates))
        self._values = {option.dest: option.default
                        for option in self._options}
        self._argv = argv
        self._prog = parser_kwargs.get('prog')
        self.ini_config = None
        self.pass_thru_args = []

    @property
    def prog(self):
        """Program name."""
        if not self._prog:
            self._prog = os.path.basename(sys.argv[0]) or 'polyfill'
        return self._prog

    @prog.setter
    def prog(self, value):
        """Set program name."""
        self._prog = value

    @property
    def default_ini(self):
        """Default ini file name."""
        return '%s.ini' % self.prog

    def __getitem__(self, key):
        """Get item from config."""
        return self._values[key]

    def __setitem__(self, key, value):
        """Set item in config."""
        self._values[key] = value

    def __delitem__(self, key):
        """Delete item from config."""
        del self._values[key]

    def __iter__(self):
        """Iterate config."""
        return iter(self._values)

    def __len__(self):
        """Check number of config options."""
        return len(self._values)

    def __getattr__(self, attr):
        """Get attribute."""
        if attr.startswith('__') or attr == '_values':
            raise AttributeError(attr)
        if attr in self._values:
            return self._values[attr]
        raise AttributeError("'config' object has no attribute '%s'"
                             % attr)

    def build_parser(self, options, permissive=False, **override_kwargs):
        """Construct an argparser from supplied options.

        :keyword override_kwargs: keyword arguments to override when calling
            parser constructor.
        :keyword permissive: when true, build a parser that does not validate
            required arguments.
        """
        kwargs = copy.copy(self._parser_kwargs)
        kwargs.setdefault('formatter_class',
                          argparse.ArgumentDefaultsHelpFormatter)
        kwargs.update(override_kwargs)
        if 'fromfile_prefix_chars' not in kwargs:
            kwargs['fromfile_prefix_chars'] = '@'
        parser = argparse.ArgumentParser(**kwargs)
        for option in options or []:
            option.add_argument(parser, permissive=permissive)
        return parser

    def build_cli_parser(self, permissive=False, **override_kwargs):
        """Build a parser that only reports arguments actually supplied.

        Defaults are suppressed so command-line values can be layered over
        the other sources. Also usable as a `parents` entry for subcommand
        parsers (pass add_help=False).
        """
        options = []
        for option in self._options:
            kwargs = option.kwargs.copy()
            kwargs['default'] = argparse.SUPPRESS
            options.append(Option(*option.args, **kwargs))
        return self.build_parser(options, permissive=permissive,
                                 **override_kwargs)

    def parse_cli(self, argv=None, permissive=False):
        """Parse command-line arguments into values.

        Only arguments present on the command line are returned.

        :keyword permissive: when true, does not validate required or extra
            arguments.
        """
        if argv is None:
            argv = self._argv or sys.argv
        parser = self.build_cli_parser(permissive=permissive)
        valid, pass_thru = self.parse_passthru_args(argv[1:])
        parsed, extras = parser.parse_known_args(valid)
        if extras and not permissive:
            raise AttributeError("Unrecognized arguments: %s" %
                                 ' ,'.join(extras))
        self.pass_thru_args = pass_thru + extras
        return vars(parsed)

    def parse_env(self, env=None, namespace=None):
        """Parse environment variables.

        Looks for the option's `env` name first, then <NAMESPACE>_<NAME>.
        """
        env = os.environ if env is None else env
        results = {}
        namespace = (namespace or self.prog).upper()
        for option in self._options:
            env_var = option.kwargs.get('env')
            default_env = "%s_%s" % (namespace, option.name.upper())
            if env_var and env_var in env:
                results[option.dest] = option.type(env[env_var])
            elif default_env in env:
                results[option.dest] = option.type(env[default_env])
        return results

    def get_defaults(self):
        """Use argparse to determine and return dict of defaults."""
        options = [copy.copy(opt) for opt in self._options]
        for opt in options:
            opt.kwargs = {k: v for k, v in opt.kwargs.items()
                          if k != 'required'}
        parser = self.build_parser(options, permissive=True)
        parsed, _ = parser.parse_known_args([])
        return vars(parsed)

    def parse_ini(self, paths=None, namespace=None):
        """Parse config files and return configuration options.

        :param paths: list of paths to files to parse (uses ConfigParser
            logic). If not supplied, uses the ini_paths value supplied on
            initialization.
        """
        namespace = namespace or self.prog
        results = {}
        self.ini_config = configparser.ConfigParser()

        if os.path.isfile(self.default_ini) and (
                self.default_ini not in self._ini_paths):
            self._ini_paths.append(self.default_ini)

        parser_errors = (configparser.NoOptionError,
                         configparser.NoSectionError)
        read = self.ini_config.read(paths or reversed(self._ini_paths))
        LOG.debug("Read ini files: %s", read)
        for option in self._options:
            ini_section = option.kwargs.get('ini_section')
            value = None
            if ini_section:
                try:
                    value = self.ini_config.get(ini_section, option.name)
                    results[option.dest] = option.type(value)
                except parser_errors as err:
                    LOG.debug('Error parsing ini file: %r -- Continuing.',
                              err)
            if not value:
                try:
                    value = self.ini_config.get(namespace, option.name)
                    results[option.dest] = option.type(value)
                except parser_errors as err:
                    LOG.debug('Error parsing ini file: %r -- Continuing.',
                              err)
        return results

    def load_options(self, argv=None, cli_args=None):
        """Find settings from all sources.

        :keyword cli_args: values already parsed from the command line (for
            example by a subcommand parser). When supplied, argv is not
            parsed again.
        """
        if cli_args is None:
            cli_args = self.parse_cli(argv=argv, permissive=True)
        dests = set(option.dest for option in self._options)
        results = self.get_defaults()
        results.update(self.parse_ini())
        results.update(self.parse_env())
        results.update({k: v for k, v in cli_args.items() if k in dests})
        return results

    def parse(self, argv=None, cli_args=None):
        """Find settings from all sources and validate required options."""
        results = self.load_options(argv=argv, cli_args=cli_args)
        for option in self._options:
            if option.kwargs.get('required') and (
                    results.get(option.dest) is None):
                raise SystemExit("'%s' is required. See --help "
                                 "for more info." % option.name)
        self._values = results
        return self

    @staticmethod
    def parse_passthru_args(argv):
        """Handle arguments to be passed thru using '--'.

        :returns: tuple of two lists; args and pass-thru-args
        """
        if '--' in argv:
            dashdash = argv.index("--")
            return argv[:dashdash], argv[dashdash + 1:]
        return argv, []

    def __repr__(self):
        """Display configured values when representing instance."""
        return "<Config %s>" % ', '.join([
            '%s=%s' % (k, v) for k, v in sorted(self.items())])


def normalized_path(value):
    """Normalize and expand a shorthand or relative path."""
    if not value:
        return
    norm = os.path.normpath(value)
    return os.path.abspath(os.path.expanduser(norm))


def charset_name(value):
    """Validate and normalize a charset name."""
    try:
        htmlstring.resolve_charset_names(value)
    except InvalidArgument as exc:
        raise argparse.ArgumentTypeError(str(exc))
    return value.upper()


def message_catalog(value):
    """Load a message catalog from the YAML file at `value`."""
    path = normalized_path(value)
    if not os.path.isfile(path):
        raise argparse.ArgumentTypeError("%s is not a valid path." % path)
    try:
        return i18n.MessageCatalog.from_file(path)
    except InvalidArgument as exc:
        raise argparse.ArgumentTypeError(str(exc))


OPTIONS = [
    Option("--charset",
           default="ALL",
           type=charset_name,
           env="POLYFILL_CHARSET",
           group="html entities",
           help="charset used to encode and decode HTML entities: ALL, "
           "ASCII, LATIN_1, LATIN_2 or UTF8"),
    Option("--language",
           default=i18n.DEFAULT_LANGUAGE,
           ini_section="format",
           env="POLYFILL_LANGUAGE",
           group="dates",
           help="language code used to translate day and month names"),
    Option("--catalog",
           type=message_catalog,
           ini_section="format",
           env="POLYFILL_CATALOG",
           group="dates",
           help="YAML message catalog with day and month translations"),
]
