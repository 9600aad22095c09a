# Copyright 2021-2023 Jason Tackaberry
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

import sys

# First order of business is to ensure we are running a compatible version of Python.
if sys.hexversion < 0x03080000:
    print('FATAL: Python 3.8 or later is required.')
    sys.exit(1)

import argparse
import json
import logging
import os
from configparser import ConfigParser
from importlib.metadata import PackageNotFoundError, version
from typing import Any, Dict, List, Optional, Sequence

import jinja2

from .log import log, set_level
from .reference import InputError
from .render import RENDERERS
from .utils import files_str_to_list

try:
    __version__ = version('docpage')
except PackageNotFoundError:
    # Running from local tree, use dummy value.
    __version__ = 'x.x.x-dev'

class FullHelpParser(argparse.ArgumentParser):
    def error(self, message: str) -> None:
        sys.stderr.write('error: %s\n' % message)
        self.print_help()
        sys.exit(2)


def get_config(args: argparse.Namespace) -> ConfigParser:
    """
    Consolidates command line arguments and config file, returning a ConfigParser
    instance that has the reconciled configuration such that command line arguments
    take precedence
    """
    # Option values are passed through as written, so '%' isn't special and keys
    # keep their case.
    config = ConfigParser(interpolation=None, inline_comment_prefixes='#')
    config.optionxform = str # pyright: ignore
    config.add_section('project')
    config.add_section('options')
    if args.config:
        if not os.path.exists(args.config):
            log.critical('config file "%s" does not exist', args.config)
            sys.exit(1)
        with open(args.config, encoding='utf8') as f:
            config.read_file(f)
    if args.files:
        config.set('project', 'files', '\n'.join(args.files))
    for prop in ('name', 'title', 'out', 'template', 'renderer'):
        if getattr(args, prop):
            config.set('project', prop, getattr(args, prop))
    for spec in args.option or ():
        key, sep, value = spec.partition('=')
        if not sep:
            log.critical('option "%s" must be in the form key=value', spec)
            sys.exit(1)
        config.set('options', key.strip(), value)
    return config


def load_batch(files: Sequence[str]) -> List[Dict[str, Any]]:
    """
    Loads documentation entries from the given JSON files, concatenating them (in
    order) into a single batch.
    """
    batch: List[Dict[str, Any]] = []
    for fname in files:
        log.info('loading %s', fname)
        with open(fname, encoding='utf8') as f:
            data = json.load(f)
        if not isinstance(data, list):
            raise InputError('{}: expected a list of documentation entries'.format(fname))
        batch.extend(data)
    return batch


def main(argv: Optional[Sequence[str]] = None) -> None:
    renderer_names = ', '.join(RENDERERS)
    p = FullHelpParser(prog='docpage')
    p.add_argument('-c', '--config', type=str, metavar='FILE',
                   help='Configuration file')
    p.add_argument('-n', '--name', action='store', type=str, metavar='NAME',
                   help='Project name, passed to templates as options.name')
    p.add_argument('--title', action='store', type=str, metavar='TITLE',
                   help='Page title, passed to templates as options.title')
    p.add_argument('-r', '--renderer', action='store', type=str, metavar='TYPE',
                   help=f'How to render the documentation: {renderer_names} '
                   '(default: html)')
    p.add_argument('-o', '--out', action='store', type=str, metavar='PATH',
                   help='Target path for rendered files, with directories created '
                   'if necessary. For single-file renderers (e.g. json), this is '
                   'treated as a file path if it ends with the appropriate extension '
                   '(default: ./out/)')
    p.add_argument('-t', '--template', action='store', type=str, metavar='DIR',
                   help='Directory containing index.html.j2, section.html.j2 and other '
                   'static assets (default: bundled theme)')
    p.add_argument('--option', action='append', type=str, metavar='KEY=VALUE',
                   help='Option passed through to templates (may be repeated)')
    p.add_argument('-v', '--verbose', action='store_true',
                   help='Log debug messages')
    p.add_argument('-q', '--quiet', action='store_true',
                   help='Only log errors')
    p.add_argument('files', type=str, metavar='FILE', nargs='*',
                   help='JSON files containing parsed documentation entries')
    p.add_argument('--version', action='version', version='%(prog)s ' + __version__)

    args = p.parse_args(argv)
    if args.verbose:
        set_level(logging.DEBUG)
    elif args.quiet:
        set_level(logging.ERROR)

    config = get_config(args)
    files = files_str_to_list(config.get('project', 'files', fallback=''))
    if not files:
        # Files are mandatory
        log.critical('no input files specified on command line or config file')
        sys.exit(1)

    renderer = config.get('project', 'renderer', fallback='html')
    try:
        rendercls = RENDERERS[renderer]
    except KeyError:
        log.error('unknown renderer "%s", valid types are: %s', renderer, renderer_names)
        sys.exit(1)

    try:
        batch = load_batch(files)
    except (OSError, ValueError) as e:
        # json.JSONDecodeError and InputError are both ValueErrors
        log.error('error loading input: %s', e)
        sys.exit(1)

    try:
        renderer = rendercls.from_config(config)
    except jinja2.TemplateNotFound as e:
        log.critical('template "%s" not found', e.name)
        sys.exit(1)
    except jinja2.TemplateSyntaxError as e:
        log.critical('template error in %s:%s: %s', e.filename or e.name, e.lineno, e.message)
        sys.exit(1)

    out = config.get('project', 'out', fallback=None)
    try:
        # Everything is rendered in memory before anything is written, so a failure
        # here leaves no partial output behind.
        outputs = renderer.render(batch)
        renderer.write(outputs, out)
    except InputError as e:
        log.error('invalid input: %s', e)
        sys.exit(1)
    except Exception as e:
        log.exception('unhandled error rendering: %s', e)
        sys.exit(1)

    log.info('done')
