#!/usr/bin/env python3
# Copyright 2026 TIER IV, inc.
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

"""CLI entry point for validating fzp files."""

import argparse
import logging
import sys
from typing import List, Optional

from . import __version__
from .checks import FIELD_CHECKS
from .config import CHECK_FLAG_NAMES, CheckConfig
from .exceptions import ConfigurationError
from .utils.logging_utils import configure_split_stream_logging, resolve_log_level
from .validator import FileValidator

PROG = 'fzp-validator'

# Short aliases of the disabling flags, keyed by check name.
SHORT_FLAGS = {
    'fritzingversion': '-nf',
    'moduleid': '-nm',
    'referencefile': '-nr',
    'version': '-nv',
    'title': '-nt',
    'description': '-nd',
    'family': '-nD',
    'tags': '-nT',
    'properties': '-np',
    'views': '-nV',
    'connectors': '-nc',
    'buses': '-nb',
}

USAGE_SAMPLES = f"""USAGE-SAMPLES

   $ {PROG} validate --file file/path.fzp
   # or
   $ {PROG} validate -f file/path.fzp

   $ {PROG} validate --dir file/dir
   # or
   $ {PROG} validate -d file/dir

also you can combine the other flags (no-check, verbose)"""


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=PROG,
        description='fzp validator',
    )
    parser.add_argument('--version', action='version', version=f'{PROG} {__version__}')
    subparsers = parser.add_subparsers(dest='command')

    validate = subparsers.add_parser(
        'validate',
        help='validate fzp file/files',
        description='validate fzp file/files',
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    validate.set_defaults(command_parser=validate)
    # data input
    validate.add_argument('--file', '-f', metavar='PATH', help='the fzp filepath')
    validate.add_argument('--dir', '-d', metavar='PATH', help='the fzp files directory')
    # data check settings
    for check in FIELD_CHECKS:
        validate.add_argument(
            f'--no-check-{check.name}',
            SHORT_FLAGS[check.name],
            dest=f'no_check_{check.name}',
            action='store_true',
            help=f'disable {check.label} check',
        )
    validate.add_argument(
        '--strict-properties',
        action='store_true',
        help='also fail on <property> entries missing a name or value',
    )
    validate.add_argument(
        '--config',
        metavar='PATH',
        help='YAML configuration file (default: $FZP_VALIDATOR_CONFIG)',
    )
    # utils
    validate.add_argument('--verbose', '-V', action='store_true', help='verbose mode')

    return parser


def build_config(args: argparse.Namespace) -> CheckConfig:
    """Merge the configuration file (if any) with the command line flags."""
    if args.config:
        base = CheckConfig.from_yaml(args.config)
    else:
        base = CheckConfig.from_env()

    disabled = [flag[len('no_check_'):] for flag in CHECK_FLAG_NAMES if getattr(args, flag)]
    return base.with_overrides(
        disabled=disabled,
        strict_properties=True if args.strict_properties else None,
        verbose=True if args.verbose else None,
    )


def run_validate(args: argparse.Namespace, parser: argparse.ArgumentParser) -> int:
    if not args.file and not args.dir:
        parser.print_help()
        print(USAGE_SAMPLES)
        return 0

    try:
        config = build_config(args)
    except ConfigurationError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    validator = FileValidator(config)

    if args.file:
        error = validator.validate(args.file)
        if error is not None:
            if error.kind == error.CHECKS:
                print(error)
            return 1
        return 0

    errors = validator.validate_directory(args.dir)
    return 1 if errors else 0


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the validator CLI."""
    parser = build_parser()
    args = parser.parse_args(argv)

    configure_split_stream_logging(level=resolve_log_level(logging.INFO))

    if args.command == 'validate':
        return run_validate(args, args.command_parser)

    parser.print_help()
    return 0


if __name__ == '__main__':
    sys.exit(main())
