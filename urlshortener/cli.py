#!/usr/bin/env python3
"""
Run shortener commands against an in-memory store.

Commands are read one per line from FILE (or stdin) and each result
envelope is printed as a JSON line on stdout:

    add URL       shorten a long URL
    query URL     resolve a short URL (counts a hit)
    count URL     hit count of a short or long URL
    remove URL    deactivate a short or long URL

Blank lines and lines starting with '#' are ignored.

CLI usage:
    $ printf 'add http://example.com/a\\ncount http://example.com/a\\n' \
        | python -m urlshortener --domain short.ly
    {"value": "http://short.ly/<alias>"}
    {"value": 0}

    # Domain and salt from SHORTENER_DOMAIN / SHORTENER_SALT
    $ SHORTENER_DOMAIN=short.ly python -m urlshortener commands.txt

Args:
    FILE (str): Optional commands file (default: stdin).
    --domain (str): Shortener domain (default: $SHORTENER_DOMAIN).
    --salt (str): Alias generation salt (default: $SHORTENER_SALT).
    --log-level (str): Log level (default: $LOG_LEVEL or INFO). Logs go to stderr.

Exit status:
    0 if every line was a well-formed command, 1 otherwise.
"""

import os
import sys
import json
import argparse
import logging
from dataclasses import replace
from collections.abc import Iterable
from typing import TextIO

from urlshortener.constants import ENV, Default
from urlshortener.store import ShortenerStore
from urlshortener.models import ResultModel
from urlshortener.exceptions import ConfigurationError
from urlshortener.utils.config import ShortenerConfig, load_config, shortcode_length
from urlshortener.utils.logging import initialize_logging


logger = logging.getLogger(__name__)

COMMANDS = ('add', 'query', 'count', 'remove')


class CommandError(ValueError):
    """Raised when a command line cannot be parsed."""


def parse_command(line: str) -> tuple[str, str]:
    """Split a command line into (verb, url)

    Raises:
        CommandError: On unknown verbs or wrong number of arguments.

    Example:
        >>> parse_command('add http://example.com/a')
        ('add', 'http://example.com/a')
    """
    parts = line.split()
    if not parts or parts[0].lower() not in COMMANDS:
        raise CommandError(f'unknown command {line!r} (expected one of: {", ".join(COMMANDS)})')
    if len(parts) != 2:
        raise CommandError(f'{parts[0]} takes exactly one URL argument (got {len(parts) - 1})')
    return parts[0].lower(), parts[1]


def execute(store: ShortenerStore, verb: str, url: str) -> ResultModel:
    return getattr(store, verb)(url)


def run(store: ShortenerStore, lines: Iterable[str], out: TextIO, err: TextIO) -> int:
    """Execute command lines against store, writing one JSON envelope per command

    Returns:
        int: number of malformed lines
    """
    failures = 0
    for lineno, raw in enumerate(lines, start=1):
        line = raw.strip()
        if not line or line.startswith('#'):
            continue
        try:
            verb, url = parse_command(line)
        except CommandError as e:
            failures += 1
            print(f'line {lineno}: {e}', file=err)
            continue
        result = execute(store, verb, url)
        print(json.dumps(result.to_dict()), file=out)
    return failures


def _resolve_config(args: argparse.Namespace) -> ShortenerConfig:
    if args.domain is None:
        config = load_config()
    else:
        config = ShortenerConfig(
            domain=args.domain,
            salt=os.environ.get(ENV.Shortener.SALT, Default.SALT),
            shortcode_length=shortcode_length(),
        )
    if args.salt is not None:
        config = replace(config, salt=args.salt)
    return config


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog='urlshortener',
        description='Run add/query/count/remove commands against an in-memory URL shortener.',
    )
    parser.add_argument('file', nargs='?', type=argparse.FileType('r'), default=sys.stdin, help='Commands file (default: stdin)')
    parser.add_argument('--domain', default=None, help='Shortener domain, e.g. short.ly (default: $SHORTENER_DOMAIN)')
    parser.add_argument('--salt', default=None, help='Alias generation salt (default: $SHORTENER_SALT)')
    parser.add_argument('--log-level', default=None, help='Log level (default: $LOG_LEVEL or INFO)')
    args = parser.parse_args(argv)

    initialize_logging(args.log_level, stream='ext://sys.stderr')

    try:
        store = ShortenerStore.from_config(_resolve_config(args))
    except ConfigurationError as e:
        parser.error(str(e))

    logger.debug('Shortener store ready.', extra={'domain': store.domain})
    with args.file as commands:
        failures = run(store, commands, sys.stdout, sys.stderr)
    return 1 if failures else 0


if __name__ == '__main__':
    sys.exit(main())
