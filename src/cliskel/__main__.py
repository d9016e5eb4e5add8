## Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘
#
# cliskel — Command-line skeleton: normalize options, validate them, dispatch once.
#

import os
import sys
from typing import Mapping
from dataclasses import dataclass

import click

from .errors import CliParseError
from .console import Console
from .declaration import DEFAULT_OPTIONS
from .parser import ParsedOptions, parse_arguments
from .operation import load_usage, run_operation


@dataclass(frozen=True)
class RuntimeConfig:
    debug: bool
    plain: bool
    prog: str = 'cliskel'

    @classmethod
    def from_environ(cls, parsed: ParsedOptions, environ: Mapping[str, str], prog: str = 'cliskel') -> 'RuntimeConfig':
        debug = parsed.flag('debug') or bool(environ.get('CLISKEL_DEBUG'))
        return cls(debug=debug, plain=_plain_from_environ(environ), prog=prog)


def _plain_from_environ(environ: Mapping[str, str]) -> bool:
    return bool(environ.get('CLISKEL_PLAIN') or environ.get('NO_COLOR'))


def dispatch(parsed: ParsedOptions, config: RuntimeConfig) -> int:
    console = Console(debug_enabled=config.debug, plain=config.plain)
    console.debug(f"Parsed options {dict(parsed.values)} with arguments {list(parsed.arguments)}.")

    if parsed.flag('help'):
        console.debug("Help requested; operation skipped.")
        console.info(load_usage(config.prog))
        return 0

    run_operation(parsed, console)
    return 0


@click.command(context_settings={'ignore_unknown_options': True}, add_help_option=False)
@click.argument('tokens', nargs=-1, type=click.UNPROCESSED)
@click.pass_context
def cli(ctx: click.Context, tokens: tuple[str, ...]) -> None:
    try:
        parsed = parse_arguments(tokens, DEFAULT_OPTIONS)
    except CliParseError as exc:
        Console(plain=_plain_from_environ(os.environ)).fail(str(exc))

    config = RuntimeConfig.from_environ(parsed, os.environ, prog=ctx.find_root().info_name or 'cliskel')
    ctx.exit(dispatch(parsed, config))


def main(argv: list[str] | None = None) -> None:
    # Click would consume the first `--` itself, so every token is passed after one.
    args = list(sys.argv[1:] if argv is None else argv)
    cli.main(args=['--', *args], prog_name='cliskel')


if __name__ == "__main__":
    main()
