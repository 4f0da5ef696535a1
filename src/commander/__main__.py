## commander — Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘
#
# commander — Turns raw command-line tokens into arguments and options.
#

import sys
from dataclasses import dataclass

import click

from .errors import AliasDefinitionError
from .parser import is_option, normalize_option, parse_alias_definitions
from .formatting import write_without_ansi, format_configuration, configuration_to_json

from . import api


@dataclass(frozen=True)
class CliConfig:
    verbose: int
    plain: bool
    json: bool


def _alias_table(ctx: click.Context, param: click.Parameter, value: tuple[str, ...]) -> dict[str, str]:
    try:
        return parse_alias_definitions(value)
    except AliasDefinitionError as exc:
        raise click.BadParameter(str(exc), ctx=ctx, param=param) from None


def _show_normalized(tokens: tuple[str, ...], aliases: dict[str, str]) -> None:
    for token in tokens:
        if not is_option(token): continue
        print(f"\033[90m{token}\033[0m → \033[97m{normalize_option(token, aliases)}\033[0m", file=sys.stderr)


@click.command(context_settings={'ignore_unknown_options': True})
@click.option('--alias', '-a', 'aliases', multiple=True, callback=_alias_table, metavar='SHORT=LONG',
              help='Map an abbreviated option to its full name; may be repeated.')
@click.option('--json', 'as_json', is_flag=True, help='Print the configuration as a JSON object.')
@click.option('--plain', '-p', is_flag=True, help='Strip ANSI color codes and redirect stderr to stdout.')
@click.option('--verbose', '-v', default=0, count=True, help='Show how each option token is normalized.')
@click.argument('tokens', nargs=-1, type=click.UNPROCESSED)
@click.pass_context
def cli(ctx: click.Context, aliases: dict[str, str], as_json: bool, plain: bool, verbose: int, tokens: tuple[str, ...]) -> None:
    ctx.obj = config = CliConfig(verbose=verbose, plain=plain, json=as_json)

    if config.plain:
        writer = write_without_ansi(sys.stdout.write)
        sys.stdout.write, sys.stderr.write = writer, writer

    if config.verbose:
        _show_normalized(tokens, aliases)

    result = api.parse(tokens, aliases)
    print(configuration_to_json(result) if config.json else format_configuration(result))


def main(argv: list[str] | None = None) -> None:
    a = list(sys.argv[1:] if argv is None else argv)
    # Front-end options go before `--`; without it, everything is a token to parse.
    if '--' in a:
        i = a.index('--')
        opts, tokens = a[:i], a[i+1:]
    else:
        opts, tokens = [], a

    cli.main(args=[*opts, '--', *tokens], prog_name='commander')


if __name__ == "__main__":
    main()
