## commander — Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘
#
# commander — Turns raw command-line tokens into arguments and options.
#

import os
import sys
from typing import Iterable

from .types import Configuration, AliasTable, OptionValue
from .parser import is_option, normalize_option, split_option


def _option_entry(token: str, aliases: AliasTable | None) -> tuple[str, OptionValue]:
    normalized = normalize_option(token, aliases)
    if os.environ.get('COMMANDER_DEBUG'):
        print(f"\033[90m{token!r} → {normalized!r}\033[0m", file=sys.stderr)
    return split_option(normalized)


def map_arguments(tokens: Iterable[str]) -> tuple[str, ...]:
    """Positional arguments, i.e. every token without a leading dash, in order."""
    return tuple(t for t in tokens if not is_option(t))


def map_options(tokens: Iterable[str], aliases: AliasTable | None = None) -> dict[str, OptionValue]:
    return dict(_option_entry(t, aliases) for t in tokens if is_option(t))


def parse(tokens: Iterable[str], aliases: AliasTable | None = None) -> Configuration:
    """Build the configuration for a full argument list, program name excluded.

    >>> parse(["test", "-othertest", "--newtest=test", "-t=x"], {"t": "trythisone"})
    Configuration(arguments=['test'], options={'othertest': True, 'newtest': 'test', 'trythisone': 'x'})
    """
    arguments: list[str] = []
    options: dict[str, OptionValue] = {}
    for token in tokens:
        if not is_option(token):
            arguments.append(token)
            continue
        key, value = _option_entry(token, aliases)
        options[key] = value  # Last one wins.
    return Configuration(arguments=tuple(arguments), options=options)
