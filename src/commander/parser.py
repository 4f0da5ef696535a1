## commander — Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘

from typing import Iterable
from functools import lru_cache

import lark
from .types import AliasTable, OptionValue
from .errors import OptionSyntaxError, AliasDefinitionError


# Every string is accepted: each terminal is optional and together they cover any
# character sequence, so tokenizing an option can not fail on user input.
GRAMMAR = r"""?start: option
option: DASHES? KEY? (EQUALS VALUE?)?

DASHES: /-+/
KEY: /[^=\-][^=]*/
EQUALS: "="
VALUE: /.+/s
"""

LONG_PREFIX = '--'


@lru_cache(maxsize=None)
def _option_parser() -> lark.Lark:
    return lark.Lark(GRAMMAR, start='start', parser="lalr", lexer="contextual")


def is_option(token: str) -> bool:
    return token.startswith('-')


def tokenize_option(token: str) -> tuple[str, str, str | None]:
    """Split an option token into its leading dashes, key, and value.

    The value is `None` when the token holds no `=` at all, and the empty string
    when it ends with a bare `=`.
    """
    try:
        tree = _option_parser().parse(token)
    except lark.exceptions.UnexpectedInput as exc:
        raise OptionSyntaxError(str(exc), token=token, column=getattr(exc, 'column', None)) from None

    parts = {'DASHES': '', 'KEY': '', 'EQUALS': None, 'VALUE': ''}
    for tok in tree.children:
        parts[tok.type] = tok.value
    value = None if parts['EQUALS'] is None else parts['VALUE']
    return parts['DASHES'], parts['KEY'], value


def resolve_alias(token: str, aliases: AliasTable | None = None) -> str:
    """Expand an abbreviated option, e.g. `-t=test` with `{'t': 'trythisone'}` gives `trythisone=test`.

    All leading dashes are dropped and unknown keys are kept verbatim.  A value is only
    carried over when it is non-empty, so `-t=` reads the same as `-t`.
    """
    _, key, value = tokenize_option(token)
    option = (aliases or {}).get(key, key)
    return f"{option}={value}" if value else option


def normalize_option(token: str, aliases: AliasTable | None = None) -> str:
    """Turn an option token into its `key` or `key=value` form."""
    if not token.startswith(LONG_PREFIX):
        return resolve_alias(token, aliases)
    # Long options lose exactly two dashes, the rest is kept as written.
    dashes, key, value = tokenize_option(token)
    normalized = dashes[len(LONG_PREFIX):] + key
    return normalized if value is None else f"{normalized}={value}"


def split_option(normalized: str) -> tuple[str, OptionValue]:
    key, sep, value = normalized.partition('=')
    return (key, value) if sep else (normalized, True)


def parse_alias_definitions(specs: Iterable[str]) -> dict[str, str]:
    """Build an alias table from `SHORT=LONG` strings, e.g. `t=trythisone`."""
    aliases: dict[str, str] = {}
    for spec in specs:
        short, sep, long = spec.partition('=')
        short, long = short.lstrip('-'), long.lstrip('-')
        if not sep or not short or not long:
            raise AliasDefinitionError(f"Expected alias as `SHORT=LONG`, got `{spec}`.", token=spec)
        aliases[short] = long
    return aliases
