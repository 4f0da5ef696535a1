## commander — Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘

import re
import json

from .types import Configuration, OptionValue


EMPTY = "\033[90m∅\033[0m"


def write_without_ansi(write_fn):
    """Wrapper function that strips ANSI codes before calling the original writer."""
    ansi_re = re.compile(r'\033\[[0-9;]*m')
    return lambda text: write_fn(ansi_re.sub('', text))

def format_value(value: OptionValue) -> str:
    if isinstance(value, bool): return str(value).lower()
    return '"' + value.replace('\\', '\\\\').replace('"', '\\"') + '"'

def _format_key(key: str) -> str:
    # Dash-only tokens produce an empty key, make it visible.
    return f"\033[36m{key}\033[0m" if key else '\033[36m""\033[0m'

def format_configuration(config: Configuration) -> str:
    lines = ["\033[97marguments\033[0m"]
    lines += [f"  {i}\t{format_value(arg)}" for i, arg in enumerate(config.arguments)] or [f"  {EMPTY}"]
    lines.append("\033[97moptions\033[0m")
    lines += [f"  {_format_key(key)}\t{format_value(value)}" for key, value in config.options.items()] or [f"  {EMPTY}"]
    return '\n'.join(lines)

def configuration_to_json(config: Configuration, indent: int | None = 2) -> str:
    return json.dumps(config.as_dict(), indent=indent, ensure_ascii=False)
