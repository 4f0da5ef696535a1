## commander — Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘

from .types import Configuration, OptionValue, AliasTable
from .errors import *
from .parser import is_option, tokenize_option, resolve_alias, normalize_option, split_option, parse_alias_definitions
from .builder import map_arguments, map_options, parse
from .formatting import format_configuration, configuration_to_json
