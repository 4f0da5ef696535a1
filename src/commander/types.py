## commander — Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘

from types import MappingProxyType
from typing import Mapping
from dataclasses import dataclass, field


OptionValue = str | bool
AliasTable = Mapping[str, str]


@dataclass(frozen=True)
class Configuration:
    """Parsed command line: positional arguments plus named options."""
    arguments: tuple[str, ...] = ()
    options: Mapping[str, OptionValue] = field(default_factory=dict)

    def __post_init__(self):
        # Frozen record, so bypass __setattr__ to install read-only views.
        object.__setattr__(self, 'arguments', tuple(self.arguments))
        object.__setattr__(self, 'options', MappingProxyType(dict(self.options)))

    def __repr__(self):
        return f"Configuration(arguments={list(self.arguments)!r}, options={dict(self.options)!r})"

    def as_dict(self) -> dict:
        return {'arguments': list(self.arguments), 'options': dict(self.options)}
