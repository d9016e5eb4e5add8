## Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘
#
# cliskel — Walks canonical tokens against the declared options into a frozen result.
#

from types import MappingProxyType
from typing import Any, Mapping, Sequence
from dataclasses import dataclass, field

from .declaration import OptionSet, DEFAULT_OPTIONS
from .normalizer import Token, normalize
from .errors import CliMissingArgument, CliUnexpectedOption


@dataclass(frozen=True)
class ParsedOptions:
    values: Mapping[str, bool | str] = field(default_factory=lambda: MappingProxyType({}))
    arguments: tuple[str, ...] = ()

    def flag(self, name: str) -> bool:
        return bool(self.values.get(name, False))

    def value(self, name: str, default: Any = None) -> Any:
        return self.values.get(name, default)

    def __getitem__(self, name: str) -> bool | str:
        return self.values[name]

    def __contains__(self, name: str) -> bool:
        return name in self.values


def parse_tokens(tokens: Sequence[Token], options: OptionSet) -> ParsedOptions:
    values: dict[str, bool | str] = {}
    index = 0
    while index < len(tokens) and tokens[index].is_option_shaped:
        token = tokens[index]
        index += 1
        if token.kind == Token.END:
            break
        if (spec := options.lookup(token.text)) is None:
            raise CliUnexpectedOption(token.text)
        if not spec.requires_argument:
            values[spec.name] = True
            continue
        if index >= len(tokens) or tokens[index].kind == Token.END or tokens[index].text == '':
            raise CliMissingArgument(token.text)
        values[spec.name] = tokens[index].text
        index += 1

    return ParsedOptions(MappingProxyType(values), tuple(t.text for t in tokens[index:]))


def parse_arguments(args: Sequence[str], options: OptionSet = DEFAULT_OPTIONS) -> ParsedOptions:
    return parse_tokens(normalize(args, options), options)
