## Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘
#
# cliskel — Option declarations, written as a small text block and parsed once.
#

from dataclasses import dataclass
from typing import Iterator

import lark
from .errors import CliDeclarationError, CliIncompleteDeclaration


GRAMMAR = r"""start: declaration*
declaration: (NAME _COLON)? alias (_BAR alias)* METAVAR?
?alias: LONG | SHORT

// TOKENS
LONG: /--[A-Za-z0-9][A-Za-z0-9_-]*/
SHORT: /-[A-Za-z0-9?](?![A-Za-z0-9_-])/
METAVAR: /=[A-Za-z0-9_]*/
NAME: /[A-Za-z_][A-Za-z0-9_]*/
_COLON: ":"
_BAR: "|"

// COMMENTS
COMMENT: /#[^\r\n]*/

// WHITESPACE
%import common.WS
%ignore WS
%ignore COMMENT
"""

DEFAULT_DECLARATION = """\
help:            -h | --help
debug:           --debug
option_x:        -x | --option-x
short_argument:  -o=VALUE
long_argument:   --long-option-with-argument=VALUE
"""


@dataclass(frozen=True)
class OptionSpec:
    name: str
    aliases: tuple[str, ...]
    metavar: str | None = None

    @property
    def requires_argument(self) -> bool:
        return self.metavar is not None

    @property
    def shorts(self) -> tuple[str, ...]:
        return tuple(a[1] for a in self.aliases if len(a) == 2)


class OptionSet:
    """Ordered, validated collection of declared options with alias lookup."""

    def __init__(self, specs):
        self._specs: dict[str, OptionSpec] = {}
        self._by_alias: dict[str, OptionSpec] = {}
        for spec in specs:
            if spec.name in self._specs:
                raise CliDeclarationError(f"Option name `{spec.name}` is declared twice.", token=spec.name)
            for alias in spec.aliases:
                if alias in self._by_alias:
                    raise CliDeclarationError(f"Alias `{alias}` is already used by `{self._by_alias[alias].name}`.", token=alias)
                self._by_alias[alias] = spec
            self._specs[spec.name] = spec
        self._argument_shorts = frozenset(c for s in self._specs.values() if s.requires_argument for c in s.shorts)

    @classmethod
    def from_declaration(cls, source: str) -> 'OptionSet':
        return cls(parse_declaration(source))

    def lookup(self, alias: str) -> OptionSpec | None:
        return self._by_alias.get(alias)

    def get(self, name: str) -> OptionSpec | None:
        return self._specs.get(name)

    def requires_argument(self, char: str) -> bool:
        return char in self._argument_shorts

    def __iter__(self) -> Iterator[OptionSpec]:
        return iter(self._specs.values())

    def __len__(self) -> int:
        return len(self._specs)

    def __contains__(self, name: str) -> bool:
        return name in self._specs


def _derive_name(aliases: list[str]) -> str:
    long_alias = next((a for a in aliases if a.startswith('--')), None)
    if long_alias is not None:
        return long_alias[2:].replace('-', '_')
    return aliases[0][1:]


def parse_declaration(source: str) -> list[OptionSpec]:
    parser = lark.Lark(GRAMMAR, start='start', parser="lalr", lexer="contextual", propagate_positions=True)

    try:
        tree = parser.parse(source)
    except (lark.exceptions.ParseError, lark.exceptions.UnexpectedCharacters) as exc:
        def attr(k): return getattr(exc, k, None)
        token_val = getattr(token, 'value', '') if (token := attr('token')) is not None else ''
        incomplete = isinstance(exc, lark.exceptions.ParseError) and token_val == ''
        error_class = CliIncompleteDeclaration if incomplete else CliDeclarationError
        raise error_class(str(exc), line=attr('line'), column=attr('column'), token=token_val) from None

    specs = []
    for decl in tree.children:
        name, aliases, metavar = None, [], None
        for tok in decl.children:
            if tok.type == 'NAME': name = tok.value
            elif tok.type in ('LONG', 'SHORT'): aliases.append(tok.value)
            elif tok.type == 'METAVAR': metavar = tok.value[1:] or 'VALUE'
        specs.append(OptionSpec(name or _derive_name(aliases), tuple(aliases), metavar))
    return specs


DEFAULT_OPTIONS = OptionSet.from_declaration(DEFAULT_DECLARATION)
