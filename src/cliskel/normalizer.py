## Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘
#
# cliskel — Rewrites raw command-line arguments into one option or value per token.
#

import re
from dataclasses import dataclass
from typing import Sequence

from .declaration import OptionSet


@dataclass(frozen=True)
class Token:
    SHORT = 'short'
    LONG = 'long'
    VALUE = 'value'
    END = 'end'

    kind: str
    text: str

    @property
    def is_option_shaped(self) -> bool:
        return self.kind == Token.END or (self.text.startswith('-') and len(self.text) > 1)


END_OF_OPTIONS = '--'

_CLUSTER_RE = re.compile(r'-[^-].+', re.DOTALL)
_LONG_ASSIGN_RE = re.compile(r'--[^=]+=.*', re.DOTALL)


def split_cluster(raw: str, options: OptionSet) -> tuple[list[Token], bool]:
    """Split a compressed cluster like `-xvf` into short flags.

    Returns the emitted tokens and whether an option absorbed the rest of the
    cluster as its value.  An option needing a value at the very end of the
    cluster emits nothing extra; its value is the next token instead.
    """
    tokens = []
    for i in range(1, len(raw)):
        char = raw[i]
        tokens.append(Token(Token.SHORT, '-' + char))
        if options.requires_argument(char) and i + 1 < len(raw):
            tokens.append(Token(Token.VALUE, raw[i+1:]))
            return tokens, True
    return tokens, False


def _classify(raw: str) -> Token:
    if raw.startswith('--'): return Token(Token.LONG, raw)
    if raw.startswith('-') and len(raw) == 2: return Token(Token.SHORT, raw)
    return Token(Token.VALUE, raw)


def normalize(args: Sequence[str], options: OptionSet) -> list[Token]:
    tokens: list[Token] = []
    for index, raw in enumerate(args):
        if raw == END_OF_OPTIONS:
            tokens.append(Token(Token.END, raw))
            tokens.extend(Token(Token.VALUE, rest) for rest in args[index+1:])
            break
        if _CLUSTER_RE.fullmatch(raw):
            tokens.extend(split_cluster(raw, options)[0])
        elif _LONG_ASSIGN_RE.fullmatch(raw):
            name, value = raw.split('=', 1)
            tokens += [Token(Token.LONG, name), Token(Token.VALUE, value)]
        else:
            tokens.append(_classify(raw))
    return tokens


def canonical(tokens: Sequence[Token]) -> list[str]:
    return [t.text for t in tokens]
