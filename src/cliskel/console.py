## Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘

import re
import sys
from dataclasses import dataclass
from typing import NoReturn


_ANSI_RE = re.compile(r'\033\[[0-9;]*m')

def strip_ansi(text: str) -> str:
    return _ANSI_RE.sub('', text)


@dataclass(frozen=True)
class Console:
    """Debug, error and regular output; debug lines only appear when enabled."""
    debug_enabled: bool = False
    plain: bool = False

    def _write(self, text: str, file) -> None:
        print(strip_ansi(text) if self.plain else text, file=file)

    def info(self, message: str) -> None:
        self._write(message, sys.stdout)

    def debug(self, message: str) -> None:
        if not self.debug_enabled: return
        self._write(f'\033[30;46m DEBUG. \033[0m \033[90m{message}\033[0m', sys.stderr)

    def error(self, message: str) -> None:
        self._write(f'\033[30;43m ERROR. \033[0m {message}', sys.stderr)

    def fail(self, message: str, code: int = 1) -> NoReturn:
        self.error(message)
        sys.exit(code)
