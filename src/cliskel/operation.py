## Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘
#
# cliskel — Placeholder operation and help text; replace these when reusing the skeleton.
#

from pathlib import Path

from .parser import ParsedOptions
from .console import Console


def load_usage(prog: str) -> str:
    source_text = (Path(__file__).resolve().parent / 'usage.txt').read_text(encoding='utf-8')
    return source_text.format(prog=prog).rstrip('\n')


def run_operation(parsed: ParsedOptions, console: Console) -> None:
    console.debug("Running operation.")
    console.info(f"option-x: {'yes' if parsed.flag('option_x') else 'no'}")
    console.info(f"short argument: {parsed.value('short_argument', '-')}")
    console.info(f"long argument: {parsed.value('long_argument', '-')}")
    console.info(' '.join(['arguments:', *parsed.arguments]))
