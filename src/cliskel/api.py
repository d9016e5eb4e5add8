## cliskel — Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘

from .errors import *
from .declaration import OptionSpec, OptionSet, parse_declaration, DEFAULT_DECLARATION, DEFAULT_OPTIONS
from .normalizer import Token, normalize, split_cluster, canonical
from .parser import ParsedOptions, parse_tokens, parse_arguments
