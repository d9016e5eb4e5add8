## Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘

import lark


class CliError(Exception):
    """Base class for all errors raised while declaring or parsing options."""
    kind: str = 'error'

class CliDeclarationError(CliError, ValueError):
    kind = 'declaration'

    def __init__(self, message, *, line=None, column=None, token=None):
        super().__init__(message)
        self.line = line
        self.column = column
        self.token = token

class CliIncompleteDeclaration(CliDeclarationError, lark.exceptions.ParseError):
    def __init__(self, message, *, line=None, column=None, token=None):
        super().__init__(message, line=line, column=column, token=token)


class CliParseError(CliError):
    """Command-line input that does not match the declared options; always fatal."""
    def __init__(self, message: str = "", *, option: str = None):
        super().__init__(message)
        self.option = option

class CliMissingArgument(CliParseError):
    kind = 'missing-argument'

    def __init__(self, option: str):
        super().__init__(f"Option `{option}` requires an argument.", option=option)

class CliUnexpectedOption(CliParseError):
    kind = 'unexpected-option'

    def __init__(self, option: str):
        super().__init__(f"Unexpected option `{option}`.", option=option)
