## commander — Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘

import lark


class CommanderError(Exception):
    def __init__(self, message: str = "", *, token=None):
        """Base class for all errors raised by commander."""
        super().__init__(message)
        self.token: str = token

class OptionSyntaxError(CommanderError, lark.exceptions.LarkError):
    """Option token that the token grammar could not split up."""
    def __init__(self, message, *, token=None, column=None):
        super().__init__(message, token=token)
        self.column = column

class AliasDefinitionError(CommanderError, ValueError):
    pass
