"""Errors raised while parsing antiblog markup."""


class ParseError(Exception):
    """Raised when a source file cannot be turned into an entry.

    Attributes:
        message: Human-readable description of the problem
        line: 1-based line number where the problem was detected
    """

    def __init__(self, message: str, line: int):
        self.message = message
        self.line = line
        super().__init__(f"{message} at line {line}")
