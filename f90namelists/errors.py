"""Exceptions raised while reading or writing namelists."""

from __future__ import annotations


class NamelistError(Exception):
    pass


class LexerError(NamelistError):
    def __init__(self, message, line, column):
        super().__init__(f"Error: {message} at {line}:{column}")
        self.line = line
        self.column = column


class NamelistParseError(NamelistError):
    def __init__(self, message: str, line: int | None = None):
        self.message = message
        self.line = line
        if line is not None:
            message = f"{message} at line {line}"
        super().__init__(message)


class NamelistValueError(NamelistError, ValueError):
    pass


__all__ = ["NamelistError", "LexerError", "NamelistParseError", "NamelistValueError"]
