"""Line-oriented tokenizer for Fortran namelist text."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Callable, NotRequired, Optional, TypedDict

from f90namelists.errors import LexerError
from f90namelists.logger import Logger
from f90namelists.utils import resolve_config


class TokenType(Enum):
    WHITESPACE = auto()
    COMMENT = auto()
    STRING = auto()
    IDENTIFIER = auto()
    NUMBER = auto()
    LOGICAL = auto()
    PUNCTUATION = auto()
    GROUP_OPEN = auto()
    GROUP_CLOSE = auto()


@dataclass(slots=True)
class Token:
    type: TokenType
    value: str
    line: int
    column: int


PUNCTUATION = set("=+-*/\\()[]{},:;%&~<>?`|$#@")
WHITESPACE = set(" \t\r\x0b\x0c")
DIGITS = set("0123456789")
QUOTES = {"'", '"'}
COMMENT_MARKERS = {"!", "#"}
SIGNS = {"+", "-"}
EXPONENT_MARKERS = set("eEdD")
NAME_EXTRA_CHARS = {"'", '"', "_"}
SPECIAL_VALUES = {"inf", "infinity", "nan"}
GROUP_MARKERS = {"&", "$"}
# group marker -> character that ends the group it opened
GROUP_CLOSERS = {"&": "/", "$": "$"}

END_OF_LINE = "\n"


class LexerConfig(TypedDict):
    enable_logger: NotRequired[bool]


class LexerConfigRequired(TypedDict):
    enable_logger: bool


DEFAULT_CONFIG: LexerConfigRequired = {"enable_logger": False}


class Tokenizer:
    """Scans namelist text one line at a time.

    Two pieces of state survive between calls to :meth:`tokenize`: the
    delimiter of a string literal left open at the end of the previous line,
    and the marker of the namelist group the cursor is in. Outside a group
    the rest of a line is returned as a single comment token, so one instance
    must see every line of a file in order and must not be shared between
    reads.
    """

    def __init__(self, config: Optional[LexerConfig] = None):
        self.config = resolve_config(config or {}, DEFAULT_CONFIG)
        self.logger = Logger("lexer", is_enabled=self.config["enable_logger"]).logger
        self.pending_delimiter: str | None = None
        self.group_token: str | None = None
        self.tokens: list[Token] = []
        self._text = ""
        self._start = 0
        self._pos = 0
        self._line = 0

    def reset(self) -> None:
        self.pending_delimiter = None
        self.group_token = None
        self.tokens = []

    @property
    def in_group(self) -> bool:
        return self.group_token is not None

    def lex(self, line: str, line_number: int = 0) -> list[str]:
        return [token.value for token in self.tokenize(line, line_number)]

    def tokenize(self, line: str, line_number: int = 0) -> list[Token]:
        self._text = line
        self._pos = 0
        self._line = line_number
        self.tokens = []

        while not self._is_eol:
            char = self._peek()
            closed = self._track_group(char)
            self._start = self._pos

            if char in WHITESPACE:
                self._consume_while(lambda c: c in WHITESPACE)
                self._add_token(TokenType.WHITESPACE)
            elif closed:
                self._advance()
                self._add_token(TokenType.GROUP_CLOSE)
            elif char in COMMENT_MARKERS or not self.in_group:
                self._pos = len(self._text)
                self._add_token(TokenType.COMMENT)
            elif char in QUOTES or self.pending_delimiter is not None:
                self._scan_string()
            elif char.isalpha():
                self._consume_while(lambda c: c.isalnum() or c in NAME_EXTRA_CHARS)
                self._add_token(TokenType.IDENTIFIER)
            elif char in SIGNS:
                self._scan_signed()
            elif char in DIGITS:
                self._scan_numeric()
                self._add_token(TokenType.NUMBER)
            elif char == ".":
                self._scan_dot()
            elif char in PUNCTUATION:
                self._advance()
                token_type = TokenType.GROUP_OPEN if char in GROUP_MARKERS and self.group_token == char else TokenType.PUNCTUATION
                self._add_token(token_type)
            else:
                self._handle_unexpected_char()

        return self.tokens

    # Scanners ----------------------------------------------------------------
    def _track_group(self, char: str) -> bool:
        """Update the group marker; True when ``char`` closes the current group."""
        if self.group_token is not None and GROUP_CLOSERS[self.group_token] == char:
            # closing a group also ends a string left open on an earlier line
            self.group_token = None
            self.pending_delimiter = None
            return True
        if char in GROUP_MARKERS:
            self.group_token = char
        return False

    def _scan_string(self) -> None:
        if self.pending_delimiter is not None:
            # continuation of a literal opened on a previous line
            delimiter = self.pending_delimiter
            self.pending_delimiter = None
        else:
            delimiter = self._advance()

        while True:
            if self._is_eol:
                self.pending_delimiter = delimiter
                break
            char = self._advance()
            if char == delimiter:
                if self._peek() == delimiter:
                    self._advance()
                    continue
                break

        self._add_token(TokenType.STRING)

    def _scan_signed(self) -> None:
        letters = self._lookahead_letters(1)
        if letters.lower() in SPECIAL_VALUES:
            self._advance(1 + len(letters))
            self._add_token(TokenType.NUMBER)
            return
        self._scan_numeric()
        if self._pos - self._start == 1:
            self._add_token(TokenType.PUNCTUATION)
        else:
            self._add_token(TokenType.NUMBER)

    def _scan_numeric(self, point_seen: bool = False) -> None:
        if self._peek() in SIGNS:
            self._advance()

        while self._peek() in DIGITS or (self._peek() == "." and not point_seen):
            if self._peek() == ".":
                point_seen = True
            self._advance()

        if self._peek() in EXPONENT_MARKERS:
            self._advance()
            if self._peek() in SIGNS:
                self._advance()
            self._consume_while(lambda c: c in DIGITS)

    def _scan_dot(self) -> None:
        if self._peek(1) in DIGITS:
            self._advance()
            self._scan_numeric(point_seen=True)
            self._add_token(TokenType.NUMBER)
            return

        letters = self._lookahead_letters(1)
        if letters and self._peek(1 + len(letters)) == ".":
            # dot-delimited logical or named constant, e.g. .true.
            self._advance(len(letters) + 2)
            self._add_token(TokenType.LOGICAL)
            return

        self._advance()
        self._add_token(TokenType.PUNCTUATION)

    def _handle_unexpected_char(self):
        char = self._peek()
        self.logger.error(f"Unexpected character '{char}' at line {self._line}, column {self._pos + 1}")
        raise LexerError(f"Unexpected character '{char}'", self._line, self._pos + 1)

    # Helpers -----------------------------------------------------------------
    @property
    def _is_eol(self) -> bool:
        return self._pos >= len(self._text)

    def _peek(self, ahead: int = 0) -> str:
        index = self._pos + ahead
        if index >= len(self._text):
            return END_OF_LINE
        return self._text[index]

    def _lookahead_letters(self, ahead: int = 0) -> str:
        end = self._pos + ahead
        while end < len(self._text) and self._text[end].isalpha():
            end += 1
        return self._text[self._pos + ahead : end]

    def _advance(self, steps: int = 1) -> str:
        chars = self._text[self._pos : self._pos + steps]
        self._pos = min(self._pos + steps, len(self._text))
        return chars

    def _consume_while(self, condition: Callable[[str], bool]) -> None:
        while not self._is_eol and condition(self._peek()):
            self._advance()

    def _add_token(self, token_type: TokenType) -> None:
        value = self._text[self._start : self._pos]
        self.logger.debug(f"Adding token {token_type} with value '{value}' at line {self._line}, column {self._start + 1}")
        self.tokens.append(Token(token_type, value, self._line, self._start + 1))


__all__ = ["Tokenizer", "LexerConfig", "Token", "TokenType"]
