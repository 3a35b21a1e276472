"""Reader that turns namelist text into an ordered document."""

from __future__ import annotations

import re
from dataclasses import dataclass
from os import PathLike
from typing import IO, Iterable, List, NotRequired, Optional, TypedDict

from f90namelists.converter import to_native
from f90namelists.errors import NamelistParseError
from f90namelists.lexer import LexerConfig, Token, Tokenizer, TokenType
from f90namelists.logger import Logger
from f90namelists.nodes import NamelistDocument, NamelistGroup, NamelistScalar, NamelistValue
from f90namelists.utils import is_path, resolve_config, stream_name

# not quote aware, a string holding one of these is cut short
COMMENT_SEPARATORS = (";", "!", "#")
REPEAT_MARKER = "*"
_LONE_AMPERSAND_RE = re.compile(r"^&$")
_END_MARKER_RE = re.compile(r"&end\b", re.IGNORECASE)


class ReaderConfig(TypedDict):
    enable_logger: NotRequired[bool]
    lexer_config: NotRequired[LexerConfig]


class ReaderConfigRequired(TypedDict):
    enable_logger: bool
    lexer_config: LexerConfig


DEFAULT_CONFIG: ReaderConfigRequired = {"enable_logger": False, "lexer_config": {}}


@dataclass
class GroupFrame:
    name: str
    group: NamelistGroup


def strip_comments(line: str) -> str:
    for separator in COMMENT_SEPARATORS:
        line = line.split(separator, 1)[0]
    return line.strip()


def normalize_delimiters(line: str) -> str:
    """Rewrite the legacy ``$name ... $end`` spelling into ``&name ... /``."""
    line = line.replace("$", "&")
    line = _LONE_AMPERSAND_RE.sub("/", line)
    return _END_MARKER_RE.sub("/", line)


def is_significant(token: Token) -> bool:
    if token.type == TokenType.WHITESPACE:
        return False
    return len(token.value.strip().strip(",")) > 0


def promote(values: List[NamelistScalar]) -> List[NamelistScalar]:
    """Give an array one element type: a float anywhere turns ints and logicals into floats."""
    has_float = any(isinstance(value, float) for value in values)
    if not has_float:
        return values
    return [float(value) if isinstance(value, int) else value for value in values]


def expand_repetitions(lexemes: List[str]) -> List[NamelistScalar]:
    values: List[NamelistScalar] = []
    position = 0
    while position < len(lexemes):
        if position + 2 < len(lexemes) and lexemes[position + 1] == REPEAT_MARKER:
            count = to_native(lexemes[position])
            if isinstance(count, int) and not isinstance(count, bool):
                values.extend([to_native(lexemes[position + 2])] * count)
                position += 3
                continue
        values.append(to_native(lexemes[position]))
        position += 1
    return values


class NamelistReader:
    """Builds a document from namelist text, one line at a time.

    Open groups live on a reader-local stack of :class:`GroupFrame`; a frame is
    attached to the document when its group closes. Reopening a group that is
    already in the document continues filling the same mapping, so a namelist
    split over several blocks ends up as one group.
    """

    def __init__(self, config: Optional[ReaderConfig] = None):
        self.config = resolve_config(config or {}, DEFAULT_CONFIG)
        self.logger = Logger("parser", is_enabled=self.config["enable_logger"]).logger
        self.tokenizer = Tokenizer(config=self.config["lexer_config"])
        self.document: NamelistDocument = {}
        self.stack: list[GroupFrame] = []
        self.line_number = 0

    @property
    def current_frame(self) -> GroupFrame | None:
        return self.stack[-1] if self.stack else None

    def read(self, source: str | PathLike | IO[str]) -> NamelistDocument:
        return self.read_into(source, {})

    def read_into(self, source: str | PathLike | IO[str], document: NamelistDocument) -> NamelistDocument:
        if is_path(source):
            with open(source, "r", encoding="utf-8") as stream:
                return self.read_into(stream, document)

        self.logger.info(f"Reading namelist from {stream_name(source)}")  # type: ignore[arg-type]
        self.document = document
        self.stack = []
        self.line_number = 0
        self.tokenizer.reset()
        self.read_lines(source)  # type: ignore[arg-type]
        self._attach_unclosed_groups()
        self.logger.info(f"Read {len(self.document)} group(s)")
        return self.document

    def read_lines(self, lines: Iterable[str]) -> None:
        for line in lines:
            self.line_number += 1
            self.read_line(line)

    def read_line(self, line: str) -> None:
        line = strip_comments(line)
        if not line:
            return
        line = normalize_delimiters(line)
        tokens = [token for token in self.tokenizer.tokenize(line, self.line_number) if is_significant(token)]
        if tokens:
            self.interpret(line, tokens)

    def interpret(self, line: str, tokens: List[Token]) -> None:
        first = tokens[0]
        if first.type == TokenType.GROUP_OPEN:
            self._open_group(tokens)
            # assignments may follow the group name on the same line
            if len(tokens) > 2:
                self.interpret(line, tokens[2:])
        elif first.type == TokenType.GROUP_CLOSE or (self.current_frame is None and first.value == "/"):
            # outside a group the tokenizer hands a lone "/" back as comment text
            self._close_group()
        elif self.current_frame is None:
            self.logger.debug(f"{line} [SKIP outside]")
        elif len(tokens) > 1 and tokens[1].value == "=":
            self._assign_all(line, tokens)
        else:
            self.logger.debug(f"{line} [SKIP index]")

    def _open_group(self, tokens: List[Token]) -> None:
        if len(tokens) < 2:
            self.logger.debug(f"Group open without a name at line {self.line_number} [SKIP]")
            return
        name = tokens[1].value
        group = self._find_group(name)
        if group is None:
            group = {}
            self.logger.debug(f"Opening group '{name}'")
        else:
            self.logger.debug(f"Reopening group '{name}'")
        self.stack.append(GroupFrame(name=name, group=group))

    def _find_group(self, name: str) -> NamelistGroup | None:
        for frame in reversed(self.stack):
            if frame.name == name:
                return frame.group
        return self.document.get(name)

    def _close_group(self) -> None:
        if not self.stack:
            raise NamelistParseError("Group close without a matching open", self.line_number)
        frame = self.stack.pop()
        self.document[frame.name] = frame.group
        self.logger.debug(f"Closing group '{frame.name}'")

    def _assign_all(self, line: str, tokens: List[Token]) -> None:
        """Handle ``a = 1, b = 2 /``: split on ``name =`` pairs, close on ``/``."""
        closes = False
        for position, token in enumerate(tokens):
            if token.type == TokenType.GROUP_CLOSE:
                tokens, closes = tokens[:position], True
                break

        start = 0
        for position in range(2, len(tokens) - 1):
            if tokens[position].type == TokenType.IDENTIFIER and tokens[position + 1].value == "=":
                self._assign(line, tokens[start:position])
                start = position
        self._assign(line, tokens[start:])

        if closes:
            self._close_group()

    def _assign(self, line: str, tokens: List[Token]) -> None:
        name = tokens[0].value
        lexemes = [token.value for token in tokens[2:]]
        value: NamelistValue
        if not lexemes:
            self.logger.debug(f"{line} [SKIP empty]")
            return
        if len(lexemes) == 1:
            value = to_native(lexemes[0])
        else:
            value = promote(expand_repetitions(lexemes))
        self.current_frame.group[name] = value  # type: ignore[union-attr]
        self.logger.debug(f"{line} [{type(value).__name__}] -> {value!r}")

    def _attach_unclosed_groups(self) -> None:
        while self.stack:
            frame = self.stack.pop()
            self.logger.warning(f"Group '{frame.name}' was never closed")
            self.document[frame.name] = frame.group


def read(source: str | PathLike | IO[str], verbose: bool = False) -> NamelistDocument:
    """Parse a namelist file or text stream into nested ordered dicts.

    Known limitations: indexed assignments like ``x(2) = 1`` are skipped,
    arrays are flat, complex numbers are not supported, ``!``, ``;`` and ``#``
    cut a line even inside a string, and anything outside a group is ignored.
    """
    return NamelistReader(config={"enable_logger": verbose}).read(source)


def read_into(source: str | PathLike | IO[str], document: NamelistDocument, verbose: bool = False) -> NamelistDocument:
    return NamelistReader(config={"enable_logger": verbose}).read_into(source, document)


__all__ = ["NamelistReader", "ReaderConfig", "read", "read_into", "promote", "expand_repetitions"]
