"""Read and write Fortran namelist files."""

from .errors import LexerError, NamelistError, NamelistParseError, NamelistValueError
from .nodes import NamelistDocument, NamelistGroup, NamelistScalar, NamelistValue, validate_document
from .lexer import Token, Tokenizer, TokenType
from .converter import to_literal, to_native
from .parser import NamelistReader, read, read_into
from .formatter import NamelistFormatter, write

__all__ = [
    "LexerError",
    "NamelistError",
    "NamelistParseError",
    "NamelistValueError",
    "NamelistDocument",
    "NamelistGroup",
    "NamelistScalar",
    "NamelistValue",
    "validate_document",
    "Token",
    "Tokenizer",
    "TokenType",
    "to_literal",
    "to_native",
    "NamelistReader",
    "read",
    "read_into",
    "NamelistFormatter",
    "write",
]
