"""
LinkState parsing components.

This package provides the tokenizer, the parser and the formatter for the
deep-link command language.
"""

from linkstate.parsing.formatter import format_command, quote_value
from linkstate.parsing.parser import CommandParser, parse, parse_command
from linkstate.parsing.tokenizer import Token, Tokenizer, TokenKind, tokenize

__all__ = [
    "CommandParser",
    "Token",
    "TokenKind",
    "Tokenizer",
    "format_command",
    "parse",
    "parse_command",
    "quote_value",
    "tokenize",
]
