"""
Parser for LinkState commands.

This module turns the token stream produced by the tokenizer into a Command.
The grammar is deliberately tiny:

    command    := Ident parameter*
    parameter  := Ident Equals String
"""

import logging

from linkstate.core.command import Argument, Command
from linkstate.exceptions import EmptyStateError, ErrorContext, StateSyntaxError
from linkstate.parsing.tokenizer import Token, TokenKind, tokenize

logger = logging.getLogger(__name__)


class CommandParser:
    """Cursor-based parser over an immutable token sequence."""

    def __init__(self, tokens: tuple[Token, ...] | list[Token], text: str | None = None):
        """
        Initialize the parser.

        Params:
            tokens: Tokens to parse, as returned by `tokenize`
            text: Source text the tokens came from, used for error locations
        """
        self.tokens = tuple(tokens)
        self.text = text
        self.pos = 0

    def parse(self) -> Command:
        """
        Parse the tokens into a Command.

        Returns:
            Command with the action name and arguments in input order

        Raises:
            StateSyntaxError: If the tokens do not match the grammar
        """
        if not self.tokens:
            raise EmptyStateError(self._context(0))

        action = self._expect(TokenKind.IDENT, "state name")
        args = []
        while self.pos < len(self.tokens):
            param = self._expect(TokenKind.IDENT, "parameter name")
            self._expect(TokenKind.EQUALS, "equals")
            value = self._expect(TokenKind.STRING, "string argument")
            args.append(Argument(param.value, value.value))

        return Command(action.value, args)

    def _expect(self, kind: TokenKind, expected: str) -> Token:
        if self.pos >= len(self.tokens):
            end = self._end_position()
            raise StateSyntaxError(expected, None, end, self._context(end))

        token = self.tokens[self.pos]
        if token.kind is not kind:
            raise StateSyntaxError(
                expected, token.value, token.position, self._context(token.position)
            )
        self.pos += 1
        return token

    def _end_position(self) -> int:
        if self.text is not None:
            return len(self.text)
        last = self.tokens[-1]
        return last.position + len(last.value)

    def _context(self, position: int) -> ErrorContext | None:
        if self.text is None:
            return None
        return ErrorContext(self.text, position)


def parse(tokens: tuple[Token, ...] | list[Token], text: str | None = None) -> Command:
    """
    Parse a token sequence into a Command.

    Params:
        tokens: Tokens as returned by `tokenize`
        text: Optional source text, used for error locations

    Returns:
        The parsed Command

    Raises:
        StateSyntaxError: If the tokens do not match the grammar
    """
    return CommandParser(tokens, text).parse()


def parse_command(text: str) -> Command:
    """
    Convenience function to parse a command string.

    Params:
        text: Command text without the marker prefix

    Returns:
        The parsed Command

    Raises:
        LexError: If the text contains an invalid escape sequence
        StateSyntaxError: If the text does not match the grammar
    """
    command = parse(tokenize(text), text)
    logger.debug("Parsed command %s from %r", command, text)
    return command
