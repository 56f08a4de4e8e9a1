"""
Tokenizer for the LinkState command language.

Turns command text such as `open_file file="src/main.rs"` into a flat tuple of
tokens. Separator characters (trivia) carry no meaning and never produce
tokens.
"""

from enum import Enum

from attrs import frozen

from linkstate.exceptions import ErrorContext, LexError

TRIVIA = frozenset(" /,?")
IDENT_TERMINATORS = TRIVIA | {"="}

QUOTE = '"'
EQUALS = "="
ESCAPE = "~"
ESCAPABLE = frozenset({QUOTE, ESCAPE})


class TokenKind(Enum):
    """Kind of a lexical token."""

    STRING = "string"
    EQUALS = "equals"
    IDENT = "ident"


class _ScanState(Enum):
    """States of the string literal scanner."""

    NORMAL = "normal"
    ESCAPE = "escape"


@frozen
class Token:
    """
    A lexical token.

    Params:
        kind: Token kind
        value: Decoded text; escapes are already resolved for STRING tokens
        position: Offset of the token's first character in the source text
    """

    kind: TokenKind
    value: str
    position: int = 0


class Tokenizer:
    """Single-pass tokenizer over an immutable command string."""

    def __init__(self, text: str):
        self.text = text
        self.pos = 0

    def tokenize(self) -> tuple[Token, ...]:
        """
        Tokenize the whole text.

        Returns:
            Tokens in source order, empty for empty or trivia-only text

        Raises:
            LexError: If a string literal contains an invalid escape sequence
        """
        tokens = []
        while True:
            self._skip_trivia()
            if self.pos >= len(self.text):
                break

            char = self.text[self.pos]
            if char == QUOTE:
                tokens.append(self._scan_string())
            elif char == EQUALS:
                tokens.append(Token(TokenKind.EQUALS, EQUALS, self.pos))
                self.pos += 1
            else:
                tokens.append(self._scan_ident())
        return tuple(tokens)

    def _skip_trivia(self) -> None:
        while self.pos < len(self.text) and self.text[self.pos] in TRIVIA:
            self.pos += 1

    def _scan_ident(self) -> Token:
        start = self.pos
        while (
            self.pos < len(self.text) and self.text[self.pos] not in IDENT_TERMINATORS
        ):
            self.pos += 1
        return Token(TokenKind.IDENT, self.text[start : self.pos], start)

    def _scan_string(self) -> Token:
        """
        Scan a string literal starting at the opening quote.

        A literal that is never closed runs to the end of the text. A dangling
        escape introducer at the very end is dropped.
        """
        start = self.pos
        self.pos += 1  # opening quote
        state = _ScanState.NORMAL
        chars = []

        while self.pos < len(self.text):
            char = self.text[self.pos]
            if state is _ScanState.ESCAPE:
                if char not in ESCAPABLE:
                    raise LexError(
                        ESCAPE + char,
                        self.pos - 1,
                        ErrorContext(self.text, self.pos - 1),
                    )
                chars.append(char)
                state = _ScanState.NORMAL
            elif char == QUOTE:
                self.pos += 1  # closing quote
                break
            elif char == ESCAPE:
                state = _ScanState.ESCAPE
            else:
                chars.append(char)
            self.pos += 1

        return Token(TokenKind.STRING, "".join(chars), start)


def tokenize(text: str) -> tuple[Token, ...]:
    """
    Convenience function to tokenize a command string.

    Params:
        text: Command text without the marker prefix

    Returns:
        Tokens in source order

    Raises:
        LexError: If the text contains an invalid escape sequence
    """
    return Tokenizer(text).tokenize()
