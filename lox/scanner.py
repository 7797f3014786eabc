"""
Lox Scanner
===========
Turns source text into a list of typed tokens in a single left-to-right
pass. Scanning stops at the first invalid lexeme; there is no recovery.
"""
import logging

from .errors import ErrorKind, LoxError
from .tokens import (
    KEYWORDS, ONE_OR_TWO_CHAR_TOKENS, SINGLE_CHAR_TOKENS,
    Literal, Token, TokenType,
)

logger = logging.getLogger(__name__)


def _is_digit(ch: str | None) -> bool:
    return ch is not None and "0" <= ch <= "9"


def _is_alpha(ch: str | None) -> bool:
    return ch is not None and (ch.isalpha() or ch == "_")


def _is_alphanumeric(ch: str | None) -> bool:
    return _is_alpha(ch) or _is_digit(ch)


class Scanner:
    """
    Tokenizes Lox source code.

    Usage:
        scanner = Scanner(source)
        tokens = scanner.scan_tokens()

    Cursors:
        start    beginning of the lexeme being scanned
        current  next character to read
        line     1-based line, bumped on every newline
    """

    def __init__(self, source: str):
        self.source = source
        self.start = 0
        self.current = 0
        self.line = 1
        self.tokens: list[Token] = []

    def _at_end(self) -> bool:
        return self.current >= len(self.source)

    def _peek(self, offset: int = 0) -> str | None:
        idx = self.current + offset
        if idx >= len(self.source):
            return None
        return self.source[idx]

    def _advance(self) -> str:
        ch = self.source[self.current]
        self.current += 1
        return ch

    def _match(self, expected: str) -> bool:
        if self._peek() != expected:
            return False
        self.current += 1
        return True

    def _add_token(self, token_type: TokenType, literal: Literal = None):
        lexeme = self.source[self.start:self.current]
        self.tokens.append(Token(token_type, lexeme, literal, self.line))

    def scan_tokens(self) -> list[Token]:
        """Scan the whole source. Raises LoxError on the first bad lexeme."""
        while not self._at_end():
            self.start = self.current
            self._scan_token()

        self.tokens.append(Token(TokenType.EOF, "", None, self.line))
        logger.debug("Scanned %d tokens over %d line(s)", len(self.tokens), self.line)
        return self.tokens

    def _scan_token(self):
        ch = self._advance()

        if ch in SINGLE_CHAR_TOKENS:
            self._add_token(SINGLE_CHAR_TOKENS[ch])
            return

        if ch in ONE_OR_TWO_CHAR_TOKENS:
            single, double = ONE_OR_TWO_CHAR_TOKENS[ch]
            self._add_token(double if self._match("=") else single)
            return

        if ch == "/":
            if self._match("/"):
                # Line comment: the newline itself is left for the main loop
                while self._peek() is not None and self._peek() != "\n":
                    self._advance()
            else:
                self._add_token(TokenType.SLASH)
            return

        if ch in (" ", "\r", "\t"):
            return

        if ch == "\n":
            self.line += 1
            return

        if ch == '"':
            self._read_string()
            return

        if _is_digit(ch):
            self._read_number()
            return

        if _is_alpha(ch):
            self._read_identifier()
            return

        raise LoxError(ErrorKind.UNEXPECTED_CHAR, self.line, detail=ch)

    def _read_string(self):
        """Read a double-quoted string. No escape processing; newlines allowed."""
        while self._peek() is not None and self._peek() != '"':
            if self._advance() == "\n":
                self.line += 1

        if self._at_end():
            raise LoxError(ErrorKind.UNTERMINATED_STRING, self.line)

        self._advance()  # closing "
        self._add_token(TokenType.STRING, self.source[self.start + 1:self.current - 1])

    def _read_number(self):
        """Read digits, then an optional fraction. A trailing '.' is not consumed."""
        while _is_digit(self._peek()):
            self._advance()

        if self._peek() == "." and _is_digit(self._peek(1)):
            self._advance()  # consume .
            while _is_digit(self._peek()):
                self._advance()

        self._add_token(TokenType.NUMBER, float(self.source[self.start:self.current]))

    def _read_identifier(self):
        """Read an identifier or keyword."""
        while _is_alphanumeric(self._peek()):
            self._advance()

        word = self.source[self.start:self.current]
        self._add_token(KEYWORDS.get(word, TokenType.IDENTIFIER))


def scan(source: str) -> list[Token]:
    """Scan source text into tokens ending with a single EOF token."""
    return Scanner(source).scan_tokens()
