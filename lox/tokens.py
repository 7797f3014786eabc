"""
Lox Tokens
==========
The fixed token vocabulary produced by the Scanner, and the Token record
itself. Every scan ends with exactly one EOF token.
"""
from dataclasses import dataclass
from enum import Enum, auto
from types import MappingProxyType
from typing import Optional, Union


class TokenType(Enum):
    """All token kinds in the Lox expression language."""
    # Single-character punctuation
    LEFT_PAREN    = auto()   # (
    RIGHT_PAREN   = auto()   # )
    LEFT_BRACE    = auto()   # {
    RIGHT_BRACE   = auto()   # }
    COMMA         = auto()   # ,
    DOT           = auto()   # .
    MINUS         = auto()   # -
    PLUS          = auto()   # +
    SEMICOLON     = auto()   # ;
    SLASH         = auto()   # /
    STAR          = auto()   # *

    # One or two character operators
    BANG          = auto()   # !
    BANG_EQUAL    = auto()   # !=
    EQUAL         = auto()   # =
    EQUAL_EQUAL   = auto()   # ==
    GREATER       = auto()   # >
    GREATER_EQUAL = auto()   # >=
    LESS          = auto()   # <
    LESS_EQUAL    = auto()   # <=

    # Literals
    IDENTIFIER    = auto()
    STRING        = auto()
    NUMBER        = auto()

    # Keywords
    AND           = auto()
    CLASS         = auto()
    ELSE          = auto()
    FALSE         = auto()
    FUN           = auto()
    FOR           = auto()
    IF            = auto()
    NIL           = auto()
    OR            = auto()
    PRINT         = auto()
    RETURN        = auto()
    SUPER         = auto()
    THIS          = auto()
    TRUE          = auto()
    VAR           = auto()
    WHILE         = auto()

    EOF           = auto()


# Literal payloads: None is nil, then bool, float and str.
Literal = Union[None, bool, float, str]


@dataclass(frozen=True)
class Token:
    """A single token scanned from Lox source."""
    type: TokenType
    lexeme: str
    literal: Optional[Literal]
    line: int

    def __repr__(self) -> str:
        return f"Token({self.type.name}, {self.lexeme!r}, L{self.line})"


SINGLE_CHAR_TOKENS = MappingProxyType({
    "(": TokenType.LEFT_PAREN,
    ")": TokenType.RIGHT_PAREN,
    "{": TokenType.LEFT_BRACE,
    "}": TokenType.RIGHT_BRACE,
    ",": TokenType.COMMA,
    ".": TokenType.DOT,
    "-": TokenType.MINUS,
    "+": TokenType.PLUS,
    ";": TokenType.SEMICOLON,
    "*": TokenType.STAR,
})

# Operator -> (one-char kind, kind when followed by "=")
ONE_OR_TWO_CHAR_TOKENS = MappingProxyType({
    "!": (TokenType.BANG, TokenType.BANG_EQUAL),
    "=": (TokenType.EQUAL, TokenType.EQUAL_EQUAL),
    "<": (TokenType.LESS, TokenType.LESS_EQUAL),
    ">": (TokenType.GREATER, TokenType.GREATER_EQUAL),
})

KEYWORDS = MappingProxyType({
    "and": TokenType.AND,
    "class": TokenType.CLASS,
    "else": TokenType.ELSE,
    "false": TokenType.FALSE,
    "fun": TokenType.FUN,
    "for": TokenType.FOR,
    "if": TokenType.IF,
    "nil": TokenType.NIL,
    "or": TokenType.OR,
    "print": TokenType.PRINT,
    "return": TokenType.RETURN,
    "super": TokenType.SUPER,
    "this": TokenType.THIS,
    "true": TokenType.TRUE,
    "var": TokenType.VAR,
    "while": TokenType.WHILE,
})
