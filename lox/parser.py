"""
Lox Parser
==========
Recursive-descent parser that builds one expression AST per top-level
expression statement from the token list produced by the Scanner.

Grammar (lowest to highest precedence, binary levels left-associative):

    program    → ( expression ";"? )* EOF
    expression → equality
    equality   → comparison ( ( "!=" | "==" ) comparison )*
    comparison → term ( ( ">" | ">=" | "<" | "<=" ) term )*
    term       → factor ( ( "-" | "+" ) factor )*
    factor     → unary ( ( "/" | "*" ) unary )*
    unary      → ( "!" | "-" ) unary | primary
    primary    → NUMBER | STRING | "true" | "false" | "nil"
               | IDENTIFIER | "(" expression ")"

By default the first syntax error aborts the parse. With recover=True the
parser records the error, synchronizes to the next statement boundary and
keeps going, then reports everything it found at the end.
"""
import logging
from dataclasses import dataclass

from .errors import ErrorKind, LoxError, ParseErrors
from .tokens import Literal, Token, TokenType

logger = logging.getLogger(__name__)


# ─────────────────────────────────────────────────────────────
#  AST Node Types
# ─────────────────────────────────────────────────────────────

@dataclass
class ASTNode:
    """Base class for all AST nodes."""
    node_type: str = ""
    line: int = 0


@dataclass
class IdentifierNode(ASTNode):
    """A bare name. Parsed, but there are no bindings to evaluate it against."""
    name: Token | None = None

    def __post_init__(self):
        self.node_type = "Identifier"


@dataclass
class LiteralNode(ASTNode):
    """A number, string, true, false or nil."""
    token: Token | None = None
    value: Literal = None

    def __post_init__(self):
        self.node_type = "Literal"


@dataclass
class GroupingNode(ASTNode):
    """A parenthesized expression."""
    expression: ASTNode | None = None

    def __post_init__(self):
        self.node_type = "Grouping"


@dataclass
class UnaryNode(ASTNode):
    """A prefix operator: -x or !x."""
    operator: Token | None = None
    operand: ASTNode | None = None

    def __post_init__(self):
        self.node_type = "Unary"


@dataclass
class BinaryNode(ASTNode):
    """An infix operator: left op right."""
    left: ASTNode | None = None
    operator: Token | None = None
    right: ASTNode | None = None

    def __post_init__(self):
        self.node_type = "Binary"


@dataclass
class ExpressionStmt(ASTNode):
    """A top-level expression statement; its value is printed when executed."""
    expression: ASTNode | None = None

    def __post_init__(self):
        self.node_type = "Expression"


# Tokens a statement can start with; used as synchronization points.
STATEMENT_KEYWORDS = frozenset({
    TokenType.CLASS, TokenType.FUN, TokenType.VAR, TokenType.FOR,
    TokenType.IF, TokenType.WHILE, TokenType.PRINT, TokenType.RETURN,
})

LITERAL_KEYWORDS = {
    TokenType.TRUE: True,
    TokenType.FALSE: False,
    TokenType.NIL: None,
}


# ─────────────────────────────────────────────────────────────
#  Parser
# ─────────────────────────────────────────────────────────────

class Parser:
    """
    Recursive-descent parser for Lox expressions.

    Usage:
        parser = Parser(tokens)
        statements = parser.parse()
    """

    def __init__(self, tokens: list[Token], recover: bool = False):
        self.tokens = tokens
        self.pos = 0
        self.recover = recover
        self.errors: list[LoxError] = []

    def _current(self) -> Token:
        return self.tokens[self.pos]

    def _previous(self) -> Token:
        return self.tokens[self.pos - 1]

    def _at_end(self) -> bool:
        return self._current().type == TokenType.EOF

    def _advance(self) -> Token:
        if not self._at_end():
            self.pos += 1
        return self._previous()

    def _check(self, token_type: TokenType) -> bool:
        if self._at_end():
            return False
        return self._current().type == token_type

    def _match(self, *token_types: TokenType) -> Token | None:
        for token_type in token_types:
            if self._check(token_type):
                return self._advance()
        return None

    def _expect(self, token_type: TokenType, message: str) -> Token:
        if self._check(token_type):
            return self._advance()
        raise self._error(message)

    def _error(self, message: str) -> LoxError:
        """Build an InvalidSyntax diagnostic at the current token."""
        token = self._current()
        line = self._previous().line if self.pos > 0 else token.line
        context = "end" if token.type == TokenType.EOF else token.lexeme
        return LoxError(ErrorKind.INVALID_SYNTAX, line, context, message)

    def _synchronize(self):
        """Skip to the next statement boundary: past a ';' or at a statement keyword."""
        self._advance()
        while not self._at_end():
            if self._previous().type == TokenType.SEMICOLON:
                return
            if self._current().type in STATEMENT_KEYWORDS:
                return
            self._advance()

    # ─────────────────────────────────────────────────────────
    #  Top-Level Parsing
    # ─────────────────────────────────────────────────────────

    def parse(self) -> list[ExpressionStmt]:
        """Parse every statement up to EOF."""
        statements: list[ExpressionStmt] = []

        while not self._at_end():
            try:
                statements.append(self._parse_guarded_statement())
            except LoxError as e:
                if not self.recover:
                    raise
                self.errors.append(e)
                self._synchronize()

        if self.errors:
            raise ParseErrors(self.errors)

        logger.debug("Parsed %d statement(s)", len(statements))
        return statements

    def _parse_guarded_statement(self) -> ExpressionStmt:
        """Parse one statement, reporting deep nesting as a syntax error."""
        try:
            return self._parse_statement()
        except RecursionError:
            raise self._error("Expression nested too deeply.") from None

    def _parse_statement(self) -> ExpressionStmt:
        expr = self._parse_expression()
        self._match(TokenType.SEMICOLON)
        return ExpressionStmt(expression=expr, line=expr.line)

    # ─────────────────────────────────────────────────────────
    #  Expression Parsing
    # ─────────────────────────────────────────────────────────

    def _parse_expression(self) -> ASTNode:
        return self._parse_equality()

    def _parse_binary(self, operand, *operators: TokenType) -> ASTNode:
        """One left-associative binary level: operand ( op operand )*."""
        expr = operand()
        while True:
            op = self._match(*operators)
            if op is None:
                break
            right = operand()
            expr = BinaryNode(left=expr, operator=op, right=right, line=op.line)
        return expr

    def _parse_equality(self) -> ASTNode:
        return self._parse_binary(
            self._parse_comparison,
            TokenType.BANG_EQUAL, TokenType.EQUAL_EQUAL,
        )

    def _parse_comparison(self) -> ASTNode:
        return self._parse_binary(
            self._parse_term,
            TokenType.GREATER, TokenType.GREATER_EQUAL,
            TokenType.LESS, TokenType.LESS_EQUAL,
        )

    def _parse_term(self) -> ASTNode:
        return self._parse_binary(self._parse_factor, TokenType.MINUS, TokenType.PLUS)

    def _parse_factor(self) -> ASTNode:
        return self._parse_binary(self._parse_unary, TokenType.SLASH, TokenType.STAR)

    def _parse_unary(self) -> ASTNode:
        op = self._match(TokenType.BANG, TokenType.MINUS)
        if op is not None:
            return UnaryNode(operator=op, operand=self._parse_unary(), line=op.line)
        return self._parse_primary()

    def _parse_primary(self) -> ASTNode:
        token = self._current()

        if token.type in LITERAL_KEYWORDS:
            self._advance()
            return LiteralNode(token=token, value=LITERAL_KEYWORDS[token.type], line=token.line)

        if token.type in (TokenType.NUMBER, TokenType.STRING):
            self._advance()
            return LiteralNode(token=token, value=token.literal, line=token.line)

        if token.type == TokenType.IDENTIFIER:
            self._advance()
            return IdentifierNode(name=token, line=token.line)

        if token.type == TokenType.LEFT_PAREN:
            self._advance()
            expr = self._parse_expression()
            self._expect(TokenType.RIGHT_PAREN, "Expect ')' after expression.")
            return GroupingNode(expression=expr, line=token.line)

        raise self._error("Expect expression.")


def parse(tokens: list[Token], recover: bool = False) -> list[ExpressionStmt]:
    """Parse scanned tokens into expression statements."""
    return Parser(tokens, recover=recover).parse()
