"""
Lox Interpreter
===============
Tree-walking interpreter that evaluates the statements produced by the
Parser. Values are pure scalars; there is no environment to mutate, so
the only side effect is printing each top-level statement's value.

Operand types are checked dynamically per operator. The first failure
raises a LoxError and aborts the remaining statements.
"""
import logging
from typing import Callable

from .errors import ErrorKind, LoxError
from .parser import (
    ASTNode, BinaryNode, ExpressionStmt, GroupingNode, IdentifierNode,
    LiteralNode, UnaryNode,
)
from .tokens import Token, TokenType
from .values import Value, divide, is_equal, is_truthy, stringify

logger = logging.getLogger(__name__)


class Interpreter:
    """
    Tree-walking interpreter for Lox expression statements.

    Usage:
        interp = Interpreter()
        interp.execute(statements)
    """

    def __init__(self, output_fn: Callable[[str], None] | None = None):
        self.output_fn = output_fn or (lambda s: print(s))

    def execute(self, statements: list[ExpressionStmt]) -> None:
        """Execute statements in order, printing each statement's value."""
        for stmt in statements:
            self._exec_statement(stmt)

    def _exec_statement(self, stmt: ExpressionStmt):
        value = self.evaluate(stmt.expression)
        logger.debug("L%d => %r", stmt.line, value)
        self.output_fn(stringify(value))

    def evaluate(self, node: ASTNode) -> Value:
        """Evaluate an expression node to a runtime value."""
        try:
            return self._evaluate(node)
        except RecursionError:
            raise LoxError(
                ErrorKind.EVALUATION_FAILED, node.line,
                detail="Expression nested too deeply.",
            ) from None

    def _evaluate(self, node: ASTNode) -> Value:
        method = f"_eval_{node.node_type.lower()}"
        evaluator = getattr(self, method, None)
        if evaluator is None:
            raise LoxError(
                ErrorKind.EVALUATION_FAILED, node.line,
                detail=f"Unknown node type: {node.node_type}",
            )
        return evaluator(node)

    # ─────────────────────────────────────────────────────────
    #  Leaves & Grouping
    # ─────────────────────────────────────────────────────────

    def _eval_literal(self, node: LiteralNode) -> Value:
        return node.value

    def _eval_grouping(self, node: GroupingNode) -> Value:
        return self._evaluate(node.expression)

    def _eval_identifier(self, node: IdentifierNode) -> Value:
        name = node.name.lexeme
        raise LoxError(
            ErrorKind.EVALUATION_FAILED, node.name.line, name,
            f"Undefined variable '{name}'",
        )

    # ─────────────────────────────────────────────────────────
    #  Operators
    # ─────────────────────────────────────────────────────────

    def _eval_unary(self, node: UnaryNode) -> Value:
        operand = self._evaluate(node.operand)
        op = node.operator

        match op.type:
            case TokenType.MINUS:
                self._require_numbers(op, operand, label="unary -")
                return -operand
            case TokenType.BANG:
                return not is_truthy(operand)

        raise self._error(op, "Wrong unary operator")

    def _eval_binary(self, node: BinaryNode) -> Value:
        left = self._evaluate(node.left)
        right = self._evaluate(node.right)
        op = node.operator

        match op.type:
            case TokenType.PLUS:
                if isinstance(left, float) and isinstance(right, float):
                    return left + right
                if isinstance(left, str) and isinstance(right, str):
                    return left + right
                raise self._error(op, "Unsupported types for +")
            case TokenType.MINUS:
                self._require_numbers(op, left, right)
                return left - right
            case TokenType.STAR:
                self._require_numbers(op, left, right)
                return left * right
            case TokenType.SLASH:
                self._require_numbers(op, left, right)
                return divide(left, right)
            case TokenType.GREATER:
                self._require_numbers(op, left, right)
                return left > right
            case TokenType.GREATER_EQUAL:
                self._require_numbers(op, left, right)
                return left >= right
            case TokenType.LESS:
                self._require_numbers(op, left, right)
                return left < right
            case TokenType.LESS_EQUAL:
                self._require_numbers(op, left, right)
                return left <= right
            case TokenType.EQUAL_EQUAL:
                return is_equal(left, right)
            case TokenType.BANG_EQUAL:
                return not is_equal(left, right)

        raise self._error(op, f"Unknown binary operator {op.lexeme}")

    # ─────────────────────────────────────────────────────────
    #  Helpers
    # ─────────────────────────────────────────────────────────

    def _require_numbers(self, op: Token, *operands: Value, label: str | None = None):
        # bool is not a float subclass, so true/false are rejected here too
        if not all(isinstance(v, float) for v in operands):
            raise self._error(op, f"Unsupported types for {label or op.lexeme}")

    def _error(self, op: Token, message: str) -> LoxError:
        return LoxError(ErrorKind.EVALUATION_FAILED, op.line, op.lexeme, message)


def execute(statements: list[ExpressionStmt],
            output_fn: Callable[[str], None] | None = None) -> None:
    """Execute parsed statements with a fresh Interpreter."""
    Interpreter(output_fn).execute(statements)
