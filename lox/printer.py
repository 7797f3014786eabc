"""
Lox Debug Printer
=================
Renders parsed expressions and scanned tokens back to text. Used by the
CLI's --ast/--tokens switches and by the parser tests: render() joins
lexemes with no added parentheses beyond explicit groupings, so a parse
of "1+(2*3)" renders as exactly "1+(2*3)".
"""
from .parser import (
    ASTNode, BinaryNode, GroupingNode, IdentifierNode, LiteralNode, UnaryNode,
)
from .tokens import Token
from .values import stringify


def render(expr: ASTNode) -> str:
    """Render an expression as a minimal infix string."""
    match expr:
        case IdentifierNode():
            return expr.name.lexeme
        case LiteralNode():
            return expr.token.lexeme
        case GroupingNode():
            return f"({render(expr.expression)})"
        case UnaryNode():
            return f"{expr.operator.lexeme}{render(expr.operand)}"
        case BinaryNode():
            return f"{render(expr.left)}{expr.operator.lexeme}{render(expr.right)}"
    raise TypeError(f"Cannot render node type: {expr.node_type}")


def dump_tokens(tokens: list[Token]) -> str:
    """One line per token: TYPE 'lexeme' [literal] Lline."""
    lines = []
    for token in tokens:
        text = f"{token.type.name} {token.lexeme!r}"
        if token.literal is not None:
            text += f" {stringify(token.literal)}"
        lines.append(f"{text} L{token.line}")
    return "\n".join(lines)
