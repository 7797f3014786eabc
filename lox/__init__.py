"""
Lox: a small expression language.
Scanner → Parser → tree-walking Interpreter, with line-numbered diagnostics.
"""
from .tokens import Token, TokenType, KEYWORDS
from .errors import ErrorKind, LoxError, ParseErrors
from .scanner import Scanner, scan
from .parser import (
    Parser, parse, ASTNode, ExpressionStmt,
    IdentifierNode, LiteralNode, GroupingNode, UnaryNode, BinaryNode,
)
from .interpreter import Interpreter, execute
from .printer import render, dump_tokens
from .config import LoxConfig
from .runner import run, run_file

__version__ = "0.1.0"
__all__ = [
    "Token", "TokenType", "KEYWORDS",
    "ErrorKind", "LoxError", "ParseErrors",
    "Scanner", "scan",
    "Parser", "parse", "ASTNode", "ExpressionStmt",
    "IdentifierNode", "LiteralNode", "GroupingNode", "UnaryNode", "BinaryNode",
    "Interpreter", "execute",
    "render", "dump_tokens",
    "LoxConfig",
    "run", "run_file",
]
