"""
Lox Diagnostics
===============
A single exception type shared by the scanner, parser and interpreter.
Every diagnostic carries a kind, a 1-based source line and optional
context text, and renders as:

    [line L] Error at 'context': <description>
"""
from enum import Enum, auto
from typing import Optional


class ErrorKind(Enum):
    """Diagnostic taxonomy: lexical, syntactic and runtime."""
    UNEXPECTED_CHAR     = auto()
    UNTERMINATED_STRING = auto()
    INVALID_SYNTAX      = auto()
    EVALUATION_FAILED   = auto()


class LoxError(Exception):
    """A line-numbered diagnostic raised by any stage of the pipeline.

    Args:
        kind: The diagnostic kind.
        line: 1-based source line.
        context: Source text the error is reported at (a lexeme), if any.
        detail: Kind payload: the offending character for UNEXPECTED_CHAR,
            a human-readable message for INVALID_SYNTAX and EVALUATION_FAILED.
    """

    def __init__(self, kind: ErrorKind, line: int,
                 context: Optional[str] = None, detail: Optional[str] = None):
        self.kind = kind
        self.line = line
        self.context = context
        self.detail = detail
        super().__init__(self.render())

    @property
    def description(self) -> str:
        match self.kind:
            case ErrorKind.UNEXPECTED_CHAR:
                return f"Unexpected character '{self.detail}'"
            case ErrorKind.UNTERMINATED_STRING:
                return "Unterminated string"
            case ErrorKind.INVALID_SYNTAX:
                return f"Invalid syntax: {self.detail}" if self.detail else "Invalid syntax"
            case ErrorKind.EVALUATION_FAILED:
                return f"Evaluation failed: {self.detail}" if self.detail else "Evaluation failed"
        return self.kind.name

    def render(self) -> str:
        where = f" at '{self.context}'" if self.context is not None else ""
        return f"[line {self.line}] Error{where}: {self.description}"

    def __str__(self) -> str:
        return self.render()


class ParseErrors(LoxError):
    """Every diagnostic collected by a recovering parse.

    The primary fields mirror the first diagnostic so callers that only
    handle LoxError still see a sensible kind and line.
    """

    def __init__(self, errors: list[LoxError]):
        first = errors[0]
        self.errors = list(errors)
        super().__init__(first.kind, first.line, first.context, first.detail)

    def render(self) -> str:
        return "\n".join(e.render() for e in self.errors)
