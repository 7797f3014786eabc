"""
Lox Runner
==========
Composes the pipeline: scan → parse → execute. The first diagnostic
from any stage propagates to the caller unchanged.
"""
import logging
import os
import sys
from typing import Callable

from .config import LoxConfig
from .errors import ErrorKind, LoxError
from .interpreter import Interpreter
from .parser import parse
from .printer import dump_tokens, render
from .scanner import scan

logger = logging.getLogger(__name__)

# sysexits.h codes
EX_OK = 0
EX_DATAERR = 65
EX_NOINPUT = 66
EX_SOFTWARE = 70


def run(source: str, interpreter: Interpreter | None = None,
        config: LoxConfig | None = None,
        output_fn: Callable[[str], None] | None = None) -> None:
    """Scan, parse and execute source text.

    Args:
        source: Lox source code.
        interpreter: Interpreter to execute with; a fresh one if omitted.
        config: Session settings (parse recovery, debug dumps).
        output_fn: Sink for printed values and debug dumps. When an
            interpreter is also passed, only the debug dumps go here and
            values keep going to that interpreter's own sink. Defaults
            to the interpreter's sink.

    Raises:
        LoxError: the first diagnostic raised by any stage.
    """
    config = config or LoxConfig()
    interp = interpreter or Interpreter(output_fn)
    emit = output_fn or interp.output_fn

    try:
        tokens = scan(source)
        if config.show_tokens:
            emit(dump_tokens(tokens))

        statements = parse(tokens, recover=config.recover_parse_errors)
        if config.show_ast:
            for stmt in statements:
                emit(render(stmt.expression))

        interp.execute(statements)
    except LoxError as e:
        logger.debug("Run aborted: %s", e.kind.name)
        raise


def run_file(filepath: str, config: LoxConfig | None = None) -> int:
    """
    Execute a Lox source file.

    Returns:
        0 on success, 65 on a scan or parse error, 66 if the file is
        missing, 70 on an evaluation error.
    """
    if not os.path.exists(filepath):
        print(f"Error: File not found: {filepath}", file=sys.stderr)
        return EX_NOINPUT

    with open(filepath, "r", encoding="utf-8") as f:
        source = f.read()

    logger.info("Running %s", filepath)
    try:
        run(source, config=config)
    except LoxError as e:
        print(e, file=sys.stderr)
        if e.kind == ErrorKind.EVALUATION_FAILED:
            return EX_SOFTWARE
        return EX_DATAERR
    return EX_OK
