"""CLI entry point for the Lox interpreter.

Usage:
    python -m lox                  start the REPL
    python -m lox <script>         run a source file
    python -m lox -v --tokens --ast <script>

Options:
  -v            Increase log verbosity (-v INFO, -vv DEBUG)
  --tokens      Print the scanned tokens before parsing
  --ast         Print each parsed statement before executing
  --recover     Report every syntax error instead of stopping at the first
"""
import argparse
import logging
import sys

from .config import LoxConfig
from .repl import run_repl
from .runner import run_file


def build_config(args: argparse.Namespace) -> LoxConfig:
    config = LoxConfig.from_env()
    if args.v == 1:
        config.log_level = "INFO"
    elif args.v >= 2:
        config.log_level = "DEBUG"
    config.show_tokens = config.show_tokens or args.tokens
    config.show_ast = config.show_ast or args.ast
    config.recover_parse_errors = config.recover_parse_errors or args.recover
    return config


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="lox", description="Lox expression interpreter")
    parser.add_argument("-v", action="count", default=0, help="increase log verbosity (can be repeated)")
    parser.add_argument("--tokens", action="store_true", help="print scanned tokens")
    parser.add_argument("--ast", action="store_true", help="print parsed statements")
    parser.add_argument("--recover", action="store_true", help="report every syntax error")
    parser.add_argument("script", nargs="?", help="Lox source file to run")
    args = parser.parse_args(argv)

    config = build_config(args)
    logging.basicConfig(
        level=config.logging_level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    if args.script is None:
        run_repl(config)
        return 0
    return run_file(args.script, config=config)


if __name__ == "__main__":
    sys.exit(main())
