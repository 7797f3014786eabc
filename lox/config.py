"""
Lox Configuration
=================
Settings shared by the file runner, the REPL and the CLI. Values come
from defaults, then LOX_* environment variables, then command-line flags.
"""
from __future__ import annotations

import logging
import os
from dataclasses import dataclass

_TRUE_VALUES = ("1", "true", "yes", "on")


@dataclass
class LoxConfig:
    """Runtime configuration for a Lox session."""

    log_level: str = "WARNING"          # Name of a logging level
    prompt: str = "> "                  # REPL prompt
    recover_parse_errors: bool = False  # Report every syntax error, not just the first
    show_tokens: bool = False           # Print the token list before parsing
    show_ast: bool = False              # Print each parsed statement before executing

    @classmethod
    def from_env(cls, environ: dict[str, str] | None = None) -> LoxConfig:
        """Build a config from LOX_LOG_LEVEL, LOX_PROMPT and LOX_PARSE_RECOVERY."""
        env = os.environ if environ is None else environ
        config = cls()
        if env.get("LOX_LOG_LEVEL"):
            config.log_level = env["LOX_LOG_LEVEL"].upper()
        if "LOX_PROMPT" in env:
            config.prompt = env["LOX_PROMPT"]
        if env.get("LOX_PARSE_RECOVERY"):
            config.recover_parse_errors = env["LOX_PARSE_RECOVERY"].lower() in _TRUE_VALUES
        return config

    @property
    def logging_level(self) -> int:
        """Numeric logging level; unknown names fall back to WARNING."""
        level = logging.getLevelName(self.log_level)
        return level if isinstance(level, int) else logging.WARNING
