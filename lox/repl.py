"""
Lox REPL
========
Interactive Read-Eval-Print Loop. Each line is run on its own; a
diagnostic is printed and the loop keeps accepting input.
"""
from .config import LoxConfig
from .errors import LoxError
from .interpreter import Interpreter
from .runner import run

HELP_TEXT = """
Enter expressions; each one's value is printed.

  1 + 2 * 3          => 7
  "lox" + "py"       => loxpy
  !nil == true       => true
  (1 > 2) != false   => false

Commands: help, exit
"""


def run_repl(config: LoxConfig | None = None) -> None:
    """Run the interactive Lox REPL until exit, quit, EOF or Ctrl+C."""
    config = config or LoxConfig()
    interp = Interpreter()

    while True:
        try:
            line = input(config.prompt)
        except (EOFError, KeyboardInterrupt):
            print()
            break

        line = line.strip()
        if not line:
            continue

        if line.lower() in ("exit", "quit"):
            break

        if line.lower() == "help":
            print(HELP_TEXT)
            continue

        try:
            run(line, interpreter=interp, config=config)
        except LoxError as e:
            print(e)
