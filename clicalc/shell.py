"""
Interactive read-print loop for the calculator.

Usage:
    cli-calc                 # interactive prompt
    cli-calc --expr "2 ^ 10" # evaluate one expression and exit
    python -m clicalc --debug

Lines starting with ':' are shell commands; everything else is
evaluated as an expression. Each input line produces one output line.
"""

import argparse
import logging
import sys

from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape

from clicalc import __version__
from clicalc.config import Settings
from clicalc.evaluator import EvaluationTypeError
from clicalc.executors import ExpressionExecutor
from clicalc.functions import FunctionMap
from clicalc.parser import ParseError

logger = logging.getLogger("clicalc.shell")

COMMANDS = [":help", ":funcs", ":debug", ":exit"]


class CalcShell:
    """Dispatches shell commands and expressions, printing to a console."""

    def __init__(self, console: Console | None = None, settings: Settings | None = None):
        self.settings = settings or Settings()
        self.console = console or Console(highlight=False)
        self.debug = self.settings.debug

    def _print(self, text: str) -> None:
        self.console.print(text, markup=False, emoji=False, highlight=False, soft_wrap=True)

    def evaluate_line(self, line: str) -> bool:
        """
        Evaluate one expression and print its result or error.

        Returns:
            True if the expression evaluated without error
        """
        executor = ExpressionExecutor(line)
        try:
            ast = executor.parse()
            if self.debug:
                self._print(repr(ast))
            result = executor.execute()
        except (ParseError, EvaluationTypeError) as e:
            self._print(str(e))
            return False
        except RecursionError:
            logger.warning("Recursion limit hit while handling %r", line)
            self._print("Expression is nested too deeply")
            return False
        self._print(str(result))
        return True

    def handle_line(self, line: str) -> bool:
        """
        Handle one line of input.

        Returns:
            False once the shell should stop, True otherwise
        """
        line = line.strip()
        if not line:
            return True
        if line == ":exit":
            return False
        if line == ":debug":
            self.debug = not self.debug
            self._print(f"debug = {'true' if self.debug else 'false'}")
        elif line == ":help":
            self._print("\n".join(COMMANDS))
        elif line == ":funcs":
            self._print("\n".join(FunctionMap.signatures()))
        else:
            self.evaluate_line(line)
        return True

    def run(self) -> None:
        """Read and handle lines until :exit or end of input."""
        self._print(f"cli-calc version {__version__}\ntype :help for commands")
        prompt = f"[{self.settings.prompt_color}]{escape(self.settings.prompt)}[/]"
        while True:
            try:
                line = self.console.input(prompt)
            except (EOFError, KeyboardInterrupt):
                self._print("")
                break
            if not self.handle_line(line):
                break


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="cli-calc", description="Interactive expression calculator")
    parser.add_argument("--debug", action="store_true", help="print the parsed AST before each result")
    parser.add_argument("--expr", help="evaluate one expression and exit")
    args = parser.parse_args(argv)

    try:
        settings = Settings()
    except ValidationError as e:
        parser.error(f"invalid CLI_CALC_* setting: {e}")
    if args.debug:
        settings.debug = True
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    shell = CalcShell(settings=settings)
    if args.expr is not None:
        return 0 if shell.evaluate_line(args.expr) else 1

    shell.run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
