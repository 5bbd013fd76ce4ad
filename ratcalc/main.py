# Command-line front end for the rational calculator: an interactive REPL with persisted history and
# completion, a few colon commands, and a one-shot mode for scripts.
#
# Expressions are evaluated by ratcalc.calculator.Calculator; this module only handles input, output
# and configuration.

from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional, Tuple

from prompt_toolkit import PromptSession
from prompt_toolkit.completion import WordCompleter
from prompt_toolkit.history import FileHistory

from ratcalc.calculator import Calculator
from ratcalc.config import Settings, load_settings
from ratcalc.errors import CalculatorError
from ratcalc.numeric import format_rational, rational_to_float, rational_to_int
from ratcalc.symbols import GlobalSymbolTable, default_symbol_table

logger = logging.getLogger(__name__)

# --------------------------
# History
# --------------------------

class DedupFileHistory(FileHistory):
    """FileHistory that does not store a line identical to the previous one."""

    def __init__(self, filename: str):
        super().__init__(filename)
        self._last_input: Optional[str] = None

    def append_string(self, string: str) -> None:
        if string == self._last_input:
            return
        self._last_input = string
        super().append_string(string)

# --------------------------
# Help
# --------------------------

_HELP_TOPICS = {
    'general': (
        "Rational calculator help:\n"
        "Evaluates infix arithmetic exactly and prints the result as numerator/denominator.\n"
        "Examples:\n"
        "  1+2*3        ==> 7/1\n"
        "  1/3 + 1/6    ==> 1/2\n"
        "  2**3**2      ==> 64/1 (left-assoc)\n"
        "  fact(5) + 1  ==> 121/1\n"
        "Commands:\n"
        "  :help, help [topic]    show help (topics: operators, functions)\n"
        "  :symbols               list symbols and their arity\n"
        "  :int <expr>            evaluate and truncate to an integer\n"
        "  :float <expr>          evaluate and convert to a float\n"
        "  :history               show recent history\n"
        "  :exit, :quit, quit     exit\n"
    ),
    'operators': (
        "Operators and precedence (high -> low):\n"
        "  **            exponentiation, computed in floating point\n"
        "  * /           exact\n"
        "  + -           exact\n"
        "  < >           comparison, result is 1/1 or 0/1\n"
        "Notes:\n"
        "  - All operators are left-associative, including '**' (2**3**2 == (2**3)**2).\n"
        "  - There is no unary minus; write 0-3 instead of -3.\n"
    ),
    'functions': (
        "Functions are looked up in the symbol table and called with float arguments.\n"
        "Use :symbols to list them. Example: max(1, 2/3)\n"
    ),
}


def show_help(topic: Optional[str] = None) -> str:
    """Return help text for topic or general if None."""
    if not topic:
        return _HELP_TOPICS['general']
    return _HELP_TOPICS.get(topic.lower(), f"No help available for topic '{topic}'")

# --------------------------
# REPL
# --------------------------

class REPL:
    """Read-Eval-Print Loop for the calculator."""

    def __init__(self, settings: Optional[Settings] = None, symbols: Optional[GlobalSymbolTable] = None):
        self.settings = settings or Settings()
        self.symbols = symbols if symbols is not None else default_symbol_table()
        self.calculator = Calculator(self.symbols, float_digits=self.settings.float_digits)
        self.history = DedupFileHistory(self.settings.history_file)

    def _process_command(self, line: str) -> Optional[str]:
        """Return the response for a command line, or None if `line` is an expression."""
        s = line.strip()
        if not s:
            return None
        if s.lower() == 'quit':
            raise EOFError()
        if s.startswith(':'):
            body = s[1:].lstrip()
            if body == '':
                return "No command specified. Use :help for available commands."
            parts = body.split(None, 1)
            cmd = parts[0]
            rest = parts[1] if len(parts) > 1 else ''
            return self._run_command(cmd, rest)
        if s.lower() == 'help' or s.lower().startswith('help '):
            parts = s.split(None, 1)
            return show_help(parts[1].strip() if len(parts) > 1 else None)
        return None

    def _run_command(self, cmd: str, rest: str) -> str:
        """Execute a colon command. Raises EOFError for exit/quit."""
        cmd_lower = cmd.lower()
        if cmd_lower in {'exit', 'quit'}:
            raise EOFError()
        if cmd_lower == 'help':
            return show_help(rest.strip() or None)
        if cmd_lower == 'symbols':
            lines = []
            for name in self.symbols.names():
                handle = self.symbols.lookup(name)
                if self.symbols.is_callable(handle):
                    lines.append(f"{name}/{self.symbols.required_argument_count(handle)}")
                else:
                    lines.append(f"{name} = {handle!r}")
            return "\n".join(lines) if lines else "(no symbols)"
        if cmd_lower in {'int', 'float'}:
            if not rest.strip():
                return f"Usage: :{cmd_lower} <expression>"
            try:
                value = self.calculator.evaluate(rest)
                if cmd_lower == 'int':
                    return str(rational_to_int(value, self.settings.integer_bits))
                return repr(rational_to_float(value, self.settings.float_digits))
            except CalculatorError as e:
                return f"Error: {e}"
        if cmd_lower == 'history':
            try:
                entries = list(self.history.load_history_strings())[:50]
            except OSError as e:
                return f"Could not read history: {e}"
            return "\n".join(reversed(entries))
        return f"Unknown command: {cmd}"

    def evaluate_line(self, line: str) -> Tuple[bool, str]:
        """Evaluate a single line (either command or expression). Returns (ok, output)."""
        cmd_out = self._process_command(line)
        if cmd_out is not None:
            return True, cmd_out
        try:
            result = self.calculator.evaluate(line)
            return True, f"==> {format_rational(result)}"
        except CalculatorError as e:
            logger.debug(f"Evaluation of {line!r} failed: {e!r}")
            return False, f"Error: {e}"
        except Exception as e:
            logger.error(f"Unhandled error for {line!r}: {e!r}")
            return False, f"Unhandled error: {e}"

    def repl_loop(self) -> None:
        """Interactive loop with persisted history and symbol completion."""
        print("Rational calculator. Type :help for help. Ctrl-D or quit to exit.")
        session = PromptSession(history=self.history)
        completer = WordCompleter(self.symbols.names())
        while True:
            try:
                line = session.prompt(self.settings.prompt, completer=completer)
            except KeyboardInterrupt:
                print("^C")
                continue
            except EOFError:
                print("Exiting.")
                break
            if not line.strip():
                continue
            try:
                ok, out = self.evaluate_line(line)
            except EOFError:
                print("Exiting.")
                break
            print(out)

# --------------------------
# Entry point
# --------------------------

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Evaluate arithmetic expressions over exact rationals.")
    parser.add_argument(
        "-e", "--expression",
        type=str,
        help="Evaluate a single expression, print the result and exit.",
    )
    parser.add_argument(
        "--history-file",
        type=str,
        help="Path of the REPL history file (default: ~/.ratcalc_history).",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        help="Logging level (default: WARNING).",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    try:
        settings = load_settings(history_file=args.history_file, log_level=args.log_level)
    except CalculatorError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    repl = REPL(settings)
    if args.expression is not None:
        try:
            ok, out = repl.evaluate_line(args.expression)
        except EOFError:
            return 0
        print(out)
        return 0 if ok else 1
    repl.repl_loop()
    return 0


if __name__ == '__main__':
    sys.exit(main())
