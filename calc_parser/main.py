"""
Interactive front end for the expression parser.

Reads one line at a time through a prompt_toolkit session with file-backed
history, tokenizes it and prints the token list. With tree display enabled the
tokens are also parsed and the expression tree is drawn below them.

Special lines:
  quit / exit   end the session (exact match)
  Ctrl-C        ignored, prompt again
  Ctrl-D        end the session
"""

import argparse
import logging
import sys
from typing import Any, List, Optional, Tuple

from prompt_toolkit import PromptSession
from prompt_toolkit.history import FileHistory
from pydantic import ValidationError

from .config import LOG_LEVELS, Settings
from .errors import CalculatorError
from .lexer import tokenize
from .parser import parse
from .render import render

logger = logging.getLogger(__name__)

EXIT_COMMANDS = ("quit", "exit")


class REPL:
    """Read-Parse-Print Loop for the calculator."""

    def __init__(self, settings: Optional[Settings] = None, session: Optional[Any] = None):
        self.settings = settings if settings is not None else Settings()
        # Created on first use so tests can inject a scripted session.
        self._session = session

    @property
    def session(self) -> Any:
        if self._session is None:
            self._session = PromptSession(history=FileHistory(self.settings.history_file))
        return self._session

    def evaluate_line(self, line: str) -> Tuple[bool, str]:
        """Process a single input line. Returns (ok, output)."""
        try:
            tokens = tokenize(line)
        except CalculatorError as e:
            logger.info(f"Lex error for {line!r}: {e}")
            return False, f"Error: {e}"

        out = repr(tokens)
        if not self.settings.show_tree:
            return True, out

        try:
            tree = render(parse(tokens)).rstrip("\n")
        except CalculatorError as e:
            logger.info(f"Parse error for {line!r}: {e}")
            return False, f"{out}\nError: {e}"
        return True, f"{out}\n{tree}"

    def repl_loop(self) -> None:
        """Prompt until quit/exit, Ctrl-D or an input error."""
        logger.info("Calculator REPL starting")
        while True:
            try:
                line = self.session.prompt(self.settings.prompt)
            except KeyboardInterrupt:
                print("CTRL-C")
                continue
            except EOFError:
                print("CTRL-D")
                break
            except Exception as e:
                logger.error(f"Input error: {e!r}")
                print(f"Error: {e!r}")
                break

            if line in EXIT_COMMANDS:
                break
            _, out = self.evaluate_line(line)
            print(out)
        logger.info("Calculator REPL shutting down")


# --------------------------
# Entry point
# --------------------------

def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="calc-parser",
        description="Tokenize and parse arithmetic expressions interactively.",
    )
    parser.add_argument(
        "--prompt",
        type=str,
        help="Prompt string (default: '>> ', env CALC_PROMPT).",
    )
    parser.add_argument(
        "--history-file",
        type=str,
        help="File used to persist line history (env CALC_HISTORY_FILE).",
    )
    parser.add_argument(
        "--tree",
        action="store_true",
        default=None,
        help="Also parse each line and draw its expression tree (env CALC_SHOW_TREE).",
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        help="Logging level (default: WARNING, env CALC_LOG_LEVEL).",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_arg_parser()
    args = parser.parse_args(argv)
    try:
        settings = Settings.from_env(overrides={
            "prompt": args.prompt,
            "history_file": args.history_file,
            "show_tree": args.tree,
            "log_level": args.log_level,
        })
    except ValidationError as e:
        parser.error(str(e))

    logging.basicConfig(
        level=settings.log_level_value,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    REPL(settings).repl_loop()
    return 0


if __name__ == '__main__':
    sys.exit(main())
