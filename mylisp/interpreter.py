from __future__ import annotations

import logging
import sys
from typing import Optional, TextIO

from mylisp import LispValue, __version__, config
from mylisp.builtin.env_builtin import register
from mylisp.debug_utils.pprint import print_ast
from mylisp.errors import MyLispSyntaxError
from mylisp.evaluation.evaluator import evaluate
from mylisp.reader.ast import AstNode
from mylisp.reader.parser import parse
from mylisp.reader.read import read
from mylisp.types.environment import Environment

logger = logging.getLogger(__name__)

BANNER = f"MyLisp Version {__version__}\nPress Ctrl+c to Exit\n"


class Interpreter:
    """
    A line-oriented interpreter for MyLisp expressions.
    Owns the session's single environment, populated with the builtins.
    """
    def __init__(self, max_depth: Optional[int] = None, show_ast: Optional[bool] = None):
        self.env = Environment(max_depth)
        register(self.env)
        self.show_ast = show_ast if show_ast is not None else config.get_show_ast()

    def parse(self, code: str) -> AstNode:
        return parse(code, self.env.max_depth)

    def eval(self, code: str) -> LispValue:
        """Parse, read and evaluate one line of code.

        Language errors come back as Error values; only text that does not
        parse raises (MyLispSyntaxError).
        """
        tree = self.parse(code)
        return evaluate(self.env, read(tree))

    def repl(self, stdin: Optional[TextIO] = None, stdout: Optional[TextIO] = None,
             prompt: Optional[str] = None) -> None:
        """Read lines until EOF, printing each result or parse error."""
        stdin = stdin or sys.stdin
        stdout = stdout or sys.stdout
        prompt = config.get_prompt() if prompt is None else prompt

        stdout.write(BANNER + "\n")
        while True:
            stdout.write(prompt)
            stdout.flush()
            try:
                line = stdin.readline()
            except KeyboardInterrupt:
                stdout.write("\n")
                break
            if not line:
                stdout.write("\n")
                break
            line = line.rstrip("\n")
            logger.debug("input: %r", line)

            try:
                tree = self.parse(line)
            except MyLispSyntaxError as e:
                stdout.write(f"<stdin>:1:{e.position + 1}: error: {e}\n")
                continue
            if self.show_ast:
                print_ast(tree, stdout)
            result = evaluate(self.env, read(tree))
            stdout.write(f"{result}\n")


def main() -> int:
    logging.basicConfig(level=config.get_log_level())
    Interpreter().repl()
    return 0


if __name__ == "__main__":
    sys.exit(main())
