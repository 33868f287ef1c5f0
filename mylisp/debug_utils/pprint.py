"""Debug dump of parse trees, one node per line, children indented."""

from __future__ import annotations

import sys
from io import StringIO
from typing import Optional, TextIO

from mylisp.reader.ast import AstNode

# ----------------- ANSI colors -----------------
RESET = "\033[0m"
COLOR_TAG = "\033[94m"
COLOR_CONTENTS = "\033[92m"

# ----------------- Defaults -----------------
DEFAULT_OPTIONS = {
    "indent": 2,
    "show_positions": True,
    "color": False,
}


def _write_node(buffer: StringIO, node: AstNode, level: int, options: dict) -> None:
    color = options.get("color", False)
    buffer.write(" " * (level * options.get("indent", 2)))
    tag = f"{COLOR_TAG}{node.tag}{RESET}" if color else node.tag
    buffer.write(tag)
    if options.get("show_positions", True) and node.tag != "root":
        buffer.write(f":{node.position}")
    if node.contents:
        contents = f"'{node.contents}'"
        buffer.write(" ")
        buffer.write(f"{COLOR_CONTENTS}{contents}{RESET}" if color else contents)
    buffer.write("\n")
    for child in node.children:
        _write_node(buffer, child, level + 1, options)


def format_ast(node: AstNode, options: Optional[dict] = None) -> str:
    opts = {**DEFAULT_OPTIONS, **(options or {})}
    with StringIO() as buffer:
        _write_node(buffer, node, 0, opts)
        return buffer.getvalue()


def print_ast(node: AstNode, file: Optional[TextIO] = None, options: Optional[dict] = None) -> None:
    (file or sys.stdout).write(format_ast(node, options))
