"""
  MyLisp lexer and parser

Builds the parse tree of the grammar

    number : /-?[0-9]+/ ;
    symbol : /[a-zA-Z0-9_+\\-*\\/\\\\=<>!%^&]+/ ;
    sexpr  : '(' <expr>* ')' ;
    qexpr  : '{' <expr>* '}' ;
    expr   : <number> | <symbol> | <sexpr> | <qexpr> ;
    mylisp : /^/ <expr>* /$/ ;

Alternatives are tried in order, number before symbol, so a token such as
`-5abc` splits into the number -5 and the symbol abc.

The tree keeps every token, delimiters included, so that the reader decides
what carries a value. Nothing here knows about runtime values.
"""

from __future__ import annotations

import re
from typing import Iterator, Optional

from mylisp import config
from mylisp.errors import MyLispSyntaxError
from mylisp.reader import ast
from mylisp.reader.ast import AstNode

TOKEN_RE = re.compile(
    r"(?P<comment>;[^\n]*)"  # single-line comment
    r"|(?P<lparen>\()"  # (
    r"|(?P<rparen>\))"  # )
    r"|(?P<lbrace>\{)"  # {
    r"|(?P<rbrace>\})"  # }
    r"|(?P<number>-?[0-9]+)"  # tried before symbol, so "1a" is 1 then a
    r"|(?P<symbol>[a-zA-Z0-9_+\-*/\\=<>!%^&]+)"
)

Token = tuple[str, str, int]

_CLOSERS = {"lparen": "rparen", "lbrace": "rbrace"}
_CONTAINER_TAGS = {"lparen": ast.SEXPR, "lbrace": ast.QEXPR}


def lex(source: str) -> Iterator[Token]:
    """Token generator: yields (token_type, token_value, position) tuples."""
    pos = 0
    n = len(source)
    while pos < n:
        if source[pos].isspace():
            pos += 1
            continue
        m = TOKEN_RE.match(source, pos)
        if not m:
            raise MyLispSyntaxError(f"unexpected character {source[pos]!r}", pos)
        kind = m.lastgroup
        if kind != "comment":
            yield kind, m.group(), pos
        pos = m.end()


class TokenStream:
    def __init__(self, tokens: Iterator[Token], max_depth: Optional[int] = None):
        self.tokens = iter(tokens)
        self.buffer: list[Token] = []
        self.max_depth = max_depth if max_depth is not None else config.get_max_depth()
        self.end = 0

    def peek(self) -> Optional[Token]:
        if not self.buffer:
            try:
                self.buffer.append(next(self.tokens))
            except StopIteration:
                return None
        return self.buffer[0]

    def advance(self) -> Token:
        tok = self.peek()
        if tok is None:
            raise MyLispSyntaxError("unexpected end of input", self.end)
        self.buffer.pop(0)
        self.end = tok[2] + len(tok[1])
        return tok

    def parse_expr(self, depth: int = 0) -> AstNode:
        tok_type, tok_val, pos = self.advance()

        if tok_type in (ast.NUMBER, ast.SYMBOL):
            return AstNode(tok_type, tok_val, position=pos)

        if tok_type in _CLOSERS:
            if depth >= self.max_depth:
                raise MyLispSyntaxError("expressions nested too deeply", pos)
            node = AstNode(_CONTAINER_TAGS[tok_type], position=pos)
            node.children.append(AstNode(ast.CHAR, tok_val, position=pos))
            closer = _CLOSERS[tok_type]
            while True:
                nxt = self.peek()
                if nxt is None:
                    raise MyLispSyntaxError(f"unmatched {tok_val!r}", pos)
                if nxt[0] == closer:
                    _, close_val, close_pos = self.advance()
                    node.children.append(AstNode(ast.CHAR, close_val, position=close_pos))
                    return node
                node.children.append(self.parse_expr(depth + 1))

        raise MyLispSyntaxError(f"unexpected {tok_val!r}", pos)

    def parse_all(self) -> AstNode:
        """Parse every remaining token into a single root node."""
        root = AstNode(ast.ROOT)
        root.children.append(AstNode(ast.REGEX))
        while self.peek() is not None:
            root.children.append(self.parse_expr(1))
        root.children.append(AstNode(ast.REGEX, position=self.end))
        return root


def parse(source: str, max_depth: Optional[int] = None) -> AstNode:
    """Parse a complete line of source into its root node."""
    return TokenStream(lex(source), max_depth).parse_all()
