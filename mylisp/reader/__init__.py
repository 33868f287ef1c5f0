from mylisp.reader.ast import AstNode
from mylisp.reader.parser import lex, parse, TokenStream
from mylisp.reader.read import read, read_number

__all__ = ["AstNode", "lex", "parse", "TokenStream", "read", "read_number"]
