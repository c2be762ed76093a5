from ezscheme.reader.lexer import Token, tokenize
from ezscheme.reader.parser import Parser, parse, parse_one

__all__ = ["Token", "tokenize", "Parser", "parse", "parse_one"]
