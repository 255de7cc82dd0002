from genkeys.parser.core import BIND, Parser, parse

__all__ = ["BIND", "Parser", "parse"]
