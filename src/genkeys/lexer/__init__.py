from genkeys.lexer.lexer import Lexer, lex
from genkeys.lexer.tokens import STRING, WORD, Token, TokenLocation

__all__ = ["Lexer", "lex", "Token", "TokenLocation", "STRING", "WORD"]
