"""
词法解析
"""

from java_checkstyle.lexical.lexer import Affiliation, AffiliationStyle, JavaLexicalError, LexicalFSM, Token
from java_checkstyle.lexical.state import LexicalState
from java_checkstyle.lexical.token_kind import TokenKind
