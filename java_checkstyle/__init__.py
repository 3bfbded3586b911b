"""
Java 源代码风格检查
"""

from typing import Optional

from java_checkstyle import ast
from java_checkstyle.api import Check, LocalizedMessage, MessageCollector, SeverityLevel
from java_checkstyle.checker import Checker, CheckstyleConfigError, format_message
from java_checkstyle.checks import CHECK_REGISTRY, JLS_ORDER, ModifierOrderCheck, check_order_suggested_by_jls
from java_checkstyle.grammar import JavaParser, JavaSyntaxError
from java_checkstyle.lexical import JavaLexicalError, LexicalFSM, Token, TokenKind


def parse_compilation_unit(code: str, file_name: Optional[str] = None) -> ast.CompilationUnitTree:
    """解析 Java 源代码，返回只包含修饰符子句的编译单元"""
    return JavaParser(LexicalFSM(code), file_name=file_name).parse_compilation_unit()
