"""
关键字到终结符类型的映射
"""

from java_checkstyle.lexical.token_kind import TokenKind

__all__ = [
    "KEYWORD_HASH"
]

# 关键字、布尔字面值、空值字面值及下划线到终结符类型的映射（sealed、non-sealed 等上下文关键字不在其中，由语法解析器识别）
KEYWORD_HASH = {
    "abstract": TokenKind.ABSTRACT,
    "assert": TokenKind.ASSERT,
    "boolean": TokenKind.BOOLEAN,
    "break": TokenKind.BREAK,
    "byte": TokenKind.BYTE,
    "case": TokenKind.CASE,
    "catch": TokenKind.CATCH,
    "char": TokenKind.CHAR,
    "class": TokenKind.CLASS,
    "const": TokenKind.CONST,
    "continue": TokenKind.CONTINUE,
    "default": TokenKind.DEFAULT,
    "do": TokenKind.DO,
    "double": TokenKind.DOUBLE,
    "else": TokenKind.ELSE,
    "enum": TokenKind.ENUM,
    "extends": TokenKind.EXTENDS,
    "final": TokenKind.FINAL,
    "finally": TokenKind.FINALLY,
    "float": TokenKind.FLOAT,
    "for": TokenKind.FOR,
    "goto": TokenKind.GOTO,
    "if": TokenKind.IF,
    "implements": TokenKind.IMPLEMENTS,
    "import": TokenKind.IMPORT,
    "instanceof": TokenKind.INSTANCEOF,
    "int": TokenKind.INT,
    "interface": TokenKind.INTERFACE,
    "long": TokenKind.LONG,
    "native": TokenKind.NATIVE,
    "new": TokenKind.NEW,
    "package": TokenKind.PACKAGE,
    "private": TokenKind.PRIVATE,
    "protected": TokenKind.PROTECTED,
    "public": TokenKind.PUBLIC,
    "return": TokenKind.RETURN,
    "short": TokenKind.SHORT,
    "static": TokenKind.STATIC,
    "strictfp": TokenKind.STRICTFP,
    "super": TokenKind.SUPER,
    "switch": TokenKind.SWITCH,
    "synchronized": TokenKind.SYNCHRONIZED,
    "this": TokenKind.THIS,
    "throw": TokenKind.THROW,
    "throws": TokenKind.THROWS,
    "transient": TokenKind.TRANSIENT,
    "try": TokenKind.TRY,
    "void": TokenKind.VOID,
    "volatile": TokenKind.VOLATILE,
    "while": TokenKind.WHILE,
    "true": TokenKind.TRUE,
    "false": TokenKind.FALSE,
    "null": TokenKind.NULL,
    "_": TokenKind.UNDERSCORE,
}
