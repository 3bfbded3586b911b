"""
语法解析中使用的终结符集合
"""

from java_checkstyle.lexical import TokenKind

__all__ = [
    "MODIFIER_TOKENS",
    "ALLOWED_AFTER_SEALED",
]

# 作为修饰符的关键字（sealed、non-sealed 是上下文关键字，在词法解析中为标识符）
MODIFIER_TOKENS = frozenset({
    TokenKind.PUBLIC, TokenKind.PROTECTED, TokenKind.PRIVATE, TokenKind.ABSTRACT, TokenKind.DEFAULT,
    TokenKind.STATIC, TokenKind.FINAL, TokenKind.TRANSIENT, TokenKind.VOLATILE, TokenKind.SYNCHRONIZED,
    TokenKind.NATIVE, TokenKind.STRICTFP
})

# sealed 或 non-sealed 之后允许出现的终结符
ALLOWED_AFTER_SEALED = frozenset({
    TokenKind.PUBLIC, TokenKind.PROTECTED, TokenKind.PRIVATE, TokenKind.ABSTRACT, TokenKind.STATIC,
    TokenKind.FINAL, TokenKind.STRICTFP, TokenKind.CLASS, TokenKind.INTERFACE, TokenKind.ENUM
})
