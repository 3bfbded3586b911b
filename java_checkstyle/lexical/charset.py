"""
词法解析器使用的字符集合
"""

__all__ = [
    "DEFAULT",
    "END_CHAR",
    "WHITESPACE",
    "END_WORD",
    "NUMBER",
    "NUMBER_PART",
]

# 默认行为的占位符：当行为映射表中没有当前字符时使用
DEFAULT = object()

# 结束符：当指针到达字符串末尾时，_char 返回该值（长度大于 1，因此不会与任何真实字符冲突）
END_CHAR = "<EOF>"

# 空白字符
WHITESPACE = frozenset({" ", "\t", "\f", "\r", "\n"})

# 标识符之后可能出现的非运算符字符
END_WORD = frozenset(WHITESPACE | {"(", ")", "{", "}", "[", "]", ";", ",", ".", "@", ":", "'", "\""})

# 十进制数字
NUMBER = frozenset({"0", "1", "2", "3", "4", "5", "6", "7", "8", "9"})

# 数值字面值中可以出现的字符（不包括小数点和指数符号）
NUMBER_PART = frozenset(NUMBER | {"_", "x", "X", "a", "A", "b", "B", "c", "C", "d", "D", "f", "F", "l", "L"})
