"""
词法解析器的有限状态自动机的状态枚举类
"""

import enum

__all__ = [
    "LexicalState"
]


class LexicalState(enum.IntEnum):
    """词法解析器的有限状态自动机的状态枚举类"""

    INIT = enum.auto()  # 当前没有正在解析的词语
    IDENT = enum.auto()  # 当前词语为不是特殊词语

    # -------------------- 数值字面值 --------------------
    NUMBER = enum.auto()  # 数值字面值（包括整数、长整数、浮点数以及十六进制、八进制、二进制）
    NUMBER_EXP = enum.auto()  # 数值字面值中的指数符号之后（[eEpP]，之后可能为正负号）

    # -------------------- 字符字面值 --------------------
    IN_SINGLE_QUOTE = enum.auto()  # 在单引号字符串中
    IN_SINGLE_QUOTE_ESCAPE = enum.auto()  # 在单引号字符串中的转义符之后

    # -------------------- 字符串字面值 --------------------
    DOUBLE_QUOTE = enum.auto()  # "（可能为字符串或文本块的开始）
    DOUBLE_QUOTE_2 = enum.auto()  # ""（空字符串或文本块的前缀）
    IN_DOUBLE_QUOTE = enum.auto()  # 在双引号字符串中
    IN_DOUBLE_QUOTE_ESCAPE = enum.auto()  # 在双引号字符串中的转义符之后

    # -------------------- 文本块 --------------------
    IN_TEXT_BLOCK = enum.auto()  # 在文本块中
    IN_TEXT_BLOCK_ESCAPE = enum.auto()  # 在文本块中的转义符之后
    TEXT_BLOCK_QUOTE = enum.auto()  # 在文本块中的 " 之后
    TEXT_BLOCK_QUOTE_2 = enum.auto()  # 在文本块中的 "" 之后

    # -------------------- 多字符运算符 --------------------
    CHAR_EQUAL = enum.auto()  # =
    CHAR_COLON = enum.auto()  # :
    CHAR_EXCLAMATION = enum.auto()  # !
    CHAR_LESS = enum.auto()  # <
    CHAR_LESS_LESS = enum.auto()  # <<
    CHAR_MORE = enum.auto()  # >
    CHAR_MORE_MORE = enum.auto()  # >>
    CHAR_MORE_MORE_MORE = enum.auto()  # >>>
    CHAR_AND = enum.auto()  # &
    CHAR_OR = enum.auto()  # |
    CHAR_CARET = enum.auto()  # ^
    CHAR_ADD = enum.auto()  # +
    CHAR_SUB = enum.auto()  # -
    CHAR_MULT = enum.auto()  # *
    CHAR_DIV = enum.auto()  # /
    CHAR_MOD = enum.auto()  # %

    # -------------------- 注释 --------------------
    IN_LINE_COMMENT = enum.auto()  # 在单行注释中
    IN_MULTI_COMMENT = enum.auto()  # 在多行注释中
    IN_MULTI_COMMENT_STAR = enum.auto()  # 在多行注释中的 * 之后

    # -------------------- 特殊场景 --------------------
    DOT = enum.auto()  # .（后面是否为数字为两种情况）
    DOT_DOT = enum.auto()  # ..
