"""
抽象语法树节点类型的枚举类
"""

import enum

__all__ = [
    "TreeKind"
]


class TreeKind(enum.IntEnum):
    """抽象语法树节点类型的枚举类

    节点类型是封闭的：遍历器只按照节点类型分发，每个检查规则通过 default_tokens 声明自己关心的节点类型。
    """

    COMPILATION_UNIT = enum.auto()  # 编译单元（一个 Java 文件）
    MODIFIERS = enum.auto()  # 声明语句的修饰符子句（包括注解）
    MODIFIER = enum.auto()  # 修饰符子句中的一个修饰符
    ANNOTATION = enum.auto()  # 修饰符子句中的一个注解
