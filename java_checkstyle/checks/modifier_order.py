"""
检查修饰符顺序是否符合 Java 语言规范建议的顺序

https://docs.oracle.com/javase/specs/jls/se22/html/jls-8.html#jls-8.1.1
https://docs.oracle.com/javase/specs/jls/se22/html/jls-8.html#jls-8.3.1
https://docs.oracle.com/javase/specs/jls/se22/html/jls-8.html#jls-8.4.3
"""

from typing import List, Optional, Sequence

from java_checkstyle import ast
from java_checkstyle.api import Check
from java_checkstyle.common import LOGGER

__all__ = [
    "JLS_ORDER",
    "check_order_suggested_by_jls",
    "ModifierOrderCheck",
]

# Java 语言规范 8.1.1、8.3.1 和 8.4.3 节建议的修饰符顺序
JLS_ORDER = (
    "public", "protected", "private", "abstract", "static", "final",
    "transient", "volatile", "synchronized", "native", "strictfp",
)


def check_order_suggested_by_jls(modifiers: Sequence[ast.ModifierTree]) -> Optional[ast.ModifierTree]:
    """检查修饰符是否按照 Java 语言规范建议的顺序排列

    游标 i 只会在 JLS_ORDER 中向后移动：每个修饰符从游标位置开始向后查找，找到后游标停在匹配位置之后，因此重复的修饰符、顺序
    颠倒的修饰符以及不在 JLS_ORDER 中的修饰符（如 default、sealed）都无法匹配。只返回第一个无法匹配的修饰符。

    已匹配的关键字会被消耗：如果游标停留在匹配位置，public public 会被判定为合法；游标后移一位后，第二个 public 会被报告。

    Parameters
    ----------
    modifiers : Sequence[ast.ModifierTree]
        按源代码顺序排列的修饰符

    Returns
    -------
    Optional[ast.ModifierTree]
        如果顺序正确则返回 None，否则返回第一个顺序错误的修饰符

    Examples
    --------
    >>> check_order_suggested_by_jls([ast.ModifierTree.mock("public"), ast.ModifierTree.mock("static")]) is None
    True
    >>> check_order_suggested_by_jls([ast.ModifierTree.mock("static"), ast.ModifierTree.mock("public")]).text
    'public'
    """
    i = 0
    for modifier in modifiers:
        while i < len(JLS_ORDER) and JLS_ORDER[i] != modifier.text:
            i += 1
        if i == len(JLS_ORDER):
            return modifier
        i += 1  # 已匹配的修饰符不能再次匹配
    return None


class ModifierOrderCheck(Check):
    """检查修饰符的顺序是否符合 Java 语言规范 8.1.1、8.3.1 和 8.4.3 节的建议

    建议的顺序为：public protected private abstract static final transient volatile synchronized native strictfp

    注解不参与顺序检查。每个修饰符子句最多报告一条消息。
    """

    def default_tokens(self) -> List[ast.TreeKind]:
        return [ast.TreeKind.MODIFIERS]

    def visit_tree(self, tree: ast.Tree) -> None:
        modifiers = [child for child in tree.children() if child.kind == ast.TreeKind.MODIFIER]
        if len(modifiers) == 0:
            return

        error = check_order_suggested_by_jls(modifiers)
        if error is not None:
            LOGGER.debug(f"修饰符顺序错误: {error.text}, line={error.line}, column={error.column}")
            self.log(error.line, error.column, "mod.order", error.text)
