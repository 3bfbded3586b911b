"""
抽象语法树的抽象节点
"""

import abc
import dataclasses
from typing import List, Optional

from java_checkstyle.ast.kind import TreeKind

__all__ = [
    "Tree"
]


@dataclasses.dataclass(slots=True)
class Tree(abc.ABC):
    """抽象语法树节点的抽象基类"""

    kind: TreeKind = dataclasses.field(kw_only=True)  # 节点类型
    source: Optional[str] = dataclasses.field(kw_only=True)  # 原始代码
    start_pos: Optional[int] = dataclasses.field(kw_only=True)  # 开始位置（包含）
    end_pos: Optional[int] = dataclasses.field(kw_only=True)  # 结束位置（不包含）

    def children(self) -> List["Tree"]:
        """按源代码中的顺序返回子节点"""
        return []

    @abc.abstractmethod
    def generate(self) -> str:
        """生成当前节点元素的标准格式代码"""
