"""
检查规则的抽象基类
"""

import abc
import threading
from typing import List, Optional

from java_checkstyle import ast
from java_checkstyle.api.localized_message import LocalizedMessage, MessageCollector, SeverityLevel

__all__ = [
    "Check"
]


class Check(abc.ABC):
    """检查规则的抽象基类

    遍历器在遍历抽象语法树时，只会将 default_tokens 中声明的节点类型分发给检查规则：
    - begin_tree：开始遍历一个编译单元
    - visit_tree：进入一个节点
    - leave_tree：离开一个节点（其子节点均已遍历）
    - finish_tree：结束遍历一个编译单元

    检查规则通过 log 报告消息，消息被写入遍历器绑定的消息收集器。消息收集器按线程绑定，同一个检查规则可以被多个线程同时使用。
    """

    def __init__(self, severity: SeverityLevel = SeverityLevel.ERROR):
        self.severity = severity
        self._local = threading.local()  # 每个线程各自绑定消息收集器

    @property
    def name(self) -> str:
        """检查规则名称：类名去掉 Check 后缀"""
        name = self.__class__.__name__
        if name.endswith("Check"):
            return name[:-len("Check")]
        return name

    @abc.abstractmethod
    def default_tokens(self) -> List[ast.TreeKind]:
        """需要分发给当前检查规则的节点类型"""

    def set_collector(self, collector: MessageCollector) -> None:
        self._local.collector = collector

    def begin_tree(self, root: ast.CompilationUnitTree) -> None:
        pass

    def visit_tree(self, tree: ast.Tree) -> None:
        pass

    def leave_tree(self, tree: ast.Tree) -> None:
        pass

    def finish_tree(self, root: ast.CompilationUnitTree) -> None:
        pass

    def log(self, line: int, column: int, key: str, *args: str) -> None:
        """报告一条消息"""
        collector: Optional[MessageCollector] = getattr(self._local, "collector", None)
        if collector is None:
            raise RuntimeError(f"检查规则 {self.name} 没有绑定消息收集器")
        collector.add(LocalizedMessage(
            file_name=collector.file_name,
            line=line,
            column=column,
            key=key,
            args=tuple(args),
            check_name=self.name,
            severity=self.severity
        ))
