"""
检查器：解析 Java 源代码，遍历抽象语法树并将节点分发给检查规则
"""

import os
from typing import Dict, Iterable, List, Optional, Tuple

from java_checkstyle import ast
from java_checkstyle.api import Check, LocalizedMessage, MessageCollector, SeverityLevel
from java_checkstyle.checks import CHECK_REGISTRY
from java_checkstyle.common import LOGGER
from java_checkstyle.grammar import JavaParser, JavaSyntaxError
from java_checkstyle.lexical import JavaLexicalError, LexicalFSM

__all__ = [
    "CheckstyleConfigError",
    "Checker",
    "format_message",
]


class CheckstyleConfigError(Exception):
    """检查器配置错误"""


def format_message(message: LocalizedMessage) -> str:
    """将消息格式化为 {文件名}:{行号}:{列号}: {消息文本} 的形式

    Examples
    --------
    >>> format_message(LocalizedMessage(file_name="A.java", line=2, column=13, key="mod.order", args=("public",),
    ...                                 check_name="ModifierOrder"))
    "A.java:2:13: 'public' modifier out of order with the JLS suggestions."
    """
    return f"{message.file_name}:{message.line}:{message.column}: {message.get_message()}"


class Checker:
    """检查器

    在初始化时，根据每个检查规则的 default_tokens 构造节点类型到检查规则列表的分发表；遍历时每个节点只会被分发给声明了其节点类型的
    检查规则。检查器对每个文件使用新的消息收集器，文件之间不共享状态。
    消息收集器按线程绑定到检查规则上，同一个检查器可以被多个线程同时使用。
    """

    def __init__(self, checks: Iterable[Check], extensions: Tuple[str, ...] = (".java",)):
        self._checks: List[Check] = list(checks)
        self._extensions = extensions
        self._dispatch: Dict[ast.TreeKind, List[Check]] = {}
        for check in self._checks:
            for kind in check.default_tokens():
                self._dispatch.setdefault(kind, []).append(check)

    @staticmethod
    def from_config(module_names: Iterable[str],
                    severity: SeverityLevel = SeverityLevel.ERROR,
                    extensions: Tuple[str, ...] = (".java",)) -> "Checker":
        """根据检查规则名称构造检查器

        Examples
        --------
        >>> [check.name for check in Checker.from_config(["ModifierOrder"]).checks]
        ['ModifierOrder']
        """
        checks = []
        for module_name in module_names:
            check_class = CHECK_REGISTRY.get(module_name)
            if check_class is None:
                raise CheckstyleConfigError(f"未知的检查规则: {module_name}")
            checks.append(check_class(severity=severity))
        return Checker(checks, extensions=extensions)

    @property
    def checks(self) -> List[Check]:
        return self._checks

    @property
    def extensions(self) -> Tuple[str, ...]:
        return self._extensions

    # ------------------------------ 遍历抽象语法树 ------------------------------

    def walk(self, root: ast.CompilationUnitTree, collector: MessageCollector) -> List[LocalizedMessage]:
        """遍历抽象语法树，将节点分发给检查规则，返回收集到的消息"""
        for check in self._checks:
            check.set_collector(collector)
            check.begin_tree(root)
        self._walk_tree(root)
        for check in self._checks:
            check.finish_tree(root)
        return collector.messages

    def _walk_tree(self, tree: ast.Tree) -> None:
        """深度优先遍历节点"""
        checks = self._dispatch.get(tree.kind, [])
        for check in checks:
            check.visit_tree(tree)
        for child in tree.children():
            self._walk_tree(child)
        for check in checks:
            check.leave_tree(tree)

    # ------------------------------ 检查源代码 ------------------------------

    def process(self, code: str, file_name: Optional[str] = None) -> List[LocalizedMessage]:
        """检查 Java 源代码，返回按行号、列号排序的消息

        Examples
        --------
        >>> messages = Checker.from_config(["ModifierOrder"]).process("static public int a;")
        >>> [(message.line, message.column, message.args) for message in messages]
        [(1, 8, ('public',))]
        """
        root = JavaParser(LexicalFSM(code), file_name=file_name).parse_compilation_unit()
        return self.walk(root, MessageCollector(file_name))

    def process_file(self, file_path: str, encoding: str = "UTF-8") -> List[LocalizedMessage]:
        """检查 Java 文件"""
        LOGGER.debug(f"开始检查 Java 文件: {file_path}")
        with open(file_path, "r", encoding=encoding) as file:
            code = file.read()
        return self.process(code, file_name=file_path)

    def process_directory(self, dir_path: str, encoding: str = "UTF-8") -> List[LocalizedMessage]:
        """检查目录中的所有 Java 文件

        无法解析的文件会生成一条 general.exception 消息，并继续检查其他文件。
        """
        messages: List[LocalizedMessage] = []
        for file_path in self.iter_files(dir_path):
            try:
                messages.extend(self.process_file(file_path, encoding=encoding))
            except (JavaLexicalError, JavaSyntaxError, UnicodeDecodeError) as e:
                LOGGER.error(f"解析 Java 文件失败: {file_path}, error={e}")
                line, column = (e.line, e.column) if isinstance(e, JavaLexicalError) else (1, 1)
                messages.append(LocalizedMessage(
                    file_name=file_path,
                    line=line,
                    column=column,
                    key="general.exception",
                    args=(str(e),),
                    check_name=self.__class__.__name__,
                    severity=SeverityLevel.ERROR
                ))
        return messages

    def iter_files(self, dir_path: str) -> List[str]:
        """按路径排序返回目录中所有需要检查的文件"""
        file_path_list = []
        for sub_dir_path, _, file_name_list in os.walk(dir_path):
            for file_name in file_name_list:
                if file_name.endswith(self._extensions):
                    file_path_list.append(os.path.join(sub_dir_path, file_name))
        return sorted(file_path_list)
