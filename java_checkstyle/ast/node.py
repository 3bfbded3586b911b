import dataclasses
from typing import List, Optional

from java_checkstyle.ast.base import Tree
from java_checkstyle.ast.generate_utils import Separator, generate_tree_list
from java_checkstyle.ast.kind import TreeKind

__all__ = [
    "AnnotationTree",  # 注解
    "CompilationUnitTree",  # 编译单元
    "ModifierTree",  # 修饰符子句中的一个修饰符
    "ModifiersTree",  # 用于声明表达式的修饰符，包括注解
]


@dataclasses.dataclass(slots=True)
class ModifierTree(Tree):
    """修饰符子句中的一个修饰符

    样例：
    - public
    - non-sealed
    """

    text: str = dataclasses.field(kw_only=True)  # 修饰符的文本
    line: int = dataclasses.field(kw_only=True)  # 所在行号（从 1 开始）
    column: int = dataclasses.field(kw_only=True)  # 所在列号（从 1 开始）

    @staticmethod
    def create(text: str, line: int, column: int,
               source: Optional[str], start_pos: Optional[int], end_pos: Optional[int]) -> "ModifierTree":
        return ModifierTree(
            kind=TreeKind.MODIFIER,
            text=text,
            line=line,
            column=column,
            source=source,
            start_pos=start_pos,
            end_pos=end_pos
        )

    @staticmethod
    def mock(text: str, line: int = 1, column: int = 1) -> "ModifierTree":
        """构造不对应源代码位置的修饰符节点"""
        return ModifierTree.create(text=text, line=line, column=column, source=None, start_pos=None, end_pos=None)

    def generate(self) -> str:
        return self.text


@dataclasses.dataclass(slots=True)
class AnnotationTree(Tree):
    """注解

    样例：
    - @Override
    - @SuppressWarnings("unchecked")
    """

    name: str = dataclasses.field(kw_only=True)  # 注解的（可能包含包名的）类型名称
    line: int = dataclasses.field(kw_only=True)
    column: int = dataclasses.field(kw_only=True)

    @staticmethod
    def create(name: str, line: int, column: int,
               source: Optional[str], start_pos: Optional[int], end_pos: Optional[int]) -> "AnnotationTree":
        return AnnotationTree(
            kind=TreeKind.ANNOTATION,
            name=name,
            line=line,
            column=column,
            source=source,
            start_pos=start_pos,
            end_pos=end_pos
        )

    def generate(self) -> str:
        if self.source is not None:
            return self.source
        return f"@{self.name}"


@dataclasses.dataclass(slots=True)
class ModifiersTree(Tree):
    """用于声明表达式的修饰符，包括注解

    A tree node for the modifiers, including annotations, for a declaration.

    样例：
    - flags
    - annotations flags
    - flags annotations flags
    """

    flags: List[ModifierTree] = dataclasses.field(kw_only=True)
    annotations: List[AnnotationTree] = dataclasses.field(kw_only=True)

    @staticmethod
    def create(flags: List[ModifierTree], annotations: List[AnnotationTree],
               source: Optional[str], start_pos: Optional[int], end_pos: Optional[int]) -> "ModifiersTree":
        return ModifiersTree(
            kind=TreeKind.MODIFIERS,
            flags=flags,
            annotations=annotations,
            source=source,
            start_pos=start_pos,
            end_pos=end_pos
        )

    @staticmethod
    def mock(flags: List[ModifierTree]) -> "ModifiersTree":
        """构造只包含修饰符、不对应源代码位置的修饰符子句节点"""
        return ModifiersTree.create(flags=flags, annotations=[], source=None, start_pos=None, end_pos=None)

    def children(self) -> List[Tree]:
        """按源代码中的顺序返回修饰符和注解；没有位置信息的节点保持修饰符在前"""
        children: List[Tree] = [*self.flags, *self.annotations]
        if all(child.start_pos is not None for child in children):
            children.sort(key=lambda child: child.start_pos)
        return children

    def generate(self) -> str:
        return generate_tree_list(self.children(), Separator.SPACE)


@dataclasses.dataclass(slots=True)
class CompilationUnitTree(Tree):
    """编译单元，即一个 Java 文件

    当前只保留文件中的修饰符子句，按源代码中的顺序排列。
    """

    file_name: Optional[str] = dataclasses.field(kw_only=True)
    modifiers: List[ModifiersTree] = dataclasses.field(kw_only=True)

    @staticmethod
    def create(file_name: Optional[str], modifiers: List[ModifiersTree],
               source: Optional[str], start_pos: Optional[int], end_pos: Optional[int]) -> "CompilationUnitTree":
        return CompilationUnitTree(
            kind=TreeKind.COMPILATION_UNIT,
            file_name=file_name,
            modifiers=modifiers,
            source=source,
            start_pos=start_pos,
            end_pos=end_pos
        )

    def children(self) -> List[Tree]:
        return list(self.modifiers)

    def generate(self) -> str:
        return generate_tree_list(self.modifiers, Separator.LINEBREAK)
