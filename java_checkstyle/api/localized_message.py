"""
检查结果的消息
"""

import dataclasses
import enum
from typing import List, Optional, Tuple

from java_checkstyle.api.messages import MESSAGES

__all__ = [
    "SeverityLevel",
    "LocalizedMessage",
    "MessageCollector",
]


class SeverityLevel(enum.Enum):
    """消息的严重级别"""

    IGNORE = "ignore"
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


@dataclasses.dataclass(slots=True, frozen=True)
class LocalizedMessage:
    """检查规则报告的一条消息"""

    file_name: Optional[str] = dataclasses.field(kw_only=True)
    line: int = dataclasses.field(kw_only=True)  # 行号（从 1 开始）
    column: int = dataclasses.field(kw_only=True)  # 列号（从 1 开始）
    key: str = dataclasses.field(kw_only=True)  # 消息标识符
    args: Tuple[str, ...] = dataclasses.field(kw_only=True)  # 消息参数
    check_name: str = dataclasses.field(kw_only=True)  # 报告消息的检查规则名称
    severity: SeverityLevel = dataclasses.field(kw_only=True, default=SeverityLevel.ERROR)

    def get_message(self) -> str:
        """根据消息模板生成消息文本

        Examples
        --------
        >>> LocalizedMessage(file_name=None, line=1, column=8, key="mod.order", args=("public",),
        ...                  check_name="ModifierOrder").get_message()
        "'public' modifier out of order with the JLS suggestions."
        """
        template = MESSAGES.get(self.key)
        if template is None:
            return self.key
        return template.format(*self.args)

    def sort_key(self) -> Tuple[str, int, int]:
        return self.file_name or "", self.line, self.column

    def __repr__(self) -> str:
        return f"<LocalizedMessage {self.file_name}:{self.line}:{self.column} {self.key}{list(self.args)}>"


class MessageCollector:
    """收集一个文件中检查规则报告的消息"""

    __slots__ = ("_file_name", "_messages")

    def __init__(self, file_name: Optional[str] = None):
        self._file_name = file_name
        self._messages: List[LocalizedMessage] = []

    @property
    def file_name(self) -> Optional[str]:
        return self._file_name

    @property
    def messages(self) -> List[LocalizedMessage]:
        """按行号、列号排序的消息列表"""
        return sorted(self._messages, key=LocalizedMessage.sort_key)

    def add(self, message: LocalizedMessage) -> None:
        self._messages.append(message)

    def __len__(self) -> int:
        return len(self._messages)
